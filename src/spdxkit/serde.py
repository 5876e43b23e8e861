# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Pydantic integration: catalog entries serialise as their bare id.

A license is written as its SPDX id and read back through the default
catalog, so ``"MIT"`` round-trips to the very same :class:`License`
object.  The annotated types can be used directly as model fields::

    from pydantic import BaseModel
    from spdxkit.serde import SpdxLicense


    class Package(BaseModel):
        name: str
        license: SpdxLicense


    Package(name='x', license='MIT').model_dump_json()
    # '{"name":"x","license":"MIT"}'

Decoding an id the catalog does not know fails with a
:class:`pydantic.ValidationError` whose message contains
``SPDX id not found``.  A non-string value fails with pydantic's
``string_type`` error instead.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, TypeAdapter
from pydantic_core import PydanticCustomError

from spdxkit._types import License, LicenseException
from spdxkit.errors import ID_NOT_FOUND_MESSAGE
from spdxkit.registry import lookup_exception, lookup_license

__all__ = [
    'SpdxException',
    'SpdxLicense',
    'exception_from_json',
    'exception_to_json',
    'license_from_json',
    'license_to_json',
]


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError('string_type', 'Input should be a valid string')
    return value


def _validate_license(value: object) -> License:
    if isinstance(value, License):
        return value
    found = lookup_license(_require_str(value))
    if found is None:
        raise ValueError(ID_NOT_FOUND_MESSAGE)
    return found


def _validate_exception(value: object) -> LicenseException:
    if isinstance(value, LicenseException):
        return value
    found = lookup_exception(_require_str(value))
    if found is None:
        raise ValueError(ID_NOT_FOUND_MESSAGE)
    return found


def _entry_id(entry: License | LicenseException) -> str:
    return entry.id


SpdxLicense = Annotated[
    License,
    PlainValidator(_validate_license),
    PlainSerializer(_entry_id, return_type=str),
]

SpdxException = Annotated[
    LicenseException,
    PlainValidator(_validate_exception),
    PlainSerializer(_entry_id, return_type=str),
]

_LICENSE_ADAPTER: TypeAdapter[License] = TypeAdapter(SpdxLicense)
_EXCEPTION_ADAPTER: TypeAdapter[LicenseException] = TypeAdapter(SpdxException)


def license_to_json(entry: License) -> str:
    """Encode a license as a JSON string literal, e.g. ``'"MIT"'``."""
    return _LICENSE_ADAPTER.dump_json(entry).decode()


def license_from_json(data: str | bytes) -> License:
    """Decode a JSON string literal back into a catalog license.

    Raises:
        pydantic.ValidationError: If *data* is not valid JSON, not a
            string, or not a known license id.
    """
    return _LICENSE_ADAPTER.validate_json(data)


def exception_to_json(entry: LicenseException) -> str:
    """Encode an exception as a JSON string literal."""
    return _EXCEPTION_ADAPTER.dump_json(entry).decode()


def exception_from_json(data: str | bytes) -> LicenseException:
    """Decode a JSON string literal back into a catalog exception.

    Raises:
        pydantic.ValidationError: If *data* is not valid JSON, not a
            string, or not a known exception id.
    """
    return _EXCEPTION_ADAPTER.validate_json(data)
