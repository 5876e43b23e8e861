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

"""Exception hierarchy for spdxkit.

Unknown identifiers and unrecognised license text are *not* errors:
lookups return ``None`` for those.  Exceptions are reserved for a
corpus that cannot be turned into a catalog, bad configuration, and
the strict ``parse_*`` helpers.
"""

from __future__ import annotations

__all__ = [
    'CatalogDataError',
    'ConfigError',
    'ID_NOT_FOUND_MESSAGE',
    'SpdxIdNotFoundError',
    'SpdxKitError',
]

#: Message used wherever an identifier fails to resolve.
ID_NOT_FOUND_MESSAGE = 'SPDX id not found'


class SpdxKitError(Exception):
    """Base class for all spdxkit errors."""


class CatalogDataError(SpdxKitError):
    """Raised when license or exception records fail validation.

    The build collects every problem it finds before raising, so a
    single run reports the whole list.

    Attributes:
        errors: List of human-readable error strings.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        bullet_list = '\n'.join(f'  - {e}' for e in errors)
        super().__init__(f'License catalog has {len(errors)} validation error(s):\n{bullet_list}')


class SpdxIdNotFoundError(SpdxKitError, LookupError):
    """Raised by the strict ``parse_*`` helpers for an unknown id.

    Attributes:
        id: The identifier that was requested.
    """

    def __init__(self, id: str) -> None:  # noqa: A002
        self.id = id
        super().__init__(ID_NOT_FOUND_MESSAGE)


class ConfigError(SpdxKitError):
    """Raised when ``spdxkit.toml`` or ``[tool.spdxkit]`` is invalid."""
