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

"""SPDX license and exception catalog.

spdxkit answers four questions about SPDX identifiers:

- **What is it?**  Exact-id lookup of licenses and exceptions, with full
  text, header, OSI / FSF status and deprecation flag.
- **What may I do with it?**  Curated rights profiles (permissions,
  conditions, limitations) for well-known licenses.
- **Which license is this file?**  A small ordered marker matcher.
- **How do I store it?**  Pydantic types that serialise an entry as its
  bare id (:mod:`spdxkit.serde`).

Usage::

    import spdxkit

    mit = spdxkit.lookup_license('MIT')
    assert mit is spdxkit.licenses.Mit
    assert spdxkit.lookup_license('mit') is None

    print(spdxkit.classify('MIT').permissions, end='')
    # - May be used for commercial purposes.
    # - May be distributed.
    # - May be modified.
    # - May be used for private purposes.

    spdxkit.from_text(open('LICENSE').read())
"""

__version__ = '0.1.0'

from spdxkit._types import License, LicenseException
from spdxkit.catalog import Catalog, build_catalog, load_license_list
from spdxkit.errors import CatalogDataError, ConfigError, SpdxIdNotFoundError, SpdxKitError
from spdxkit.matcher import from_text, match_license_id
from spdxkit.registry import (
    all_exceptions,
    all_licenses,
    default_catalog,
    exceptions,
    licenses,
    lookup_exception,
    lookup_license,
    parse_exception,
    parse_license,
)
from spdxkit.rights import (
    ClassifiedLicense,
    Conditions,
    CuratedLicense,
    Limitations,
    Permissions,
    RightsProfile,
    classify,
    lookup_ext,
)

__all__ = [
    'Catalog',
    'CatalogDataError',
    'ClassifiedLicense',
    'Conditions',
    'ConfigError',
    'CuratedLicense',
    'License',
    'LicenseException',
    'Limitations',
    'Permissions',
    'RightsProfile',
    'SpdxIdNotFoundError',
    'SpdxKitError',
    'all_exceptions',
    'all_licenses',
    'build_catalog',
    'classify',
    'default_catalog',
    'exceptions',
    'from_text',
    'licenses',
    'load_license_list',
    'lookup_exception',
    'lookup_ext',
    'lookup_license',
    'match_license_id',
    'parse_exception',
    'parse_license',
]
