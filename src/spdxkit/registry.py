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

"""Process-wide license registry.

The default :class:`~spdxkit.catalog.Catalog` is built lazily, exactly
once, on the first lookup.  The build runs under a lock; afterwards the
catalog is immutable and every read is lock-free.  Which corpus is used
is decided by :func:`spdxkit.config.resolve_config` at that moment
(``SPDXKIT_DATA_DIR`` or the bundled data).

Unknown identifiers are an expected outcome: the ``lookup_*`` functions
return ``None``.  The ``parse_*`` variants raise
:class:`~spdxkit.errors.SpdxIdNotFoundError` instead, for callers that
treat an unknown id as an error.

Usage::

    from spdxkit import licenses, lookup_license

    lookup_license('Apache-2.0').name  # 'Apache License 2.0'
    lookup_license('apache-2.0')  # None
    licenses.Bsd3Clause.is_osi_approved  # True
"""

from __future__ import annotations

import threading

from spdxkit._types import License, LicenseException
from spdxkit.catalog import Catalog
from spdxkit.config import resolve_config
from spdxkit.errors import SpdxIdNotFoundError
from spdxkit.logging import get_logger

__all__ = [
    'all_exceptions',
    'all_licenses',
    'default_catalog',
    'exceptions',
    'licenses',
    'lookup_exception',
    'lookup_license',
    'parse_exception',
    'parse_license',
    'reset_default_catalog',
]

log = get_logger('spdxkit.registry')

_lock = threading.Lock()
_catalog: Catalog | None = None


def default_catalog() -> Catalog:
    """Return the process-wide catalog, building it on first use."""
    global _catalog  # noqa: PLW0603
    catalog = _catalog
    if catalog is None:
        with _lock:
            if _catalog is None:
                config = resolve_config()
                _catalog = config.build()
                log.debug(
                    'default_catalog_loaded',
                    bundled=config.uses_bundled_data,
                    licenses=len(_catalog.licenses),
                    exceptions=len(_catalog.exceptions),
                )
            catalog = _catalog
    return catalog


def reset_default_catalog() -> None:
    """Drop the cached catalog so the next lookup rebuilds it.

    Only meant for tests that change ``SPDXKIT_DATA_DIR``.
    """
    global _catalog  # noqa: PLW0603
    with _lock:
        _catalog = None


def lookup_license(license_id: str) -> License | None:
    """Return the license with exactly this id, or ``None``."""
    return default_catalog().license(license_id)


def lookup_exception(exception_id: str) -> LicenseException | None:
    """Return the exception with exactly this id, or ``None``."""
    return default_catalog().exception(exception_id)


def parse_license(license_id: str) -> License:
    """Like :func:`lookup_license`, but raise for an unknown id.

    Raises:
        SpdxIdNotFoundError: If no license has this id.
    """
    found = lookup_license(license_id)
    if found is None:
        raise SpdxIdNotFoundError(license_id)
    return found


def parse_exception(exception_id: str) -> LicenseException:
    """Like :func:`lookup_exception`, but raise for an unknown id.

    Raises:
        SpdxIdNotFoundError: If no exception has this id.
    """
    found = lookup_exception(exception_id)
    if found is None:
        raise SpdxIdNotFoundError(exception_id)
    return found


def all_licenses() -> tuple[License, ...]:
    """Return every license, sorted by id."""
    return default_catalog().licenses


def all_exceptions() -> tuple[LicenseException, ...]:
    """Return every exception, sorted by id."""
    return default_catalog().exceptions


class _SymbolNamespace:
    """Attribute access to catalog entries by symbolic name."""

    def __init__(self, kind: str) -> None:
        self._kind = kind

    def _symbols(self) -> dict[str, License | LicenseException]:
        catalog = default_catalog()
        if self._kind == 'license':
            return dict(catalog.license_symbols)
        return dict(catalog.exception_symbols)

    def __getattr__(self, symbol: str) -> License | LicenseException:
        if symbol.startswith('_'):
            raise AttributeError(symbol)
        catalog = default_catalog()
        if self._kind == 'license':
            entry: License | LicenseException | None = catalog.license_by_symbol(symbol)
        else:
            entry = catalog.exception_by_symbol(symbol)
        if entry is None:
            raise AttributeError(f'no SPDX {self._kind} with symbol {symbol!r}')
        return entry

    def __dir__(self) -> list[str]:
        return sorted(self._symbols())

    def __repr__(self) -> str:
        return f'<spdxkit {self._kind}s>'


#: ``licenses.Bsd3Clause``, ``licenses.Bsd0``, ``licenses.Gpl30Only`` ...
licenses = _SymbolNamespace('license')

#: ``exceptions.Exception389``, ``exceptions.ClasspathException20`` ...
exceptions = _SymbolNamespace('exception')
