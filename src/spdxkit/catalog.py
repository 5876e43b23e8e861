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

r"""Catalog builder — turns SPDX JSON records into immutable lookup tables.

The input is the ``json/details`` and ``json/exceptions`` directories of
an `SPDX license-list-data <https://github.com/spdx/license-list-data>`_
checkout (or the trimmed copy bundled under ``spdxkit/data``): one JSON
object per license or exception.

Data Flow::

    ┌─────────────────┐   sorted    ┌──────────────────┐   validate  ┌───────────┐
    │ details/*.json  │───────────→│ load_license_    │───────────→│           │
    │ (one per id)    │  filenames  │ record()         │  + symbol   │  Catalog  │
    └─────────────────┘             └──────────────────┘             │ (frozen,  │
    ┌─────────────────┐             ┌──────────────────┐             │  indexed) │
    │exceptions/*.json│───────────→│ load_exception_  │───────────→│           │
    └─────────────────┘             │ record()         │             └───────────┘
                                    └──────────────────┘

Build rules:

- Every ``*.json`` file is read exactly once, in sorted filename order,
  so the result never depends on directory iteration order.
- A record that is not a JSON object, misses a required field, or has
  a field of the wrong type is an error.  Errors are collected across
  the whole corpus and raised together as one :class:`CatalogDataError`;
  there is no partially built catalog.
- Two records with the same id are an error naming both files.  Two
  ids that map to the same symbolic name are an error naming both ids.
- Optional booleans (``isOsiApproved``, ``isFsfLibre``) default to
  ``False``; ``seeAlso`` defaults to an empty tuple.

Usage::

    from spdxkit.catalog import build_catalog, load_license_list

    catalog = load_license_list(Path('license-list-data'))
    catalog.license('MIT').name  # 'MIT License'
    catalog.license('mit')  # None, ids are case-sensitive
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, TypeVar

from spdxkit._types import License, LicenseException
from spdxkit.errors import CatalogDataError
from spdxkit.logging import get_logger
from spdxkit.naming import exception_symbol, license_symbol

__all__ = [
    'BUNDLED_DATA_DIR',
    'Catalog',
    'build_catalog',
    'load_exception_record',
    'load_license_list',
    'load_license_record',
]

log = get_logger('spdxkit.catalog')

#: Root of the bundled corpus, laid out like license-list-data.
BUNDLED_DATA_DIR: Final[Path] = Path(__file__).resolve().parent / 'data'

# ── Record schemas ───────────────────────────────────────────────────

_LICENSE_REQUIRED: Final[dict[str, type]] = {
    'name': str,
    'licenseId': str,
    'licenseText': str,
    'isDeprecatedLicenseId': bool,
}

_LICENSE_OPTIONAL: Final[dict[str, type]] = {
    'standardLicenseHeader': str,
    'licenseComments': str,
    'seeAlso': list,
    'isOsiApproved': bool,
    'isFsfLibre': bool,
}

_EXCEPTION_REQUIRED: Final[dict[str, type]] = {
    'name': str,
    'licenseExceptionId': str,
    'licenseExceptionText': str,
    'isDeprecatedLicenseId': bool,
}

_EXCEPTION_OPTIONAL: Final[dict[str, type]] = {
    'licenseComments': str,
    'seeAlso': list,
}


def _validate(
    data: object,
    where: str,
    id_key: str,
    required: Mapping[str, type],
    optional: Mapping[str, type],
) -> list[str]:
    """Return every schema violation of a single record."""
    if not isinstance(data, dict):
        return [f'{where}: expected a JSON object, got {type(data).__name__}']
    errors: list[str] = []
    for key, expected in required.items():
        if key not in data:
            errors.append(f'{where}: missing required field "{key}"')
        elif not isinstance(data[key], expected):
            errors.append(f'{where}.{key}: expected {expected.__name__}, got {type(data[key]).__name__}')
    for key, expected in optional.items():
        value = data.get(key)
        if value is not None and not isinstance(value, expected):
            errors.append(f'{where}.{key}: expected {expected.__name__}, got {type(value).__name__}')
    see_also = data.get('seeAlso')
    if isinstance(see_also, list) and not all(isinstance(s, str) for s in see_also):
        errors.append(f'{where}.seeAlso: all entries must be strings')
    if isinstance(data.get(id_key), str) and not data[id_key]:
        errors.append(f'{where}.{id_key}: must not be empty')
    return errors


def _read_json(path: Path) -> Any:  # noqa: ANN401
    try:
        return json.loads(path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        raise CatalogDataError([f'{path.name}: cannot read JSON record: {exc}']) from exc


# ── Single-record loaders ────────────────────────────────────────────


def load_license_record(path: Path) -> License:
    """Parse and validate one ``details/*.json`` license record.

    Args:
        path: Path to the JSON file.

    Returns:
        The fully populated :class:`License`.

    Raises:
        CatalogDataError: If the file is unreadable or the record is
            malformed.
    """
    data = _read_json(path)
    errors = _validate(data, path.name, 'licenseId', _LICENSE_REQUIRED, _LICENSE_OPTIONAL)
    if errors:
        raise CatalogDataError(errors)
    license_id = data['licenseId']
    return License(
        id=license_id,
        name=data['name'],
        text=data['licenseText'],
        symbol=license_symbol(license_id),
        header=data.get('standardLicenseHeader'),
        comments=data.get('licenseComments'),
        see_also=tuple(data.get('seeAlso') or ()),
        is_osi_approved=bool(data.get('isOsiApproved') or False),
        is_fsf_libre=bool(data.get('isFsfLibre') or False),
        is_deprecated=data['isDeprecatedLicenseId'],
    )


def load_exception_record(path: Path) -> LicenseException:
    """Parse and validate one ``exceptions/*.json`` exception record.

    Raises:
        CatalogDataError: If the file is unreadable or the record is
            malformed.
    """
    data = _read_json(path)
    errors = _validate(data, path.name, 'licenseExceptionId', _EXCEPTION_REQUIRED, _EXCEPTION_OPTIONAL)
    if errors:
        raise CatalogDataError(errors)
    exception_id = data['licenseExceptionId']
    return LicenseException(
        id=exception_id,
        name=data['name'],
        text=data['licenseExceptionText'],
        symbol=exception_symbol(exception_id),
        comments=data.get('licenseComments'),
        see_also=tuple(data.get('seeAlso') or ()),
        is_deprecated=data['isDeprecatedLicenseId'],
    )


# ── Catalog ──────────────────────────────────────────────────────────

_E = TypeVar('_E', License, LicenseException)


def _index(entries: Iterable[_E], kind: str) -> tuple[dict[str, _E], dict[str, _E], list[str]]:
    """Index entries by id and by symbol, reporting collisions."""
    by_id: dict[str, _E] = {}
    by_symbol: dict[str, _E] = {}
    errors: list[str] = []
    for entry in entries:
        if entry.id in by_id:
            errors.append(f'duplicate {kind} id {entry.id!r}')
            continue
        other = by_symbol.get(entry.symbol)
        if entry.symbol and other is not None:
            errors.append(f'{kind} ids {other.id!r} and {entry.id!r} share the symbol {entry.symbol!r}')
            continue
        by_id[entry.id] = entry
        if entry.symbol:
            by_symbol[entry.symbol] = entry
    return by_id, by_symbol, errors


@dataclass(frozen=True)
class Catalog:
    """Immutable license and exception tables.

    Entries are kept sorted by id.  Point lookups go through read-only
    dict indexes, never a scan.  Instances are safe to share across
    threads without locking.

    Attributes:
        licenses: All licenses, sorted by id.
        exceptions: All exceptions, sorted by id.
    """

    licenses: tuple[License, ...] = ()
    exceptions: tuple[LicenseException, ...] = ()
    _licenses_by_id: Mapping[str, License] = field(init=False, repr=False, compare=False)
    _exceptions_by_id: Mapping[str, LicenseException] = field(init=False, repr=False, compare=False)
    _licenses_by_symbol: Mapping[str, License] = field(init=False, repr=False, compare=False)
    _exceptions_by_symbol: Mapping[str, LicenseException] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Sort the entries and build the lookup indexes."""
        licenses = tuple(sorted(self.licenses, key=lambda e: e.id))
        exceptions = tuple(sorted(self.exceptions, key=lambda e: e.id))
        lic_ids, lic_symbols, errors = _index(licenses, 'license')
        exc_ids, exc_symbols, exc_errors = _index(exceptions, 'exception')
        errors.extend(exc_errors)
        if errors:
            raise CatalogDataError(errors)
        object.__setattr__(self, 'licenses', licenses)
        object.__setattr__(self, 'exceptions', exceptions)
        object.__setattr__(self, '_licenses_by_id', MappingProxyType(lic_ids))
        object.__setattr__(self, '_exceptions_by_id', MappingProxyType(exc_ids))
        object.__setattr__(self, '_licenses_by_symbol', MappingProxyType(lic_symbols))
        object.__setattr__(self, '_exceptions_by_symbol', MappingProxyType(exc_symbols))

    @classmethod
    def from_entries(
        cls,
        licenses: Iterable[License] = (),
        exceptions: Iterable[LicenseException] = (),
    ) -> Catalog:
        """Build a catalog from already constructed entries.

        Raises:
            CatalogDataError: On duplicate ids or colliding symbols.
        """
        return cls(licenses=tuple(licenses), exceptions=tuple(exceptions))

    def license(self, license_id: str) -> License | None:
        """Return the license with exactly this id, or ``None``."""
        return self._licenses_by_id.get(license_id)

    def exception(self, exception_id: str) -> LicenseException | None:
        """Return the exception with exactly this id, or ``None``."""
        return self._exceptions_by_id.get(exception_id)

    def license_by_symbol(self, symbol: str) -> License | None:
        """Return the license whose symbolic name is *symbol*."""
        return self._licenses_by_symbol.get(symbol)

    def exception_by_symbol(self, symbol: str) -> LicenseException | None:
        """Return the exception whose symbolic name is *symbol*."""
        return self._exceptions_by_symbol.get(symbol)

    @property
    def license_ids(self) -> Mapping[str, License]:
        """Read-only id → license mapping."""
        return self._licenses_by_id

    @property
    def exception_ids(self) -> Mapping[str, LicenseException]:
        """Read-only id → exception mapping."""
        return self._exceptions_by_id

    @property
    def license_symbols(self) -> Mapping[str, License]:
        """Read-only symbol → license mapping."""
        return self._licenses_by_symbol

    @property
    def exception_symbols(self) -> Mapping[str, LicenseException]:
        """Read-only symbol → exception mapping."""
        return self._exceptions_by_symbol


# ── Directory build ──────────────────────────────────────────────────


def _load_dir(
    directory: Path,
    loader: Callable[[Path], _E],
    kind: str,
) -> tuple[list[_E], list[str]]:
    """Load every record of *directory* in sorted filename order."""
    if not directory.is_dir():
        return [], [f'{directory}: {kind} directory does not exist']
    entries: list[_E] = []
    errors: list[str] = []
    seen: dict[str, str] = {}
    for path in sorted(directory.glob('*.json')):
        try:
            entry = loader(path)
        except CatalogDataError as exc:
            log.warning('catalog_record_invalid', path=str(path), errors=len(exc.errors))
            errors.extend(exc.errors)
            continue
        first = seen.get(entry.id)
        if first is not None:
            errors.append(f'{path.name}: duplicate {kind} id {entry.id!r} (first defined in {first})')
            continue
        seen[entry.id] = path.name
        entries.append(entry)
    return entries, errors


def build_catalog(
    licenses_dir: Path,
    exceptions_dir: Path | None = None,
) -> Catalog:
    """Build a :class:`Catalog` from directories of JSON records.

    Building is deterministic: the same input always produces an equal
    catalog.

    Args:
        licenses_dir: Directory of per-license JSON files.
        exceptions_dir: Directory of per-exception JSON files.  ``None``
            builds a catalog without exceptions.

    Returns:
        The fully validated catalog.

    Raises:
        CatalogDataError: If any record is malformed or duplicated.
            All problems are reported at once.
    """
    licenses, errors = _load_dir(licenses_dir, load_license_record, 'license')
    exceptions: list[LicenseException] = []
    if exceptions_dir is not None:
        exceptions, exc_errors = _load_dir(exceptions_dir, load_exception_record, 'exception')
        errors.extend(exc_errors)
    if errors:
        raise CatalogDataError(errors)
    catalog = Catalog.from_entries(licenses, exceptions)
    log.debug(
        'catalog_built',
        licenses=len(catalog.licenses),
        exceptions=len(catalog.exceptions),
        licenses_dir=str(licenses_dir),
    )
    return catalog


def load_license_list(root: Path = BUNDLED_DATA_DIR) -> Catalog:
    """Build a catalog from a license-list-data style root directory.

    Reads ``<root>/json/details`` and ``<root>/json/exceptions``.
    """
    return build_catalog(root / 'json' / 'details', root / 'json' / 'exceptions')
