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

"""Render a catalog as a static Python module.

For consumers that would rather not parse JSON at import time, the
whole catalog can be frozen into a generated module.  Each entry becomes
a module-level constant named by its symbol, and the module exposes the
same tables the runtime loader builds::

    Mit = _License(id='MIT', name='MIT License', ...)
    ...
    LICENSES = {'0BSD': Bsd0, ..., 'MIT': Mit, ...}
    EXCEPTIONS = {...}
    CATALOG = _Catalog.from_entries(LICENSES.values(), EXCEPTIONS.values())

Output is deterministic: entries are emitted in id order and every value
is written with :func:`repr`, so the same catalog always renders to the
same text.
"""

from __future__ import annotations

from pathlib import Path

from spdxkit._types import License, LicenseException
from spdxkit.catalog import Catalog
from spdxkit.logging import get_logger

__all__ = [
    'GENERATED_HEADER',
    'render_catalog_module',
    'write_catalog_module',
]

log = get_logger('spdxkit.codegen')

GENERATED_HEADER = "# This file is generated from SPDX license data; don't edit it manually."


def _license_constant(entry: License) -> list[str]:
    return [
        f'{entry.symbol} = _License(',
        f'    id={entry.id!r},',
        f'    name={entry.name!r},',
        f'    text={entry.text!r},',
        f'    symbol={entry.symbol!r},',
        f'    header={entry.header!r},',
        f'    comments={entry.comments!r},',
        f'    see_also={entry.see_also!r},',
        f'    is_osi_approved={entry.is_osi_approved!r},',
        f'    is_fsf_libre={entry.is_fsf_libre!r},',
        f'    is_deprecated={entry.is_deprecated!r},',
        ')',
        '',
    ]


def _exception_constant(entry: LicenseException) -> list[str]:
    return [
        f'{entry.symbol} = _LicenseException(',
        f'    id={entry.id!r},',
        f'    name={entry.name!r},',
        f'    text={entry.text!r},',
        f'    symbol={entry.symbol!r},',
        f'    comments={entry.comments!r},',
        f'    see_also={entry.see_also!r},',
        f'    is_deprecated={entry.is_deprecated!r},',
        ')',
        '',
    ]


def render_catalog_module(catalog: Catalog) -> str:
    """Return the source of a module that reproduces *catalog*.

    Every entry must have a symbol; entries built by
    :mod:`spdxkit.catalog` always do.  Licenses and exceptions share the
    module namespace, so their symbols must not overlap.

    Raises:
        ValueError: If an entry has no symbolic name, or a license and
            an exception share one.
    """
    missing = [e.id for e in (*catalog.licenses, *catalog.exceptions) if not e.symbol]
    if missing:
        raise ValueError(f'Entries without a symbolic name: {", ".join(missing)}')
    clashes = sorted(set(catalog.license_symbols) & set(catalog.exception_symbols))
    if clashes:
        raise ValueError(f'Symbols used by both a license and an exception: {", ".join(clashes)}')

    lines = [
        GENERATED_HEADER,
        '',
        '"""SPDX licenses and exceptions as Python constants."""',
        '',
        'from spdxkit._types import License as _License',
        'from spdxkit._types import LicenseException as _LicenseException',
        'from spdxkit.catalog import Catalog as _Catalog',
        '',
        '# ── Licenses ' + '─' * 58,
        '',
    ]
    for entry in catalog.licenses:
        lines.extend(_license_constant(entry))
    lines += ['# ── Exceptions ' + '─' * 56, '']
    for entry in catalog.exceptions:
        lines.extend(_exception_constant(entry))

    lines.append('LICENSES = {')
    lines.extend(f'    {e.id!r}: {e.symbol},' for e in catalog.licenses)
    lines += ['}', '', 'EXCEPTIONS = {']
    lines.extend(f'    {e.id!r}: {e.symbol},' for e in catalog.exceptions)
    lines += [
        '}',
        '',
        'CATALOG = _Catalog.from_entries(LICENSES.values(), EXCEPTIONS.values())',
        '',
    ]
    return '\n'.join(lines)


def write_catalog_module(catalog: Catalog, path: Path) -> Path:
    """Render *catalog* and write it to *path* as UTF-8.

    Parent directories are created as needed.

    Returns:
        The path written.
    """
    source = render_catalog_module(catalog)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding='utf-8')
    log.info(
        'codegen_written',
        path=str(path),
        licenses=len(catalog.licenses),
        exceptions=len(catalog.exceptions),
    )
    return path
