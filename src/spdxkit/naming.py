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

"""Python-safe symbolic names for SPDX identifiers.

Every catalog entry gets a symbol that is a valid Python identifier,
used for attribute access (``spdxkit.licenses.Bsd3Clause``) and as the
constant name in generated modules.

Derivation::

    GPL-3.0-only   ─┐ '-' '.' → '_'      GPL_3_0_only   ─┐ PascalCase
    GPL-2.0+       ─┤ '+'     → '_plus'  GPL_2_0_plus   ─┤ per word
    BSD-3-Clause   ─┘                    BSD_3_Clause   ─┘
                                                          ↓
                                 Gpl30Only, Gpl20Plus, Bsd3Clause

Two identifiers start with a digit and are mapped by hand::

    0BSD           → Bsd0
    389-exception  → Exception389

Any other identifier whose symbol would still start with a digit is
prefixed with ``License`` or ``Exception``.
"""

from __future__ import annotations

import re
from typing import Final

__all__ = [
    'exception_symbol',
    'license_symbol',
    'pascal_case',
]

_SPECIAL_LICENSE_SYMBOLS: Final[dict[str, str]] = {
    '0BSD': 'Bsd0',
}

_SPECIAL_EXCEPTION_SYMBOLS: Final[dict[str, str]] = {
    '389-exception': 'Exception389',
}

_UNSAFE_RE: Final[re.Pattern[str]] = re.compile(r'[^0-9A-Za-z_]')


def pascal_case(ident: str) -> str:
    """Join underscore-separated words, capitalising each one.

    >>> pascal_case('BSD_3_Clause')
    'Bsd3Clause'
    """
    return ''.join(word[0].upper() + word[1:].lower() for word in ident.split('_') if word)


def _symbol(ident: str, prefix: str) -> str:
    symbol = pascal_case(_UNSAFE_RE.sub('_', ident))
    if not symbol or symbol[0].isdigit():
        symbol = prefix + symbol
    return symbol


def license_symbol(license_id: str) -> str:
    """Return the symbolic name for a license identifier."""
    special = _SPECIAL_LICENSE_SYMBOLS.get(license_id)
    if special is not None:
        return special
    ident = license_id.replace('-', '_').replace('.', '_').replace('+', '_plus')
    return _symbol(ident, 'License')


def exception_symbol(exception_id: str) -> str:
    """Return the symbolic name for a license exception identifier."""
    special = _SPECIAL_EXCEPTION_SYMBOLS.get(exception_id)
    if special is not None:
        return special
    ident = exception_id.replace('-', '_').replace('.', '_')
    return _symbol(ident, 'Exception')
