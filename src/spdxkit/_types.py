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

"""Catalog entry types shared across spdxkit.

This module must have **zero** imports from other ``spdxkit``
modules to avoid circular-import chains.  It is safe to import
from any module in the project.

Both entry kinds are frozen: once the catalog is built nothing can
change them, so they may be shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    'License',
    'LicenseException',
]


@dataclass(frozen=True)
class License:
    """A single SPDX license.

    Attributes:
        id: SPDX short identifier (e.g. ``"MIT"``, ``"GPL-3.0-only"``).
            Corresponds to the *Identifier* column of spdx.org/licenses.
        name: Human-readable full name.
        text: Full license text, verbatim.
        symbol: Python-safe symbolic name derived from :attr:`id`
            (e.g. ``"Bsd3Clause"``).
        header: Standard license header, if the license defines one.
        comments: Free-text annotation from the license list.
        see_also: Related URLs, in source order.
        is_osi_approved: ``True`` if the license is OSI approved.
        is_fsf_libre: ``True`` if the FSF considers the license libre.
        is_deprecated: ``True`` if the identifier is deprecated.
    """

    id: str
    name: str
    text: str = field(repr=False)
    symbol: str = ''
    header: str | None = field(default=None, repr=False)
    comments: str | None = field(default=None, repr=False)
    see_also: tuple[str, ...] = field(default=(), repr=False)
    is_osi_approved: bool = False
    is_fsf_libre: bool = False
    is_deprecated: bool = False

    def __str__(self) -> str:
        """Return the full license name."""
        return self.name


@dataclass(frozen=True)
class LicenseException:
    """A single SPDX license exception (e.g. ``Classpath-exception-2.0``).

    Attributes:
        id: SPDX exception identifier.
        name: Human-readable full name.
        text: Full exception text, verbatim.
        symbol: Python-safe symbolic name derived from :attr:`id`.
        comments: Free-text annotation from the license list.
        see_also: Related URLs, in source order.
        is_deprecated: ``True`` if the identifier is deprecated.
    """

    id: str
    name: str
    text: str = field(repr=False)
    symbol: str = ''
    comments: str | None = field(default=None, repr=False)
    see_also: tuple[str, ...] = field(default=(), repr=False)
    is_deprecated: bool = False

    def __str__(self) -> str:
        """Return the full exception name."""
        return self.name
