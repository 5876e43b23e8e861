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

"""Recognise a license from its text.

The matcher is a short ordered list of marker rules.  A rule matches when
every one of its markers occurs in the text (plain, case-sensitive
substring search, no whitespace normalisation).  The first matching rule
wins, so the order below is part of the behaviour: a text that mentions
both "MIT License" and the GPL v3 title is reported as MIT.

This is a heuristic for whole license files, not a general license
detector.  Anything the rules do not recognise yields ``None``.
"""

from __future__ import annotations

from typing import Final

from spdxkit.rights import ClassifiedLicense, CuratedLicense, lookup_ext

__all__ = [
    'from_text',
    'match_license_id',
]


# Markers that must all occur in the text → SPDX id.  Checked in order.
_RULES: Final[list[tuple[tuple[str, ...], CuratedLicense]]] = [
    (('MIT License',), CuratedLicense.MIT),
    (('Version 2.0', 'Apache License'), CuratedLicense.APACHE_2_0),
    (('Version 3', 'GNU GENERAL PUBLIC LICENSE'), CuratedLicense.GPL_3_0_ONLY),
    (('Version 2.0', 'Mozilla Public License'), CuratedLicense.MPL_2_0),
    (('This is free and unencumbered software released into the public domain.',), CuratedLicense.UNLICENSE),
    (('Version 3', 'GNU LESSER GENERAL PUBLIC LICENSE'), CuratedLicense.LGPL_3_0_ONLY),
    (('Version 3', 'GNU AFFERO GENERAL PUBLIC LICENSE'), CuratedLicense.AGPL_3_0_ONLY),
    (('CC0 1.0 Universal',), CuratedLicense.CC0_1_0),
]


def match_license_id(text: str) -> str | None:
    """Return the SPDX id of the first rule matching ``text``, or ``None``."""
    for markers, curated in _RULES:
        if all(marker in text for marker in markers):
            return curated.value
    return None


def from_text(text: str) -> ClassifiedLicense | None:
    """Identify the license in ``text`` and return it with its profile."""
    license_id = match_license_id(text)
    if license_id is None:
        return None
    return lookup_ext(license_id)
