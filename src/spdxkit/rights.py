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

"""Curated rights profiles for well-known licenses.

A rights profile summarises what a license lets you do, what it asks of
you, and what it disclaims.  Profiles are hand-authored for a closed set
of licenses; nothing is inferred from license text, and a license
outside the set has no profile at all (``None``, never an all-false
profile).

Key Concepts::

    ┌──────────────────┬───────────────────────────────────────────────┐
    │ Concept          │ Plain-English                                 │
    ├──────────────────┼───────────────────────────────────────────────┤
    │ Permissions      │ What you may do: use commercially, modify,    │
    │                  │ distribute, use privately, patent grant.      │
    ├──────────────────┼───────────────────────────────────────────────┤
    │ Conditions       │ What you must do in return: keep notices,     │
    │                  │ share sources, keep the same license.         │
    ├──────────────────┼───────────────────────────────────────────────┤
    │ Limitations      │ What the license disclaims: warranty,         │
    │                  │ liability, trademark or patent rights.        │
    ├──────────────────┼───────────────────────────────────────────────┤
    │ CuratedLicense   │ The closed set of licenses with a profile.    │
    │                  │ Value is the SPDX id.                         │
    └──────────────────┴───────────────────────────────────────────────┘

Each flag set renders as a Markdown-style bullet list, one line per
flag that is set, in field order::

    >>> print(Permissions(commercial_use=True, distribution=True), end='')
    - May be used for commercial purposes.
    - May be distributed.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Final

from spdxkit._types import License
from spdxkit.registry import lookup_license

__all__ = [
    'ClassifiedLicense',
    'Conditions',
    'CuratedLicense',
    'Limitations',
    'Permissions',
    'RightsProfile',
    'classify',
    'lookup_ext',
]


def _render(flags: object, sentences: dict[str, str]) -> str:
    return ''.join(
        f'- {sentences[f.name]}\n' for f in dataclasses.fields(flags) if getattr(flags, f.name)  # type: ignore[arg-type]
    )


_PERMISSION_SENTENCES: Final[dict[str, str]] = {
    'commercial_use': 'May be used for commercial purposes.',
    'distribution': 'May be distributed.',
    'modification': 'May be modified.',
    'patent_rights': 'Provides an express grant of patent rights from contributors.',
    'private_use': 'May be used for private purposes.',
}

_CONDITION_SENTENCES: Final[dict[str, str]] = {
    'disclose_sources': 'Source code must be made available when the software is distributed.',
    'document_changes': 'Changes made to the code must be documented.',
    'license_and_copyright_notice': 'The license and copyright notice must be included with the software.',
    'network_use_is_distribution': (
        'Users who interact with the software via network are given the right to receive a copy of the source code.'
    ),
    'same_license': 'Modifications must be released under the same license.',
}

_LIMITATION_SENTENCES: Final[dict[str, str]] = {
    'no_liability': 'Includes a limitation of liability.',
    'no_trademark_rights': 'Does not grant trademark rights.',
    'no_warranty': 'Does not provide any warranty.',
    'no_patent_rights': 'Does not provide any rights in the patents of contributors.',
}


@dataclass(frozen=True)
class Permissions:
    """What a license allows."""

    commercial_use: bool = False
    distribution: bool = False
    modification: bool = False
    patent_rights: bool = False
    private_use: bool = False

    def __str__(self) -> str:
        """Render one bullet per granted permission."""
        return _render(self, _PERMISSION_SENTENCES)


@dataclass(frozen=True)
class Conditions:
    """What a license requires in return."""

    disclose_sources: bool = False
    document_changes: bool = False
    license_and_copyright_notice: bool = False
    network_use_is_distribution: bool = False
    same_license: bool = False

    def __str__(self) -> str:
        """Render one bullet per condition."""
        return _render(self, _CONDITION_SENTENCES)


@dataclass(frozen=True)
class Limitations:
    """What a license disclaims."""

    no_liability: bool = False
    no_trademark_rights: bool = False
    no_warranty: bool = False
    no_patent_rights: bool = False

    def __str__(self) -> str:
        """Render one bullet per limitation."""
        return _render(self, _LIMITATION_SENTENCES)


@dataclass(frozen=True)
class RightsProfile:
    """The permissions, conditions and limitations of one license."""

    permissions: Permissions = Permissions()
    conditions: Conditions = Conditions()
    limitations: Limitations = Limitations()


class CuratedLicense(str, enum.Enum):
    """Licenses that carry a hand-authored :class:`RightsProfile`."""

    AFL_3_0 = 'AFL-3.0'
    AGPL_3_0_ONLY = 'AGPL-3.0-only'
    APACHE_2_0 = 'Apache-2.0'
    BSD_0 = '0BSD'
    BSD_2_CLAUSE = 'BSD-2-Clause'
    BSD_3_CLAUSE = 'BSD-3-Clause'
    BSD_3_CLAUSE_CLEAR = 'BSD-3-Clause-Clear'
    BSL_1_0 = 'BSL-1.0'
    CC0_1_0 = 'CC0-1.0'
    GPL_3_0_ONLY = 'GPL-3.0-only'
    LGPL_3_0_ONLY = 'LGPL-3.0-only'
    MIT = 'MIT'
    MPL_2_0 = 'MPL-2.0'
    OSL_3_0 = 'OSL-3.0'
    UNLICENSE = 'Unlicense'
    WTFPL = 'WTFPL'

    @property
    def profile(self) -> RightsProfile:
        """The rights profile of this license."""
        return _PROFILES[self]


# ── Curated profiles ─────────────────────────────────────────────────

_ALL_PERMISSIONS = Permissions(
    commercial_use=True,
    distribution=True,
    modification=True,
    patent_rights=True,
    private_use=True,
)

# Everything except the patent grant.
_PERMISSIVE = Permissions(
    commercial_use=True,
    distribution=True,
    modification=True,
    private_use=True,
)

_ALL_CONDITIONS = Conditions(
    disclose_sources=True,
    document_changes=True,
    license_and_copyright_notice=True,
    network_use_is_distribution=True,
    same_license=True,
)

_NOTICE = Conditions(license_and_copyright_notice=True)

_GPL_CONDITIONS = Conditions(
    disclose_sources=True,
    document_changes=True,
    license_and_copyright_notice=True,
    same_license=True,
)

_AS_IS = Limitations(no_liability=True, no_warranty=True)

_AS_IS_NO_TRADEMARK = Limitations(no_liability=True, no_trademark_rights=True, no_warranty=True)

_PROFILES: Final[dict[CuratedLicense, RightsProfile]] = {
    CuratedLicense.AFL_3_0: RightsProfile(
        _ALL_PERMISSIONS,
        Conditions(document_changes=True, license_and_copyright_notice=True),
        _AS_IS_NO_TRADEMARK,
    ),
    CuratedLicense.AGPL_3_0_ONLY: RightsProfile(_ALL_PERMISSIONS, _ALL_CONDITIONS, _AS_IS),
    CuratedLicense.APACHE_2_0: RightsProfile(
        _ALL_PERMISSIONS,
        Conditions(document_changes=True, license_and_copyright_notice=True),
        _AS_IS_NO_TRADEMARK,
    ),
    CuratedLicense.BSD_0: RightsProfile(_PERMISSIVE, Conditions(), _AS_IS),
    CuratedLicense.BSD_2_CLAUSE: RightsProfile(_PERMISSIVE, _NOTICE, _AS_IS),
    CuratedLicense.BSD_3_CLAUSE: RightsProfile(_PERMISSIVE, _NOTICE, _AS_IS),
    CuratedLicense.BSD_3_CLAUSE_CLEAR: RightsProfile(
        _PERMISSIVE,
        _NOTICE,
        Limitations(no_liability=True, no_warranty=True, no_patent_rights=True),
    ),
    CuratedLicense.BSL_1_0: RightsProfile(_PERMISSIVE, _NOTICE, _AS_IS),
    CuratedLicense.CC0_1_0: RightsProfile(
        _PERMISSIVE,
        Conditions(),
        Limitations(no_liability=True, no_trademark_rights=True, no_warranty=True, no_patent_rights=True),
    ),
    CuratedLicense.GPL_3_0_ONLY: RightsProfile(_ALL_PERMISSIONS, _GPL_CONDITIONS, _AS_IS),
    CuratedLicense.LGPL_3_0_ONLY: RightsProfile(_ALL_PERMISSIONS, _GPL_CONDITIONS, _AS_IS),
    CuratedLicense.MIT: RightsProfile(_PERMISSIVE, _NOTICE, _AS_IS),
    CuratedLicense.MPL_2_0: RightsProfile(
        _ALL_PERMISSIONS,
        Conditions(disclose_sources=True, license_and_copyright_notice=True, same_license=True),
        _AS_IS_NO_TRADEMARK,
    ),
    CuratedLicense.OSL_3_0: RightsProfile(_ALL_PERMISSIONS, _ALL_CONDITIONS, _AS_IS_NO_TRADEMARK),
    CuratedLicense.UNLICENSE: RightsProfile(_PERMISSIVE, Conditions(), _AS_IS),
    CuratedLicense.WTFPL: RightsProfile(_PERMISSIVE, Conditions(), Limitations()),
}


def classify(license_id: str) -> RightsProfile | None:
    """Return the rights profile for ``license_id``, or ``None``.

    Matching is exact and case-sensitive, like catalog lookup.
    """
    try:
        curated = CuratedLicense(license_id)
    except ValueError:
        return None
    return curated.profile


@dataclass(frozen=True)
class ClassifiedLicense:
    """A catalog :class:`~spdxkit._types.License` joined with its profile."""

    license: License
    profile: RightsProfile

    @property
    def id(self) -> str:
        """SPDX identifier of the license."""
        return self.license.id

    @property
    def name(self) -> str:
        """Full name of the license."""
        return self.license.name

    @property
    def permissions(self) -> Permissions:
        """Shortcut for ``profile.permissions``."""
        return self.profile.permissions

    @property
    def conditions(self) -> Conditions:
        """Shortcut for ``profile.conditions``."""
        return self.profile.conditions

    @property
    def limitations(self) -> Limitations:
        """Shortcut for ``profile.limitations``."""
        return self.profile.limitations

    def __str__(self) -> str:
        """Return the full license name."""
        return self.license.name


def lookup_ext(license_id: str) -> ClassifiedLicense | None:
    """Look up a curated license in the default catalog with its profile.

    Returns ``None`` when the id is not curated, or when the catalog in
    use does not contain it.
    """
    profile = classify(license_id)
    if profile is None:
        return None
    found = lookup_license(license_id)
    if found is None:
        return None
    return ClassifiedLicense(license=found, profile=profile)
