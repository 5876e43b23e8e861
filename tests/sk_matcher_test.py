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

"""Tests for spdxkit.matcher."""

from __future__ import annotations

import pytest
from spdxkit.matcher import from_text, match_license_id
from spdxkit.registry import lookup_license

_TARGETS = [
    'MIT',
    'Apache-2.0',
    'GPL-3.0-only',
    'MPL-2.0',
    'Unlicense',
    'LGPL-3.0-only',
    'AGPL-3.0-only',
    'CC0-1.0',
]


class TestMatchLicenseId:
    """Tests for match_license_id()."""

    @pytest.mark.parametrize('license_id', _TARGETS)
    def test_recognises_own_text(self, license_id: str) -> None:
        """Each matcher target recognises its own bundled text."""
        lic = lookup_license(license_id)
        assert lic is not None
        assert match_license_id(lic.text) == license_id

    def test_mit_wins_over_gpl(self) -> None:
        """Rule order decides when several rules match."""
        text = 'MIT License\nGNU GENERAL PUBLIC LICENSE\nVersion 3, 29 June 2007'
        assert match_license_id(text) == 'MIT'

    def test_gpl_wins_over_lgpl(self) -> None:
        """A text naming both GPL and LGPL v3 is GPL."""
        text = 'GNU LESSER GENERAL PUBLIC LICENSE\nVersion 3\nGNU GENERAL PUBLIC LICENSE'
        assert match_license_id(text) == 'GPL-3.0-only'

    def test_lgpl(self) -> None:
        """The LGPL title alone is not mistaken for the GPL."""
        assert match_license_id('GNU LESSER GENERAL PUBLIC LICENSE\nVersion 3, 29 June 2007') == 'LGPL-3.0-only'

    def test_all_markers_required(self) -> None:
        """A rule needs every one of its markers."""
        assert match_license_id('Apache License') is None
        assert match_license_id('Version 2.0') is None

    def test_case_sensitive(self) -> None:
        """Markers are matched case-sensitively."""
        assert match_license_id('mit license') is None

    def test_no_whitespace_normalisation(self) -> None:
        """Markers split across lines do not match."""
        assert match_license_id('MIT\nLicense') is None

    def test_empty(self) -> None:
        """Empty text matches nothing."""
        assert match_license_id('') is None

    def test_unrecognised_license(self) -> None:
        """Licenses without a rule give None."""
        zlib = lookup_license('Zlib')
        assert zlib is not None
        assert match_license_id(zlib.text) is None

    def test_gpl2_is_not_gpl3(self) -> None:
        """GPL v2 text does not satisfy the v3 rule."""
        gpl2 = lookup_license('GPL-2.0-only')
        assert gpl2 is not None
        assert match_license_id(gpl2.text) is None


class TestFromText:
    """Tests for from_text()."""

    @pytest.mark.parametrize('license_id', _TARGETS)
    def test_round_trip(self, license_id: str) -> None:
        """from_text(text of X).id == X for every matcher target."""
        lic = lookup_license(license_id)
        assert lic is not None
        ext = from_text(lic.text)
        assert ext is not None
        assert ext.id == license_id
        assert ext.license is lic

    def test_no_match(self) -> None:
        """Unrecognised text gives None."""
        assert from_text('All rights reserved.') is None

    def test_carries_profile(self) -> None:
        """The result includes the rights profile."""
        ext = from_text('Permission is hereby granted... MIT License')
        assert ext is not None
        assert ext.permissions.commercial_use is True
        assert ext.conditions.license_and_copyright_notice is True
