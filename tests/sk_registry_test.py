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

"""Tests for spdxkit.registry."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest
import spdxkit
from spdxkit._types import License
from spdxkit.config import ENV_DATA_DIR
from spdxkit.errors import ID_NOT_FOUND_MESSAGE, SpdxIdNotFoundError
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
    reset_default_catalog,
)


class TestLookupLicense:
    """Tests for lookup_license()."""

    def test_known_id(self) -> None:
        """A known id resolves to its entry."""
        lic = lookup_license('Apache-2.0')
        assert lic is not None
        assert lic.id == 'Apache-2.0'
        assert lic.name == 'Apache License 2.0'
        assert str(lic) == 'Apache License 2.0'

    def test_unknown_id(self) -> None:
        """Unknown ids give None."""
        assert lookup_license('Not-A-License') is None

    def test_case_sensitive(self) -> None:
        """Lookup does not fold case."""
        assert lookup_license('mit') is None
        assert lookup_license('MIT ') is None

    def test_empty_string(self) -> None:
        """The empty string is simply unknown."""
        assert lookup_license('') is None

    def test_round_trip_every_id(self) -> None:
        """Every listed license is found again under its id."""
        for lic in all_licenses():
            assert lookup_license(lic.id) is lic

    def test_osi_flags(self) -> None:
        """OSI approval is carried from the corpus."""
        mit = lookup_license('MIT')
        wtfpl = lookup_license('WTFPL')
        assert mit is not None
        assert wtfpl is not None
        assert mit.is_osi_approved is True
        assert wtfpl.is_osi_approved is False

    def test_header(self) -> None:
        """Licenses with a standard header expose it."""
        apache = lookup_license('Apache-2.0')
        mit = lookup_license('MIT')
        assert apache is not None
        assert mit is not None
        assert apache.header is not None
        assert mit.header is None


class TestLookupException:
    """Tests for lookup_exception()."""

    def test_known_id(self) -> None:
        """A known exception id resolves."""
        exc = lookup_exception('Classpath-exception-2.0')
        assert exc is not None
        assert exc.name == 'Classpath exception 2.0'

    def test_license_id_is_not_an_exception(self) -> None:
        """License and exception namespaces are separate."""
        assert lookup_exception('MIT') is None
        assert lookup_license('LLVM-exception') is None

    def test_round_trip_every_id(self) -> None:
        """Every listed exception is found again under its id."""
        for exc in all_exceptions():
            assert lookup_exception(exc.id) is exc


class TestParse:
    """Tests for parse_license() and parse_exception()."""

    def test_parse_known(self) -> None:
        """Known ids parse to the same object lookup returns."""
        assert parse_license('MIT') is lookup_license('MIT')
        assert parse_exception('LLVM-exception') is lookup_exception('LLVM-exception')

    def test_parse_unknown_license(self) -> None:
        """Unknown license ids raise SpdxIdNotFoundError."""
        with pytest.raises(SpdxIdNotFoundError, match=ID_NOT_FOUND_MESSAGE) as exc_info:
            parse_license('mit')
        assert exc_info.value.id == 'mit'

    def test_parse_unknown_exception(self) -> None:
        """Unknown exception ids raise a LookupError."""
        with pytest.raises(LookupError):
            parse_exception('Nope-exception')


class TestAll:
    """Tests for all_licenses() and all_exceptions()."""

    def test_sorted(self) -> None:
        """Enumeration is in id order."""
        ids = [lic.id for lic in all_licenses()]
        assert ids == sorted(ids)

    def test_includes_deprecated(self) -> None:
        """Deprecated ids are enumerated too."""
        ids = {lic.id for lic in all_licenses()}
        assert {'GPL-3.0', 'GPL-2.0+', 'LGPL-3.0', 'AGPL-3.0'} <= ids

    def test_exceptions(self) -> None:
        """The bundled exceptions are all listed."""
        ids = {exc.id for exc in all_exceptions()}
        assert {'389-exception', 'Classpath-exception-2.0', 'GCC-exception-3.1', 'LLVM-exception'} <= ids


class TestSymbols:
    """Tests for the licenses / exceptions symbol namespaces."""

    def test_license_symbol(self) -> None:
        """Symbols resolve to the same entries as ids."""
        assert licenses.Bsd3Clause is lookup_license('BSD-3-Clause')
        assert licenses.Gpl30Only is lookup_license('GPL-3.0-only')
        assert licenses.Gpl20Plus is lookup_license('GPL-2.0+')

    def test_zero_bsd(self) -> None:
        """0BSD is reachable as Bsd0."""
        assert licenses.Bsd0.id == '0BSD'

    def test_389_exception(self) -> None:
        """389-exception is reachable as Exception389."""
        assert exceptions.Exception389.id == '389-exception'

    def test_unknown_symbol(self) -> None:
        """Unknown symbols raise AttributeError."""
        with pytest.raises(AttributeError, match='NotALicense'):
            _ = licenses.NotALicense

    def test_private_names_not_looked_up(self) -> None:
        """Underscore names never touch the catalog."""
        assert not hasattr(licenses, '__wrapped__')

    def test_dir_lists_symbols(self) -> None:
        """dir() lists every symbol."""
        names = dir(licenses)
        assert 'Mit' in names
        assert 'Apache20' in names
        assert len(names) == len(all_licenses())

    def test_package_exports(self) -> None:
        """The namespaces are re-exported from the package root."""
        assert spdxkit.licenses.Mit is spdxkit.lookup_license('MIT')
        assert spdxkit.exceptions.LlvmException.id == 'LLVM-exception'


class TestDefaultCatalog:
    """Tests for the lazily built default catalog."""

    def test_built_once(self) -> None:
        """Repeated calls return the same catalog object."""
        assert default_catalog() is default_catalog()

    def test_concurrent_first_use(self) -> None:
        """Threads racing on first use all see one catalog."""
        reset_default_catalog()
        seen: list[object] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            seen.append(default_catalog())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(seen) == 8
        assert all(c is seen[0] for c in seen)

    def test_env_data_dir(self, data_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """SPDXKIT_DATA_DIR selects another corpus on the next build."""
        monkeypatch.setenv(ENV_DATA_DIR, str(data_root))
        reset_default_catalog()
        assert lookup_license('Foo-1.0') is not None
        assert lookup_license('Apache-2.0') is None
        assert lookup_exception('Bar-exception') is not None

    def test_entries_are_frozen(self) -> None:
        """Entries cannot be modified."""
        lic = lookup_license('MIT')
        assert isinstance(lic, License)
        with pytest.raises(AttributeError):
            lic.name = 'Changed'  # type: ignore[misc]
