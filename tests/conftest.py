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

"""Shared fixtures for spdxkit tests."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from spdxkit.config import ENV_DATA_DIR
from spdxkit.registry import reset_default_catalog


@pytest.fixture(autouse=True)
def _fresh_default_catalog(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts from the bundled corpus and a cold registry."""
    monkeypatch.delenv(ENV_DATA_DIR, raising=False)
    reset_default_catalog()
    yield
    reset_default_catalog()


def license_record(license_id: str, **overrides: Any) -> dict[str, Any]:  # noqa: ANN401
    """Return a minimal valid license record."""
    record: dict[str, Any] = {
        'licenseId': license_id,
        'name': f'{license_id} License',
        'licenseText': f'Text of {license_id}.',
        'isDeprecatedLicenseId': False,
    }
    record.update(overrides)
    return record


def exception_record(exception_id: str, **overrides: Any) -> dict[str, Any]:  # noqa: ANN401
    """Return a minimal valid exception record."""
    record: dict[str, Any] = {
        'licenseExceptionId': exception_id,
        'name': f'{exception_id} exception',
        'licenseExceptionText': f'Text of {exception_id}.',
        'isDeprecatedLicenseId': False,
    }
    record.update(overrides)
    return record


def write_record(directory: Path, filename: str, record: object) -> Path:
    """Write *record* as JSON into *directory*, creating it if needed."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(json.dumps(record), encoding='utf-8')
    return path


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """A small license-list-data style tree with two licenses and one exception."""
    root = tmp_path / 'license-list-data'
    details = root / 'json' / 'details'
    write_record(details, 'MIT.json', license_record('MIT', name='MIT License', isOsiApproved=True))
    write_record(details, 'Foo-1.0.json', license_record('Foo-1.0'))
    write_record(root / 'json' / 'exceptions', 'Bar-exception.json', exception_record('Bar-exception'))
    return root
