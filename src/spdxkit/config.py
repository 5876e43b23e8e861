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

"""Configuration for where the catalog is built from.

By default spdxkit builds its catalog from the corpus bundled inside
the package.  A full upstream license-list-data checkout (or any
directory in the same layout) can be selected instead.

Sources, highest precedence first::

    1. An explicit config file (``--config`` / ``resolve_config(path)``):
       ``spdxkit.toml`` (top-level keys) or ``pyproject.toml``
       (``[tool.spdxkit]`` table).
    2. The ``SPDXKIT_DATA_DIR`` environment variable, naming a
       license-list-data root.
    3. The bundled corpus.

Recognised keys::

    data_dir        = "vendor/license-list-data"   # root; implies json/details + json/exceptions
    licenses_dir    = "path/to/details"            # overrides data_dir for licenses
    exceptions_dir  = "path/to/exceptions"         # overrides data_dir for exceptions

Relative paths are resolved against the directory holding the config
file.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from spdxkit.catalog import BUNDLED_DATA_DIR, Catalog, build_catalog
from spdxkit.errors import ConfigError
from spdxkit.logging import get_logger

__all__ = [
    'CONFIG_FILENAME',
    'ENV_DATA_DIR',
    'CatalogConfig',
    'load_config',
    'parse_config',
    'resolve_config',
]

log = get_logger('spdxkit.config')

#: Environment variable naming a license-list-data root directory.
ENV_DATA_DIR: Final[str] = 'SPDXKIT_DATA_DIR'

#: Standalone configuration file name.
CONFIG_FILENAME: Final[str] = 'spdxkit.toml'

_ALLOWED_KEYS: Final[frozenset[str]] = frozenset({'data_dir', 'licenses_dir', 'exceptions_dir'})


@dataclass(frozen=True)
class CatalogConfig:
    """Where to build the catalog from.

    Attributes:
        licenses_dir: Directory of license JSON records, or ``None``
            for the bundled corpus.
        exceptions_dir: Directory of exception JSON records, or
            ``None`` for the bundled corpus.
    """

    licenses_dir: Path | None = None
    exceptions_dir: Path | None = None

    @property
    def uses_bundled_data(self) -> bool:
        """``True`` if neither directory has been overridden."""
        return self.licenses_dir is None and self.exceptions_dir is None

    @classmethod
    def from_data_dir(cls, root: Path) -> CatalogConfig:
        """Return a config pointing at a license-list-data root."""
        return cls(licenses_dir=root / 'json' / 'details', exceptions_dir=root / 'json' / 'exceptions')

    def build(self) -> Catalog:
        """Build the catalog this configuration describes."""
        licenses_dir = self.licenses_dir or BUNDLED_DATA_DIR / 'json' / 'details'
        exceptions_dir = self.exceptions_dir or BUNDLED_DATA_DIR / 'json' / 'exceptions'
        return build_catalog(licenses_dir, exceptions_dir)


def _path_value(table: Mapping[str, Any], key: str, base_dir: Path) -> Path | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f'spdxkit.{key} must be a non-empty string, got {value!r}')
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path


def parse_config(table: Mapping[str, Any], base_dir: Path) -> CatalogConfig:
    """Validate a configuration table.

    Args:
        table: The ``[tool.spdxkit]`` table or the top level of
            ``spdxkit.toml``.
        base_dir: Directory relative paths are resolved against.

    Returns:
        The parsed :class:`CatalogConfig`.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.
    """
    unknown = sorted(set(table) - _ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f'Unknown key(s) in spdxkit config: {", ".join(unknown)}')

    data_dir = _path_value(table, 'data_dir', base_dir)
    base = CatalogConfig.from_data_dir(data_dir) if data_dir is not None else CatalogConfig()
    licenses_dir = _path_value(table, 'licenses_dir', base_dir)
    exceptions_dir = _path_value(table, 'exceptions_dir', base_dir)
    return CatalogConfig(
        licenses_dir=licenses_dir or base.licenses_dir,
        exceptions_dir=exceptions_dir or base.exceptions_dir,
    )


def load_config(path: Path) -> CatalogConfig:
    """Load configuration from ``spdxkit.toml`` or ``pyproject.toml``.

    A ``pyproject.toml`` without a ``[tool.spdxkit]`` table yields the
    default configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed, or its
            contents are invalid.
    """
    try:
        with path.open('rb') as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f'Cannot read {path}: {exc}') from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f'Invalid TOML in {path}: {exc}') from exc

    if path.name == 'pyproject.toml':
        table = data.get('tool', {}).get('spdxkit', {})
        if not isinstance(table, dict):
            raise ConfigError('[tool.spdxkit] must be a table')
    else:
        table = data

    config = parse_config(table, path.resolve().parent)
    log.debug('config_loaded', path=str(path), bundled=config.uses_bundled_data)
    return config


def resolve_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> CatalogConfig:
    """Pick the effective configuration.

    Args:
        path: Explicit config file; wins over everything else.
        environ: Environment to consult (defaults to ``os.environ``).

    Returns:
        The effective :class:`CatalogConfig`.
    """
    if path is not None:
        return load_config(path)
    env = os.environ if environ is None else environ
    data_dir = env.get(ENV_DATA_DIR, '')
    if data_dir:
        return CatalogConfig.from_data_dir(Path(data_dir).expanduser())
    return CatalogConfig()
