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

"""Structured logging for spdxkit.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): human-readable, colored when stderr is a TTY.
- **JSON** (``--json-log``): one JSON object per line.

Both modes write to stderr so stdout stays clean for license text
piped out of ``spdxkit text``.

Library code never calls :func:`configure_logging`; it only obtains
loggers via :func:`get_logger`.  Applications (and the CLI) decide how
events are rendered.

Usage::

    from spdxkit.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger('spdxkit.catalog')
    log.info('catalog_built', licenses=26, exceptions=5)
"""

from __future__ import annotations

import logging
import sys

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog for spdxkit.

    Should be called once at startup, before any logging calls.
    Calling it again replaces the previous configuration.

    Args:
        verbose: Enable debug-level output.
        quiet: Suppress info-level output (only warnings and errors).
        json_log: Use JSON output instead of console output.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
        )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'spdxkit') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    The logger always sits on top of the stdlib logger of the same
    name, also before :func:`configure_logging` has run.  Events from an
    unconfigured application therefore follow stdlib defaults: below
    ``WARNING`` they are dropped, the rest go to stderr.  Nothing is
    ever printed to stdout.

    Args:
        name: Logger name, used for filtering and identification.

    Returns:
        A :class:`structlog.stdlib.BoundLogger` instance.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
