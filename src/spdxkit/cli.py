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

"""Command-line interface for spdxkit.

Subcommands::

    spdxkit text                  ids on stdin → license texts on stdout
    spdxkit show ID [--exception] metadata table (+ rights profile)
    spdxkit match [FILE]          identify a license file (exit 1 if unknown)
    spdxkit list [--exceptions]   table of catalog entries
    spdxkit generate -o OUT       write the catalog as a Python module

Exit codes: ``0`` success, ``1`` nothing found, ``2`` usage,
configuration or catalog errors.

Logging goes to stderr (see :mod:`spdxkit.logging`), so the stdout of
``spdxkit text`` can be piped straight into a file.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from spdxkit import __version__
from spdxkit.catalog import Catalog, build_catalog
from spdxkit.codegen import write_catalog_module
from spdxkit.config import resolve_config
from spdxkit.errors import SpdxKitError
from spdxkit.logging import configure_logging, get_logger
from spdxkit.matcher import match_license_id
from spdxkit.rights import RightsProfile, classify

__all__ = [
    'build_parser',
    'main',
]

log = get_logger('spdxkit.cli')

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _error(message: str) -> None:
    Console(stderr=True).print(Text(f'error: {message}', style='red'))


def _yes_no(flag: bool) -> Text:
    return Text('yes', style='green') if flag else Text('no', style='dim')


# ── Subcommands ──────────────────────────────────────────────────────


def _cmd_text(args: argparse.Namespace, catalog: Catalog, console: Console) -> int:
    for line in sys.stdin:
        found = catalog.license(line.rstrip('\r\n'))
        if found is not None:
            sys.stdout.write(found.text + '\n')
    return EXIT_OK


def _print_profile(profile: RightsProfile, console: Console) -> None:
    for title, flags in (
        ('Permissions', profile.permissions),
        ('Conditions', profile.conditions),
        ('Limitations', profile.limitations),
    ):
        rendered = str(flags)
        console.print(f'\n[bold]{title}[/]')
        console.print(Text(rendered.rstrip('\n') if rendered else '(none)'))


def _cmd_show(args: argparse.Namespace, catalog: Catalog, console: Console) -> int:
    table = Table(show_header=False, show_edge=False, pad_edge=False)
    table.add_column('Field', style='bold')
    table.add_column('Value')

    if args.exception:
        exc = catalog.exception(args.id)
        if exc is None:
            console.print(Text(f'Unknown exception id: {args.id}', style='red'))
            return EXIT_NOT_FOUND
        table.add_row('ID', Text(exc.id))
        table.add_row('Name', Text(exc.name))
        table.add_row('Symbol', Text(exc.symbol))
        table.add_row('Deprecated', _yes_no(exc.is_deprecated))
        for url in exc.see_also:
            table.add_row('See also', Text(url))
        console.print(table)
        return EXIT_OK

    lic = catalog.license(args.id)
    if lic is None:
        console.print(Text(f'Unknown license id: {args.id}', style='red'))
        return EXIT_NOT_FOUND
    table.add_row('ID', Text(lic.id))
    table.add_row('Name', Text(lic.name))
    table.add_row('Symbol', Text(lic.symbol))
    table.add_row('OSI approved', _yes_no(lic.is_osi_approved))
    table.add_row('FSF libre', _yes_no(lic.is_fsf_libre))
    table.add_row('Deprecated', _yes_no(lic.is_deprecated))
    for url in lic.see_also:
        table.add_row('See also', Text(url))
    console.print(table)

    profile = classify(lic.id)
    if profile is not None:
        _print_profile(profile, console)
    return EXIT_OK


def _cmd_match(args: argparse.Namespace, catalog: Catalog, console: Console) -> int:
    if args.file is None:
        text = sys.stdin.read()
    else:
        try:
            text = args.file.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            _error(f'cannot read {args.file}: {exc}')
            return EXIT_ERROR

    license_id = match_license_id(text)
    log.debug('match_result', file=str(args.file) if args.file else '-', license_id=license_id)
    if license_id is None:
        console.print(Text('No known license recognised.', style='yellow'))
        return EXIT_NOT_FOUND

    lic = catalog.license(license_id)
    name = lic.name if lic is not None else license_id
    console.print(Text.assemble((license_id, 'bold green'), f'  {name}'))
    profile = classify(license_id)
    if profile is not None:
        _print_profile(profile, console)
    return EXIT_OK


def _cmd_list(args: argparse.Namespace, catalog: Catalog, console: Console) -> int:
    table = Table(show_header=True, header_style='bold', show_edge=False, pad_edge=False)
    table.add_column('ID', style='bold', no_wrap=True)
    table.add_column('Name')

    if args.exceptions:
        table.add_column('Deprecated', justify='center')
        shown = 0
        for exc in catalog.exceptions:
            if exc.is_deprecated and not args.include_deprecated:
                continue
            table.add_row(Text(exc.id), Text(exc.name), _yes_no(exc.is_deprecated))
            shown += 1
    else:
        table.add_column('OSI', justify='center')
        table.add_column('FSF', justify='center')
        shown = 0
        for lic in catalog.licenses:
            if lic.is_deprecated and not args.include_deprecated:
                continue
            if args.osi and not lic.is_osi_approved:
                continue
            if args.fsf and not lic.is_fsf_libre:
                continue
            table.add_row(Text(lic.id), Text(lic.name), _yes_no(lic.is_osi_approved), _yes_no(lic.is_fsf_libre))
            shown += 1

    console.print(table)
    console.print(f'\n{shown} entries.')
    return EXIT_OK


def _cmd_generate(args: argparse.Namespace, catalog: Catalog, console: Console) -> int:
    try:
        path = write_catalog_module(catalog, args.output)
    except OSError as exc:
        _error(f'cannot write {args.output}: {exc}')
        return EXIT_ERROR
    console.print(
        f'Wrote {len(catalog.licenses)} licenses and {len(catalog.exceptions)} exceptions to {path}',
        markup=False,
        highlight=False,
    )
    return EXIT_OK


# ── Parser ───────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``spdxkit`` command."""
    parser = argparse.ArgumentParser(
        prog='spdxkit',
        description='Query the SPDX license catalog.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Log JSON lines instead of console output.')
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='spdxkit.toml or pyproject.toml to read the data location from.',
    )

    sub = parser.add_subparsers(dest='command', required=True)

    text = sub.add_parser('text', help='Print the text of each license id read from stdin.')
    text.set_defaults(func=_cmd_text)

    show = sub.add_parser('show', help='Show metadata for one license or exception.')
    show.add_argument('id', help='SPDX identifier (case-sensitive).')
    show.add_argument('--exception', action='store_true', help='Look the id up among exceptions.')
    show.set_defaults(func=_cmd_show)

    match = sub.add_parser('match', help='Identify the license in a file.')
    match.add_argument('file', nargs='?', type=Path, default=None, help='License file (default: stdin).')
    match.set_defaults(func=_cmd_match)

    lst = sub.add_parser('list', help='List catalog entries.')
    lst.add_argument('--exceptions', action='store_true', help='List exceptions instead of licenses.')
    lst.add_argument('--osi', action='store_true', help='Only OSI-approved licenses.')
    lst.add_argument('--fsf', action='store_true', help='Only FSF libre licenses.')
    lst.add_argument('--include-deprecated', action='store_true', help='Include deprecated ids.')
    lst.set_defaults(func=_cmd_list)

    gen = sub.add_parser('generate', help='Write the catalog as a Python module.')
    gen.add_argument('-o', '--output', type=Path, required=True, help='Module path to write.')
    gen.add_argument('--licenses', type=Path, default=None, help='Directory of license JSON records.')
    gen.add_argument('--exceptions', type=Path, default=None, help='Directory of exception JSON records.')
    gen.set_defaults(func=_cmd_generate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``spdxkit`` command and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == 'generate' and args.exceptions is not None and args.licenses is None:
        parser.error('--exceptions requires --licenses')

    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)
    console = Console()
    try:
        if args.command == 'generate' and args.licenses is not None:
            catalog = build_catalog(args.licenses, args.exceptions)
        else:
            catalog = resolve_config(args.config).build()
        return args.func(args, catalog, console)
    except SpdxKitError as exc:
        _error(str(exc))
        return EXIT_ERROR
