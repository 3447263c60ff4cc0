# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2026/10/13 01:02:44
# @Author : Kariko Lin

"""`initool` entry point: one get / set / delete per run."""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import click
import typer
from rich.console import Console

from .config import load_settings
from .errors import IniToolError
from .ini import IniFile

APP_HELP = "Query and edit INI files, keeping comments and layout intact."

USAGE = """
Usage:
  initool get <file> <section> <key>
  initool set <file> <section> <key> <value>
  initool delete <file> <section> <key>
"""

# spellings accepted by the old C++ initool.
ALIASES = {
    '-g': 'get', '--get': 'get',
    '-s': 'set', '--set': 'set',
    '-d': 'delete', '--del': 'delete', 'del': 'delete',
}

app = typer.Typer(add_completion=False, help=APP_HELP)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _open(file: Path) -> IniFile:
    settings = load_settings()
    return IniFile(file, settings.encoding, atomic=settings.atomic_write)


@app.command('get')
def get_value(
    file: Path = typer.Argument(..., help="INI file"),
    section: str = typer.Argument(..., help="Section name, case-insensitive"),
    key: str = typer.Argument(..., help="Key name, case-insensitive"),
) -> None:
    """Print the value of KEY in SECTION."""
    typer.echo(_open(file).get(section, key))


# values like `-1` are not options.
@app.command('set', context_settings={'ignore_unknown_options': True})
def set_value(
    file: Path = typer.Argument(..., help="INI file"),
    section: str = typer.Argument(..., help="Section name, case-insensitive"),
    key: str = typer.Argument(..., help="Key name, case-insensitive"),
    value: str = typer.Argument(..., help="New value, quoted on write "
                                          "if it has spaces or '='"),
) -> None:
    """Set KEY in SECTION to VALUE, adding the section if needed."""
    _open(file).set(section, key, value)
    typer.echo(f'Updated [{section}] {key} = {value}')


@app.command('delete')
def delete_value(
    file: Path = typer.Argument(..., help="INI file"),
    section: str = typer.Argument(..., help="Section name, case-insensitive"),
    key: str = typer.Argument(..., help="Key name, case-insensitive"),
) -> None:
    """Remove KEY from SECTION. The section header stays."""
    _open(file).delete(section, key)
    typer.echo(f'Deleted [{section}] {key}')


def usage() -> None:
    err_console.print(USAGE, markup=False)


def fail(e: IniToolError) -> int:
    err_console.print(f'Error: {e}', markup=False, style='red')
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = load_settings()
    except IniToolError as e:
        return fail(e)
    logging.basicConfig(level=settings.log_level,
                        format='[%(asctime)s] %(levelname)s: %(message)s')
    if not args:
        usage()
        return 1
    args[0] = ALIASES.get(args[0], args[0])

    try:
        ret = app(args=args, prog_name='initool', standalone_mode=False)
    except click.UsageError as e:
        err_console.print(e.format_message(), markup=False)
        usage()
        return 1
    except IniToolError as e:
        logging.debug('%s failed', args[0], exc_info=True)
        return fail(e)
    # `--help` ends in click's Exit, which comes back as a code here.
    return ret if isinstance(ret, int) else 0

