"""CLI application entry point and command routing for file-clip.

This module is the **sole error boundary** for the entire application.
It catches :class:`~file_clip.exceptions.FileClipError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Commands
--------
* ``file-clip c <path> [<path> ...]`` — clip paths into the store
* ``file-clip l``                     — list clipped paths
* ``file-clip e``                     — erase the store
* ``file-clip v <dir>``               — paste (copy) clipped paths into *dir*
* ``file-clip m <dir>``               — move clipped paths into *dir*

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services, wired to the infrastructure adapters.
* Standard output is reserved for ``l``; everything else goes to the
  Rich console on standard error.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from file_clip.cli import exit_codes
from file_clip.cli.console import console, quote
from file_clip.cli.logging_setup import setup_logging
from file_clip.core.clip_service import ClipService
from file_clip.core.models import PasteMode, PasteReport, PasteStatus
from file_clip.core.paste_service import PasteService
from file_clip.exceptions import FileClipError, UsageError
from file_clip.infra.filesystem import LocalFileSystem
from file_clip.infra.store import FileStore
from file_clip.version import __version__

logger = logging.getLogger(__name__)

CLIP_COMMAND = "c"
LIST_COMMAND = "l"
ERASE_COMMAND = "e"
PASTE_COMMAND = "v"
MOVE_COMMAND = "m"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting.

    ``--help`` and ``--version`` still exit normally.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=self.format_usage().strip())


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-parser per command."""
    parser = _ArgumentParser(
        prog="file-clip",
        description="A clipboard for files: clip paths now, paste or move them later.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show more detail (-v for each operation, -vv for debugging).",
    )

    commands = parser.add_subparsers(dest="command", metavar="command")

    clip = commands.add_parser(
        CLIP_COMMAND,
        help="clip one or more paths",
        epilog="Example: file-clip c -- -odd-name.txt",
    )
    clip.add_argument(
        "paths",
        nargs="+",
        metavar="path",
        help="paths to clip; put -- first if a name starts with -",
    )
    clip.set_defaults(handler=_handle_clip)

    listing = commands.add_parser(LIST_COMMAND, help="list clipped paths")
    listing.set_defaults(handler=_handle_list)

    erase = commands.add_parser(ERASE_COMMAND, help="erase all clipped paths")
    erase.set_defaults(handler=_handle_erase)

    paste = commands.add_parser(PASTE_COMMAND, help="copy clipped paths into a directory")
    paste.add_argument("target_dir", metavar="dir")
    paste.set_defaults(handler=_handle_paste)

    move = commands.add_parser(MOVE_COMMAND, help="move clipped paths into a directory")
    move.add_argument("target_dir", metavar="dir")
    move.set_defaults(handler=_handle_move)

    return parser


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------

def _clip_service() -> ClipService:
    return ClipService(FileStore(), LocalFileSystem())


def _paste_service() -> PasteService:
    return PasteService(FileStore(), LocalFileSystem())


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_clip(args: argparse.Namespace) -> int:
    """Dispatch ``c``: skipped arguments are reported, not fatal."""
    for outcome in _clip_service().clip(args.paths):
        if outcome.stored:
            logger.info(outcome.message)
        else:
            console.print(f"[yellow]{quote(outcome.message)}[/yellow]")
    return exit_codes.SUCCESS


def _handle_list(_args: argparse.Namespace) -> int:
    """Dispatch ``l``: plain paths on stdout, nothing else."""
    for path in _clip_service().list_paths():
        print(path)
    return exit_codes.SUCCESS


def _handle_erase(_args: argparse.Namespace) -> int:
    """Dispatch ``e``."""
    if not _clip_service().erase():
        logger.info("Nothing to erase.")
    return exit_codes.SUCCESS


def _handle_paste(args: argparse.Namespace) -> int:
    """Dispatch ``v``."""
    return _paste(args.target_dir, PasteMode.COPY)


def _handle_move(args: argparse.Namespace) -> int:
    """Dispatch ``m``."""
    return _paste(args.target_dir, PasteMode.MOVE)


def _paste(target_dir: str, mode: PasteMode) -> int:
    report = _paste_service().paste(target_dir, mode)
    _render_report(report)
    return exit_codes.SUCCESS


def _render_report(report: PasteReport) -> None:
    """Show per-entry problems, then a one-line summary."""
    for outcome in report.outcomes:
        if outcome.succeeded:
            logger.info(outcome.message)
        elif outcome.status is PasteStatus.SKIPPED_MISSING:
            console.print(f"[yellow]{quote(outcome.message)}[/yellow]")
        else:
            console.print(f"[red]{quote(outcome.message)}[/red]")

    if not report:
        console.print("[dim]Nothing clipped; nothing to paste.[/dim]")
        return

    verb = "moved" if report.mode is PasteMode.MOVE else "pasted"
    colour = "green" if report.failed == 0 else "yellow"
    console.print(
        f"[{colour}]{report.succeeded} of {len(report)} entries {verb}[/{colour}]"
        f" into {quote(report.target)}"
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the file-clip CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        For a missing or unknown command, or a wrong argument count.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        raise UsageError(
            "Empty command string.",
            hint=f"Choose one of: {CLIP_COMMAND}, {LIST_COMMAND}, "
            f"{ERASE_COMMAND}, {PASTE_COMMAND}, {MOVE_COMMAND}.  "
            "See --help.",
        )

    return args.handler(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FileClipError as exc:
        console.print(f"[bold red]Error:[/bold red] {quote(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {quote(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {quote(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
