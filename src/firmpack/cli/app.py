"""CLI application entry point and command routing for firmpack.

This module is the **sole error boundary** for the entire application.
It catches :class:`~firmpack.exceptions.FirmpackError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; assembly is delegated to the core
  builder and director.
* The status report is the only thing written to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from firmpack.cli import exit_codes
from firmpack.cli.console import console
from firmpack.core.builder import FirmwareBuilder
from firmpack.core.director import Director
from firmpack.core.package import FirmwarePackage
from firmpack.core.profiles import DEFAULT_PROFILE, PROFILES, BuildProfile, get_profile
from firmpack.exceptions import FirmpackError
from firmpack.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``firmpack``                    — build with the default profile
    * ``firmpack --profile minimal``  — build with another profile
    * ``firmpack --interactive``      — pick the profile from a prompt
    * ``firmpack --list-profiles``
    * ``firmpack --version``
    """
    parser = argparse.ArgumentParser(
        prog="firmpack",
        description="Assemble a firmware package and report its components.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-p",
        "--profile",
        default=DEFAULT_PROFILE.name,
        help=f"Build profile ({', '.join(PROFILES)}). Default: {DEFAULT_PROFILE.name}.",
    )
    source.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Choose the build profile from an interactive prompt.",
    )
    source.add_argument(
        "--list-profiles",
        action="store_true",
        help="Show the available build profiles and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each build step to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def assemble(profile: BuildProfile) -> FirmwarePackage:
    """Drive a fresh builder for *profile* through a director."""
    builder = FirmwareBuilder(profile)
    director = Director(builder)
    director.construct()
    return builder.get_package()


def _handle_build(profile_name: str) -> int:
    """Build a package and print its status report to stdout."""
    profile = get_profile(profile_name)
    logger.debug("Using profile %r", profile.name)

    # Plain lines, never wrapped to the terminal width.
    assemble(profile).print_status(sys.stdout)
    return exit_codes.SUCCESS


def _handle_interactive() -> int:
    from firmpack.cli.profile_prompt import prompt_profile_selection

    return _handle_build(prompt_profile_selection(PROFILES.values()))


def _handle_list_profiles() -> int:
    from firmpack.cli.profile_table import run_list_profiles

    return run_list_profiles()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the firmpack CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        from firmpack.cli.logging_setup import configure_logging

        configure_logging(verbose=True)

    if args.list_profiles:
        return _handle_list_profiles()

    if args.interactive:
        return _handle_interactive()

    return _handle_build(args.profile)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except FirmpackError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
