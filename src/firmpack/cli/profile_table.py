"""``firmpack --list-profiles`` — render the build profile registry.

Shows one row per registered profile with a column per component.
Rendered as a Rich table when Rich is installed, as fixed-width plain
text on stderr otherwise.  No business logic lives here.
"""

from __future__ import annotations

import sys

from firmpack.cli import exit_codes
from firmpack.cli.console import console
from firmpack.core.components import Component
from firmpack.core.profiles import DEFAULT_PROFILE, PROFILES, BuildProfile


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def _profile_row(profile: BuildProfile) -> tuple[str, ...]:
    """Return (name, one cell per component, description) for *profile*."""
    name = f"{profile.name} (default)" if profile is DEFAULT_PROFILE else profile.name
    cells = tuple("yes" if profile.is_enabled(c) else "-" for c in Component)
    return (name, *cells, profile.description)


def _headers() -> tuple[str, ...]:
    return ("Profile", *(c.display_name for c in Component), "Description")


def _print_plain_profile_table(rows: list[tuple[str, ...]]) -> None:
    """Render the profile table without Rich."""
    headers = _headers()
    widths = [
        max(len(headers[i]), *(len(row[i]) for row in rows))
        for i in range(len(headers))
    ]
    line = "  ".join(f"{h:<{w}}" for h, w in zip(headers, widths))
    print("\nfirmpack profiles", file=sys.stderr)
    print(line, file=sys.stderr)
    print("-" * len(line), file=sys.stderr)
    for row in rows:
        print("  ".join(f"{cell:<{w}}" for cell, w in zip(row, widths)), file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_list_profiles() -> int:
    """Render every registered profile and return :data:`exit_codes.SUCCESS`."""
    rows = [_profile_row(profile) for profile in PROFILES.values()]

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_profile_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="firmpack profiles",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Profile", style="bold", min_width=10)
    for component in Component:
        table.add_column(component.display_name, justify="center")
    table.add_column("Description")

    for row in rows:
        name, *cells, description = row
        styled = [
            "[green]yes[/green]" if cell == "yes" else "[dim]-[/dim]" for cell in cells
        ]
        table.add_row(name, *styled, description)

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
