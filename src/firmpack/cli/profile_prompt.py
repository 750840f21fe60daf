"""Interactive build profile selection for ``firmpack --interactive``.

Renders an arrow-key selector (questionary) listing every registered
profile and returns the chosen profile's name.  Display only; profile
lookup stays in :mod:`firmpack.core.profiles`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from firmpack.core.components import Component
from firmpack.core.profiles import DEFAULT_PROFILE, BuildProfile
from firmpack.exceptions import EnvironmentError, ProfileSelectionError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choice_label(profile: BuildProfile) -> str:
    """Single-line label, e.g. ``"minimal   bootloader, main app"``."""
    included = ", ".join(c.display_name for c in Component if profile.is_enabled(c))
    return f"{profile.name:<9} {included or 'nothing'}"


def prompt_profile_selection(profiles: Iterable[BuildProfile]) -> str:
    """Prompt the user to pick one of *profiles*.

    Returns
    -------
    str
        The ``name`` of the chosen profile.

    Raises
    ------
    ProfileSelectionError
        If the user cancels the prompt (Esc / Ctrl+C returns ``None``).
    """
    questionary = _import_questionary()

    candidates = list(profiles)
    choices = [
        questionary.Choice(title=_build_choice_label(profile), value=profile.name)
        for profile in candidates
    ]
    names = [profile.name for profile in candidates]

    selected: str | None = questionary.select(
        "Select build profile:",
        choices=choices,
        default=DEFAULT_PROFILE.name if DEFAULT_PROFILE.name in names else None,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()

    if selected is None:
        raise ProfileSelectionError(
            "No build profile selected.",
            hint="Use arrow keys to pick a profile, then press Enter.",
        )

    return selected
