"""Build profiles — which builder steps are enabled.

A profile replaces builder subclassing: one builder type, parameterized
by the set of steps that actually construct something.  Disabled steps
are no-ops that still return the builder, so the director's fixed
sequence works unchanged against every profile.

Registry
--------
``full``     every component
``no-diag``  everything except the diagnostics module (default)
``minimal``  bootloader and main application only
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from firmpack.core.components import Component
from firmpack.exceptions import UnknownProfileError


@dataclass(frozen=True, slots=True)
class BuildProfile:
    """Immutable, named set of enabled build steps."""

    name: str
    """Registry key, also accepted by ``--profile``."""

    description: str
    """One-line summary shown in ``--list-profiles``."""

    enabled: frozenset[Component]
    """Components whose build step constructs a marker."""

    def is_enabled(self, component: Component) -> bool:
        return component in self.enabled

    @classmethod
    def of(cls, name: str, description: str, components: Iterable[Component]) -> BuildProfile:
        return cls(name=name, description=description, enabled=frozenset(components))


# ---------------------------------------------------------------------------
# Built-in profiles
# ---------------------------------------------------------------------------

FULL = BuildProfile.of("full", "Every component, diagnostics included.", Component)

NO_DIAGNOSTICS = BuildProfile(
    name="no-diag",
    description="Full package without the diagnostics module.",
    enabled=FULL.enabled - {Component.DIAG_MODULE},
)

MINIMAL = BuildProfile.of(
    "minimal",
    "Bootloader and main application only.",
    (Component.BOOTLOADER, Component.MAIN_APP),
)

PROFILES: MappingProxyType[str, BuildProfile] = MappingProxyType(
    {profile.name: profile for profile in (FULL, NO_DIAGNOSTICS, MINIMAL)}
)
"""Read-only registry keyed by profile name, in display order."""

DEFAULT_PROFILE: BuildProfile = NO_DIAGNOSTICS


def get_profile(name: str) -> BuildProfile:
    """Look up a registered profile by name (case-insensitive).

    Raises
    ------
    UnknownProfileError
        If *name* does not match any registered profile.
    """
    key = name.strip().lower()
    try:
        return PROFILES[key]
    except KeyError:
        raise UnknownProfileError(
            f"Unknown build profile: {name!r}",
            hint=f"Choose one of: {', '.join(PROFILES)}",
        ) from None
