"""Concrete firmware builder driven by a :class:`BuildProfile`.

One builder type covers every variant.  An enabled step allocates a
fresh marker and hands it to the matching package setter; a disabled
step constructs nothing and leaves its slot untouched.  Either way the
step returns the builder so calls chain.

Guarantees
----------
* No I/O, no ``print()``.
* Deterministic; the only conceivable fault is memory exhaustion, which
  is left to propagate.
"""

from __future__ import annotations

import logging

from firmpack.core.components import Component
from firmpack.core.package import FirmwarePackage
from firmpack.core.profiles import FULL, NO_DIAGNOSTICS, BuildProfile

logger = logging.getLogger(__name__)


class FirmwareBuilder:
    """Builds a :class:`FirmwarePackage` one component at a time.

    Satisfies :class:`~firmpack.core.protocols.PackageBuilder`
    structurally.

    Parameters
    ----------
    profile:
        Which steps are enabled.  Defaults to :data:`FULL`.
    """

    def __init__(self, profile: BuildProfile = FULL) -> None:
        self._profile: BuildProfile = profile
        self._package: FirmwarePackage = FirmwarePackage()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(profile={self._profile.name!r})"

    @property
    def profile(self) -> BuildProfile:
        return self._profile

    # ------------------------------------------------------------------
    # Generic step
    # ------------------------------------------------------------------

    def build(self, component: Component) -> FirmwareBuilder:
        """Run the step for *component* and return the builder."""
        if not self._profile.is_enabled(component):
            logger.debug(
                "Skipping %s (disabled by profile %r)",
                component.display_name,
                self._profile.name,
            )
            return self

        setter = getattr(self._package, f"set_{component.slot}")
        setter(component.new_marker())
        logger.debug("Built %s", component.display_name)
        return self

    # ------------------------------------------------------------------
    # Named steps
    # ------------------------------------------------------------------

    def build_bootloader(self) -> FirmwareBuilder:
        return self.build(Component.BOOTLOADER)

    def build_main_app(self) -> FirmwareBuilder:
        return self.build(Component.MAIN_APP)

    def build_diag_module(self) -> FirmwareBuilder:
        return self.build(Component.DIAG_MODULE)

    def build_debug_log(self) -> FirmwareBuilder:
        return self.build(Component.DEBUG_LOG)

    def build_version_string(self) -> FirmwareBuilder:
        return self.build(Component.VERSION_STRING)

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------

    def get_package(self) -> FirmwarePackage:
        """Return the package this builder owns, by reference."""
        return self._package


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def full_builder() -> FirmwareBuilder:
    """Builder with every step enabled."""
    return FirmwareBuilder(FULL)


def no_diagnostics_builder() -> FirmwareBuilder:
    """Builder whose diagnostics step is a no-op."""
    return FirmwareBuilder(NO_DIAGNOSTICS)
