"""Component marker types and the slot enumeration.

The markers carry no data and no behaviour; an instance existing inside
a :class:`~firmpack.core.package.FirmwarePackage` slot is the whole
signal.  They compare by identity, so two separately built bootloaders
are never equal.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

class Bootloader:
    """First-stage loader placeholder."""

    __slots__ = ()


class MainApp:
    """Main application image placeholder."""

    __slots__ = ()


class DiagModule:
    """Optional diagnostics module placeholder."""

    __slots__ = ()


class DebugLog:
    """Optional debug log placeholder."""

    __slots__ = ()


class VersionString:
    """Version string placeholder."""

    __slots__ = ()


Marker = Bootloader | MainApp | DiagModule | DebugLog | VersionString


# ---------------------------------------------------------------------------
# Slot kinds
# ---------------------------------------------------------------------------

class Component(Enum):
    """The five package slots, declared in fixed slot order.

    Each member's value is ``(display_name, marker_type)``.  Iterating
    the enum yields slots in the order the status report uses.
    """

    BOOTLOADER = ("bootloader", Bootloader)
    MAIN_APP = ("main app", MainApp)
    DIAG_MODULE = ("diag module", DiagModule)
    DEBUG_LOG = ("debug log", DebugLog)
    VERSION_STRING = ("version string", VersionString)

    @property
    def display_name(self) -> str:
        """Human-readable name used in ``"has <name>"`` lines."""
        return self.value[0]

    @property
    def marker_type(self) -> type[Marker]:
        return self.value[1]

    @property
    def slot(self) -> str:
        """Attribute name of this component's slot on the package."""
        return self.name.lower()

    def new_marker(self) -> Marker:
        """Allocate a fresh marker instance for this slot."""
        return self.marker_type()
