"""The firmware package — a fixed record of five optional slots.

A package is created empty by a builder and filled one slot at a time.
Slots are independent of each other, there is no removal operation, and
every setter is total: passing ``None`` simply leaves the slot empty.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from firmpack.core.components import (
    Bootloader,
    Component,
    DebugLog,
    DiagModule,
    MainApp,
    VersionString,
)


@dataclass(slots=True, eq=False)
class FirmwarePackage:
    """Aggregate assembled by a builder.

    Each attribute is either ``None`` or exactly one marker instance of
    the matching type.  Attribute names match :attr:`Component.slot`.
    """

    bootloader: Bootloader | None = None
    main_app: MainApp | None = None
    diag_module: DiagModule | None = None
    debug_log: DebugLog | None = None
    version_string: VersionString | None = None

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_bootloader(self, bootloader: Bootloader | None) -> None:
        self.bootloader = bootloader

    def set_main_app(self, main_app: MainApp | None) -> None:
        self.main_app = main_app

    def set_diag_module(self, diag_module: DiagModule | None) -> None:
        self.diag_module = diag_module

    def set_debug_log(self, debug_log: DebugLog | None) -> None:
        self.debug_log = debug_log

    def set_version_string(self, version_string: VersionString | None) -> None:
        self.version_string = version_string

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, component: Component) -> object | None:
        """Return the marker held in *component*'s slot, or ``None``."""
        return getattr(self, component.slot)

    def has(self, component: Component) -> bool:
        return self.get(component) is not None

    def present(self) -> tuple[Component, ...]:
        """Occupied slots, in slot order."""
        return tuple(component for component in Component if self.has(component))

    # ------------------------------------------------------------------
    # Status report
    # ------------------------------------------------------------------

    def status_lines(self) -> list[str]:
        """One ``"has <name>"`` line per occupied slot, in slot order.

        Meant for people reading a terminal, not for machine parsing.
        An empty package yields an empty list.
        """
        return [f"has {component.display_name}" for component in self.present()]

    def print_status(self, out: TextIO | None = None) -> None:
        """Write :meth:`status_lines` to *out* (``sys.stdout`` by default)."""
        stream = out if out is not None else sys.stdout
        for line in self.status_lines():
            stream.write(f"{line}\n")
