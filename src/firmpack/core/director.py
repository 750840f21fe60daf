"""Director — runs builder steps in a fixed order.

The director holds a non-owning reference to any
:class:`~firmpack.core.protocols.PackageBuilder` and knows nothing about
which steps the builder actually honours.

The order (bootloader, main app, diagnostics, debug log, version
string) mirrors a plausible flashing order.  Nothing validates it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Generic, TypeVar

from firmpack.core.components import Component
from firmpack.core.protocols import PackageBuilder

logger = logging.getLogger(__name__)

B = TypeVar("B", bound=PackageBuilder)

BUILD_ORDER: tuple[Component, ...] = (
    Component.BOOTLOADER,
    Component.MAIN_APP,
    Component.DIAG_MODULE,
    Component.DEBUG_LOG,
    Component.VERSION_STRING,
)
"""Sequence of steps performed by :meth:`Director.construct`."""


class DirectorState(Enum):
    IDLE = "idle"
    DONE = "done"


class Director(Generic[B]):
    """Sequences the five build steps against one builder."""

    def __init__(self, builder: B) -> None:
        self._builder: B = builder
        self._state: DirectorState = DirectorState.IDLE

    @property
    def builder(self) -> B:
        return self._builder

    @property
    def state(self) -> DirectorState:
        return self._state

    def construct(self) -> B:
        """Invoke every step in :data:`BUILD_ORDER` and return the builder.

        Moves the director from ``IDLE`` to ``DONE``.  Calling it again
        re-runs the steps against the same builder, overwriting slots;
        the state stays ``DONE``.
        """
        logger.debug("Constructing with %r", self._builder)
        builder: PackageBuilder = self._builder
        for component in BUILD_ORDER:
            builder = getattr(builder, f"build_{component.slot}")()
        self._state = DirectorState.DONE
        logger.debug("Construction done")
        return self._builder
