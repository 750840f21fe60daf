"""Protocols (interfaces) consumed by the core layer.

The director depends ONLY on :class:`PackageBuilder`, never on a
concrete builder, so build behaviour can change per step without
touching the director or the client.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from firmpack.core.package import FirmwarePackage

_B = TypeVar("_B", bound="PackageBuilder")


class PackageBuilder(Protocol):
    """Contract for step-by-step firmware package builders.

    Any object implementing these methods satisfies the protocol
    structurally (no explicit inheritance required).

    Every ``build_*`` step takes no input, constructs (or skips) one
    component, attaches it to the builder-owned package, and returns the
    builder itself so calls can be chained::

        builder.build_bootloader().build_main_app().build_version_string()
    """

    def build_bootloader(self: _B) -> _B:
        ...  # pragma: no cover

    def build_main_app(self: _B) -> _B:
        ...  # pragma: no cover

    def build_diag_module(self: _B) -> _B:
        ...  # pragma: no cover

    def build_debug_log(self: _B) -> _B:
        ...  # pragma: no cover

    def build_version_string(self: _B) -> _B:
        ...  # pragma: no cover

    def get_package(self) -> FirmwarePackage:
        """Return the builder-owned package by reference.

        The caller does not own the returned package; further steps on
        the builder keep mutating the same object.
        """
        ...  # pragma: no cover
