"""Tests for component markers and the slot enumeration (core/components.py)."""

from __future__ import annotations

import pytest

from firmpack.core.components import (
    Bootloader,
    Component,
    DebugLog,
    DiagModule,
    MainApp,
    VersionString,
)


class TestMarkers:
    @pytest.mark.parametrize(
        "marker_type",
        [Bootloader, MainApp, DiagModule, DebugLog, VersionString],
    )
    def test_compare_by_identity(self, marker_type: type) -> None:
        a = marker_type()
        b = marker_type()
        assert a == a
        assert a != b

    def test_carry_no_attributes(self) -> None:
        with pytest.raises(AttributeError):
            Bootloader().size = 4096  # type: ignore[attr-defined]


class TestComponent:
    def test_slot_order(self) -> None:
        assert list(Component) == [
            Component.BOOTLOADER,
            Component.MAIN_APP,
            Component.DIAG_MODULE,
            Component.DEBUG_LOG,
            Component.VERSION_STRING,
        ]

    def test_display_names(self) -> None:
        assert [c.display_name for c in Component] == [
            "bootloader",
            "main app",
            "diag module",
            "debug log",
            "version string",
        ]

    def test_slot_names(self) -> None:
        assert Component.MAIN_APP.slot == "main_app"
        assert Component.VERSION_STRING.slot == "version_string"

    def test_new_marker_matches_type(self) -> None:
        for component in Component:
            assert isinstance(component.new_marker(), component.marker_type)

    def test_new_marker_is_fresh(self) -> None:
        assert Component.DEBUG_LOG.new_marker() is not Component.DEBUG_LOG.new_marker()
