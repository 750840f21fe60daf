"""Tests for the profile-driven builder (core/builder.py).

Every test is a pure call against a fresh builder.
"""

from __future__ import annotations

import itertools

import pytest

from firmpack.core.builder import FirmwareBuilder, full_builder, no_diagnostics_builder
from firmpack.core.components import Component
from firmpack.core.profiles import FULL, MINIMAL, NO_DIAGNOSTICS, BuildProfile
from firmpack.core.protocols import PackageBuilder

_STEPS = {
    Component.BOOTLOADER: "build_bootloader",
    Component.MAIN_APP: "build_main_app",
    Component.DIAG_MODULE: "build_diag_module",
    Component.DEBUG_LOG: "build_debug_log",
    Component.VERSION_STRING: "build_version_string",
}


def _run_all(builder: FirmwareBuilder) -> FirmwareBuilder:
    return (
        builder.build_bootloader()
        .build_main_app()
        .build_diag_module()
        .build_debug_log()
        .build_version_string()
    )


# ---------------------------------------------------------------------------
# Full builder
# ---------------------------------------------------------------------------

class TestFullBuilder:
    @pytest.mark.parametrize("component", list(Component))
    def test_single_step_fills_only_its_slot(self, component: Component) -> None:
        builder = full_builder()
        getattr(builder, _STEPS[component])()

        package = builder.get_package()
        assert package.present() == (component,)

    @pytest.mark.parametrize("component", list(Component))
    def test_steps_return_builder(self, component: Component) -> None:
        builder = full_builder()
        assert getattr(builder, _STEPS[component])() is builder

    def test_step_twice_overwrites(self) -> None:
        builder = full_builder()
        builder.build_main_app()
        first = builder.get_package().main_app
        builder.build_main_app()

        package = builder.get_package()
        assert package.main_app is not None
        assert package.main_app is not first
        assert package.status_lines() == ["has main app"]

    def test_chained_sequence_fills_every_slot(self) -> None:
        package = _run_all(full_builder()).get_package()
        assert package.present() == tuple(Component)

    def test_get_package_before_any_step_is_empty(self) -> None:
        assert full_builder().get_package().status_lines() == []

    def test_get_package_returns_same_reference(self) -> None:
        builder = full_builder()
        package = builder.get_package()
        builder.build_bootloader()
        assert builder.get_package() is package
        assert package.has(Component.BOOTLOADER)

    def test_generic_build_step(self) -> None:
        builder = FirmwareBuilder()
        assert builder.build(Component.DEBUG_LOG) is builder
        assert builder.get_package().present() == (Component.DEBUG_LOG,)

    def test_default_profile_is_full(self) -> None:
        assert FirmwareBuilder().profile is FULL

    def test_satisfies_protocol(self) -> None:
        builder: PackageBuilder = full_builder()
        assert builder.get_package() is not None


# ---------------------------------------------------------------------------
# Step order independence
# ---------------------------------------------------------------------------

class TestStepOrder:
    @pytest.mark.parametrize("profile", [FULL, NO_DIAGNOSTICS, MINIMAL], ids=lambda p: p.name)
    def test_any_permutation_gives_same_occupancy(self, profile: BuildProfile) -> None:
        expected = _run_all(FirmwareBuilder(profile)).get_package().present()

        for order in itertools.permutations(Component):
            builder = FirmwareBuilder(profile)
            for component in order:
                getattr(builder, _STEPS[component])()
            assert builder.get_package().present() == expected


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class TestNoDiagnosticsBuilder:
    def test_full_sequence_skips_diagnostics(self) -> None:
        package = _run_all(no_diagnostics_builder()).get_package()
        assert package.present() == (
            Component.BOOTLOADER,
            Component.MAIN_APP,
            Component.DEBUG_LOG,
            Component.VERSION_STRING,
        )
        assert package.diag_module is None

    def test_disabled_step_still_chains(self) -> None:
        builder = no_diagnostics_builder()
        assert builder.build_diag_module() is builder
        assert builder.get_package().present() == ()

    def test_profile(self) -> None:
        assert no_diagnostics_builder().profile is NO_DIAGNOSTICS


class TestMinimalProfile:
    def test_only_bootloader_and_main_app(self) -> None:
        package = _run_all(FirmwareBuilder(MINIMAL)).get_package()
        assert package.status_lines() == ["has bootloader", "has main app"]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestBuilderLogging:
    def test_logs_built_and_skipped_steps(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="firmpack"):
            no_diagnostics_builder().build_bootloader().build_diag_module()

        messages = [record.getMessage() for record in caplog.records]
        assert "Built bootloader" in messages
        assert any(m.startswith("Skipping diag module") for m in messages)

    def test_repr_names_profile(self) -> None:
        assert repr(FirmwareBuilder(MINIMAL)) == "FirmwareBuilder(profile='minimal')"
