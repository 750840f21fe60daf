"""Core layer: the firmware domain model and the build pipeline.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from firmpack.core.builder import FirmwareBuilder, full_builder, no_diagnostics_builder
from firmpack.core.components import (
    Bootloader,
    Component,
    DebugLog,
    DiagModule,
    MainApp,
    VersionString,
)
from firmpack.core.director import BUILD_ORDER, Director, DirectorState
from firmpack.core.package import FirmwarePackage
from firmpack.core.profiles import (
    DEFAULT_PROFILE,
    FULL,
    MINIMAL,
    NO_DIAGNOSTICS,
    PROFILES,
    BuildProfile,
    get_profile,
)
from firmpack.core.protocols import PackageBuilder

__all__: list[str] = [
    "BUILD_ORDER",
    "DEFAULT_PROFILE",
    "FULL",
    "MINIMAL",
    "NO_DIAGNOSTICS",
    "PROFILES",
    "Bootloader",
    "BuildProfile",
    "Component",
    "DebugLog",
    "DiagModule",
    "Director",
    "DirectorState",
    "FirmwareBuilder",
    "FirmwarePackage",
    "MainApp",
    "PackageBuilder",
    "VersionString",
    "full_builder",
    "get_profile",
    "no_diagnostics_builder",
]
