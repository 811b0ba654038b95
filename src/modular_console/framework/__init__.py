"""
Minimal module framework: contracts, dependency container and app builder.
"""

from modular_console.framework.app import ModularApp, ModularAppBuilder, RootModule
from modular_console.framework.container import Container, Definition, Reference
from modular_console.framework.contracts import (
    ExportsComponents,
    PowerModule,
    PowerModuleSetup,
    PowerModuleSetupDto,
    SetupPhase,
    exports_components,
)

__all__ = [
    "Container",
    "Definition",
    "ExportsComponents",
    "ModularApp",
    "ModularAppBuilder",
    "PowerModule",
    "PowerModuleSetup",
    "PowerModuleSetupDto",
    "Reference",
    "RootModule",
    "SetupPhase",
    "exports_components",
]
