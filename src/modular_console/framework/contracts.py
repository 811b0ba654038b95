"""
Contracts between modules, setup participants and the application builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Hashable, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from modular_console.framework.container import Container


class SetupPhase(Enum):
    """Setup passes, in the order the builder runs them."""

    PRE = "pre"    # collection: runs for every module first
    POST = "post"  # finalization: runs after every PRE call


@runtime_checkable
class PowerModule(Protocol):
    """A module registers its components into its own container."""

    def register(self, container: Container) -> None: ...


@runtime_checkable
class ExportsComponents(Protocol):
    """A module that makes some of its components visible to the application."""

    @staticmethod
    def exports() -> Sequence[Hashable]: ...


@dataclass(frozen=True)
class PowerModuleSetupDto:
    """Everything a setup participant sees for one module in one phase."""

    setup_phase: SetupPhase
    power_module: Any
    root_container: Container
    module_container: Container


@runtime_checkable
class PowerModuleSetup(Protocol):
    """Cross-cutting setup logic invoked once per module per phase."""

    def setup(self, dto: PowerModuleSetupDto) -> None: ...


def exports_components(module: Any) -> bool:
    """Check whether a module (class or instance) exports components."""
    return isinstance(module, ExportsComponents)
