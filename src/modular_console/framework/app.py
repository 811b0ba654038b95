"""
Application assembly: modules, setup participants and the root container.

Example:
    app = (
        ModularAppBuilder()
        .with_power_setup(ConsoleCommandsSetup())
        .with_modules(ModuleWithCommands)
        .build()
    )
    console = app.get(Application)
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Optional

from modular_console.config import ConsoleConfig
from modular_console.exceptions import InvalidModuleError, ServiceNotFoundError
from modular_console.framework.container import Container
from modular_console.framework.contracts import (
    PowerModule,
    PowerModuleSetup,
    PowerModuleSetupDto,
    SetupPhase,
    exports_components,
)

logger = logging.getLogger(__name__)


class RootModule:
    """Built-in module loaded before all others; exports the application config."""

    def __init__(self, config: ConsoleConfig):
        self._config = config

    @staticmethod
    def exports() -> list[type]:
        return [ConsoleConfig]

    def register(self, container: Container) -> None:
        container.set(ConsoleConfig, self._config)


class ModularApp:
    """A built application: the root container plus the loaded modules."""

    def __init__(self, container: Container, modules: list[Any], config: ConsoleConfig):
        self.container = container
        self.modules = modules
        self.config = config

    def has(self, key: Hashable) -> bool:
        return self.container.has(key)

    def get(self, key: Hashable) -> Any:
        return self.container.get(key)


class ModularAppBuilder:
    """Collects modules and setup participants, then builds a ModularApp."""

    def __init__(self):
        self._config: Optional[ConsoleConfig] = None
        self._module_classes: list[type[PowerModule]] = []
        self._setups: list[PowerModuleSetup] = []

    def with_config(self, config: ConsoleConfig) -> ModularAppBuilder:
        self._config = config
        return self

    def with_modules(self, *module_classes: type[PowerModule]) -> ModularAppBuilder:
        self._module_classes.extend(module_classes)
        return self

    def with_power_setup(self, *setups: PowerModuleSetup) -> ModularAppBuilder:
        self._setups.extend(setups)
        return self

    def build(self) -> ModularApp:
        """Register every module, then run PRE and POST for every setup.

        All PRE calls finish before the first POST call. Exported keys are
        made resolvable through the root container between the two passes.

        Raises:
            InvalidModuleError: If a module has no register(container) method.
            ServiceNotFoundError: If a module exports a key it never registered.
        """
        config = self._config or ConsoleConfig()
        root = Container()

        loaded: list[tuple[Any, Container]] = []
        modules = [RootModule(config), *(module_class() for module_class in self._module_classes)]
        for module in modules:
            if not isinstance(module, PowerModule):
                raise InvalidModuleError(f"{type(module).__name__} does not define register(container)")
            module_container = Container(parent=root)
            module.register(module_container)
            loaded.append((module, module_container))
            logger.debug(f"Registered module {type(module).__name__}")

        self._run_phase(SetupPhase.PRE, root, loaded)

        for module, module_container in loaded:
            if exports_components(module):
                self._export(module, module_container, root)

        self._run_phase(SetupPhase.POST, root, loaded)

        logger.info(f"Built application with {len(loaded) - 1} module(s)")
        return ModularApp(root, [module for module, _ in loaded[1:]], config)

    def _run_phase(self, phase: SetupPhase, root: Container, loaded: list[tuple[Any, Container]]) -> None:
        for setup in self._setups:
            for module, module_container in loaded:
                setup.setup(PowerModuleSetupDto(
                    setup_phase=phase,
                    power_module=module,
                    root_container=root,
                    module_container=module_container,
                ))

    @staticmethod
    def _export(module: Any, module_container: Container, root: Container) -> None:
        for key in module.exports():
            if not module_container.has_local(key):
                raise ServiceNotFoundError(
                    f"{type(module).__name__} exports {getattr(key, '__name__', key)!r} "
                    f"but does not register it"
                )
            # Lifetime stays with the module container
            root.set(key, lambda _root, key=key: module_container.get(key)).set_shared(False)
