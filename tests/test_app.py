#!/usr/bin/env python3
"""
End-to-end tests: modules built into an app with ConsoleCommandsSetup.
"""

import pytest
from cleo.application import Application
from cleo.testers.command_tester import CommandTester

from modular_console import (
    ConsoleCommandsSetup,
    ModularAppBuilder,
    ServiceNotFoundError,
    UnknownCommandError,
)
from modular_console.exceptions import ContainerResolutionError, InvalidModuleError
from modular_console.framework import ExportsComponents, PowerModule, exports_components

from console_stubs import (
    ACommand,
    FirstXModule,
    GreeterModule,
    GreetCommand,
    ModuleThatExportsConsoleApplication,
    ModuleWithCommands,
    ModuleWithGreetCommand,
    ModuleWithoutCommands,
    NotACommand,
    SecondXModule,
)


def build(*modules, setup=None):
    return (
        ModularAppBuilder()
        .with_power_setup(setup or ConsoleCommandsSetup())
        .with_modules(*modules)
        .build()
    )


def run_command(console, name):
    tester = CommandTester(console.get(name))
    status = tester.execute()
    return status, tester.io.fetch_output().strip()


# ============================================================================
# Application Registration Tests
# ============================================================================

class TestConsoleApplication:
    """Tests for the Application placed in the root container."""

    def test_app_has_console_application(self):
        app = build()
        assert app.has(Application)
        assert isinstance(app.get(Application), Application)

    def test_no_commands_when_module_exports_none(self):
        app = build(ModuleWithoutCommands)
        console = app.get(Application)

        assert not console.has("a-command")
        assert not console.has("b-command")
        assert app.has(NotACommand)

    def test_preregistered_application_is_reused(self):
        setup = ConsoleCommandsSetup()
        app = build(ModuleThatExportsConsoleApplication, ModuleWithCommands, setup=setup)
        console = app.get(Application)

        assert console.name == "Pre-registered Console App"
        assert console is app.get(Application)
        assert console.has("a-command")

    def test_two_setups_share_one_application(self):
        first, second = ConsoleCommandsSetup(), ConsoleCommandsSetup()
        app = (
            ModularAppBuilder()
            .with_power_setup(first, second)
            .with_modules(ModuleWithCommands)
            .build()
        )

        assert first.is_installed and second.is_installed
        assert app.get(Application).has("a-command")


# ============================================================================
# Command Execution Tests
# ============================================================================

class TestCommandExecution:
    """Tests for resolving and running exported commands."""

    def test_commands_are_registered(self):
        console = build(ModuleWithCommands).get(Application)

        assert console.has("a-command")
        assert console.has("b-command")
        assert not console.has("undeclared")

    def test_a_command_runs(self):
        console = build(ModuleWithCommands).get(Application)
        assert run_command(console, "a-command") == (0, "ACommand executed")

    def test_b_command_receives_configured_argument(self):
        console = build(ModuleWithCommands).get(Application)
        assert run_command(console, "b-command") == (0, "BCommand executed with injected value")

    def test_dependency_from_another_module_is_autowired(self):
        console = build(GreeterModule, ModuleWithGreetCommand).get(Application)
        assert run_command(console, "greet-command") == (0, "Hi, console!")

    def test_alias_resolves_same_command(self):
        console = build(GreeterModule, ModuleWithGreetCommand).get(Application)
        assert isinstance(console.get("greet"), GreetCommand)

    def test_last_module_wins_on_collision(self):
        console = build(FirstXModule, SecondXModule).get(Application)
        assert run_command(console, "x-command") == (0, "second")

    def test_missing_dependency_fails_at_invocation(self):
        # Building succeeds; the command is only constructed when looked up
        app = build(ModuleWithGreetCommand)
        with pytest.raises(ContainerResolutionError, match="greeter"):
            app.get(Application).get("greet-command")

    def test_unknown_command_is_reported(self):
        setup = ConsoleCommandsSetup()
        console = build(ModuleWithCommands, setup=setup).get(Application)

        assert not console.has("unregistered-name")
        with pytest.raises(UnknownCommandError):
            setup.command_loader.get("unregistered-name")

    def test_commands_are_built_lazily(self, monkeypatch):
        built = []
        original_init = ACommand.__init__

        def tracking_init(self):
            built.append(self)
            original_init(self)

        monkeypatch.setattr(ACommand, "__init__", tracking_init)

        console = build(ModuleWithCommands).get(Application)
        assert built == []

        console.get("a-command")
        assert len(built) == 1


# ============================================================================
# Builder Tests
# ============================================================================

class TestModularAppBuilder:
    """Tests for phase ordering and exports."""

    def test_all_pre_calls_precede_post_calls(self):
        class RecordingSetup:
            def __init__(self):
                self.calls = []

            def setup(self, dto):
                self.calls.append((dto.setup_phase.value, type(dto.power_module).__name__))

        recorder = RecordingSetup()
        ModularAppBuilder().with_power_setup(recorder).with_modules(
            ModuleWithCommands, ModuleWithoutCommands,
        ).build()

        assert recorder.calls == [
            ("pre", "RootModule"),
            ("pre", "ModuleWithCommands"),
            ("pre", "ModuleWithoutCommands"),
            ("post", "RootModule"),
            ("post", "ModuleWithCommands"),
            ("post", "ModuleWithoutCommands"),
        ]

    def test_unregistered_export_raises(self):
        class BrokenModule:
            @staticmethod
            def exports():
                return [ACommand]

            def register(self, container):
                pass

        with pytest.raises(ServiceNotFoundError, match="BrokenModule"):
            build(BrokenModule)

    def test_non_exported_components_stay_private(self):
        class PrivateModule:
            @staticmethod
            def exports():
                return []

            def register(self, container):
                container.set(NotACommand, NotACommand())

        app = build(PrivateModule)
        assert not app.has(NotACommand)


class TestModuleContracts:
    """Tests for the module capability checks."""

    def test_exporting_module_satisfies_protocol(self):
        assert isinstance(ModuleWithCommands(), ExportsComponents)
        assert exports_components(ModuleWithCommands())
        assert exports_components(ModuleWithCommands)

    def test_module_without_exports_is_rejected(self):
        class RegisterOnly:
            def register(self, container):
                pass

        assert isinstance(RegisterOnly(), PowerModule)
        assert not isinstance(RegisterOnly(), ExportsComponents)
        assert not exports_components(RegisterOnly())

    def test_non_module_raises_at_build(self):
        class NotAModule:
            @staticmethod
            def exports():
                return []

        with pytest.raises(InvalidModuleError, match="NotAModule"):
            build(NotAModule)
