#!/usr/bin/env python3
"""
CLI entry point (modular-console command).

Loads the configured modules, wires their commands into one console
application and runs it with the remaining arguments:

    modular-console --module myapp.modules:BillingModule invoice:send 42
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cleo.application import Application
from cleo.io.inputs.argv_input import ArgvInput

from modular_console.config import ConsoleConfig, load_config
from modular_console.console import ConsoleCommandsSetup
from modular_console.exceptions import ConfigError, ConsoleError
from modular_console.framework import ModularApp, ModularAppBuilder
from modular_console.helpers import import_string
from modular_console.logging_config import configure_logging

PROG = "modular-console"


def build_console_app(module_classes: Sequence[type], config: Optional[ConsoleConfig] = None) -> ModularApp:
    """Build an app whose modules contribute commands to one console Application."""
    config = config or ConsoleConfig()
    return (
        ModularAppBuilder()
        .with_config(config)
        .with_power_setup(ConsoleCommandsSetup(config))
        .with_modules(*module_classes)
        .build()
    )


# Launcher options that take a value
LAUNCHER_OPTIONS = ("--config", "--module")


def _split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv into launcher options and the part handed to the console.

    Launcher options are only recognized before anything else, so a
    command may declare its own --config or --module option.
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in LAUNCHER_OPTIONS:
            i += 2
        elif token.startswith(tuple(f"{opt}=" for opt in LAUNCHER_OPTIONS)):
            i += 1
        else:
            break
    return argv[:i], argv[i:]


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    launcher_argv, rest = _split_argv(argv)
    parser = argparse.ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a JSON config file")
    parser.add_argument("--module", dest="modules", action="append", default=[],
                        metavar="IMPORT", help="Module class to load (package.module:ClassName)")
    return parser.parse_args(launcher_argv), rest


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    args, rest = _parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(config.get("log_level"))

    try:
        module_classes = [import_string(spec) for spec in [*config.get("modules"), *args.modules]]
        app = build_console_app(module_classes, config)
    except ConsoleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    console = app.get(Application)
    console.auto_exits(False)
    return console.run(ArgvInput([PROG, *rest]))


if __name__ == "__main__":
    sys.exit(main())
