"""
Helper functions for modular-console.
"""

from __future__ import annotations

import importlib
from typing import Any

from modular_console.exceptions import ModuleImportError


def import_string(path: str) -> Any:
    """Import an object from a 'package.module:attribute' string.

    A dotted path without a colon is split on the last dot instead.
    """
    path = (path or "").strip()
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")

    if not module_name or not attr:
        raise ModuleImportError(f"Invalid import string: {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ModuleImportError(f"Cannot import module '{module_name}': {e}") from e

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ModuleImportError(f"Module '{module_name}' has no attribute '{attr}'") from e
    return obj
