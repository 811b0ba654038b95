"""
Dependency container shared by modules and setup participants.

Keys are usually classes. A key maps to a Definition that is one of:

- an instance, returned as-is;
- a class, built on first use (explicit arguments first, then remaining
  constructor parameters autowired by type hint);
- a factory function, called with the container.

Example:
    container = Container()
    container.set(Greeter)
    container.set(BCommand).add_arguments("injected value")
    container.get(BCommand)
"""

from __future__ import annotations

import functools
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional, get_type_hints

from modular_console.exceptions import ContainerResolutionError, ServiceNotFoundError

logger = logging.getLogger(__name__)

_UNSET: Any = object()


@dataclass(frozen=True)
class Reference:
    """Argument placeholder resolved from the container at build time."""

    key: Hashable


@dataclass
class Definition:
    """How the container produces the value for one key."""

    key: Hashable
    concrete: Optional[type] = None
    factory: Optional[Callable[[Container], Any]] = None
    instance: Any = None
    arguments: list[Any] = field(default_factory=list)
    keyword_arguments: dict[str, Any] = field(default_factory=dict)
    shared: bool = True

    def add_arguments(self, *args: Any, **kwargs: Any) -> Definition:
        """Append constructor arguments. Returns self for chaining."""
        self.arguments.extend(args)
        self.keyword_arguments.update(kwargs)
        return self

    def set_shared(self, shared: bool) -> Definition:
        """Build a new value on every get() when shared is False."""
        self.shared = shared
        return self


def _is_factory(value: Any) -> bool:
    return (
        inspect.isfunction(value)
        or inspect.ismethod(value)
        or isinstance(value, functools.partial)
    )


def _describe(key: Hashable) -> str:
    return getattr(key, "__qualname__", None) or repr(key)


class Container:
    """Key-value store that builds its values on demand."""

    def __init__(self, parent: Optional[Container] = None):
        self._parent = parent
        self._definitions: dict[Hashable, Definition] = {}
        self._instances: dict[Hashable, Any] = {}
        self._resolving: set[Hashable] = set()

    @property
    def parent(self) -> Optional[Container]:
        return self._parent

    def set(self, key: Hashable, value: Any = _UNSET) -> Definition:
        """Register a value, class or factory under key.

        With no value, key itself must be a class and is registered as its
        own implementation. Re-registering a key drops any cached value.
        """
        if value is _UNSET:
            value = key

        if isinstance(value, type):
            definition = Definition(key=key, concrete=value)
        elif _is_factory(value):
            definition = Definition(key=key, factory=value)
        else:
            definition = Definition(key=key, instance=value)

        self._definitions[key] = definition
        self._instances.pop(key, None)
        logger.debug(f"Registered {_describe(key)}")
        return definition

    def has(self, key: Hashable) -> bool:
        """Check this container, then the parent chain."""
        if self.has_local(key):
            return True
        return self._parent is not None and self._parent.has(key)

    def has_local(self, key: Hashable) -> bool:
        try:
            return key in self._definitions
        except TypeError:
            return False

    def get(self, key: Hashable) -> Any:
        """Resolve key to a value, building it if needed.

        Raises:
            ServiceNotFoundError: If key is not registered here or in a parent.
            ContainerResolutionError: If the definition cannot be built.
        """
        if self.has_local(key) and key in self._instances:
            return self._instances[key]

        definition = self._definitions.get(key) if self.has_local(key) else None
        if definition is None:
            if self._parent is not None and self._parent.has(key):
                return self._parent.get(key)
            raise ServiceNotFoundError(f"No entry registered for {_describe(key)}")

        if key in self._resolving:
            raise ContainerResolutionError(f"Circular dependency while resolving {_describe(key)}")

        self._resolving.add(key)
        try:
            value = self._build(definition)
        finally:
            self._resolving.discard(key)

        if definition.shared:
            self._instances[key] = value
        return value

    def _build(self, definition: Definition) -> Any:
        if definition.factory is not None:
            return definition.factory(self)
        if definition.concrete is None:
            return definition.instance
        return self._construct(definition)

    def _resolve_argument(self, value: Any) -> Any:
        if isinstance(value, Reference):
            return self.get(value.key)
        return value

    def _construct(self, definition: Definition) -> Any:
        """Instantiate a class, autowiring parameters not given explicitly."""
        cls = definition.concrete
        args = [self._resolve_argument(a) for a in definition.arguments]
        kwargs = {k: self._resolve_argument(v) for k, v in definition.keyword_arguments.items()}

        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            return cls(*args, **kwargs)

        try:
            hints = get_type_hints(cls.__init__)
        except (NameError, TypeError):
            hints = {}

        positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        remaining = list(signature.parameters.values())
        consumed = 0
        for param in remaining:
            if consumed >= len(args):
                break
            if param.kind in positional:
                consumed += 1
            elif param.kind is inspect.Parameter.VAR_POSITIONAL:
                consumed = len(args)

        for param in remaining[consumed:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.name in kwargs:
                continue
            hint = hints.get(param.name)
            if hint is not None and self.has(hint):
                kwargs[param.name] = self.get(hint)
            elif param.default is not inspect.Parameter.empty:
                continue
            else:
                raise ContainerResolutionError(
                    f"Cannot resolve parameter '{param.name}' of {_describe(cls)}"
                )

        return cls(*args, **kwargs)
