"""
Component registries

Directories of pluggable handler, formatter and builder classes keyed by
name, each holding a default instance.
"""

from typing import Dict, Generic, List, Optional, Type, TypeVar

from logged.builders.base_builder import BaseBuilder
from logged.formatters.base_formatter import BaseFormatter
from logged.handlers.base_handler import BaseHandler

T = TypeVar("T")


class ComponentRegistry(Generic[T]):
    """
    Named directory of component classes plus one default instance.

    Registering an existing name replaces the previous class.
    """

    def __init__(self):
        self._components: Dict[str, Type[T]] = {}
        self._default: Optional[T] = None

    def add(self, name: str, component_class: Type[T]) -> None:
        """
        Register a component class.

        Args:
            name: Registry key
            component_class: Class to register
        """
        self._components[name] = component_class

    def get(self, name: str) -> Optional[Type[T]]:
        """
        Get a registered class by name.

        Args:
            name: Registry key

        Returns:
            Registered class or None if not found
        """
        return self._components.get(name)

    def create(self, name: str, *args, **kwargs) -> T:
        """
        Instantiate a registered class.

        Raises:
            KeyError: If name is not registered
        """
        component_class = self.get(name)
        if component_class is None:
            raise KeyError(f"'{name}' is not registered")
        return component_class(*args, **kwargs)

    def names(self) -> List[str]:
        return list(self._components.keys())

    @property
    def default(self) -> Optional[T]:
        return self._default

    @default.setter
    def default(self, instance: T) -> None:
        self._default = instance

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names()})"


class HandlerRegistry(ComponentRegistry[BaseHandler]):
    """Registry of handler classes; the default handler backs the root fallback."""

    def add_handler(self, name: str, handler_class: Type[BaseHandler]) -> None:
        self.add(name, handler_class)

    def get_handler(self, name: str) -> Optional[Type[BaseHandler]]:
        return self.get(name)

    @property
    def default_handler(self) -> Optional[BaseHandler]:
        return self.default

    @default_handler.setter
    def default_handler(self, handler: BaseHandler) -> None:
        self.default = handler


class FormatterRegistry(ComponentRegistry[BaseFormatter]):
    """Registry of formatter classes."""

    def add_formatter(self, name: str, formatter_class: Type[BaseFormatter]) -> None:
        self.add(name, formatter_class)

    def get_formatter(self, name: str) -> Optional[Type[BaseFormatter]]:
        return self.get(name)

    @property
    def default_formatter(self) -> Optional[BaseFormatter]:
        return self.default

    @default_formatter.setter
    def default_formatter(self, formatter: BaseFormatter) -> None:
        self.default = formatter


class BuilderRegistry(ComponentRegistry[BaseBuilder]):
    """Registry of builder classes; new loggers use the default builder."""

    def add_builder(self, name: str, builder_class: Type[BaseBuilder]) -> None:
        self.add(name, builder_class)

    def get_builder(self, name: str) -> Optional[Type[BaseBuilder]]:
        return self.get(name)

    @property
    def default_builder(self) -> Optional[BaseBuilder]:
        return self.default

    @default_builder.setter
    def default_builder(self, builder: BaseBuilder) -> None:
        self.default = builder
