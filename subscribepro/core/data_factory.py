"""
Data Factory

Builds entity instances of a configured class. The class is resolved and
checked against its capability protocol once, when the factory is created;
`create()` never re-validates.
"""

import importlib
import logging
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_class(instance_class: Union[str, type]) -> type:
    """
    Resolve a class from a class object or a dotted import path

    Raises:
        ConfigurationError: If the path can't be imported or isn't a class
    """
    if isinstance(instance_class, str):
        module_name, _, class_name = instance_class.rpartition(".")
        if not module_name:
            raise ConfigurationError(f"'{instance_class}' is not a dotted class path")
        try:
            module = importlib.import_module(module_name)
            resolved = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise ConfigurationError(f"Unable to import entity class '{instance_class}': {e}") from e
    else:
        resolved = instance_class

    if not isinstance(resolved, type):
        raise ConfigurationError(f"{resolved!r} is not a class")
    return resolved


class DataFactory(Generic[T]):
    """Creates entities of one configured class"""

    def __init__(self, instance_class: Union[str, type], capability: type):
        """
        Args:
            instance_class: Entity class or dotted import path
            capability: runtime_checkable Protocol the class must satisfy

        Raises:
            ConfigurationError: If the class doesn't satisfy `capability`
        """
        resolved = resolve_class(instance_class)
        try:
            satisfied = issubclass(resolved, capability)
        except TypeError as e:
            raise ConfigurationError(f"Can't check {resolved.__name__} against {capability.__name__}: {e}") from e
        if not satisfied:
            raise ConfigurationError(
                f"{resolved.__module__}.{resolved.__name__} must implement {capability.__name__}"
            )

        self.instance_class: Type[T] = resolved
        self.capability = capability
        logger.debug(f"{self.__class__.__name__} configured with {resolved.__name__}")

    def create(self, data: Optional[Mapping[str, Any]] = None) -> T:
        """Build a new entity from a (possibly empty) attribute mapping"""
        return self.instance_class(dict(data or {}))


__all__ = ["DataFactory", "resolve_class"]
