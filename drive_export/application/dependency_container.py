"""
Dependency Container

Registry of the shared adapters and services of one application instance.
"""

import logging
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DependencyNotFoundError(Exception):
    """Raised when a type was never registered."""
    pass


class DependencyContainer:
    """
    Maps an interface (or concrete class) to the instance serving it.

    Every registration is a singleton. The container is filled once by
    build_container() and only read while requests are served.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """
        Register the instance returned for `interface`.

        A second registration for the same type replaces the first.
        """
        self._instances[interface] = implementation
        logger.debug(f"Registered {interface.__name__} -> {type(implementation).__name__}")

    def resolve(self, interface: Type[T]) -> T:
        """
        Return the instance registered for `interface`.

        Raises:
            DependencyNotFoundError: If nothing is registered for it
        """
        try:
            return self._instances[interface]
        except KeyError:
            raise DependencyNotFoundError(
                f"No registration found for type: {interface.__name__}"
            ) from None

    def is_registered(self, interface: Type) -> bool:
        return interface in self._instances
