"""
Name-based registries for selecting pattern variants at construction time.
"""
from abc import ABC
from typing import Any, Dict, Type
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)


class Factory(ABC):
    """Abstract registry factory base class."""

    _registry: Dict[str, Type] = {}

    @classmethod
    def register(cls, name: str, implementation: Type):
        """Register an implementation with a name."""
        cls._registry[name] = implementation
        logger.debug(f"Registered {name} in {cls.__name__}")

    @classmethod
    def create(cls, name: str, **kwargs) -> Any:
        """Create an instance by name."""
        if name not in cls._registry:
            raise ConfigurationError(
                f"Unknown type: {name}",
                details={'available_types': list(cls._registry.keys())}
            )

        implementation = cls._registry[name]
        return implementation(**kwargs)

    @classmethod
    def list_available(cls) -> list:
        """List all registered implementations."""
        return list(cls._registry.keys())


class BuilderFactory(Factory):
    """Factory for creating pizza builders."""
    _registry: Dict[str, Type] = {}


class ShapeFactoryRegistry(Factory):
    """Factory for creating shape factories."""
    _registry: Dict[str, Type] = {}


def register_builder(name: str):
    """Decorator for registering pizza builders."""
    def decorator(cls):
        BuilderFactory.register(name, cls)
        return cls
    return decorator


def register_shape_factory(name: str):
    """Decorator for registering shape factories."""
    def decorator(cls):
        ShapeFactoryRegistry.register(name, cls)
        return cls
    return decorator
