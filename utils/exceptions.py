"""
Custom exception hierarchy for the creational pattern demos.
"""
from typing import Any, Dict, Optional


class CreationalPatternsError(Exception):
    """Base exception for all creational pattern errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Construction Exceptions
class ConstructionError(CreationalPatternsError):
    """Base exception for object construction errors."""
    pass


class BuildError(ConstructionError):
    """Raised when a builder or director is used out of order."""
    pass


class CapacityExceededError(ConstructionError):
    """Raised when a fixed-capacity container is full."""
    pass


# Configuration Exceptions
class ConfigurationError(CreationalPatternsError):
    """Raised when configuration is invalid."""
    pass
