"""Exceptions raised by the navigation core."""


class NavigationError(Exception):
    """Base class for navigation core errors."""


class PoseNotInitializedError(NavigationError):
    """Raised when an operation needs the live pose before any sample arrived."""

    def __init__(self, operation: str = "operation"):
        super().__init__(f"{operation} needs a robot pose, but none has been received yet")
        self.operation = operation


class ConfigError(NavigationError, ValueError):
    """Invalid navigation configuration."""
