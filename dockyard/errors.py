"""Error hierarchy for container management operations."""

from __future__ import annotations

import asyncio
import json
from typing import ClassVar

__all__ = [
    "DockaError",
    "DockerDaemonNotRunning",
    "ContainerNotFound",
    "ImageNotFound",
    "InvalidInput",
    "PermissionDenied",
    "DockerApiError",
    "DockaIOError",
    "SerializationError",
    "CacheError",
    "UiRenderingError",
    "TaskExecutionError",
    "ConfigurationError",
    "FeatureNotImplemented",
    "InternalError",
    "wrap_exception",
]

_GENERIC_USER_MESSAGE = "An unexpected error occurred. Please try again."


class DockaError(Exception):
    """Base class for every error the package raises."""

    recoverable: ClassVar[bool] = False

    def is_recoverable(self) -> bool:
        """Return True if user action or a retry can typically resolve the error."""
        return self.recoverable

    def user_message(self) -> str:
        """Return a short message suitable for showing to an end user."""
        return _GENERIC_USER_MESSAGE


class _DetailedError(DockaError):
    """An error that carries a free-form description."""

    prefix: ClassVar[str] = ""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class _WrappingError(DockaError):
    """An error that wraps a lower-level exception."""

    prefix: ClassVar[str] = ""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(f"{self.prefix}: {source}")
        self.__cause__ = source


class DockerDaemonNotRunning(DockaError):
    """The Docker daemon is not running or cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            "Docker daemon is not running or not accessible. "
            "Please ensure Docker is installed and running."
        )

    def user_message(self) -> str:
        return "Docker is not running. Please start Docker and try again."


class ContainerNotFound(DockaError):
    """No container has the given name or ID."""

    recoverable = True

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Container '{name}' not found")

    def user_message(self) -> str:
        return f"Container '{self.name}' was not found. It may have been removed."


class ImageNotFound(DockaError):
    """No image has the given name or ID."""

    recoverable = True

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Image '{name}' not found")

    def user_message(self) -> str:
        return f"Image '{self.name}' was not found."


class InvalidInput(_DetailedError):
    """Input failed validation."""

    prefix = "Invalid input"
    recoverable = True

    def user_message(self) -> str:
        return "Invalid input. Please check your command and try again."


class PermissionDenied(DockaError):
    """An operation was refused for lack of privileges."""

    recoverable = True

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Permission denied: {operation}")

    def user_message(self) -> str:
        return "Permission denied. Please check your Docker permissions."


class DockerApiError(_WrappingError):
    """Communication with the Docker API failed."""

    prefix = "Docker API error"
    recoverable = True

    def user_message(self) -> str:
        return "Docker operation failed. Please try again."


class DockaIOError(_WrappingError):
    """A file system or network I/O operation failed."""

    prefix = "IO error"


class SerializationError(_WrappingError):
    """Data could not be serialized or deserialized."""

    prefix = "Serialization error"


class CacheError(_DetailedError):
    """A cache operation failed."""

    prefix = "Cache operation failed"
    recoverable = True

    def user_message(self) -> str:
        return "Cache operation failed. Data will be refreshed."


class UiRenderingError(_DetailedError):
    """The terminal interface could not be rendered."""

    prefix = "UI rendering error"

    def user_message(self) -> str:
        return "Display error occurred. Please resize your terminal."


class TaskExecutionError(_WrappingError):
    """An asynchronous task failed or was cancelled."""

    prefix = "Task execution error"


class ConfigurationError(_DetailedError):
    """Configuration is invalid or incomplete."""

    prefix = "Configuration error"
    recoverable = True


class FeatureNotImplemented(DockaError):
    """The requested feature is not available yet."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"Feature not implemented: {feature}")

    def user_message(self) -> str:
        return f"Feature '{self.feature}' is not yet available."


class InternalError(_DetailedError):
    """An unexpected condition that indicates a bug."""

    prefix = "Internal error"


def wrap_exception(exc: BaseException) -> DockaError:
    """Convert an arbitrary exception into the matching DockaError."""
    if isinstance(exc, DockaError):
        return exc
    if isinstance(exc, json.JSONDecodeError):
        return SerializationError(exc)
    if isinstance(exc, OSError):
        return DockaIOError(exc)
    if isinstance(exc, asyncio.CancelledError):
        return TaskExecutionError(exc)
    wrapped = InternalError(str(exc))
    wrapped.__cause__ = exc
    return wrapped