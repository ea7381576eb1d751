"""
THEME LOCATOR — Errors
Typed failures raised by the locator and the settings layer.
"""

from __future__ import annotations


class LocatorError(Exception):
    """Base class for every error raised by theme_locator."""


class PathTraversalError(LocatorError, ValueError):
    """The resource path contains a '..' segment."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f'File name "{resource}" contains invalid characters (..).')


class InvalidResourceError(LocatorError, ValueError):
    """The resource name cannot be parsed."""

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        self.reason = reason
        super().__init__(f'Invalid resource name "{resource}": {reason}')


class ResourceNotFoundError(LocatorError, LookupError):
    """No candidate path exists on disk."""

    def __init__(self, resource: str, message: str | None = None) -> None:
        self.resource = resource
        super().__init__(message or f'Unable to find file "{resource}".')


class UnknownModuleError(ResourceNotFoundError):
    """The module could not be resolved and no other tier produced a file."""

    def __init__(self, resource: str, module: str) -> None:
        self.module = module
        super().__init__(
            resource,
            f'Unable to find file "{resource}": module "{module}" does not exist or is not registered.',
        )


class SettingsError(LocatorError):
    """The settings file could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid settings file {path}: {reason}")
