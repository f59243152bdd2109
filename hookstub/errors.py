"""
Error types for the hook stub generator.

Rendering never fails; the only errors raised come from reading the
packaged metadata the render context is built from.
"""

from typing import Optional


class HookStubError(Exception):
    """Base exception class for hook stub errors."""


class MetadataError(HookStubError):
    """Error reading or parsing the packaged metadata file."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.original_exception = original_exception

    def __str__(self) -> str:
        error_info = self.message
        if self.path:
            error_info += f" ({self.path})"
        if self.original_exception:
            error_info += f"\nCaused by: {type(self.original_exception).__name__}: {self.original_exception}"
        return error_info
