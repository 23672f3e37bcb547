# kernel_runtime/core/errors.py
"""
Error taxonomy for the result/rendering core.

Only two failures ever reach a caller:
1. TypeMismatchError - typed value retrieval asked for an incompatible type
2. ResourceUnavailableError - an embedded resource could not be read

Converter resolution and conversion failures are absorbed by the
registry/renderer and never surface here.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorType(str, Enum):
    """Error category carried by every runtime error"""
    TYPE_MISMATCH = "type_mismatch"
    RESOURCE_UNAVAILABLE = "resource_unavailable"


def describe_type(type_: Any) -> str:
    """Readable name for a class, a tuple of classes or a typing construct."""
    if isinstance(type_, tuple):
        return " | ".join(describe_type(t) for t in type_)
    if isinstance(type_, type):
        module = type_.__module__
        if module == "builtins":
            return type_.__qualname__
        return f"{module}.{type_.__qualname__}"
    return repr(type_)


class KernelRuntimeError(Exception):
    """Base class for kernel runtime failures."""

    error_type: ErrorType


class TypeMismatchError(KernelRuntimeError, TypeError):
    """Raised when a stored value cannot be returned as the requested type."""

    error_type = ErrorType.TYPE_MISMATCH

    def __init__(self, actual_type: type, requested_type: Any):
        self.actual_type = actual_type
        self.requested_type = requested_type
        super().__init__(
            f"Cannot cast {describe_type(actual_type)} to {describe_type(requested_type)}"
        )


class ResourceUnavailableError(KernelRuntimeError, FileNotFoundError):
    """Raised when a packaged resource (or its package) cannot be found."""

    error_type = ErrorType.RESOURCE_UNAVAILABLE

    def __init__(self, message: str, resource: Optional[str] = None):
        self.resource = resource
        super().__init__(message)
