# kernel_runtime/core/__init__.py
"""
Result abstraction: value, control flags, metadata, culture
"""
from .culture import CultureLike, INVARIANT_CULTURE, resolve_culture
from .errors import ErrorType, KernelRuntimeError, ResourceUnavailableError, TypeMismatchError
from .result import FunctionResult

__all__ = [
    # 结果
    "FunctionResult",
    # 区域设置
    "CultureLike",
    "INVARIANT_CULTURE",
    "resolve_culture",
    # 错误处理
    "ErrorType",
    "KernelRuntimeError",
    "ResourceUnavailableError",
    "TypeMismatchError",
]
