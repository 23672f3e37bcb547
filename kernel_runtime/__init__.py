# kernel_runtime/__init__.py
"""
Kernel Runtime - function results and their rendering
"""
from .config import RuntimeSettings
from .converters import ConverterRegistry, TypeConverter, default_registry, register_converter, type_converter
from .core import FunctionResult, ResourceUnavailableError, TypeMismatchError
from .rendering import Renderer

__all__ = [
    # 结果
    "FunctionResult",
    # 渲染
    "Renderer",
    "ConverterRegistry",
    "TypeConverter",
    "default_registry",
    "register_converter",
    "type_converter",
    # 错误
    "TypeMismatchError",
    "ResourceUnavailableError",
    # 配置
    "RuntimeSettings",
]
