# kernel_runtime/converters/__init__.py
"""
Converter lookup: type -> cached "render to string" function.
"""
from .base import ConverterFunc, TypeConverter, type_converter
from .builtin import BUILTIN_CONVERTERS
from .registry import ConverterRegistry, default_registry, register_converter

__all__ = [
    "ConverterFunc",
    "TypeConverter",
    "type_converter",
    "BUILTIN_CONVERTERS",
    "ConverterRegistry",
    "default_registry",
    "register_converter",
]
