# kernel_runtime/rendering.py
"""
Value -> display string.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from babel import Locale

from .converters.registry import ConverterRegistry, default_registry

logger = logging.getLogger(__name__)


class Renderer:
    """
    Turns a result value into a string using a ConverterRegistry.

    Rendering is total: None renders as "", and any converter failure
    falls back to the value's own str().
    """

    def __init__(self, registry: Optional[ConverterRegistry] = None):
        self.registry = registry if registry is not None else default_registry

    def render(self, value: Any, culture: Optional[Locale] = None) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value

        converted = self._convert(value, culture)
        if converted is not None:
            return converted
        return self._fallback(value)

    def _convert(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        source_type = type(value)
        try:
            converter = self.registry.get_converter(source_type)
            if converter is None:
                return None
            converted = converter(value, culture)
            return None if converted is None else str(converted)
        except Exception as e:
            logger.debug(f"Converter for {source_type.__qualname__} failed: {e}")
            return None

    @staticmethod
    def _fallback(value: Any) -> str:
        try:
            return str(value)
        except Exception as e:
            logger.debug(f"str() failed for {type(value).__qualname__}: {e}")
            return object.__repr__(value)


default_renderer = Renderer()
