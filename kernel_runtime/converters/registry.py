# kernel_runtime/converters/registry.py

from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Dict, Optional, Type, Union

from .base import DECLARATION_ATTR, ConverterFunc, TypeConverter
from .builtin import BUILTIN_CONVERTERS, get_builtin_converter

logger = logging.getLogger(__name__)

ConverterLike = Union[TypeConverter, ConverterFunc]

_MISSING = object()


def _identity(value: Any, culture: Any) -> Optional[str]:
    return value


def _as_function(converter: ConverterLike) -> ConverterFunc:
    if isinstance(converter, TypeConverter):
        return converter.convert_to_str
    return converter


def _load_converter_type(name: str) -> Optional[type]:
    """Import "pkg.module:Class" or "pkg.module.Class"; None when not resolvable."""
    if ":" in name:
        module_name, _, attr = name.partition(":")
    else:
        module_name, _, attr = name.rpartition(".")
    if not module_name or not attr:
        return None

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        logger.debug(f"Converter module '{module_name}' could not be imported: {e}")
        return None

    obj: Any = module
    for part in attr.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj if isinstance(obj, type) else None


class ConverterRegistry:
    """
    Resolves and caches "render to string" functions per runtime type.

    Resolution order:
      1. str -> identity
      2. built-in converter for the exact type
      3. registered converter (searched along the MRO), then a
         @type_converter declaration on the type
    The outcome, including "no converter" (None), is cached per type.
    """

    def __init__(self) -> None:
        self._converters: Dict[type, Optional[ConverterFunc]] = {}
        self._registered: Dict[type, ConverterLike] = {}
        self._lock = threading.Lock()
        # Bumped by register(); a resolution started under an older
        # generation is discarded instead of stored
        self._generation = 0

    def get_converter(self, source_type: type) -> Optional[ConverterFunc]:
        cached = self._converters.get(source_type, _MISSING)
        if cached is not _MISSING:
            return cached

        # Racing callers may both resolve; the first stored function wins.
        while True:
            generation = self._generation
            resolved = self._resolve(source_type)
            with self._lock:
                if generation == self._generation:
                    return self._converters.setdefault(source_type, resolved)
            logger.debug(f"Registrations changed while resolving {source_type.__qualname__}, retrying")

    def register(self, value_type: type, converter: ConverterLike) -> None:
        """
        Register a converter: a TypeConverter instance or class, or a
        (value, culture) callable. TypeConverter classes are instantiated.

        Raises:
            ValueError: `value_type` is not a class, is textual or already has a
                built-in converter, or `converter` is unusable
        """
        if not isinstance(value_type, type):
            raise ValueError(f"value_type must be a class, got {value_type!r}")
        if issubclass(value_type, str) or value_type in BUILTIN_CONVERTERS:
            raise ValueError(f"{value_type.__qualname__} already has a built-in converter")
        if isinstance(converter, type):
            if not issubclass(converter, TypeConverter):
                raise ValueError(f"Converter class {converter.__qualname__} is not a TypeConverter")
            converter = converter()
        if isinstance(converter, TypeConverter) and not converter.can_convert_to_str():
            raise ValueError(f"{type(converter).__qualname__} cannot convert to str")
        if not callable(converter) and not isinstance(converter, TypeConverter):
            raise ValueError(f"Converter for {value_type.__qualname__} must be callable")

        with self._lock:
            if value_type in self._registered:
                logger.warning(
                    f"Replacing converter for {value_type.__qualname__} "
                    f"(previous: {self._registered[value_type]!r})"
                )
            self._registered[value_type] = converter
            self._generation += 1
            # Cached outcomes for the type and its subclasses are now stale
            for cached_type in list(self._converters):
                if issubclass(cached_type, value_type):
                    del self._converters[cached_type]

        logger.debug(f"Registered converter for {value_type.__qualname__}: {converter!r}")

    def is_registered(self, value_type: type) -> bool:
        return value_type in self._registered

    def __contains__(self, source_type: type) -> bool:
        """True when an outcome for `source_type` is cached."""
        return source_type in self._converters

    # ---- Resolution ----
    def _resolve(self, source_type: type) -> Optional[ConverterFunc]:
        if issubclass(source_type, str):
            return _identity

        converter = get_builtin_converter(source_type)
        if converter is not None and converter.can_convert_to_str():
            return converter.convert_to_str

        for base in source_type.__mro__:
            registered = self._registered.get(base)
            if registered is not None:
                logger.debug(f"Converter for {source_type.__qualname__} found via {base.__qualname__}")
                return _as_function(registered)

        declared = self._resolve_declared(source_type)
        if declared is not None:
            return declared.convert_to_str

        logger.debug(f"No converter for {source_type.__qualname__}, using str()")
        return None

    def _resolve_declared(self, source_type: type) -> Optional[TypeConverter]:
        """Instantiate the converter named by @type_converter; never raises."""
        declaration = getattr(source_type, DECLARATION_ATTR, None)
        if declaration is None:
            return None

        if isinstance(declaration, str):
            converter_type = _load_converter_type(declaration)
        else:
            converter_type = declaration
        if not isinstance(converter_type, type):
            logger.debug(f"Declared converter {declaration!r} for {source_type.__qualname__} not found")
            return None

        try:
            converter = converter_type()
        except Exception as e:
            logger.debug(f"Declared converter {converter_type.__qualname__} could not be created: {e}")
            return None

        if not isinstance(converter, TypeConverter):
            logger.debug(f"Declared converter {converter_type.__qualname__} is not a TypeConverter")
            return None

        try:
            capable = converter.can_convert_to_str()
        except Exception as e:
            logger.debug(f"Capability check of {converter_type.__qualname__} failed: {e}")
            return None
        if not capable:
            return None

        return converter


# Global singleton
default_registry = ConverterRegistry()


def register_converter(value_type: type, registry: Optional[ConverterRegistry] = None):
    """
    Decorator to register a TypeConverter class for `value_type`.

    @register_converter(Money)
    class MoneyConverter(TypeConverter): ...
    """
    def decorate(converter_cls: Type[TypeConverter]) -> Type[TypeConverter]:
        (registry or default_registry).register(value_type, converter_cls())
        return converter_cls

    return decorate
