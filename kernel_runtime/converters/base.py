# kernel_runtime/converters/base.py

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Type, Union

from babel import Locale

# (value, culture) -> rendered text, or None when the converter declines
ConverterFunc = Callable[[Any, Optional[Locale]], Optional[str]]

# Attribute written by @type_converter on value classes
DECLARATION_ATTR = "__type_converter__"


class TypeConverter(ABC):
    """
    Base class for all converters.

    Contract:
      - Must implement `convert_to_str(value, culture)`.
      - May override `can_convert_to_str()` to opt out at resolution time.
      - Must be constructible without arguments when used through a
        declaration (@type_converter / @register_converter).
    """

    def can_convert_to_str(self) -> bool:
        return True

    @abstractmethod
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        """
        Render `value` for `culture` (None = invariant).

        Returning None lets the renderer fall back to str(value).
        """
        pass


def type_converter(converter: Union[str, Type[TypeConverter]]):
    """
    Class decorator declaring the converter for a value type.

    The converter may be given as a class or as an importable name
    ("package.module:Class" or "package.module.Class"); names are only
    resolved when a value of the decorated type is first rendered.

    @type_converter("myapp.converters:MoneyConverter")
    class Money: ...
    """
    def decorate(cls: type) -> type:
        setattr(cls, DECLARATION_ATTR, converter)
        return cls

    return decorate
