# kernel_runtime/converters/builtin.py
"""
Built-in converters for primitive and well-known value types.

Numbers and dates follow the culture's CLDR data (via Babel); the
invariant culture (None) uses Python's canonical textual forms.
"""
from __future__ import annotations

import math
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, Optional, Type
from urllib.parse import ParseResult, SplitResult

from babel import Locale
from babel.dates import format_date, format_datetime, format_time
from babel.numbers import format_decimal

from .base import TypeConverter


def _format_number(value: Any, culture: Locale) -> str:
    return format_decimal(
        value,
        locale=culture,
        decimal_quantization=False,
        group_separator=False,
    )


def _format_offset(offset: timedelta) -> str:
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


class IntegerConverter(TypeConverter):
    """int covers every signed/unsigned integer width."""

    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        if culture is None:
            return str(int(value))
        return _format_number(value, culture)


class FloatConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "-∞" if value < 0 else "∞"
        if culture is None:
            return str(value)
        return _format_number(value, culture)


class DecimalConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-∞" if value < 0 else "∞"
        if culture is None:
            return format(value, "f")
        return _format_number(value, culture)


class BooleanConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        return "True" if value else "False"


class DateTimeConverter(TypeConverter):
    """
    Naive datetimes are instants; aware datetimes carry their offset.

    A naive value at midnight renders as a date only, and so does an aware
    value at midnight UTC under the invariant culture.
    """

    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        offset = value.utcoffset()
        at_midnight = value.time() == time(0)

        if offset is None:
            if culture is None:
                return value.date().isoformat() if at_midnight else value.isoformat(sep=" ")
            if at_midnight:
                return format_date(value.date(), format="short", locale=culture)
            return format_datetime(value, format="short", locale=culture)

        if culture is None:
            if at_midnight and not offset:
                return value.date().isoformat()
            return value.isoformat(sep=" ")
        text = format_datetime(value, format="short", locale=culture)
        return f"{text} {_format_offset(offset)}"


class DateConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        if culture is None:
            return value.isoformat()
        return format_date(value, format="short", locale=culture)


class TimeConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        if culture is None:
            return value.isoformat()
        return format_time(value, format="short", locale=culture)


class TimeSpanConverter(TypeConverter):
    """Constant format [-][d.]hh:mm:ss[.fffffff], culture independent."""

    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        total = value // timedelta(microseconds=1)
        sign = "-" if total < 0 else ""
        seconds, micros = divmod(abs(total), 1_000_000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        days, hours = divmod(hours, 24)

        text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        if days:
            text = f"{days}.{text}"
        if micros:
            # 100ns ticks
            text = f"{text}.{micros * 10:07d}"
        return sign + text


class GuidConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        return str(value)


class UriConverter(TypeConverter):
    def convert_to_str(self, value: Any, culture: Optional[Locale]) -> Optional[str]:
        return value.geturl()


# Exact runtime type -> converter class. Subclasses such as IntEnum
# do not match.
BUILTIN_CONVERTERS: Dict[type, Type[TypeConverter]] = {
    int: IntegerConverter,
    float: FloatConverter,
    Decimal: DecimalConverter,
    bool: BooleanConverter,
    datetime: DateTimeConverter,
    date: DateConverter,
    time: TimeConverter,
    timedelta: TimeSpanConverter,
    uuid.UUID: GuidConverter,
    ParseResult: UriConverter,
    SplitResult: UriConverter,
}


def get_builtin_converter(source_type: type) -> Optional[TypeConverter]:
    converter_cls = BUILTIN_CONVERTERS.get(source_type)
    if converter_cls is None:
        return None
    return converter_cls()
