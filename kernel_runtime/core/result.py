# kernel_runtime/core/result.py
"""
Function result after execution
"""
from __future__ import annotations

import types
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple, Union, get_args, get_origin

from babel import Locale

from ..rendering import Renderer, default_renderer
from .culture import CultureLike, culture_name, resolve_culture
from .errors import TypeMismatchError

# Value types whose "absent" value is a zero rather than None
_ZERO_DEFAULTS: Dict[type, Any] = {
    int: 0,
    float: 0.0,
    bool: False,
    complex: 0j,
    Decimal: Decimal(0),
}


def default_for(type_: Any) -> Any:
    """Default returned for an absent value requested as `type_`."""
    if isinstance(type_, type):
        return _ZERO_DEFAULTS.get(type_)
    return None


def matches_type(value: Any, type_: Any) -> bool:
    """isinstance() that also understands Any, unions and parameterised generics."""
    if type_ is Any or type_ is object:
        return True
    if isinstance(type_, tuple):
        return any(matches_type(value, t) for t in type_)

    origin = get_origin(type_)
    if origin is Union or origin is types.UnionType:
        return any(matches_type(value, t) for t in get_args(type_))
    if origin is not None:
        type_ = origin

    try:
        return isinstance(value, type_)
    except TypeError:
        return False


class FunctionResult:
    """
    Outcome of a single function invocation.

    The value is fixed at construction. Control flags are plain attributes
    the orchestrator reads and writes; this class does not act on them.
    Metadata is created on first access.
    """

    def __init__(
        self,
        function_name: str,
        value: Any = None,
        culture: CultureLike = None,
        *,
        renderer: Optional[Renderer] = None,
    ):
        self._function_name = function_name
        self._value = value
        self._culture = resolve_culture(culture)
        self._renderer = renderer
        self._metadata: Optional[Dict[str, Any]] = None

        self.is_cancellation_requested = False
        self.is_skip_requested = False
        self.is_repeat_requested = False

    @property
    def function_name(self) -> str:
        return self._function_name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def culture(self) -> Optional[Locale]:
        """Rendering culture; None is the invariant culture."""
        return self._culture

    @culture.setter
    def culture(self, culture: CultureLike) -> None:
        self._culture = resolve_culture(culture)

    @property
    def metadata(self) -> Dict[str, Any]:
        if self._metadata is None:
            self._metadata = {}
        return self._metadata

    @metadata.setter
    def metadata(self, metadata: Mapping[str, Any]) -> None:
        self._metadata = dict(metadata)

    @property
    def has_metadata(self) -> bool:
        return self._metadata is not None

    def get_value(self, type_: Any = object) -> Any:
        """
        Return the value as `type_`.

        An absent value yields the type's default (0 / 0.0 / False for the
        numeric types, None otherwise).

        Raises:
            TypeMismatchError: the value is present but not a `type_`
        """
        if self._value is None:
            return default_for(type_)

        if matches_type(self._value, type_):
            return self._value

        raise TypeMismatchError(type(self._value), type_)

    def try_get_metadata_value(self, key: str, type_: Any = object) -> Tuple[bool, Any]:
        """
        Look up a typed metadata entry.

        Returns (True, value) when `key` exists and holds a non-None `type_`,
        otherwise (False, default). Never raises.
        """
        if self._metadata is not None and key in self._metadata:
            value = self._metadata[key]
            if value is not None and matches_type(value, type_):
                return True, value
        return False, default_for(type_)

    def render(self) -> str:
        renderer = self._renderer or default_renderer
        return renderer.render(self._value, self._culture)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"FunctionResult(function_name={self._function_name!r}, "
            f"value={self._value!r}, culture={culture_name(self._culture)!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "function_name": self._function_name,
            "value": self.render(),
            "culture": culture_name(self._culture),
            "is_cancellation_requested": self.is_cancellation_requested,
            "is_skip_requested": self.is_skip_requested,
            "is_repeat_requested": self.is_repeat_requested,
            "metadata": dict(self._metadata or {}),
        }
