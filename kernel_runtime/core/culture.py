# kernel_runtime/core/culture.py
"""
Culture (locale) context used when rendering values.

``None`` is the invariant culture: values render in Python's canonical
textual forms. Anything else is a Babel ``Locale``.
"""
from __future__ import annotations

from typing import Optional, Union

from babel import Locale, UnknownLocaleError

CultureLike = Union[None, str, Locale]

INVARIANT_CULTURE: Optional[Locale] = None


def resolve_culture(culture: CultureLike) -> Optional[Locale]:
    """
    Normalize a culture identifier.

    Accepts a Babel ``Locale``, an identifier such as ``"en-US"`` or
    ``"de_DE"``, or ``None`` / ``""`` for the invariant culture.

    Raises:
        ValueError: unknown or malformed identifier
    """
    if culture is None or isinstance(culture, Locale):
        return culture

    identifier = culture.strip()
    if not identifier:
        return INVARIANT_CULTURE

    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Unknown culture: {culture!r}") from e


def culture_name(culture: Optional[Locale]) -> str:
    """Identifier of a resolved culture; empty string for invariant."""
    if culture is None:
        return ""
    return str(culture)
