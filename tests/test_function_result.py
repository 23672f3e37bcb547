from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional, Union

import pytest
from babel import Locale

from kernel_runtime import FunctionResult, TypeMismatchError


def test_absent_value_returns_type_default() -> None:
    result = FunctionResult("noop")
    assert result.get_value(int) == 0
    assert result.get_value(float) == 0.0
    assert result.get_value(bool) is False
    assert result.get_value(Decimal) == Decimal(0)
    assert result.get_value(str) is None
    assert result.get_value(dict) is None
    assert result.get_value() is None


def test_present_value_matching_type() -> None:
    result = FunctionResult("answer", 42)
    assert result.get_value(int) == 42
    assert result.get_value(object) == 42
    assert result.get_value(Any) == 42
    assert result.get_value(Optional[int]) == 42
    assert result.get_value(Union[str, int]) == 42
    assert result.get_value(int | str) == 42
    assert result.get_value((str, int)) == 42


def test_parameterised_generic_checks_origin() -> None:
    result = FunctionResult("items", [1, 2, 3])
    assert result.get_value(List[int]) == [1, 2, 3]
    assert result.get_value(list) == [1, 2, 3]
    with pytest.raises(TypeMismatchError):
        result.get_value(dict[str, int])


def test_mismatched_type_raises_type_mismatch() -> None:
    result = FunctionResult("answer", 42)
    with pytest.raises(TypeMismatchError) as excinfo:
        result.get_value(str)

    err = excinfo.value
    assert isinstance(err, TypeError)
    assert err.actual_type is int
    assert err.requested_type is str
    assert str(err) == "Cannot cast int to str"


def test_get_value_does_not_mutate() -> None:
    payload = {"a": 1}
    result = FunctionResult("f", payload)
    assert result.get_value(dict) is payload
    with pytest.raises(TypeMismatchError):
        result.get_value(list)
    assert result.value is payload
    assert payload == {"a": 1}


def test_value_and_name_are_read_only() -> None:
    result = FunctionResult("f", 1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result.function_name = "g"  # type: ignore[misc]
    assert result.function_name == "f"


def test_metadata_is_created_lazily_and_persists() -> None:
    result = FunctionResult("f")
    assert not result.has_metadata

    found, value = result.try_get_metadata_value("tokens", int)
    assert (found, value) == (False, 0)
    assert not result.has_metadata

    metadata = result.metadata
    assert metadata == {}
    assert result.has_metadata
    metadata["tokens"] = 12
    assert result.metadata is metadata
    assert result.try_get_metadata_value("tokens", int) == (True, 12)


def test_try_get_metadata_value_type_mismatch_reports_not_found() -> None:
    result = FunctionResult("f")
    result.metadata["model"] = "gpt"
    result.metadata["missing"] = None

    assert result.try_get_metadata_value("model", int) == (False, 0)
    assert result.try_get_metadata_value("model", str) == (True, "gpt")
    assert result.try_get_metadata_value("model") == (True, "gpt")
    assert result.try_get_metadata_value("missing", str) == (False, None)
    assert result.try_get_metadata_value("missing") == (False, None)
    assert result.try_get_metadata_value("missing", Optional[str]) == (False, None)
    assert result.try_get_metadata_value("missing", int) == (False, 0)
    assert result.try_get_metadata_value("absent", list) == (False, None)


def test_stored_none_is_reported_as_not_found() -> None:
    result = FunctionResult("f")
    result.metadata["k"] = None
    assert result.try_get_metadata_value("k") == (False, None)
    assert result.try_get_metadata_value("k", Any) == (False, None)
    assert result.try_get_metadata_value("k", object) == (False, None)


def test_metadata_can_be_replaced_wholesale() -> None:
    result = FunctionResult("f")
    result.metadata["old"] = 1
    result.metadata = {"new": 2}
    assert result.metadata == {"new": 2}


def test_control_flags_are_independent() -> None:
    result = FunctionResult("f")
    assert not result.is_cancellation_requested
    assert not result.is_skip_requested
    assert not result.is_repeat_requested

    result.is_skip_requested = True
    result.is_repeat_requested = True
    assert not result.is_cancellation_requested
    assert result.is_skip_requested and result.is_repeat_requested

    result.is_cancellation_requested = True
    result.is_skip_requested = False
    assert result.is_cancellation_requested
    assert not result.is_skip_requested
    assert result.is_repeat_requested


def test_culture_defaults_to_invariant_and_can_be_overridden() -> None:
    result = FunctionResult("f", 1.5)
    assert result.culture is None

    result = FunctionResult("f", 1.5, "de-DE")
    assert result.culture == Locale("de", "DE")
    assert str(result) == "1,5"

    result.culture = None
    assert str(result) == "1.5"

    result.culture = Locale.parse("fr_FR")
    assert str(result) == "1,5"


def test_unknown_culture_is_rejected() -> None:
    with pytest.raises(ValueError):
        FunctionResult("f", 1, "definitely not a culture")


def test_to_dict_snapshot() -> None:
    result = FunctionResult("sum", 3.5, "de_DE")
    result.is_repeat_requested = True
    result.metadata["attempt"] = 2

    snapshot = result.to_dict()
    assert snapshot == {
        "function_name": "sum",
        "value": "3,5",
        "culture": "de_DE",
        "is_cancellation_requested": False,
        "is_skip_requested": False,
        "is_repeat_requested": True,
        "metadata": {"attempt": 2},
    }
    snapshot["metadata"]["attempt"] = 3
    assert result.metadata["attempt"] == 2


def test_to_dict_does_not_create_metadata() -> None:
    result = FunctionResult("f")
    assert result.to_dict()["metadata"] == {}
    assert not result.has_metadata
