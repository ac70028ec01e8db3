"""Test Selection, OperandPair and OperationResult."""
from pydantic import ValidationError
import pytest

from console_arithmetic.common.models import OperandPair, OperationResult, Selection


def test_selection_numbering() -> None:
    """Menu entries are numbered 1 to 7 in menu order."""
    assert [s.value for s in Selection] == list(range(1, 8))
    assert [s.label for s in Selection] == [
        "Add", "Subtract", "Multiply", "Divide", "Modulus", "Power", "Exit",
    ]


def test_only_exit_skips_operands() -> None:
    """Every entry but Exit needs two operands."""
    assert not Selection.EXIT.requires_operands
    assert all(s.requires_operands for s in Selection if s is not Selection.EXIT)


def test_operand_pair_valid() -> None:
    """A valid OperandPair can be created from numbers and numeric strings."""
    pair = OperandPair(first=3, second="4.5")
    assert pair.first == 3.0
    assert pair.second == 4.5


def test_operand_pair_invalid_type() -> None:
    """Non-numeric operands raise a validation error."""
    with pytest.raises(ValidationError):
        OperandPair(first="abc", second=1.0)


def test_operand_pair_is_frozen() -> None:
    """Operands cannot be changed once read."""
    pair = OperandPair(first=1.0, second=2.0)
    with pytest.raises(ValidationError):
        pair.first = 5.0


def test_operation_result_defined() -> None:
    """A result with a value is defined."""
    res = OperationResult(
        selection=Selection.ADD,
        operands=OperandPair(first=3.0, second=4.0),
        value=7.0,
    )
    assert res.is_defined
    assert res.error is None


def test_operation_result_undefined() -> None:
    """A result with an error is undefined."""
    res = OperationResult(
        selection=Selection.DIVIDE,
        operands=OperandPair(first=5.0, second=0.0),
        error="Error: Cannot divide by zero.",
    )
    assert not res.is_defined
    assert res.value is None


@pytest.mark.parametrize("outcome", [
    {},
    {"value": 1.0, "error": "boom"},
])
def test_operation_result_needs_exactly_one_outcome(outcome: dict) -> None:
    """A result is either a value or an error, never both nor neither."""
    with pytest.raises(ValidationError):
        OperationResult(
            selection=Selection.ADD,
            operands=OperandPair(first=1.0, second=2.0),
            **outcome,
        )
