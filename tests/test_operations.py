"""Test ArithmeticOperations."""
import math

import pytest

from console_arithmetic.calculator.operations import ArithmeticOperations
from console_arithmetic.common.models import OperandPair, Selection


def _compute(selection: Selection, a: float, b: float):
    return ArithmeticOperations.compute(selection, OperandPair(first=a, second=b))


@pytest.mark.parametrize("selection,a,b,expected", [
    (Selection.ADD, 3, 4, 7.0),
    (Selection.SUBTRACT, 10, 2.5, 7.5),
    (Selection.MULTIPLY, -3, 5, -15.0),
    (Selection.DIVIDE, 8, 2, 4.0),
    (Selection.DIVIDE, 1, 3, 1 / 3),
    (Selection.MODULUS, 7.5, 2, 1.5),
    (Selection.MODULUS, -7, 3, -1.0),  # sign of the dividend
    (Selection.MODULUS, 7, -3, 1.0),
    (Selection.POWER, 2, 10, 1024.0),
    (Selection.POWER, 2, -1, 0.5),
    (Selection.POWER, 2, 0.5, math.sqrt(2)),
])
def test_compute_defined(selection: Selection, a: float, b: float, expected: float) -> None:
    """Defined operations return the expected value and no error."""
    result = _compute(selection, a, b)
    assert result.is_defined
    assert result.value == pytest.approx(expected)
    assert result.error is None


@pytest.mark.parametrize("selection,message", [
    (Selection.DIVIDE, "Error: Cannot divide by zero."),
    (Selection.MODULUS, "Error: Division by zero in modulus operation."),
])
@pytest.mark.parametrize("divisor", [0.0, -0.0])
def test_compute_zero_divisor(selection: Selection, message: str, divisor: float) -> None:
    """Divide and Modulus by zero are undefined."""
    result = _compute(selection, 5, divisor)
    assert not result.is_defined
    assert result.error == message


def test_power_negative_base_fractional_exponent() -> None:
    """A negative base with a fractional exponent has no real result."""
    result = _compute(Selection.POWER, -8, 1 / 3)
    assert not result.is_defined
    assert "Power" in result.error


@pytest.mark.parametrize("a,b,expected", [
    (10, 400, math.inf),
    (-10, 401, -math.inf),
    (0, -1, math.inf),
])
def test_power_infinite_results(a: float, b: float, expected: float) -> None:
    """Overflow and poles give infinities instead of raising."""
    result = _compute(Selection.POWER, a, b)
    assert result.is_defined
    assert result.value == expected


def test_modulus_of_infinity_is_undefined() -> None:
    """fmod of an infinite dividend is reported undefined."""
    result = _compute(Selection.MODULUS, math.inf, 2)
    assert not result.is_defined


def test_compute_rejects_exit() -> None:
    """Exit is not an arithmetic operation."""
    with pytest.raises(ValueError):
        _compute(Selection.EXIT, 1, 2)
