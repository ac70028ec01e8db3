"""Binary arithmetic operations offered by the calculator menu."""
from collections.abc import Callable
import math
import operator
from typing import Dict, Optional

from console_arithmetic.common.logger import logger
from console_arithmetic.common.models import OperandPair, OperationResult, Selection


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

# Error reported when the divisor is zero, per operation
ZERO_DIVISOR_ERRORS: Dict[Selection, str] = {
    Selection.DIVIDE: "Error: Cannot divide by zero.",
    Selection.MODULUS: "Error: Division by zero in modulus operation.",
}

POWER_UNDEFINED_ERROR = "Error: Power is undefined for these operands."


def _signed_infinity(base: float, exponent: float) -> float:
    # Only odd integral exponents keep a negative base negative
    negative = math.copysign(1.0, base) < 0 and exponent.is_integer() and int(exponent) % 2 == 1
    return -math.inf if negative else math.inf


def _power(a: float, b: float) -> float:
    """
    Raise a to the power b, returning IEEE special values instead of raising.

    Overflow gives a signed infinity, zero raised to a negative power gives
    an infinity and any other domain error gives NaN.
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        return _signed_infinity(a, b)
    except ValueError:
        if a == 0.0:
            return _signed_infinity(a, b)
        return math.nan


# Mapping of menu entries to the function computing them
OPERATIONS: Dict[Selection, OperatorFn] = {
    Selection.ADD: operator.add,
    Selection.SUBTRACT: operator.sub,
    Selection.MULTIPLY: operator.mul,
    Selection.DIVIDE: operator.truediv,
    Selection.MODULUS: math.fmod,
    Selection.POWER: _power,
}


class ArithmeticOperations:
    """
    Compute the result of a calculator menu entry.

    Undefined results are not signalled through NaN nor exceptions: they come
    back as an ``OperationResult`` carrying an ``error`` message and no value.

    Undefined cases:
        - Divide or Modulus with a zero divisor
        - Any operation whose result is not a number, e.g. a negative base
          raised to a fractional exponent, or the modulus of an infinity
    """

    @staticmethod
    def _undefined_reason(selection: Selection, operands: OperandPair) -> Optional[str]:
        """
        Tell whether an operation is undefined before computing it.

        :param Selection selection: Requested operation
        :param OperandPair operands: Operands of the operation

        :return: Diagnostic message, or None when the operation can be computed
        :rtype: Optional[str]
        """
        if selection in ZERO_DIVISOR_ERRORS and operands.second == 0.0:
            return ZERO_DIVISOR_ERRORS[selection]
        return None

    @staticmethod
    def compute(selection: Selection, operands: OperandPair) -> OperationResult:
        """
        Apply the selected operation to a pair of operands.

        :param Selection selection: Requested operation, anything but EXIT
        :param OperandPair operands: Operands of the operation

        :return: Defined value or undefined-result diagnostic
        :rtype: OperationResult
        :raises ValueError: If the selection is not an arithmetic operation
        """
        if selection not in OPERATIONS:
            raise ValueError(f"{selection.label} is not an arithmetic operation")

        error = ArithmeticOperations._undefined_reason(selection, operands)

        if error is None:
            try:
                value = OPERATIONS[selection](operands.first, operands.second)
            except ValueError:
                # math.fmod raises on an infinite dividend
                value = math.nan

            if math.isnan(value):
                if selection is Selection.POWER:
                    error = POWER_UNDEFINED_ERROR
                else:
                    error = f"Error: {selection.label} is undefined for these operands."

        if error is not None:
            logger.info(f"🧮❌ {selection.label}({operands.first}, {operands.second}) is undefined")
            return OperationResult(selection=selection, operands=operands, error=error)

        logger.info(f"🧮✅ {selection.label}({operands.first}, {operands.second}) = {value}")
        return OperationResult(selection=selection, operands=operands, value=value)
