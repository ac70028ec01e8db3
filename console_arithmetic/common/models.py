"""Pydantic models and enumerations shared by the console programs."""
from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Selection(IntEnum):
    """Menu entries of the calculator, numbered as they appear in the menu."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    MODULUS = 5
    POWER = 6
    EXIT = 7

    @property
    def label(self) -> str:
        """Human readable menu label, e.g. ``"Add"``."""
        return self.name.capitalize()

    @property
    def requires_operands(self) -> bool:
        return self is not Selection.EXIT


class OperandPair(BaseModel):
    """The two operands read for a single arithmetic request."""

    model_config = ConfigDict(frozen=True)

    first: float = Field(..., description="Left-hand operand")
    second: float = Field(..., description="Right-hand operand")


class OperationResult(BaseModel):
    """
    Outcome of one arithmetic request.

    Either ``value`` holds the computed number, or ``error`` explains why the
    operation is undefined for the given operands. Never both.
    """

    model_config = ConfigDict(frozen=True)

    selection: Selection = Field(..., description="Operation that was requested")
    operands: OperandPair = Field(..., description="Operands the operation was applied to")
    value: Optional[float] = Field(default=None, description="Computed result when defined")
    error: Optional[str] = Field(default=None, description="Diagnostic when the result is undefined")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Ensure the result is either defined or carries an error."""
        if (self.value is None) == (self.error is None):
            raise ValueError("OperationResult needs exactly one of 'value' or 'error'")
        return self

    @property
    def is_defined(self) -> bool:
        return self.value is not None
