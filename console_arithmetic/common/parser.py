"""Read and validate tokens typed at the console."""
from collections import deque
from typing import Deque, TextIO

from console_arithmetic.common.models import Selection


class InvalidSelectionError(ValueError):
    """The menu choice is not an integer."""


class SelectionOutOfRangeError(ValueError):
    """The menu choice is an integer but does not name a menu entry."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"Menu choice {value} is outside {Selection.ADD.value}..{Selection.EXIT.value}"
        )


class InvalidOperandError(ValueError):
    """An operand could not be read as a number."""

    def __init__(self, token: str, position: str) -> None:
        self.token = token
        self.position = position
        super().__init__(f"Invalid {position} operand: {token!r}")


class TokenReader:
    """
    Whitespace-delimited token reader over a line-oriented text stream.

    Tokens are consumed one at a time, so several values typed on one line
    are picked up by successive reads. After a bad token, ``discard_line``
    drops whatever is left on that line.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._pending: Deque[str] = deque()

    def next_token(self) -> str:
        """
        Return the next token, reading new lines from the stream as needed.

        :return: Next non-blank token
        :rtype: str
        :raises EOFError: If the stream is exhausted
        """
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise EOFError("End of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        """Forget the tokens left on the current line."""
        self._pending.clear()


class InputParser:
    """Convert raw console tokens into validated values."""

    @staticmethod
    def _parse_int(token: str) -> int:
        # int() accepts digit separators such as "1_000"; console input does not
        if "_" in token:
            raise ValueError(f"Not an integer: {token!r}")
        return int(token)

    @staticmethod
    def parse_selection(token: str) -> Selection:
        """
        Parse a menu choice.

        :param str token: Raw token typed by the user

        :return: The matching menu entry
        :rtype: Selection
        :raises InvalidSelectionError: If the token is not an integer
        :raises SelectionOutOfRangeError: If the integer is not a menu number
        """
        try:
            value = InputParser._parse_int(token)
        except ValueError as exc:
            raise InvalidSelectionError(f"Invalid menu choice: {token!r}") from exc

        try:
            return Selection(value)
        except ValueError as exc:
            raise SelectionOutOfRangeError(value) from exc

    @staticmethod
    def parse_operand(token: str, position: str) -> float:
        """
        Parse one operand.

        :param str token: Raw token typed by the user
        :param str position: Which operand is being read ("first" or "second")

        :return: Operand value
        :rtype: float
        :raises InvalidOperandError: If the token is not a number
        """
        try:
            if "_" in token:
                raise ValueError(f"Not a number: {token!r}")
            return float(token)
        except ValueError as exc:
            raise InvalidOperandError(token, position) from exc

    @staticmethod
    def parse_guess(token: str) -> int:
        """Parse a guess for the guessing game, raising ValueError when it is not an integer."""
        return InputParser._parse_int(token)
