"""Number guessing game."""
import random
import sys
import time
from typing import Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field, model_validator

from console_arithmetic.common.logger import logger
from console_arithmetic.common.parser import InputParser, TokenReader


class GuessRange(BaseModel):
    """Inclusive bounds the secret number is drawn from."""

    model_config = ConfigDict(frozen=True)

    low: int = Field(default=1, description="Smallest possible secret")
    high: int = Field(default=100, description="Largest possible secret")

    @model_validator(mode="after")
    def low_below_high(self) -> "GuessRange":
        if self.low >= self.high:
            raise ValueError(f"low ({self.low}) must be smaller than high ({self.high})")
        return self


class GuessingGame:
    """
    Guess a secret number with larger/smaller hints.

    The secret is drawn once per game from a ``random.Random`` seeded with
    the wall clock unless an explicit seed is given.
    """

    def __init__(
        self,
        bounds: Optional[GuessRange] = None,
        seed: Optional[int] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.bounds = bounds if bounds is not None else GuessRange()
        self.seed = seed if seed is not None else time.time_ns()
        self.reader = TokenReader(stdin if stdin is not None else sys.stdin)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.secret = random.Random(self.seed).randint(self.bounds.low, self.bounds.high)

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def run(self) -> int:
        """
        Play until the secret is found or the input ends.

        :return: Process exit status
        :rtype: int
        """
        logger.info(f"🎲🏁 Guessing game started with seed {self.seed}")
        self._write("Welcome to the World of Guessing Numbers\n")
        attempts = 0

        while True:
            self._write(f"\nPlease enter your guess between ({self.bounds.low} to {self.bounds.high}): ")
            try:
                token = self.reader.next_token()
            except EOFError:
                self._write("\n")
                logger.info(f"🎲❌ Input ended after {attempts} attempts")
                return 0

            try:
                guess = InputParser.parse_guess(token)
            except ValueError:
                self.stderr.write("Invalid input. Please enter a whole number.\n")
                self.stderr.flush()
                self.reader.discard_line()
                continue

            attempts += 1
            if guess < self.secret:
                self._write("Guess a larger number.\n")
            elif guess > self.secret:
                self._write("Guess a smaller number.\n")
            else:
                self._write(
                    f"Congratulations! You have successfully guessed the number in {attempts} attempts\n"
                )
                break

        self._write("\nBye Bye, Thanks for playing.\n")
        logger.info(f"🎲✅ Secret found in {attempts} attempts")
        return 0
