"""
Command-line entrypoint.

Sub-commands:
- calc: menu-driven calculator (default)
- guess: number guessing game

Both programs talk to the console through stdin/stdout; diagnostics and log
records go to stderr.
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from console_arithmetic.calculator.session import CalculatorSession
from console_arithmetic.common.logger import configure_logging, logger
from console_arithmetic.guess.game import GuessingGame, GuessRange


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    command : str
        Program to run, "calc" or "guess".
    log_level : str
        Level of the project logger.
    seed : int, optional
        Seed of the guessing game, wall clock when omitted.
    low, high : int
        Inclusive range of the guessing game secret.
    """

    command: Literal["calc", "guess"] = "calc"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    seed: Optional[int] = Field(default=None, ge=0)
    low: int = 1
    high: int = 100

    @model_validator(mode="after")
    def range_is_not_empty(self) -> "CliArgs":
        """Ensure the guessing range holds at least two numbers."""
        if self.low >= self.high:
            raise ValueError(f"--low ({self.low}) must be smaller than --high ({self.high})")
        return self


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with its two sub-commands.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="console-arithmetic",
        description="Console calculator and number guessing game",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level written to stderr (default: WARNING)",
    )
    parser.set_defaults(command="calc", seed=None, low=1, high=100)

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("calc", help="Run the menu-driven calculator")

    guess = subparsers.add_parser("guess", help="Play the number guessing game")
    guess.add_argument("--seed", type=int, help="Seed of the random secret (default: wall clock)")
    guess.add_argument("--low", type=int, default=1, help="Smallest possible secret")
    guess.add_argument("--high", type=int, default=100, help="Largest possible secret")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, sys.argv when None
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return CliArgs(
            command=args.command or "calc",
            log_level=args.log_level,
            seed=args.seed,
            low=args.low,
            high=args.high,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the selected console program.

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)
    logger.debug(f"Parsed arguments: {cli_args}")

    if cli_args.command == "guess":
        game = GuessingGame(
            bounds=GuessRange(low=cli_args.low, high=cli_args.high),
            seed=cli_args.seed,
        )
        return game.run()

    return CalculatorSession().run()


if __name__ == "__main__":
    sys.exit(main())
