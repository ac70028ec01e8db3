"""Interactive calculator loop."""
import sys
from typing import Optional, TextIO

from console_arithmetic.calculator.operations import ArithmeticOperations
from console_arithmetic.common.logger import logger
from console_arithmetic.common.models import OperandPair, Selection
from console_arithmetic.common.parser import (
    InputParser,
    InvalidOperandError,
    InvalidSelectionError,
    SelectionOutOfRangeError,
    TokenReader,
)

MENU_RULE = "------------------------------"
CHOICE_PROMPT = "\nNow Enter your Choice: "
FIRST_OPERAND_PROMPT = "\nPlease enter the first number: "
SECOND_OPERAND_PROMPT = "Now enter the second number: "
GOODBYE = "Exiting calculator. Goodbye!"


class CalculatorSession:
    """
    Menu-driven calculator reading from a text stream.

    Lifecycle:
        - Shows the menu once, then waits for a menu choice
        - Reads two operands for every arithmetic choice
        - Prints the result, or a diagnostic when it is undefined
        - Stops on the Exit choice or at end of input

    Every malformed token is recovered from locally: the rest of the line is
    dropped and the user is asked for a new menu choice.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.reader = TokenReader(stdin if stdin is not None else sys.stdin)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _diagnose(self, message: str) -> None:
        self.stderr.write(f"{message}\n")
        self.stderr.flush()

    def print_menu(self) -> None:
        """Display the numbered list of menu entries."""
        lines = [
            "\n",
            MENU_RULE,
            "Welcome to Simple Calculator",
            MENU_RULE,
            "Choose one of the following Options:",
            *(f"{selection.value}. {selection.label}" for selection in Selection),
            MENU_RULE,
        ]
        self._write("\n".join(lines) + "\n")

    def prompt_for_choice(self) -> None:
        self._write(CHOICE_PROMPT)

    def read_operands(self) -> Optional[OperandPair]:
        """
        Prompt for and read the two operands of an operation.

        The second operand is not requested when the first one is invalid.

        :return: Both operands, or None if either could not be parsed
        :rtype: Optional[OperandPair]
        :raises EOFError: If the input ends before both operands are read
        """
        values = []
        for position, prompt in (("first", FIRST_OPERAND_PROMPT), ("second", SECOND_OPERAND_PROMPT)):
            self._write(prompt)
            try:
                values.append(InputParser.parse_operand(self.reader.next_token(), position))
            except InvalidOperandError as exc:
                logger.info(f"🔢❌ {exc}")
                self._diagnose(f"Invalid input. Please enter a number for the {exc.position} operand.")
                self.reader.discard_line()
                return None

        return OperandPair(first=values[0], second=values[1])

    def run(self) -> int:
        """
        Run the calculator until the user exits or the input ends.

        :return: Process exit status
        :rtype: int
        """
        logger.info("🧮🏁 Calculator session started")
        self.print_menu()
        self.prompt_for_choice()

        while True:
            try:
                token = self.reader.next_token()
            except EOFError:
                break

            try:
                selection = InputParser.parse_selection(token)
            except InvalidSelectionError as exc:
                logger.info(f"📋❌ {exc}")
                self._diagnose("Invalid input. Please enter a valid menu option.")
                self.reader.discard_line()
                # Full menu again, the screen may be garbled
                self.print_menu()
                self.prompt_for_choice()
                continue
            except SelectionOutOfRangeError as exc:
                logger.info(f"📋❌ {exc}")
                self._diagnose(
                    "Invalid Menu Choice. Please enter a number between "
                    f"{Selection.ADD.value} and {Selection.EXIT.value}."
                )
                self.reader.discard_line()
                self.prompt_for_choice()
                continue

            if selection is Selection.EXIT:
                self._write(f"{GOODBYE}\n")
                logger.info("🧮✅ Calculator session finished")
                return 0

            try:
                operands = self.read_operands()
            except EOFError:
                break

            if operands is None:
                self.prompt_for_choice()
                continue

            result = ArithmeticOperations.compute(selection, operands)
            if result.is_defined:
                self._write(f"\nResult of operation is: {result.value:.2f}\n")
            else:
                self._diagnose(result.error)

            self.prompt_for_choice()

        # End of input is treated as an implicit exit
        self._write("\n")
        logger.info("🧮✅ Calculator session finished at end of input")
        return 0
