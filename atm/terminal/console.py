"""Console keypad, screen and menu used by the ATM."""

import sys
from typing import TextIO

from tabulate import DataRow, TableFormat, tabulate

from atm.models.menu import MenuCommand
from atm.terminal import messages


# Single-space columns so rows read "1 - Inquiry balance".
MENU_FORMAT = TableFormat(
    lineabove=None,
    linebelowheader=None,
    linebetweenrows=None,
    linebelow=None,
    headerrow=DataRow("", " ", ""),
    datarow=DataRow("", " ", ""),
    padding=0,
    with_header_hide=None,
)


class Keypad:
    """Reads whole numbers from an input stream, one token at a time."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdin
        self._tokens: list[str] = []

    def read_integer(self) -> int:
        """
        Block until the next whitespace separated token is available.

        Returns:
            The token parsed as an int

        Raises:
            EOFError: If the stream is exhausted
        """
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("Keypad input exhausted")
            self._tokens = line.split()
        return int(self._tokens.pop(0))


class Screen:
    """Writes ATM text to an output stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def write_line(self, text: str) -> None:
        self.write(text + "\n")

    def display_amount(self, amount: int) -> None:
        self.write(f"{amount}")


class Menu:
    """The ATM's main menu."""

    def render(self) -> str:
        rows = [[command.value, "-", messages.MENU_LABELS[command.value]] for command in MenuCommand]
        table = tabulate(rows, tablefmt=MENU_FORMAT)
        return "\n".join("\t\t" + line.rstrip() for line in table.splitlines())

    def display_main_menu(self, screen: Screen, keypad: Keypad) -> int:
        """Show the menu and return the raw code keyed in."""
        screen.write_line(messages.MENU_TITLE)
        screen.write_line(self.render() + "\n")
        screen.write(messages.INPUT_CHOICE)
        return keypad.read_integer()
