"""Main menu command codes."""

from enum import Enum

from .exceptions import InvalidMenuChoiceError


class MenuCommand(Enum):
    """Commands offered by the ATM's main menu."""

    BALANCE_INQUIRY = 1
    WITHDRAWAL = 2
    DEPOSIT = 3
    EXIT = 4
    TERMINATE = 5

    @classmethod
    def parse(cls, code: int) -> "MenuCommand":
        """
        Map a keyed-in code to its command.

        Raises:
            InvalidMenuChoiceError: If code is not one of the menu codes
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidMenuChoiceError(f"Unknown menu choice: {code}") from None
