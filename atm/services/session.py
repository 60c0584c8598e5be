"""ATM session state machine."""

import logging
from dataclasses import dataclass
from enum import Enum

from atm.models.exceptions import AuthenticationError, InvalidMenuChoiceError
from atm.models.menu import MenuCommand
from atm.models.transaction import Transaction, TransactionKind
from atm.repositories.account_repo import AccountStore
from atm.services.transactions import execute
from atm.terminal import messages
from atm.terminal.console import Keypad, Menu, Screen

logger = logging.getLogger(__name__)

# Exit status returned once the customer terminates the ATM.
EXIT_SUCCESS = 0

NO_ACCOUNT = 0


class SessionState(Enum):
    """States of the ATM session loop."""

    UNAUTHENTICATED = "unauthenticated"
    MENU_LOOP = "menu_loop"
    TERMINATED = "terminated"


@dataclass
class Session:
    """The customer currently using the ATM, if any."""

    current_account_number: int = NO_ACCOUNT
    authenticated: bool = False
    state: SessionState = SessionState.UNAUTHENTICATED

    def login(self, number: int) -> None:
        self.current_account_number = number
        self.authenticated = True
        self.state = SessionState.MENU_LOOP

    def reset(self) -> None:
        """Forget the current customer so the next one can authenticate."""
        self.current_account_number = NO_ACCOUNT
        self.authenticated = False
        self.state = SessionState.UNAUTHENTICATED


class AtmMachine:
    """Drives authentication and the main menu against an account store."""

    def __init__(
        self,
        store: AccountStore,
        keypad: Keypad,
        screen: Screen,
        menu: Menu | None = None,
        session: Session | None = None,
    ):
        """
        Initialize the ATM with its collaborators.

        Args:
            store: The accounts customers can authenticate against
            keypad: Source of every number the customer keys in
            screen: Where prompts and outcomes are written
            menu: The main menu (default: Menu())
            session: Starting session (default: unauthenticated)
        """
        self._store = store
        self._keypad = keypad
        self._screen = screen
        self._menu = menu if menu is not None else Menu()
        self.session = session if session is not None else Session()

    def run(self) -> int:
        """
        Serve customers until one of them terminates the ATM.

        Returns:
            The process exit status
        """
        while self.session.state is not SessionState.TERMINATED:
            self._screen.write_line(messages.WELCOME)
            while not self.session.authenticated:
                self.authenticate_user()

            if self.perform_transactions() is SessionState.TERMINATED:
                break

            self._screen.write_line(messages.GOODBYE)

        logger.info("ATM terminated")
        return EXIT_SUCCESS

    def authenticate_user(self) -> bool:
        """Prompt for account number and PIN, and log the customer in on a match."""
        self._screen.write(messages.INPUT_NUMBER)
        number = self._keypad.read_integer()
        self._screen.write(messages.INPUT_PIN)
        pin = self._keypad.read_integer()

        try:
            self._store.require_authenticated(number, pin)
        except AuthenticationError:
            logger.info("Authentication failed for account %d", number)
            self._screen.write_line(messages.ERR_AUTH)
            return False

        self.session.login(number)
        logger.info("Session started for account %d", number)
        return True

    def perform_transactions(self) -> SessionState:
        """Run menu commands until the customer exits or terminates."""
        while self.session.state is SessionState.MENU_LOOP:
            command = self._menu.display_main_menu(self._screen, self._keypad)
            self.dispatch(command)
        return self.session.state

    def dispatch(self, code: int) -> SessionState:
        """
        Handle one keyed-in menu code.

        Args:
            code: The raw menu code

        Returns:
            The session state after the command
        """
        try:
            command = MenuCommand.parse(code)
        except InvalidMenuChoiceError:
            self._screen.write_line(messages.ERR_CHOICE)
            return self.session.state

        if command is MenuCommand.EXIT:
            logger.info("Session ended for account %d", self.session.current_account_number)
            self.session.reset()
        elif command is MenuCommand.TERMINATE:
            logger.info("Terminate requested from account %d", self.session.current_account_number)
            self.session.state = SessionState.TERMINATED
        else:
            transaction = Transaction(
                kind=TransactionKind(command.value),
                account_number=self.session.current_account_number,
            )
            execute(transaction, self._store, self._keypad, self._screen)
        return self.session.state
