"""Account store for the ATM's in-memory accounts."""

import logging
from typing import Iterable

from atm.models.account import Account
from atm.models.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    DuplicateAccountError,
)

logger = logging.getLogger(__name__)


def default_accounts() -> list[Account]:
    """Return fresh copies of the accounts the ATM ships with."""
    return [
        Account(number=1, pin=11, balance=1000),
        Account(number=2, pin=22, balance=2000),
        Account(number=3, pin=33, balance=3000),
    ]


class AccountStore:
    """Fixed set of accounts addressable by account number."""

    def __init__(self, accounts: Iterable[Account]):
        """
        Initialize the store with its accounts.

        Args:
            accounts: The accounts to hold for the lifetime of the store

        Raises:
            DuplicateAccountError: If two accounts share an account number
        """
        self._accounts: dict[int, Account] = {}
        for account in accounts:
            if account.number in self._accounts:
                raise DuplicateAccountError(f"Account {account.number} already exists")
            self._accounts[account.number] = account
        logger.debug("Account store loaded with %d accounts", len(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, number: int) -> bool:
        return self.exists(number)

    def find_by_number(self, number: int) -> Account | None:
        """
        Find an account by account number.

        Args:
            number: The account number to search for

        Returns:
            Account object if found, None otherwise
        """
        return self._accounts.get(number)

    def exists(self, number: int) -> bool:
        return number in self._accounts

    def authenticate(self, number: int, pin: int) -> bool:
        """
        Check an account number and PIN pair.

        Args:
            number: The account number entered by the customer
            pin: The PIN entered by the customer

        Returns:
            True if the account exists and the PIN matches, False otherwise
        """
        account = self.find_by_number(number)
        if account is None:
            return False
        return account.validate_pin(pin)

    def require_authenticated(self, number: int, pin: int) -> Account:
        """
        Return the account for a number and PIN pair.

        Raises:
            AuthenticationError: If the number is unknown or the PIN is wrong
        """
        if not self.authenticate(number, pin):
            raise AuthenticationError(f"Wrong account number or PIN for account {number}")
        return self._accounts[number]

    def get_balance(self, number: int) -> int:
        return self._get_account(number).get_balance()

    def deposit(self, number: int, amount: int) -> None:
        self._get_account(number).deposit(amount)

    def withdraw(self, number: int, amount: int) -> None:
        self._get_account(number).withdraw(amount)

    def _get_account(self, number: int) -> Account:
        # Balance operations only run for numbers that already authenticated.
        account = self.find_by_number(number)
        if account is None:
            raise AccountNotFoundError(f"Account {number} not found")
        return account
