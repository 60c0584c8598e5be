"""Execution of ATM transactions against the account store."""

import logging

from atm.models.exceptions import InsufficientBalanceError
from atm.models.transaction import (
    Transaction,
    TransactionKind,
    TransactionStatus,
)
from atm.repositories.account_repo import AccountStore
from atm.terminal import messages
from atm.terminal.console import Keypad, Screen

logger = logging.getLogger(__name__)

# Amount keyed in to abort a deposit or withdrawal.
CANCELED = 0


def prompt_for_amount(keypad: Keypad, screen: Screen) -> int:
    """Ask for an amount; CANCELED means the customer backed out."""
    screen.write(messages.INPUT_AMOUNT)
    return keypad.read_integer()


def checked_withdraw(store: AccountStore, account_number: int, amount: int) -> None:
    """
    Withdraw amount from an account if its balance covers it.

    Args:
        store: The account store holding the account
        account_number: The account to debit
        amount: The amount to withdraw

    Raises:
        InsufficientBalanceError: If amount exceeds the current balance
    """
    balance = store.get_balance(account_number)
    if amount > balance:
        raise InsufficientBalanceError(
            f"Insufficient balance: {balance} available, {amount} requested"
        )
    store.withdraw(account_number, amount)


def execute(
    transaction: Transaction,
    store: AccountStore,
    keypad: Keypad,
    screen: Screen,
) -> TransactionStatus:
    """
    Run one transaction for the current account and report it on screen.

    Deposits and withdrawals prompt for an amount first. A withdrawal that
    exceeds the balance is reported and dropped; the customer goes back to
    the menu to try again.

    Args:
        transaction: The transaction to run
        store: The account store to read and mutate
        keypad: Source of the amount for deposits and withdrawals
        screen: Where the outcome is reported

    Returns:
        The TransactionStatus of the run
    """
    number = transaction.account_number
    amount = 0

    if transaction.kind is TransactionKind.BALANCE_INQUIRY:
        screen.write_line(messages.BALANCE + str(store.get_balance(number)))
        status = TransactionStatus.COMPLETED

    elif transaction.kind is TransactionKind.DEPOSIT:
        amount = prompt_for_amount(keypad, screen)
        if amount == CANCELED:
            screen.write_line(messages.CANCEL_CREDIT)
            status = TransactionStatus.CANCELED
        else:
            store.deposit(number, amount)
            screen.write_line(messages.FINISH_CREDIT)
            status = TransactionStatus.COMPLETED

    elif transaction.kind is TransactionKind.WITHDRAWAL:
        amount = prompt_for_amount(keypad, screen)
        if amount == CANCELED:
            screen.write_line(messages.CANCEL_DEBIT)
            status = TransactionStatus.CANCELED
        else:
            try:
                checked_withdraw(store, number, amount)
            except InsufficientBalanceError as err:
                logger.info("Account %d: %s", number, err)
                screen.write_line(messages.ERR_DEBIT)
                status = TransactionStatus.INSUFFICIENT_BALANCE
            else:
                screen.write_line(messages.FINISH_DEBIT)
                status = TransactionStatus.COMPLETED

    else:
        raise ValueError(f"Unsupported transaction kind: {transaction.kind}")

    logger.info(
        "Account %d: %s amount=%d status=%s",
        number,
        transaction.kind.name.lower(),
        amount,
        status.value,
    )
    return status
