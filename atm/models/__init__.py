"""Data models for the ATM."""

from .account import Account
from .menu import MenuCommand
from .transaction import (
    Transaction,
    TransactionKind,
    TransactionStatus,
)
from .exceptions import (
    AtmError,
    AccountNotFoundError,
    DuplicateAccountError,
    AuthenticationError,
    InsufficientBalanceError,
    InvalidMenuChoiceError,
)

__all__ = [
    "Account",
    "MenuCommand",
    "Transaction",
    "TransactionKind",
    "TransactionStatus",
    "AtmError",
    "AccountNotFoundError",
    "DuplicateAccountError",
    "AuthenticationError",
    "InsufficientBalanceError",
    "InvalidMenuChoiceError",
]
