"""Transaction data models."""

from dataclasses import dataclass
from enum import Enum


class TransactionKind(Enum):
    """The fixed set of ATM transactions, valued by their menu code."""

    BALANCE_INQUIRY = 1
    WITHDRAWAL = 2
    DEPOSIT = 3


class TransactionStatus(Enum):
    """Outcome of an executed transaction."""

    COMPLETED = "completed"
    CANCELED = "canceled"
    INSUFFICIENT_BALANCE = "insufficient_balance"


@dataclass(frozen=True)
class Transaction:
    """One menu command to run against the current account."""

    kind: TransactionKind
    account_number: int
