"""Account data model."""


class Account:
    """Represents a bank account held by the ATM's account store.

    All three fields are read-only; the balance moves only through
    deposit() and withdraw().
    """

    def __init__(self, number: int, pin: int, balance: int):
        self._number = number
        self._pin = pin
        self._balance = balance

    def __repr__(self) -> str:
        return f"Account(number={self._number}, balance={self._balance})"

    @property
    def number(self) -> int:
        return self._number

    @property
    def pin(self) -> int:
        return self._pin

    @property
    def balance(self) -> int:
        return self._balance

    def validate_pin(self, candidate: int) -> bool:
        """Return True if candidate matches the stored PIN."""
        return candidate == self._pin

    def deposit(self, amount: int) -> None:
        self._balance += amount

    def withdraw(self, amount: int) -> None:
        # Callers check amount <= balance before getting here.
        self._balance -= amount

    def get_balance(self) -> int:
        return self._balance
