"""Custom exceptions for the ATM."""


class AtmError(Exception):
    """Base exception for all ATM-related errors."""
    pass


class AccountNotFoundError(AtmError):
    """Raised when an account number does not resolve to a stored account."""
    pass


class DuplicateAccountError(AtmError):
    """Raised when two accounts share the same account number."""
    pass


class AuthenticationError(AtmError):
    """Raised when an account number and PIN do not match a stored account."""
    pass


class InsufficientBalanceError(AtmError):
    """Raised when a withdrawal amount exceeds the current balance."""
    pass


class InvalidMenuChoiceError(AtmError):
    """Raised when a menu command is outside the known codes."""
    pass
