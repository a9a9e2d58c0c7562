"""Custom exceptions for money arithmetic."""


class MoneyError(Exception):
    """Base exception for money operations."""
    pass


class InvalidValueError(MoneyError):
    """Raised when one of the specified money values is invalid."""

    def __init__(self, message: str = "one of the specified money values is invalid"):
        super().__init__(message)


class MismatchingCurrencyError(MoneyError):
    """Raised when currency codes don't match."""

    def __init__(self, message: str = "mismatching currency codes"):
        super().__init__(message)


class MoneyFault(RuntimeError):
    """Raised by ``must`` when an operation that could not fail did fail.

    Not a ``MoneyError``: ``except MoneyError`` does not catch it.
    """

    def __init__(self, error: MoneyError):
        super().__init__(f"unexpected money error: {error}")
        self.error = error
