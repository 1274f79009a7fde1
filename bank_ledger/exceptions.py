"""Custom exception hierarchy for bank-ledger."""

from decimal import Decimal


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    key = "business.error"


class BusinessRuleError(LedgerError):
    """Raised when an operation is rejected by a business rule."""


class InvalidAmountError(BusinessRuleError):
    """Raised when an amount is not a positive number."""

    key = "exception.invalid.amount"


class InsufficientBalanceError(BusinessRuleError):
    """Raised when a debit exceeds the available balance."""

    key = "exception.insufficient.balance"

    def __init__(self, message: str, balance: Decimal, amount: Decimal) -> None:
        super().__init__(message)
        self.balance = balance
        self.amount = amount


class InvalidTransferError(BusinessRuleError):
    """Raised when a transfer targets its own source account."""

    key = "exception.invalid.transfer"


class UnexpectedStateError(LedgerError):
    """Raised when a transfer is not in the state the operation requires."""

    key = "business.unexpected"


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
