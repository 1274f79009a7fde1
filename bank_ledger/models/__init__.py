"""Domain models for the account ledger."""

from bank_ledger.models.base import ATM, AccountId, Branch, Client, OperationLocation
from bank_ledger.models.enums import TransactionType, TransferStatus
from bank_ledger.models.transaction import Deposit, Transaction, Transfer, Withdrawal

__all__ = [
    "ATM",
    "AccountId",
    "Branch",
    "Client",
    "Deposit",
    "OperationLocation",
    "Transaction",
    "TransactionType",
    "Transfer",
    "TransferStatus",
    "Withdrawal",
]
