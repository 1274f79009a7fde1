"""Enumeration types for ledger records."""

from enum import Enum


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"


class TransferStatus(str, Enum):
    PENDING = "PENDING"
    FINISHED = "FINISHED"
    CANCELED = "CANCELED"
