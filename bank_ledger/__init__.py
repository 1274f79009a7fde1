"""In-memory current account ledger with held ATM transfers."""

from bank_ledger.config import DEFAULT_ATM_TRANSFER_LIMIT, BankLedgerConfig, LedgerConfig
from bank_ledger.exceptions import (
    BusinessRuleError,
    ConfigurationError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidTransferError,
    LedgerError,
    UnexpectedStateError,
)
from bank_ledger.ledger import CurrentAccount
from bank_ledger.models import (
    ATM,
    AccountId,
    Branch,
    Client,
    Deposit,
    OperationLocation,
    Transaction,
    TransactionType,
    Transfer,
    TransferStatus,
    Withdrawal,
)

__version__ = "0.1.0"

__all__ = [
    "ATM",
    "AccountId",
    "BankLedgerConfig",
    "Branch",
    "BusinessRuleError",
    "Client",
    "ConfigurationError",
    "CurrentAccount",
    "DEFAULT_ATM_TRANSFER_LIMIT",
    "Deposit",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "InvalidTransferError",
    "LedgerConfig",
    "LedgerError",
    "OperationLocation",
    "Transaction",
    "TransactionType",
    "Transfer",
    "TransferStatus",
    "UnexpectedStateError",
    "Withdrawal",
    "__version__",
]
