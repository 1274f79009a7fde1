"""Conversion of ledger records and accounts to JSON-ready dicts."""

from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_ledger.ledger import CurrentAccount
from bank_ledger.models.base import ATM, AccountId, Branch, OperationLocation
from bank_ledger.models.transaction import Transaction


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, CurrentAccount):
        return str(value.id)
    elif isinstance(value, AccountId):
        return str(value)
    elif isinstance(value, OperationLocation):
        return location_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def location_to_dict(location: Any) -> dict:
    """Describe an operation location by kind and number."""
    if isinstance(location, ATM):
        return {"kind": "ATM", "number": location.number}
    if isinstance(location, Branch):
        return {"kind": "BRANCH", "number": location.number}
    return {"kind": "OTHER", "is_atm": bool(location.is_atm)}


def transaction_to_dict(record: Transaction) -> dict:
    """Convert a deposit, withdrawal or transfer record.

    Account references are rendered as their ``branch/number`` id, so
    transfers serialize without following the account back-references.
    Private fields are emitted under their public name (``status``).

    Parameters
    ----------
    record : Transaction
        Record taken from an account log.

    Returns
    -------
    dict
        Serialized record.
    """
    return {f.name.lstrip("_"): serialize_value(getattr(record, f.name)) for f in fields(record)}


def account_to_dict(account: CurrentAccount, include_transactions: bool = False) -> dict:
    """Summarize an account's balance and log sizes."""
    data: dict[str, Any] = {
        "account_id": str(account.id),
        "branch": account.id.branch.number,
        "number": account.id.number,
        "client": account.client.full_name if account.client else None,
        "balance": serialize_value(account.balance),
        "deposits": len(account.deposits),
        "withdrawals": len(account.withdrawals),
        "transfers": len(account.transfers),
        "pending_transfers": [t.transaction_id for t in account.pending_transfers],
    }
    if include_transactions:
        data["transactions"] = [transaction_to_dict(t) for t in account.get_transactions()]
    return data
