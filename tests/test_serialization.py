"""Tests for record and account serialization."""

import json
from datetime import date, datetime
from decimal import Decimal

from bank_ledger.models import ATM, Branch, TransferStatus
from bank_ledger.serialization import (
    account_to_dict,
    location_to_dict,
    serialize_value,
    transaction_to_dict,
)


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_scalars(self) -> None:
        assert serialize_value(Decimal("10.50")) == "10.50"
        assert serialize_value(TransferStatus.PENDING) == "PENDING"
        assert serialize_value(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"
        assert serialize_value(date(2024, 1, 2)) == "2024-01-02"
        assert serialize_value("text") == "text"
        assert serialize_value(None) is None

    def test_containers(self) -> None:
        assert serialize_value({"a": Decimal("1")}) == {"a": "1"}
        assert serialize_value([Decimal("1"), TransferStatus.CANCELED]) == ["1", "CANCELED"]

    def test_account_reference(self, make_account) -> None:
        account = make_account()

        assert serialize_value(account) == str(account.id)
        assert serialize_value(account.id) == "0001/1"


class TestLocationToDict:
    """Tests for location_to_dict."""

    def test_known_locations(self) -> None:
        assert location_to_dict(ATM(number=3)) == {"kind": "ATM", "number": 3}
        assert location_to_dict(Branch(number=9, name="Sul")) == {"kind": "BRANCH", "number": 9}

    def test_other_location(self) -> None:
        class Kiosk:
            is_atm = True

        assert location_to_dict(Kiosk()) == {"kind": "OTHER", "is_atm": True}


class TestTransactionToDict:
    """Tests for transaction_to_dict."""

    def test_deposit(self, make_account, branch: Branch) -> None:
        account = make_account()
        deposit = account.deposit(branch, 77, Decimal("25.00"))

        data = transaction_to_dict(deposit)

        assert data["transaction_type"] == "DEPOSIT"
        assert data["account"] == str(account.id)
        assert data["envelope"] == 77
        assert data["amount"] == "25.00"
        assert data["location"] == {"kind": "BRANCH", "number": 1}
        assert data["transaction_id"] == deposit.transaction_id
        json.dumps(data)

    def test_pending_transfer(self, source, destination, atm: ATM) -> None:
        transfer = source.transfer(atm, destination, "6000")

        data = transaction_to_dict(transfer)

        assert data["transaction_type"] == "TRANSFER"
        assert data["status"] == "PENDING"
        assert data["account"] == str(source.id)
        assert data["destination_account"] == str(destination.id)
        assert data["location"] == {"kind": "ATM", "number": 7}
        json.dumps(data)


class TestAccountToDict:
    """Tests for account_to_dict."""

    def test_summary(self, source, destination, atm: ATM) -> None:
        transfer = source.transfer(atm, destination, "6000")
        source.withdrawal(atm, "100")

        source_data = account_to_dict(source)
        destination_data = account_to_dict(destination)

        assert source_data["account_id"] == str(source.id)
        assert source_data["branch"] == 1
        assert source_data["balance"] == "3900"
        assert source_data["withdrawals"] == 1
        assert source_data["transfers"] == 1
        assert source_data["client"] is None
        assert destination_data["pending_transfers"] == [transfer.transaction_id]
        assert destination_data["transfers"] == 0

    def test_with_transactions(self, source, branch: Branch) -> None:
        source.deposit(branch, 1, "10")

        data = account_to_dict(source, include_transactions=True)

        assert len(data["transactions"]) == 1
        assert data["transactions"][0]["amount"] == "10"
        json.dumps(data)
