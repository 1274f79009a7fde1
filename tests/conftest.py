"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Callable

import pytest

from bank_ledger.config import LedgerConfig
from bank_ledger.ledger import CurrentAccount
from bank_ledger.models.base import ATM, Branch, Client


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def branch() -> Branch:
    """Branch holding the test accounts; also the teller location."""
    return Branch(number=1, name="Centro")


@pytest.fixture
def atm() -> ATM:
    """ATM location."""
    return ATM(number=7)


@pytest.fixture
def client() -> Client:
    """Sample account holder."""
    return Client(client_id="client-test-001", first_name="Ana", last_name="Souza")


@pytest.fixture
def make_account(branch: Branch) -> Callable[..., CurrentAccount]:
    """Factory for accounts in the test branch with sequential numbers."""
    numbers = iter(range(1, 10000))

    def _make(balance: str = "0", config: LedgerConfig | None = None) -> CurrentAccount:
        return CurrentAccount(branch, next(numbers), initial_balance=Decimal(balance), config=config)

    return _make


@pytest.fixture
def source(make_account: Callable[..., CurrentAccount]) -> CurrentAccount:
    """Source account with 10000."""
    return make_account("10000")


@pytest.fixture
def destination(make_account: Callable[..., CurrentAccount]) -> CurrentAccount:
    """Destination account with 500."""
    return make_account("500")
