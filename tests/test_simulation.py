"""Tests for the configured ledger simulation."""

import json
import logging
from decimal import Decimal

import pytest

from bank_ledger.config import BankLedgerConfig, LedgerConfig
from bank_ledger.ledger import replay_balance
from bank_ledger.logging import JsonFormatter
from bank_ledger.simulation import SimulationResult, run_simulation


class TestRunSimulation:
    """Tests for run_simulation."""

    def test_basic_run(self, seed: int) -> None:
        """Test that accounts are opened and operations attempted."""
        result = run_simulation(
            BankLedgerConfig(seed=seed), num_accounts=5, num_operations=200, configure_logging=False
        )

        assert isinstance(result, SimulationResult)
        assert len(result.accounts) == 5
        assert result.summary.total <= 200
        for account in result.accounts:
            assert replay_balance(account) == account.balance

    def test_seed_reproducible(self, seed: int) -> None:
        """Test that the configured seed drives accounts and activity."""
        config = BankLedgerConfig(seed=seed)

        first = run_simulation(config, num_accounts=4, num_operations=150, configure_logging=False)
        second = run_simulation(config, num_accounts=4, num_operations=150, configure_logging=False)

        assert first.summary == second.summary
        assert [a.id for a in first.accounts] == [a.id for a in second.accounts]
        assert [a.balance for a in first.accounts] == [a.balance for a in second.accounts]

    def test_ledger_config_reaches_accounts(self, seed: int) -> None:
        """Test that the configured ATM limit is used by every account."""
        config = BankLedgerConfig(ledger=LedgerConfig(atm_transfer_limit=100), seed=seed)

        result = run_simulation(config, num_accounts=3, num_operations=10, configure_logging=False)

        assert all(a.config.atm_transfer_limit == Decimal("100") for a in result.accounts)

    def test_applies_logging_settings(self, seed: int) -> None:
        """Test that log level and format come from the config."""
        config = BankLedgerConfig(log_level="WARNING", log_format="json", seed=seed)

        run_simulation(config, num_accounts=2, num_operations=5)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert logging.getLogger("bank_ledger").level == logging.WARNING
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    def test_needs_two_accounts(self, seed: int) -> None:
        """Test that a single account is rejected."""
        with pytest.raises(ValueError):
            run_simulation(BankLedgerConfig(seed=seed), num_accounts=1, configure_logging=False)

    def test_to_dict(self, seed: int) -> None:
        """Test the JSON-ready result."""
        result = run_simulation(
            BankLedgerConfig(seed=seed), num_accounts=3, num_operations=50, configure_logging=False
        )

        data = result.to_dict()

        assert data["summary"]["deposits"] == result.summary.deposits
        assert len(data["accounts"]) == 3
        json.dumps(data)


class TestSimulateActivityScript:
    """Tests for scripts/simulate_activity.py."""

    def test_main_prints_json(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the entry point with environment and argument settings."""
        from scripts import simulate_activity

        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("ATM_TRANSFER_LIMIT", "300")
        monkeypatch.setattr(
            "sys.argv", ["simulate_activity.py", "--accounts", "3", "--operations", "40", "--seed", "7"]
        )

        simulate_activity.main()

        data = json.loads(capsys.readouterr().out)
        assert len(data["accounts"]) == 3
        assert logging.getLogger().level == logging.ERROR
