"""Seeded ledger simulation driven by ``BankLedgerConfig``."""

import logging
from dataclasses import dataclass

from bank_ledger.config import BankLedgerConfig
from bank_ledger.generators import AccountGenerator, ActivityGenerator, ActivitySummary
from bank_ledger.ledger import CurrentAccount, replay_balance
from bank_ledger.logging import setup_logging
from bank_ledger.serialization import account_to_dict

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Accounts exercised by a simulation and what was done to them."""

    accounts: list[CurrentAccount]
    summary: ActivitySummary

    def to_dict(self) -> dict:
        return {
            "summary": {
                "deposits": self.summary.deposits,
                "withdrawals": self.summary.withdrawals,
                "transfers": self.summary.transfers,
                "pending": self.summary.pending,
                "approvals": self.summary.approvals,
                "cancellations": self.summary.cancellations,
                "rejected": self.summary.rejected,
            },
            "accounts": [account_to_dict(account) for account in self.accounts],
        }


def run_simulation(
    config: BankLedgerConfig,
    num_accounts: int = 10,
    num_operations: int = 1000,
    atm_share: float = 0.5,
    configure_logging: bool = True,
) -> SimulationResult:
    """Open random accounts and run random activity on them.

    Parameters
    ----------
    config : BankLedgerConfig
        Ledger rules, logging settings and seed.
    num_accounts : int
        Accounts to open (at least two).
    num_operations : int
        Operations to attempt.
    atm_share : float
        Fraction of operations started at an ATM.
    configure_logging : bool
        Apply ``config.log_level`` and ``config.log_format`` to the root logger.

    Returns
    -------
    SimulationResult
        Accounts and activity summary.
    """
    if configure_logging:
        setup_logging(config.log_level, config.log_format)

    accounts = AccountGenerator(seed=config.seed, config=config.ledger).generate_many(num_accounts)
    summary = ActivityGenerator(seed=config.seed, atm_share=atm_share).run(accounts, num_operations)

    for account in accounts:
        if replay_balance(account) != account.balance:
            logger.error("Balance of %s does not match its logs", account.id)

    logger.info(
        "Simulation finished: %d accounts, limit %s, seed %s",
        len(accounts),
        config.ledger.atm_transfer_limit,
        config.seed,
    )
    return SimulationResult(accounts=accounts, summary=summary)
