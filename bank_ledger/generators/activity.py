"""Random ledger activity driven through the public account operations."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from bank_ledger.exceptions import BusinessRuleError
from bank_ledger.generators.base import BaseGenerator
from bank_ledger.ledger import CurrentAccount
from bank_ledger.models.base import ATM, OperationLocation
from bank_ledger.models.transaction import Transfer

logger = logging.getLogger(__name__)


@dataclass
class ActivitySummary:
    """Counts of operations performed by an ``ActivityGenerator`` run."""

    deposits: int = 0
    withdrawals: int = 0
    transfers: int = 0
    pending: int = 0
    approvals: int = 0
    cancellations: int = 0
    rejected: int = 0

    @property
    def total(self) -> int:
        return (
            self.deposits
            + self.withdrawals
            + self.transfers
            + self.approvals
            + self.cancellations
            + self.rejected
        )


class ActivityGenerator(BaseGenerator):
    """Exercise a set of accounts with random operations.

    Operations rejected by a business rule (for example an overdrawing
    withdrawal) are counted in ``ActivitySummary.rejected`` and the run
    goes on. Transfers are sometimes large enough to be held for approval
    when started at an ATM; held transfers are later approved by their
    destination or canceled by their source.
    """

    OPERATIONS = ["deposit", "withdrawal", "transfer", "settle"]
    OPERATION_WEIGHTS = [0.35, 0.25, 0.30, 0.10]

    MAX_AMOUNT = 50000

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        atm_share: float = 0.5,
    ) -> None:
        super().__init__(seed, locale)
        self.atm_share = atm_share

    def run(self, accounts: list[CurrentAccount], num_operations: int) -> ActivitySummary:
        """Perform ``num_operations`` random operations on ``accounts``.

        Parameters
        ----------
        accounts : list[CurrentAccount]
            At least two accounts.
        num_operations : int
            Number of operations to attempt.

        Returns
        -------
        ActivitySummary
            What was performed.
        """
        if len(accounts) < 2:
            raise ValueError("Activity needs at least two accounts")

        summary = ActivitySummary()
        for _ in range(num_operations):
            operation = self.rng.choices(self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1)[0]
            account = self.rng.choice(accounts)
            try:
                if operation == "deposit":
                    account.deposit(self._location(account), self.rng.randint(1, 999999), self._amount())
                    summary.deposits += 1
                elif operation == "withdrawal":
                    account.withdrawal(self._location(account), self._amount())
                    summary.withdrawals += 1
                elif operation == "transfer":
                    destination = self.rng.choice([a for a in accounts if a is not account])
                    transfer = account.transfer(
                        self._location(account), destination, self._amount(scale=500)
                    )
                    summary.transfers += 1
                    if transfer.is_pending:
                        summary.pending += 1
                else:
                    self._settle(accounts, summary)
            except BusinessRuleError:
                summary.rejected += 1

        logger.info(
            "Generated %d operations on %d accounts (%d rejected, %d held for approval)",
            summary.total,
            len(accounts),
            summary.rejected,
            summary.pending,
        )
        return summary

    def _settle(self, accounts: list[CurrentAccount], summary: ActivitySummary) -> None:
        """Approve or cancel one held transfer, if any."""
        held: list[Transfer] = [t for a in accounts for t in a.pending_transfers]
        if not held:
            return

        transfer = self.rng.choice(held)
        if self.rng.random() < 0.5:
            transfer.destination_account.approve_transfer(transfer)
            summary.approvals += 1
        else:
            transfer.account.cancel_transfer(transfer)
            summary.cancellations += 1

    def _location(self, account: CurrentAccount) -> OperationLocation:
        if self.rng.random() < self.atm_share:
            return ATM(number=self.rng.randint(1, 500))
        return account.id.branch

    def _amount(self, scale: float = 50) -> Decimal:
        # Pareto: many small amounts, a long tail of large ones
        amount = min(self.rng.paretovariate(1.5) * scale, self.MAX_AMOUNT)
        return Decimal(str(round(amount, 2))).quantize(Decimal("0.01"))
