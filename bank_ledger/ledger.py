"""Current account ledger: balance, transaction logs and transfer approval."""

import logging
import threading
from contextlib import ExitStack, contextmanager
from decimal import Decimal, InvalidOperation
from typing import Any, Iterator

from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidTransferError,
    UnexpectedStateError,
)
from bank_ledger.models.base import AccountId, Branch, Client, OperationLocation
from bank_ledger.models.enums import TransferStatus
from bank_ledger.models.transaction import Deposit, Transaction, Transfer, Withdrawal

logger = logging.getLogger(__name__)


def parse_amount(amount: Any, allow_zero: bool = False) -> Decimal:
    """Convert ``amount`` to a positive ``Decimal``.

    With ``allow_zero`` the value may also be zero (opening balances).

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number greater than zero.
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise InvalidAmountError(f"Invalid amount: {amount!r}") from exc

    if not value.is_finite() or value < 0 or (value == 0 and not allow_zero):
        raise InvalidAmountError(f"Amount out of range: {amount!r}")
    return value


@contextmanager
def _locked(*accounts: "CurrentAccount") -> Iterator[None]:
    """Hold the locks of ``accounts`` in ascending account id order."""
    unique = {id(account): account for account in accounts}.values()
    with ExitStack() as stack:
        for account in sorted(unique, key=lambda a: a.id):
            stack.enter_context(account._lock)
        yield


class CurrentAccount:
    """Bank current account owning its balance and transaction history.

    Every balance change happens inside one of the public operations and
    under the account lock, so the precondition check and the mutation are
    seen as a single step by concurrent callers. Operations touching two
    accounts lock both in account id order.

    Parameters
    ----------
    branch : Branch
        Branch holding the account.
    number : int
        Account number within the branch.
    client : Client | None
        Account holder.
    initial_balance : Decimal
        Opening balance; must not be negative.
    config : LedgerConfig | None
        Business rules (ATM transfer limit). Defaults to ``LedgerConfig()``.
    """

    def __init__(
        self,
        branch: Branch,
        number: int,
        client: Client | None = None,
        initial_balance: Decimal | int | str = Decimal("0"),
        config: LedgerConfig | None = None,
    ) -> None:
        self.id = AccountId(branch, number)
        self.client = client
        self.config = config or LedgerConfig()

        opening = parse_amount(initial_balance, allow_zero=True)
        self.initial_balance = opening
        self._balance = opening

        self._deposits: list[Deposit] = []
        self._withdrawals: list[Withdrawal] = []
        self._transfers: list[Transfer] = []
        self._pending: list[Transfer] = []
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"CurrentAccount(id={self.id}, balance={self._balance})"

    # Queries
    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def deposits(self) -> list[Deposit]:
        with self._lock:
            return list(self._deposits)

    @property
    def withdrawals(self) -> list[Withdrawal]:
        with self._lock:
            return list(self._withdrawals)

    @property
    def transfers(self) -> list[Transfer]:
        """Transfers out of this account plus credited transfers into it."""
        with self._lock:
            return list(self._transfers)

    @property
    def pending_transfers(self) -> list[Transfer]:
        """Incoming transfers waiting for this account's approval."""
        with self._lock:
            return list(self._pending)

    def get_balance(self) -> Decimal:
        return self.balance

    def get_deposits(self) -> list[Deposit]:
        return self.deposits

    def get_withdrawals(self) -> list[Withdrawal]:
        return self.withdrawals

    def get_transfers(self) -> list[Transfer]:
        return self.transfers

    def get_transactions(self) -> list[Transaction]:
        """All records: deposits, then withdrawals, then transfers."""
        with self._lock:
            transactions: list[Transaction] = []
            transactions.extend(self._deposits)
            transactions.extend(self._withdrawals)
            transactions.extend(self._transfers)
            return transactions

    # Operations
    def deposit(self, location: OperationLocation, envelope: int, amount: Any) -> Deposit:
        """Credit ``amount`` to the account.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not greater than zero.
        """
        value = self._validate_amount(amount)
        with self._lock:
            self._credit(value)
            deposit = Deposit(location, self, envelope, value)
            self._deposits.append(deposit)

        logger.debug(
            "Deposit of %s into %s",
            value,
            self.id,
            extra={"account_id": self.id, "transaction_id": deposit.transaction_id, "amount": value},
        )
        return deposit

    def withdrawal(self, location: OperationLocation, amount: Any) -> Withdrawal:
        """Debit ``amount`` from the account.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not greater than zero.
        InsufficientBalanceError
            If ``amount`` exceeds the balance.
        """
        value = self._validate_amount(amount)
        with self._lock:
            self._debit(value)
            withdrawal = Withdrawal(location, self, value)
            self._withdrawals.append(withdrawal)

        logger.debug(
            "Withdrawal of %s from %s",
            value,
            self.id,
            extra={"account_id": self.id, "transaction_id": withdrawal.transaction_id, "amount": value},
        )
        return withdrawal

    def transfer(
        self,
        location: OperationLocation,
        destination_account: "CurrentAccount",
        amount: Any,
    ) -> Transfer:
        """Move ``amount`` to ``destination_account``.

        The source is always debited immediately. Transfers of at least the
        configured ATM limit started at an ATM stay pending and only reach
        the destination once it calls ``approve_transfer``; every other
        transfer credits the destination right away.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not greater than zero.
        InvalidTransferError
            If the destination is this account.
        InsufficientBalanceError
            If ``amount`` exceeds the balance.
        """
        value = self._validate_amount(amount)
        if destination_account is self or destination_account.id == self.id:
            logger.warning("Rejected transfer from %s to itself", self.id, extra={"account_id": self.id})
            raise InvalidTransferError(f"Account {self.id} cannot transfer to itself")

        held = value >= self.config.atm_transfer_limit and bool(location.is_atm)

        with _locked(self, destination_account):
            self._debit(value)
            if held:
                transfer = Transfer(
                    location, self, destination_account, value, initial_status=TransferStatus.PENDING
                )
                destination_account._pending.append(transfer)
            else:
                transfer = Transfer(location, self, destination_account, value)
                destination_account._credit(value)
                destination_account._transfers.append(transfer)
            self._transfers.append(transfer)

        context = {
            "account_id": self.id,
            "destination_id": destination_account.id,
            "transaction_id": transfer.transaction_id,
            "amount": value,
            "status": transfer.status.value,
        }
        if transfer.is_pending:
            logger.info(
                "Transfer of %s from %s to %s held for approval",
                value,
                self.id,
                destination_account.id,
                extra=context,
            )
        else:
            logger.debug(
                "Transfer of %s from %s to %s", value, self.id, destination_account.id, extra=context
            )
        return transfer

    def approve_transfer(self, transfer: Transfer) -> None:
        """Settle a pending transfer addressed to this account.

        Raises
        ------
        UnexpectedStateError
            If the transfer is not pending approval by this account.
        """
        if not isinstance(transfer, Transfer):
            raise self._unexpected("approve", transfer)

        with self._lock:
            if transfer not in self._pending or transfer.status != TransferStatus.PENDING:
                raise self._unexpected("approve", transfer)

            transfer._status = TransferStatus.FINISHED
            self._pending.remove(transfer)
            self._transfers.append(transfer)
            self._credit(transfer.amount)

        logger.info(
            "Transfer %s approved by %s",
            transfer.transaction_id,
            self.id,
            extra={"account_id": self.id, "transaction_id": transfer.transaction_id, "amount": transfer.amount},
        )

    def cancel_transfer(self, transfer: Transfer) -> None:
        """Cancel a pending transfer started by this account and refund it.

        Raises
        ------
        UnexpectedStateError
            If the transfer was not started by this account or is not pending.
        """
        if not isinstance(transfer, Transfer):
            raise self._unexpected("cancel", transfer)

        destination = transfer.destination_account
        with _locked(self, destination):
            if (
                transfer.account is not self
                or transfer not in self._transfers
                or transfer.status != TransferStatus.PENDING
            ):
                raise self._unexpected("cancel", transfer)

            transfer._status = TransferStatus.CANCELED
            destination._pending.remove(transfer)
            self._credit(transfer.amount)

        logger.info(
            "Transfer %s canceled by %s",
            transfer.transaction_id,
            self.id,
            extra={"account_id": self.id, "transaction_id": transfer.transaction_id, "amount": transfer.amount},
        )

    # Balance primitives; callers hold the lock
    def _validate_amount(self, amount: Any) -> Decimal:
        try:
            return parse_amount(amount)
        except InvalidAmountError:
            logger.warning("Rejected invalid amount %r on %s", amount, self.id, extra={"account_id": self.id})
            raise

    def _credit(self, amount: Decimal) -> None:
        self._balance += amount

    def _debit(self, amount: Decimal) -> None:
        if amount > self._balance:
            logger.warning(
                "Insufficient balance on %s for %s",
                self.id,
                amount,
                extra={"account_id": self.id, "amount": amount},
            )
            raise InsufficientBalanceError(
                f"Account {self.id} has insufficient balance for {amount}",
                balance=self._balance,
                amount=amount,
            )
        self._balance -= amount

    def _unexpected(self, action: str, transfer: Transfer) -> UnexpectedStateError:
        status = getattr(transfer, "status", None)
        logger.error(
            "Cannot %s transfer %s on %s (status %s)",
            action,
            getattr(transfer, "transaction_id", transfer),
            self.id,
            status,
            extra={"account_id": self.id, "status": status},
        )
        return UnexpectedStateError(
            f"Cannot {action} transfer on account {self.id}: not pending for this account"
        )


def replay_balance(account: CurrentAccount) -> Decimal:
    """Recompute an account balance from its opening balance and logs.

    Outgoing transfers count unless canceled; incoming transfers count once
    finished. The result equals ``account.balance`` at any quiescent point.
    """
    with account._lock:
        total = account.initial_balance
        total += sum((d.amount for d in account._deposits), Decimal("0"))
        total -= sum((w.amount for w in account._withdrawals), Decimal("0"))
        for transfer in account._transfers:
            if transfer.account is account and transfer.status != TransferStatus.CANCELED:
                total -= transfer.amount
            elif transfer.destination_account is account and transfer.status == TransferStatus.FINISHED:
                total += transfer.amount
        return total
