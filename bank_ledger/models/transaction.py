"""Transaction records created by the account ledger.

Records are a tagged union: every variant carries ``transaction_type``,
``location``, ``account`` and ``amount``; only ``Transfer`` adds a
destination and a status. Records compare by identity, so the same
``Transfer`` object can be looked up in both the source and destination
logs.
"""

from __future__ import annotations

import uuid
from dataclasses import InitVar, dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from bank_ledger.models.base import OperationLocation
from bank_ledger.models.enums import TransactionType, TransferStatus

if TYPE_CHECKING:
    from bank_ledger.ledger import CurrentAccount


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, eq=False)
class Deposit:
    """Cash or cheque envelope deposited into an account."""

    location: OperationLocation
    account: CurrentAccount
    envelope: int
    amount: Decimal
    transaction_id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)
    transaction_type: TransactionType = field(default=TransactionType.DEPOSIT, init=False)


@dataclass(frozen=True, eq=False)
class Withdrawal:
    """Cash taken out of an account."""

    location: OperationLocation
    account: CurrentAccount
    amount: Decimal
    transaction_id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)
    transaction_type: TransactionType = field(default=TransactionType.WITHDRAWAL, init=False)


@dataclass(eq=False)
class Transfer:
    """Money moved from ``account`` to ``destination_account``.

    ``status`` is read-only; ``CurrentAccount`` advances it on approval
    or cancellation.
    """

    location: OperationLocation
    account: CurrentAccount
    destination_account: CurrentAccount
    amount: Decimal
    initial_status: InitVar[TransferStatus] = TransferStatus.FINISHED
    transaction_id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)
    transaction_type: TransactionType = field(default=TransactionType.TRANSFER, init=False)
    _status: TransferStatus = field(init=False)

    def __post_init__(self, initial_status: TransferStatus) -> None:
        self._status = TransferStatus(initial_status)

    @property
    def status(self) -> TransferStatus:
        return self._status

    @property
    def is_pending(self) -> bool:
        return self.status == TransferStatus.PENDING


Transaction = Union[Deposit, Withdrawal, Transfer]
