"""Collaborator models referenced by the ledger by identity only."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class OperationLocation(Protocol):
    """Place where an operation was started.

    The ledger only needs to know whether the location is an ATM; any
    object exposing a boolean ``is_atm`` qualifies.
    """

    @property
    def is_atm(self) -> bool: ...


@dataclass(frozen=True, order=True)
class Branch:
    """Bank branch. Also the location of teller operations."""

    number: int
    name: str = ""

    @property
    def is_atm(self) -> bool:
        return False


@dataclass(frozen=True)
class ATM:
    """Automated teller machine."""

    number: int

    @property
    def is_atm(self) -> bool:
        return True


@dataclass(frozen=True)
class Client:
    """Account holder."""

    client_id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, order=True)
class AccountId:
    """Account identity: branch plus account number.

    Ordering (branch number, then account number) is the global order in
    which account locks are acquired.
    """

    branch: Branch
    number: int

    def __str__(self) -> str:
        return f"{self.branch.number:04d}/{self.number}"
