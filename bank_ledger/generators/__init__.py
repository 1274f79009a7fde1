"""Synthetic account and activity generators."""

from bank_ledger.generators.account import AccountGenerator
from bank_ledger.generators.activity import ActivityGenerator, ActivitySummary
from bank_ledger.generators.base import BaseGenerator

__all__ = [
    "AccountGenerator",
    "ActivityGenerator",
    "ActivitySummary",
    "BaseGenerator",
]
