"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from bank_ledger.exceptions import ConfigurationError

DEFAULT_ATM_TRANSFER_LIMIT = Decimal("5000")


@dataclass
class LedgerConfig:
    """Business rules applied by every account ledger.

    Transfers of ``atm_transfer_limit`` or more started at an ATM are held
    as pending until the destination account approves them.
    """

    atm_transfer_limit: Decimal = DEFAULT_ATM_TRANSFER_LIMIT

    def __post_init__(self) -> None:
        try:
            limit = Decimal(str(self.atm_transfer_limit))
        except InvalidOperation as exc:
            raise ConfigurationError(
                f"Invalid ATM transfer limit: {self.atm_transfer_limit!r}"
            ) from exc
        if not limit.is_finite() or limit <= 0:
            raise ConfigurationError(f"ATM transfer limit must be positive, got {limit}")
        self.atm_transfer_limit = limit


@dataclass
class BankLedgerConfig:
    """Main configuration for bank-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "BankLedgerConfig":
        """Create config from environment variables."""
        import os

        limit = os.getenv("ATM_TRANSFER_LIMIT")
        ledger = LedgerConfig(atm_transfer_limit=limit) if limit else LedgerConfig()

        seed = os.getenv("SEED")
        try:
            seed_value = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            ledger=ledger,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed_value,
        )
