#!/usr/bin/env python3
"""Run a seeded ledger simulation and print the resulting accounts as JSON.

Settings come from the environment (``ATM_TRANSFER_LIMIT``, ``LOG_LEVEL``,
``LOG_FORMAT``, ``SEED``); ``--seed`` overrides ``SEED``.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import BankLedgerConfig
from bank_ledger.simulation import run_simulation


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Simulate current account activity")
    parser.add_argument("--accounts", type=int, default=10, help="Number of accounts (default: 10)")
    parser.add_argument("--operations", type=int, default=1000, help="Operations to attempt (default: 1000)")
    parser.add_argument("--atm-share", type=float, default=0.5, help="Share of ATM operations (default: 0.5)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides SEED)")
    args = parser.parse_args()

    config = BankLedgerConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed

    result = run_simulation(
        config,
        num_accounts=args.accounts,
        num_operations=args.operations,
        atm_share=args.atm_share,
    )
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
