"""Account generator: branches, clients and funded current accounts."""

from decimal import Decimal

from bank_ledger.config import LedgerConfig
from bank_ledger.generators.base import BaseGenerator
from bank_ledger.ledger import CurrentAccount
from bank_ledger.models.base import Branch, Client


class AccountGenerator(BaseGenerator):
    """Generate current accounts with random holders and opening balances.

    Account numbers are sequential per generator, so every account it
    builds has a distinct id even when accounts share a branch.
    """

    MAX_OPENING_BALANCE = 20000

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        config: LedgerConfig | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.config = config or LedgerConfig()
        self._next_number = self.rng.randint(10000, 90000)

    def generate_branch(self) -> Branch:
        """Generate a branch named after a city."""
        return Branch(number=self.rng.randint(1, 9999), name=self.fake.city())

    def generate_client(self) -> Client:
        """Generate an account holder."""
        return Client(
            client_id=self.fake.uuid4(),
            first_name=self.fake.first_name(),
            last_name=self.fake.last_name(),
        )

    def generate(
        self,
        branch: Branch | None = None,
        client: Client | None = None,
    ) -> CurrentAccount:
        """Generate a single account.

        Parameters
        ----------
        branch : Branch | None
            Branch to open the account in; a new one when omitted.
        client : Client | None
            Account holder; a new one when omitted.

        Returns
        -------
        CurrentAccount
            Account with an opening balance between 0 and 20000.
        """
        opening = Decimal(str(round(self.rng.uniform(0, self.MAX_OPENING_BALANCE), 2)))
        number = self._next_number
        self._next_number += 1

        return CurrentAccount(
            branch or self.generate_branch(),
            number,
            client=client or self.generate_client(),
            initial_balance=opening.quantize(Decimal("0.01")),
            config=self.config,
        )

    def generate_many(self, count: int, branch: Branch | None = None) -> list[CurrentAccount]:
        """Generate ``count`` accounts, all in ``branch`` when given."""
        return [self.generate(branch=branch) for _ in range(count)]
