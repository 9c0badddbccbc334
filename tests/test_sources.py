from decimal import Decimal

import pytest

from stakeledger.coins import Coin, DecCoin
from stakeledger.sources import (
    BankSource,
    DelegationDelegatorReward,
    DistributionSource,
    Sources,
)


class MemoryBank(BankSource):
    def __init__(self, balances):
        self.balances = balances

    def get_supply(self, height):
        return [Coin("uatom", sum(c.amount for coins in self.balances.values() for c in coins))]

    def get_account_balance(self, address, height):
        return self.balances.get(address, [])


def test_bank_source_is_abstract():
    with pytest.raises(TypeError):
        BankSource()


def test_distribution_source_is_abstract():
    with pytest.raises(TypeError):
        DistributionSource()


def test_incomplete_bank_source_cannot_be_built():
    class Partial(BankSource):
        def get_supply(self, height):
            return []

    with pytest.raises(TypeError):
        Sources(bank_source=Partial())


def test_sources_hold_given_sources():
    bank = MemoryBank({"cosmos1a": [Coin("uatom", 5)]})
    sources = Sources(bank_source=bank)
    assert sources.bank_source.get_account_balance("cosmos1a", 1) == [Coin("uatom", 5)]
    assert sources.distr_source is None


def test_sources_default_empty():
    assert Sources() == Sources(bank_source=None, distr_source=None)


def test_delegation_reward_equality():
    reward = DelegationDelegatorReward("cosmosvaloper1x", [DecCoin("uatom", Decimal("1.5"))])
    assert reward == DelegationDelegatorReward("cosmosvaloper1x", [DecCoin("uatom", Decimal("1.5"))])
    assert DelegationDelegatorReward("cosmosvaloper1x").reward == []