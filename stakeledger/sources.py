"""Interfaces of the chain data sources the actions read from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

from .coins import Coin, DecCoin


@dataclass
class DelegationDelegatorReward:
    """The rewards a delegator earned from one validator."""

    validator_address: str
    reward: list[DecCoin] = field(default_factory=list)


class BankSource(ABC):
    """Reads balances and supply from the chain."""

    @abstractmethod
    def get_supply(self, height: int) -> list[Coin]:
        """The total supply at the given height."""

    @abstractmethod
    def get_account_balance(self, address: str, height: int) -> list[Coin]:
        """The balance of an account at the given height."""


class DistributionSource(ABC):
    """Reads distribution data from the chain."""

    @abstractmethod
    def validator_commission(self, val_oper_addr: str, height: int) -> list[DecCoin]:
        """The commission accumulated by a validator."""

    @abstractmethod
    def delegator_total_rewards(
        self, delegator: str, height: int
    ) -> list[DelegationDelegatorReward]:
        """The rewards of a delegator, one entry per validator."""

    @abstractmethod
    def delegator_withdraw_address(self, delegator: str, height: int) -> str:
        """The address a delegator's rewards are withdrawn to."""

    @abstractmethod
    def community_pool(self, height: int) -> list[DecCoin]:
        """The community pool at the given height."""

    @abstractmethod
    def params(self, height: int) -> Mapping[str, Any]:
        """The distribution parameters at the given height."""


@dataclass
class Sources:
    """The data sources available to the actions."""

    bank_source: BankSource | None = None
    distr_source: DistributionSource | None = None