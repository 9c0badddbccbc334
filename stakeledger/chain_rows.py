"""Rows of the chain-wide tables: accounts, consensus, supply, params and more."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from .coins import DbCoins, DbDecCoins


def _col(name: str, **kwargs):
    return field(metadata={"db": name}, **kwargs)


def _one_row_id():
    # Single-row tables carry a constant marker that never takes part in comparisons.
    return field(default=True, compare=False, metadata={"db": "one_row_id"})


@dataclass
class AccountRow:
    """A row of the account table."""

    address: str = _col("address")


@dataclass
class GenesisRow:
    """The single row of the genesis table."""

    chain_id: str = _col("chain_id")
    time: datetime = _col("time")
    initial_height: int = _col("initial_height")
    one_row_id: bool = _one_row_id()


@dataclass
class ConsensusRow:
    """The single row of the consensus table."""

    height: int = _col("height")
    round: int = _col("round")
    step: str = _col("step")
    one_row_id: bool = _one_row_id()


@dataclass
class AverageTimeRow:
    """The average block time over a minute, an hour, a day or since genesis."""

    average_time: float = _col("average_time")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class BlockRow:
    """A row of the block table."""

    height: int = _col("height")
    hash: str = _col("hash")
    tx_num: int = _col("num_txs")
    total_gas: int = _col("total_gas")
    proposer_address: str | None = _col("proposer_address")
    pre_commits_num: int = _col("pre_commits")
    timestamp: datetime = _col("timestamp")


@dataclass
class DistributionParamsRow:
    """The single row of the distribution_params table."""

    params: str = _col("params")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class CommunityPoolRow:
    """The single row of the community_pool table."""

    coins: DbDecCoins = _col("coins")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class FeeAllowanceRow:
    """A row of the fee_grant_allowance table."""

    id: int = _col("id")
    grantee: str = _col("grantee_address")
    granter: str = _col("granter_address")
    allowance: str = _col("allowance")
    height: int = _col("height")


@dataclass
class InflationRow:
    """The single row of the inflation table."""

    value: float = _col("value")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class MintParamsRow:
    """The single row of the mint_params table."""

    params: str = _col("params")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class TokenUnitRow:
    """A row of the token_unit table."""

    token_name: str = _col("token_name")
    denom: str = _col("denom")
    exponent: int = _col("exponent")
    aliases: list[str] = _col("aliases", default_factory=list)
    price_id: str | None = _col("price_id", default=None)


@dataclass
class TokenRow:
    """A row of the token table."""

    name: str = _col("name")
    traded_unit: str = _col("traded_unit")


@dataclass
class TokenPriceRow:
    """A row of the token_price table; the id is not part of comparisons."""

    name: str = _col("unit_name")
    price: float = _col("price")
    market_cap: int = _col("market_cap")
    timestamp: datetime = _col("timestamp")
    id: str = field(default="", compare=False, metadata={"db": "id"})


@dataclass
class ValidatorSigningInfoRow:
    """A row of the validator_signing_info table."""

    validator_address: str = _col("validator_address")
    start_height: int = _col("start_height")
    index_offset: int = _col("index_offset")
    jailed_until: datetime = _col("jailed_until")
    tombstoned: bool = _col("tombstoned")
    missed_blocks_counter: int = _col("missed_blocks_counter")
    height: int = _col("height")


@dataclass
class SlashingParamsRow:
    """The single row of the slashing_params table."""

    params: str = _col("params")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class StakingParamsRow:
    """The single row of the staking_params table."""

    params: str = _col("params")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class StakingPoolRow:
    """The single row of the staking_pool table."""

    bonded_tokens: int = _col("bonded_tokens")
    not_bonded_tokens: int = _col("not_bonded_tokens")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class SupplyRow:
    """The single row of the supply table."""

    coins: DbCoins = _col("coins")
    height: int = _col("height")
    one_row_id: bool = _one_row_id()


@dataclass
class ModuleRow:
    """A row of the modules table."""

    module: str = _col("module_name")


class ModuleRows(list):
    """An ordered list of ModuleRow values."""

    @classmethod
    def from_names(cls, names: Iterable[str]) -> ModuleRows:
        return cls(ModuleRow(module=name) for name in names)