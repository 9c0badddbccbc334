"""Rows of the governance tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .coins import DbCoins


def _col(name: str, **kwargs):
    return field(metadata={"db": name}, **kwargs)


@dataclass
class GovParamsRow:
    """The single row of the gov_params table."""

    deposit_params: str = _col("deposit_params")
    voting_params: str = _col("voting_params")
    tally_params: str = _col("tally_params")
    height: int = _col("height")
    one_row_id: bool = field(default=True, compare=False, metadata={"db": "one_row_id"})


@dataclass
class ProposalRow:
    """A row of the proposal table; the content is not part of comparisons."""

    proposal_id: int = _col("id")
    proposal_route: str = _col("proposal_route")
    proposal_type: str = _col("proposal_type")
    title: str = _col("title")
    description: str = _col("description")
    content: str = field(compare=False, metadata={"db": "content"})
    submit_time: datetime = _col("submit_time")
    deposit_end_time: datetime = _col("deposit_end_time")
    voting_start_time: datetime = _col("voting_start_time")
    voting_end_time: datetime = _col("voting_end_time")
    proposer: str = _col("proposer_address")
    status: str = _col("status")


@dataclass
class TallyResultRow:
    """A row of the proposal_tally_result table."""

    proposal_id: int = _col("proposal_id")
    yes: str = _col("yes")
    abstain: str = _col("abstain")
    no: str = _col("no")
    no_with_veto: str = _col("no_with_veto")
    height: int = _col("height")


@dataclass
class VoteRow:
    """A row of the proposal_vote table."""

    proposal_id: int = _col("proposal_id")
    voter: str = _col("voter_address")
    option: str = _col("option")
    height: int = _col("height")


@dataclass
class DepositRow:
    """A row of the proposal_deposit table."""

    proposal_id: int = _col("proposal_id")
    depositor: str = _col("depositor_address")
    amount: DbCoins = _col("amount")
    height: int = _col("height")


@dataclass
class ProposalStakingPoolSnapshotRow:
    """The staking pool as it stood when a proposal was handled."""

    proposal_id: int = _col("proposal_id")
    bonded_tokens: int = _col("bonded_tokens")
    not_bonded_tokens: int = _col("not_bonded_tokens")
    height: int = _col("height")


@dataclass
class ProposalValidatorVotingPowerSnapshotRow:
    """A validator's voting power as it stood when a proposal was handled."""

    id: int = _col("id")
    proposal_id: int = _col("proposal_id")
    validator_address: str = _col("validator_address")
    voting_power: int = _col("voting_power")
    status: int = _col("status")
    jailed: bool = _col("jailed")
    height: int = _col("height")