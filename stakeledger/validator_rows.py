"""Rows of the validator-related tables."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal

from .coins import to_null_string

_INT64_RE = re.compile(r"[+-]?\d+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _col(name: str, **kwargs):
    return field(metadata={"db": name}, **kwargs)


def _parse_int64(text: str) -> int:
    if not _INT64_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


@dataclass
class ValidatorData:
    """All the stored data of a single validator."""

    cons_address: str = _col("consensus_address")
    val_address: str = _col("operator_address")
    cons_pub_key: str = _col("consensus_pubkey")
    self_delegate_address: str = _col("self_delegate_address")
    max_rate: str = _col("max_rate")
    max_change_rate: str = _col("max_change_rate")
    height: int = _col("height")

    def parsed_max_rate(self) -> Decimal:
        """The maximum commission rate as a decimal; raises ValueError if malformed."""
        return Decimal(_parse_int64(self.max_rate))

    def parsed_max_change_rate(self) -> Decimal:
        """The maximum commission change rate as a decimal; raises ValueError if malformed."""
        return Decimal(_parse_int64(self.max_change_rate))


@dataclass
class ValidatorRow:
    """A row of the validator table."""

    cons_address: str = _col("consensus_address")
    cons_pub_key: str = _col("consensus_pubkey")


@dataclass
class ValidatorInfoRow:
    """A row of the validator_info table."""

    cons_address: str = _col("consensus_address")
    val_address: str = _col("operator_address")
    self_delegate_address: str = _col("self_delegate_address")
    max_rate: str = _col("max_rate")
    max_change_rate: str = _col("max_change_rate")
    height: int = _col("height")


_DESCRIPTION_TEXT_FIELDS = (
    "moniker",
    "identity",
    "avatar_url",
    "website",
    "security_contact",
    "details",
)


@dataclass
class ValidatorDescriptionRow:
    """A row of the validator_description table; blank texts are stored as NULL."""

    val_address: str = _col("validator_address")
    moniker: str | None = _col("moniker", default=None)
    identity: str | None = _col("identity", default=None)
    avatar_url: str | None = _col("avatar_url", default=None)
    website: str | None = _col("website", default=None)
    security_contact: str | None = _col("security_contact", default=None)
    details: str | None = _col("details", default=None)
    height: int = _col("height", default=0)

    def __post_init__(self) -> None:
        for name in _DESCRIPTION_TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, to_null_string(value))

    def same_as(self, other: ValidatorDescriptionRow) -> bool:
        """Compare two rows, leaving the avatar URL out of the comparison."""
        return (
            self.val_address == other.val_address
            and self.moniker == other.moniker
            and self.identity == other.identity
            and self.website == other.website
            and self.security_contact == other.security_contact
            and self.details == other.details
            and self.height == other.height
        )


@dataclass
class ValidatorCommissionRow:
    """A row of the validator_commission table; blank texts are stored as NULL."""

    operator_address: str = _col("validator_address")
    commission: str | None = _col("commission", default=None)
    min_self_delegation: str | None = _col("min_self_delegation", default=None)
    height: int = _col("height", default=0)

    def __post_init__(self) -> None:
        if self.commission is not None:
            self.commission = to_null_string(self.commission)
        if self.min_self_delegation is not None:
            self.min_self_delegation = to_null_string(self.min_self_delegation)


@dataclass
class ValidatorVotingPowerRow:
    """A row of the validator_voting_power table."""

    validator_address: str = _col("validator_address")
    voting_power: int = _col("voting_power")
    height: int = _col("height")


@dataclass
class ValidatorStatusRow:
    """A row of the validator_status table."""

    status: int = _col("status")
    jailed: bool = _col("jailed")
    tombstoned: bool = _col("tombstoned")
    cons_address: str = _col("validator_address")
    height: int = _col("height")


@dataclass
class DoubleSignVoteRow:
    """A row of the double_sign_vote table."""

    id: int = _col("id")
    vote_type: int = _col("type")
    height: int = _col("height")
    round: int = _col("round")
    block_id: str = _col("block_id")
    validator_address: str = _col("validator_address")
    validator_index: int = _col("validator_index")
    signature: str = _col("signature")


@dataclass
class DoubleSignEvidenceRow:
    """A row of the double_sign_evidence table."""

    height: int = _col("height")
    vote_a_id: int = _col("vote_a_id")
    vote_b_id: int = _col("vote_b_id")