"""Response bodies returned by the actions and their JSON encoding."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterable

from .coins import Coin, DecCoin, format_dec


@dataclass
class ResponseCoin:
    """A coin amount rendered as text."""

    amount: str
    denom: str


def convert_coins(coins: Iterable[Coin]) -> list[ResponseCoin]:
    """Render integer coins for a response."""
    return [ResponseCoin(amount=str(coin.amount), denom=coin.denom) for coin in coins]


def convert_dec_coins(coins: Iterable[DecCoin]) -> list[ResponseCoin]:
    """Render decimal coins for a response."""
    return [ResponseCoin(amount=format_dec(coin.amount), denom=coin.denom) for coin in coins]


@dataclass
class Address:
    address: str


@dataclass
class Balance:
    coins: list[ResponseCoin] = field(default_factory=list)


@dataclass
class Delegation:
    delegator_address: str
    validator_address: str
    coins: list[ResponseCoin] = field(default_factory=list)


@dataclass
class DelegationResponse:
    delegations: list[Delegation] = field(default_factory=list)
    pagination: dict[str, Any] | None = None


@dataclass
class DelegationReward:
    coins: list[ResponseCoin]
    validator_address: str


@dataclass
class ValidatorCommissionAmount:
    coins: list[ResponseCoin] = field(default_factory=list)


@dataclass
class UnbondingDelegation:
    delegator_address: str
    validator_address: str
    entries: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class UnbondingDelegationResponse:
    unbonding_delegations: list[UnbondingDelegation] = field(default_factory=list)
    pagination: dict[str, Any] | None = None


@dataclass
class RedelegationEntry:
    completion_time: datetime
    balance: int = field(metadata={"as_string": True})


@dataclass
class Redelegation:
    delegator_address: str
    validator_src_address: str
    validator_dst_address: str
    redelegation_entries: list[RedelegationEntry] = field(
        default_factory=list, metadata={"json": "entries"}
    )


@dataclass
class RedelegationResponse:
    redelegations: list[Redelegation] = field(default_factory=list)
    pagination: dict[str, Any] | None = None


@dataclass
class GraphQLError:
    message: str


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{text}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def _encode(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        encoded = {}
        for item in fields(value):
            raw = getattr(value, item.name)
            key = item.metadata.get("json", item.name)
            encoded[key] = str(raw) if item.metadata.get("as_string") else _encode(raw)
        return encoded
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {str(key): _encode(item) for key, item in sorted(value.items(), key=lambda kv: str(kv[0]))}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


_HTML_ESCAPES = {
    "&": "\\u0026",
    "<": "\\u003c",
    ">": "\\u003e",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def to_json(value: Any) -> str:
    """Encode a response value as compact JSON, escaping HTML-sensitive characters."""
    text = json.dumps(_encode(value), ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text