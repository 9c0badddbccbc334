"""Coin values and the textual forms they take inside the database."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Iterable

PRECISION = 18
_QUANTUM = Decimal(1).scaleb(-PRECISION)
_MAX_INT_BITS = 256

_DENOM_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")
_INT_RE = re.compile(r"[+-]?\d+")
_DEC_RE = re.compile(r"-?(?:\d+(?:\.(\d+))?|\.(\d+))")


def to_string(value: str | None) -> str:
    """Return the value of a nullable string, or an empty string for NULL."""
    return value if value is not None else ""


def to_null_string(value: str) -> str | None:
    """Trim the value; an empty result becomes NULL."""
    value = value.strip()
    return value or None


def remove_empty(values: Iterable[str]) -> list[str]:
    """Return the given strings without the empty ones."""
    return [value for value in values if value != ""]


def format_dec(value: Decimal | int | str) -> str:
    """Render a decimal with exactly 18 fractional digits."""
    with localcontext() as ctx:
        ctx.prec = 200
        quantized = Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    return f"{quantized:f}"


def _validate_denom(denom: str) -> None:
    if not _DENOM_RE.fullmatch(denom):
        raise ValueError(f"invalid denom: {denom!r}")


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer amount: {text!r}")
    number = int(text)
    if number.bit_length() > _MAX_INT_BITS:
        raise ValueError(f"integer amount out of range: {text!r}")
    return number


def _parse_dec(text: str) -> Decimal:
    match = _DEC_RE.fullmatch(text)
    if not match:
        raise ValueError(f"invalid decimal amount: {text!r}")
    fraction = match.group(1) or match.group(2) or ""
    if len(fraction) > PRECISION:
        raise ValueError(
            f"decimal amount {text!r} has more than {PRECISION} fractional digits"
        )
    return Decimal(text)


def _as_text(src: bytes | bytearray | str) -> str:
    if isinstance(src, (bytes, bytearray)):
        return bytes(src).decode()
    return str(src)


def _remove_chars(text: str, chars: str) -> str:
    for char in chars:
        text = text.replace(char, "")
    return text


def _split_pair(text: str) -> tuple[str, str]:
    parts = text.split(",")
    if len(parts) < 2:
        raise ValueError(f"malformed coin value: {text!r}")
    return parts[0], parts[1]


def _single_pair(src: bytes | bytearray | str) -> tuple[str, str]:
    return _split_pair(_remove_chars(_as_text(src), '"{}()'))


def _array_pairs(src: bytes | bytearray | str) -> list[tuple[str, str]]:
    text = _remove_chars(_as_text(src), '"{}')
    text = text.replace("),(", ") (")
    text = _remove_chars(text, "()")
    return [_split_pair(entry) for entry in remove_empty(text.split(" "))]


@dataclass(frozen=True)
class Coin:
    """An integer amount of a single denomination."""

    denom: str
    amount: int

    def __post_init__(self) -> None:
        _validate_denom(self.denom)
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}")


@dataclass(frozen=True)
class DecCoin:
    """A decimal amount of a single denomination."""

    denom: str
    amount: Decimal

    def __post_init__(self) -> None:
        _validate_denom(self.denom)
        object.__setattr__(self, "amount", Decimal(self.amount))
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}")


@dataclass
class DbCoin:
    """An integer coin as stored in the database."""

    denom: str
    amount: str

    @classmethod
    def from_coin(cls, coin: Coin) -> DbCoin:
        return cls(denom=coin.denom, amount=str(coin.amount))

    def value(self) -> str:
        """Return the composite literal stored in the database."""
        return f"({self.denom},{self.amount})"

    @classmethod
    def parse(cls, src: bytes | bytearray | str) -> DbCoin:
        """Build a coin from its database composite representation."""
        denom, amount = _single_pair(src)
        return cls(denom=denom, amount=amount)

    def to_coin(self) -> Coin:
        return Coin(self.denom, _parse_int(self.amount))


@dataclass
class DbDecCoin:
    """A decimal coin as stored in the database."""

    denom: str
    amount: str

    @classmethod
    def from_dec_coin(cls, coin: DecCoin) -> DbDecCoin:
        return cls(denom=coin.denom, amount=format_dec(coin.amount))

    def value(self) -> str:
        """Return the composite literal stored in the database."""
        return f"({self.denom},{self.amount})"

    @classmethod
    def parse(cls, src: bytes | bytearray | str) -> DbDecCoin:
        """Build a coin from its database composite representation."""
        denom, amount = _single_pair(src)
        return cls(denom=denom, amount=amount)

    def to_dec_coin(self) -> DecCoin:
        return DecCoin(self.denom, _parse_dec(self.amount))


class DbCoins(list):
    """An ordered list of DbCoin values."""

    @classmethod
    def from_coins(cls, coins: Iterable[Coin]) -> DbCoins:
        return cls(DbCoin.from_coin(coin) for coin in coins)

    @classmethod
    def parse(cls, src: bytes | bytearray | str) -> DbCoins:
        """Build the list from a database array of coin composites."""
        return cls(DbCoin(denom=d, amount=a) for d, a in _array_pairs(src))

    def to_coins(self) -> list[Coin]:
        return [coin.to_coin() for coin in self]


class DbDecCoins(list):
    """An ordered list of DbDecCoin values."""

    @classmethod
    def from_dec_coins(cls, coins: Iterable[DecCoin]) -> DbDecCoins:
        return cls(DbDecCoin.from_dec_coin(coin) for coin in coins)

    @classmethod
    def parse(cls, src: bytes | bytearray | str) -> DbDecCoins:
        """Build the list from a database array of coin composites."""
        return cls(DbDecCoin(denom=d, amount=a) for d, a in _array_pairs(src))

    def to_dec_coins(self) -> list[DecCoin]:
        return [coin.to_dec_coin() for coin in self]