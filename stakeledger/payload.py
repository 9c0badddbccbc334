"""Action request payloads and the context handlers run in."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

from .sources import Sources


@dataclass
class PageRequest:
    """Pagination of a chain query."""

    offset: int = 0
    limit: int = 0
    count_total: bool = False


@dataclass
class PayloadArgs:
    """The input arguments of an action."""

    address: str = ""
    height: int = 0
    offset: int = 0
    limit: int = 0
    count_total: bool = False


def _get(mapping: dict, key: str, kind: type, default: Any, *, unsigned: bool = False) -> Any:
    value = mapping.get(key)
    if value is None:
        return default
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"invalid payload: {key} must be an integer")
        if unsigned and value < 0:
            raise ValueError(f"invalid payload: {key} must not be negative")
    elif not isinstance(value, kind):
        raise ValueError(f"invalid payload: {key} has the wrong type")
    return value


@dataclass
class Payload:
    """The data sent along with an action request."""

    session_variables: dict[str, Any] = field(default_factory=dict)
    input: PayloadArgs = field(default_factory=PayloadArgs)

    @classmethod
    def from_json(cls, data: bytes | str) -> Payload:
        """Decode a payload from its JSON body."""
        try:
            raw = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise ValueError(f"invalid payload: {err}") from err
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError("invalid payload: expected an object")

        session = _get(raw, "session_variables", dict, {})
        args = _get(raw, "input", dict, {})
        return cls(
            session_variables=session,
            input=PayloadArgs(
                address=_get(args, "address", str, ""),
                height=_get(args, "height", int, 0),
                offset=_get(args, "offset", int, 0, unsigned=True),
                limit=_get(args, "limit", int, 0, unsigned=True),
                count_total=_get(args, "count_total", bool, False),
            ),
        )

    def pagination(self) -> PageRequest:
        """The pagination requested by this payload."""
        return PageRequest(
            offset=self.input.offset,
            limit=self.input.limit,
            count_total=self.input.count_total,
        )


class _Node(Protocol):
    def latest_height(self) -> int: ...


@dataclass
class ActionContext:
    """What an action handler needs: the node and the data sources."""

    node: _Node
    sources: Sources

    def get_height(self, payload: Payload | None) -> int:
        """The requested height, or the node's latest one when none is given."""
        if payload is None or payload.input.height == 0:
            try:
                return self.node.latest_height()
            except Exception as err:
                raise RuntimeError(
                    f"error while getting chain latest block height: {err}"
                ) from err
        return payload.input.height