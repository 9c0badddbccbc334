"""Configuration of the actions module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import yaml

DEFAULT_PORT = 3000


@dataclass
class ActionsConfig:
    """Port the actions server listens on and an optional remote node to query."""

    port: int = DEFAULT_PORT
    node: Mapping[str, Any] | None = None


def default_config() -> ActionsConfig:
    """Return the default actions configuration."""
    return ActionsConfig(port=DEFAULT_PORT, node=None)


def parse_config(data: bytes | str) -> ActionsConfig | None:
    """Read the "actions" section of a YAML document; None when it is absent."""
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as err:
        raise ValueError(f"invalid configuration: {err}") from err

    if document is None:
        return None
    if not isinstance(document, dict):
        raise ValueError("invalid configuration: top level must be a mapping")

    section = document.get("actions")
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ValueError("invalid configuration: actions must be a mapping")

    port = section.get("port")
    if port is None:
        port = 0
    if isinstance(port, bool) or not isinstance(port, int) or port < 0:
        raise ValueError(f"invalid actions port: {port!r}")

    node = section.get("node")
    if node is not None and not isinstance(node, dict):
        raise ValueError("invalid configuration: actions.node must be a mapping")

    return ActionsConfig(port=port, node=node)