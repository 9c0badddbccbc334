import pytest

from stakeledger.actions_config import ActionsConfig, default_config, parse_config


def test_default_config():
    assert default_config() == ActionsConfig(port=3000, node=None)


def test_parse_config_reads_section():
    text = "actions:\n  port: 4000\n  node:\n    rpc:\n      address: http://localhost:26657\n"
    cfg = parse_config(text)
    assert cfg.port == 4000
    assert cfg.node == {"rpc": {"address": "http://localhost:26657"}}


def test_parse_config_accepts_bytes():
    cfg = parse_config(b"actions:\n  port: 5000\n")
    assert cfg == ActionsConfig(port=5000, node=None)


def test_missing_section_is_none():
    assert parse_config("chain:\n  bech32_prefix: cosmos\n") is None


def test_missing_port_is_zero():
    assert parse_config("actions:\n  node: null\n").port == 0


@pytest.mark.parametrize(
    "text",
    [
        "actions:\n  port: -1\n",
        "actions:\n  port: abc\n",
        "actions: [1, 2]\n",
        "actions:\n  port: 1\n  node: 3\n",
        "actions: {port: [",
    ],
)
def test_invalid_config(text):
    with pytest.raises(ValueError):
        parse_config(text)