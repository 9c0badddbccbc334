from decimal import Decimal

import pytest

from stakeledger.coins import (
    Coin,
    DbCoin,
    DbCoins,
    DbDecCoin,
    DbDecCoins,
    DecCoin,
    format_dec,
    remove_empty,
    to_null_string,
    to_string,
)


def test_to_string_handles_null():
    assert to_string(None) == ""
    assert to_string("moniker") == "moniker"


def test_to_null_string_trims_and_nulls_empty():
    assert to_null_string("  moniker  ") == "moniker"
    assert to_null_string("   ") is None
    assert to_null_string("") is None


def test_remove_empty():
    assert remove_empty(["a", "", "b", ""]) == ["a", "b"]
    assert remove_empty([]) == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0.011"), "0.011000000000000000"),
        (Decimal("0.05"), "0.050000000000000000"),
        (Decimal("0.70"), "0.700000000000000000"),
    ],
)
def test_format_dec_values(value, expected):
    assert format_dec(value) == expected


@pytest.mark.parametrize("value", [Decimal("0"), Decimal("12"), Decimal("123.456")])
def test_format_dec_keeps_value_and_precision(value):
    text = format_dec(value)
    assert len(text.split(".")[1]) == 18
    assert Decimal(text) == value


def test_db_coin_value_format():
    assert DbCoin("uatom", "100").value() == "(uatom,100)"


def test_db_coin_value_parse_round_trip():
    coin = DbCoin("uatom", "100")
    assert DbCoin.parse(coin.value().encode()) == coin
    assert DbCoin.parse(coin.value()) == coin


def test_db_coin_parse_quoted():
    assert DbCoin.parse(b'"(uatom,100)"') == DbCoin("uatom", "100")


def test_db_coin_parse_malformed():
    with pytest.raises(ValueError):
        DbCoin.parse(b"uatom")


def test_db_coin_from_and_to_coin():
    coin = Coin("uatom", 12)
    db_coin = DbCoin.from_coin(coin)
    assert db_coin == DbCoin("uatom", "12")
    assert db_coin.to_coin() == coin


def test_db_coin_to_coin_invalid_amount():
    with pytest.raises(ValueError):
        DbCoin("uatom", "abc").to_coin()


def test_db_coin_to_coin_negative_amount():
    with pytest.raises(ValueError):
        DbCoin("uatom", "-5").to_coin()


def test_coin_rejects_invalid_denom():
    with pytest.raises(ValueError):
        Coin("1a", 5)


def test_db_coins_parse_array():
    parsed = DbCoins.parse(b'{"(uatom,100)","(stake,5)"}')
    assert parsed == DbCoins([DbCoin("uatom", "100"), DbCoin("stake", "5")])


def test_db_coins_parse_empty_array():
    parsed = DbCoins.parse(b"{}")
    assert len(parsed) == 0
    assert parsed == DbCoins()


def test_db_coins_round_trip():
    coins = [Coin("uatom", 100), Coin("stake", 5)]
    db_coins = DbCoins.from_coins(coins)
    assert [coin.amount for coin in db_coins] == ["100", "5"]
    assert db_coins.to_coins() == coins


def test_db_coins_order_matters():
    coins = DbCoins([DbCoin("uatom", "100"), DbCoin("stake", "5")])
    assert coins != DbCoins(reversed(coins))


def test_db_dec_coin_from_and_to_dec_coin():
    coin = DecCoin("uatom", Decimal("0.7"))
    db_coin = DbDecCoin.from_dec_coin(coin)
    assert db_coin.amount == "0.700000000000000000"
    assert db_coin.to_dec_coin() == coin


def test_db_dec_coin_parse_round_trip():
    coin = DbDecCoin("uatom", "0.050000000000000000")
    assert DbDecCoin.parse(coin.value().encode()) == coin


def test_db_dec_coin_rejects_excess_precision():
    with pytest.raises(ValueError):
        DbDecCoin("uatom", "0." + "1" * 19).to_dec_coin()


def test_db_dec_coin_rejects_garbage():
    with pytest.raises(ValueError):
        DbDecCoin("uatom", "1e5").to_dec_coin()


def test_db_dec_coins_parse_and_convert():
    parsed = DbDecCoins.parse(b'{"(uatom,0.011000000000000000)","(stake,12)"}')
    assert parsed == DbDecCoins(
        [DbDecCoin("uatom", "0.011000000000000000"), DbDecCoin("stake", "12")]
    )
    assert parsed.to_dec_coins() == [
        DecCoin("uatom", Decimal("0.011")),
        DecCoin("stake", Decimal(12)),
    ]


def test_db_dec_coins_round_trip():
    coins = [DecCoin("uatom", Decimal("0.05")), DecCoin("stake", Decimal("0.7"))]
    assert DbDecCoins.from_dec_coins(coins).to_dec_coins() == coins


def test_int_and_dec_coin_rows_are_distinct():
    assert DbCoin("uatom", "100") != DbDecCoin("uatom", "100")