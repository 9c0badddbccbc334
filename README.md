# stakeledger

Building blocks for an indexer that keeps proof-of-stake chain data in a
relational database and answers on-demand queries over HTTP.

The package provides:

- **Coin encoding** (`stakeledger.coins`): `Coin` and `DecCoin` values, and
  `DbCoin`, `DbCoins`, `DbDecCoin` and `DbDecCoins`, which turn coins into
  the `(denom,amount)` composite text a database column stores and parse it
  back. Helpers `to_null_string`, `to_string`, `remove_empty` and
  `format_dec` handle nullable text and 18-digit decimal formatting.
- **Table rows** as dataclasses for validators
  (`stakeledger.validator_rows`), general chain data such as accounts,
  blocks, supply, inflation, prices and modules (`stakeledger.chain_rows`),
  and governance (`stakeledger.gov_rows`). Each field carries its column
  name in the dataclass field metadata under the key `"db"`.
- **Batching** (`stakeledger.batching`): `split_accounts` cuts a list of
  accounts into slices that stay within PostgreSQL's limit of 65535 bound
  parameters per statement.
- **Actions** (`stakeledger.actions_config`, `stakeledger.payload`,
  `stakeledger.responses`, `stakeledger.sources`, `stakeledger.handlers`,
  `stakeledger.worker`, `stakeledger.metrics`): a small JSON-over-HTTP
  worker answering account balances, delegation rewards, withdraw
  addresses and validator commissions, and counting successes, errors and
  response times per path.

## Installation

Install the package with your usual installer from a checkout of this
directory; the only runtime dependency is PyYAML. The `test` extra pulls
in pytest.

## Coins

```python
from stakeledger.coins import Coin, DbCoin, DbCoins

coin = DbCoin.from_coin(Coin("uatom", 100))
coin.value()                     # "(uatom,100)"
coin.to_coin()                   # Coin(denom="uatom", amount=100)

coins = DbCoins.parse(b'{"(uatom,100)","(udvpn,20)"}')
for c in coins:
    print(c.denom, c.amount)
```

`to_coin` and `to_dec_coin` raise `ValueError` on a malformed amount or
denomination. Blank strings become `None` (SQL `NULL`) with
`to_null_string`, and `to_string` turns `None` back into `""`.

## Rows

```python
from stakeledger.chain_rows import ModuleRows
from stakeledger.validator_rows import ValidatorData

rows = ModuleRows.from_names(["auth", "bank", "staking"])

data = ValidatorData("cons", "oper", "pubkey", "self", "1", "2", 10)
data.parsed_max_rate()           # Decimal("1")
```

`parsed_max_rate()` and `parsed_max_change_rate()` read the stored rates
as 64-bit integers and raise `ValueError` on malformed text.
`ValidatorDescriptionRow` and `ValidatorCommissionRow` store blank texts
as `None`; `ValidatorDescriptionRow.same_as` compares two rows without
the avatar URL. Single-row tables carry a `one_row_id` field that takes no
part in equality.

## Configuration

The actions worker reads its settings from the `actions` section of a
YAML document:

```python
from stakeledger.actions_config import default_config, parse_config

config = parse_config(b"actions:\n  port: 3000\n")
fallback = default_config()      # port 3000, no separate node
```

`parse_config` returns `None` when the document has no `actions` section
and raises `ValueError` on invalid YAML or badly typed values.

## Actions worker

A worker dispatches each registered path to a handler that receives an
`ActionContext` and the decoded `Payload`.

```python
from stakeledger.worker import build_worker, run_actions

worker = build_worker(context)   # the four built-in actions registered
status, content_type, body = worker.handle(
    "/account_balance",
    b'{"input": {"address": "cosmos1...", "height": 0}}',
)

run_actions(context, 3000)       # serve until SIGINT or SIGTERM
```

`context` is an `ActionContext` built from a node object with a
`latest_height()` method and a `Sources` bundle holding a `BankSource`
and a `DistributionSource`. A height of `0` in the payload means "the
latest height". Responses:

- `200` with the handler's result as JSON on success;
- `400` with `{"message": "..."}` when the handler fails;
- `500` with a plain-text message when the body is not a valid payload;
- `404` for a path with no registered handler.

`ActionsWorker.make_server(port)` returns a `ThreadingHTTPServer` for use
in your own serving loop; `ActionsWorker.start(port)` serves until the
server is shut down. `run_actions` also calls the node's `stop()` method,
if it has one, on the way out.

Request counts and timings are kept in memory per path; see
`success_counter`, `error_counter` and `response_time_buckets` (which
takes a `time.monotonic()` reading) in `stakeledger.metrics`, and the
`CounterVec` and `HistogramVec` objects behind them.

## What the package does not do

- It does not connect to a database or write rows; the row types and
  coin encoding are for use with a database layer of your own.
- `BankSource` and `DistributionSource` are abstract: the package does
  not query a chain node itself, and you supply the implementations.
- It does not install a command-line program; start the worker from
  Python with `run_actions`.
- Metrics are counted in memory and are not exported over any endpoint.

## Tests

The test suite lives in `tests/` and runs under pytest.