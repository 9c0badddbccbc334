from datetime import datetime, timedelta, timezone

from stakeledger.coins import DbCoin, DbCoins
from stakeledger.gov_rows import (
    DepositRow,
    GovParamsRow,
    ProposalRow,
    ProposalStakingPoolSnapshotRow,
    ProposalValidatorVotingPowerSnapshotRow,
    TallyResultRow,
    VoteRow,
)

UTC_TIME = datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)


def _proposal(**overrides):
    values = dict(
        proposal_id=1,
        proposal_route="gov",
        proposal_type="text",
        title="Title",
        description="Description",
        content="{}",
        submit_time=UTC_TIME,
        deposit_end_time=UTC_TIME,
        voting_start_time=UTC_TIME,
        voting_end_time=UTC_TIME,
        proposer="cosmos1proposer",
        status="PROPOSAL_STATUS_DEPOSIT_PERIOD",
    )
    values.update(overrides)
    return ProposalRow(**values)


def test_proposal_equality_ignores_content():
    assert _proposal(content="a") == _proposal(content="b")


def test_proposal_equality_compares_status():
    assert _proposal() != _proposal(status="PROPOSAL_STATUS_PASSED")


def test_proposal_times_compare_by_instant():
    shifted = UTC_TIME.astimezone(timezone(timedelta(hours=2)))
    assert _proposal(submit_time=shifted) == _proposal()


def test_tally_result_equality():
    a = TallyResultRow(1, "10", "0", "5", "1", 100)
    assert a == TallyResultRow(1, "10", "0", "5", "1", 100)
    assert a != TallyResultRow(1, "10", "0", "5", "1", 101)


def test_vote_row_equality():
    assert VoteRow(1, "cosmos1voter", "VOTE_OPTION_YES", 10) == VoteRow(
        1, "cosmos1voter", "VOTE_OPTION_YES", 10
    )
    assert VoteRow(1, "cosmos1voter", "VOTE_OPTION_YES", 10) != VoteRow(
        1, "cosmos1voter", "VOTE_OPTION_NO", 10
    )


def test_deposit_row_compares_amounts():
    coins = DbCoins([DbCoin("uatom", "100")])
    same = DbCoins.parse('{"(uatom,100)"}')
    other = DbCoins([DbCoin("uatom", "200")])
    assert DepositRow(1, "cosmos1dep", coins, 5) == DepositRow(1, "cosmos1dep", same, 5)
    assert DepositRow(1, "cosmos1dep", coins, 5) != DepositRow(1, "cosmos1dep", other, 5)


def test_gov_params_row_one_row_id():
    row = GovParamsRow("{}", "{}", "{}", 3)
    assert row.one_row_id is True
    assert row == GovParamsRow("{}", "{}", "{}", 3, one_row_id=False)


def test_snapshot_rows_keep_fields():
    pool = ProposalStakingPoolSnapshotRow(7, 100, 50, 20)
    assert (pool.proposal_id, pool.bonded_tokens, pool.not_bonded_tokens, pool.height) == (
        7,
        100,
        50,
        20,
    )
    snap = ProposalValidatorVotingPowerSnapshotRow(1, 7, "cosmosvalcons1x", 10, 3, False, 20)
    assert snap == ProposalValidatorVotingPowerSnapshotRow(1, 7, "cosmosvalcons1x", 10, 3, False, 20)
    assert snap != ProposalValidatorVotingPowerSnapshotRow(1, 7, "cosmosvalcons1x", 10, 3, True, 20)