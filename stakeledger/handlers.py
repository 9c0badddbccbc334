"""Action handlers answering balance, reward, withdraw-address and commission queries."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .payload import ActionContext, Payload
from .responses import (
    Address,
    Balance,
    DelegationReward,
    ValidatorCommissionAmount,
    convert_coins,
    convert_dec_coins,
)
from .sources import BankSource, DistributionSource

logger = logging.getLogger(__name__)

ActionHandler = Callable[[ActionContext, Payload], Any]


class ActionError(Exception):
    """Raised when an action cannot gather the data it was asked for."""


def _bank_source(ctx: ActionContext) -> BankSource:
    source = ctx.sources.bank_source
    if source is None:
        raise ActionError("bank source is not available")
    return source


def _distr_source(ctx: ActionContext) -> DistributionSource:
    source = ctx.sources.distr_source
    if source is None:
        raise ActionError("distribution source is not available")
    return source


def account_balance_handler(ctx: ActionContext, payload: Payload) -> Balance:
    """The balance of the payload's address at the requested height."""
    logger.debug(
        "executing account balance action (address=%s, height=%d)",
        payload.input.address,
        payload.input.height,
    )
    height = ctx.get_height(payload)
    source = _bank_source(ctx)
    try:
        balance = source.get_account_balance(payload.input.address, height)
    except Exception as err:
        raise ActionError(f"error while getting account balance: {err}") from err
    return Balance(coins=convert_coins(balance))


def delegation_reward_handler(ctx: ActionContext, payload: Payload) -> list[DelegationReward]:
    """The rewards of the payload's delegator, one entry per validator."""
    logger.debug(
        "executing delegation rewards action (address=%s, height=%d)",
        payload.input.address,
        payload.input.height,
    )
    height = ctx.get_height(payload)
    source = _distr_source(ctx)
    try:
        rewards = source.delegator_total_rewards(payload.input.address, height)
    except Exception as err:
        raise ActionError(f"error while getting delegator total rewards: {err}") from err
    return [
        DelegationReward(
            coins=convert_dec_coins(reward.reward),
            validator_address=reward.validator_address,
        )
        for reward in rewards
    ]


def delegator_withdraw_address_handler(ctx: ActionContext, payload: Payload) -> Address:
    """The withdraw address of the payload's delegator at the latest height."""
    logger.debug(
        "executing delegator withdraw address action (address=%s)", payload.input.address
    )
    height = ctx.get_height(None)
    source = _distr_source(ctx)
    try:
        withdraw_address = source.delegator_withdraw_address(payload.input.address, height)
    except Exception as err:
        raise ActionError(f"error while getting delegator withdraw address: {err}") from err
    return Address(address=withdraw_address)


def validator_commission_amount_handler(
    ctx: ActionContext, payload: Payload
) -> ValidatorCommissionAmount:
    """The commission accumulated by the payload's validator at the latest height."""
    logger.debug(
        "executing validator commission action (address=%s, height=%d)",
        payload.input.address,
        payload.input.height,
    )
    height = ctx.get_height(None)
    source = _distr_source(ctx)
    try:
        commission = source.validator_commission(payload.input.address, height)
    except Exception as err:
        raise ActionError(f"error while getting validator commission: {err}") from err
    return ValidatorCommissionAmount(coins=convert_dec_coins(commission))