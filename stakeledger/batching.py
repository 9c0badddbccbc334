"""Splitting of bulk inserts so each statement stays under the parameter limit."""

from __future__ import annotations

from typing import Sequence, TypeVar

MAX_POSTGRESQL_PARAMS = 65535

T = TypeVar("T")


def split_accounts(accounts: Sequence[T], params_number: int) -> list[list[T]]:
    """Split the accounts into batches for statements using params_number parameters each.

    The first batch holds as many accounts as fit, later ones one fewer; trailing
    batches may be empty.
    """
    if params_number <= 0:
        raise ValueError(f"invalid number of parameters: {params_number}")
    max_per_slice = MAX_POSTGRESQL_PARAMS // params_number
    if max_per_slice < 1:
        raise ValueError(f"too many parameters per account: {params_number}")
    if max_per_slice == 1 and len(accounts) > 1:
        raise ValueError(f"cannot split accounts using {params_number} parameters each")

    slices: list[list[T]] = [[] for _ in range(len(accounts) // max_per_slice + 1)]
    slice_index = 0
    for index, account in enumerate(accounts):
        if slice_index >= len(slices):
            raise ValueError("too many accounts to split")
        slices[slice_index].append(account)
        if index > 0 and index % (max_per_slice - 1) == 0:
            slice_index += 1
    return slices