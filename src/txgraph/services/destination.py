from __future__ import annotations

from typing import Optional

from txgraph.core.dto import TransactionRecord, TxOutput
from txgraph.core.errors import NoOutputs


def select_destination(tx: TransactionRecord) -> str:
    """
    Pick where most of the money goes: the output whose value is closest to the
    transaction value. Ties keep the earliest output; outputs without an
    address are never candidates.
    """
    best: Optional[TxOutput] = None
    best_diff = None

    for out in tx.vout:
        if not out.addresses:
            continue
        diff = abs(tx.value - out.value)
        if best_diff is None or diff < best_diff:
            best = out
            best_diff = diff

    if best is None:
        raise NoOutputs(f"Transaction {tx.txid} has no output with an address")
    return best.addresses[0]
