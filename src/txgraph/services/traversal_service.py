from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from txgraph.config.settings import MAX_TXIDS_PER_ADDRESS
from txgraph.adapters.status.null_status_adapter import NullStatusAdapter
from txgraph.core.dto import AddressRecord, TransactionRecord
from txgraph.core.enums import Phase
from txgraph.ports.address_data_port import AddressDataPort
from txgraph.ports.status_port import StatusPort
from txgraph.services.destination import select_destination

logger = logging.getLogger(__name__)


@dataclass
class _Frontier:
    visited: Dict[str, AddressRecord] = field(default_factory=dict)
    current: List[str] = field(default_factory=list)
    next: List[str] = field(default_factory=list)


class TraversalService:
    """
    Breadth-first, depth-bounded walk over an address's outgoing transactions.

    - One provider lookup per unique address, one per explored txid
    - Only the first MAX_TXIDS_PER_ADDRESS txids of an address are explored
    - The outermost wave is fetched but its transactions are not
    - Provider and heuristic errors propagate; nothing partial is returned
    """

    def __init__(self, provider: AddressDataPort, status: Optional[StatusPort] = None) -> None:
        self.provider = provider
        self.status = status or NullStatusAdapter()

    def traverse(self, credential: str, origin: str, depth: int) -> Dict[str, AddressRecord]:
        self.status.report_phase(Phase.LOADING)

        depth = int(depth)
        state = _Frontier(current=[origin])

        for level in range(depth):
            # remaining waves would be empty too
            if not state.current:
                break

            state.next = []
            last_level = level == depth - 1
            for address in state.current:
                if address in state.visited:
                    continue
                self._visit(credential, address, last_level, state)

            logger.debug("wave %d done: %d visited, %d queued", level, len(state.visited), len(state.next))
            state.current = state.next

        return state.visited

    # -------------------------
    # Helpers
    # -------------------------

    def _visit(self, credential: str, address: str, last_level: bool, state: _Frontier) -> None:
        self.status.report_progress(f"visiting {address}")
        record = self.provider.fetch_address(address, credential)
        state.visited[address] = record

        # outer ring: vertex only
        if last_level:
            return

        transactions: List[TransactionRecord] = []
        for txid in record.txids[:MAX_TXIDS_PER_ADDRESS]:
            self.status.report_progress(f"exploring {txid}")
            tx = self.provider.fetch_transaction(txid, credential)
            tx = replace(tx, destination=select_destination(tx))
            transactions.append(tx)
            state.next.append(tx.destination)

        state.visited[address] = replace(record, transactions=tuple(transactions))
