from __future__ import annotations

from abc import ABC, abstractmethod

from txgraph.core.dto import AddressRecord, TransactionRecord


class AddressDataPort(ABC):
    """
    Abstract Class for the read-only address/transaction lookups the explorer needs.
    """

    # --- Address lookup ---

    @abstractmethod
    def fetch_address(self, address: str, credential: str) -> AddressRecord:
        raise NotImplementedError

    # --- Transaction lookup ---

    @abstractmethod
    def fetch_transaction(self, txid: str, credential: str) -> TransactionRecord:
        raise NotImplementedError
