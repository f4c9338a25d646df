from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from txgraph.core.dto import AddressRecord, TransactionRecord
from txgraph.core.errors import InvalidAddress, InvalidCredential, ProviderError
from txgraph.io.schemas import parse_address_record, parse_transaction_record
from txgraph.ports.address_data_port import AddressDataPort


class StaticProviderAdapter(AddressDataPort):
    """
    In-memory provider over raw provider documents (dev/testing).

    Every lookup is appended to `calls` as ("address" | "tx", key).
    """

    def __init__(
        self,
        addresses: Optional[Dict[str, Dict[str, Any]]] = None,
        transactions: Optional[Dict[str, Dict[str, Any]]] = None,
        credential: Optional[str] = None,
    ) -> None:
        self._addresses = addresses or {}
        self._transactions = transactions or {}
        self._credential = credential
        self.calls: List[Tuple[str, str]] = []

    @classmethod
    def from_file(cls, path: str, credential: Optional[str] = None) -> "StaticProviderAdapter":
        """Fixture file layout: {"addresses": {addr: doc}, "transactions": {txid: doc}}."""
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(
            addresses=data.get("addresses"),
            transactions=data.get("transactions"),
            credential=credential,
        )

    def _check_credential(self, credential: str) -> None:
        if self._credential is not None and credential != self._credential:
            raise InvalidCredential("Your API key didn't work")

    def fetch_address(self, address: str, credential: str) -> AddressRecord:
        self.calls.append(("address", address))
        self._check_credential(credential)
        doc = self._addresses.get(address)
        if doc is None:
            raise InvalidAddress(f"Address provided is not a Bitcoin wallet: {address}")
        return parse_address_record(doc)

    def fetch_transaction(self, txid: str, credential: str) -> TransactionRecord:
        self.calls.append(("tx", txid))
        self._check_credential(credential)
        doc = self._transactions.get(txid)
        if doc is None:
            raise ProviderError(f"Provider returned HTTP 404 for transaction {txid}", status=404)
        return parse_transaction_record(doc, txid=txid)

    def address_lookups(self, address: str) -> int:
        return self.calls.count(("address", address))
