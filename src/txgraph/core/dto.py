from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class TxOutput:
    value: int              # satoshis
    addresses: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TransactionRecord:
    txid: str
    value: int              # total input value, satoshis
    vout: Tuple[TxOutput, ...]
    raw: Dict[str, Any]     # provider document, kept for export
    destination: Optional[str] = None


@dataclass(frozen=True)
class AddressRecord:
    address: str
    balance: int
    tx_count: int
    txids: Tuple[str, ...]
    raw: Dict[str, Any]
    transactions: Tuple[TransactionRecord, ...] = ()
