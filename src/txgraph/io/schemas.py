from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from txgraph.core.dto import AddressRecord, TransactionRecord, TxOutput
from txgraph.core.errors import MalformedResponse
from txgraph.core.models import GraphModel


def _int(val: Any, field_name: str) -> int:
    # Blockbook sends satoshi amounts as decimal strings
    if isinstance(val, bool):
        raise MalformedResponse(f"Field {field_name!r} is not an integer: {val!r}")
    try:
        return int(val)
    except (TypeError, ValueError) as e:
        raise MalformedResponse(f"Field {field_name!r} is not an integer: {val!r}") from e


def _str_list(val: Any, field_name: str) -> List[str]:
    if val is None:
        return []
    if not isinstance(val, list) or not all(isinstance(x, str) for x in val):
        raise MalformedResponse(f"Field {field_name!r} is not a list of strings: {val!r}")
    return val


# -------------------------
# Provider documents -> records
# -------------------------

def parse_address_record(data: Any) -> AddressRecord:
    if not isinstance(data, dict):
        raise MalformedResponse(f"Address response is not an object: {data!r}")

    address = data.get("address")
    if not isinstance(address, str) or not address:
        raise MalformedResponse(f"Address response has no address: {data!r}")

    return AddressRecord(
        address=address,
        balance=_int(data.get("balance", 0), "balance"),
        tx_count=_int(data.get("txs", 0), "txs"),
        # an address without history has no txids key at all
        txids=tuple(_str_list(data.get("txids"), "txids")),
        raw=dict(data),
    )


def parse_transaction_record(data: Any, txid: Optional[str] = None) -> TransactionRecord:
    if not isinstance(data, dict):
        raise MalformedResponse(f"Transaction response is not an object: {data!r}")

    tx_id = data.get("txid", txid)
    if not isinstance(tx_id, str) or not tx_id:
        raise MalformedResponse(f"Transaction response has no txid: {data!r}")

    if "value" not in data:
        raise MalformedResponse(f"Transaction {tx_id} has no value")

    vout = data.get("vout")
    if not isinstance(vout, list):
        raise MalformedResponse(f"Transaction {tx_id} has no vout list")

    outputs: List[TxOutput] = []
    for i, out in enumerate(vout):
        if not isinstance(out, dict):
            raise MalformedResponse(f"Transaction {tx_id} output {i} is not an object")
        outputs.append(
            TxOutput(
                value=_int(out.get("value"), f"vout[{i}].value"),
                addresses=tuple(_str_list(out.get("addresses"), f"vout[{i}].addresses")),
            )
        )

    return TransactionRecord(
        txid=tx_id,
        value=_int(data["value"], "value"),
        vout=tuple(outputs),
        raw=dict(data),
    )


# -------------------------
# Records -> JSON documents
# -------------------------

def transaction_to_dict(tx: TransactionRecord) -> Dict[str, Any]:
    d = dict(tx.raw)
    d["destination"] = tx.destination
    return d


def address_to_dict(rec: AddressRecord) -> Dict[str, Any]:
    d = dict(rec.raw)
    d["transactions"] = [transaction_to_dict(tx) for tx in rec.transactions]
    return d


def vertices_to_dict(vertices: Mapping[str, AddressRecord]) -> Dict[str, Any]:
    return {address: address_to_dict(rec) for address, rec in vertices.items()}


def graph_to_dict(g: GraphModel) -> Dict[str, Any]:
    return {
        "nodes": [
            {
                "id": n.id,
                "info": address_to_dict(n.info),
                "hue": n.hue,
                "radius": n.radius,
                "x": n.x,
                "y": n.y,
            }
            for n in g.nodes
        ],
        "links": [
            {
                "source": e.source.id,
                "target": e.target.id,
                "info": [transaction_to_dict(tx) for tx in e.info],
                "bidirectional": e.bidirectional,
                "distance": e.distance,
            }
            for e in g.edges
        ],
    }
