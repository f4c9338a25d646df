from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from txgraph.config.settings import MAX_TXIDS_PER_ADDRESS
from txgraph.core.dto import AddressRecord
from txgraph.core.models import Exploration, GraphModel
from txgraph.io.schemas import graph_to_dict, vertices_to_dict


def _write_json(payload, out_dir: str, filename: str) -> str:
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    return str(out_path)


def write_vertices_json(vertices: Mapping[str, AddressRecord], out_dir: str, origin: str) -> str:
    return _write_json(vertices_to_dict(vertices), out_dir, f"track_{origin}.json")


def write_graph_json(graph: GraphModel, out_dir: str, filename: str = "graph.json") -> str:
    return _write_json(graph_to_dict(graph), out_dir, filename)


def write_summary_md(exploration: Exploration, out_dir: str, filename: str = "summary.md") -> str:
    """
    Minimal, investigator-friendly summary.
    """
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename

    graph = exploration.graph
    vertices = exploration.vertices

    explored = sum(len(rec.transactions) for rec in vertices.values())
    self_transfers = [
        (addr, tx) for addr, rec in vertices.items()
        for tx in rec.transactions if tx.destination == addr
    ]
    dangling = [
        (addr, tx) for addr, rec in vertices.items()
        for tx in rec.transactions
        if tx.destination != addr and tx.destination not in vertices
    ]
    bidirectional = [e for e in graph.edges if e.bidirectional]

    def short(addr: str) -> str:
        return addr if len(addr) <= 14 else f"{addr[:10]}..."

    lines = []
    lines.append("# Exploration Summary\n")
    lines.append(f"- Origin: **{exploration.origin}**\n")
    lines.append(f"- Depth: **{exploration.depth}**\n")
    lines.append(f"- Nodes: **{len(graph.nodes)}**\n")
    lines.append(f"- Links: **{len(graph.edges)}**\n")
    lines.append(f"- Transactions explored: **{explored}**\n")
    lines.append("\n")

    lines.append("## Links\n\n")
    if not graph.edges:
        lines.append("_No links between visited addresses._\n\n")
    else:
        for e in graph.edges:
            arrow = "<->" if e.bidirectional else "->"
            lines.append(
                f"- {short(e.source.id)} {arrow} {short(e.target.id)} "
                f"| {len(e.info)} tx\n"
            )
        lines.append("\n")

    lines.append(f"Bidirectional links: {len(bidirectional)}\n\n")

    lines.append("## Transactions Outside the Graph\n\n")
    if not dangling and not self_transfers:
        lines.append("_Every explored transaction is drawn as a link._\n\n")
    else:
        for addr, tx in dangling:
            lines.append(f"- {short(addr)} -> {tx.destination} (beyond depth) | tx: {tx.txid}\n")
        for addr, tx in self_transfers:
            lines.append(f"- {short(addr)} -> itself | tx: {tx.txid}\n")
        lines.append("\n")

    lines.append("## Limitations\n\n")
    lines.append(f"- Only the first {MAX_TXIDS_PER_ADDRESS} transactions of each address are explored.\n")
    lines.append("- Each transaction is followed to a single, heuristically chosen destination.\n")
    lines.append("- Addresses on the outermost ring are looked up but not expanded.\n")

    with out_path.open("w", encoding="utf-8") as f:
        f.writelines(lines)

    return str(out_path)
