from __future__ import annotations

import math
from typing import Dict, FrozenSet, Mapping, Optional

from txgraph.config import settings
from txgraph.core.dto import AddressRecord
from txgraph.core.models import Edge, GraphModel, Node


def node_hue(tx_count: int) -> int:
    # busier wallets drift from blue towards red
    hue = 260 - 5 * math.floor(math.sqrt(tx_count + 10000) + 0.5 - math.sqrt(10000))
    return 360 if hue < 0 else hue


def build_graph(vertices: Mapping[str, AddressRecord], origin: Optional[str] = None) -> GraphModel:
    """
    Fold traversal vertices into renderer nodes and links.

    All transactions between two addresses share one Edge, whatever their
    direction. Self-transfers and transfers to unvisited addresses get no edge.
    """
    graph = GraphModel()

    index: Dict[str, Node] = {}
    for address, rec in vertices.items():
        node = Node(
            id=address,
            info=rec,
            hue=node_hue(rec.tx_count),
            radius=settings.ORIGIN_NODE_RADIUS if address == origin else settings.NODE_RADIUS,
        )
        index[address] = node
        graph.nodes.append(node)

    links: Dict[FrozenSet[str], Edge] = {}
    for address, rec in vertices.items():
        for tx in rec.transactions:
            dest = tx.destination
            if dest is None or dest == address:
                continue

            key = frozenset((address, dest))
            edge = links.get(key)
            if edge is not None:
                edge.info.append(tx)
                if edge.source.id != address:
                    edge.bidirectional = True
                continue

            target = index.get(dest)
            if target is None:
                continue

            edge = Edge(
                source=index[address],
                target=target,
                info=[tx],
                distance=settings.LINK_DISTANCE,
            )
            links[key] = edge
            graph.edges.append(edge)

    return graph
