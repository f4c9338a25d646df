from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from txgraph.core.dto import AddressRecord, TransactionRecord



# Run configuration

@dataclass(frozen=True)
class ExploreConfig:
    """
    User input for one exploration run.
    """

    credential: Optional[str]
    origin: Optional[str]
    depth: Optional[int]



# Graph models

@dataclass
class Node:

    id: str
    info: AddressRecord

    hue: int = 260
    radius: int = 12

    # owned by the renderer
    x: float = 0.0
    y: float = 0.0


@dataclass
class Edge:

    source: Node
    target: Node

    info: List[TransactionRecord] = field(default_factory=list)
    bidirectional: bool = False
    distance: int = 75


@dataclass
class GraphModel:

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)


@dataclass(frozen=True)
class Exploration:

    origin: str
    depth: int
    vertices: Dict[str, AddressRecord]
    graph: GraphModel
