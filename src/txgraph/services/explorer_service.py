from __future__ import annotations

from typing import Optional

from txgraph.adapters.status.null_status_adapter import NullStatusAdapter
from txgraph.core.enums import Phase
from txgraph.core.errors import MissingParameter, TxGraphError
from txgraph.core.models import ExploreConfig, Exploration
from txgraph.ports.address_data_port import AddressDataPort
from txgraph.ports.status_port import StatusPort
from txgraph.services.graph_builder import build_graph
from txgraph.services.traversal_service import TraversalService


class ExplorerService:
    """
    One complete run: validate input, traverse, build the graph model.

    Failures are shown on the status sink and re-raised; every run starts from scratch.
    """

    def __init__(self, provider: AddressDataPort, status: Optional[StatusPort] = None) -> None:
        self.status = status or NullStatusAdapter()
        self.traversal = TraversalService(provider, self.status)

    def explore(self, cfg: ExploreConfig) -> Exploration:
        try:
            self._validate(cfg)
            vertices = self.traversal.traverse(cfg.credential, cfg.origin, int(cfg.depth))
            graph = build_graph(vertices, origin=cfg.origin)
        except TxGraphError as exc:
            self.status.report_phase(Phase.ERROR)
            self.status.report_error(str(exc))
            raise

        self.status.report_phase(Phase.READY)
        return Exploration(origin=cfg.origin, depth=int(cfg.depth), vertices=vertices, graph=graph)

    @staticmethod
    def _validate(cfg: ExploreConfig) -> None:
        if not cfg.credential or not cfg.origin or cfg.depth is None:
            raise MissingParameter(
                "Missing parameter(s). Make sure to set API Key, BTC Address and Depth!"
            )
        if int(cfg.depth) < 1:
            raise MissingParameter("Depth must be at least 1")
