from __future__ import annotations

import argparse
import logging

from txgraph.config import settings
from txgraph.core.errors import MissingParameter, TxGraphError
from txgraph.core.models import ExploreConfig
from txgraph.services.explorer_service import ExplorerService
from txgraph.io.output_writer import write_graph_json, write_summary_md, write_vertices_json

from txgraph.adapters.provider.nownodes_adapter import NowNodesAdapter
from txgraph.adapters.provider.static_provider_adapter import StaticProviderAdapter
from txgraph.adapters.status.console_status_adapter import ConsoleStatusAdapter


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="txgraph", description="Bitcoin wallet fund-flow explorer")
    p.add_argument("--address", required=False, help="Origin wallet address")
    p.add_argument("--depth", type=int, required=False, help="Number of breadth-first waves")
    p.add_argument("--api-key", default=None, help="NOWNodes API key (default: NOWNODES_API_KEY)")
    p.add_argument("--out", default="out", help="Output folder")
    p.add_argument("--fixture", default=None, help="Use a static provider fixture JSON (dev/testing)")
    p.add_argument("--error-display-sec", type=int, default=settings.ERROR_DISPLAY_SEC, help="Seconds an error stays on screen")
    p.add_argument("--verbose", action="store_true", help="Log provider requests")
    return p


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    credential = args.api_key or settings.NOWNODES_API_KEY

    # Ports
    if args.fixture:
        # fixtures accept any key
        credential = credential or "static"
        provider = StaticProviderAdapter.from_file(args.fixture)
        adapter_label = f"StaticProviderAdapter ({args.fixture})"
    else:
        provider = NowNodesAdapter()
        adapter_label = "NowNodesAdapter"

    status = ConsoleStatusAdapter(error_display_sec=args.error_display_sec)
    svc = ExplorerService(provider=provider, status=status)
    cfg = ExploreConfig(credential=credential, origin=args.address, depth=args.depth)

    print(f"Adapter: {adapter_label}")
    try:
        exploration = svc.explore(cfg)
    except MissingParameter:
        return 2
    except TxGraphError:
        return 1

    # Outputs
    print("Writing outputs...")
    track_path = write_vertices_json(exploration.vertices, args.out, origin=exploration.origin)
    graph_path = write_graph_json(exploration.graph, args.out)
    summary_path = write_summary_md(exploration, args.out)

    print(f"Wrote: {track_path}")
    print(f"Wrote: {graph_path}")
    print(f"Wrote: {summary_path}")
    print(f"{len(exploration.graph.nodes)} nodes • {len(exploration.graph.edges)} links")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
