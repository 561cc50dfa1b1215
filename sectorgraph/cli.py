"""
Sector Network CLI

Loads the sector catalog, seeds the relationship network and prints the
dashboard analytics: network statistics, strongest connections,
influence ranking, critical paths and hierarchy levels.

Usage:
    sectorgraph --api-url http://localhost:5000
    sectorgraph --input sectors.json --seed 42 --top 5
    sectorgraph --input sectors.json --export-matrix out/matrix.csv --quiet
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sectorgraph.config import Container, Settings
from sectorgraph.services import SectorRelationshipService


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------

def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    settings = settings or Settings.from_env()
    parser = argparse.ArgumentParser(
        prog="sectorgraph",
        description="Sector relationship network analytics.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s --api-url http://localhost:5000    Fetch sectors from the catalog API
  %(prog)s --input sectors.json --seed 7      Use a local sector dump, reproducible
  %(prog)s --input sectors.json --json        Print the report as JSON
""",
    )

    # --- Sector source (mutually exclusive) ---
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--api-url", default=settings.api_url, help="Catalog API base URL")
    source.add_argument("--input", "-i", metavar="FILE", help="Read sectors from a JSON file")

    # --- Generation ---
    generation = parser.add_argument_group("Generation")
    generation.add_argument("--seed", type=int, default=settings.seed, help="Random seed for relationship generation")
    generation.add_argument("--min-strength", type=float, default=settings.min_strength,
                            help="Drop generated relationships at or below this strength")
    generation.add_argument("--timeout", type=float, default=settings.api_timeout, help="HTTP timeout in seconds")

    # --- Output ---
    output = parser.add_argument_group("Output")
    output.add_argument("--top", type=int, default=10, help="Rows per ranking (default: 10)")
    output.add_argument("--export-hierarchy", metavar="FILE", help="Write hierarchy JSON to FILE")
    output.add_argument("--export-matrix", metavar="FILE", help="Write relationship matrix CSV to FILE")
    output.add_argument("--export-network", metavar="FILE",
                        help="Write network snapshot to FILE (.csv for CSV, JSON otherwise)")
    output.add_argument("--json", action="store_true", help="Print results as JSON to stdout")
    output.add_argument("--quiet", "-q", action="store_true", help="Suppress console display")
    output.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


# ---------------------------------------------------------------------------
# Output Helpers
# ---------------------------------------------------------------------------

def write_text(path: str, content: str) -> None:
    """Write content to a file, creating parent directories as needed."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)


def build_report(service: SectorRelationshipService, top: int) -> dict:
    return {
        "network_stats": service.network_stats.to_dict(),
        "strongest_connections": [r.to_dict() for r in service.get_strongest_connections(top)],
        "influence": [
            {"sector": e.node.name, "influence": e.influence}
            for e in service.hierarchy.get_influence_map(top)
        ],
        "critical_paths": [p.to_dict() for p in service.hierarchy.get_critical_paths()],
        "hierarchy": service.hierarchy.get_hierarchy_stats().to_dict(),
    }


def run_exports(service: SectorRelationshipService, args: argparse.Namespace) -> List[str]:
    written = []
    if args.export_hierarchy:
        write_text(args.export_hierarchy, service.export_hierarchy_data())
        written.append(args.export_hierarchy)
    if args.export_matrix:
        write_text(args.export_matrix, service.export_matrix_data())
        written.append(args.export_matrix)
    if args.export_network:
        fmt = "csv" if args.export_network.lower().endswith(".csv") else "json"
        write_text(args.export_network, service.export_network_data(fmt))
        written.append(args.export_network)
    return written


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = (
        logging.DEBUG if args.verbose
        else logging.WARNING if args.quiet or args.json
        else logging.INFO
    )
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    container = Container(
        api_url=args.api_url,
        api_timeout=args.timeout,
        input_path=args.input,
        seed=args.seed,
        min_strength=args.min_strength,
    )
    display = container.display_service()

    try:
        with container.relationship_service() as service:
            if not service.initialize():
                display.error("Error: sector data could not be loaded")
                return 1

            for path in run_exports(service, args):
                if not args.quiet and not args.json:
                    display.success(f"Exported: {path}")

            if args.json:
                print(json.dumps(build_report(service, args.top), indent=2, default=str))
            elif not args.quiet:
                display.display_network_stats(service.network_stats, len(service.nodes))
                display.display_strongest(service.get_strongest_connections(args.top), service.nodes)
                display.display_influence(service.hierarchy.get_influence_map(args.top))
                display.display_critical_paths(service.hierarchy.get_critical_paths())
                display.display_hierarchy_stats(service.hierarchy.get_hierarchy_stats())

            return 0

    except Exception as exc:
        display.error(f"Error: {exc}")
        if args.verbose:
            logging.exception("Analysis failed")
        return 1

    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
