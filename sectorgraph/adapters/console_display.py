"""
Console Display Adapter

Formatted terminal output for the sector network report.
"""

import sys
from typing import List, Any

from sectorgraph.analysis.hierarchy import CriticalPath, HierarchyStats, InfluenceEntry
from sectorgraph.core.models import NetworkStats, SectorNode, SectorRelationship


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    HEADER = "\033[95m"


class ConsoleDisplay:
    """
    Console output with colors and tables.
    """

    Colors = Colors

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def colored(self, text: str, color: str) -> str:
        """Apply color if enabled."""
        if self.use_color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def success(self, message: str) -> None:
        print(self.colored(f"✅ {message}", Colors.GREEN))

    def error(self, message: str) -> None:
        print(self.colored(f"❌ {message}", Colors.RED), file=sys.stderr)

    def table(self, headers: List[str], rows: List[List[Any]]) -> None:
        """Display tabular data."""
        if not headers or not rows:
            return

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = " | ".join(
            str(h).ljust(widths[i]) for i, h in enumerate(headers)
        )
        print(self.colored(header_line, Colors.BOLD))
        print("-" * len(header_line))

        for row in rows:
            print(" | ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            ))

    def section(self, title: str) -> None:
        line = "=" * (len(title) + 4)
        print()
        print(self.colored(line, Colors.HEADER))
        print(self.colored(f"  {title}  ", Colors.HEADER + Colors.BOLD))
        print(self.colored(line, Colors.HEADER))
        print()

    # ------------------------------------------------------------------
    # Report sections
    # ------------------------------------------------------------------

    def display_network_stats(self, stats: NetworkStats, node_count: int) -> None:
        self.section("Sector Network")
        self.table(
            ["Metric", "Value"],
            [
                ["Sectors", node_count],
                ["Relationships", stats.total_connections],
                ["Avg connections", f"{stats.avg_connections:.2f}"],
                ["Density", f"{stats.network_density:.1f}%"],
                ["Max connections", stats.max_connections],
                ["Isolated sectors", stats.isolated_nodes],
            ],
        )

    def display_strongest(self, relationships: List[SectorRelationship], nodes: List[SectorNode]) -> None:
        names = {n.id: n.name for n in nodes}
        self.section("Strongest Connections")
        self.table(
            ["Source", "Target", "Strength", "Type", "Bidirectional"],
            [
                [
                    names.get(r.source_id, r.source_id),
                    names.get(r.target_id, r.target_id),
                    f"{r.strength:.3f}",
                    r.type.value,
                    "yes" if r.bidirectional else "no",
                ]
                for r in relationships
            ],
        )

    def display_influence(self, entries: List[InfluenceEntry]) -> None:
        self.section("Influence Ranking")
        self.table(
            ["Sector", "Tier", "Level", "Influence"],
            [[e.node.name, e.node.tier.value, e.node.level, f"{e.influence:g}"] for e in entries],
        )

    def display_critical_paths(self, paths: List[CriticalPath]) -> None:
        critical = [p for p in paths if p.is_critical]
        self.section(f"Critical Paths ({len(critical)} of {len(paths)})")
        self.table(
            ["From", "To", "Strength", "Levels", "Critical"],
            [
                [
                    p.source.name,
                    p.target.name,
                    f"{p.strength:.3f}",
                    p.level_difference,
                    self.colored("yes", Colors.RED) if p.is_critical else "no",
                ]
                for p in paths
            ],
        )

    def display_hierarchy_stats(self, stats: HierarchyStats) -> None:
        self.section("Hierarchy")
        print(f"  Levels: {stats.total_levels}  Depth: {stats.hierarchy_depth}  "
              f"Roots: {stats.root_node_count}  Leaves: {stats.leaf_node_count}")
        print()
        self.table(
            ["Level", "Sectors", "Avg conn.", "Avg deps", "Avg dependents"],
            [
                [
                    ls.level,
                    ls.node_count,
                    f"{ls.avg_connections:.2f}",
                    f"{ls.avg_dependencies:.2f}",
                    f"{ls.avg_dependents:.2f}",
                ]
                for ls in stats.level_stats
            ],
        )
