"""
Matrix Analyzer

Square sector-by-sector view of the relationship network, with row and
column summaries and a CSV export.

Cells look a pair up in either direction first, then fall back to the
adjacency matrix. Pairs without a relationship, self pairs and pairs
hidden by the type filter become empty cells (strength 0, type "none").
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, TYPE_CHECKING

from sectorgraph.core.models import RelationshipType, SectorNode

if TYPE_CHECKING:
    from sectorgraph.repositories.relationship_store import InMemoryRelationshipStore


RELATIONSHIP_COLORS: Dict[str, str] = {
    RelationshipType.INTEGRATION.value: "#10B981",
    RelationshipType.SYNERGY.value: "#3B82F6",
    RelationshipType.DEPENDENCY.value: "#F59E0B",
    RelationshipType.COLLABORATION.value: "#8B5CF6",
}
DEFAULT_COLOR = "#6B7280"
EMPTY_CELL_COLOR = "#F3F4F6"
SELF_CELL_COLOR = "#E5E7EB"

NO_RELATIONSHIP = "none"

SORT_KEYS = ("name", "connections", "tier")
SORT_ORDERS = ("asc", "desc")

CSV_HEADER = ["Source", "Target", "Strength", "Type", "Bidirectional", "Description"]

#: Strength boundaries for the weak / medium / strong distribution.
WEAK_MAX = 0.3
STRONG_MIN = 0.7


def relationship_color(rel_type: str, strength: float) -> str:
    """Base color for the type with an opacity byte of max(0.3, strength)."""
    base = RELATIONSHIP_COLORS.get(rel_type, DEFAULT_COLOR)
    opacity = max(0.3, strength)
    return f"{base}{round(opacity * 255):02x}"


@dataclass
class MatrixViewConfig:
    filter_type: str = "all"
    sort_by: str = "name"
    sort_order: str = "asc"
    show_empty_cells: bool = True

    def __post_init__(self):
        if self.sort_by not in SORT_KEYS:
            raise ValueError(f"Invalid sort_by '{self.sort_by}'. Valid: {list(SORT_KEYS)}")
        if self.sort_order not in SORT_ORDERS:
            raise ValueError(f"Invalid sort_order '{self.sort_order}'. Valid: {list(SORT_ORDERS)}")
        valid_filters = ["all"] + [t.value for t in RelationshipType]
        if self.filter_type not in valid_filters:
            raise ValueError(f"Invalid filter_type '{self.filter_type}'. Valid: {valid_filters}")


@dataclass
class MatrixCell:
    source_id: int
    target_id: int
    strength: float
    type: str
    color: str
    description: str
    bidirectional: bool = False

    @property
    def is_active(self) -> bool:
        return self.strength > 0


@dataclass
class MatrixView:
    rows: List[List[MatrixCell]] = field(default_factory=list)
    nodes: List[SectorNode] = field(default_factory=list)
    total_cells: int = 0
    active_cells: int = 0

    def cells(self) -> List[MatrixCell]:
        return [cell for row in self.rows for cell in row]


class MatrixAnalyzer:
    """Builds and summarizes the relationship matrix view."""

    def __init__(self, store: "InMemoryRelationshipStore") -> None:
        self.store = store
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # View construction
    # ------------------------------------------------------------------

    def _sorted_nodes(self, config: MatrixViewConfig) -> List[SectorNode]:
        nodes = self.store.get_all_nodes()
        reverse = config.sort_order == "desc"

        if config.sort_by == "connections":
            key = lambda n: n.connections
        elif config.sort_by == "tier":
            key = lambda n: n.tier.rank
        else:
            key = lambda n: n.name.lower()

        return sorted(nodes, key=key, reverse=reverse)

    def build_view(self, config: Optional[MatrixViewConfig] = None) -> MatrixView:
        config = config or MatrixViewConfig()
        nodes = self._sorted_nodes(config)
        matrix = self.store.get_matrix()
        rows: List[List[MatrixCell]] = []

        for row_node in nodes:
            row: List[MatrixCell] = []

            for col_node in nodes:
                rel = self.store.get_relationship_between(row_node.id, col_node.id)
                entry = matrix.get(row_node.id, {}).get(col_node.id)

                if rel is None and entry is None:
                    if config.show_empty_cells:
                        row.append(self._empty_cell(row_node.id, col_node.id))
                    continue

                if rel is not None:
                    strength, rel_type = rel.strength, rel.type.value
                    bidirectional, description = rel.bidirectional, rel.description
                else:
                    strength, rel_type = entry.strength, entry.type.value
                    bidirectional, description = entry.bidirectional, ""

                if config.filter_type != "all" and rel_type != config.filter_type:
                    if config.show_empty_cells:
                        row.append(self._empty_cell(row_node.id, col_node.id, self_ref=False))
                    continue

                row.append(MatrixCell(
                    source_id=row_node.id,
                    target_id=col_node.id,
                    strength=strength,
                    type=rel_type,
                    color=relationship_color(rel_type, strength),
                    description=description or "Direct relationship",
                    bidirectional=bidirectional,
                ))

            if row:
                rows.append(row)

        view = MatrixView(rows=rows, nodes=nodes, total_cells=len(nodes) * len(nodes))
        view.active_cells = sum(1 for cell in view.cells() if cell.is_active)
        return view

    @staticmethod
    def _empty_cell(source_id: int, target_id: int, self_ref: Optional[bool] = None) -> MatrixCell:
        is_self = source_id == target_id if self_ref is None else self_ref
        return MatrixCell(
            source_id=source_id,
            target_id=target_id,
            strength=0.0,
            type=NO_RELATIONSHIP,
            color=SELF_CELL_COLOR if is_self else EMPTY_CELL_COLOR,
            description="Self-reference" if is_self else "No relationship",
        )

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    @staticmethod
    def _summarize(cells: List[MatrixCell]) -> Dict[str, Any]:
        active = [c for c in cells if c.is_active]
        return {
            "total_connections": len(active),
            "strong_connections": sum(1 for c in active if c.strength > STRONG_MIN),
            "avg_strength": sum(c.strength for c in active) / len(active) if active else 0.0,
            "bidirectional_count": sum(1 for c in active if c.bidirectional),
            "relationship_types": sorted({c.type for c in active}),
        }

    def row_analysis(self, row_index: int, view: Optional[MatrixView] = None) -> Optional[Dict[str, Any]]:
        view = view or self.build_view()
        if not 0 <= row_index < len(view.rows):
            return None
        row = view.rows[row_index]
        summary = self._summarize(row)
        summary["node"] = self.store.get_node(row[0].source_id)
        return summary

    def column_analysis(self, col_index: int, view: Optional[MatrixView] = None) -> Optional[Dict[str, Any]]:
        view = view or self.build_view()
        if not view.rows or not 0 <= col_index < len(view.rows[0]):
            return None
        column = [row[col_index] for row in view.rows if col_index < len(row)]
        summary = self._summarize(column)
        summary["node"] = self.store.get_node(column[0].target_id)
        return summary

    def matrix_statistics(self, view: Optional[MatrixView] = None) -> Dict[str, Any]:
        view = view or self.build_view()
        cells = view.cells()
        active = [c for c in cells if c.is_active]

        type_counts: Dict[str, int] = {}
        for cell in active:
            type_counts[cell.type] = type_counts.get(cell.type, 0) + 1

        return {
            "total_cells": len(cells),
            "active_cells": len(active),
            "bidirectional_cells": sum(1 for c in active if c.bidirectional),
            "density": len(active) / len(cells) * 100 if cells else 0.0,
            "relationship_type_counts": type_counts,
            "strength_distribution": {
                "weak": sum(1 for c in active if c.strength <= WEAK_MAX),
                "medium": sum(1 for c in active if WEAK_MAX < c.strength <= STRONG_MIN),
                "strong": sum(1 for c in active if c.strength > STRONG_MIN),
            },
            "avg_strength": sum(c.strength for c in active) / len(active) if active else 0.0,
        }

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_matrix_data(self, view: Optional[MatrixView] = None) -> str:
        """CSV of every active cell, one row per cell."""
        view = view or self.build_view()
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        for cell in view.cells():
            if not cell.is_active:
                continue
            source = self.store.get_node(cell.source_id)
            target = self.store.get_node(cell.target_id)
            writer.writerow([
                source.name if source else "Unknown",
                target.name if target else "Unknown",
                f"{cell.strength:.3f}",
                cell.type,
                str(cell.bidirectional).lower(),
                cell.description,
            ])

        self._logger.debug("Exported %d matrix cells", view.active_cells)
        return buffer.getvalue().rstrip("\n")
