"""
Sector Relationship Service

Session facade over the relationship store: loads sectors once, seeds the
network, and exposes the data and analytics the dashboards consume.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from sectorgraph.adapters.sector_source import SectorSourceError
from sectorgraph.analysis import (
    HierarchyAnalyzer,
    MatrixAnalyzer,
    NetworkStatisticsCalculator,
)
from sectorgraph.core import (
    DependencyMap,
    LayoutConfig,
    NetworkStats,
    RelationshipMatrix,
    SectorNode,
    SectorRecord,
    SectorRelationship,
    build_nodes,
)
from sectorgraph.generation import SynergyGenerator
from sectorgraph.repositories import InMemoryRelationshipStore


class SectorSource(Protocol):
    def fetch_sectors(self) -> List[SectorRecord]:
        ...


class SectorRelationshipService:
    """
    Owns one relationship store for the lifetime of a session.

    ``initialize()`` is the only step that touches I/O. If it fails the
    error is logged and the service stays uninitialized; nothing is retried.
    """

    def __init__(
        self,
        store: InMemoryRelationshipStore,
        source: SectorSource,
        generator: Optional[SynergyGenerator] = None,
        hierarchy: Optional[HierarchyAnalyzer] = None,
        matrix: Optional[MatrixAnalyzer] = None,
        layout: Optional[LayoutConfig] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.source = source
        self.generator = generator or SynergyGenerator()
        self.hierarchy = hierarchy or HierarchyAnalyzer(store)
        self.matrix = matrix or MatrixAnalyzer(store)
        self.layout = layout or LayoutConfig()
        self.is_initialized = False
        self._calculator = NetworkStatisticsCalculator()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass  # store lifecycle managed by Container

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> bool:
        if self.is_initialized:
            return True

        try:
            records = self.source.fetch_sectors()
        except SectorSourceError as e:
            self.logger.error(f"Failed to initialize sector relationship storage: {e}")
            return False

        if not records:
            self.logger.warning("No sectors available; relationship network not seeded")
            return False

        self.seed(records)
        self.is_initialized = True
        return True

    def seed(self, records: List[SectorRecord]) -> None:
        """Replace the store contents with nodes and generated relationships."""
        self.store.clear()
        nodes = build_nodes(records, self.layout)
        for node in nodes:
            self.store.store_node(node)
        for rel in self.generator.generate(nodes):
            self.store.store_relationship(rel)

        stats = self.store.get_stats()
        self.logger.info(
            f"Seeded {len(nodes)} sectors with {stats.total_connections} relationships "
            f"(density {stats.network_density:.1f}%)"
        )

    @property
    def is_loading(self) -> bool:
        return not self.is_initialized

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> List[SectorNode]:
        return self.store.get_all_nodes()

    @property
    def relationships(self) -> List[SectorRelationship]:
        return self.store.get_all_relationships()

    @property
    def relationship_matrix(self) -> RelationshipMatrix:
        return self.store.get_matrix()

    @property
    def network_stats(self) -> NetworkStats:
        return self.store.get_stats()

    @property
    def hierarchy_data(self) -> Dict[str, List[SectorNode]]:
        return self.store.get_hierarchy_tiers()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def store_relationship(self, relationship: SectorRelationship) -> SectorRelationship:
        self.store.store_relationship(relationship)
        return relationship

    def update_node(self, node: SectorNode) -> SectorNode:
        self.store.store_node(node)
        return node

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def get_dependency_map(self, sector_id: int) -> DependencyMap:
        return self.store.get_dependencies(sector_id)

    def get_strongest_connections(self, limit: int = 10) -> List[SectorRelationship]:
        return self.store.get_strongest_connections(limit)

    def get_network_centrality(self, limit: int = 10) -> List[Dict[str, Any]]:
        return self._calculator.centrality_ranking(self.nodes, self.relationships, limit)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_hierarchy_data(self) -> str:
        return self.hierarchy.export_hierarchy_data()

    def export_matrix_data(self) -> str:
        return self.matrix.export_matrix_data()

    def export_network_data(self, fmt: str = "json") -> str:
        """Snapshot of nodes, relationships and stats as JSON, or edges as CSV."""
        if fmt == "json":
            return json.dumps({
                "nodes": [n.to_dict() for n in self.nodes],
                "relationships": [r.to_dict() for r in self.relationships],
                "network_stats": self.network_stats.to_dict(),
                "export_date": datetime.now(timezone.utc).isoformat(),
            }, indent=2)

        if fmt == "csv":
            buffer = io.StringIO()
            writer = csv.writer(buffer, lineterminator="\n")
            writer.writerow(["Source", "Target", "Strength", "Type", "Bidirectional"])
            for rel in self.relationships:
                source = self.store.get_node(rel.source_id)
                target = self.store.get_node(rel.target_id)
                writer.writerow([
                    source.name if source else "Unknown",
                    target.name if target else "Unknown",
                    f"{rel.strength:.3f}",
                    rel.type.value,
                    str(rel.bidirectional).lower(),
                ])
            return buffer.getvalue().rstrip("\n")

        raise ValueError(f"Unsupported export format '{fmt}'. Valid: ['json', 'csv']")
