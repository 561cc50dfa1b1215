"""
In-Memory Relationship Store

Holds the authoritative sector nodes and relationships for one session and
keeps the derived structures consistent with them:

    relationships : "{source}-{target}" -> SectorRelationship
    nodes         : id -> SectorNode
    matrix        : source -> target -> MatrixEntry (rebuilt on every write)
    stats         : NetworkStats (recomputed on every write)

Nothing is persisted. Lookups on unknown ids return None or empty results.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from typing import Dict, List, Optional

from sectorgraph.analysis.statistics import NetworkStatisticsCalculator
from sectorgraph.core.models import (
    DependencyMap,
    MatrixEntry,
    NetworkStats,
    RelationshipMatrix,
    RelationshipType,
    SectorNode,
    SectorRelationship,
    relationship_key,
)


class InMemoryRelationshipStore:
    """
    Session-local store for the sector relationship network.

    Instances are independent; pass one explicitly to whatever needs it.
    """

    def __init__(self, calculator: Optional[NetworkStatisticsCalculator] = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._calculator = calculator or NetworkStatisticsCalculator()
        self._relationships: Dict[str, SectorRelationship] = {}
        self._nodes: Dict[int, SectorNode] = {}
        self._matrix: RelationshipMatrix = {}
        self._stats = NetworkStats()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def store_node(self, node: SectorNode) -> None:
        """Insert or replace a node by id."""
        self._nodes[node.id] = replace(node)
        self._recalculate_stats()

    def store_relationship(self, relationship: SectorRelationship) -> None:
        """
        Insert or replace an edge keyed by its ordered (source, target) pair.

        A second call with the same key silently overwrites the first.
        """
        self._relationships[relationship.key] = replace(relationship)
        self._update_matrix()
        self._recalculate_stats()

    def clear(self) -> None:
        self._relationships.clear()
        self._nodes.clear()
        self._matrix = {}
        self._stats = NetworkStats()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_relationship(self, source_id: int, target_id: int) -> Optional[SectorRelationship]:
        """Exact-key lookup; the reverse key is not consulted."""
        return self._relationships.get(relationship_key(source_id, target_id))

    def get_relationship_between(self, a: int, b: int) -> Optional[SectorRelationship]:
        """Lookup in either direction, forward key first."""
        return (
            self._relationships.get(relationship_key(a, b))
            or self._relationships.get(relationship_key(b, a))
        )

    def get_node(self, node_id: int) -> Optional[SectorNode]:
        return self._nodes.get(node_id)

    def get_all_relationships(self) -> List[SectorRelationship]:
        return list(self._relationships.values())

    def get_all_nodes(self) -> List[SectorNode]:
        return list(self._nodes.values())

    def get_matrix(self) -> RelationshipMatrix:
        return {source: dict(row) for source, row in self._matrix.items()}

    def get_stats(self) -> NetworkStats:
        return replace(self._stats)

    def get_hierarchy_tiers(self) -> Dict[str, List[SectorNode]]:
        tiers: Dict[str, List[SectorNode]] = defaultdict(list)
        for node in self._nodes.values():
            tiers[node.tier.value].append(node)
        return dict(tiers)

    def get_strongest_connections(self, limit: int = 10) -> List[SectorRelationship]:
        ranked = sorted(self._relationships.values(), key=lambda r: r.strength, reverse=True)
        return ranked[:limit]

    def get_dependencies(self, sector_id: int) -> DependencyMap:
        """
        Scan dependency edges touching *sector_id*.

        An edge source -> target means source depends on target: the target
        is one of the source's dependencies and the source is one of the
        target's dependents.
        """
        result = DependencyMap()

        for rel in self._relationships.values():
            if rel.type != RelationshipType.DEPENDENCY:
                continue
            if rel.source_id == sector_id:
                target = self._nodes.get(rel.target_id)
                if target:
                    result.dependencies.append(target)
            if rel.target_id == sector_id:
                source = self._nodes.get(rel.source_id)
                if source:
                    result.dependents.append(source)

        return result

    # ------------------------------------------------------------------
    # Derived structures
    # ------------------------------------------------------------------

    def _update_matrix(self) -> None:
        matrix: RelationshipMatrix = {}

        for rel in self._relationships.values():
            matrix.setdefault(rel.source_id, {})[rel.target_id] = MatrixEntry(
                strength=rel.strength,
                type=rel.type,
                bidirectional=rel.bidirectional,
            )
            if rel.bidirectional:
                matrix.setdefault(rel.target_id, {})[rel.source_id] = MatrixEntry(
                    strength=rel.strength,
                    type=rel.type,
                    bidirectional=True,
                )

        self._matrix = matrix

    def _recalculate_stats(self) -> None:
        nodes = self.get_all_nodes()
        relationships = self.get_all_relationships()

        degrees = self._calculator.degree_map(nodes, relationships)
        for node in nodes:
            node.connections = degrees.get(node.id, 0)

        self._stats = self._calculator.calculate(nodes, relationships)
        self._logger.debug(
            "Store updated: %d nodes, %d relationships",
            len(nodes), len(relationships),
        )
