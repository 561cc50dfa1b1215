"""
Network Statistics

Derives aggregate NetworkStats from the current node and edge sets using
NetworkX.

Metrics:
    total_connections : number of stored edges
    avg_connections   : sum of node degrees / node count
    network_density   : edges / (n*(n-1)/2), as a percentage capped at 100
    max_connections   : highest node degree
    isolated_nodes    : nodes with degree 0

Degree counts every edge a node appears in, as source or target. A
self-loop counts twice. Edges pointing at ids that are not stored nodes
still contribute degree to those ids, so averages and maxima reflect
every edge in the store.

Usage:
    calculator = NetworkStatisticsCalculator()
    stats = calculator.calculate(nodes, relationships)
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Any

import networkx as nx

from sectorgraph.core.models import NetworkStats, SectorNode, SectorRelationship


def build_network_graph(
    nodes: Iterable[SectorNode],
    relationships: Iterable[SectorRelationship],
) -> nx.DiGraph:
    """Directed graph of stored nodes plus every stored edge."""
    G = nx.DiGraph()
    for node in nodes:
        G.add_node(node.id, name=node.name, tier=node.tier.value)
    for rel in relationships:
        G.add_edge(
            rel.source_id,
            rel.target_id,
            strength=rel.strength,
            type=rel.type.value,
            bidirectional=rel.bidirectional,
        )
    return G


class NetworkStatisticsCalculator:
    """Recomputes network statistics wholesale on every call."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def degree_map(
        self,
        nodes: Iterable[SectorNode],
        relationships: Iterable[SectorRelationship],
    ) -> Dict[int, int]:
        G = build_network_graph(nodes, relationships)
        return dict(G.degree())

    def calculate(
        self,
        nodes: Iterable[SectorNode],
        relationships: Iterable[SectorRelationship],
    ) -> NetworkStats:
        nodes = list(nodes)
        relationships = list(relationships)

        if not nodes:
            return NetworkStats()

        G = build_network_graph(nodes, relationships)
        degrees = dict(G.degree())
        counts = list(degrees.values())
        n = len(nodes)
        total = len(relationships)

        stats = NetworkStats(
            total_connections=total,
            avg_connections=sum(counts) / n if total > 0 else 0.0,
            network_density=self._density(total, n),
            max_connections=max(counts, default=0),
            isolated_nodes=sum(1 for c in counts if c == 0),
        )

        self._logger.debug(
            "Network stats: %d nodes, %d edges, density %.2f%%",
            n, total, stats.network_density,
        )
        return stats

    @staticmethod
    def _density(edge_count: int, node_count: int) -> float:
        max_pairs = node_count * (node_count - 1) / 2
        if max_pairs <= 0:
            return 0.0
        # both directions of a pair can be stored, so the ratio can pass 1
        return min(100.0, edge_count / max_pairs * 100)

    def centrality_ranking(
        self,
        nodes: Iterable[SectorNode],
        relationships: Iterable[SectorRelationship],
        limit: int = 10,
    ) -> List[Dict[str, Any]]:
        """Stored nodes ranked by degree, highest first."""
        nodes = list(nodes)
        degrees = self.degree_map(nodes, relationships)
        ranked = sorted(nodes, key=lambda node: degrees.get(node.id, 0), reverse=True)
        return [
            {"node": node, "centrality": degrees.get(node.id, 0)}
            for node in ranked[:limit]
        ]
