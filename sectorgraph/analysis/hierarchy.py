"""
Hierarchy Analyzer

Derives a dependency hierarchy from the relationship store and the
rankings the dashboards show on top of it.

Hierarchy model:
    - A ``dependency`` edge source -> target makes source the parent of target.
    - Levels are assigned breadth-first from every node without parents,
      level = parent level + 1, first visit wins. Nodes not reachable from
      any root (e.g. inside a dependency cycle) keep level 0.

Outputs:
    Structure     : HierarchyNode per sector, root list, tier groups
    Influence map : top nodes by InfluenceScoring
    Critical paths: strongest edges flagged by CriticalPathCriteria
    Stats         : per-level node counts and averages
    Export        : JSON document of tiers and relationships

Usage:
    analyzer = HierarchyAnalyzer(store)
    structure = analyzer.build()
    top = analyzer.get_influence_map()
"""

from __future__ import annotations

import json
import logging
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Any, Optional, TYPE_CHECKING

from sectorgraph.core.models import RelationshipType, Tier
from .scoring import CriticalPathCriteria, InfluenceScoring

if TYPE_CHECKING:
    from sectorgraph.repositories.relationship_store import InMemoryRelationshipStore


TIER_COLORS: Dict[Tier, Dict[str, str]] = {
    Tier.ENTERPRISE: {"primary": "#DC2626", "secondary": "#FEE2E2", "border": "#F87171"},
    Tier.PREMIUM: {"primary": "#D97706", "secondary": "#FED7AA", "border": "#FB923C"},
    Tier.PROFESSIONAL: {"primary": "#059669", "secondary": "#D1FAE5", "border": "#34D399"},
    Tier.STANDARD: {"primary": "#2563EB", "secondary": "#DBEAFE", "border": "#60A5FA"},
    Tier.BASIC: {"primary": "#6B7280", "secondary": "#F3F4F6", "border": "#9CA3AF"},
}


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------

@dataclass
class HierarchyNode:
    id: int
    name: str
    emoji: str
    tier: Tier
    connections: int
    level: int = 0
    children: List[int] = field(default_factory=list)
    parents: List[int] = field(default_factory=list)
    dependency_count: int = 0
    dependent_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "tier": self.tier.value,
            "level": self.level,
            "connections": self.connections,
            "children": list(self.children),
            "parents": list(self.parents),
            "dependency_count": self.dependency_count,
            "dependent_count": self.dependent_count,
        }


@dataclass
class TierGroup:
    tier: Tier
    nodes: List[HierarchyNode]
    avg_connections: float
    total_nodes: int
    color: str


@dataclass
class HierarchyStructure:
    nodes: Dict[int, HierarchyNode] = field(default_factory=dict)
    roots: List[HierarchyNode] = field(default_factory=list)
    tiers: List[TierGroup] = field(default_factory=list)

    @property
    def all_nodes(self) -> List[HierarchyNode]:
        return list(self.nodes.values())


@dataclass
class InfluenceEntry:
    node: HierarchyNode
    influence: float


@dataclass
class CriticalPath:
    source: HierarchyNode
    target: HierarchyNode
    strength: float
    type: RelationshipType
    level_difference: int
    is_critical: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source.name,
            "to": self.target.name,
            "strength": self.strength,
            "type": self.type.value,
            "level_difference": self.level_difference,
            "is_critical": self.is_critical,
        }


@dataclass
class LevelStats:
    level: int
    node_count: int
    avg_connections: float
    avg_dependencies: float
    avg_dependents: float


@dataclass
class HierarchyStats:
    total_levels: int = 0
    max_level: int = 0
    root_node_count: int = 0
    leaf_node_count: int = 0
    level_stats: List[LevelStats] = field(default_factory=list)
    avg_nodes_per_level: float = 0.0
    hierarchy_depth: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_levels": self.total_levels,
            "max_level": self.max_level,
            "root_node_count": self.root_node_count,
            "leaf_node_count": self.leaf_node_count,
            "level_stats": [asdict(ls) for ls in self.level_stats],
            "avg_nodes_per_level": self.avg_nodes_per_level,
            "hierarchy_depth": self.hierarchy_depth,
        }


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------

class HierarchyAnalyzer:
    """Stateless transform over the current store snapshot."""

    def __init__(
        self,
        store: "InMemoryRelationshipStore",
        scoring: Optional[InfluenceScoring] = None,
        criteria: Optional[CriticalPathCriteria] = None,
    ) -> None:
        self.store = store
        self.scoring = scoring or InfluenceScoring()
        self.criteria = criteria or CriticalPathCriteria()
        self._logger = logging.getLogger(__name__)

    def build(self) -> HierarchyStructure:
        nodes: Dict[int, HierarchyNode] = {}

        for node in self.store.get_all_nodes():
            deps = self.store.get_dependencies(node.id)
            nodes[node.id] = HierarchyNode(
                id=node.id,
                name=node.name,
                emoji=node.emoji,
                tier=node.tier,
                connections=node.connections,
                dependency_count=len(deps.dependencies),
                dependent_count=len(deps.dependents),
            )

        for rel in self.store.get_all_relationships():
            if rel.type != RelationshipType.DEPENDENCY:
                continue
            source = nodes.get(rel.source_id)
            target = nodes.get(rel.target_id)
            if source is None or target is None:
                continue
            if target.id not in source.children:
                source.children.append(target.id)
            if source.id not in target.parents:
                target.parents.append(source.id)

        self._assign_levels(nodes)

        roots = [
            n for n in nodes.values()
            if not n.parents or n.dependency_count <= 1
        ]
        structure = HierarchyStructure(nodes=nodes, roots=roots, tiers=self._group_tiers(nodes))

        self._logger.debug(
            "Hierarchy built: %d nodes, %d roots, %d tiers",
            len(nodes), len(roots), len(structure.tiers),
        )
        return structure

    @staticmethod
    def _assign_levels(nodes: Dict[int, HierarchyNode]) -> None:
        visited = set()
        queue = deque((n, 0) for n in nodes.values() if not n.parents)

        while queue:
            node, level = queue.popleft()
            if node.id in visited:
                continue
            visited.add(node.id)
            node.level = level

            for child_id in node.children:
                if child_id not in visited:
                    queue.append((nodes[child_id], level + 1))

    @staticmethod
    def _group_tiers(nodes: Dict[int, HierarchyNode]) -> List[TierGroup]:
        by_tier: Dict[Tier, List[HierarchyNode]] = {}
        for node in nodes.values():
            by_tier.setdefault(node.tier, []).append(node)

        groups = [
            TierGroup(
                tier=tier,
                nodes=tier_nodes,
                avg_connections=sum(n.connections for n in tier_nodes) / len(tier_nodes),
                total_nodes=len(tier_nodes),
                color=TIER_COLORS.get(tier, TIER_COLORS[Tier.BASIC])["primary"],
            )
            for tier, tier_nodes in by_tier.items()
        ]
        groups.sort(key=lambda g: g.tier.rank, reverse=True)
        return groups

    # ------------------------------------------------------------------
    # Rankings
    # ------------------------------------------------------------------

    def get_influence_map(self, limit: int = 10) -> List[InfluenceEntry]:
        structure = self.build()
        entries = [
            InfluenceEntry(node=node, influence=self.scoring.score(node))
            for node in structure.all_nodes
        ]
        entries.sort(key=lambda e: e.influence, reverse=True)
        return entries[:limit]

    def get_critical_paths(self) -> List[CriticalPath]:
        structure = self.build()
        paths: List[CriticalPath] = []

        for rel in self.store.get_strongest_connections(self.criteria.candidate_limit):
            source = structure.nodes.get(rel.source_id)
            target = structure.nodes.get(rel.target_id)
            if source is None or target is None:
                continue

            level_difference = abs(source.level - target.level)
            paths.append(CriticalPath(
                source=source,
                target=target,
                strength=rel.strength,
                type=rel.type,
                level_difference=level_difference,
                is_critical=self.criteria.is_critical(level_difference, rel.strength),
            ))

        paths.sort(key=lambda p: p.strength, reverse=True)
        return paths

    def get_hierarchy_stats(self) -> HierarchyStats:
        all_nodes = self.build().all_nodes
        if not all_nodes:
            return HierarchyStats()

        levels = sorted({n.level for n in all_nodes})
        level_stats = []
        for level in levels:
            level_nodes = [n for n in all_nodes if n.level == level]
            count = len(level_nodes)
            level_stats.append(LevelStats(
                level=level,
                node_count=count,
                avg_connections=sum(n.connections for n in level_nodes) / count,
                avg_dependencies=sum(n.dependency_count for n in level_nodes) / count,
                avg_dependents=sum(n.dependent_count for n in level_nodes) / count,
            ))

        max_level = max(levels)
        return HierarchyStats(
            total_levels=len(levels),
            max_level=max_level,
            root_node_count=sum(1 for n in all_nodes if not n.parents),
            leaf_node_count=sum(1 for n in all_nodes if not n.children),
            level_stats=level_stats,
            avg_nodes_per_level=len(all_nodes) / len(levels),
            hierarchy_depth=max_level + 1,
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_hierarchy_data(self, indent: int = 2) -> str:
        """Serialize tiers and relationships as a JSON document."""
        structure = self.build()
        all_nodes = structure.all_nodes

        def name_of(node_id: int) -> Optional[str]:
            node = structure.nodes.get(node_id)
            return node.name if node else None

        document = {
            "metadata": {
                "total_nodes": len(all_nodes),
                "total_tiers": len(structure.tiers),
                "max_level": max((n.level for n in all_nodes), default=0),
                "export_date": datetime.now(timezone.utc).isoformat(),
            },
            "tiers": [
                {
                    "tier": group.tier.value,
                    "node_count": group.total_nodes,
                    "avg_connections": group.avg_connections,
                    "color": group.color,
                    "nodes": [
                        {
                            "id": n.id,
                            "name": n.name,
                            "emoji": n.emoji,
                            "level": n.level,
                            "connections": n.connections,
                            "dependency_count": n.dependency_count,
                            "dependent_count": n.dependent_count,
                        }
                        for n in group.nodes
                    ],
                }
                for group in structure.tiers
            ],
            "relationships": [
                {
                    "source": name_of(rel.source_id),
                    "target": name_of(rel.target_id),
                    "type": rel.type.value,
                    "strength": rel.strength,
                }
                for rel in self.store.get_all_relationships()
            ],
        }
        return json.dumps(document, indent=indent)
