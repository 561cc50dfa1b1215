"""
Sector Graph Core Module

Data structures and seeding helpers for the sector relationship network.

Graph Model:
    Vertices: SectorNode (one per catalog sector)
    Edges: SectorRelationship (integration, synergy, dependency, collaboration)
    Derived: RelationshipMatrix, NetworkStats

Usage:
    from sectorgraph.core import SectorRecord, build_nodes
    records = [SectorRecord.from_dict(item) for item in payload]
    nodes = build_nodes(records)
"""

from .models import (
    # Enums
    Tier,
    RelationshipType,
    # Records
    SectorPricing,
    SectorMetadata,
    SectorRecord,
    # Graph
    SectorNode,
    SectorRelationship,
    relationship_key,
    # Derived
    MatrixEntry,
    RelationshipMatrix,
    NetworkStats,
    DependencyMap,
)

from .seeding import (
    LayoutConfig,
    build_nodes,
    node_color,
    tier_from_pricing,
)

__all__ = [
    "Tier",
    "RelationshipType",
    "SectorPricing",
    "SectorMetadata",
    "SectorRecord",
    "SectorNode",
    "SectorRelationship",
    "relationship_key",
    "MatrixEntry",
    "RelationshipMatrix",
    "NetworkStats",
    "DependencyMap",
    "LayoutConfig",
    "build_nodes",
    "node_color",
    "tier_from_pricing",
]
