"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the sector graph test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -k "hierarchy"     # Run only hierarchy tests
"""

import json
from typing import Any, Dict, List

import pytest

from sectorgraph.core import (
    RelationshipType,
    SectorNode,
    SectorRecord,
    SectorRelationship,
    Tier,
)
from sectorgraph.repositories import InMemoryRelationshipStore


# =============================================================================
# Helpers
# =============================================================================

def make_node(node_id: int, name: str = None, tier: Tier = Tier.BASIC) -> SectorNode:
    return SectorNode(id=node_id, name=name or f"Sector {node_id}", tier=tier)


def make_rel(
    source: int,
    target: int,
    strength: float = 0.5,
    rel_type: RelationshipType = RelationshipType.COLLABORATION,
    bidirectional: bool = False,
) -> SectorRelationship:
    return SectorRelationship(
        source_id=source,
        target_id=target,
        strength=strength,
        type=rel_type,
        description=f"{source} to {target}",
        bidirectional=bidirectional,
    )


# =============================================================================
# Sector Data Fixtures
# =============================================================================

@pytest.fixture
def sector_payload() -> List[Dict[str, Any]]:
    """Sector list as served by GET /api/sectors."""
    return [
        {"id": 1, "name": "Creative Tech", "emoji": "🎬", "brandCount": 12,
         "metadata": {"pricing": {"monthly": 129.99}}},
        {"id": 2, "name": "Motion, Media & Sonic", "emoji": "🎙️", "brandCount": 8,
         "metadata": {"pricing": {"monthly": 129.99}}},
        {"id": 3, "name": "Banking & Finance", "emoji": "🏦",
         "metadata": {"pricing": {"monthly": 349.0}}},
        {"id": 4, "name": "Mining & Resources", "emoji": "⛏️",
         "metadata": {"pricing": {"monthly": 299.0}, "region": "global"}},
        {"id": 5, "name": "Health & Hygiene", "emoji": "🧺"},
    ]


@pytest.fixture
def sector_records(sector_payload) -> List[SectorRecord]:
    return [SectorRecord.from_dict(item) for item in sector_payload]


@pytest.fixture
def sector_file(tmp_path, sector_payload):
    path = tmp_path / "sectors.json"
    path.write_text(json.dumps(sector_payload), encoding="utf-8")
    return path


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store() -> InMemoryRelationshipStore:
    return InMemoryRelationshipStore()


@pytest.fixture
def three_node_store(store) -> InMemoryRelationshipStore:
    """Nodes 1, 2, 3 with a single dependency edge 1 -> 2."""
    for i in (1, 2, 3):
        store.store_node(make_node(i))
    store.store_relationship(make_rel(1, 2, 0.8, RelationshipType.DEPENDENCY))
    return store


@pytest.fixture
def star_store(store) -> InMemoryRelationshipStore:
    """Five nodes, four edges radiating from node 1."""
    for i in range(1, 6):
        store.store_node(make_node(i))
    for i in range(2, 6):
        store.store_relationship(make_rel(1, i, 0.1 * i))
    return store


@pytest.fixture
def chain_store(store) -> InMemoryRelationshipStore:
    """
    Dependency chain 1 -> 2 -> 3 -> 4 plus a strong shortcut 1 -> 4 and
    an isolated node 5, and a strong integration edge 1 -> 3.

    Levels: 1=0, 2=1, 3=2, 4=1 (reached first through the shortcut), 5=0.
    """
    tiers = [Tier.ENTERPRISE, Tier.PREMIUM, Tier.STANDARD, Tier.STANDARD, Tier.BASIC]
    for i, tier in enumerate(tiers, start=1):
        store.store_node(make_node(i, tier=tier))
    store.store_relationship(make_rel(1, 2, 0.35, RelationshipType.DEPENDENCY))
    store.store_relationship(make_rel(2, 3, 0.30, RelationshipType.DEPENDENCY))
    store.store_relationship(make_rel(3, 4, 0.25, RelationshipType.DEPENDENCY))
    store.store_relationship(make_rel(1, 4, 0.90, RelationshipType.DEPENDENCY))
    store.store_relationship(make_rel(1, 3, 0.85, RelationshipType.INTEGRATION))
    return store
