"""
Tests for InMemoryRelationshipStore

Covers:
    - Node insert-or-replace
    - Relationship overwrite by ordered key
    - Exact-key lookup vs. symmetric lookup
    - Matrix population, including bidirectional edges
    - Dependency map scans
    - Strongest-connection ranking
    - connections kept in sync with the edge set
    - Isolation between store instances
"""

import pytest

from sectorgraph.core import RelationshipType, Tier
from sectorgraph.repositories import InMemoryRelationshipStore

from conftest import make_node, make_rel


# =============================================================================
# Nodes
# =============================================================================

class TestNodes:
    """Tests for node insert-or-replace."""

    def test_store_and_get_node(self, store):
        store.store_node(make_node(1, "Creative Tech"))
        assert store.get_node(1).name == "Creative Tech"

    def test_store_node_replaces_by_id(self, store):
        store.store_node(make_node(1, "Old"))
        store.store_node(make_node(1, "New"))
        assert len(store.get_all_nodes()) == 1
        assert store.get_node(1).name == "New"

    def test_unknown_node_is_none(self, store):
        assert store.get_node(404) is None

    def test_stored_node_is_a_copy(self, store):
        node = make_node(1)
        store.store_node(node)
        node.name = "changed after store"
        assert store.get_node(1).name == "Sector 1"

    def test_replaced_node_keeps_degree(self, three_node_store):
        three_node_store.store_node(make_node(1, "Renamed"))
        assert three_node_store.get_node(1).connections == 1

    def test_hierarchy_tiers_group_by_tier(self, store):
        store.store_node(make_node(1, tier=Tier.PREMIUM))
        store.store_node(make_node(2, tier=Tier.PREMIUM))
        store.store_node(make_node(3, tier=Tier.BASIC))
        tiers = store.get_hierarchy_tiers()
        assert sorted(tiers) == ["Basic", "Premium"]
        assert [n.id for n in tiers["Premium"]] == [1, 2]


# =============================================================================
# Relationships
# =============================================================================

class TestRelationships:
    """Tests for keyed relationship storage and lookup."""

    def test_same_key_overwrites(self, store):
        store.store_relationship(make_rel(1, 2, 0.4))
        store.store_relationship(make_rel(1, 2, 0.9))
        assert len(store.get_all_relationships()) == 1
        assert store.get_relationship(1, 2).strength == 0.9

    def test_reverse_key_is_a_separate_edge(self, store):
        store.store_relationship(make_rel(1, 2, 0.4))
        store.store_relationship(make_rel(2, 1, 0.6))
        assert len(store.get_all_relationships()) == 2

    def test_get_relationship_is_exact_key_only(self, store):
        """Bidirectional edges are still stored under one key."""
        store.store_relationship(make_rel(1, 2, 0.9, bidirectional=True))
        assert store.get_relationship(1, 2) is not None
        assert store.get_relationship(2, 1) is None

    def test_get_relationship_between_checks_both_keys(self, store):
        store.store_relationship(make_rel(1, 2, 0.9))
        assert store.get_relationship_between(2, 1).strength == 0.9
        assert store.get_relationship_between(1, 3) is None

    def test_strength_is_not_validated(self, store):
        store.store_relationship(make_rel(1, 2, 1.7))
        assert store.get_relationship(1, 2).strength == 1.7

    def test_edge_to_unknown_node_is_tolerated(self, store):
        store.store_node(make_node(1))
        store.store_relationship(make_rel(1, 99, 0.5))
        assert store.get_relationship(1, 99) is not None
        assert store.get_node(1).connections == 1

    def test_clear(self, three_node_store):
        three_node_store.clear()
        assert three_node_store.get_all_nodes() == []
        assert three_node_store.get_all_relationships() == []
        assert three_node_store.get_matrix() == {}
        assert three_node_store.get_stats().total_connections == 0


# =============================================================================
# Matrix
# =============================================================================

class TestMatrix:
    """Tests for the adjacency matrix kept by the store."""

    def test_directed_edge_fills_one_cell(self, store):
        store.store_relationship(make_rel(1, 2, 0.5))
        matrix = store.get_matrix()
        assert matrix[1][2].strength == 0.5
        assert 2 not in matrix

    def test_bidirectional_edge_fills_both_cells(self, store):
        store.store_relationship(make_rel(1, 2, 0.9, RelationshipType.INTEGRATION, bidirectional=True))
        matrix = store.get_matrix()
        assert matrix[1][2].strength == 0.9
        assert matrix[2][1].strength == 0.9
        assert matrix[2][1].bidirectional is True
        assert matrix[2][1].type == RelationshipType.INTEGRATION

    def test_matrix_rebuilt_on_overwrite(self, store):
        store.store_relationship(make_rel(1, 2, 0.9, bidirectional=True))
        store.store_relationship(make_rel(1, 2, 0.5, bidirectional=False))
        matrix = store.get_matrix()
        assert matrix[1][2].strength == 0.5
        assert 1 not in matrix.get(2, {})

    def test_get_matrix_returns_copy(self, store):
        store.store_relationship(make_rel(1, 2, 0.5))
        store.get_matrix()[1].clear()
        assert 2 in store.get_matrix()[1]


# =============================================================================
# Dependencies
# =============================================================================

class TestDependencies:
    """Tests for dependency map scans."""

    def test_example_scenario(self, three_node_store):
        deps_of_2 = three_node_store.get_dependencies(2)
        deps_of_1 = three_node_store.get_dependencies(1)
        assert [n.id for n in deps_of_2.dependents] == [1]
        assert deps_of_2.dependencies == []
        assert [n.id for n in deps_of_1.dependencies] == [2]
        assert deps_of_1.dependents == []

    def test_node_without_dependency_edges(self, store):
        store.store_node(make_node(1))
        store.store_node(make_node(2))
        store.store_relationship(make_rel(1, 2, 0.9, RelationshipType.SYNERGY))
        result = store.get_dependencies(1)
        assert result.dependencies == []
        assert result.dependents == []
        assert result.to_dict() == {"dependencies": [], "dependents": []}

    def test_unknown_sector(self, three_node_store):
        result = three_node_store.get_dependencies(404)
        assert result.dependencies == [] and result.dependents == []

    def test_missing_endpoint_is_skipped(self, store):
        store.store_node(make_node(1))
        store.store_relationship(make_rel(1, 99, 0.3, RelationshipType.DEPENDENCY))
        assert store.get_dependencies(1).dependencies == []


# =============================================================================
# Strongest Connections
# =============================================================================

class TestStrongestConnections:
    """Tests for strongest-connection ranking."""

    def test_sorted_descending_and_limited(self, star_store):
        top = star_store.get_strongest_connections(2)
        assert len(top) == 2
        assert [r.target_id for r in top] == [5, 4]

    def test_limit_larger_than_edge_count(self, star_store):
        assert len(star_store.get_strongest_connections(50)) == 4

    def test_default_limit(self, store):
        for i in range(2, 20):
            store.store_relationship(make_rel(1, i, i / 100))
        assert len(store.get_strongest_connections()) == 10

    def test_idempotent_without_mutation(self, star_store):
        first = star_store.get_strongest_connections(3)
        second = star_store.get_strongest_connections(3)
        assert first == second

    def test_empty_store(self, store):
        assert store.get_strongest_connections(5) == []


# =============================================================================
# Connection Counts
# =============================================================================

class TestConnectionCounts:
    """Tests that node connection counts follow the edge set."""

    def test_connections_match_incident_edges(self, chain_store):
        """Each edge counts once for its source and once for its target."""
        edges = chain_store.get_all_relationships()
        for node in chain_store.get_all_nodes():
            expected = sum(
                (rel.source_id == node.id) + (rel.target_id == node.id)
                for rel in edges
            )
            assert node.connections == expected

    def test_star_center_degree(self, star_store):
        assert star_store.get_node(1).connections == 4
        assert all(star_store.get_node(i).connections == 1 for i in range(2, 6))


class TestIsolation:
    """Tests that store instances share nothing."""

    def test_stores_do_not_share_state(self, three_node_store):
        other = InMemoryRelationshipStore()
        assert other.get_all_nodes() == []
        assert other.get_all_relationships() == []
        assert len(three_node_store.get_all_nodes()) == 3
