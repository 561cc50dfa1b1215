"""
Tests for NetworkStatisticsCalculator

Covers the aggregate metrics as seen through the store (recomputed on
every write) and the calculator used directly.
"""

import pytest

from sectorgraph.analysis import NetworkStatisticsCalculator, build_network_graph
from sectorgraph.core import NetworkStats

from conftest import make_node, make_rel


@pytest.fixture
def calculator():
    return NetworkStatisticsCalculator()


# =============================================================================
# Stats Through The Store
# =============================================================================

class TestStoreStats:
    """Tests for stats recomputed by the store on every write."""

    def test_empty_store(self, store):
        assert store.get_stats() == NetworkStats()

    def test_three_node_example(self, three_node_store):
        stats = three_node_store.get_stats()
        assert stats.total_connections == 1
        assert stats.avg_connections == pytest.approx(2 / 3)
        assert stats.network_density == pytest.approx(100 / 3)
        assert stats.max_connections == 1
        assert stats.isolated_nodes == 1

    def test_star_example(self, star_store):
        stats = star_store.get_stats()
        assert stats.total_connections == 4
        assert stats.avg_connections == pytest.approx(1.6)
        assert stats.network_density == pytest.approx(40.0)
        assert stats.max_connections == 4
        assert stats.isolated_nodes == 0

    def test_chain_example(self, chain_store):
        stats = chain_store.get_stats()
        assert stats.total_connections == 5
        assert stats.avg_connections == pytest.approx(2.0)
        assert stats.network_density == pytest.approx(50.0)
        assert stats.max_connections == 3
        assert stats.isolated_nodes == 1

    def test_nodes_without_edges(self, store):
        for i in (1, 2, 3):
            store.store_node(make_node(i))
        stats = store.get_stats()
        assert stats.total_connections == 0
        assert stats.avg_connections == 0.0
        assert stats.network_density == 0.0
        assert stats.isolated_nodes == 3

    def test_stats_returned_as_copy(self, three_node_store):
        three_node_store.get_stats().total_connections = 99
        assert three_node_store.get_stats().total_connections == 1


# =============================================================================
# Density
# =============================================================================

class TestDensity:
    """Tests for the edges over possible pairs percentage."""

    def test_reverse_edges_each_count(self, calculator):
        """A->B and B->A are two edges over three possible pairs."""
        nodes = [make_node(i) for i in (1, 2, 3)]
        rels = [make_rel(1, 2), make_rel(2, 1)]
        assert calculator.calculate(nodes, rels).network_density == pytest.approx(200 / 3)

    def test_reverse_edges_on_two_nodes_capped(self, calculator):
        nodes = [make_node(1), make_node(2)]
        rels = [make_rel(1, 2), make_rel(2, 1)]
        assert calculator.calculate(nodes, rels).network_density == pytest.approx(100.0)

    def test_complete_graph_with_both_directions_stays_bounded(self, calculator):
        nodes = [make_node(i) for i in range(1, 5)]
        rels = [make_rel(a, b) for a in range(1, 5) for b in range(1, 5) if a != b]
        density = calculator.calculate(nodes, rels).network_density
        assert density == pytest.approx(100.0)

    def test_self_loop_counts_as_edge(self, calculator):
        """A self-loop is one edge and adds two to the degree."""
        nodes = [make_node(i) for i in (1, 2, 3)]
        stats = calculator.calculate(nodes, [make_rel(1, 1)])
        assert stats.network_density == pytest.approx(100 / 3)
        assert stats.max_connections == 2

    def test_single_node_density_is_zero(self, calculator):
        stats = calculator.calculate([make_node(1)], [make_rel(1, 99)])
        assert stats.network_density == 0.0
        assert stats.total_connections == 1

    def test_density_always_in_range(self, calculator):
        nodes = [make_node(i) for i in range(1, 7)]
        rels = []
        for a in range(1, 7):
            for b in range(1, 7):
                rels.append(make_rel(a, b))
                density = calculator.calculate(nodes, rels).network_density
                assert 0.0 <= density <= 100.0


# =============================================================================
# Graph And Centrality
# =============================================================================

class TestGraph:
    """Tests for the NetworkX graph, degrees and centrality."""

    def test_graph_contains_nodes_and_edges(self, chain_store):
        G = build_network_graph(chain_store.get_all_nodes(), chain_store.get_all_relationships())
        assert G.number_of_nodes() == 5
        assert G.number_of_edges() == 5
        assert G.edges[1, 4]["strength"] == 0.90
        assert G.nodes[3]["tier"] == "Standard"

    def test_degree_map(self, calculator, star_store):
        degrees = calculator.degree_map(star_store.get_all_nodes(), star_store.get_all_relationships())
        assert degrees == {1: 4, 2: 1, 3: 1, 4: 1, 5: 1}

    def test_centrality_ranking(self, calculator, chain_store):
        ranking = calculator.centrality_ranking(
            chain_store.get_all_nodes(), chain_store.get_all_relationships(), limit=3,
        )
        assert len(ranking) == 3
        assert [entry["centrality"] for entry in ranking] == [3, 3, 2]
        assert {ranking[0]["node"].id, ranking[1]["node"].id} == {1, 3}
