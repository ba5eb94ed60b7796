import threading

import networkx as nx
import pytest

from vconn import (
    ConnectivityConfig,
    FlowAlgorithm,
    InvalidInputError,
    SynchronizedVertexConnectivityInspector,
    VertexConnectivityInspector,
)


class TestScenarios:
    def test_path(self, path4):
        inspector = VertexConnectivityInspector(path4)

        assert inspector.get_connectivity() == 1
        separator = inspector.get_minimum_separator("a", "d")
        assert len(separator) == 1
        assert set(separator) <= {"b", "c"}
        assert inspector.is_k_connected(1)
        assert not inspector.is_k_connected(2)

    def test_cycle(self, cycle5):
        inspector = VertexConnectivityInspector(cycle5)

        assert inspector.get_connectivity() == 2
        for s, t in [(0, 2), (0, 3), (1, 3), (1, 4), (2, 4)]:
            assert len(inspector.get_minimum_separator(s, t)) == 2

    def test_complete_graph(self, complete4):
        inspector = VertexConnectivityInspector(complete4)

        assert inspector.get_connectivity() == 3
        for s, t in [("a", "b"), ("b", "d"), ("d", "a")]:
            with pytest.raises(InvalidInputError, match="adjacent"):
                inspector.get_minimum_separator(s, t)
        assert inspector.is_k_connected(3)
        assert not inspector.is_k_connected(4)

    def test_disconnected_pair(self, two_isolated):
        inspector = VertexConnectivityInspector(two_isolated)

        assert inspector.get_connectivity() == 0
        assert inspector.get_minimum_separator("a", "b") == ()
        assert inspector.is_k_connected(0)
        assert not inspector.is_k_connected(1)

    def test_directed_cycle(self, directed_cycle3):
        inspector = VertexConnectivityInspector(directed_cycle3)

        assert inspector.is_directed
        assert inspector.get_connectivity() == 1
        assert inspector.get_minimum_separator("a", "c") == ("b",)
        with pytest.raises(InvalidInputError, match="adjacent"):
            inspector.get_minimum_separator("c", "a")

    def test_directed_chain(self, directed_chain3):
        inspector = VertexConnectivityInspector(directed_chain3)

        assert inspector.get_minimum_separator("a", "c") == ("b",)
        assert inspector.get_local_connectivity("a", "c") == 1
        # Nothing reaches "a", so the chain is not strongly connected.
        assert inspector.get_connectivity() == 0

    def test_cut_vertex(self, bowtie):
        inspector = VertexConnectivityInspector(bowtie)

        assert inspector.get_connectivity() == 1
        assert inspector.get_minimum_separator("a", "e") == ("c",)
        assert inspector.get_minimum_separator("e", "a") == ("c",)


class TestValidation:
    def test_none_graph(self):
        with pytest.raises(InvalidInputError, match="must not be None"):
            VertexConnectivityInspector(None)

    def test_non_networkx_graph(self):
        with pytest.raises(InvalidInputError, match="Expected a networkx graph"):
            VertexConnectivityInspector({"a": ["b"]})

    def test_single_vertex(self):
        g = nx.Graph()
        g.add_node("a")
        with pytest.raises(InvalidInputError, match="fewer than 2 vertices"):
            VertexConnectivityInspector(g)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            VertexConnectivityInspector(nx.Graph())

    def test_unknown_vertex(self, path4):
        inspector = VertexConnectivityInspector(path4)
        with pytest.raises(InvalidInputError, match="not in the graph"):
            inspector.get_minimum_separator("a", "z")
        with pytest.raises(InvalidInputError, match="not in the graph"):
            inspector.get_local_connectivity(["a"], "d")

    def test_same_vertex(self, path4):
        inspector = VertexConnectivityInspector(path4)
        with pytest.raises(InvalidInputError, match="same vertex"):
            inspector.get_minimum_separator("a", "a")

    def test_adjacent_undirected_in_both_orders(self, path4):
        inspector = VertexConnectivityInspector(path4)
        with pytest.raises(InvalidInputError, match="adjacent"):
            inspector.get_minimum_separator("a", "b")
        with pytest.raises(InvalidInputError, match="adjacent"):
            inspector.get_minimum_separator("b", "a")

    @pytest.mark.parametrize("k", [-1, 1.5, "2", True])
    def test_bad_threshold(self, path4, k):
        inspector = VertexConnectivityInspector(path4)
        with pytest.raises(InvalidInputError, match="non-negative integer"):
            inspector.is_k_connected(k)

    def test_integer_like_threshold_accepted(self, cycle5):
        class Two:
            def __index__(self):
                return 2

        inspector = VertexConnectivityInspector(cycle5)
        assert inspector.is_k_connected(Two())
        assert not inspector.is_k_connected(Two().__index__() + 1)

    def test_numpy_integer_threshold_accepted(self, cycle5):
        np = pytest.importorskip("numpy")
        inspector = VertexConnectivityInspector(cycle5)
        assert inspector.is_k_connected(np.int64(2))
        assert not inspector.is_k_connected(np.int32(3))

    def test_failed_query_caches_nothing(self, path4):
        inspector = VertexConnectivityInspector(path4)
        with pytest.raises(InvalidInputError):
            inspector.get_minimum_separator("a", "b")
        assert inspector.flow_query_count == 0


class TestCaching:
    def test_separator_repeated_call_returns_same_object(self, cycle5):
        inspector = VertexConnectivityInspector(cycle5)
        first = inspector.get_minimum_separator(0, 2)
        queries = inspector.flow_query_count

        assert inspector.get_minimum_separator(0, 2) is first
        assert inspector.flow_query_count == queries

    def test_connectivity_computed_once(self, cycle5):
        inspector = VertexConnectivityInspector(cycle5)
        assert inspector.get_connectivity() == 2
        queries = inspector.flow_query_count

        assert inspector.get_connectivity() == 2
        assert inspector.is_k_connected(2)
        assert not inspector.is_k_connected(3)
        assert inspector.flow_query_count == queries

    def test_threshold_equal_to_connectivity_caches_it(self, cycle5):
        inspector = VertexConnectivityInspector(cycle5)
        assert inspector.is_k_connected(2)
        queries = inspector.flow_query_count

        assert inspector.get_connectivity() == 2
        assert inspector.flow_query_count == queries

    def test_threshold_below_connectivity_does_not_cache(self, cycle5):
        inspector = VertexConnectivityInspector(cycle5)
        assert inspector.is_k_connected(1)
        queries = inspector.flow_query_count

        assert inspector.get_connectivity() == 2
        assert inspector.flow_query_count > queries

    def test_trivial_thresholds_need_no_flow(self, cycle5):
        inspector = VertexConnectivityInspector(cycle5)
        assert inspector.is_k_connected(0)
        assert not inspector.is_k_connected(5)
        assert inspector.flow_query_count == 0

    def test_threshold_early_exit(self):
        n = 10
        inspector = VertexConnectivityInspector(nx.path_graph(n))
        assert not inspector.is_k_connected(3)
        assert inspector.flow_query_count == n - 2


class TestConfiguration:
    @pytest.mark.parametrize("algorithm", list(FlowAlgorithm))
    def test_flow_algorithm(self, cycle5, algorithm):
        config = ConnectivityConfig(flow_algorithm=algorithm)
        inspector = VertexConnectivityInspector(cycle5, config=config)
        assert inspector.get_connectivity() == 2
        assert inspector.get_minimum_separator(0, 2) == (1, 4)

    def test_crossing_capacity_too_small(self, cycle5):
        config = ConnectivityConfig(crossing_capacity=2)
        with pytest.raises(InvalidInputError, match="below the vertex count"):
            VertexConnectivityInspector(cycle5, config=config)

    def test_capacity_attribute_name(self, cycle5):
        config = ConnectivityConfig(capacity_attr="cap")
        inspector = VertexConnectivityInspector(cycle5, config=config)
        assert inspector.split_digraph.graph[-1][1] == {"cap": 1}
        assert inspector.get_connectivity() == 2

    def test_input_graph_untouched(self, cycle5):
        before = (list(cycle5.nodes(data=True)), list(cycle5.edges(data=True)))
        VertexConnectivityInspector(cycle5).get_connectivity()
        assert (list(cycle5.nodes(data=True)), list(cycle5.edges(data=True))) == before


class TestSynchronized:
    def test_same_results_as_plain_inspector(self, bowtie):
        plain = VertexConnectivityInspector(bowtie)
        synced = SynchronizedVertexConnectivityInspector(bowtie)

        assert synced.get_connectivity() == plain.get_connectivity()
        assert synced.is_k_connected(2) == plain.is_k_connected(2)
        assert synced.get_minimum_separator("a", "d") == plain.get_minimum_separator("a", "d")
        assert synced.get_local_connectivity("b", "e") == 1

    def test_concurrent_queries(self):
        graph = nx.circular_ladder_graph(8)
        inspector = SynchronizedVertexConnectivityInspector(graph)
        pairs = [(0, 2), (0, 4), (1, 5), (3, 7), (2, 6), (0, 12)]
        results = {}
        errors = []

        def worker(pair):
            try:
                results[pair] = inspector.get_minimum_separator(*pair)
            except Exception as exc:  # pragma: no cover - surfaced via assert
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(p,)) for p in pairs * 3]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        for s, t in pairs:
            assert len(results[(s, t)]) == nx.algorithms.connectivity.local_node_connectivity(
                graph, s, t
            )
        assert inspector.get_connectivity() == 3
