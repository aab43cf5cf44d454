"""Tests for module graph construction."""

from bundlegraph.graph import DependencyEdge, EdgeKind, build_module_graph


class TestBuildModuleGraph:
    """Test build_module_graph."""

    def test_base_only(self, module):
        graph = build_module_graph([module("base")])

        assert list(graph.modules) == ["base"]
        assert graph.edges == []

    def test_implicit_edge_before_explicit_edges(self, module):
        graph = build_module_graph([module("base"), module("f1"), module("f2", "f1")])

        assert graph.edges == [
            DependencyEdge("f1", "base", EdgeKind.IMPLICIT),
            DependencyEdge("f2", "base", EdgeKind.IMPLICIT),
            DependencyEdge("f2", "f1", EdgeKind.EXPLICIT),
        ]

    def test_implicit_edge_without_base(self, module):
        graph = build_module_graph([module("feature")])

        assert graph.edges == [DependencyEdge("feature", "base", EdgeKind.IMPLICIT)]
        assert graph.get("base") is None

    def test_preserves_duplicates_and_declaration_order(self, module):
        graph = build_module_graph([module("base"), module("f", "b", "a", "b", "f", "missing")])

        assert graph.explicit_targets("f") == ["b", "a", "b", "f", "missing"]
        assert graph.explicit_edge_count == 5

    def test_explicit_base_dependency_kept_alongside_implicit(self, module):
        graph = build_module_graph([module("base"), module("f", "base")])

        assert [edge.kind for edge in graph.edges_from("f")] == [EdgeKind.IMPLICIT, EdgeKind.EXPLICIT]

    def test_base_has_no_outgoing_edges(self, module):
        graph = build_module_graph([module("base"), module("f1")])

        assert graph.edges_from("base") == []

    def test_repeated_names_keep_first_for_lookup(self, module):
        first = module("base")
        second = module("base", min_sdk=21)
        graph = build_module_graph([first, second])

        assert graph.ordered_modules == [first, second]
        assert graph.get("base") is first

    def test_adjacency(self, module):
        graph = build_module_graph([module("base"), module("f1"), module("f2", "f1")])

        assert graph.adjacency() == {
            "base": [],
            "f1": ["base"],
            "f2": ["base", "f1"],
        }

    def test_accepts_any_iterable(self, module):
        graph = build_module_graph(module(name) for name in ("base", "f1"))

        assert list(graph.modules) == ["base", "f1"]
