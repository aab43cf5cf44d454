"""Dependency graph data models for bundle modules."""

from dataclasses import dataclass, field
from enum import Enum

from ..models import BundleModule


class EdgeKind(str, Enum):
    """How a dependency edge came to exist."""
    IMPLICIT = "implicit"  # Every non-base module depends on base
    EXPLICIT = "explicit"  # Declared via <uses-split>


@dataclass(frozen=True)
class DependencyEdge:
    """A directed edge from a dependent module to its dependency."""
    dependent: str
    dependency: str
    kind: EdgeKind

    @property
    def is_implicit(self) -> bool:
        return self.kind == EdgeKind.IMPLICIT


@dataclass
class ModuleGraph:
    """Module dependency graph built for a single validation run.

    Edge targets are names and may refer to modules that do not exist;
    lookups by name resolve to the first module declared with that name.
    """
    ordered_modules: list[BundleModule] = field(default_factory=list)
    modules: dict[str, BundleModule] = field(default_factory=dict)
    edges: list[DependencyEdge] = field(default_factory=list)

    def add_module(self, module: BundleModule) -> None:
        """Add a module node, keeping input order."""
        self.ordered_modules.append(module)
        self.modules.setdefault(module.name, module)

    def add_edge(self, edge: DependencyEdge) -> None:
        """Add an edge to the graph."""
        self.edges.append(edge)

    def get(self, name: str) -> BundleModule | None:
        return self.modules.get(name)

    def edges_from(self, name: str) -> list[DependencyEdge]:
        """Outgoing edges of a module, implicit edge first then declaration order."""
        return [edge for edge in self.edges if edge.dependent == name]

    def explicit_targets(self, name: str) -> list[str]:
        return [edge.dependency for edge in self.edges_from(name) if not edge.is_implicit]

    def adjacency(self) -> dict[str, list[str]]:
        """Adjacency list over all edges, keyed by every known module name."""
        graph: dict[str, list[str]] = {name: [] for name in self.modules}
        for edge in self.edges:
            graph.setdefault(edge.dependent, []).append(edge.dependency)
        return graph

    @property
    def explicit_edge_count(self) -> int:
        return sum(1 for edge in self.edges if not edge.is_implicit)
