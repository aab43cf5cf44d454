"""Builds the module dependency graph from parsed module records."""

import logging
from collections.abc import Iterable

from ..models import BASE_MODULE_NAME, BundleModule
from .models import DependencyEdge, EdgeKind, ModuleGraph

logger = logging.getLogger(__name__)


def build_module_graph(modules: Iterable[BundleModule]) -> ModuleGraph:
    """Turn a module collection into nodes and edges.

    Never fails: duplicate, self-referencing or dangling declarations are
    kept as edges so that the validation rules can report them.

    Args:
        modules: Parsed module records in input order

    Returns:
        ModuleGraph with one implicit edge to base per non-base module,
        followed by that module's declared edges in declaration order
    """
    graph = ModuleGraph()

    for module in modules:
        graph.add_module(module)

        if not module.is_base:
            graph.add_edge(DependencyEdge(module.name, BASE_MODULE_NAME, EdgeKind.IMPLICIT))

        for dependency in module.uses_split:
            graph.add_edge(DependencyEdge(module.name, dependency, EdgeKind.EXPLICIT))

    logger.debug(
        f"Built module graph with {len(graph.ordered_modules)} modules "
        f"and {len(graph.edges)} edges"
    )
    return graph
