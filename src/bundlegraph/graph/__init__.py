"""Module dependency graph construction and rendering."""

from .builder import build_module_graph
from .mermaid import MermaidRenderer
from .models import DependencyEdge, EdgeKind, ModuleGraph

__all__ = [
    "build_module_graph",
    "ModuleGraph",
    "DependencyEdge",
    "EdgeKind",
    "MermaidRenderer",
]
