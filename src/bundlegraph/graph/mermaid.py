"""Mermaid diagram renderer for module dependency graphs."""

import logging
import re

from ..models import BundleModule
from .models import DependencyEdge, ModuleGraph

logger = logging.getLogger(__name__)


class MermaidRenderer:
    """Renders a ModuleGraph as a Mermaid flowchart."""

    def __init__(self, show_implicit_edges: bool = True, show_versions: bool = True):
        self.show_implicit_edges = show_implicit_edges
        self.show_versions = show_versions
        self._node_ids: dict[str, str] = {}

    @property
    def format_name(self) -> str:
        return "mermaid"

    def get_file_extension(self) -> str:
        return ".mmd"

    def render(self, graph: ModuleGraph, title: str = "Module dependencies") -> str:
        """Render the graph as a Mermaid flowchart.

        Dangling edge targets are rendered as plain nodes so that an
        invalid graph can still be inspected.
        """
        self._node_ids = self._assign_node_ids(graph)
        lines = ["flowchart BT", f"    %% {title}", ""]

        lines.append("    %% Modules")
        rendered: set[str] = set()
        for module in graph.ordered_modules:
            if module.name in rendered:
                continue
            rendered.add(module.name)
            lines.append(f"    {self._render_node(module)}")

        missing = [
            edge.dependency for edge in graph.edges
            if edge.dependency not in graph.modules and edge.dependency not in rendered
        ]
        for name in dict.fromkeys(missing):
            rendered.add(name)
            lines.append(f"    {self._safe_id(name)}[{self._escape_label(name)}]")
        lines.append("")

        edges = [edge for edge in graph.edges if self.show_implicit_edges or not edge.is_implicit]
        if edges:
            lines.append("    %% Dependencies")
            for edge in edges:
                lines.append(f"    {self._render_edge(edge)}")
            lines.append("")

        lines.extend(self._render_styling(graph, missing))

        logger.debug(f"Rendered {len(rendered)} nodes and {len(edges)} edges as Mermaid")
        return "\n".join(lines)

    def _render_node(self, module: BundleModule) -> str:
        label = self._escape_label(module.name)
        if self.show_versions:
            label = f"{label}<br/>minSdk {module.effective_min_sdk_version}"

        if module.is_base:
            return f"{self._safe_id(module.name)}{{{{{label}}}}}"
        elif module.on_demand:
            return f"{self._safe_id(module.name)}([{label}])"
        return f"{self._safe_id(module.name)}({label})"

    def _render_edge(self, edge: DependencyEdge) -> str:
        arrow = "-.->" if edge.is_implicit else "-->"
        return f"{self._safe_id(edge.dependent)} {arrow} {self._safe_id(edge.dependency)}"

    def _render_styling(self, graph: ModuleGraph, missing: list[str]) -> list[str]:
        lines = []
        on_demand = [m for m in graph.modules.values() if m.on_demand]
        if on_demand:
            lines.append("    %% On-demand styling")
            lines.append("    classDef onDemand fill:#fff3e0,stroke:#ef6c00,stroke-width:1px")
            for module in on_demand:
                lines.append(f"    class {self._safe_id(module.name)} onDemand")

        if missing:
            lines.append("    %% Missing module styling")
            lines.append("    classDef missing fill:#f5f5f5,stroke:#c62828,stroke-dasharray: 3 3")
            for name in dict.fromkeys(missing):
                lines.append(f"    class {self._safe_id(name)} missing")

        return lines

    def _escape_label(self, label: str) -> str:
        """Escape label for Mermaid rendering."""
        for old, new in (('"', "'"), ("[", "("), ("]", ")"), ("{", "("), ("}", ")"), ("|", ":")):
            label = label.replace(old, new)
        return label

    def _assign_node_ids(self, graph: ModuleGraph) -> dict[str, str]:
        """Map every module and edge target name to a unique Mermaid node id.

        Names that sanitize to the same id (e.g. 'a-b' and 'a_b') get a
        numeric suffix in order of first appearance.
        """
        names = [module.name for module in graph.ordered_modules]
        names += [edge.dependency for edge in graph.edges]

        node_ids: dict[str, str] = {}
        used: set[str] = set()
        for name in dict.fromkeys(names):
            base_id = re.sub(r"[^a-zA-Z0-9_]", "_", name)
            node_id = base_id
            suffix = 2
            while node_id in used:
                node_id = f"{base_id}_{suffix}"
                suffix += 1
            used.add(node_id)
            node_ids[name] = node_id
        return node_ids

    def _safe_id(self, name: str) -> str:
        return self._node_ids.get(name) or re.sub(r"[^a-zA-Z0-9_]", "_", name)
