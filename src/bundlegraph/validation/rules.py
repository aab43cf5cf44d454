"""Validation rules for module dependency graphs.

Each rule checks one aspect of the graph and raises the first violation it
finds. Modules are scanned in input order, dependencies in declaration order.
"""

import logging
from enum import Enum

from ..graph import ModuleGraph
from .errors import (
    CyclicDependencyError,
    DuplicateDependencyError,
    InstallTimeDependsOnOnDemandError,
    InstallTimeVersionMismatchError,
    MissingRootError,
    OnDemandVersionTooLowError,
    RootDeclaresSplitIdError,
    SelfDependencyError,
    SplitIdMismatchError,
    UnknownDependencyError,
)
from .framework import ValidationRule

logger = logging.getLogger(__name__)


class ModuleNamesRule(ValidationRule):
    """Validate the base module and the split IDs modules declare."""

    @property
    def name(self) -> str:
        return "module_names"

    def validate(self, graph: ModuleGraph) -> None:
        base_modules = [module for module in graph.ordered_modules if module.is_base]
        if len(base_modules) != 1:
            raise MissingRootError(len(base_modules))

        base = base_modules[0]
        if base.split_id is not None:
            raise RootDeclaresSplitIdError(base.split_id)

        for module in graph.ordered_modules:
            if not module.is_base and module.split_id != module.name:
                raise SplitIdMismatchError(module.name, module.split_id)


class DependencyDeclarationsRule(ValidationRule):
    """Validate the <uses-split> declarations of every module."""

    @property
    def name(self) -> str:
        return "dependency_declarations"

    def validate(self, graph: ModuleGraph) -> None:
        # Each check scans all modules before the next one starts
        for module in graph.ordered_modules:
            if module.name in module.uses_split:
                raise SelfDependencyError(module.name)

        for module in graph.ordered_modules:
            seen: set[str] = set()
            for target in module.uses_split:
                if target in seen:
                    raise DuplicateDependencyError(module.name, target)
                seen.add(target)

        for module in graph.ordered_modules:
            for target in module.uses_split:
                if target not in graph.modules:
                    raise UnknownDependencyError(module.name, target)


class _VisitState(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    FINISHED = 2


class CycleDetectionRule(ValidationRule):
    """Detect cycles over implicit and explicit edges."""

    @property
    def name(self) -> str:
        return "cycle_detection"

    def validate(self, graph: ModuleGraph) -> None:
        adjacency = graph.adjacency()
        state = {name: _VisitState.UNVISITED for name in adjacency}

        for module in graph.ordered_modules:
            if state[module.name] != _VisitState.UNVISITED:
                continue

            # Iterative DFS; each frame holds the node and its remaining neighbours
            state[module.name] = _VisitState.IN_PROGRESS
            stack = [(module.name, iter(adjacency[module.name]))]
            while stack:
                node, neighbors = stack[-1]
                for neighbor in neighbors:
                    neighbor_state = state.get(neighbor, _VisitState.FINISHED)
                    if neighbor_state == _VisitState.IN_PROGRESS:
                        logger.debug(f"Cycle closed by edge {node} -> {neighbor}")
                        raise CyclicDependencyError()
                    if neighbor_state == _VisitState.UNVISITED:
                        state[neighbor] = _VisitState.IN_PROGRESS
                        stack.append((neighbor, iter(adjacency[neighbor])))
                        break
                else:
                    state[node] = _VisitState.FINISHED
                    stack.pop()


class DeliveryModeRule(ValidationRule):
    """Install-time modules must not depend on on-demand modules."""

    @property
    def name(self) -> str:
        return "delivery_mode"

    def validate(self, graph: ModuleGraph) -> None:
        for edge in graph.edges:
            dependent = graph.modules[edge.dependent]
            dependency = graph.modules[edge.dependency]
            if dependent.is_install_time and dependency.on_demand:
                raise InstallTimeDependsOnOnDemandError(dependent.name, dependency.name)


class MinSdkVersionRule(ValidationRule):
    """Validate effective minSdkVersion along every edge.

    Install-time modules must match their dependencies exactly, so every
    install-time module ends up matching base. On-demand modules must be at
    least as high as their dependencies, except base which is already
    installed by the time they are fetched.
    """

    @property
    def name(self) -> str:
        return "min_sdk_version"

    def validate(self, graph: ModuleGraph) -> None:
        for edge in graph.edges:
            dependent = graph.modules[edge.dependent]
            dependency = graph.modules[edge.dependency]
            dependent_version = dependent.effective_min_sdk_version
            dependency_version = dependency.effective_min_sdk_version

            if dependent.is_install_time:
                if dependent_version != dependency_version:
                    raise InstallTimeVersionMismatchError(
                        dependent.name, dependency.name, dependent_version, dependency_version
                    )
            elif not dependency.is_base and dependent_version < dependency_version:
                raise OnDemandVersionTooLowError(
                    dependent.name, dependency.name, dependent_version, dependency_version
                )
