"""Core validation framework for module dependency graphs.

Rules run in a fixed order over a graph built fresh for each call. The first
violation aborts the run; later rules rely on the invariants established by
earlier ones and do not re-check them.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..graph import ModuleGraph, build_module_graph
from ..models import BundleModule
from .errors import ModuleDependencyValidationError

logger = logging.getLogger(__name__)


class ValidationStatus(str, Enum):
    """Outcome of a validation run."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationIssue:
    """The violation that stopped a validation run."""
    rule: str
    kind: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.kind}] {self.rule}: {self.message}"


@dataclass
class ValidationResult:
    """Report of a validation run, for callers that prefer not to catch."""
    status: ValidationStatus
    issues: list[ValidationIssue] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.status == ValidationStatus.PASS else 1

    @property
    def error(self) -> ValidationIssue | None:
        return self.issues[0] if self.issues else None

    def add_issue(self, rule: str, error: ModuleDependencyValidationError) -> None:
        """Record the violation raised by a rule and fail the result."""
        details = error.to_dict()
        details.pop("kind")
        details.pop("message")
        self.issues.append(ValidationIssue(rule, error.kind.value, error.message, details))
        self.status = ValidationStatus.FAIL

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self.counters[name] = self.counters.get(name, 0) + value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "issues": [
                {
                    "rule": issue.rule,
                    "kind": issue.kind,
                    "message": issue.message,
                    "details": issue.details,
                }
                for issue in self.issues
            ]
        }


class ValidationRule(ABC):
    """Base class for validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def validate(self, graph: ModuleGraph) -> None:
        """Check the graph and raise on the first violation found.

        Args:
            graph: Module graph built for the current run

        Raises:
            ModuleDependencyValidationError: describing the violation
        """
        pass


class ModuleDependencyValidator:
    """Validates the dependency graph of all modules of a bundle."""

    def __init__(self, rules: Iterable[ValidationRule] | None = None):
        self.rules: list[ValidationRule] = list(rules or [])

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def create_default_rules(self) -> None:
        """Install the structural, delivery-mode and minSdkVersion rules in order."""
        from .rules import (
            CycleDetectionRule,
            DeliveryModeRule,
            DependencyDeclarationsRule,
            MinSdkVersionRule,
            ModuleNamesRule,
        )

        self.add_rule(ModuleNamesRule())
        self.add_rule(DependencyDeclarationsRule())
        self.add_rule(CycleDetectionRule())
        self.add_rule(DeliveryModeRule())
        self.add_rule(MinSdkVersionRule())

    def validate(self, modules: Sequence[BundleModule]) -> ModuleGraph:
        """Validate all modules, raising on the first violation.

        Returns:
            The validated graph, confirmed acyclic

        Raises:
            ModuleDependencyValidationError: for the first violation found
        """
        graph = build_module_graph(modules)
        self._run_rules(graph)
        return graph

    def run(self, modules: Sequence[BundleModule]) -> ValidationResult:
        """Validate all modules and report the outcome instead of raising."""
        result = ValidationResult(status=ValidationStatus.PASS)
        graph = build_module_graph(modules)

        result.increment_counter("modules", len(graph.ordered_modules))
        result.increment_counter("on_demand_modules", sum(1 for m in graph.ordered_modules if m.on_demand))
        result.increment_counter("edges", len(graph.edges))
        result.increment_counter("explicit_edges", graph.explicit_edge_count)

        try:
            self._run_rules(graph, result)
        except ModuleDependencyValidationError as e:
            result.add_issue(e.rule or "unknown", e)

        return result

    def _run_rules(self, graph: ModuleGraph, result: ValidationResult | None = None) -> None:
        logger.info(f"Validating dependencies of {len(graph.ordered_modules)} modules")

        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            try:
                rule.validate(graph)
            except ModuleDependencyValidationError as e:
                e.rule = rule.name
                logger.info(f"Rule {rule.name} failed: {e.message}")
                raise
            if result is not None:
                result.increment_counter("rules_passed")

        logger.info("Module dependency validation passed")


def validate_all_modules(modules: Sequence[BundleModule]) -> None:
    """Validate the dependency graph formed by all modules of a bundle.

    Args:
        modules: Every module of the bundle, in input order

    Raises:
        ModuleDependencyValidationError: for the first violation found
    """
    validator = ModuleDependencyValidator()
    validator.create_default_rules()
    validator.validate(modules)
