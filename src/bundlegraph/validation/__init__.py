"""Validation of the module dependency graph of a bundle.

Structural checks (base module, split IDs, dependency declarations, cycles)
run first, then delivery-mode compatibility, then minSdkVersion consistency.
"""

from .errors import (
    CyclicDependencyError,
    DeliveryModeError,
    DuplicateDependencyError,
    ErrorKind,
    InstallTimeDependsOnOnDemandError,
    InstallTimeVersionMismatchError,
    MissingRootError,
    ModuleDependencyValidationError,
    OnDemandVersionTooLowError,
    RootDeclaresSplitIdError,
    SelfDependencyError,
    SplitIdMismatchError,
    StructuralError,
    UnknownDependencyError,
    VersionError,
)
from .framework import (
    ModuleDependencyValidator,
    ValidationIssue,
    ValidationResult,
    ValidationRule,
    ValidationStatus,
    validate_all_modules,
)
from .rules import (
    CycleDetectionRule,
    DeliveryModeRule,
    DependencyDeclarationsRule,
    MinSdkVersionRule,
    ModuleNamesRule,
)

__all__ = [
    "validate_all_modules",
    "ModuleDependencyValidator",
    "ValidationResult",
    "ValidationIssue",
    "ValidationRule",
    "ValidationStatus",
    "ModuleNamesRule",
    "DependencyDeclarationsRule",
    "CycleDetectionRule",
    "DeliveryModeRule",
    "MinSdkVersionRule",
    "ErrorKind",
    "ModuleDependencyValidationError",
    "StructuralError",
    "DeliveryModeError",
    "VersionError",
    "MissingRootError",
    "RootDeclaresSplitIdError",
    "SplitIdMismatchError",
    "SelfDependencyError",
    "DuplicateDependencyError",
    "UnknownDependencyError",
    "CyclicDependencyError",
    "InstallTimeDependsOnOnDemandError",
    "InstallTimeVersionMismatchError",
    "OnDemandVersionTooLowError",
]
