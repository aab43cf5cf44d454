"""Errors raised when the module dependency graph is invalid.

Messages embed module names in single quotes and versions as
``minSdkVersion(N)``; build tooling matches on these substrings.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Diagnosis kinds, one per way the graph can be invalid."""
    MISSING_ROOT = "MissingRoot"
    ROOT_DECLARES_SPLIT_ID = "RootDeclaresSplitId"
    SPLIT_ID_MISMATCH = "SplitIdMismatch"
    SELF_DEPENDENCY = "SelfDependency"
    DUPLICATE_DEPENDENCY = "DuplicateDependency"
    UNKNOWN_DEPENDENCY = "UnknownDependency"
    CYCLIC_DEPENDENCY = "CyclicDependency"
    INSTALL_TIME_DEPENDS_ON_ON_DEMAND = "InstallTimeDependsOnOnDemand"
    INSTALL_TIME_VERSION_MISMATCH = "InstallTimeVersionMismatch"
    ON_DEMAND_VERSION_TOO_LOW = "OnDemandVersionTooLow"


class ModuleDependencyValidationError(Exception):
    """Base class for module dependency violations."""

    kind: ErrorKind
    rule: str | None = None  # Set by the validator to the failing rule's name

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        details = {
            key: value for key, value in vars(self).items()
            if key not in ("message", "rule")
        }
        return {"kind": self.kind.value, "message": self.message, **details}


class StructuralError(ModuleDependencyValidationError):
    """The graph is not well formed."""


class MissingRootError(StructuralError):
    kind = ErrorKind.MISSING_ROOT

    def __init__(self, base_count: int = 0):
        self.base_count = base_count
        if base_count == 0:
            super().__init__("Mandatory 'base' module is missing.")
        else:
            super().__init__(
                f"Mandatory 'base' module must be declared exactly once, found {base_count}."
            )


class RootDeclaresSplitIdError(StructuralError):
    kind = ErrorKind.ROOT_DECLARES_SPLIT_ID

    def __init__(self, declared: str):
        self.declared = declared
        super().__init__(
            f"The base module should not declare split ID '{declared}' in its manifest."
        )


class SplitIdMismatchError(StructuralError):
    kind = ErrorKind.SPLIT_ID_MISMATCH

    def __init__(self, module: str, declared: str | None):
        self.module = module
        self.declared = declared
        if declared is None:
            message = (
                f"Module '{module}' does not declare a split ID in its manifest "
                f"but expected '{module}'."
            )
        else:
            message = (
                f"Module '{module}' declares in its manifest that the split ID is "
                f"'{declared}' but expected '{module}'."
            )
        super().__init__(message)


class SelfDependencyError(StructuralError):
    kind = ErrorKind.SELF_DEPENDENCY

    def __init__(self, module: str):
        self.module = module
        super().__init__(f"Module '{module}' depends on itself via <uses-split>.")


class DuplicateDependencyError(StructuralError):
    kind = ErrorKind.DUPLICATE_DEPENDENCY

    def __init__(self, module: str, target: str):
        self.module = module
        self.target = target
        super().__init__(
            f"Module '{module}' declares dependency on module '{target}' multiple times."
        )


class UnknownDependencyError(StructuralError):
    kind = ErrorKind.UNKNOWN_DEPENDENCY

    def __init__(self, module: str, target: str):
        self.module = module
        self.target = target
        super().__init__(
            f"Module '{target}' is referenced by <uses-split> but does not exist "
            f"(referenced from module '{module}')."
        )


class CyclicDependencyError(StructuralError):
    kind = ErrorKind.CYCLIC_DEPENDENCY

    def __init__(self):
        super().__init__("Found cyclic dependency between modules.")


class DeliveryModeError(ModuleDependencyValidationError):
    """An edge connects incompatible delivery modes."""


class InstallTimeDependsOnOnDemandError(DeliveryModeError):
    kind = ErrorKind.INSTALL_TIME_DEPENDS_ON_ON_DEMAND

    def __init__(self, dependent: str, dependency: str):
        self.dependent = dependent
        self.dependency = dependency
        super().__init__(
            f"Install-time module '{dependent}' declares dependency on "
            f"on-demand module '{dependency}'."
        )


class VersionError(ModuleDependencyValidationError):
    """An edge violates the minSdkVersion rules."""

    def __init__(self, message: str, dependent: str, dependency: str,
                 dependent_version: int, dependency_version: int):
        self.dependent = dependent
        self.dependency = dependency
        self.dependent_version = dependent_version
        self.dependency_version = dependency_version
        super().__init__(message)


class InstallTimeVersionMismatchError(VersionError):
    kind = ErrorKind.INSTALL_TIME_VERSION_MISMATCH

    def __init__(self, dependent: str, dependency: str,
                 dependent_version: int, dependency_version: int):
        super().__init__(
            f"Install-time module '{dependent}' has a minSdkVersion({dependent_version}) "
            f"different than the minSdkVersion({dependency_version}) of its dependency "
            f"'{dependency}'.",
            dependent, dependency, dependent_version, dependency_version,
        )


class OnDemandVersionTooLowError(VersionError):
    kind = ErrorKind.ON_DEMAND_VERSION_TOO_LOW

    def __init__(self, dependent: str, dependency: str,
                 dependent_version: int, dependency_version: int):
        super().__init__(
            f"On-demand module '{dependent}' has a minSdkVersion({dependent_version}), "
            f"which is smaller than the minSdkVersion({dependency_version}) of its "
            f"dependency '{dependency}'.",
            dependent, dependency, dependent_version, dependency_version,
        )
