"""bundlegraph - Module dependency validation for modular app bundles.

bundlegraph checks that the modules of an app bundle form a consistent
dependency graph before the bundle is packaged: a single base module,
matching split IDs, well-formed and acyclic dependencies, compatible
delivery modes and consistent minSdkVersion values.
"""

__version__ = "0.1.0"
__author__ = "bundlegraph contributors"
__description__ = "Module dependency validation for modular app bundles"

from bundlegraph.models import BundleModule
from bundlegraph.validation import ModuleDependencyValidationError, validate_all_modules

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "BundleModule",
    "ModuleDependencyValidationError",
    "validate_all_modules",
]
