"""Loading of pre-parsed module records from JSON documents.

The records carry attributes already extracted from each module's manifest;
nothing here reads manifests themselves.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from bundlegraph.models import BundleModule

logger = logging.getLogger(__name__)


class ModuleRecordError(ValueError):
    """Raised when a module records file cannot be turned into modules."""

    def __init__(self, message: str, path: Path, index: int | None = None):
        self.path = path
        self.index = index
        super().__init__(message)


def load_modules(path: str | Path) -> list[BundleModule]:
    """Load module records from a JSON file.

    Accepts either a top-level array of module objects or an object with a
    ``modules`` array. Record order is preserved.

    Args:
        path: Path to the JSON records file

    Returns:
        List of BundleModule in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ModuleRecordError: If the document or any record is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Module records file not found: {path}")
    if not path.is_file():
        raise ModuleRecordError(f"Module records path is not a file: {path}", path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ModuleRecordError(f"Invalid JSON in module records file {path}: {e}", path)
    except UnicodeDecodeError as e:
        raise ModuleRecordError(f"Module records file {path} is not valid UTF-8: {e}", path)

    modules = parse_module_records(data, path)
    logger.info(f"Loaded {len(modules)} module records from {path}")
    return modules


def parse_module_records(data: object, path: Path | None = None) -> list[BundleModule]:
    """Turn decoded JSON into modules, naming the failing record on error."""
    source = path or Path("<memory>")

    if isinstance(data, dict):
        if "modules" not in data:
            raise ModuleRecordError(f"Missing 'modules' array in {source}", source)
        data = data["modules"]

    if not isinstance(data, list):
        raise ModuleRecordError(f"Expected an array of module records in {source}", source)

    modules = []
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise ModuleRecordError(
                f"Module record {i} in {source} is not an object", source, index=i
            )
        try:
            modules.append(BundleModule.model_validate(record))
        except ValidationError as e:
            raise ModuleRecordError(
                f"Invalid module record {i} in {source}: {e}", source, index=i
            )

    return modules
