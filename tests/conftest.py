"""Pytest configuration and fixtures for bundlegraph tests."""

import json

import pytest

from bundlegraph.models import BundleModule

_UNSET = object()


def make_module(name, *uses_split, on_demand=False, min_sdk=None, split_id=_UNSET):
    """Build a module whose split ID matches its name unless it is base."""
    if split_id is _UNSET:
        split_id = None if name == "base" else name
    return BundleModule(
        name=name,
        split_id=split_id,
        on_demand=on_demand,
        min_sdk_version=min_sdk,
        uses_split=list(uses_split),
    )


@pytest.fixture
def module():
    """Factory fixture for module records."""
    return make_module


@pytest.fixture
def write_records(tmp_path):
    """Write module records to a JSON file and return its path."""
    def _write(records, name="modules.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        return path
    return _write
