"""Pydantic data models for bundle modules."""

from bundlegraph.models.module import (
    BASE_MODULE_NAME,
    DEFAULT_MIN_SDK_VERSION,
    BundleModule,
)

__all__ = [
    "BundleModule",
    "BASE_MODULE_NAME",
    "DEFAULT_MIN_SDK_VERSION",
]
