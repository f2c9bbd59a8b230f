"""Spec resolution: normalization, merging, imports and the registry."""

from plugspec.spec.importer import import_spec
from plugspec.spec.merge import merge_components
from plugspec.spec.normalize import SpecNormalizer, SpecShape, classify_spec
from plugspec.spec.registry import Notification, Registry

__all__ = [
    "Notification",
    "Registry",
    "SpecNormalizer",
    "SpecShape",
    "classify_spec",
    "import_spec",
    "merge_components",
]
