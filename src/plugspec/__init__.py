"""Component spec resolution and install-state reconciliation."""

from plugspec.component import Component, ComponentState, Enabled, get_name
from plugspec.config import Options, load_options
from plugspec.modules import ModuleIndex, PythonModuleLoader
from plugspec.runtime import Resolution, has_errors, resolve
from plugspec.spec import Notification, Registry, SpecNormalizer, merge_components
from plugspec.state import list_dir, observe_root, reconcile
from plugspec.triggers import TRIGGER_FIELDS

__all__ = [
    "Component",
    "ComponentState",
    "Enabled",
    "ModuleIndex",
    "Notification",
    "Options",
    "PythonModuleLoader",
    "Registry",
    "Resolution",
    "SpecNormalizer",
    "TRIGGER_FIELDS",
    "get_name",
    "has_errors",
    "list_dir",
    "load_options",
    "merge_components",
    "observe_root",
    "reconcile",
    "resolve",
]
