"""One full resolution pass: spec -> registry -> reconciled install state."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from plugspec.component import Component
from plugspec.config import Options, expand_path
from plugspec.modules import ModuleIndex, ModuleLoader
from plugspec.spec.normalize import SpecNormalizer
from plugspec.spec.registry import Registry
from plugspec.state import Lister, is_under, list_dir, observe_root, reconcile
from plugspec.triggers import TRIGGER_FIELDS

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Registry plus the install delta computed from it."""

    registry: Registry
    plugins: Dict[str, Component]
    to_clean: List[Component] = field(default_factory=list)

    def missing(self) -> List[Component]:
        """Enabled components that still need to be installed."""
        return [
            component
            for _, component in sorted(self.plugins.items())
            if not component.state.installed
        ]

    def installed(self) -> List[Component]:
        return [
            component
            for _, component in sorted(self.plugins.items())
            if component.state.installed
        ]

    def find(self, path: str) -> Optional[Component]:
        """Return the enabled component whose directory contains ``path``."""
        target = expand_path(path)
        best: Optional[Component] = None
        for component in self.plugins.values():
            if not component.dir or not is_under(target, component.dir):
                continue
            if best is None or len(component.dir) > len(best.dir or ""):
                best = component
        return best


def has_errors(component: Component) -> bool:
    """Return True when any runtime task recorded on the component failed."""
    for task in component.state.runtime.get("tasks") or ():
        error = task.get("error") if isinstance(task, dict) else getattr(task, "error", None)
        if error:
            return True
    return False


def resolve(
    options: Options,
    spec: Any = None,
    *,
    previous: Optional[Resolution] = None,
    lister: Lister = list_dir,
    loader: Optional[ModuleLoader] = None,
    index: Optional[ModuleIndex] = None,
    trigger_fields: frozenset = TRIGGER_FIELDS,
) -> Resolution:
    """Run one resolution pass.

    ``spec`` defaults to ``options.spec`` and is deep-copied before use.
    Runtime bookkeeping from ``previous`` is carried forward by name.
    """
    registry = Registry()
    normalizer = SpecNormalizer(
        options,
        registry,
        trigger_fields=trigger_fields,
        loader=loader,
        index=index,
    )
    author_spec = options.spec if spec is None else spec
    normalizer.normalize(copy.deepcopy(author_spec))

    registry.carry_runtime_from(previous.registry if previous else None)

    observed = observe_root(options, lister)
    plugins, to_clean = reconcile(registry, observed, options)
    normalizer.index.invalidate()

    logger.info(
        "Resolved %d enabled, %d disabled, %d clean candidate(s)",
        len(plugins),
        len(registry.disabled),
        len(to_clean),
    )
    return Resolution(registry=registry, plugins=plugins, to_clean=to_clean)
