"""Reconciliation of the registry against the managed install root."""

from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Iterable, List, Tuple

from plugspec.component import CLEAN_KIND, Component, ComponentState
from plugspec.config import Options
from plugspec.spec.registry import Registry

logger = logging.getLogger(__name__)
DIRECTORY = "directory"
LINK = "link"
OTHER = "other"

Lister = Callable[[str], Iterable[Tuple[str, str]]]


def list_dir(path: str) -> List[Tuple[str, str]]:
    """Return ``(name, kind)`` for each child of ``path``; missing dirs list nothing."""
    listing: List[Tuple[str, str]] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_symlink():
                    kind = LINK
                elif entry.is_dir(follow_symlinks=False):
                    kind = DIRECTORY
                else:
                    kind = OTHER
                listing.append((entry.name, kind))
    except FileNotFoundError:
        return []
    return sorted(listing)


def observe_root(options: Options, lister: Lister = list_dir) -> Dict[str, str]:
    """List the install root once and keep directories and symlinks."""
    return {
        name: kind
        for name, kind in lister(options.root)
        if kind in (DIRECTORY, LINK) and name != options.readme_name
    }


def is_under(path: str, root: str) -> bool:
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        return False


def reconcile(
    registry: Registry,
    observed: Dict[str, str],
    options: Options,
) -> Tuple[Dict[str, Component], List[Component]]:
    """Annotate enabled components with install state and collect clean candidates.

    ``observed`` is not modified. Components outside ``options.root`` are
    local: always installed and never cleaned. Every observed entry that no
    managed component claims becomes a synthetic clean candidate, which is
    returned separately and never added to the registry.
    """
    remaining = dict(observed)

    for name, component in registry.plugins.items():
        if component.lazy is None:
            component.lazy = bool(
                component.state.is_dep
                or options.default_lazy
                or component.has_triggers()
            )
        if not component.dir:
            registry.error(f"Component `{name}` has no install directory")
            continue
        if is_under(component.dir, options.root):
            component.state.installed = name in remaining
            remaining.pop(name, None)
        else:
            component.state.is_local = True
            component.state.installed = True

    to_clean: List[Component] = []
    for name, kind in sorted(remaining.items()):
        to_clean.append(
            Component(
                name=name,
                dir=os.path.join(options.root, name),
                state=ComponentState(
                    kind=CLEAN_KIND,
                    installed=True,
                    is_symlink=kind == LINK,
                    is_local=kind == LINK,
                ),
            )
        )

    if to_clean:
        logger.debug(
            "clean candidates under %s: %s",
            options.root,
            ", ".join(item.name for item in to_clean),
        )
    return registry.plugins, to_clean
