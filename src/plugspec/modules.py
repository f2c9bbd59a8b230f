"""Module enumeration and loading for imported spec modules."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import pkgutil
import sys
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from plugspec.errors import SpecImportError

logger = logging.getLogger(__name__)
SPEC_ATTRIBUTE = "spec"


@dataclass
class ModuleIndex:
    """Cache flag shared with module-cache collaborators.

    The engine clears ``indexed_unloaded`` whenever it imports spec
    modules; a cache that sees it cleared must rebuild its own index.
    """

    indexed_unloaded: bool = True

    def invalidate(self) -> None:
        self.indexed_unloaded = False


class ModuleLoader(Protocol):
    def for_each_submodule(
        self, modname: str, visit: Callable[[str], None]
    ) -> None: ...

    def unload(self, modname: str) -> None: ...

    def load(self, modname: str) -> Any: ...


class PythonModuleLoader:
    """Enumerate and load spec modules through the Python import system."""

    def __init__(self, attribute: str = SPEC_ATTRIBUTE) -> None:
        self.attribute = attribute

    def for_each_submodule(self, modname: str, visit: Callable[[str], None]) -> None:
        """Visit each direct sub-module of a package, or the module itself."""
        try:
            module_spec = importlib.util.find_spec(modname)
        except (ImportError, ValueError):
            logger.debug("spec module lookup failed for %s", modname, exc_info=True)
            return
        if module_spec is None:
            return

        search_locations = module_spec.submodule_search_locations
        if search_locations is None:
            visit(modname)
            return

        children = sorted(
            info.name for info in pkgutil.iter_modules(list(search_locations))
        )
        for child in children:
            visit(f"{modname}.{child}")

    def unload(self, modname: str) -> None:
        sys.modules.pop(modname, None)
        importlib.invalidate_caches()

    def load(self, modname: str) -> Any:
        module = importlib.import_module(modname)
        if not hasattr(module, self.attribute):
            raise SpecImportError(
                f"module `{modname}` does not export `{self.attribute}`"
            )
        return getattr(module, self.attribute)
