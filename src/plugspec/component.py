"""Component descriptor model."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

ATTRIBUTE_FIELDS = (
    "name",
    "source",
    "slug",
    "dir",
    "dev",
    "dependencies",
    "enabled",
    "lazy",
    "config",
    "priority",
)
DISABLED_KIND = "disabled"
CLEAN_KIND = "clean"
_NON_WORD_RUN = re.compile(r"\W+")


def get_name(source: str) -> str:
    """Derive a component name from a source URL or directory path."""
    name = source[:-4] if source.endswith(".git") else source
    slash = name.rfind("/")
    if slash != -1:
        return name[slash + 1 :]
    return _NON_WORD_RUN.sub("_", source)


@dataclass
class ComponentState:
    """Engine bookkeeping attached to one component."""

    is_dep: bool = False
    kind: Optional[str] = None
    installed: bool = False
    is_local: bool = False
    is_symlink: bool = False
    # Owned by the installer/runtime; carried across reloads by name.
    runtime: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Component:
    """Canonical component descriptor."""

    name: Optional[str] = None
    source: Optional[str] = None
    slug: Optional[str] = None
    dir: Optional[str] = None
    dev: Optional[bool] = None
    dependencies: Any = None
    enabled: Any = None
    lazy: Optional[bool] = None
    config: Any = None
    priority: Optional[int] = None
    triggers: Dict[str, List[Any]] = field(default_factory=dict)
    opts: Dict[str, Any] = field(default_factory=dict)
    state: ComponentState = field(default_factory=ComponentState, repr=False)

    @classmethod
    def from_table(
        cls, table: Mapping[str, Any], trigger_fields: frozenset
    ) -> "Component":
        """Build a component from an author table without mutating it."""
        component = cls()
        for key, value in table.items():
            if key in ATTRIBUTE_FIELDS:
                setattr(component, key, value)
            elif key in trigger_fields:
                component.triggers[key] = value
            else:
                component.opts[key] = value
        return component

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield every author-visible field that is set."""
        for key in ATTRIBUTE_FIELDS:
            value = getattr(self, key)
            if value is not None:
                yield key, value
        for key, value in self.triggers.items():
            if value is not None:
                yield key, value
        for key, value in self.opts.items():
            if value is not None:
                yield key, value

    def get_field(self, key: str) -> Any:
        if key in ATTRIBUTE_FIELDS:
            return getattr(self, key)
        if key in self.triggers:
            return self.triggers[key]
        return self.opts.get(key)

    def set_field(self, key: str, value: Any, *, is_trigger: bool = False) -> None:
        if key in ATTRIBUTE_FIELDS:
            setattr(self, key, value)
        elif is_trigger:
            self.triggers[key] = value
        else:
            self.opts[key] = value

    def snapshot(self) -> "Component":
        """Copy with its own containers, so later merges leave the copy intact."""
        return replace(
            self,
            triggers=dict(self.triggers),
            opts=dict(self.opts),
            state=replace(self.state),
        )

    def has_triggers(self) -> bool:
        return any(values is not None for values in self.triggers.values())


class EnabledKind(Enum):
    ALWAYS = "always"
    NEVER = "never"
    COMPUTED = "computed"


@dataclass(frozen=True)
class Enabled:
    """Resolved form of an ``enabled`` field: always, never, or computed."""

    kind: EnabledKind
    predicate: Optional[Callable[[], Any]] = None

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["Enabled"]:
        """Return ``None`` when the field is unset."""
        if raw is None:
            return None
        if raw is True:
            return cls(EnabledKind.ALWAYS)
        if callable(raw):
            return cls(EnabledKind.COMPUTED, predicate=raw)
        return cls(EnabledKind.NEVER)

    def evaluate(self) -> bool:
        """Evaluate once; a raising predicate propagates to the caller."""
        if self.kind is EnabledKind.COMPUTED and self.predicate is not None:
            return bool(self.predicate())
        return self.kind is EnabledKind.ALWAYS
