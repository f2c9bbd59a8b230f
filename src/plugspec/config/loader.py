"""Options loading from bundled and user TOML files."""

from __future__ import annotations

import copy
import logging
import os
import tomllib
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from plugspec.errors import ConfigError

logger = logging.getLogger(__name__)
OPTIONS_FILENAME = "options.toml"
README_NAME = "readme"
RESERVED_MODULE = "plugspec"


def _get_config_dir() -> Path:
    """Return the configuration directory path."""
    return Path.home() / ".config" / "plugspec"


def expand_path(path: Union[str, Path]) -> str:
    """Expand ``~`` and return a normalized absolute path."""
    return os.path.abspath(os.path.expanduser(str(path)))


@dataclass(frozen=True)
class Options:
    """Read-only options consumed by a resolution pass."""

    root: str
    dev_path: str = "~/projects"
    dev_patterns: Tuple[str, ...] = ()
    url_format: str = "https://github.com/%s.git"
    default_lazy: bool = False
    readme_name: str = README_NAME
    reserved_module: str = RESERVED_MODULE
    spec: Any = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", expand_path(self.root))
        object.__setattr__(self, "dev_path", expand_path(self.dev_path))
        object.__setattr__(self, "dev_patterns", tuple(self.dev_patterns))


def _merge(base: Dict[str, Any], update: Dict[str, Any]) -> None:
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge(base[key], value)
        else:
            base[key] = value


def _load_bundled() -> Dict[str, Any]:
    resource_path = resources.files("plugspec.data.config").joinpath(OPTIONS_FILENAME)
    with resource_path.open("rb") as file_obj:
        return tomllib.load(file_obj)


def _load_user_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            return tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid options file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read options file at {path}: {exc}") from exc


def options_from_mapping(raw: Dict[str, Any]) -> Options:
    """Build ``Options`` from a merged TOML payload."""
    git = raw.get("git", {})
    dev = raw.get("dev", {})
    defaults = raw.get("defaults", {})
    return Options(
        root=raw["root"],
        dev_path=dev.get("path", "~/projects"),
        dev_patterns=tuple(str(pattern) for pattern in dev.get("patterns", [])),
        url_format=git.get("url_format", "https://github.com/%s.git"),
        default_lazy=bool(defaults.get("lazy", False)),
        readme_name=raw.get("readme_name", README_NAME),
        reserved_module=raw.get("reserved_module", RESERVED_MODULE),
        spec=raw.get("spec", []),
    )


def load_options(path: Optional[Union[str, Path]] = None) -> Options:
    """Load bundled defaults, then overlay the user options file if present.

    An explicit ``path`` must exist; the default location is optional.
    """
    config = copy.deepcopy(_load_bundled())

    if path is not None:
        user_path = Path(path).expanduser()
        if not user_path.exists():
            raise ConfigError(f"Options file not found: {user_path}")
    else:
        user_path = _get_config_dir() / OPTIONS_FILENAME

    if user_path.exists():
        _merge(config, _load_user_file(user_path))
        logger.debug("Loaded options from %s", user_path)

    return options_from_mapping(config)
