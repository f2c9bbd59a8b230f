"""Options record and loader re-exports."""

from plugspec.config.loader import (
    OPTIONS_FILENAME,
    Options,
    expand_path,
    load_options,
    options_from_mapping,
)

__all__ = [
    "OPTIONS_FILENAME",
    "Options",
    "expand_path",
    "load_options",
    "options_from_mapping",
]
