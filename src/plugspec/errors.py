"""plugspec exception hierarchy."""


class PlugspecError(Exception):
    """Base plugspec error."""


class ConfigError(PlugspecError):
    """Raised when an options file cannot be parsed."""


class SpecImportError(PlugspecError):
    """Raised when an imported spec module does not export a spec."""
