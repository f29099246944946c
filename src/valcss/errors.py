"""Error types raised at configuration time."""


class ValcssError(Exception):
    """Base class for fatal valcss errors."""


class ConfigError(ValcssError):
    """Raised when the configuration file is missing or structurally invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class PluginError(ValcssError):
    """Raised when a plugin registers utilities with an unusable shape."""

    def __init__(self, message: str, utility: str | None = None):
        self.utility = utility
        super().__init__(message)
