"""Exception types for the CHPL API client."""


class ChplApiError(Exception):
    """Base class for CHPL API client errors."""


class ConfigError(ChplApiError):
    """Raised when configuration is missing a key or cannot be parsed."""
