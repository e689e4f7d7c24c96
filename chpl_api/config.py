"""Configuration loader for CHPL API tools."""

import os
import tomllib
from pathlib import Path

from .errors import ConfigError


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.toml"

CHPL_API_URL_BEGIN = "chplApiUrlBegin"

# Logical endpoint names
STATUS_ENDPOINT = "status"
EDUCATION_TYPES_ENDPOINT = "education-types"
PRACTICE_TYPES_ENDPOINT = "practice-types"
SEARCH_ENDPOINT = "search"
DETAILS_ENDPOINT = "details"

# Endpoint name -> config key(s) holding its path suffix, first match wins
ENDPOINT_KEYS = {
    STATUS_ENDPOINT: ("statusApi", "statusEndpoint"),
    EDUCATION_TYPES_ENDPOINT: ("educationTypesApi",),
    PRACTICE_TYPES_ENDPOINT: ("practiceTypeNamesApi",),
    SEARCH_ENDPOINT: ("searchApi",),
    DETAILS_ENDPOINT: ("detailsApi",),
}


def config_path() -> Path:
    """Path of the active config file, honouring CHPL_CONFIG."""
    override = os.getenv("CHPL_CONFIG")
    return Path(override) if override else DEFAULT_CONFIG_PATH


def _trim(value):
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict):
        return {k: _trim(v) for k, v in value.items()}
    return value


def load_config(path: str | Path | None = None) -> dict:
    """Load configuration from config.toml in project root.

    String values are whitespace-trimmed. A missing file raises
    FileNotFoundError; an unparsable one raises ConfigError.
    """
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path} (set CHPL_CONFIG to point at one)"
        )

    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if "chpl" not in config:
        raise ConfigError(f"Config file {path} has no [chpl] table")
    return _trim(config)


def _require(settings: dict, *keys: str) -> str:
    for key in keys:
        value = settings.get(key)
        if value is not None:
            return str(value)
    raise ConfigError(f"Missing config key: {' or '.join(keys)}")


def build_endpoints(config: dict) -> dict[str, str]:
    """Build the endpoint name -> full URL table.

    Each URL is the configured base URL concatenated with the endpoint's
    suffix. The details URL keeps its `{}` placeholder for a listing id.
    """
    settings = config["chpl"]
    base_url = _require(settings, CHPL_API_URL_BEGIN)
    return {
        name: base_url + _require(settings, *keys)
        for name, keys in ENDPOINT_KEYS.items()
    }


def details_url(template: str, listing_id) -> str:
    """Substitute a listing id into the details URL template."""
    return template.format(listing_id)


def get_http_settings(config: dict) -> dict:
    """Get HTTP request settings."""
    http = config.get("http", {})
    timeout = http.get("timeout", 30)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"[http] timeout must be a number of seconds, got {timeout!r}") from e
    return {
        "timeout": timeout,
    }


def get_logging_settings(config: dict) -> dict:
    """Get log level and output format."""
    logging_config = config.get("logging", {})
    return {
        "level": logging_config.get("level", "INFO"),
        "format": logging_config.get("format", "console"),
    }
