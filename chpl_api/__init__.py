"""
CHPL API Client

A small Python client for the Certified Health IT Product List (CHPL) REST
API: service status, reference lists, and test participant education levels
for a fixed listing search.

Configuration is read from config.toml in the project root. The file is not
installed with the package, so outside a source checkout (or an editable
install) point CHPL_CONFIG at a copy of it. The API key may also come from
CHPL_API_KEY in .env.

Quick Start:
    from chpl_api import ChplApiWrapper

    api = ChplApiWrapper.get_instance()

    api.get_chpl_status()                  # "OK"
    api.get_practice_type_names()          # ["Ambulatory", "Inpatient"]
    api.get_sorted_education_level_names()

    # Education levels of usability test participants
    api.get_education_levels_for_specific_listings()

    # Tell failures apart from empty answers
    result = api.query_practice_type_names()
    if not result.ok:
        print(result.error)
"""

from .wrapper import ChplApiWrapper

from .client import ChplClient
from .result import Result
from .errors import ChplApiError, ConfigError

from .config import (
    load_config,
    build_endpoints,
    details_url,
    STATUS_ENDPOINT,
    EDUCATION_TYPES_ENDPOINT,
    PRACTICE_TYPES_ENDPOINT,
    SEARCH_ENDPOINT,
    DETAILS_ENDPOINT,
)

from .logger import setup_logging, get_logger

__all__ = [
    # Facade
    "ChplApiWrapper",
    # HTTP
    "ChplClient",
    "Result",
    # Errors
    "ChplApiError",
    "ConfigError",
    # Config
    "load_config",
    "build_endpoints",
    "details_url",
    "STATUS_ENDPOINT",
    "EDUCATION_TYPES_ENDPOINT",
    "PRACTICE_TYPES_ENDPOINT",
    "SEARCH_ENDPOINT",
    "DETAILS_ENDPOINT",
    # Logging
    "setup_logging",
    "get_logger",
]
