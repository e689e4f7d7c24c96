"""Facade over the CHPL API reference and listing endpoints."""

import threading
from pathlib import Path

from . import extract
from .auth import ApiKeyProvider
from .client import ChplClient
from .config import (
    CHPL_API_URL_BEGIN,
    DETAILS_ENDPOINT,
    EDUCATION_TYPES_ENDPOINT,
    ENDPOINT_KEYS,
    PRACTICE_TYPES_ENDPOINT,
    SEARCH_ENDPOINT,
    STATUS_ENDPOINT,
    build_endpoints,
    config_path,
    details_url,
    get_http_settings,
    get_logging_settings,
    load_config,
)
from .errors import ConfigError
from .logger import get_logger, setup_logging
from .result import Result


log = get_logger(__name__)


class ChplApiWrapper:
    """
    One method per CHPL query.

    `query_*` methods return a Result so callers can tell an empty answer
    from a failed request. The `get_*` methods unwrap it, logging failures
    and returning an empty value instead.
    """

    STATUS_ENDPOINT = STATUS_ENDPOINT
    EDUCATION_TYPES_ENDPOINT = EDUCATION_TYPES_ENDPOINT
    PRACTICE_TYPES_ENDPOINT = PRACTICE_TYPES_ENDPOINT
    SEARCH_ENDPOINT = SEARCH_ENDPOINT
    DETAILS_ENDPOINT = DETAILS_ENDPOINT

    _instance: "ChplApiWrapper | None" = None
    _instance_lock = threading.Lock()

    def __init__(self, config_file: str | Path | None = None):
        self.config_file = Path(config_file) if config_file else config_path()
        try:
            self.config = load_config(self.config_file)
            self.endpoints = build_endpoints(self.config)
            http_settings = get_http_settings(self.config)
        except (FileNotFoundError, ConfigError) as e:
            log.error("chpl.config_unreadable", path=str(self.config_file), error=str(e))
            raise

        settings = self.config["chpl"]
        self.client = ChplClient(ApiKeyProvider(settings.get("apiKey")), **http_settings)
        log.info(
            "chpl.config_loaded",
            path=str(self.config_file),
            count=len(settings),
            endpoints=self.endpoints,
        )

    @classmethod
    def get_instance(cls) -> "ChplApiWrapper":
        """Get the instance of the CHPL API. Only one instance will be created."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    instance = cls()
                    logging_settings = get_logging_settings(instance.config)
                    setup_logging(
                        logging_settings["level"], logging_settings["format"]
                    )
                    cls._instance = instance
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next get_instance() reloads config."""
        with cls._instance_lock:
            cls._instance = None

    def get_endpoints(self) -> dict[str, str]:
        """The live endpoint name -> URL table."""
        return self.endpoints

    def _unwrap(self, result: Result, default, *endpoints: str):
        if result.ok:
            return result.value
        keys = [key for endpoint in endpoints for key in ENDPOINT_KEYS[endpoint]]
        log.error(
            "chpl.query_failed",
            urls=[self.endpoints[endpoint] for endpoint in endpoints],
            error=result.error,
            reason=result.reason,
            hint=(
                f"check that {CHPL_API_URL_BEGIN} and {' / '.join(keys)} "
                f"are configured correctly in {self.config_file.name}"
            ),
        )
        return default

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def query_chpl_status(self) -> Result[str]:
        return self.client.get_reason(self.endpoints[STATUS_ENDPOINT])

    def get_chpl_status(self) -> str:
        """
        Get the status of the CHPL API. Most of the time this should be "OK".

        An unavailable API gives its HTTP reason phrase ("Not Found", ...);
        an unreachable server gives an empty string.
        """
        return self._unwrap(self.query_chpl_status(), "", STATUS_ENDPOINT)

    # ------------------------------------------------------------------
    # Reference lists
    # ------------------------------------------------------------------

    def query_education_level_names(self) -> Result[list[str]]:
        url = self.endpoints[EDUCATION_TYPES_ENDPOINT]
        return self.client.get_json(url).map(extract.education_type_names)

    def get_education_level_names(self) -> list[str]:
        """Education level names in the order the server returns them."""
        return self._unwrap(
            self.query_education_level_names(), [], EDUCATION_TYPES_ENDPOINT
        )

    def query_sorted_education_level_names(self) -> Result[list[str]]:
        return self.query_education_level_names().map(extract.sort_names)

    def get_sorted_education_level_names(self) -> list[str]:
        """Education level names sorted alphabetically (A -> Z), ignoring case."""
        return self._unwrap(
            self.query_sorted_education_level_names(), [], EDUCATION_TYPES_ENDPOINT
        )

    def query_practice_type_names(self) -> Result[list[str]]:
        url = self.endpoints[PRACTICE_TYPES_ENDPOINT]
        return self.client.get_json(url).map(extract.practice_type_names)

    def get_practice_type_names(self) -> list[str]:
        """Practice type names, e.g. ["Ambulatory", "Inpatient"]."""
        return self._unwrap(
            self.query_practice_type_names(), [], PRACTICE_TYPES_ENDPOINT
        )

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def query_listing_ids(self) -> Result[list]:
        """IDs of the listings matched by the configured search."""
        url = self.endpoints[SEARCH_ENDPOINT]
        return self.client.get_json(url).map(extract.product_listing_ids)

    def query_listing_details(self, listing_id) -> Result[dict]:
        url = details_url(self.endpoints[DETAILS_ENDPOINT], listing_id)
        return self.client.get_json(url)

    def query_education_levels_for_specific_listings(self) -> Result[set[str]]:
        """
        Education levels of test participants across the searched listings.

        The search returns listing summaries only; participants live in each
        listing's details under sed -> testTasks -> testParticipants. A failed
        search or a failed details fetch fails the whole query.
        """
        listing_ids = self.query_listing_ids()
        if not listing_ids.ok:
            return Result.failure(listing_ids.error, listing_ids.reason)

        log.info("chpl.listings_found", count=len(listing_ids.value))
        education_levels: set[str] = set()
        for listing_id in listing_ids.value:
            details = self.query_listing_details(listing_id).map(
                extract.participant_education_types
            )
            if not details.ok:
                return Result.failure(
                    f"Listing {listing_id}: {details.error}", details.reason
                )
            education_levels |= details.value
        return Result.success(education_levels, listing_ids.reason)

    def get_education_levels_for_specific_listings(self) -> set[str]:
        """Which education levels did test participants have?

        Covers listings with a 2015 certification edition certified between
        March 1, 2017 and March 31, 2017, as set by searchApi.
        """
        return self._unwrap(
            self.query_education_levels_for_specific_listings(),
            set(),
            SEARCH_ENDPOINT,
            DETAILS_ENDPOINT,
        )
