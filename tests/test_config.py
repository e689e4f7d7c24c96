"""Tests for config loading and endpoint resolution."""

import pytest

from chpl_api import config
from chpl_api.errors import ConfigError

from tests.conftest import BASE_URL, CONFIG_TOML


def test_build_endpoints_concatenates_base_and_suffix(config_file):
    endpoints = config.build_endpoints(config.load_config(config_file))

    assert endpoints == {
        config.STATUS_ENDPOINT: f"{BASE_URL}/status",
        config.EDUCATION_TYPES_ENDPOINT: f"{BASE_URL}/data/education_types",
        config.PRACTICE_TYPES_ENDPOINT: f"{BASE_URL}/data/practice_types",
        config.SEARCH_ENDPOINT: f"{BASE_URL}/search/v2?certificationEditions=2015",
        config.DETAILS_ENDPOINT: BASE_URL + "/listings/{}/details",
    }


def test_details_url_substitutes_listing_id(config_file):
    endpoints = config.build_endpoints(config.load_config(config_file))

    url = config.details_url(endpoints[config.DETAILS_ENDPOINT], 9261)
    assert url == f"{BASE_URL}/listings/9261/details"


def test_status_endpoint_alias(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML.replace("statusApi", "statusEndpoint"))

    endpoints = config.build_endpoints(config.load_config(path))
    assert endpoints[config.STATUS_ENDPOINT] == f"{BASE_URL}/status"


def test_values_are_trimmed(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML.replace('"/status"', '"  /status \\t"'))

    loaded = config.load_config(path)
    assert loaded["chpl"]["statusApi"] == "/status"


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load_config(tmp_path / "nope.toml")


def test_unparsable_file_raises_config_error(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[chpl\nchplApiUrlBegin = ")

    with pytest.raises(ConfigError):
        config.load_config(path)


def test_missing_chpl_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[http]\ntimeout = 3\n")

    with pytest.raises(ConfigError, match=r"\[chpl\]"):
        config.load_config(path)


def test_missing_endpoint_key(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML.replace("detailsApi", "detailsPath"))

    with pytest.raises(ConfigError, match="detailsApi"):
        config.build_endpoints(config.load_config(path))


def test_config_path_override(monkeypatch, config_file):
    monkeypatch.setenv("CHPL_CONFIG", str(config_file))
    assert config.config_path() == config_file


def test_http_and_logging_settings(config_file):
    loaded = config.load_config(config_file)

    assert config.get_http_settings(loaded) == {"timeout": 5.0}
    assert config.get_logging_settings(loaded) == {"level": "DEBUG", "format": "console"}


def test_settings_defaults():
    assert config.get_http_settings({}) == {"timeout": 30.0}
    assert config.get_logging_settings({}) == {"level": "INFO", "format": "console"}


def test_non_numeric_timeout_raises_config_error(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML.replace("timeout = 5", 'timeout = "soon"'))

    with pytest.raises(ConfigError, match="timeout"):
        config.get_http_settings(config.load_config(path))


def test_missing_file_message_names_override(tmp_path):
    with pytest.raises(FileNotFoundError, match="CHPL_CONFIG"):
        config.load_config(tmp_path / "nope.toml")
