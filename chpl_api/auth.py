"""Static API-key authentication for the CHPL API."""

import os
from pathlib import Path

from dotenv import load_dotenv

from .logger import get_logger


API_KEY_HEADER = "API-Key"
API_KEY_ENV_VAR = "CHPL_API_KEY"

log = get_logger(__name__)


class ApiKeyProvider:
    """Resolves the CHPL API key from .env, the environment or config."""

    def __init__(self, config_key: str | None = None, env_path: Path | None = None):
        self._config_key = config_key
        self._env_path = env_path or Path(__file__).parent.parent / ".env"
        self.api_key = self._load_api_key()

    def _load_api_key(self) -> str | None:
        """Load the key from .env in project root, falling back to config."""
        load_dotenv(self._env_path)

        api_key = os.getenv(API_KEY_ENV_VAR) or self._config_key
        if not api_key:
            log.warning(
                "chpl.api_key_missing",
                hint=f"set apiKey in config.toml or {API_KEY_ENV_VAR} in .env",
            )
            return None
        return api_key.strip()

    def get_auth_header(self) -> dict:
        """Get API-Key header if a key is available."""
        if self.api_key:
            return {API_KEY_HEADER: self.api_key}
        return {}
