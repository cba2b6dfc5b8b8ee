from __future__ import annotations

import os
from typing import Dict, Optional

from dotenv import load_dotenv

from exceptions.exceptions import ConfigurationError


load_dotenv()


# Assistants API version pinned for every client.
AZURE_OPENAI_API_VERSION = "2024-05-01-preview"

REQUIRED_ENV_VARS = ("AZURE_OPENAI_KEY", "AZURE_OPENAI_ENDPOINT")


class Settings:
    """
    Central configuration for the assistant relay.

    Values are loaded once from environment variables (with sensible defaults)
    when the object is constructed, and then exposed via typed properties.
    The two Azure values are required: reading them while unset raises
    ConfigurationError, so a missing value fails the caller that needs it
    rather than the import of this module.
    """

    def __init__(self) -> None:
        # Azure OpenAI credentials
        self._azure_openai_key = os.getenv("AZURE_OPENAI_KEY") or None
        self._azure_openai_endpoint = os.getenv("AZURE_OPENAI_ENDPOINT") or None

        # Assistant definition defaults
        self._assistant_model = os.getenv("ASSISTANT_MODEL", "gpt-4o-mini")
        self._vector_store_id = os.getenv(
            "ASSISTANT_VECTOR_STORE_ID",
            "vs_BX5jd6fRpNWCPmZolnNJYY7s",
        )

        # Server / runtime
        self._port = int(os.getenv("PORT") or 3000)
        self._environment = (
            os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "production"
        )
        self._log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    # ------------------------------------------------------------------
    # Azure OpenAI settings
    # ------------------------------------------------------------------

    @property
    def azure_openai_key(self) -> str:
        if not self._azure_openai_key:
            raise ConfigurationError(["AZURE_OPENAI_KEY"])
        return self._azure_openai_key

    @property
    def azure_openai_endpoint(self) -> str:
        if not self._azure_openai_endpoint:
            raise ConfigurationError(["AZURE_OPENAI_ENDPOINT"])
        return self._azure_openai_endpoint

    @property
    def api_version(self) -> str:
        return AZURE_OPENAI_API_VERSION

    @property
    def assistant_model(self) -> str:
        return self._assistant_model

    @property
    def vector_store_id(self) -> Optional[str]:
        return self._vector_store_id or None

    def env_check(self) -> Dict[str, bool]:
        """Presence of each required variable, never the values themselves."""
        return {
            "AZURE_OPENAI_KEY": bool(self._azure_openai_key),
            "AZURE_OPENAI_ENDPOINT": bool(self._azure_openai_endpoint),
        }

    def require(self) -> None:
        """Raise ConfigurationError naming every missing required variable."""
        missing = [name for name, present in self.env_check().items() if not present]
        if missing:
            raise ConfigurationError(missing)

    # ------------------------------------------------------------------
    # Server / runtime
    # ------------------------------------------------------------------

    @property
    def port(self) -> int:
        return self._port

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def is_development(self) -> bool:
        return self._environment.lower() == "development"

    @property
    def log_level(self) -> str:
        return self._log_level
