"""Application configuration via pydantic-settings.

All values loaded from the .env file at the project root.
The .env file takes precedence over OS-level environment variables
so stale system env vars never shadow the project config.
Provider credentials are optional: an empty key disables that provider.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Resolve .env from project root (universal_translator/core/config.py → project root)
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Central application settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- Google Cloud Translation (primary) ---
    google_translate_api_key: str = ""

    # --- Microsoft Translator (secondary) ---
    azure_translator_key: str = ""
    azure_translator_region: str = ""

    # --- Lingva (unauthenticated) ---
    lingva_base_url: str = "https://lingva.ml"

    # --- MyMemory (final fallback) ---
    mymemory_email: str = ""

    # --- Outbound HTTP ---
    provider_timeout_seconds: float = 10.0

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"
    history_limit: int = 10
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


settings = Settings()
