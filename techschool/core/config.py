from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Ensure env file is loaded before Settings() reads environment variables
from techschool.core.env import load_env
load_env()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=None,  # we load via techschool.core.env (ENV_FILE)
        extra="ignore",
        case_sensitive=True,
    )

    DATABASE_URL: str = "sqlite:///./techschool.db"
    LOG_LEVEL: str = "INFO"

    # Locales
    DEFAULT_LOCALE: str = "en"
    LOCALES_AVAILABLE: list[str] = ["en", "fr", "es", "pt"]

    # Catalog listing
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Directory holding gettext catalogs (<dir>/<locale>/LC_MESSAGES/techschool.mo)
    TRANSLATIONS_DIR: Optional[str] = None


settings = Settings()
