from techschool.core.config import settings


def get_default_locale() -> str:
    return settings.DEFAULT_LOCALE


def get_locales_available() -> list[str]:
    return list(settings.LOCALES_AVAILABLE)
