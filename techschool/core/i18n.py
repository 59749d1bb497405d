"""
Message translation backed by stdlib gettext catalogs.

Catalogs are looked up under ``settings.TRANSLATIONS_DIR`` using the
``techschool`` domain. Without a catalog the message is returned unchanged.
"""
import gettext as _gettext
from functools import lru_cache
from typing import Optional

from techschool.core.config import settings
from techschool.core.locale import get_default_locale

DOMAIN = "techschool"


@lru_cache(maxsize=None)
def get_translations(locale: str) -> _gettext.NullTranslations:
    return _gettext.translation(
        DOMAIN,
        localedir=settings.TRANSLATIONS_DIR,
        languages=[locale],
        fallback=True,
    )


def gettext(message: str, locale: Optional[str] = None) -> str:
    return get_translations(locale or get_default_locale()).gettext(message)


def ngettext(singular: str, plural: str, count: int, locale: Optional[str] = None) -> str:
    return get_translations(locale or get_default_locale()).ngettext(singular, plural, count)
