from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from techschool.core.i18n import gettext, ngettext

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 365 * DAY

_UNITS = (
    (YEAR, "%(count)d year ago", "%(count)d years ago"),
    (MONTH, "%(count)d month ago", "%(count)d months ago"),
    (DAY, "%(count)d day ago", "%(count)d days ago"),
    (HOUR, "%(count)d hour ago", "%(count)d hours ago"),
    (MINUTE, "%(count)d minute ago", "%(count)d minutes ago"),
)


def format_time_ago(
    moment: datetime,
    prefix: str = "",
    now: Optional[datetime] = None,
    locale: Optional[str] = None,
) -> str:
    """Render ``moment`` relative to ``now``, e.g. ``"Last updated: 3 hours ago"``.

    Naive datetimes are taken to be UTC. Moments in the future count as now.
    """
    now = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = max(int((now - moment).total_seconds()), 0)
    for size, singular, plural in _UNITS:
        count = seconds // size
        if count:
            return prefix + ngettext(singular, plural, count, locale) % {"count": count}
    return prefix + gettext("just now", locale)
