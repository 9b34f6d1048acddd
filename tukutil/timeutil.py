"""Current-time helpers producing the fixed-width strings used in ids and documents."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tukutil.config import get_config

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Europe/London"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f %z %Z"


def _now() -> datetime:
    return datetime.now()


def tuk_year() -> str:
    return f"{_now().year:04d}"


def tuk_month() -> str:
    return f"{_now().month:02d}"


def tuk_day() -> str:
    return f"{_now().day:02d}"


def tuk_hour() -> str:
    return f"{_now().hour:02d}"


def tuk_min() -> str:
    return f"{_now().minute:02d}"


def tuk_sec() -> str:
    return f"{_now().second:02d}"


def tuk_millisec() -> int:
    """Current millisecond of the second, 0-999."""
    return _now().microsecond // 1000


def datetime_stamp(now: datetime | None = None) -> str:
    """Return ``now`` (default: local time) as 17 digits, ``YYYYMMDDhhmmSSsss``."""
    now = now or _now()
    return now.strftime("%Y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"


def tuk_time(tz_name: str | None = None) -> str:
    """
    Return the current time in the service timezone as text.

    The zone defaults to ``time.timezone`` from config (Europe/London). If it
    cannot be loaded the error is logged and local time is returned instead.
    """
    tz_name = tz_name or get_config().get("time", {}).get("timezone", DEFAULT_TIMEZONE)
    try:
        now = datetime.now(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.error("Unable to load timezone %s: %s", tz_name, e)
        now = datetime.now().astimezone()
    return now.strftime(TIME_FORMAT)


def pretty_time(time_text: str) -> str:
    """Strip everything from the first ``.`` onwards."""
    return time_text.split(".")[0]


def tuk_pretty_time() -> str:
    return pretty_time(tuk_time())
