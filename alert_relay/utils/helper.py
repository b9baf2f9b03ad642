import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any


# ---------- time -------------

def parse_iso_utc(s: str | None) -> datetime | None:
    if not s:
        return None
    try:
        dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return as_utc(dt)


def parse_rfc2822_utc(s: str | None) -> datetime | None:
    if not s:
        return None
    try:
        return as_utc(parsedate_to_datetime(s))
    except (TypeError, ValueError, IndexError):
        return None


def as_utc(dt: datetime) -> datetime:
    # naive values are taken as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def epoch_ms_to_utc(ms: float | int) -> datetime | None:
    # epoch numbers are milliseconds, as JavaScript Date reads them
    try:
        if not math.isfinite(ms):
            return None
        return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _is_numeric_text(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def coerce_timestamp(value: Any) -> datetime | None:
    """
    Coerce a date-like value into an aware UTC datetime.

    Accepts datetime objects, epoch numbers in milliseconds and strings
    holding an ISO-8601 or RFC 2822 date. Purely numeric strings are not
    dates. Returns None when the value cannot be read as an instant.
    """
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return epoch_ms_to_utc(value)
    if isinstance(value, str):
        text = value.strip()
        if not text or _is_numeric_text(text):
            return None
        return parse_iso_utc(text) or parse_rfc2822_utc(text)
    return None


def to_iso_z(dt: datetime) -> str:
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
