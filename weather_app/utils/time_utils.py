from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Sequence, Union

from ..models import ForecastSample

Instant = Union[datetime, str]

EVENING_FORECAST_HOUR = 3


def local_tz(utc_offset_seconds: int) -> tzinfo:
    """Fixed-offset tzinfo for the ``utc_offset_seconds`` Open-Meteo reports."""
    return timezone(timedelta(seconds=utc_offset_seconds))


def parse_instant(value: Instant, default_tz: Optional[tzinfo] = None) -> datetime:
    """
    Turn an ISO 8601 string (or a datetime) into a datetime.

    Naive values get ``default_tz`` attached when one is given; values that
    already carry an offset are left alone.
    """
    dt = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if dt.tzinfo is None and default_tz is not None:
        dt = dt.replace(tzinfo=default_tz)
    return dt


def is_before_sunset(current: Instant, sunset: Instant) -> bool:
    """True iff ``current`` is strictly earlier than ``sunset``.

    Both sides are compared as absolute instants; naive values count as UTC.
    """
    return parse_instant(current, timezone.utc) < parse_instant(sunset, timezone.utc)


def find_evening_forecast(
    times: Sequence[Instant],
    temperatures: Sequence[float],
    reference: Instant,
) -> Optional[ForecastSample]:
    """
    Return the hourly sample at 3 AM on the day after ``reference``.

    The first entry (in series order) whose local date is the next calendar
    day and whose local hour is 3 wins. A 3 AM entry on the reference's own
    date never matches. Returns None when nothing qualifies.
    """
    if len(times) != len(temperatures):
        raise ValueError(
            f"times and temperatures differ in length ({len(times)} != {len(temperatures)})"
        )

    ref = parse_instant(reference)
    target_date = ref.date() + timedelta(days=1)

    for raw_time, temperature in zip(times, temperatures):
        ts = parse_instant(raw_time)
        if ts.tzinfo is not None and ref.tzinfo is not None:
            # read the candidate on the reference's wall clock
            ts = ts.astimezone(ref.tzinfo)
        if ts.date() == target_date and ts.hour == EVENING_FORECAST_HOUR:
            time_str = raw_time if isinstance(raw_time, str) else raw_time.isoformat()
            return ForecastSample(temperature=temperature, time=time_str)

    return None
