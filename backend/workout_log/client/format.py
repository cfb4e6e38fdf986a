"""Display helpers for workout and session data."""
import math
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[str, date, datetime]


def _as_date(value: DateLike) -> Union[date, datetime]:
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


def format_date(value: DateLike) -> str:
    """``May 1, 2024``"""
    moment = _as_date(value)
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_date_time(value: DateLike) -> str:
    """``May 1, 2024 12:00 PM``"""
    moment = _as_date(value)
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, datetime.min.time())
    hour = moment.hour % 12 or 12
    return f"{format_date(moment)} {hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"


def format_rest(seconds: Optional[float]) -> str:
    if seconds is None or not math.isfinite(seconds):
        return "-"
    seconds = int(seconds)
    minutes, remaining = divmod(seconds, 60)
    if minutes == 0:
        return f"{remaining}s"
    if remaining == 0:
        return f"{minutes}m"
    return f"{minutes}m {remaining}s"


def format_weight(weight: Optional[float]) -> str:
    if weight is None or math.isnan(weight):
        return "-"
    return f"{weight:g} lb"


def format_rpe(rpe: Optional[float]) -> str:
    if rpe is None or math.isnan(rpe):
        return "-"
    return f"{rpe:.1f}"


def filter_summary(from_: Optional[DateLike], to: Optional[DateLike]) -> str:
    """One-line description of an active history filter."""
    if not from_ and not to:
        return "Showing all sessions"
    from_text = format_date(from_) if from_ else "any time"
    to_text = format_date(to) if to else "now"
    return f"Showing sessions from {from_text} to {to_text}"
