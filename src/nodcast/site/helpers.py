"""Pure helpers used while rendering site pages.

Duration strings look like "15 min"; only the leading run of digits is
used. Rounding follows the half-up convention used by browsers for the
same calculations, so 12.5 becomes 13 rather than Python's banker's 12.
"""

import math
import re
from collections.abc import Iterable

from nodcast.site.models import Episode
from nodcast.utils.errors import DurationParseError

_DIGITS_RE = re.compile(r"\d+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def format_label(label: str) -> str:
    """Turn a snake_case key into a Title Case label.

    Examples:
        >>> format_label("sleep_latency")
        'Sleep Latency'
    """
    return " ".join(word[:1].upper() + word[1:] for word in label.split("_"))


def lighten_color(color: str, percent: float) -> str:
    """Lighten a ``#rrggbb`` color by ``percent`` (negative values darken).

    Each channel is shifted by ``round(2.55 * percent)`` and clamped to
    the 0-255 range.

    Raises:
        ValueError: If the color isn't a hex string
    """
    num = int(color.lstrip("#"), 16)
    amount = round_half_up(2.55 * percent)

    channels = (
        (num >> 16) + amount,
        ((num >> 8) & 0xFF) + amount,
        (num & 0xFF) + amount,
    )
    red, green, blue = (min(255, max(0, channel)) for channel in channels)
    return f"#{red:02x}{green:02x}{blue:02x}"


def parse_minutes(duration: str) -> int:
    """Extract the leading number of minutes from a duration string.

    Raises:
        DurationParseError: If the string contains no digits
    """
    match = _DIGITS_RE.search(duration)
    if match is None:
        raise DurationParseError(duration)
    return int(match.group())


def total_minutes(episodes: Iterable[Episode]) -> int:
    """Sum of parsed durations."""
    return sum(parse_minutes(ep.duration) for ep in episodes)


def average_duration(episodes: list[Episode]) -> str:
    """Average duration rendered as "N min" ("0 min" for no episodes)."""
    if not episodes:
        return "0 min"
    return f"{round_half_up(total_minutes(episodes) / len(episodes))} min"


def count_unique_techniques(episodes: list[Episode]) -> int:
    """Number of distinct technique methods.

    Falls back to the episode count when no episode names a method.
    """
    methods = {
        ep.technique_details["method"]
        for ep in episodes
        if ep.technique_details and ep.technique_details.get("method")
    }
    return len(methods) or len(episodes)
