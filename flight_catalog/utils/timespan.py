"""
Duration text codec.

Durations are exchanged as interval text of the form
``[-][d.]hh:mm:ss[.fffffff]``, e.g. ``02:00:00``, ``1.04:30:00`` or
``-00:00:01.5000000``. The fractional part uses ticks of 100ns, so up
to seven digits are accepted; digits beyond microsecond precision are
truncated.
"""

import re
from datetime import timedelta

TIMESPAN_PATTERN = re.compile(
    r'^(?P<sign>-)?'
    r'(?:(?P<days>\d+)\.)?'
    r'(?P<hours>\d{1,2}):(?P<minutes>\d{1,2}):(?P<seconds>\d{1,2})'
    r'(?:\.(?P<fraction>\d{1,7}))?$'
)

# Ticks are 100 nanoseconds
FRACTION_DIGITS = 7


def format_timespan(value: timedelta) -> str:
    """
    Format a timedelta as interval text.

    Args:
        value: Duration to format

    Returns:
        Text such as ``02:00:00`` or ``1.00:00:00.5000000``
    """
    total_us = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    sign = '-' if total_us < 0 else ''
    total_us = abs(total_us)

    total_seconds, micros = divmod(total_us, 1_000_000)
    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if days:
        text = f"{days}.{text}"
    if micros:
        text = f"{text}.{micros * 10:0{FRACTION_DIGITS}d}"
    return sign + text


def parse_timespan(text: str) -> timedelta:
    """
    Parse interval text into a timedelta.

    Args:
        text: Interval text, e.g. ``02:00:00``

    Returns:
        Parsed duration

    Raises:
        TypeError: If text is not a string
        ValueError: If text does not follow the interval grammar
    """
    if not isinstance(text, str):
        raise TypeError(f"Duration must be a string, got {type(text).__name__}")

    match = TIMESPAN_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Invalid duration: {text!r}")

    hours = int(match.group('hours'))
    minutes = int(match.group('minutes'))
    seconds = int(match.group('seconds'))
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"Duration component out of range: {text!r}")

    fraction = match.group('fraction') or ''
    micros = int(fraction.ljust(FRACTION_DIGITS, '0')[:6])

    result = timedelta(
        days=int(match.group('days') or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=micros,
    )
    return -result if match.group('sign') else result
