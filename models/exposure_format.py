"""
Exposure Time Formatting

Renders an exposure time in seconds the way a camera displays it:

- ``1/x`` fractions up to a quarter of a second (only ``x`` is shown),
- seconds and tenths (``3"2``) up to 30 seconds,
- BULB minutes and seconds (``5' 20"``) up to one hour,
- BULB hours and minutes (``2h 15'``) up to 99 hours,
- ``x`` beyond that, the longest BULB exposure the camera can record.

Every result is right-aligned to ``COLUMN_WIDTH`` so table columns line up.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

__all__ = ['COLUMN_WIDTH', 'pad', 'format_exposure_time']

COLUMN_WIDTH = 7

FRACTION_LIMIT = 0.25
DECIMAL_SECONDS_LIMIT = 30.0
MAX_BULB_MINUTES = 60
MAX_BULB_HOURS = 99
OVERFLOW_MARK = 'x'


def pad(text: str, width: int = COLUMN_WIDTH) -> str:
    """Right-align text within a table column."""
    return f"{text:>{width}}"


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (12.5 -> 13)."""
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


def format_exposure_time(seconds: float) -> str:
    """
    Format an exposure time for display in the tables.
    
    Args:
        seconds: Exposure time in seconds, strictly positive
    
    Returns:
        Camera-style text, always ``COLUMN_WIDTH`` characters wide
    
    Example:
        >>> format_exposure_time(0.001)
        '   1000'
        >>> format_exposure_time(3.2)
        '    3"2'
        >>> format_exposure_time(31)
        ' 0\\' 31"'
    """
    if not math.isfinite(seconds) or seconds <= 0:
        raise ValueError(f"Exposure time must be a positive number, got {seconds!r}")
    
    if seconds <= FRACTION_LIMIT:
        return pad(str(_round_half_up(1.0 / seconds)))
    
    if seconds <= DECIMAL_SECONDS_LIMIT:
        whole = math.floor(seconds)
        tenths = _round_half_up((seconds - whole) * 10)
        if tenths == 10:
            whole += 1
            tenths = 0
        return pad(f"{whole:5}\"{tenths}")
    
    # BULB territory, whole seconds rounded up
    total_seconds = math.ceil(seconds)
    total_minutes, secs = divmod(total_seconds, 60)
    
    if total_minutes <= MAX_BULB_MINUTES:
        return pad(f"{total_minutes:2}' {secs:02}\"")
    
    hours, minutes = divmod(total_minutes, 60)
    if hours > MAX_BULB_HOURS:
        return pad(OVERFLOW_MARK)
    
    return pad(f"{hours:2}h {minutes:02}'")
