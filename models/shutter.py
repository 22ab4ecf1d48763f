"""
Shutter Model

Represents a camera shutter speed and the exposure it gives behind ND filters.
"""

from dataclasses import dataclass

from .exposure_format import format_exposure_time


@dataclass(frozen=True)
class Shutter:
    """
    Represents a shutter speed as an exposure time in seconds.
    
    Use ``from_fraction`` for the ``1/x`` speeds and ``from_seconds`` for the
    decimal ones (``3"2`` is 3.2 seconds). Shutters are immutable; adding filter
    stops returns a new time instead of changing the shutter.
    
    Attributes:
        time: Exposure time in seconds, always greater than zero
    
    Example:
        >>> shutter = Shutter.from_fraction(125)
        >>> shutter.to_string_with_filter_stops(10)
        '    8"2'
    """
    
    time: float
    
    def __post_init__(self):
        if not self.time > 0:
            raise ValueError(f"Shutter time must be greater than zero, got {self.time!r}")
    
    @classmethod
    def from_fraction(cls, denominator: int) -> 'Shutter':
        """
        Create a ``1/denominator`` second shutter speed.
        
        Args:
            denominator: Fraction denominator, 1 or more
        """
        if denominator < 1:
            raise ValueError(f"Shutter denominator must be at least 1, got {denominator}")
        return cls(time=1.0 / denominator)
    
    @classmethod
    def from_seconds(cls, seconds: int, tenths: int = 0) -> 'Shutter':
        """
        Create a decimal shutter speed, e.g. ``from_seconds(3, 2)`` for 3.2s.
        
        Args:
            seconds: Whole seconds
            tenths: Tenths of a second, 0-9
        """
        if seconds < 0:
            raise ValueError(f"Shutter seconds must be non-negative, got {seconds}")
        if not 0 <= tenths <= 9:
            raise ValueError(f"Shutter tenths must be a single digit, got {tenths}")
        return cls(time=seconds + tenths / 10.0)
    
    def apply_stops(self, stops: int) -> float:
        """
        Exposure time after adding filter stops.
        
        Every stop doubles the exposure time.
        
        Args:
            stops: Number of stops to add (non-negative)
        
        Returns:
            Adjusted exposure time in seconds
        """
        if stops < 0:
            raise ValueError(f"Stops must be non-negative, got {stops}")
        return self.time * (1 << stops)
    
    def to_string_with_filter_stops(self, stops: int) -> str:
        """Formatted exposure time after adding ``stops`` of ND filtering."""
        return format_exposure_time(self.apply_stops(stops))
    
    def to_string(self) -> str:
        """Formatted exposure time without any filter."""
        return format_exposure_time(self.time)
    
    def __str__(self) -> str:
        return self.to_string()
