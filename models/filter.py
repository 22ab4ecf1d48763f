"""
Filter Model

Represents a neutral-density filter, or a stack of them, by its attenuation in stops.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable

from .exposure_format import pad


@dataclass(frozen=True)
class Filter:
    """
    Represents an ND filter (or a stack of filters) and its light attenuation.
    
    Filters order by stops only, so sorting a list of filters with ``sorted()``
    is total over stops and keeps equal-stop entries in their input order.
    The label never takes part in ordering.
    
    Attributes:
        stops: Number of stops of attenuation (non-negative)
        label: Short display name (e.g., "1k" for ND1000)
    
    Example:
        >>> nd1000 = Filter(10, "1k")
        >>> nd4 = Filter(2, "4")
        >>> nd1000 + nd4
        Filter(stops=12, label='1k 4')
    """
    
    stops: int
    label: str
    
    def __post_init__(self):
        if isinstance(self.stops, bool) or not isinstance(self.stops, int):
            raise ValueError(f"Filter stops must be an integer, got {self.stops!r}")
        if self.stops < 0:
            raise ValueError(f"Filter stops must be non-negative, got {self.stops}")
    
    def __lt__(self, other: 'Filter') -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.stops < other.stops
    
    def __le__(self, other: 'Filter') -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.stops <= other.stops
    
    def __gt__(self, other: 'Filter') -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.stops > other.stops
    
    def __ge__(self, other: 'Filter') -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.stops >= other.stops
    
    def __add__(self, other: 'Filter') -> 'Filter':
        if not isinstance(other, Filter):
            return NotImplemented
        return combine(self, other)
    
    def to_string(self) -> str:
        """Label right-aligned to the table column width."""
        return pad(self.label)
    
    def __str__(self) -> str:
        return self.to_string()


def combine(a: Filter, b: Filter) -> Filter:
    """
    Stack two filters.
    
    Stops add up and labels are joined with a single space, left to right.
    The label is order dependent, so callers combine in a fixed order.
    
    Args:
        a: Filter mounted first
        b: Filter mounted on top of ``a``
    
    Returns:
        New Filter representing the stack
    """
    return Filter(stops=a.stops + b.stops, label=f"{a.label} {b.label}")


def combine_all(filters: Iterable[Filter]) -> Filter:
    """Stack any number of filters, folding left to right."""
    filters = list(filters)
    if not filters:
        raise ValueError("At least one filter is needed to build a stack")
    return reduce(combine, filters)
