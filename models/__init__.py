"""
Domain models for the ND Exposure Table.

This package contains the value objects of the exposure domain: neutral-density
filters, shutter speeds, and the camera-style formatting of exposure times.
"""

from .filter import Filter, combine, combine_all
from .shutter import Shutter
from .exposure_format import COLUMN_WIDTH, pad, format_exposure_time

__all__ = [
    'Filter',
    'combine',
    'combine_all',
    'Shutter',
    'COLUMN_WIDTH',
    'pad',
    'format_exposure_time',
]
