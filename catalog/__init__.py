"""
Catalog package for the ND Exposure Table.

Holds the fixed filter kit and the camera's shutter speeds.
"""

from .equipment import BASE_FILTERS, BASE_SHUTTERS

__all__ = ['BASE_FILTERS', 'BASE_SHUTTERS']
