"""
Generators package for the ND Exposure Table.
"""

from .combinations import (
    CombinationGenerator,
    CombinationPolicy,
    FilterConfigurationError,
    HAND_PICKED_STACKS,
    generate_combinations,
    sort_filters,
    validate_base_filters,
)

__all__ = [
    'CombinationGenerator',
    'CombinationPolicy',
    'FilterConfigurationError',
    'HAND_PICKED_STACKS',
    'generate_combinations',
    'sort_filters',
    'validate_base_filters',
]
