"""
Filter Combination Generator

Builds the filter stacks shown as table columns: every single filter, every
pair, and the hand-picked triples that match real-world ND kits.
"""

import logging
from enum import Enum
from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence, Tuple

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from models import Filter, combine_all
from settings import load_config

logger = logging.getLogger(__name__)


class FilterConfigurationError(ValueError):
    """Raised when the base filter list cannot support the generation policy."""


class CombinationPolicy(Enum):
    """Which filter stacks to generate beyond singles and pairs."""
    HAND_PICKED = "hand_picked"
    ALL_STACKS = "all_stacks"


# Base-list indices and the labels expected there: ND1000+ND64+ND4, ND1000+ND8+ND4
HAND_PICKED_STACKS: Tuple[Tuple[Tuple[int, str], ...], ...] = (
    ((0, "1k"), (1, "64"), (3, "4")),
    ((0, "1k"), (2, "8"), (3, "4")),
)

MIN_BASE_FILTERS = 4


def validate_base_filters(base: Sequence[Filter]):
    """
    Check that the base filters fit the hand-picked stacks.
    
    Args:
        base: Base filters in declaration order
    
    Raises:
        FilterConfigurationError: If there are too few filters or the labels
            are not in the positions the hand-picked stacks expect
    """
    if len(base) < MIN_BASE_FILTERS:
        raise FilterConfigurationError(
            f"The hand picked combinations expect at least {MIN_BASE_FILTERS} filters, "
            f"got {len(base)}"
        )
    
    for stack in HAND_PICKED_STACKS:
        for index, label in stack:
            if base[index].label != label:
                expected = ", ".join(f"[{i}]={name!r}" for i, name in stack)
                raise FilterConfigurationError(
                    f"Expecting {expected} in the filter list, "
                    f"found {base[index].label!r} at index {index}"
                )


def generate_combinations(base: Sequence[Filter],
                          policy: CombinationPolicy = CombinationPolicy.HAND_PICKED) -> List[Filter]:
    """
    Generate filter stacks in generation order (not sorted).
    
    Stacks are always combined in base-list order, so labels are reproducible
    (index 0 first). With ``HAND_PICKED`` the result is the singles, all pairs,
    then the hand-picked triples: 4 + 6 + 2 = 12 entries for four filters.
    With ``ALL_STACKS`` every larger stack follows the pairs instead.
    
    Args:
        base: Base filters
        policy: Which stacks to add beyond singles and pairs
    
    Returns:
        List of Filter stacks
    
    Example:
        >>> stacks = generate_combinations(BASE_FILTERS)
        >>> len(stacks)
        12
    """
    if not base:
        raise FilterConfigurationError("At least 1 filter needed to generate combinations")
    
    stacks = list(base)
    stacks.extend(_stacks_of_size(base, 2))
    
    if policy == CombinationPolicy.HAND_PICKED:
        validate_base_filters(base)
        for stack in HAND_PICKED_STACKS:
            stacks.append(combine_all(base[index] for index, _ in stack))
    elif policy == CombinationPolicy.ALL_STACKS:
        for size in range(3, len(base) + 1):
            stacks.extend(_stacks_of_size(base, size))
    else:
        raise ValueError(f"Unknown combination policy: {policy}")
    
    logger.debug(f"Generated {len(stacks)} filter combinations ({policy.value})")
    return stacks


def _stacks_of_size(base: Sequence[Filter], size: int) -> List[Filter]:
    """Every stack of ``size`` distinct base filters, lower indices first."""
    return [
        combine_all(base[index] for index in indices)
        for indices in combinations(range(len(base)), size)
    ]


def sort_filters(filters: Sequence[Filter]) -> List[Filter]:
    """Sort by stops ascending; equal stops keep their generation order."""
    return sorted(filters, key=lambda f: f.stops)


class CombinationGenerator:
    """
    Produces the sorted filter stacks used as table columns.
    
    Attributes:
        base: Base filters
        policy: Combination policy
    
    Example:
        >>> generator = CombinationGenerator(BASE_FILTERS)
        >>> [f.label for f in generator.build()][:2]
        ['4', '8']
    """
    
    def __init__(self, base: Sequence[Filter],
                 policy: CombinationPolicy = CombinationPolicy.HAND_PICKED):
        """
        Initialize combination generator.
        
        Args:
            base: Base filters
            policy: Which stacks to generate beyond singles and pairs
        """
        self.base = tuple(base)
        self.policy = policy
    
    @classmethod
    def from_config(cls, base: Sequence[Filter], config_path: str = 'config.yaml',
                    policy: Optional[str] = None) -> 'CombinationGenerator':
        """
        Create CombinationGenerator from configuration file.
        
        Args:
            base: Base filters
            config_path: Path to YAML configuration file
            policy: Policy name overriding the configured one
        """
        return cls.from_settings(base, load_config(config_path), policy=policy)
    
    @classmethod
    def from_settings(cls, base: Sequence[Filter], config: Dict[str, Any],
                      policy: Optional[str] = None) -> 'CombinationGenerator':
        """Create CombinationGenerator from an already loaded configuration."""
        section = config.get('combinations') or {}
        policy_name = policy or section.get('policy') or CombinationPolicy.HAND_PICKED.value
        
        try:
            resolved = CombinationPolicy(policy_name)
        except ValueError:
            choices = ", ".join(p.value for p in CombinationPolicy)
            raise ValueError(f"Unknown combination policy '{policy_name}' (choose from: {choices})")
        
        return cls(base=base, policy=resolved)
    
    def generate(self) -> List[Filter]:
        """Filter stacks in generation order."""
        return generate_combinations(self.base, self.policy)
    
    def build(self) -> List[Filter]:
        """Filter stacks sorted by stops, ready to be used as table columns."""
        combined = sort_filters(self.generate())
        logger.info(
            f"Prepared {len(combined)} filter combinations "
            f"({combined[0].stops} to {combined[-1].stops} stops)"
        )
        return combined
