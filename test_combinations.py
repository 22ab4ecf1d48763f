"""
Combination Testing for the ND Exposure Table
Tests: generation policy, ordering, base filter validation, configuration
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from models import Filter
from catalog import BASE_FILTERS
from generators import (
    CombinationGenerator,
    CombinationPolicy,
    FilterConfigurationError,
    generate_combinations,
    sort_filters,
    validate_base_filters,
)


def test_hand_picked_generation_order():
    """Singles, pairs (lower index first), then the two hand-picked triples"""
    stacks = generate_combinations(BASE_FILTERS)
    assert len(stacks) == 4 + 6 + 2
    assert [f.label for f in stacks] == [
        "1k", "64", "8", "4",
        "1k 64", "1k 8", "1k 4", "64 8", "64 4", "8 4",
        "1k 64 4", "1k 8 4",
    ]


def test_generation_count_for_other_stop_values():
    """Count depends on the list, not on the stop values"""
    base = [Filter(9, "1k"), Filter(5, "64"), Filter(3, "8"), Filter(1, "4")]
    assert len(generate_combinations(base)) == 12


def test_sorted_columns():
    stacks = sort_filters(generate_combinations(BASE_FILTERS))
    assert [f.label for f in stacks] == [
        "4", "8", "8 4", "64", "64 4", "64 8",
        "1k", "1k 4", "1k 8", "1k 8 4", "1k 64", "1k 64 4",
    ]
    assert all(a.stops <= b.stops for a, b in zip(stacks, stacks[1:]))
    assert (stacks[0].stops, stacks[0].label) == (2, "4")
    assert (stacks[-1].stops, stacks[-1].label) == (18, "1k 64 4")


def test_highest_pair_is_1k_64():
    pairs = generate_combinations(BASE_FILTERS)[4:10]
    assert sort_filters(pairs)[-1] == Filter(16, "1k 64")


def test_sort_is_stable_for_equal_stops():
    filters = [Filter(3, "b"), Filter(2, "a"), Filter(3, "c"), Filter(3, "d")]
    assert [f.label for f in sort_filters(filters)] == ["a", "b", "c", "d"]


def test_all_stacks_policy():
    """Every triple plus the full stack replace the hand-picked triples"""
    stacks = generate_combinations(BASE_FILTERS, CombinationPolicy.ALL_STACKS)
    assert len(stacks) == 4 + 6 + 4 + 1
    assert [f.label for f in stacks[10:]] == ["1k 64 8", "1k 64 4", "1k 8 4", "64 8 4", "1k 64 8 4"]
    assert sort_filters(stacks)[-1] == Filter(21, "1k 64 8 4")


def test_validation_requires_four_filters():
    with pytest.raises(FilterConfigurationError):
        validate_base_filters(BASE_FILTERS[:3])
    with pytest.raises(FilterConfigurationError):
        generate_combinations(BASE_FILTERS[:3])


def test_validation_checks_label_positions():
    swapped = [BASE_FILTERS[1], BASE_FILTERS[0], BASE_FILTERS[2], BASE_FILTERS[3]]
    with pytest.raises(FilterConfigurationError) as excinfo:
        validate_base_filters(swapped)
    assert "'64'" in str(excinfo.value)
    # Still a ValueError for callers that do not know the subclass
    assert isinstance(excinfo.value, ValueError)


def test_all_stacks_does_not_need_the_kit_labels():
    base = [Filter(1, "a"), Filter(2, "b"), Filter(3, "c")]
    stacks = generate_combinations(base, CombinationPolicy.ALL_STACKS)
    assert [f.label for f in stacks] == ["a", "b", "c", "a b", "a c", "b c", "a b c"]


def test_empty_base_is_rejected():
    with pytest.raises(FilterConfigurationError):
        generate_combinations([])


def test_generator_build():
    combined = CombinationGenerator(BASE_FILTERS).build()
    assert combined[0].label == "4"
    assert combined[-1].label == "1k 64 4"


def test_generator_from_config(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("combinations:\n  policy: all_stacks\n")
    
    generator = CombinationGenerator.from_config(BASE_FILTERS, str(config))
    assert generator.policy == CombinationPolicy.ALL_STACKS
    assert len(generator.build()) == 15
    
    # Explicit policy wins over the file
    generator = CombinationGenerator.from_config(BASE_FILTERS, str(config), policy="hand_picked")
    assert generator.policy == CombinationPolicy.HAND_PICKED


def test_generator_from_missing_config(tmp_path):
    generator = CombinationGenerator.from_config(BASE_FILTERS, str(tmp_path / "missing.yaml"))
    assert generator.policy == CombinationPolicy.HAND_PICKED


def test_generator_rejects_unknown_policy(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("combinations:\n  policy: everything\n")
    with pytest.raises(ValueError, match="everything"):
        CombinationGenerator.from_config(BASE_FILTERS, str(config))
