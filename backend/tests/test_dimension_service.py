"""Unit tests for the coupled crate dimension limits."""

import math

import pytest

from schemas import DimensionLimits, DimensionTriple, ValidationErrorSet
from services.dimension_service import apply_edit, compute_limits, is_large, validate_dimension


def _triple(width, height, depth) -> DimensionTriple:
    return DimensionTriple(width=width, height=height, depth=depth)


# =============================================================================
# compute_limits
# =============================================================================


@pytest.mark.parametrize("changing", ["width", "height", "depth"])
@pytest.mark.parametrize(
    "values",
    [(1000, 1000, 1000), (0.1, 0.1, 0.1), (1199.9, 1199.9, 1199.9), (500, 2, 1100)],
)
def test_small_triple_allows_full_range(values, changing):
    limits = compute_limits(_triple(*values), changing)
    assert limits == DimensionLimits(maxWidth=2400, maxHeight=2400, maxDepth=2400)


@pytest.mark.parametrize("changing", ["width", "height", "depth"])
def test_one_large_dimension_caps_the_others(changing):
    limits = compute_limits(_triple(1000, 1800, 900), changing)
    assert limits == DimensionLimits(maxWidth=1200, maxHeight=2400, maxDepth=1200)


def test_threshold_is_inclusive():
    assert is_large(1200)
    assert not is_large(1199.9)
    limits = compute_limits(_triple(1000, 1000, 1200), "depth")
    assert limits == DimensionLimits(maxWidth=1200, maxHeight=1200, maxDepth=2400)


def test_two_large_dimensions_keep_their_own_ceiling():
    limits = compute_limits(_triple(1300, 1300, 1000), "height")
    assert limits == DimensionLimits(maxWidth=2400, maxHeight=2400, maxDepth=1200)


def test_all_large_dimensions():
    limits = compute_limits(_triple(2400, 1200, 1500), "width")
    assert limits == DimensionLimits(maxWidth=2400, maxHeight=2400, maxDepth=2400)


# =============================================================================
# validate_dimension
# =============================================================================


def test_width_entering_large_regime_is_accepted():
    result = validate_dimension(1300, "width", _triple(1000, 1000, 1000))
    assert result.accepted
    assert result.errorMessage is None
    assert result.limits == DimensionLimits(maxWidth=2400, maxHeight=1200, maxDepth=1200)


def test_second_large_dimension_is_accepted():
    result = validate_dimension(1300, "height", _triple(1300, 1000, 1000))
    assert result.accepted
    assert result.limits == DimensionLimits(maxWidth=2400, maxHeight=2400, maxDepth=1200)


def test_exactly_1200_constrains_the_others():
    result = validate_dimension(1200, "height", _triple(1000, 1000, 1000))
    assert result.accepted
    assert result.limits == DimensionLimits(maxWidth=1200, maxHeight=2400, maxDepth=1200)


def test_value_above_ceiling_is_rejected():
    result = validate_dimension(2400.1, "depth", _triple(1000, 1000, 1000))
    assert not result.accepted
    assert result.errorMessage == "Depth cannot exceed 2400mm with current dimensions"


def test_infinite_value_reports_the_ceiling():
    result = validate_dimension(math.inf, "width", _triple(1000, 1000, 1000))
    assert not result.accepted
    assert result.errorMessage == "Width cannot exceed 2400mm with current dimensions"


@pytest.mark.parametrize("value", [0, 0.05, -5, math.nan, -math.inf])
def test_value_below_floor_is_rejected(value):
    result = validate_dimension(value, "width", _triple(1000, 1000, 1000))
    assert not result.accepted
    assert result.errorMessage == "Width must be at least 0.1mm"


def test_validate_is_idempotent():
    current = _triple(1300, 1000, 1000)
    first = validate_dimension(1250, "depth", current)
    second = validate_dimension(1250, "depth", current)
    assert first == second
    assert current == _triple(1300, 1000, 1000)


@pytest.mark.parametrize("dimension", ["width", "height", "depth"])
@pytest.mark.parametrize("value", [0.1, 1, 1199.9, 1200, 1800, 2400, 2400.5, 3000])
def test_accepted_values_never_exceed_their_limit(dimension, value):
    result = validate_dimension(value, dimension, _triple(1500, 1000, 1000))
    maximum = getattr(result.limits, f"max{dimension.capitalize()}")
    assert result.accepted == (value <= maximum)


# =============================================================================
# apply_edit
# =============================================================================


def test_accepted_edit_commits_value_and_clears_its_error():
    errors = ValidationErrorSet(width="Width cannot exceed 2400mm with current dimensions", depth="x")
    result = apply_edit(_triple(1000, 1000, 1000), errors, "width", 1300)

    assert result.accepted
    assert result.dimensions == _triple(1300, 1000, 1000)
    assert result.errors == ValidationErrorSet(width=None, depth="x")


def test_rejected_edit_keeps_prior_value_and_sets_only_its_error():
    current = _triple(1000, 1500, 1000)
    result = apply_edit(current, ValidationErrorSet(), "height", 2500)

    assert not result.accepted
    assert result.dimensions == current
    assert result.errors == ValidationErrorSet(
        height="Height cannot exceed 2400mm with current dimensions"
    )


def test_apply_edit_does_not_mutate_inputs():
    current = _triple(1000, 1000, 1000)
    errors = ValidationErrorSet()
    apply_edit(current, errors, "depth", 1400)
    assert current == _triple(1000, 1000, 1000)
    assert errors == ValidationErrorSet()
