"""
Coupled size limits for crate dimensions.

Any single dimension may go up to the absolute ceiling, but once one of them
reaches the large threshold the remaining ones are held to the constrained
maximum. Everything here is a pure function of the triple passed in; the
caller owns the triple and commits accepted values itself.
"""

import math
from typing import Dict

from constants import (
    CONSTRAINED_MAX_DIMENSION_MM,
    DIMENSIONS,
    LARGE_DIMENSION_THRESHOLD_MM,
    MAX_DIMENSION_MM,
    MIN_DIMENSION_MM,
)
from schemas import (
    DimensionEditResult,
    DimensionLimits,
    DimensionName,
    DimensionTriple,
    DimensionValidation,
    ValidationErrorSet,
)
from services.formatting import format_number


def is_large(value: float) -> bool:
    return value >= LARGE_DIMENSION_THRESHOLD_MM


def _values(triple: DimensionTriple) -> Dict[str, float]:
    return {name: getattr(triple, name) for name in DIMENSIONS}


def _label(dimension: DimensionName) -> str:
    return dimension.capitalize()


def compute_limits(current: DimensionTriple, changing: DimensionName) -> DimensionLimits:
    values = _values(current)
    maxima = {name: MAX_DIMENSION_MM for name in DIMENSIONS}

    if is_large(values[changing]):
        for name in DIMENSIONS:
            if name != changing and not is_large(values[name]):
                maxima[name] = CONSTRAINED_MAX_DIMENSION_MM

    if any(is_large(value) for value in values.values()):
        for name in DIMENSIONS:
            cap = MAX_DIMENSION_MM if is_large(values[name]) else CONSTRAINED_MAX_DIMENSION_MM
            maxima[name] = min(maxima[name], cap)

    return DimensionLimits(
        maxWidth=maxima["width"],
        maxHeight=maxima["height"],
        maxDepth=maxima["depth"],
    )


def limit_for(limits: DimensionLimits, dimension: DimensionName) -> float:
    return getattr(limits, f"max{_label(dimension)}")


def validate_dimension(
    value: float,
    dimension: DimensionName,
    current: DimensionTriple,
) -> DimensionValidation:
    if math.isnan(value) or value < MIN_DIMENSION_MM:
        return DimensionValidation(
            accepted=False,
            limits=compute_limits(current, dimension),
            errorMessage=(
                f"{_label(dimension)} must be at least "
                f"{format_number(MIN_DIMENSION_MM)}mm"
            ),
        )

    proposed = current.model_copy(update={dimension: value})
    limits = compute_limits(proposed, dimension)
    maximum = limit_for(limits, dimension)
    if value > maximum:
        return DimensionValidation(
            accepted=False,
            limits=limits,
            errorMessage=(
                f"{_label(dimension)} cannot exceed {format_number(maximum)}mm "
                "with current dimensions"
            ),
        )
    return DimensionValidation(accepted=True, limits=limits)


def apply_edit(
    current: DimensionTriple,
    errors: ValidationErrorSet,
    dimension: DimensionName,
    value: float,
) -> DimensionEditResult:
    """Validate an edit and return the triple and error set the form should keep.

    An accepted value replaces the edited dimension and clears its error slot.
    A rejected value leaves the triple as it was and only sets the edited slot.
    """
    validation = validate_dimension(value, dimension, current)
    dimensions = (
        current.model_copy(update={dimension: value}) if validation.accepted else current
    )
    return DimensionEditResult(
        accepted=validation.accepted,
        limits=validation.limits,
        errorMessage=validation.errorMessage,
        dimensions=dimensions,
        errors=errors.model_copy(update={dimension: validation.errorMessage}),
    )
