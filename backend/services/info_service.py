from datetime import date, timedelta
from typing import Optional

from constants import (
    CONSTRAINED_MAX_DIMENSION_MM,
    DEFAULT_DIMENSION_MM,
    DEFAULT_QUANTITY,
    DEFAULT_WEIGHT_KG,
    DIMENSION_STEP_MM,
    LARGE_DIMENSION_THRESHOLD_MM,
    MAX_DIMENSION_MM,
    MIN_DIMENSION_MM,
    MIN_QUANTITY,
    MIN_WEIGHT_KG,
    WEIGHT_STEP_KG,
)
from schemas import DimensionFieldInfo, FormInfoResponse, NumberFieldInfo


def earliest_required_date(today: Optional[date] = None) -> date:
    return (today or date.today()) + timedelta(days=1)


def get_form_info(today: Optional[date] = None) -> FormInfoResponse:
    return FormInfoResponse(
        dimensions=DimensionFieldInfo(
            min=MIN_DIMENSION_MM,
            max=MAX_DIMENSION_MM,
            step=DIMENSION_STEP_MM,
            default=DEFAULT_DIMENSION_MM,
            largeThreshold=LARGE_DIMENSION_THRESHOLD_MM,
            constrainedMax=CONSTRAINED_MAX_DIMENSION_MM,
        ),
        quantity=NumberFieldInfo(min=MIN_QUANTITY, step=1, default=DEFAULT_QUANTITY),
        weight=NumberFieldInfo(
            min=MIN_WEIGHT_KG, step=WEIGHT_STEP_KG, default=DEFAULT_WEIGHT_KG
        ),
        minDate=earliest_required_date(today),
    )
