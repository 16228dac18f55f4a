from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants import (
    DEFAULT_DIMENSION_MM,
    MAX_DIMENSION_MM,
    MIN_DIMENSION_MM,
    MIN_QUANTITY,
    MIN_WEIGHT_KG,
)

DimensionName = Literal["width", "height", "depth"]


class DimensionTriple(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(
        default=DEFAULT_DIMENSION_MM, ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM
    )
    height: float = Field(
        default=DEFAULT_DIMENSION_MM, ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM
    )
    depth: float = Field(
        default=DEFAULT_DIMENSION_MM, ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM
    )


class DimensionLimits(BaseModel):
    maxWidth: float
    maxHeight: float
    maxDepth: float


class ValidationErrorSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: Optional[str] = None
    height: Optional[str] = None
    depth: Optional[str] = None


class DimensionValidation(BaseModel):
    accepted: bool
    limits: DimensionLimits
    errorMessage: Optional[str] = None


class DimensionLimitsRequest(BaseModel):
    dimensions: DimensionTriple
    changing: DimensionName


class DimensionEditRequest(BaseModel):
    dimensions: DimensionTriple
    errors: ValidationErrorSet = Field(default_factory=ValidationErrorSet)
    dimension: DimensionName
    value: float = Field(..., description="Proposed value in millimeters")


class DimensionEditResult(DimensionValidation):
    dimensions: DimensionTriple
    errors: ValidationErrorSet


class OrderRecord(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Customer name")
    businessName: str = Field(..., min_length=1)
    deliveryAddress: str = Field(..., min_length=1)
    width: float = Field(..., ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM)
    height: float = Field(..., ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM)
    depth: float = Field(..., ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM)
    quantity: int = Field(..., ge=MIN_QUANTITY)
    weight: float = Field(..., ge=MIN_WEIGHT_KG, description="Weight rating per crate, kg")
    dateRequired: date

    @field_validator("dateRequired")
    @classmethod
    def _date_after_today(cls, value: date) -> date:
        today = date.today()
        if value <= today:
            raise ValueError(f"Date required must be after {today.isoformat()}")
        return value

    @property
    def total_weight(self) -> float:
        return self.weight * self.quantity


class SubmissionResult(BaseModel):
    success: bool
    title: str
    message: str


class DimensionFieldInfo(BaseModel):
    min: float
    max: float
    step: float
    default: float
    largeThreshold: float
    constrainedMax: float


class NumberFieldInfo(BaseModel):
    min: float
    step: float
    default: float


class FormInfoResponse(BaseModel):
    dimensions: DimensionFieldInfo
    quantity: NumberFieldInfo
    weight: NumberFieldInfo
    minDate: date


class PreviewResponse(BaseModel):
    width: float
    height: float
    depth: float
    textureRepeatX: float
    textureRepeatY: float
    cameraDistance: float
