"""Pydantic DTOs for the service catalogue."""

from pydantic import Field, model_validator

from .common import CamelModel


class PricingBandSchema(CamelModel):
    """A labelled price range; ``min`` may not exceed ``max``."""

    label: str = Field(..., min_length=1, examples=["Starter"])
    min: float = Field(..., ge=0, examples=[5000])
    max: float = Field(..., ge=0, examples=[15000])

    @model_validator(mode="after")
    def check_range(self) -> "PricingBandSchema":
        if self.min > self.max:
            raise ValueError("pricing band min must not exceed max")
        return self


class ServiceCreate(CamelModel):
    """Schema for creating a new service."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Web Development"])
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1, examples=["Code"])
    features: list[str] = Field(..., examples=[["SEO", "Responsive"]])
    pricing_bands: list[PricingBandSchema] = Field(default_factory=list)


class ServiceUpdate(CamelModel):
    """Schema for updating a service — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    icon: str | None = Field(None, min_length=1)
    features: list[str] | None = None
    pricing_bands: list[PricingBandSchema] | None = None


class ServiceResponse(CamelModel):
    id: str
    title: str
    description: str
    icon: str
    features: list[str]
    pricing_bands: list[PricingBandSchema]
