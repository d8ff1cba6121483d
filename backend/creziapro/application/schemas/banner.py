"""Pydantic DTOs for home page banners."""

from pydantic import Field

from .common import CamelModel


class BannerCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)
    published: bool = False


class BannerUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    image_url: str | None = Field(None, min_length=1)
    link: str | None = Field(None, min_length=1)
    published: bool | None = None


class BannerResponse(CamelModel):
    id: str
    title: str
    image_url: str
    link: str
    published: bool
