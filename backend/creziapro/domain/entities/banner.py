"""Domain entity for promotional banners on the home page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Banner:
    id: str
    title: str
    image_url: str
    link: str
    published: bool = False
