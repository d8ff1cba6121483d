"""Pydantic DTOs for the site settings singleton and the chatbot configuration."""

from pydantic import Field

from .common import CamelModel
from .service import ServiceResponse


class SiteSettingsSchema(CamelModel):
    """Full site settings — used both to replace and to return the singleton."""

    hero_title: str = Field(..., min_length=1)
    hero_subtitle: str = Field(..., min_length=1)
    hero_cta_text: str = Field(..., min_length=1)
    contact_email: str = Field(..., min_length=3)
    contact_phone: str = Field(..., min_length=1)
    twitter_url: str | None = None
    facebook_url: str | None = None
    linkedin_url: str | None = None
    chatbot_prompt: str = Field(..., min_length=1)


class ChatbotConfigResponse(CamelModel):
    prompt: str
    services: list[ServiceResponse]
