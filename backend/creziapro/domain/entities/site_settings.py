"""Domain entity for the singleton site settings record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SiteSettings:
    """Editable copy and contact details shown across the public site.

    ``chatbot_prompt`` is the system prompt handed to the chat agent.
    """

    hero_title: str
    hero_subtitle: str
    hero_cta_text: str
    contact_email: str
    contact_phone: str
    chatbot_prompt: str
    twitter_url: str | None = None
    facebook_url: str | None = None
    linkedin_url: str | None = None


# Served whenever no settings have been saved yet.
DEFAULT_SITE_SETTINGS = SiteSettings(
    hero_title="Build Smart. Scale Fast.",
    hero_subtitle=(
        "Creziapro delivers end-to-end digital solutions, from stunning websites "
        "to intelligent AI chatbots, empowering your business to thrive in the "
        "digital age."
    ),
    hero_cta_text="Get a Quote",
    contact_email="contact@creziapro.com",
    contact_phone="+91 12345 67890",
    chatbot_prompt=(
        "You are a helpful assistant for Creziapro. Help users find the right "
        "service and provide price estimates based on the available services "
        "and their pricing bands."
    ),
    twitter_url="#",
    facebook_url="#",
    linkedin_url="#",
)
