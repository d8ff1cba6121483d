from .common import ApiResponse, CamelModel
from .auth import LoginRequest
from .banner import BannerCreate, BannerUpdate, BannerResponse
from .blog_post import BlogPostCreate, BlogPostUpdate, BlogPostResponse
from .chat_session import (
    SessionCreate,
    SessionTitleUpdate,
    SessionResponse,
    SessionCreated,
    SessionTitleResponse,
    SessionDeleted,
    SessionsCleared,
)
from .contact import ContactMessageCreate, ContactMessageResponse
from .dashboard import DashboardStatsResponse
from .project import ProjectCreate, ProjectUpdate, ProjectResponse
from .review import ReviewCreate, ReviewResponse
from .service import PricingBandSchema, ServiceCreate, ServiceUpdate, ServiceResponse
from .site_settings import SiteSettingsSchema, ChatbotConfigResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "LoginRequest",
    "BannerCreate",
    "BannerUpdate",
    "BannerResponse",
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogPostResponse",
    "SessionCreate",
    "SessionTitleUpdate",
    "SessionResponse",
    "SessionCreated",
    "SessionTitleResponse",
    "SessionDeleted",
    "SessionsCleared",
    "ContactMessageCreate",
    "ContactMessageResponse",
    "DashboardStatsResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ReviewCreate",
    "ReviewResponse",
    "PricingBandSchema",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceResponse",
    "SiteSettingsSchema",
    "ChatbotConfigResponse",
]
