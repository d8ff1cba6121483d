from .admin_session import AdminSession
from .banner import Banner
from .blog_post import BlogPost
from .chat_session import SessionInfo
from .contact_message import ContactMessage
from .dashboard import ChatbotConfig, DashboardStats
from .project import Project, ProjectStatus
from .review import Review, ReviewStatus
from .service import PricingBand, Service
from .site_settings import DEFAULT_SITE_SETTINGS, SiteSettings

__all__ = [
    "AdminSession",
    "Banner",
    "BlogPost",
    "SessionInfo",
    "ContactMessage",
    "ChatbotConfig",
    "DashboardStats",
    "Project",
    "ProjectStatus",
    "Review",
    "ReviewStatus",
    "PricingBand",
    "Service",
    "DEFAULT_SITE_SETTINGS",
    "SiteSettings",
]
