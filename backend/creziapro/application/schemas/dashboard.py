"""Pydantic DTOs for the admin dashboard."""

from .common import CamelModel


class DashboardStatsResponse(CamelModel):
    messages: int
    services: int
    projects: int
    blog_posts: int
