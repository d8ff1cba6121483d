"""Pydantic DTOs for portfolio projects."""

from pydantic import Field

from creziapro.domain.entities import ProjectStatus

from .common import CamelModel


class ProjectCreate(CamelModel):
    """Schema for creating a new portfolio project."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1, examples=["https://example.com/shot.png"])
    status: ProjectStatus
    tags: list[str] = Field(..., examples=[["React", "AI"]])


class ProjectUpdate(CamelModel):
    """Schema for updating a project — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    status: ProjectStatus | None = None
    tags: list[str] | None = None


class ProjectResponse(CamelModel):
    id: str
    title: str
    description: str
    image: str
    status: ProjectStatus
    tags: list[str]
