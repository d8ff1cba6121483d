"""Domain entity for portfolio projects."""

from dataclasses import dataclass
from enum import Enum


class ProjectStatus(str, Enum):
    """Delivery state of a portfolio project."""

    ONGOING = "Ongoing"
    COMPLETED = "Completed"


@dataclass(frozen=True)
class Project:
    id: str
    title: str
    description: str
    image: str
    status: ProjectStatus
    tags: tuple[str, ...] = ()
