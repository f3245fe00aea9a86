"""
Project schema.

Project lifecycle:
  Active ⇄ Finished

A project is born Active and only its status ever changes afterwards.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Any


class ProjectStatus(Enum):
    """The two buckets a project can live in."""
    ACTIVE = "active"
    FINISHED = "finished"

    @classmethod
    def from_str(cls, value: str) -> "ProjectStatus":
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown project status: {value!r}") from None


@dataclass
class Project:
    """A tracked project."""

    id: str
    title: str
    description: str
    people: int
    status: ProjectStatus = ProjectStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "people": self.people,
            "status": self.status.value,
        }
