"""
In-memory project store with synchronous change notification.

Every mutation (add or move) hands each subscriber a fresh copy of the
full project list, in registration order, before returning to the caller.
"""
import logging
import random
from typing import Callable, List, Optional

from .schema import Project, ProjectStatus

logger = logging.getLogger(__name__)

Listener = Callable[[List[Project]], None]


class TrackerError(Exception):
    """Base class for project tracker errors."""
    pass


class IdCollisionError(TrackerError):
    """Raised when no unused project id could be generated."""
    pass


def random_id() -> str:
    """Default id factory: a stringified pseudo-random fraction."""
    return str(random.random())


class ProjectStore:
    """Ordered project list plus its subscribers.

    Subscribers are append-only: there is no unsubscribe, so a listener
    lives as long as the store does.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None, max_id_attempts: int = 10):
        self._projects: List[Project] = []
        self._listeners: List[Listener] = []
        self._id_factory = id_factory or random_id
        self.max_id_attempts = max_id_attempts

    def __len__(self) -> int:
        return len(self._projects)

    @property
    def projects(self) -> List[Project]:
        """Snapshot of all projects in insertion order."""
        return self._projects[:]

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked with a snapshot after every change."""
        self._listeners.append(listener)

    def get(self, project_id: str) -> Optional[Project]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def list_by_status(self, status: ProjectStatus) -> List[Project]:
        return [p for p in self._projects if p.status == status]

    def add_project(self, title: str, description: str, people: int) -> Project:
        """Create an Active project, append it, and notify subscribers."""
        project = Project(
            id=self._next_id(),
            title=title,
            description=description,
            people=people,
            status=ProjectStatus.ACTIVE,
        )
        self._projects.append(project)
        logger.info(f"Added project {project.id}: {title!r} ({people} people)")
        self._notify()
        return project

    def move_project(self, project_id: str, new_status: ProjectStatus) -> bool:
        """
        Set a project's status and notify subscribers.

        Returns False, without notifying, when no project has this id.
        """
        project = self.get(project_id)
        if project is None:
            logger.debug(f"Move ignored: project {project_id!r} not found")
            return False

        if project.status != new_status:
            logger.info(f"Moved project {project_id}: {project.status.value} -> {new_status.value}")
        project.status = new_status
        self._notify()
        return True

    def _next_id(self) -> str:
        for _ in range(self.max_id_attempts):
            candidate = self._id_factory()
            if self.get(candidate) is None:
                return candidate
            logger.warning(f"Project id collision on {candidate!r}, retrying")
        raise IdCollisionError(
            f"Could not generate an unused project id after {self.max_id_attempts} attempts"
        )

    def _notify(self) -> None:
        """Call every listener, in registration order, with its own snapshot."""
        for listener in self._listeners:
            try:
                listener(self._projects[:])
            except Exception:
                logger.exception("Error in project store listener")
