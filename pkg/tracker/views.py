"""
Host-agnostic views: the project input form, one list per bucket, and
the per-project item that acts as a drag source.

Views produce plain text lines; painting them is left to a renderer
callback supplied by the host.
"""
import logging
from typing import Callable, List, Optional, Tuple

from .config import Config
from .dragdrop import PAYLOAD_MIME, BucketDropTarget, DragEvent
from .schema import Project, ProjectStatus
from .store import IdCollisionError, ProjectStore
from .validation import Validatable, validate_all

logger = logging.getLogger(__name__)

Renderer = Callable[["ProjectList", List[str]], None]


class ProjectItem:
    """One project row; starts drags carrying the project id."""

    def __init__(self, project: Project):
        self.project = project

    @property
    def persons(self) -> str:
        if self.project.people == 1:
            return "1 person"
        return f"{self.project.people} persons"

    def render(self) -> str:
        return f"{self.project.title} ({self.persons} assigned)"

    def drag_start(self, event: DragEvent) -> None:
        event.data_transfer.set_data(PAYLOAD_MIME, self.project.id)
        event.data_transfer.effect_allowed = "move"

    def drag_end(self, event: DragEvent) -> None:
        logger.debug(f"Drag ended for project {self.project.id}")


class ProjectList:
    """A bucket view: renders the projects of one status and accepts drops."""

    def __init__(self, store: ProjectStore, status: ProjectStatus, renderer: Optional[Renderer] = None):
        self.status = status
        self.renderer = renderer
        self.assigned_projects: List[Project] = []
        self.lines: List[str] = []
        self.drop_target = BucketDropTarget(store, status)
        store.subscribe(self._on_projects_changed)
        self.render()

    @property
    def header(self) -> str:
        return f"{self.status.value.upper()} PROJECTS"

    def items(self) -> List[ProjectItem]:
        return [ProjectItem(p) for p in self.assigned_projects]

    def _on_projects_changed(self, projects: List[Project]) -> None:
        self.assigned_projects = [p for p in projects if p.status == self.status]
        self.render()

    def render(self) -> List[str]:
        self.lines = [self.header] + [item.render() for item in self.items()]
        if self.renderer:
            self.renderer(self, self.lines)
        return self.lines


class ProjectInput:
    """The submission form. Field values are held as typed by the user."""

    def __init__(self, store: ProjectStore, config: Optional[Config] = None,
                 on_invalid: Optional[Callable[[str], None]] = None):
        self.store = store
        self.cfg = config or Config()
        self.on_invalid = on_invalid or self._warn_invalid
        self.title = ""
        self.description = ""
        self.people = ""

    @staticmethod
    def _warn_invalid(message: str) -> None:
        logger.warning(message)

    def gather_user_input(self) -> Optional[Tuple[str, str, int]]:
        """Validate the current field values; None if any field is invalid."""
        raw_people = str(self.people).strip()
        if not (raw_people.isascii() and raw_people.isdigit()):
            return None
        people = int(raw_people)

        title = Validatable(
            value=self.title,
            required=True,
            min_length=self.cfg.title_min_length,
            max_length=self.cfg.title_max_length,
        )
        description = Validatable(
            value=self.description,
            required=True,
            min_length=self.cfg.description_min_length,
        )
        people_field = Validatable(
            value=people,
            required=True,
            min=self.cfg.people_min,
            max=self.cfg.people_max,
        )
        if not validate_all(title, description, people_field):
            return None
        return self.title, self.description, people

    def clear_inputs(self) -> None:
        self.title = ""
        self.description = ""
        self.people = ""

    def handle_submit(self, event) -> Optional[Project]:
        event.prevent_default()
        user_input = self.gather_user_input()
        if user_input is None:
            self.on_invalid("Please enter valid inputs")
            return None
        title, description, people = user_input
        try:
            project = self.store.add_project(title, description, people)
        except IdCollisionError as e:
            logger.error(f"Project not added: {e}")
            self.on_invalid("Could not add project, please try again")
            return None
        self.clear_inputs()
        return project
