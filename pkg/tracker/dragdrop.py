"""
Drag-and-drop between status buckets.

A drag carries one opaque string, the project id, under the text/plain
MIME type. Each bucket is a drop target with two states:

  idle ──dragover(text/plain)──▶ hovering
  hovering ──dragleave / drop──▶ idle

A drop asks the store to move the project into the target's bucket. The
source bucket is never told anything; it notices on the next snapshot.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from .schema import ProjectStatus
from .store import ProjectStore

logger = logging.getLogger(__name__)

PAYLOAD_MIME = "text/plain"


class DropState(Enum):
    IDLE = "idle"
    HOVERING = "hovering"


@dataclass
class DataTransfer:
    """Payload channel of a drag operation, keyed by MIME type."""
    types: List[str] = field(default_factory=list)
    effect_allowed: str = "all"
    _data: Dict[str, str] = field(default_factory=dict, repr=False)

    def set_data(self, mime: str, value: str) -> None:
        if mime not in self.types:
            self.types.append(mime)
        self._data[mime] = value

    def get_data(self, mime: str) -> str:
        return self._data.get(mime, "")


@dataclass
class Event:
    """Host event with a cancellable default action."""
    type: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass
class DragEvent(Event):
    """Host drag event carrying a payload channel."""
    data_transfer: Optional[DataTransfer] = None


class BucketDropTarget:
    """Drop target for one status bucket."""

    def __init__(self, store: ProjectStore, status: ProjectStatus):
        self.store = store
        self.status = status
        self.state = DropState.IDLE

    @property
    def droppable(self) -> bool:
        """Whether the "droppable" marker is currently shown."""
        return self.state == DropState.HOVERING

    def handlers(self) -> Dict[str, Callable[[DragEvent], None]]:
        """Event name to handler, for registration with the host event system."""
        return {
            "dragover": self.drag_over,
            "dragleave": self.drag_leave,
            "drop": self.drop,
        }

    def drag_over(self, event: DragEvent) -> None:
        dt = event.data_transfer
        if dt is not None and dt.types and dt.types[0] == PAYLOAD_MIME:
            # Hosts refuse drops unless dragover cancels its default action
            event.prevent_default()
            self.state = DropState.HOVERING

    def drag_leave(self, event: DragEvent) -> None:
        self.state = DropState.IDLE

    def drop(self, event: DragEvent) -> None:
        project_id = event.data_transfer.get_data(PAYLOAD_MIME) if event.data_transfer else ""
        logger.debug(f"Drop of {project_id!r} onto {self.status.value} bucket")
        self.store.move_project(project_id, self.status)
        self.state = DropState.IDLE
