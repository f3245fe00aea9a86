#!/usr/bin/env python3
"""
Project tracker: composition root

Builds one ProjectStore and wires the input form plus the active and
finished bucket lists to it.

Usage:
    python -m pkg.tracker.app --demo
    python -m pkg.tracker.app --demo --config config.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from .config import Config
from .dragdrop import DataTransfer, DragEvent, Event
from .schema import Project, ProjectStatus
from .store import ProjectStore
from .views import ProjectInput, ProjectItem, ProjectList, Renderer

logger = logging.getLogger(__name__)


class TrackerApp:
    """Owns the store and every view attached to it."""

    def __init__(self, config: Optional[Config] = None, renderer: Optional[Renderer] = None):
        self.cfg = config or Config()
        self.store = ProjectStore(max_id_attempts=self.cfg.max_id_attempts)
        self.project_input = ProjectInput(self.store, self.cfg)
        self.lists: Dict[ProjectStatus, ProjectList] = {
            status: ProjectList(self.store, status, renderer)
            for status in (ProjectStatus.ACTIVE, ProjectStatus.FINISHED)
        }

    def submit(self, title: str, description: str, people: str) -> Optional[Project]:
        """Fill in the form and submit it, as a user would."""
        self.project_input.title = title
        self.project_input.description = description
        self.project_input.people = people
        return self.project_input.handle_submit(Event("submit"))

    def drag(self, project: Project, status: ProjectStatus) -> None:
        """Drag a project's item onto the bucket for the given status."""
        target = self.lists[status].drop_target
        dt = DataTransfer()
        ProjectItem(project).drag_start(DragEvent("dragstart", data_transfer=dt))
        target.drag_over(DragEvent("dragover", data_transfer=dt))
        target.drop(DragEvent("drop", data_transfer=dt))

    def board(self) -> List[str]:
        lines: List[str] = []
        for project_list in self.lists.values():
            lines.extend(project_list.lines)
            lines.append("")
        return lines


def run_demo(app: TrackerApp) -> None:
    website = app.submit("Website Redesign", "Rebuild marketing site", "3")
    app.submit("API Migration", "Move to new backend", "5")
    if website is None:
        logger.warning("Demo project was rejected by the configured limits; nothing to move")
    else:
        app.drag(website, ProjectStatus.FINISHED)
    print("\n".join(app.board()))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Project tracker: active and finished project buckets"
    )
    ap.add_argument(
        "--config", default=None,
        help="Path to config.yaml (default: $TRACKER_CONFIG or the packaged config.yaml)",
    )
    ap.add_argument(
        "--log-level", default=None,
        help="Logging level (overrides config)",
    )
    ap.add_argument(
        "--demo", action="store_true",
        help="Add two projects, finish one, and print both buckets",
    )
    args = ap.parse_args(argv)

    cfg = Config.load(args.config)
    if args.log_level:
        cfg.log_level = args.log_level

    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = TrackerApp(cfg)
    if args.demo:
        run_demo(app)
    else:
        ap.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
