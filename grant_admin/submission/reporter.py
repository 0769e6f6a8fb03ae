"""Turns a settled batch (or any form error) into one toast and a navigation decision."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import AdminError, FetchFailed, NoValidEntries
from ..models import BatchResult, Project
from ..notify import Navigator, Notifier, Toast, batch_success_toast, error_toast, project_created_toast

logger = logging.getLogger(__name__)

PROJECTS_INDEX_PATH = "/admin/projects"


def project_path(project_id: int) -> str:
    return f"{PROJECTS_INDEX_PATH}/{project_id}"


def new_milestones_path(project_id: int) -> str:
    return f"{project_path(project_id)}/milestones/new"


class Action(str, Enum):
    ADVANCE = "advance"  # move on to the next screen
    STAY = "stay"        # keep the form and its drafts for a retry
    LEAVE = "leave"      # page cannot be used, go back to the index


@dataclass
class Decision:
    action: Action
    toast: Toast
    path: Optional[str] = None


class OutcomeReporter:
    """Emits exactly one notification per report and navigates when required."""

    def __init__(self, notifier: Notifier, navigator: Navigator) -> None:
        self._notifier = notifier
        self._navigator = navigator

    def _emit(self, toast: Toast) -> None:
        self._notifier.notify(toast.variant, toast.title, toast.description)

    def _go(self, action: Action, toast: Toast, path: Optional[str] = None) -> Decision:
        self._emit(toast)
        if path is not None:
            self._navigator.go_to(path)
        return Decision(action=action, toast=toast, path=path)

    def report(self, result: BatchResult) -> Decision:
        error = result.error()
        if error is not None:
            return self.report_error(error)
        if result.success_count == 0:
            return self.report_error(NoValidEntries())
        return self._go(Action.ADVANCE, batch_success_toast(result.success_count), project_path(result.project_id))

    def report_error(self, error: AdminError) -> Decision:
        logger.info("report_error kind=%s message=%r", type(error).__name__, error.message)
        toast = error_toast(error)
        if isinstance(error, FetchFailed):
            return self._go(Action.LEAVE, toast, PROJECTS_INDEX_PATH)
        return self._go(Action.STAY, toast)

    def report_project_created(self, project: Project, title: str) -> Decision:
        return self._go(Action.ADVANCE, project_created_toast(title), new_milestones_path(project.id))
