"""Batch milestone submission and the form controllers built on it."""

from .submitter import BatchSubmitter
from .reporter import Action, Decision, OutcomeReporter, project_path, new_milestones_path
from .milestone_form import MilestoneForm, SubmitPhase
from .project_form import ProjectForm, parse_funding

__all__ = [
    "BatchSubmitter",
    "Action",
    "Decision",
    "OutcomeReporter",
    "project_path",
    "new_milestones_path",
    "MilestoneForm",
    "SubmitPhase",
    "ProjectForm",
    "parse_funding",
]
