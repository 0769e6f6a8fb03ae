"""Shared Pydantic models for the admin API - contract between forms and client."""

from .milestone import MilestoneDraft, MilestoneCreateRequest, DRAFT_FIELDS
from .project import Project, ProjectCreateRequest
from .batch import SubmissionOutcome, BatchResult, OutcomeStatus, BatchOutcome

__all__ = [
    "MilestoneDraft",
    "MilestoneCreateRequest",
    "DRAFT_FIELDS",
    "Project",
    "ProjectCreateRequest",
    "SubmissionOutcome",
    "BatchResult",
    "OutcomeStatus",
    "BatchOutcome",
]
