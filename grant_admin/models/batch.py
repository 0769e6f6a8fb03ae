"""SubmissionOutcome and BatchResult - per-draft results of one submit action."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

from ..errors import PartialBatchFailure, TotalBatchFailure
from .milestone import MilestoneCreateRequest


class OutcomeStatus(str, Enum):
    CREATED = "created"
    FAILED = "failed"


class BatchOutcome(str, Enum):
    """How a settled batch is classified for the user."""

    SUCCEEDED = "succeeded"
    PARTIALLY_FAILED = "partially_failed"
    REJECTED = "rejected"


class SubmissionOutcome(BaseModel):
    """Settled result of a single milestone creation request."""

    index: int = Field(..., description="Position of the draft in the valid set")
    request: MilestoneCreateRequest
    status: OutcomeStatus
    milestone: Optional[dict[str, Any]] = Field(None, description="Created milestone JSON")
    status_code: Optional[int] = Field(None, description="HTTP status, None on transport error")
    error: Optional[str] = None

    @property
    def created(self) -> bool:
        return self.status == OutcomeStatus.CREATED


class BatchResult(BaseModel):
    """Aggregate of every outcome in one submit action."""

    project_id: int
    outcomes: list[SubmissionOutcome] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.created)

    @property
    def failure_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.created)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def outcome(self) -> BatchOutcome:
        if self.failure_count > 0:
            return BatchOutcome.PARTIALLY_FAILED
        if self.success_count > 0:
            return BatchOutcome.SUCCEEDED
        return BatchOutcome.REJECTED

    def error(self):
        """Return the batch-level error, or None when every request succeeded.

        Already-created milestones are not rolled back; the error only
        carries counts.
        """
        if self.failure_count == 0:
            return None
        if self.success_count == 0:
            return TotalBatchFailure(self.failure_count)
        return PartialBatchFailure(self.failure_count, self.total)
