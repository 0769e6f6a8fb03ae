"""Concurrent batch creation of milestones.

Every valid draft gets exactly one POST. All requests are dispatched
before any is awaited and the batch waits for every one of them to
settle; a failed request never cancels its siblings. There is no
rollback: milestones created before a sibling failed stay created.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Protocol, Sequence

import httpx

from ..errors import NoValidEntries
from ..models import (
    BatchResult,
    MilestoneCreateRequest,
    MilestoneDraft,
    OutcomeStatus,
    SubmissionOutcome,
)

logger = logging.getLogger(__name__)


class MilestoneCreator(Protocol):
    async def create_milestone(self, request: MilestoneCreateRequest) -> dict[str, Any]: ...


class BatchSubmitter:
    """Issues one creation request per draft and collects per-draft outcomes."""

    def __init__(self, client: MilestoneCreator) -> None:
        self._client = client

    async def submit(self, project_id: int, valid_drafts: Sequence[MilestoneDraft]) -> BatchResult:
        """Create all drafts concurrently and return once every request has settled.

        Raises:
            NoValidEntries: if valid_drafts is empty (no request is sent).
        """
        if not valid_drafts:
            raise NoValidEntries()

        requests = [MilestoneCreateRequest.from_draft(project_id, draft) for draft in valid_drafts]
        start = time.monotonic()
        logger.info("batch_start project_id=%d count=%d", project_id, len(requests))

        settled = await asyncio.gather(
            *(self._create_one(index, request) for index, request in enumerate(requests)),
            return_exceptions=True,
        )
        outcomes = [
            self._as_outcome(index, request, item)
            for index, (request, item) in enumerate(zip(requests, settled))
        ]
        result = BatchResult(project_id=project_id, outcomes=outcomes)

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "batch_complete project_id=%d total=%d success=%d failure=%d duration_ms=%.0f result=%s",
            project_id,
            result.total,
            result.success_count,
            result.failure_count,
            duration_ms,
            result.outcome.value,
        )
        return result

    async def _create_one(self, index: int, request: MilestoneCreateRequest) -> SubmissionOutcome:
        try:
            milestone = await self._client.create_milestone(request)
        except httpx.HTTPStatusError as exc:
            return SubmissionOutcome(
                index=index,
                request=request,
                status=OutcomeStatus.FAILED,
                status_code=exc.response.status_code,
                error=str(exc),
            )
        except Exception as exc:
            logger.warning("milestone_create index=%d title=%r error=%s", index, request.title, exc)
            return SubmissionOutcome(
                index=index,
                request=request,
                status=OutcomeStatus.FAILED,
                error=str(exc) or exc.__class__.__name__,
            )
        return SubmissionOutcome(
            index=index,
            request=request,
            status=OutcomeStatus.CREATED,
            milestone=milestone,
        )

    @staticmethod
    def _as_outcome(index: int, request: MilestoneCreateRequest, item: Any) -> SubmissionOutcome:
        # gather(return_exceptions=True) hands back anything _create_one did not catch
        if isinstance(item, SubmissionOutcome):
            return item
        return SubmissionOutcome(
            index=index,
            request=request,
            status=OutcomeStatus.FAILED,
            error=repr(item),
        )
