"""Controller for the "add milestones to a project" page.

Wires DraftList, the validator, BatchSubmitter and OutcomeReporter
together and owns the submit state machine:

    IDLE -> SUBMITTING -> SETTLED -> IDLE

SUBMITTING is only entered with a non-empty valid set. Every failure is
caught here and reported as one destructive toast; the drafts are left
untouched so the user can fix them and resubmit. After a partial
failure a resubmit sends the already-created milestones again.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from ..api import AdminApiClient
from ..drafts import DraftList, require_valid_drafts
from ..errors import AdminError, FetchFailed, NoValidEntries, SubmissionInProgress, TransportError
from ..models import BatchResult, Project
from ..notify import Navigator, Notifier, submit_button_label
from .reporter import Decision, OutcomeReporter
from .submitter import BatchSubmitter

logger = logging.getLogger(__name__)


class SubmitPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SETTLED = "settled"


class MilestoneForm:
    """Milestone batch form bound to a single project."""

    def __init__(
        self,
        project_id: int,
        client: AdminApiClient,
        notifier: Notifier,
        navigator: Navigator,
        drafts: Optional[DraftList] = None,
    ) -> None:
        self.project_id = project_id
        self.drafts = drafts if drafts is not None else DraftList()
        self.project: Optional[Project] = None
        self.phase = SubmitPhase.IDLE
        self.last_result: Optional[BatchResult] = None
        self.mounted = True
        self._client = client
        self._submitter = BatchSubmitter(client)
        self._reporter = OutcomeReporter(notifier, navigator)

    @property
    def is_submitting(self) -> bool:
        return self.phase is SubmitPhase.SUBMITTING

    @property
    def submit_label(self) -> str:
        return submit_button_label(len(self.drafts), self.is_submitting)

    def unmount(self) -> None:
        """Mark the page as gone; results that settle afterwards are dropped."""
        self.mounted = False

    async def load(self) -> Optional[Project]:
        """Fetch the parent project once. On failure, notify and leave the page."""
        try:
            self.project = await self._client.get_project(self.project_id)
        except FetchFailed as exc:
            logger.error("project_load project_id=%d result=failure error=%s", self.project_id, exc.__cause__)
            if self.mounted:
                self._reporter.report_error(exc)
            return None
        logger.info("project_load project_id=%d result=success name=%r", self.project_id, self.project.name)
        return self.project

    async def submit(self) -> Optional[Decision]:
        """Validate, submit every complete draft and report the outcome.

        Returns the decision taken, or None if the form was unmounted
        before the batch settled.

        Raises:
            SubmissionInProgress: if a batch from this form is still in flight.
        """
        if self.is_submitting:
            raise SubmissionInProgress(f"project_id={self.project_id} already has a batch in flight")

        if self.project is None:
            return self._settle(FetchFailed(self.project_id))

        try:
            valid = require_valid_drafts(self.drafts)
        except NoValidEntries as exc:
            logger.warning("submit_rejected project_id=%d drafts=%d valid=0", self.project_id, len(self.drafts))
            return self._settle(exc)

        self.phase = SubmitPhase.SUBMITTING
        try:
            result = await self._submitter.submit(self.project_id, valid)
        except Exception as exc:
            logger.error("submit_failed project_id=%d error=%s", self.project_id, exc, exc_info=True)
            return self._settle(TransportError(cause=exc))
        finally:
            # Cancellation leaves the form usable again
            if self.phase is SubmitPhase.SUBMITTING:
                self.phase = SubmitPhase.IDLE

        self.last_result = result
        return self._settle(result)

    def _settle(self, outcome: Union[BatchResult, AdminError]) -> Optional[Decision]:
        self.phase = SubmitPhase.SETTLED
        try:
            if not self.mounted:
                logger.info("submit_settled project_id=%d discarded=true (form unmounted)", self.project_id)
                return None
            if isinstance(outcome, BatchResult):
                return self._reporter.report(outcome)
            return self._reporter.report_error(outcome)
        finally:
            self.phase = SubmitPhase.IDLE
