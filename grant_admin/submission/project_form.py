"""Controller for the "create project" page.

Collects the project fields, maps them onto the POST /api/projects body
and, on success, sends the user on to add milestones to the new project.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional

from ..api import AdminApiClient
from ..errors import IncompleteProject, ProjectCreateFailed, SubmissionInProgress
from ..models import ProjectCreateRequest
from ..notify import Navigator, Notifier
from .reporter import Decision, OutcomeReporter

logger = logging.getLogger(__name__)

PROJECT_FIELDS = (
    "title",
    "creator_username",
    "grantee_email",
    "background",
    "mission_expertise",
    "campaign_goals",
    "funding_requested",
    "github_repo",
    "website_links",
    "program_type",
    "category",
    "status",
    "creator_stat_1_name",
    "creator_stat_1_number",
    "creator_stat_2_name",
    "creator_stat_2_number",
    "youtube_link",
    "tiktok_link",
    "twitter_link",
    "twitch_link",
)

# Options offered by the form's selects; the mapping does not enforce them
PROJECT_STATUSES = ("active", "at-risk", "overdue", "canceled", "completed")
CATEGORIES = ("development", "education", "infrastructure")
PROGRAM_TYPES = ("milestone", "program")

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+$")

# Fields the form marks with *, and the label shown for each
REQUIRED_FIELDS = {
    "title": "Project Title",
    "creator_username": "Creator Username (Discord)",
    "grantee_email": "Grantee Email",
    "funding_requested": "Budget",
    "background": "Project Background",
    "mission_expertise": "Mission & Expertise",
    "campaign_goals": "Campaign Goals",
}


def parse_funding(value: str) -> float:
    """Leading numeric prefix of value as float, 0.0 when there is none."""
    match = _LEADING_NUMBER.match(value or "")
    if not match:
        return 0.0
    return float(match.group())


class ProjectForm:
    """New project form."""

    def __init__(
        self,
        client: AdminApiClient,
        notifier: Notifier,
        navigator: Navigator,
        values: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.values: Dict[str, str] = {name: "" for name in PROJECT_FIELDS}
        for name, value in (values or {}).items():
            self.update(name, value)
        self.is_submitting = False
        self._client = client
        self._reporter = OutcomeReporter(notifier, navigator)

    def update(self, field: str, value: str) -> None:
        if field not in self.values:
            raise ValueError(f"Unknown project field: {field!r}")
        self.values[field] = "" if value is None else str(value)

    def invalid_fields(self) -> List[str]:
        """Labels of required fields that are blank or not in the expected format."""
        invalid = []
        for name, label in REQUIRED_FIELDS.items():
            value = self.values[name].strip()
            if not value:
                invalid.append(label)
            elif name == "grantee_email" and not _EMAIL.match(value):
                invalid.append(label)
            elif name == "funding_requested" and not _NUMBER.match(value):
                invalid.append(label)
        return invalid

    def build_request(self, today: Optional[str] = None) -> ProjectCreateRequest:
        v = self.values
        return ProjectCreateRequest(
            name=v["title"],
            description=v["background"],
            status=v["status"].lower(),
            github_repo=v["github_repo"],
            # The creator's Discord handle doubles as the project channel
            discord_channel=v["creator_username"],
            funding_amount=parse_funding(v["funding_requested"]),
            start_date=today or datetime.now(timezone.utc).date().isoformat(),
            end_date=None,
            creator_username=v["creator_username"],
            grantee_email=v["grantee_email"],
            mission_expertise=v["mission_expertise"],
            campaign_goals=v["campaign_goals"],
            website_links=v["website_links"],
            program_type=v["program_type"],
            category=v["category"],
            creator_stat_1_name=v["creator_stat_1_name"],
            creator_stat_1_number=v["creator_stat_1_number"],
            creator_stat_2_name=v["creator_stat_2_name"],
            creator_stat_2_number=v["creator_stat_2_number"],
            youtube_link=v["youtube_link"],
            tiktok_link=v["tiktok_link"],
            twitter_link=v["twitter_link"],
            twitch_link=v["twitch_link"],
        )

    async def submit(self) -> Decision:
        """Create the project, then advance to its milestone form.

        Raises:
            SubmissionInProgress: if a create request is already in flight.
        """
        if self.is_submitting:
            raise SubmissionInProgress("project create already in flight")

        invalid = self.invalid_fields()
        if invalid:
            logger.warning("project_create result=rejected invalid=%s", ",".join(invalid))
            return self._reporter.report_error(IncompleteProject(invalid))

        self.is_submitting = True
        try:
            project = await self._client.create_project(self.build_request())
        except ProjectCreateFailed as exc:
            logger.error("project_create result=failure error=%s", exc.__cause__)
            return self._reporter.report_error(exc)
        except Exception as exc:
            logger.error("project_create result=failure error=%s", exc, exc_info=True)
            return self._reporter.report_error(ProjectCreateFailed())
        finally:
            self.is_submitting = False

        logger.info("project_create result=success project_id=%d", project.id)
        return self._reporter.report_project_created(project, self.values["title"])
