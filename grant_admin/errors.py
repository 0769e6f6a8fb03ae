"""Error kinds surfaced by the admin forms.

Every member of AdminError carries the text shown to the user, so the
reporter can turn any of them into a single toast without inspecting
message strings.
"""

from typing import List, Optional


class AdminError(Exception):
    """Base class for failures that end in a destructive toast."""

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class FetchFailed(AdminError):
    """Project lookup failed or returned non-2xx. Fatal to the page."""

    default_message = "Failed to load project details."

    def __init__(self, project_id: Optional[int] = None, message: Optional[str] = None) -> None:
        self.project_id = project_id
        super().__init__(message)


class NoValidEntries(AdminError):
    """No draft passed validation; nothing was sent."""

    default_message = "At least one complete milestone is required"


class PartialBatchFailure(AdminError):
    """Some, but not all, milestone creation requests failed."""

    def __init__(self, count: int, total: int) -> None:
        self.count = count
        self.total = total
        super().__init__(f"Failed to create {count} milestone(s)")


class TotalBatchFailure(AdminError):
    """Every milestone creation request failed."""

    def __init__(self, count: int) -> None:
        self.count = count
        self.total = count
        super().__init__(f"Failed to create {count} milestone(s)")


class TransportError(AdminError):
    """Unexpected exception while building or sending requests."""

    default_message = "Failed to create milestones. Please try again."

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class ProjectCreateFailed(AdminError):
    """POST /api/projects failed or returned no usable id."""

    default_message = "Failed to create project. Please try again."


class SubmissionInProgress(RuntimeError):
    """Raised when submit() is called while a previous submit is still in flight."""
    pass


class IncompleteProject(AdminError):
    """Required project fields are blank or malformed; nothing was sent."""

    def __init__(self, fields: List[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Please complete the required fields: {', '.join(self.fields)}")
