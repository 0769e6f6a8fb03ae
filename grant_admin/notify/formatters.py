"""Toast text for each outcome."""

from __future__ import annotations

from ..errors import AdminError
from .toast import DEFAULT, DESTRUCTIVE, Toast

ERROR_TITLE = "Error"


def _plural(count: int, noun: str) -> str:
    return f"{noun}{'s' if count != 1 else ''}"


def batch_success_toast(count: int) -> Toast:
    return Toast(
        title="Milestones Created",
        description=f"Successfully created {count} milestone(s).",
        variant=DEFAULT,
    )


def project_created_toast(title: str) -> Toast:
    return Toast(
        title="Project Created",
        description=f"{title} has been successfully created.",
        variant=DEFAULT,
    )


def error_toast(error: AdminError) -> Toast:
    """Every failure class shares one destructive toast shape."""
    return Toast(title=ERROR_TITLE, description=error.message, variant=DESTRUCTIVE)


def submit_button_label(draft_count: int, submitting: bool) -> str:
    if submitting:
        return "Creating..."
    return f"Create {draft_count} {_plural(draft_count, 'Milestone')}"
