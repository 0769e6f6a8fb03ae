"""Completeness rules applied to drafts on submit.

A draft is complete when title and description are non-blank after
trimming and deadline and budget are non-empty. Budget is deliberately
not parsed: any non-empty string is accepted here.
"""

from typing import Iterable, List

from ..errors import NoValidEntries
from ..models import MilestoneDraft


def is_complete(draft: MilestoneDraft) -> bool:
    return bool(
        draft.title.strip()
        and draft.description.strip()
        and draft.deadline
        and draft.budget
    )


def validate_drafts(drafts: Iterable[MilestoneDraft]) -> List[MilestoneDraft]:
    """Return the complete drafts, preserving input order."""
    return [draft for draft in drafts if is_complete(draft)]


def require_valid_drafts(drafts: Iterable[MilestoneDraft]) -> List[MilestoneDraft]:
    """Like validate_drafts, but raise NoValidEntries when nothing qualifies."""
    valid = validate_drafts(drafts)
    if not valid:
        raise NoValidEntries()
    return valid
