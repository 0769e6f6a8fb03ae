"""Draft milestone rows: editing, validation and file loading."""

from .draft_list import DraftList
from .validator import is_complete, validate_drafts, require_valid_drafts
from .loader import load_drafts, load_mapping

__all__ = [
    "DraftList",
    "is_complete",
    "validate_drafts",
    "require_valid_drafts",
    "load_drafts",
    "load_mapping",
]
