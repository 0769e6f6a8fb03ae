"""Ordered, editable list of milestone drafts backing the milestone form."""

import logging
from typing import Iterable, Iterator, List, Optional

from ..models import DRAFT_FIELDS, MilestoneDraft

logger = logging.getLogger(__name__)


class DraftList:
    """Ordered drafts, never fewer than one.

    Insertion order is display order. The form always offers at least one
    milestone slot, so removing the last remaining draft does nothing.
    """

    def __init__(self, drafts: Optional[Iterable[MilestoneDraft]] = None):
        self._drafts: List[MilestoneDraft] = list(drafts or [])
        if not self._drafts:
            self._drafts.append(MilestoneDraft())

    def __len__(self) -> int:
        return len(self._drafts)

    def __iter__(self) -> Iterator[MilestoneDraft]:
        return iter(self._drafts)

    def __getitem__(self, index: int) -> MilestoneDraft:
        return self._drafts[index]

    @property
    def drafts(self) -> List[MilestoneDraft]:
        """Snapshot of the current drafts."""
        return list(self._drafts)

    def add(self) -> MilestoneDraft:
        """Append an empty draft and return it."""
        draft = MilestoneDraft()
        self._drafts.append(draft)
        return draft

    def update(self, index: int, field: str, value: str) -> None:
        """Replace one field of the draft at index.

        Raises:
            ValueError: if field is not a draft field.
        """
        if field not in DRAFT_FIELDS:
            raise ValueError(f"Unknown milestone field: {field!r}. Expected one of {DRAFT_FIELDS}")
        if not 0 <= index < len(self._drafts):
            logger.warning("draft_update index=%d out of range (len=%d), ignored", index, len(self._drafts))
            return
        self._drafts[index] = self._drafts[index].model_copy(update={field: value})

    def remove(self, index: int) -> None:
        """Remove the draft at index unless it is the only one left."""
        if len(self._drafts) <= 1:
            return
        if not 0 <= index < len(self._drafts):
            logger.warning("draft_remove index=%d out of range (len=%d), ignored", index, len(self._drafts))
            return
        del self._drafts[index]
