"""Notifier and Navigator capabilities plus in-process implementations.

The forms never reach for global routing or toast state: both are passed
in. ToastLog and NavigationLog record what happened and log it, which is
what the CLI and the tests use.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT = "default"
DESTRUCTIVE = "destructive"


class Toast(BaseModel):
    """A transient user-facing notification."""

    title: str
    description: str
    variant: str = Field(default=DEFAULT, description="'default' or 'destructive'")

    @property
    def is_error(self) -> bool:
        return self.variant == DESTRUCTIVE


class Notifier(Protocol):
    def notify(self, level: str, title: str, message: str) -> None: ...


class Navigator(Protocol):
    def go_to(self, path: str) -> None: ...


class ToastLog:
    """Notifier that keeps every toast and writes it to the log."""

    def __init__(self) -> None:
        self.toasts: list[Toast] = []

    def notify(self, level: str, title: str, message: str) -> None:
        toast = Toast(title=title, description=message, variant=level)
        self.toasts.append(toast)
        if toast.is_error:
            logger.error("toast variant=%s title=%r description=%r", level, title, message)
        else:
            logger.info("toast variant=%s title=%r description=%r", level, title, message)

    @property
    def last(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None


class NavigationLog:
    """Navigator that records visited paths."""

    def __init__(self) -> None:
        self.history: list[str] = []

    def go_to(self, path: str) -> None:
        logger.info("navigate path=%s", path)
        self.history.append(path)

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None
