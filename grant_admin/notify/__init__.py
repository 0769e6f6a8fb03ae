"""Toast notifications and navigation capabilities used by the forms."""

from .toast import (
    DEFAULT,
    DESTRUCTIVE,
    Toast,
    Notifier,
    Navigator,
    ToastLog,
    NavigationLog,
)
from .formatters import (
    batch_success_toast,
    error_toast,
    project_created_toast,
    submit_button_label,
)

__all__ = [
    "DEFAULT",
    "DESTRUCTIVE",
    "Toast",
    "Notifier",
    "Navigator",
    "ToastLog",
    "NavigationLog",
    "batch_success_toast",
    "error_toast",
    "project_created_toast",
    "submit_button_label",
]
