"""HTTP client for the admin JSON API."""

from .base import API_TIMEOUT, fetch_retry
from .client import AdminApiClient

__all__ = ["API_TIMEOUT", "fetch_retry", "AdminApiClient"]
