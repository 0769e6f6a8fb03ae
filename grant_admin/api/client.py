"""Async client for the project and milestone endpoints."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ..config import Config
from ..errors import FetchFailed, ProjectCreateFailed
from ..models import MilestoneCreateRequest, Project, ProjectCreateRequest
from .base import API_TIMEOUT, build_timeout, fetch_retry

logger = logging.getLogger(__name__)

PROJECTS_PATH = "/api/projects"
MILESTONES_PATH = "/api/milestones"


class AdminApiClient:
    """Thin wrapper over httpx.AsyncClient for the admin API.

    One client is shared by every request in a batch so that concurrent
    creations reuse the same connection pool.
    """

    def __init__(
        self,
        base_url: str,
        timeout: httpx.Timeout = API_TIMEOUT,
        fetch_retry_attempts: int = 1,
        retry_wait: Any = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.fetch_retry_attempts = fetch_retry_attempts
        self._retry_wait = retry_wait
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    @classmethod
    def from_config(cls, config: Config) -> "AdminApiClient":
        return cls(
            base_url=config.admin_api_url,
            timeout=build_timeout(config.connect_timeout, config.read_timeout),
            fetch_retry_attempts=config.fetch_retry_attempts,
        )

    async def __aenter__(self) -> "AdminApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Low-level send with structured logging
    # ------------------------------------------------------------------
    async def _send(self, method: str, path: str, json: dict | None = None) -> httpx.Response:
        url = f"{self.base_url}{path}"
        start = time.monotonic()
        try:
            response = await self._http.request(method, url, json=json)
        except httpx.HTTPError as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(
                "request method=%s url=%s status=error duration_ms=%.0f result=failure error='%s'",
                method, url, duration_ms, exc,
            )
            raise

        duration_ms = (time.monotonic() - start) * 1000
        result = "success" if response.is_success else "failure"
        log = logger.info if response.is_success else logger.error
        log(
            "request method=%s url=%s status=%d duration_ms=%.0f result=%s",
            method, url, response.status_code, duration_ms, result,
        )
        return response

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    async def get_project(self, project_id: int) -> Project:
        """GET /api/projects/{id}.

        Raises:
            FetchFailed: on non-2xx, transport error (after retries) or a
                body that is not a project.
        """
        send = fetch_retry(self.fetch_retry_attempts, self._retry_wait)(self._send)
        try:
            response = await send("GET", f"{PROJECTS_PATH}/{project_id}")
            response.raise_for_status()
            return Project.model_validate(response.json())
        except Exception as exc:
            raise FetchFailed(project_id) from exc

    async def create_project(self, request: ProjectCreateRequest) -> Project:
        """POST /api/projects and return the created project.

        Raises:
            ProjectCreateFailed: on any failure, including a body without id.
        """
        try:
            response = await self._send("POST", PROJECTS_PATH, json=request.model_dump(mode="json"))
            response.raise_for_status()
            return Project.model_validate(response.json())
        except Exception as exc:
            raise ProjectCreateFailed() from exc

    # ------------------------------------------------------------------
    # Milestones
    # ------------------------------------------------------------------
    async def create_milestone(self, request: MilestoneCreateRequest) -> dict[str, Any]:
        """POST /api/milestones.

        Errors are not wrapped: the batch submitter classifies them.

        Raises:
            httpx.HTTPStatusError: on non-2xx.
            httpx.HTTPError: on transport failure.
        """
        response = await self._send("POST", MILESTONES_PATH, json=request.model_dump(mode="json"))
        response.raise_for_status()
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {"data": body}
