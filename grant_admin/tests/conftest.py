"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from grant_admin.api import AdminApiClient
from grant_admin.models import MilestoneDraft
from grant_admin.notify import NavigationLog, ToastLog

API_URL = "https://admin.test"
PROJECT_URL = f"{API_URL}/api/projects/42"
PROJECTS_URL = f"{API_URL}/api/projects"
MILESTONES_URL = f"{API_URL}/api/milestones"

PROJECT_JSON = {
    "id": 42,
    "name": "Open Tooling Fund",
    "description": "Developer tooling grant",
    "status": "active",
    "funding_amount": 25000,
}


def make_draft(title="Planning", description="Scope the work", deadline="2026-03-31", budget="8333", **overrides):
    values = dict(title=title, description=description, deadline=deadline, budget=budget)
    values.update(overrides)
    return MilestoneDraft(**values)


def milestone_created(request: httpx.Request, milestone_id: int = 1) -> httpx.Response:
    """Echo the posted milestone back like the API does."""
    body = json.loads(request.content)
    return httpx.Response(201, json={"id": milestone_id, **body})


def fail_titles(*titles):
    """respx side effect: 500 for the named titles, 201 for everything else."""
    counter = {"n": 0}

    def _respond(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if body["title"] in titles:
            return httpx.Response(500, json={"error": "insert failed"})
        counter["n"] += 1
        return milestone_created(request, counter["n"])

    return _respond


@pytest.fixture
def client():
    return AdminApiClient(API_URL)


@pytest.fixture
def notifier():
    return ToastLog()


@pytest.fixture
def navigator():
    return NavigationLog()


@pytest.fixture
def three_drafts():
    return [
        make_draft(title="Planning"),
        make_draft(title="Prototype", deadline="2026-06-30", budget="12000"),
        make_draft(title="Launch", deadline="2026-09-30", budget="4667"),
    ]
