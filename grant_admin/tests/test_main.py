"""Tests for the grant-admin command line."""

import json
import os
from unittest.mock import patch

import httpx
import respx

from grant_admin.main import main

from conftest import API_URL, MILESTONES_URL, PROJECT_JSON, PROJECT_URL, PROJECTS_URL, fail_titles

ENV = {"ADMIN_API_URL": API_URL}


def _write_drafts(tmp_path, rows):
    path = tmp_path / "milestones.json"
    path.write_text(json.dumps(rows))
    return str(path)


ROWS = [
    {"title": "Planning", "description": "Scope", "deadline": "2026-03-31", "budget": "8333"},
    {"title": "Launch", "description": "Ship", "deadline": "2026-09-30", "budget": "4667"},
]


@respx.mock
def test_milestones_command_success(tmp_path):
    respx.get(PROJECT_URL).mock(return_value=httpx.Response(200, json=PROJECT_JSON))
    route = respx.post(MILESTONES_URL).mock(side_effect=fail_titles())

    with patch.dict(os.environ, ENV):
        code = main(["milestones", "--project", "42", _write_drafts(tmp_path, ROWS)])

    assert code == 0
    assert route.call_count == 2


@respx.mock
def test_milestones_command_partial_failure_exits_nonzero(tmp_path):
    respx.get(PROJECT_URL).mock(return_value=httpx.Response(200, json=PROJECT_JSON))
    respx.post(MILESTONES_URL).mock(side_effect=fail_titles("Launch"))

    with patch.dict(os.environ, ENV):
        code = main(["milestones", "--project", "42", _write_drafts(tmp_path, ROWS)])

    assert code == 1


def test_milestones_command_project_missing(tmp_path):
    drafts_file = _write_drafts(tmp_path, ROWS)

    with respx.mock(assert_all_called=False) as router:
        project_route = router.get(PROJECT_URL).mock(return_value=httpx.Response(404))
        route = router.post(MILESTONES_URL).mock(side_effect=fail_titles())
        with patch.dict(os.environ, ENV):
            code = main(["milestones", "--project", "42", drafts_file])

    assert code == 1
    assert project_route.call_count == 1
    assert route.call_count == 0


def test_milestones_command_missing_file():
    with patch.dict(os.environ, ENV):
        assert main(["milestones", "--project", "42", "/nonexistent.json"]) == 1


@respx.mock
def test_project_command(tmp_path):
    respx.post(PROJECTS_URL).mock(return_value=httpx.Response(201, json={"id": 5, "name": "Fund"}))
    path = tmp_path / "project.yaml"
    path.write_text(
        "title: Fund\n"
        "creator_username: toolsmith\n"
        "grantee_email: grantee@example.com\n"
        "funding_requested: '1000'\n"
        "background: Tooling\n"
        "mission_expertise: Compilers\n"
        "campaign_goals: Ship v1\n"
        "status: Active\n"
    )

    with patch.dict(os.environ, ENV):
        assert main(["project", str(path)]) == 0


def test_milestones_command_malformed_yaml(tmp_path):
    path = tmp_path / "milestones.yaml"
    path.write_text("- title: Planning\n  description: [unclosed\n")

    with patch.dict(os.environ, ENV):
        assert main(["milestones", "--project", "42", str(path)]) == 1
