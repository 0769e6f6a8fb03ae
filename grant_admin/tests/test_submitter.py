"""Tests for BatchSubmitter: concurrency, settle-all and classification."""

import asyncio
import json
import logging

import httpx
import pytest
import respx

from grant_admin.errors import NoValidEntries, PartialBatchFailure, TotalBatchFailure
from grant_admin.models import BatchOutcome, OutcomeStatus
from grant_admin.submission import BatchSubmitter

from conftest import MILESTONES_URL, fail_titles, make_draft


class GatedClient:
    """Holds every request open until all expected requests have arrived."""

    def __init__(self, expected: int, fail_titles=()):
        self.expected = expected
        self.fail_titles = set(fail_titles)
        self.requests = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.completed = 0
        self.all_dispatched = asyncio.Event()

    async def create_milestone(self, request):
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        if len(self.requests) == self.expected:
            self.all_dispatched.set()
        if request.title in self.fail_titles:
            self.in_flight -= 1
            raise RuntimeError("rejected")
        await self.all_dispatched.wait()
        self.in_flight -= 1
        self.completed += 1
        return {"id": len(self.requests), "title": request.title}


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("count", [1, 3, 8])
async def test_all_requests_in_flight_before_any_settles(count):
    client = GatedClient(expected=count)
    drafts = [make_draft(title=f"M{i}") for i in range(count)]

    # A sequential submitter would block forever on the first request
    result = await asyncio.wait_for(BatchSubmitter(client).submit(42, drafts), timeout=2)

    assert len(client.requests) == count
    assert client.max_in_flight == count
    assert result.success_count == count


@pytest.mark.asyncio
async def test_failure_does_not_cancel_siblings():
    client = GatedClient(expected=3, fail_titles=["M0"])
    drafts = [make_draft(title=f"M{i}") for i in range(3)]

    result = await asyncio.wait_for(BatchSubmitter(client).submit(42, drafts), timeout=2)

    assert client.completed == 2
    assert result.success_count == 2
    assert result.failure_count == 1
    assert result.outcomes[0].status is OutcomeStatus.FAILED
    assert result.outcomes[0].error == "rejected"


# ---------------------------------------------------------------------------
# Classification over HTTP
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@respx.mock
async def test_two_of_three_succeed_is_partial_failure(client, three_drafts):
    route = respx.post(MILESTONES_URL).mock(side_effect=fail_titles("Prototype"))

    result = await BatchSubmitter(client).submit(42, three_drafts)

    assert route.call_count == 3
    assert result.success_count == 2
    assert result.failure_count == 1
    assert result.outcome is BatchOutcome.PARTIALLY_FAILED

    failed = [o for o in result.outcomes if not o.created]
    assert failed[0].request.title == "Prototype"
    assert failed[0].status_code == 500

    error = result.error()
    assert isinstance(error, PartialBatchFailure)
    assert error.count == 1
    assert error.total == 3
    assert error.message == "Failed to create 1 milestone(s)"


@pytest.mark.asyncio
@respx.mock
async def test_all_succeed(client, three_drafts):
    respx.post(MILESTONES_URL).mock(side_effect=fail_titles())

    result = await BatchSubmitter(client).submit(42, three_drafts)

    assert result.success_count == 3
    assert result.failure_count == 0
    assert result.outcome is BatchOutcome.SUCCEEDED
    assert result.error() is None
    assert all(o.milestone["project_id"] == 42 for o in result.outcomes)


@pytest.mark.asyncio
@respx.mock
async def test_transport_errors_count_as_failures(client, three_drafts):
    respx.post(MILESTONES_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    result = await BatchSubmitter(client).submit(42, three_drafts)

    assert result.failure_count == 3
    assert all(o.status_code is None for o in result.outcomes)
    error = result.error()
    assert isinstance(error, TotalBatchFailure)
    assert error.message == "Failed to create 3 milestone(s)"


@pytest.mark.asyncio
@respx.mock
async def test_request_body_built_from_draft(client):
    route = respx.post(MILESTONES_URL).mock(side_effect=fail_titles())

    await BatchSubmitter(client).submit(7, [make_draft(title="Only", deadline="2027-01-15", budget="100.50")])

    sent = json.loads(route.calls.last.request.content)
    assert sent == {
        "project_id": 7,
        "title": "Only",
        "description": "Scope the work",
        "due_date": "2027-01-15",
        "status": "pending",
        "budget": "100.50",
    }


@pytest.mark.asyncio
@respx.mock
async def test_batch_log_line(client, three_drafts, caplog):
    respx.post(MILESTONES_URL).mock(side_effect=fail_titles("Launch"))

    with caplog.at_level(logging.INFO):
        await BatchSubmitter(client).submit(42, three_drafts)

    log_text = " ".join(caplog.text.split())
    assert "batch_complete project_id=42 total=3 success=2 failure=1" in log_text
    assert "result=partially_failed" in log_text


@pytest.mark.asyncio
async def test_empty_batch_raises_without_requests():
    client = GatedClient(expected=0)
    with pytest.raises(NoValidEntries):
        await BatchSubmitter(client).submit(42, [])
    assert client.requests == []
