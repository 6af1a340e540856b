from __future__ import annotations

import pytest
from fastapi import Request, Response
from prometheus_client import REGISTRY

import app.main as main_module
from app.core.metrics import (
    build_metrics_response,
    instrument_http_request,
    record_mentor_decision,
    record_request_event,
)


def _make_request(path: str, method: str = "GET") -> Request:
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "headers": [],
        "client": ("127.0.0.1", 12345),
        "scheme": "http",
        "server": ("testserver", 80),
        "query_string": b"",
    }
    return Request(scope)


def _sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.asyncio
async def test_http_instrumentation_counts_by_method_path_and_status() -> None:
    async def _created(_: Request) -> Response:
        return Response(status_code=201)

    labels = {"method": "POST", "path": "/api/requests", "status_code": "201"}
    before = _sample("mentorship_http_requests_total", **labels)

    await instrument_http_request(_make_request("/api/requests", method="post"), _created)

    assert _sample("mentorship_http_requests_total", **labels) == before + 1


@pytest.mark.asyncio
async def test_http_instrumentation_counts_unhandled_errors_as_500() -> None:
    async def _boom(_: Request) -> Response:
        raise RuntimeError("boom")

    labels = {"method": "GET", "path": "/explode", "status_code": "500"}
    before = _sample("mentorship_http_requests_total", **labels)

    with pytest.raises(RuntimeError):
        await instrument_http_request(_make_request("/explode"), _boom)

    assert _sample("mentorship_http_requests_total", **labels) == before + 1


def test_workflow_counters_are_labelled_by_status() -> None:
    accepted_before = _sample("mentorship_request_events_total", status="accepted")
    rejected_before = _sample("mentorship_mentor_decisions_total", status="rejected")

    record_request_event("accepted")
    record_mentor_decision("rejected")

    assert _sample("mentorship_request_events_total", status="accepted") == accepted_before + 1
    assert _sample("mentorship_mentor_decisions_total", status="rejected") == rejected_before + 1


@pytest.mark.asyncio
async def test_metrics_endpoint_exposes_prometheus_payload() -> None:
    response = await main_module.metrics_endpoint(_make_request("/metrics"))
    payload = response.body.decode("utf-8")

    assert response.status_code == 200
    assert response.media_type == build_metrics_response().media_type
    assert "mentorship_http_request_duration_seconds" in payload
    assert "mentorship_request_events_total" in payload
