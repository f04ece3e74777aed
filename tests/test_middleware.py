"""
Sample API: Middleware Tests
==============================

What we test:
    ✅ Client request IDs are reused only when they are safe tokens
    ✅ Access-log levels follow the status class
    ✅ One access record per request, carrying the request ID and status
    ✅ /health produces no access record
"""

import logging

import pytest

from sample_api.middleware.logging import level_for_status
from sample_api.middleware.request_id import resolve_request_id

ACCESS_LOGGER = "sample_api.access"


def _access_records(caplog):
    return [record for record in caplog.records if record.name == ACCESS_LOGGER]


class TestResolveRequestId:

    def test_safe_token_reused(self):
        assert resolve_request_id("req-42.a_b") == "req-42.a_b"

    @pytest.mark.parametrize("supplied", [None, "", "x" * 65, "has space", "a\nb"])
    def test_unsafe_values_replaced(self, supplied):
        generated = resolve_request_id(supplied)

        assert generated != supplied
        assert len(generated) == 8
        int(generated, 16)


class TestLevelForStatus:

    @pytest.mark.parametrize("status, level", [
        (200, logging.INFO),
        (201, logging.INFO),
        (400, logging.WARNING),
        (404, logging.WARNING),
        (500, logging.ERROR),
        (503, logging.ERROR),
    ])
    def test_levels(self, status, level):
        assert level_for_status(status) == level


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_one_record_per_request(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

        await test_client.get("/agents", headers={"X-Request-ID": "req-list"})

        records = _access_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].request_id == "req-list"
        assert records[0].method == "GET"
        assert records[0].status == 200
        assert records[0].duration_ms >= 0

    @pytest.mark.asyncio
    async def test_not_found_logged_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

        await test_client.delete("/agents/99999", headers={"X-Request-ID": "req-gone"})

        records = _access_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].status == 404
        assert records[0].path == "/agents/99999"

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

        await test_client.get("/health")

        assert _access_records(caplog) == []

    @pytest.mark.asyncio
    async def test_unsafe_request_id_replaced_in_response(self, test_client):
        response = await test_client.get("/agents", headers={"X-Request-ID": "x" * 200})

        assert response.headers["X-Request-ID"] != "x" * 200
        assert len(response.headers["X-Request-ID"]) == 8
