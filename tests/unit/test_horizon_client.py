"""Unit tests for HorizonClient against an in-process Horizon."""

from __future__ import annotations

import httpx
import pytest
from conftest import (
    ALICE,
    TX_HASH,
    horizon_fee_stats,
    horizon_operations,
    horizon_payment,
    horizon_transaction,
    horizon_transport,
)

from stellar_explain.clients.horizon_client import (
    ACCOUNT_NOT_FOUND,
    INVALID_RESPONSE,
    TRANSACTION_NOT_FOUND,
    UNREACHABLE,
    HorizonClient,
    _cursor_from_link,
)
from stellar_explain.core.config import HorizonConfig, StellarNetwork
from stellar_explain.core.errors import NotFoundError, UpstreamError
from stellar_explain.core.tracing import clear_tracing_context, set_request_id, set_trace_parent


def _client(routes: dict, **config) -> HorizonClient:
    return HorizonClient(
        HorizonConfig(base_url="https://horizon.test", **config),
        transport=horizon_transport(routes),
        retry_wait_multiplier=0,
    )


@pytest.mark.asyncio
async def test_fetch_transaction():
    client = _client({f"/transactions/{TX_HASH}": horizon_transaction(fee_charged="250")})
    tx = await client.fetch_transaction(TX_HASH)
    assert tx.hash == TX_HASH
    assert tx.fee_charged == 250
    await client.close()


@pytest.mark.asyncio
async def test_fetch_operations_sends_limit():
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["limit"] = request.url.params["limit"]
        body = horizon_operations(horizon_payment("1"), horizon_payment("2"))
        return httpx.Response(200, json=body)

    client = _client({f"/transactions/{TX_HASH}/operations": handler})
    ops = await client.fetch_operations(TX_HASH)
    assert [op.id for op in ops] == ["1", "2"]
    assert seen["limit"] == "200"


@pytest.mark.asyncio
async def test_missing_transaction_is_not_found():
    client = _client({})
    with pytest.raises(NotFoundError) as exc_info:
        await client.fetch_transaction(TX_HASH)
    assert exc_info.value.message == TRANSACTION_NOT_FOUND


@pytest.mark.asyncio
async def test_missing_account_is_not_found():
    client = _client({})
    with pytest.raises(NotFoundError) as exc_info:
        await client.fetch_account(ALICE)
    assert exc_info.value.message == ACCOUNT_NOT_FOUND


@pytest.mark.asyncio
async def test_server_error_is_upstream_error():
    client = _client({f"/transactions/{TX_HASH}": httpx.Response(503, json={})})
    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_transaction(TX_HASH)
    assert exc_info.value.message == INVALID_RESPONSE
    assert exc_info.value.details == {"status_code": 503}


@pytest.mark.asyncio
async def test_non_json_body_is_invalid_response():
    client = _client({f"/transactions/{TX_HASH}": httpx.Response(200, text="<html>")})
    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_transaction(TX_HASH)
    assert exc_info.value.message == INVALID_RESPONSE


@pytest.mark.asyncio
async def test_unparsable_fee_is_invalid_response():
    client = _client({f"/transactions/{TX_HASH}": horizon_transaction(fee_charged="lots")})
    with pytest.raises(UpstreamError):
        await client.fetch_transaction(TX_HASH)


@pytest.mark.asyncio
async def test_operations_without_records_is_invalid_response():
    client = _client({f"/transactions/{TX_HASH}/operations": {"_embedded": {}}})
    with pytest.raises(UpstreamError):
        await client.fetch_operations(TX_HASH)


@pytest.mark.asyncio
async def test_fetch_fee_stats():
    client = _client({"/fee_stats": horizon_fee_stats(base="200")})
    stats = await client.fetch_fee_stats()
    assert stats.last_ledger_base_fee == 200
    assert stats.max_fee == 5000


@pytest.mark.asyncio
async def test_connect_error_is_retried_then_unreachable():
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        raise httpx.ConnectError("connection refused", request=request)

    client = _client({f"/transactions/{TX_HASH}": handler}, retry_count=2)
    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_transaction(TX_HASH)
    assert exc_info.value.message == UNREACHABLE
    assert calls["n"] == 2


@pytest.mark.asyncio
async def test_decoding_error_is_unreachable_without_retry():
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        raise httpx.DecodingError("corrupt gzip body", request=request)

    client = _client({f"/transactions/{TX_HASH}": handler}, retry_count=3)
    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_transaction(TX_HASH)
    assert exc_info.value.message == UNREACHABLE
    assert exc_info.value.status_code == 502
    assert calls["n"] == 1


@pytest.mark.asyncio
async def test_circuit_breaker_opens_after_threshold():
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        return httpx.Response(500, json={})

    client = _client(
        {f"/transactions/{TX_HASH}": handler},
        circuit_breaker_threshold=2,
        circuit_breaker_timeout=60,
    )
    for _ in range(2):
        with pytest.raises(UpstreamError):
            await client.fetch_transaction(TX_HASH)

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_transaction(TX_HASH)
    assert exc_info.value.details == {"reason": "circuit_open"}
    assert calls["n"] == 2


@pytest.mark.asyncio
async def test_not_found_does_not_trip_circuit():
    client = _client({}, circuit_breaker_threshold=1)
    for _ in range(3):
        with pytest.raises(NotFoundError):
            await client.fetch_transaction(TX_HASH)


@pytest.mark.asyncio
async def test_tracing_headers_forwarded():
    seen: dict[str, str | None] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request_id"] = request.headers.get("x-request-id")
        seen["traceparent"] = request.headers.get("traceparent")
        return httpx.Response(200, json=horizon_transaction())

    set_request_id("req-123")
    set_trace_parent("00-abc-def-01")
    try:
        client = _client({f"/transactions/{TX_HASH}": handler})
        await client.fetch_transaction(TX_HASH)
    finally:
        clear_tracing_context()

    assert seen == {"request_id": "req-123", "traceparent": "00-abc-def-01"}


@pytest.mark.asyncio
async def test_fetch_account_transactions_with_cursors():
    seen: dict[str, str] = {}

    base = f"https://horizon.test/accounts/{ALICE}/transactions"

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(
            200,
            json={
                "_embedded": {"records": [horizon_transaction()]},
                "_links": {
                    "next": {"href": f"{base}?cursor=222&limit=5"},
                    "prev": {"href": f"{base}?cursor=111&limit=5"},
                },
            },
        )

    client = _client({f"/accounts/{ALICE}/transactions": handler})
    records, next_cursor, prev_cursor = await client.fetch_account_transactions(
        ALICE, limit=5, cursor="100", order="desc"
    )
    assert len(records) == 1
    assert (next_cursor, prev_cursor) == ("222", "111")
    assert seen == {"limit": "5", "cursor": "100", "order": "desc"}


def test_cursor_from_link_missing():
    assert _cursor_from_link({}, "next") is None
    assert _cursor_from_link({"next": {"href": "https://h/x?limit=5"}}, "next") is None


@pytest.mark.asyncio
async def test_health_check():
    assert await _client({"/": {"horizon_version": "2"}}).health_check() is True
    assert await _client({"/": httpx.Response(500)}).health_check() is False


def test_base_url_defaults_to_network():
    client = HorizonClient(HorizonConfig(network=StellarNetwork.TESTNET))
    assert client.base_url == "https://horizon-testnet.stellar.org"
    assert client.network == "testnet"
