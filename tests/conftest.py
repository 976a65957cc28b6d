"""Root conftest for tests."""

import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

if os.getenv("APP_ENV", "").strip().lower() == "prod":
    raise RuntimeError("Refusing to run tests with APP_ENV=prod")

os.environ["APP_ENV"] = "local"
os.environ.setdefault("METRICS_TOKEN", "test-metrics-token")

COINBASE = "GCOINBASEAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
KRAKEN = "GKRAKENAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
ALICE = "GALICEXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX"
BOB = "GBOBXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX"
USDC_ISSUER = "GA5ZSEJYB37JRC5AVCIA5MOP4RHTM335X2KGX3IHOJAPP5RE34K4KZVN"
TX_HASH = "a" * 64


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    dir_marker_map = {
        "unit": pytest.mark.unit,
        "smoke": pytest.mark.smoke,
    }
    for item in items:
        test_path = str(item.fspath)
        for dir_name, marker in dir_marker_map.items():
            if f"/{dir_name}/" in test_path or f"\\{dir_name}\\" in test_path:
                item.add_marker(marker)
                break


# ── Horizon payload builders ─────────────────────────────────────


def horizon_transaction(**overrides: Any) -> dict[str, Any]:
    payload = {
        "hash": TX_HASH,
        "successful": True,
        "fee_charged": "100",
        "memo_type": "none",
        "created_at": "2024-01-15T14:32:00Z",
        "ledger": 50123456,
        "source_account": COINBASE,
        "operation_count": 1,
    }
    payload.update(overrides)
    return payload


def horizon_payment(op_id: str = "1", **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": op_id,
        "type": "payment",
        "source_account": COINBASE,
        "from": COINBASE,
        "to": KRAKEN,
        "asset_type": "native",
        "amount": "500.0000000",
    }
    payload.update(overrides)
    return payload


def horizon_operations(*records: dict[str, Any]) -> dict[str, Any]:
    return {"_embedded": {"records": list(records)}}


def horizon_fee_stats(base: str = "100") -> dict[str, Any]:
    return {
        "last_ledger_base_fee": base,
        "fee_charged": {"min": "100", "max": "5000", "mode": "100", "p90": "200"},
    }


Route = Callable[[httpx.Request], httpx.Response]


def horizon_transport(routes: dict[str, Any]) -> httpx.MockTransport:
    """MockTransport answering by URL path.

    Values are either a JSON body (served with 200), an ``httpx.Response``,
    or a callable taking the request.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"status": 404, "title": "Resource Missing"})
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


@pytest.fixture
def default_routes() -> dict[str, Any]:
    return {
        "/": {"horizon_version": "2.30.0"},
        f"/transactions/{TX_HASH}": horizon_transaction(),
        f"/transactions/{TX_HASH}/operations": horizon_operations(horizon_payment()),
        "/fee_stats": horizon_fee_stats(),
    }
