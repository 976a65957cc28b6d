"""Unit tests for AccountService."""

from __future__ import annotations

import httpx
import pytest
from conftest import ALICE, horizon_transaction, horizon_transport

from stellar_explain.clients.horizon_client import HorizonClient
from stellar_explain.core.config import HorizonConfig
from stellar_explain.core.errors import NotFoundError, ValidationError
from stellar_explain.services.account_service import (
    AccountService,
    validate_address,
    validate_page_params,
)

ACCOUNT = {
    "account_id": ALICE,
    "sequence": "1",
    "balances": [{"asset_type": "native", "balance": "42.0000000"}],
    "signers": [{"key": ALICE, "weight": 1}],
}


def _service(routes: dict) -> AccountService:
    client = HorizonClient(
        HorizonConfig(base_url="https://horizon.test"),
        transport=horizon_transport(routes),
        retry_wait_multiplier=0,
    )
    return AccountService(client)


def test_page_param_defaults():
    assert validate_page_params(None, None) == (10, "asc")


@pytest.mark.parametrize("limit", [0, 51, -1])
def test_page_limit_out_of_range(limit):
    with pytest.raises(ValidationError) as exc_info:
        validate_page_params(limit, "asc")
    assert exc_info.value.message == "limit must be between 1 and 50"


def test_page_order_invalid():
    with pytest.raises(ValidationError) as exc_info:
        validate_page_params(10, "sideways")
    assert exc_info.value.message == "order must be 'asc' or 'desc'"


def test_validate_address():
    assert validate_address(f" {ALICE.lower()} ") == ALICE
    with pytest.raises(ValidationError):
        validate_address("not an address")
    with pytest.raises(ValidationError):
        validate_address("")


@pytest.mark.asyncio
async def test_explain_account():
    result = await _service({f"/accounts/{ALICE}": ACCOUNT}).explain_account(ALICE)
    assert result.summary == "This account holds 42.0000000 XLM. It has 1 signer."


@pytest.mark.asyncio
async def test_explain_missing_account():
    with pytest.raises(NotFoundError):
        await _service({}).explain_account(ALICE)


@pytest.mark.asyncio
async def test_list_transactions():
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(
            200,
            json={
                "_embedded": {
                    "records": [
                        horizon_transaction(hash="t1", operation_count=2),
                        horizon_transaction(hash="t2", successful=False),
                    ]
                },
                "_links": {"next": {"href": "https://horizon.test/x?cursor=9"}},
            },
        )

    page = await _service({f"/accounts/{ALICE}/transactions": handler}).list_transactions(ALICE)

    assert [item.hash for item in page.items] == ["t1", "t2"]
    assert page.items[0].summary == "Successful transaction with 2 operations."
    assert page.items[1].summary == "Failed transaction with 1 operation."
    assert page.next_cursor == "9"
    assert page.prev_cursor is None
    assert seen == {"limit": "10", "order": "asc"}


@pytest.mark.asyncio
async def test_list_transactions_validates_before_fetching():
    with pytest.raises(ValidationError):
        await _service({}).list_transactions(ALICE, limit=100)
