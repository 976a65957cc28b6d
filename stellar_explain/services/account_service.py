"""Account explain service."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

import structlog

from stellar_explain.clients.horizon_client import HorizonClient
from stellar_explain.core.errors import ExplainServiceError, ValidationError
from stellar_explain.core.metrics import (
    stellar_explain_latency_seconds,
    stellar_explain_requests_total,
)
from stellar_explain.domain.mapper import map_account
from stellar_explain.explain.account import (
    AccountExplanation,
    AccountTransactionSummary,
    explain_account,
    summarize_account_transaction,
)

logger = structlog.get_logger(__name__)

MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 50
DEFAULT_PAGE_LIMIT = 10
VALID_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class AccountTransactionPage:
    items: list[AccountTransactionSummary] = field(default_factory=list)
    next_cursor: str | None = None
    prev_cursor: str | None = None


def validate_page_params(limit: int | None, order: str | None) -> tuple[int, str]:
    """Apply defaults and bounds for account transaction listing."""
    limit = DEFAULT_PAGE_LIMIT if limit is None else limit
    order = "asc" if order is None else order
    if limit < MIN_PAGE_LIMIT or limit > MAX_PAGE_LIMIT:
        raise ValidationError(
            f"limit must be between {MIN_PAGE_LIMIT} and {MAX_PAGE_LIMIT}",
            details={"limit": limit},
        )
    if order not in VALID_ORDERS:
        raise ValidationError("order must be 'asc' or 'desc'", details={"order": order})
    return limit, order


def validate_address(address: str) -> str:
    candidate = address.strip()
    if not candidate or not candidate.isalnum():
        raise ValidationError("Invalid account address.", details={"address": address})
    return candidate.upper()


class AccountService:
    """Explains accounts and lists their recent transactions."""

    def __init__(self, client: HorizonClient) -> None:
        self._client = client

    async def explain_account(self, address: str) -> AccountExplanation:
        address = validate_address(address)
        started = time.perf_counter()
        try:
            account = await self._client.fetch_account(address)
        except ExplainServiceError as exc:
            stellar_explain_requests_total.labels(kind="account", status=exc.code).inc()
            raise

        explanation = explain_account(map_account(account))
        elapsed = time.perf_counter() - started
        stellar_explain_latency_seconds.labels(kind="account").observe(elapsed)
        stellar_explain_requests_total.labels(kind="account", status="success").inc()
        logger.info(
            "Account explained",
            address=address,
            assets=explanation.asset_count,
            elapsed_ms=round(elapsed * 1000, 1),
        )
        return explanation

    async def list_transactions(
        self,
        address: str,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        order: str | None = None,
    ) -> AccountTransactionPage:
        address = validate_address(address)
        limit, order = validate_page_params(limit, order)
        try:
            records, next_cursor, prev_cursor = await self._client.fetch_account_transactions(
                address, limit=limit, cursor=cursor, order=order
            )
        except ExplainServiceError as exc:
            stellar_explain_requests_total.labels(
                kind="account_transactions", status=exc.code
            ).inc()
            raise

        stellar_explain_requests_total.labels(kind="account_transactions", status="success").inc()
        return AccountTransactionPage(
            items=[summarize_account_transaction(record) for record in records],
            next_cursor=next_cursor,
            prev_cursor=prev_cursor,
        )
