"""Horizon REST API client.

Fetches transactions, operations, fee stats and accounts from Horizon with
retry (tenacity) on connection failures and a consecutive-failure circuit
breaker. Transport and wire-format problems surface as ``UpstreamError``;
missing resources as ``NotFoundError``.
"""

from __future__ import annotations

import time
from typing import Any
from urllib.parse import parse_qs, urlsplit

import httpx
import pydantic
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from stellar_explain.core.config import HorizonConfig
from stellar_explain.core.errors import NotFoundError, UpstreamError
from stellar_explain.core.metrics import (
    stellar_explain_dependency_failures_total,
    stellar_explain_horizon_latency_seconds,
    stellar_explain_horizon_requests_total,
)
from stellar_explain.core.tracing import get_tracing_headers
from stellar_explain.schemas.horizon import (
    HorizonAccount,
    HorizonFeeStats,
    HorizonOperation,
    HorizonTransaction,
)

logger = structlog.get_logger(__name__)

TRANSACTION_NOT_FOUND = "Transaction not found on the Stellar network."
ACCOUNT_NOT_FOUND = "Account not found on the Stellar network."
UNREACHABLE = "Unable to reach Stellar network. Please try again later."
INVALID_RESPONSE = "Received an invalid response from the Stellar network."


def _cursor_from_link(links: dict[str, Any], rel: str) -> str | None:
    href = (links.get(rel) or {}).get("href")
    if not href:
        return None
    values = parse_qs(urlsplit(href).query).get("cursor")
    if not values or not values[0]:
        return None
    return values[0]


class HorizonClient:
    """Async HTTP client for Horizon.

    - fetch_transaction() / fetch_operations() for one transaction
    - fetch_fee_stats() for the network fee snapshot
    - fetch_account() / fetch_account_transactions() for accounts
    - health_check() for readiness
    """

    def __init__(
        self,
        config: HorizonConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_wait_multiplier: float = 0.5,
    ) -> None:
        self._base_url = config.url
        self._network = config.network
        self._timeout = config.timeout_seconds
        self._retry_count = max(config.retry_count, 1)
        self._retry_wait_multiplier = retry_wait_multiplier
        self._operations_limit = config.operations_limit
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        # Circuit breaker state
        self._cb_threshold = config.circuit_breaker_threshold
        self._cb_timeout = config.circuit_breaker_timeout
        self._consecutive_failures = 0
        self._circuit_open_until: float = 0.0

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def network(self) -> str:
        return self._network.value

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch_transaction(self, tx_hash: str) -> HorizonTransaction:
        """GET /transactions/{hash}"""
        data = await self._get_json(
            f"/transactions/{tx_hash}",
            endpoint="transaction",
            not_found_message=TRANSACTION_NOT_FOUND,
        )
        return self._parse(HorizonTransaction, data)

    async def fetch_operations(self, tx_hash: str) -> list[HorizonOperation]:
        """GET /transactions/{hash}/operations?limit=N"""
        data = await self._get_json(
            f"/transactions/{tx_hash}/operations",
            endpoint="operations",
            params={"limit": self._operations_limit},
            not_found_message=TRANSACTION_NOT_FOUND,
        )
        records = self._embedded_records(data)
        return [self._parse(HorizonOperation, record) for record in records]

    async def fetch_fee_stats(self) -> HorizonFeeStats:
        """GET /fee_stats"""
        data = await self._get_json("/fee_stats", endpoint="fee_stats")
        try:
            return HorizonFeeStats.from_payload(data)
        except (pydantic.ValidationError, AttributeError) as exc:
            raise self._invalid_response("fee_stats", exc) from exc

    async def fetch_account(self, address: str) -> HorizonAccount:
        """GET /accounts/{address}"""
        data = await self._get_json(
            f"/accounts/{address}",
            endpoint="account",
            not_found_message=ACCOUNT_NOT_FOUND,
        )
        return self._parse(HorizonAccount, data)

    async def fetch_account_transactions(
        self,
        address: str,
        *,
        limit: int = 10,
        cursor: str | None = None,
        order: str = "asc",
    ) -> tuple[list[HorizonTransaction], str | None, str | None]:
        """GET /accounts/{address}/transactions

        Returns the page records plus next/prev cursors taken from ``_links``.
        """
        params: dict[str, Any] = {"limit": limit, "order": order}
        if cursor:
            params["cursor"] = cursor

        data = await self._get_json(
            f"/accounts/{address}/transactions",
            endpoint="account_transactions",
            params=params,
            not_found_message=ACCOUNT_NOT_FOUND,
        )
        records = [self._parse(HorizonTransaction, r) for r in self._embedded_records(data)]
        links = data.get("_links") or {}
        if not isinstance(links, dict):
            links = {}
        return records, _cursor_from_link(links, "next"), _cursor_from_link(links, "prev")

    async def health_check(self) -> bool:
        """GET / on Horizon; True when it answers with 2xx."""
        try:
            await self._get_json("/", endpoint="root")
            return True
        except (UpstreamError, NotFoundError):
            return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _embedded_records(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        embedded = data.get("_embedded")
        records = embedded.get("records") if isinstance(embedded, dict) else None
        if not isinstance(records, list):
            raise self._invalid_response("_embedded.records", None)
        return records

    def _parse(self, model: type[pydantic.BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as exc:
            raise self._invalid_response(model.__name__, exc) from exc

    def _invalid_response(self, what: str, exc: Exception | None) -> UpstreamError:
        stellar_explain_dependency_failures_total.labels(dependency="horizon").inc()
        logger.warning(
            "Horizon returned an invalid payload",
            payload=what,
            error=str(exc) if exc else None,
        )
        return UpstreamError(INVALID_RESPONSE)

    async def _get_json(
        self,
        path: str,
        *,
        endpoint: str,
        params: dict[str, Any] | None = None,
        not_found_message: str | None = None,
    ) -> dict[str, Any]:
        """GET with tracing, metrics, retry and circuit breaker; returns the JSON body."""
        # Circuit breaker: fail fast if circuit is open
        if self._consecutive_failures >= self._cb_threshold:
            if time.monotonic() < self._circuit_open_until:
                logger.warning(
                    "Horizon circuit breaker open, failing fast",
                    path=path,
                    failures=self._consecutive_failures,
                )
                stellar_explain_dependency_failures_total.labels(dependency="horizon").inc()
                raise UpstreamError(UNREACHABLE, details={"reason": "circuit_open"})
            # Half-open: allow one request through
            logger.info("Horizon circuit breaker half-open, attempting request", path=path)

        client = await self._get_client()
        started = time.perf_counter()

        try:
            response = await self._request_with_retry(client, path, params)
        except httpx.RequestError as exc:
            elapsed = time.perf_counter() - started
            self._record_failure(path)
            stellar_explain_horizon_requests_total.labels(endpoint=endpoint, status="error").inc()
            logger.error(
                "Horizon request failed",
                path=path,
                elapsed_ms=round(elapsed * 1000, 1),
                error=str(exc),
            )
            raise UpstreamError(UNREACHABLE) from exc

        elapsed = time.perf_counter() - started
        stellar_explain_horizon_latency_seconds.labels(endpoint=endpoint).observe(elapsed)
        stellar_explain_horizon_requests_total.labels(
            endpoint=endpoint, status=str(response.status_code)
        ).inc()

        if response.status_code == 404 and not_found_message:
            self._consecutive_failures = 0
            logger.info("Horizon resource not found", path=path)
            raise NotFoundError(not_found_message)

        if response.status_code >= 500:
            self._record_failure(path)
        elif response.is_success:
            self._consecutive_failures = 0

        if not response.is_success:
            logger.error(
                "Horizon returned an error status",
                path=path,
                status_code=response.status_code,
                elapsed_ms=round(elapsed * 1000, 1),
            )
            stellar_explain_dependency_failures_total.labels(dependency="horizon").inc()
            raise UpstreamError(INVALID_RESPONSE, details={"status_code": response.status_code})

        logger.debug(
            "Horizon request succeeded",
            path=path,
            status_code=response.status_code,
            elapsed_ms=round(elapsed * 1000, 1),
        )

        try:
            data = response.json()
        except ValueError as exc:
            raise self._invalid_response(path, exc) from exc
        if not isinstance(data, dict):
            raise self._invalid_response(path, None)
        return data

    def _record_failure(self, path: str) -> None:
        self._consecutive_failures += 1
        stellar_explain_dependency_failures_total.labels(dependency="horizon").inc()
        if self._consecutive_failures >= self._cb_threshold:
            self._circuit_open_until = time.monotonic() + self._cb_timeout
            logger.error(
                "Horizon circuit breaker tripped",
                path=path,
                failures=self._consecutive_failures,
                timeout_seconds=self._cb_timeout,
            )

    async def _request_with_retry(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: dict[str, Any] | None,
    ) -> httpx.Response:
        """Execute the GET, retrying connection failures with exponential backoff."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._retry_count),
            wait=wait_exponential(multiplier=self._retry_wait_multiplier, max=5),
            retry=retry_if_exception_type(
                (httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadTimeout)
            ),
            reraise=True,
        ):
            with attempt:
                return await client.get(path, params=params, headers=get_tracing_headers())
        raise AssertionError("unreachable")
