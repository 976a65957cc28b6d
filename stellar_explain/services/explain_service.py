"""Transaction explain service.

Fetches a transaction, its operations and the network fee stats from
Horizon concurrently, maps them to the domain model and hands them to the
pure explanation engine. Results are cached per (hash, network).
"""

from __future__ import annotations

import asyncio
import re
import time

import structlog
from opentelemetry import trace

from stellar_explain.clients.horizon_client import HorizonClient
from stellar_explain.core.errors import ExplainServiceError, ValidationError
from stellar_explain.core.metrics import (
    stellar_explain_cache_lookups_total,
    stellar_explain_latency_seconds,
    stellar_explain_requests_total,
)
from stellar_explain.domain.fees import FeeStats
from stellar_explain.domain.mapper import map_fee_stats, map_operation, map_transaction
from stellar_explain.explain.operation import OperationExplanation, explain_operations
from stellar_explain.explain.transaction import TransactionExplanation, explain_transaction
from stellar_explain.services.labels import LabelResolver
from stellar_explain.services.transaction_cache import CacheKey, TransactionCache

logger = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)

_TX_HASH_RE = re.compile(r"^[0-9a-fA-F]{64}$")


def normalize_tx_hash(tx_hash: str) -> str:
    """Validate a transaction hash (64 hex chars) and lower-case it."""
    candidate = tx_hash.strip()
    if not _TX_HASH_RE.match(candidate):
        raise ValidationError(
            "Invalid transaction hash. Expected 64 hexadecimal characters.",
            details={"hash": tx_hash},
        )
    return candidate.lower()


class ExplainService:
    """Explains transactions fetched from Horizon."""

    def __init__(
        self,
        client: HorizonClient,
        labels: LabelResolver,
        cache: TransactionCache[TransactionExplanation] | None = None,
        *,
        fee_stats_timeout_seconds: float = 3.0,
    ) -> None:
        self._client = client
        self._labels = labels
        self._cache = cache
        self._fee_stats_timeout = fee_stats_timeout_seconds

    @property
    def network(self) -> str:
        return self._client.network

    async def explain_transaction(self, tx_hash: str) -> TransactionExplanation:
        tx_hash = normalize_tx_hash(tx_hash)
        key = CacheKey(tx_hash=tx_hash, network=self.network)

        if self._cache is not None:
            cached = self._cache.get(key)
            if cached is not None:
                stellar_explain_cache_lookups_total.labels(result="hit").inc()
                stellar_explain_requests_total.labels(kind="transaction", status="success").inc()
                logger.info("Transaction explanation served from cache", hash=tx_hash)
                return cached
            stellar_explain_cache_lookups_total.labels(result="miss").inc()

        started = time.perf_counter()
        with tracer.start_as_current_span("explain_transaction") as span:
            span.set_attribute("stellar.tx_hash", tx_hash)
            span.set_attribute("stellar.network", self.network)
            try:
                tx, operations, fee_stats = await asyncio.gather(
                    self._client.fetch_transaction(tx_hash),
                    self._client.fetch_operations(tx_hash),
                    self._fetch_fee_stats(),
                )
                transaction = map_transaction(tx, operations)
                explanation = explain_transaction(
                    transaction,
                    fee_stats,
                    created_at=tx.created_at,
                    ledger=tx.ledger,
                    resolve_label=self._labels.resolve,
                )
            except ExplainServiceError as exc:
                stellar_explain_requests_total.labels(kind="transaction", status=exc.code).inc()
                raise

        elapsed = time.perf_counter() - started
        stellar_explain_latency_seconds.labels(kind="transaction").observe(elapsed)
        stellar_explain_requests_total.labels(kind="transaction", status="success").inc()
        logger.info(
            "Transaction explained",
            hash=tx_hash,
            network=self.network,
            operations=len(transaction.operations),
            payments=len(explanation.payment_explanations),
            fee_context=fee_stats is not None,
            elapsed_ms=round(elapsed * 1000, 1),
        )

        if self._cache is not None:
            self._cache.set(key, explanation)
        return explanation

    async def explain_operations(self, tx_hash: str) -> list[OperationExplanation]:
        tx_hash = normalize_tx_hash(tx_hash)
        started = time.perf_counter()
        try:
            operations = await self._client.fetch_operations(tx_hash)
        except ExplainServiceError as exc:
            stellar_explain_requests_total.labels(kind="operations", status=exc.code).inc()
            raise

        explanations = explain_operations(
            [map_operation(op) for op in operations], self._labels.resolve
        )
        elapsed = time.perf_counter() - started
        stellar_explain_latency_seconds.labels(kind="operations").observe(elapsed)
        stellar_explain_requests_total.labels(kind="operations", status="success").inc()
        logger.info(
            "Operations explained",
            hash=tx_hash,
            operations=len(explanations),
            elapsed_ms=round(elapsed * 1000, 1),
        )
        return explanations

    async def _fetch_fee_stats(self) -> FeeStats | None:
        """Fee stats are optional; any failure or timeout degrades to None."""
        try:
            stats = await asyncio.wait_for(
                self._client.fetch_fee_stats(), timeout=self._fee_stats_timeout
            )
        except TimeoutError:
            logger.warning(
                "Fee stats fetch timed out; explaining without fee context",
                timeout_seconds=self._fee_stats_timeout,
            )
            return None
        except ExplainServiceError as exc:
            logger.warning(
                "Fee stats unavailable; explaining without fee context",
                error=exc.message,
            )
            return None
        return map_fee_stats(stats)
