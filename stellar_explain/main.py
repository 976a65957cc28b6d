"""Stellar Explain service.

Fetches Stellar transactions and accounts from Horizon and explains them
in plain language.
"""

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from stellar_explain.api.routes.accounts import router as accounts_router
from stellar_explain.api.routes.health import router as health_router
from stellar_explain.api.routes.monitoring import router as monitoring_router
from stellar_explain.api.routes.transactions import router as transactions_router
from stellar_explain.clients.horizon_client import HorizonClient
from stellar_explain.core.config import AppEnvironment, Settings, get_settings
from stellar_explain.core.errors import ExplainServiceError, get_status_code
from stellar_explain.core.logging import setup_logging
from stellar_explain.core.tracing import clear_tracing_context, set_request_id, set_trace_parent
from stellar_explain.services.account_service import AccountService
from stellar_explain.services.explain_service import ExplainService
from stellar_explain.services.labels import LabelResolver
from stellar_explain.services.transaction_cache import TransactionCache

logger = structlog.get_logger(__name__)

API_CSP_POLICY = (
    "default-src 'none'; frame-ancestors 'none'; base-uri 'none'; "
    "form-action 'none'; object-src 'none'"
)
DOCS_CSP_POLICY = (
    "default-src 'self'; img-src 'self' data:; style-src 'self' 'unsafe-inline'; "
    "script-src 'self' 'unsafe-inline'; frame-ancestors 'none'; object-src 'none'; "
    "base-uri 'self'"
)


def _request_log_context(request: Request) -> dict[str, str]:
    return {
        "path": request.url.path,
        "method": request.method,
        "request_id": getattr(request.state, "request_id", ""),
    }


def _is_docs_path(path: str) -> bool:
    return path.startswith("/docs") or path.startswith("/redoc") or path.startswith("/openapi.json")


def _error_body(code: str, message: str, details: dict | None = None) -> dict:
    error: dict = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"error": error}


def build_services(
    settings: Settings, client: HorizonClient
) -> tuple[ExplainService, AccountService]:
    """Wire the service layer around one Horizon client."""
    cache = None
    if settings.cache.enabled:
        cache = TransactionCache(
            ttl_seconds=settings.cache.ttl_seconds,
            max_entries=settings.cache.max_entries,
        )
    explain_service = ExplainService(
        client,
        LabelResolver.for_network(settings.horizon.network),
        cache,
        fee_stats_timeout_seconds=settings.horizon.fee_stats_timeout_seconds,
    )
    return explain_service, AccountService(client)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context manager."""
    settings = get_settings()
    setup_logging()

    horizon_client = HorizonClient(settings.horizon)
    explain_service, account_service = build_services(settings, horizon_client)

    app.state.settings = settings
    app.state.horizon_client = horizon_client
    app.state.explain_service = explain_service
    app.state.account_service = account_service

    logger.info(
        "Starting Stellar Explain",
        app=settings.app.name,
        env=settings.app.env.value,
        version=settings.app.version,
        network=settings.horizon.network.value,
        horizon_url=horizon_client.base_url,
    )

    yield

    await horizon_client.close()
    logger.info("Stellar Explain stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Stellar Explain",
        description="Plain-language explanations of Stellar transactions and accounts.",
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.env != AppEnvironment.PROD else None,
        redoc_url="/redoc" if settings.app.env != AppEnvironment.PROD else None,
        openapi_url="/openapi.json" if settings.app.env != AppEnvironment.PROD else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_allowed_origins,
        allow_credentials=False,
        allow_methods=settings.security.cors_allow_methods,
        allow_headers=settings.security.cors_allow_headers,
        expose_headers=["X-Request-ID"],
    )

    app.include_router(health_router)
    app.include_router(monitoring_router)
    app.include_router(transactions_router)
    app.include_router(accounts_router)

    setup_telemetry(app, settings)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Propagate X-Request-ID and traceparent to outbound Horizon calls.

        The request ID is taken from the incoming header or generated, and
        always echoed back on the response.
        """
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        set_request_id(request_id)
        set_trace_parent(request.headers.get("traceparent"))
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            # Prevent context leakage across requests in long-lived workers.
            clear_tracing_context()
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers["X-Request-ID"] = request_id
        return response

    @app.middleware("http")
    async def security_headers_middleware(request: Request, call_next):
        """Set baseline security headers for all responses."""
        response = await call_next(request)

        csp_policy = DOCS_CSP_POLICY if _is_docs_path(request.url.path) else API_CSP_POLICY
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload"
        )
        response.headers.setdefault("Content-Security-Policy", csp_policy)
        return response

    @app.exception_handler(ExplainServiceError)
    async def domain_error_handler(request: Request, exc: ExplainServiceError) -> JSONResponse:
        """Render service errors as ``{"error": {"code", "message"}}``."""
        status_code = get_status_code(exc)
        logger.warning(
            "Request failed",
            **_request_log_context(request),
            status_code=status_code,
            code=exc.code,
            error=exc.message,
        )
        details = None if settings.security.sanitize_errors else exc.details
        return JSONResponse(
            status_code=status_code,
            content=_error_body(exc.code, exc.message, details),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "Unhandled exception",
            **_request_log_context(request),
            error=str(exc),
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "Internal server error"),
        )

    return app


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Setup OpenTelemetry instrumentation when an OTLP endpoint is configured."""
    if not settings.observability.otlp_endpoint:
        return

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.observability.service_name,
        }
    )

    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(
        endpoint=settings.observability.otlp_endpoint,
        insecure=settings.observability.otlp_insecure,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "stellar_explain.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.env == AppEnvironment.LOCAL,
        workers=1 if settings.app.env == AppEnvironment.LOCAL else settings.server.workers,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()
