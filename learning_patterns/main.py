"""Learning Pattern Assessment Service.

Scores learning-style and cognitive questionnaires and keeps per-user
assessment history in flat JSON files.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from learning_patterns.api.middleware import install_exception_handlers, install_middleware
from learning_patterns.api.routes.assessments import router as assessments_router
from learning_patterns.api.routes.cognitive import router as cognitive_router
from learning_patterns.api.routes.health import router as health_router
from learning_patterns.api.routes.monitoring import router as monitoring_router
from learning_patterns.api.routes.profiles import router as profiles_router
from learning_patterns.api.routes.questions import router as questions_router
from learning_patterns.core.config import AppEnvironment, Settings, get_settings
from learning_patterns.core.logging import setup_logging
from learning_patterns.core.storage import get_storage, reset_storage

logger = structlog.get_logger(__name__)

ROUTERS = (
    monitoring_router,
    health_router,
    assessments_router,
    profiles_router,
    questions_router,
    cognitive_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    setup_logging(settings)

    app.state.settings = settings
    app.state.storage = get_storage()
    logger.info(
        "Service starting",
        env=settings.app.env.value,
        version=settings.app.version,
        data_dir=str(settings.storage.data_dir),
    )

    yield

    reset_storage()
    logger.info("Service stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    expose_docs = settings.app.env != AppEnvironment.PROD

    app = FastAPI(
        title="Learning Pattern Assessment Service",
        description="Learning-style and cognitive questionnaire scoring with per-user history.",
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if expose_docs else None,
        redoc_url="/redoc" if expose_docs else None,
        openapi_url="/openapi.json" if expose_docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_allowed_origins,
        allow_credentials=settings.security.cors_allow_credentials,
        allow_methods=settings.security.cors_allow_methods,
        allow_headers=settings.security.cors_allow_headers,
    )
    for router in ROUTERS:
        app.include_router(router, prefix=settings.app.api_prefix)

    setup_telemetry(app, settings)
    install_middleware(app, settings)
    install_exception_handlers(app)
    return app


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Export traces over OTLP when an endpoint is configured."""
    if not settings.observability.otlp_endpoint:
        return

    provider = TracerProvider(
        resource=Resource(attributes={SERVICE_NAME: settings.observability.service_name})
    )
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(
                endpoint=settings.observability.otlp_endpoint,
                insecure=settings.observability.otlp_insecure,
            )
        )
    )
    trace.set_tracer_provider(provider)
    FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    import uvicorn

    settings = get_settings()
    local = settings.app.env == AppEnvironment.LOCAL
    uvicorn.run(
        "learning_patterns.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=local,
        workers=1 if local else settings.server.workers,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()
