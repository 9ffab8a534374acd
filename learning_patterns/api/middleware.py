"""HTTP middleware and exception handlers."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from learning_patterns.core.config import Settings
from learning_patterns.core.errors import PatternServiceError, get_status_code
from learning_patterns.core.tracing import end_request, start_request

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
DOCS_PREFIXES = ("/docs", "/redoc", "/openapi.json")
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
}


def request_fields(request: Request) -> dict[str, str]:
    return {
        "method": request.method,
        "path": request.url.path,
        "client_host": request.client.host if request.client else "",
    }


async def declared_body_size(request: Request) -> int | None:
    """Size of the incoming body, or None when it cannot be determined."""
    header = request.headers.get("content-length")
    if header is not None:
        return int(header) if header.isdigit() else None
    if request.method in BODY_METHODS:
        return len(await request.body())
    return None


def too_large(limit: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={"detail": "Request payload too large", "limit": limit},
    )


def install_middleware(app: FastAPI, settings: Settings) -> None:
    limit = settings.security.max_request_size_bytes

    @app.middleware("http")
    async def request_size_limit(request: Request, call_next):
        size = await declared_body_size(request)
        if size is not None and size > limit:
            logger.warning(
                "Request body rejected",
                **request_fields(request),
                size=size,
                limit=limit,
            )
            return too_large(limit)
        return await call_next(request)

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        docs = request.url.path.startswith(DOCS_PREFIXES)
        response.headers.setdefault(
            "Content-Security-Policy", DOCS_CSP_POLICY if docs else API_CSP_POLICY
        )
        return response

    # Registered last so it wraps the others and every response carries the id.
    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = start_request(request.headers)
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        finally:
            end_request()
        response.headers["X-Request-ID"] = request_id
        return response


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PatternServiceError)
    async def service_error(request: Request, exc: PatternServiceError) -> JSONResponse:
        status_code = get_status_code(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            "Request failed",
            **request_fields(request),
            status_code=status_code,
            error_code=exc.code,
            error=exc.message,
        )
        body: dict = {"detail": exc.message}
        if exc.details:
            body["errors"] = exc.details
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception", **request_fields(request), error=str(exc))
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
