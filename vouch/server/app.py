"""Validation service

Routes:
- GET /spec: the service contract (routes and all event contracts)
- GET /spec/{type}: the contract of one event
- POST /validate: identify a JSON or form payload as an event and validate it
"""
import json
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from ..events import default_registry
from ..registry import EventRegistry
from ..schema.errors import UnknownEventError, ValidationError
from .config import Settings, get_settings
from .logging import bind_context, clear_context, configure_logging, generate_correlation_id, get_logger

log = get_logger(__name__)

ROUTES = {
    "/spec": "returns the service contract",
    "/spec/:type": "returns the schema of a particular event",
    "/validate": "accepts a JSON object as input, identifies it as an event and validates it against the schema",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs requests/responses and manages the correlation context."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        clear_context()
        bind_context(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        start = time.perf_counter()
        log.info("request_started")

        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        response.headers["X-Correlation-ID"] = correlation_id

        status = response.status_code
        log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
        log_method("request_completed", status=status, duration_ms=round(duration_ms, 2))
        return response


def create_app(registry: EventRegistry | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the service around an event registry.

    Args:
        registry: Events to serve. Defaults to the built-in events.
        settings: Service settings. Defaults to the environment.
    """
    registry = default_registry() if registry is None else registry
    settings = settings or get_settings()

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    # Schemas are immutable: contracts are computed once
    events_contract = registry.get_contract()
    service_contract = {"routes": ROUTES, "events": events_contract}

    app = FastAPI(title="vouch", description="Event validation service")
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods alike
        if exc.status_code in (404, 405):
            return PlainTextResponse("Nothing found at that address", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.get("/spec")
    async def get_spec():
        """Get the service contract."""
        return service_contract

    @app.get("/spec/{event_type}")
    async def get_event_spec(event_type: str):
        """Get the contract of one event."""
        if event_type not in events_contract:
            return PlainTextResponse("Event not found", status_code=404)
        return events_contract[event_type]

    @app.post("/validate")
    async def validate(request: Request):
        """Validate a payload against the event it names."""
        if request.headers.get("content-type", "").startswith("application/x-www-form-urlencoded"):
            payload = dict(await request.form())
        else:
            try:
                payload = await request.json()
            except (json.JSONDecodeError, UnicodeDecodeError):
                payload = None

        try:
            event = registry.identify(payload)
            event.validate(payload)
        except UnknownEventError as e:
            log.info("event_unknown", reason=e.message, event_type=e.name)
            return JSONResponse({"errors": [e.message]}, status_code=400)
        except ValidationError as e:
            log.info("validation_failed", event_type=event.name, errors=len(e.get_field_errors()))
            return JSONResponse({"errors": e.get_field_errors()}, status_code=400)

        log.debug("validation_passed", event_type=event.name)
        return PlainTextResponse("ok")

    return app


__all__ = ("create_app", "RequestLoggingMiddleware", "ROUTES")
