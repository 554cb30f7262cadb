from typing import Awaitable, Callable

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from . import __version__
from .endpoints import HEALTH_ROUTER, ROUTERS
from .endpoints.health import health
from .exceptions.api_exception import APIException
from .exceptions.common import InternalServerError, InvalidJSONError, InvalidRequestBodyError, RouteNotFoundError
from .guards import global_rate_limit, maintenance_mode, monitor_request
from .logger import get_logger, setup_logging, setup_sentry
from .settings import Settings
from .utils.email import ContactMailer, MailTransport, MemoryTransport, SmtpTransport
from .utils.rate_limit import RateLimiter, RateLimitPolicy


logger = get_logger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Content-Security-Policy": (
        "default-src 'self'; style-src 'self' 'unsafe-inline'; script-src 'self'; img-src 'self' data: https:"
    ),
}


def create_transport(settings: Settings) -> MailTransport:
    if settings.mail_backend == "memory":
        logger.warning("Using in-memory mail transport, contact messages will not be delivered")
        return MemoryTransport()
    return SmtpTransport.from_settings(settings)


def _format_validation_error(exc: RequestValidationError) -> APIException:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return InvalidJSONError()

    return InvalidRequestBodyError(
        ", ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())[1:]) or 'body'}: {error.get('msg')}"
            for error in errors
        )
    )


def create_app(settings: Settings | None = None, transport: MailTransport | None = None) -> FastAPI:
    if settings is None:
        settings = Settings()  # type: ignore[call-arg]

    setup_logging(settings.log_level)
    if settings.sentry_dsn:
        logger.debug("initializing sentry")
        setup_sentry(settings.sentry_dsn, settings.sentry_environment)

    app = FastAPI(
        title="Portfolio Backend",
        description="Contact form and email validation api for the portfolio website.",
        version=__version__,
        root_path=settings.root_path,
        debug=settings.debug,
        openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
    )

    app.state.settings = settings
    app.state.rate_limiter = RateLimiter()
    app.state.contact_rate_policy = RateLimitPolicy(
        "contact", settings.contact_rate_limit, settings.contact_rate_window
    )
    app.state.global_rate_policy = RateLimitPolicy("global", settings.global_rate_limit, settings.global_rate_window)
    app.state.mailer = ContactMailer(
        transport or create_transport(settings), sender=settings.smtp_from, recipient=settings.contact_email
    )

    api_dependencies = [Depends(monitor_request), Depends(maintenance_mode)]
    for router, _ in ROUTERS.values():
        app.include_router(router, prefix="/api", dependencies=api_dependencies)
    app.include_router(HEALTH_ROUTER, prefix="/api")
    app.add_api_route("/", health, methods=["GET"], include_in_schema=False)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(global_rate_limit)

    @app.middleware("http")
    async def security_headers(request: Request, call_next: Callable[..., Awaitable[Response]]) -> Response:
        response = await call_next(request)
        for key, value in SECURITY_HEADERS.items():
            response.headers.setdefault(key, value)
        return response

    @app.exception_handler(APIException)
    async def handle_api_exception(request: Request, exc: APIException) -> Response:
        return JSONResponse(exc.payload, exc.status_code, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
        return await handle_api_exception(request, _format_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404:
            error = RouteNotFoundError(f"The route {request.url.path} does not exist on this server")
            return await handle_api_exception(request, error)
        return JSONResponse(
            {"error": "Request error", "message": str(exc.detail)}, exc.status_code, getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception) -> Response:
        logger.exception(f"Unhandled error during {request.method} {request.url.path}")
        return await handle_api_exception(request, InternalServerError(str(exc) if settings.debug else None))

    return app
