"""Request level dependencies and middleware guarding the api."""

import json
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from .exceptions.api_exception import APIException
from .exceptions.common import MaintenanceModeError, TooManyRequestsError
from .exceptions.contact import TooManyContactSubmissionsError
from .logger import get_logger
from .settings import Settings
from .utils.monitoring import is_suspicious, truncate
from .utils.rate_limit import RateLimiter, RateLimitPolicy, RateLimitStatus


logger = get_logger(__name__)


def get_client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _enforce(request: Request, policy: RateLimitPolicy, error: APIException) -> RateLimitStatus:
    rate_limiter: RateLimiter = request.app.state.rate_limiter
    status = rate_limiter.hit(policy, get_client_address(request))
    if not status.allowed:
        error.headers = {**status.headers, "Retry-After": str(status.reset_in)}
        raise error

    return status


async def global_rate_limit(request: Request, call_next: Callable[..., Awaitable[Response]]) -> Response:
    """Count every request against the global limit of its client, including unknown routes."""

    try:
        status = _enforce(request, request.app.state.global_rate_policy, TooManyRequestsError())
    except APIException as error:
        return JSONResponse(error.payload, error.status_code, error.headers)

    response = await call_next(request)
    for key, value in status.headers.items():
        response.headers.setdefault(key, value)
    return response


async def contact_rate_limit(request: Request, response: Response) -> None:
    policy: RateLimitPolicy = request.app.state.contact_rate_policy
    error = TooManyContactSubmissionsError(
        "Please wait before submitting another message. "
        f"You can submit up to {policy.limit} messages per {policy.window_minutes} minutes."
    )
    response.headers.update(_enforce(request, policy, error).headers)


async def maintenance_mode(request: Request) -> None:
    settings: Settings = request.app.state.settings
    if settings.maintenance_mode:
        raise MaintenanceModeError(estimatedDowntime=settings.maintenance_duration or "unknown")


async def monitor_request(request: Request) -> None:
    """Log requests that look like injection or credential probing. Never rejects anything."""

    body = (await request.body()).decode(errors="replace")
    query = json.dumps(dict(request.query_params))
    if not is_suspicious(body, query):
        return

    logger.warning(
        "Possible malicious request detected: "
        f"ip={get_client_address(request)} agent={request.headers.get('user-agent', 'unknown')} "
        f"method={request.method} path={request.url.path} "
        f"body={truncate(body)} query={truncate(query)}"
    )
