"""API middleware: correlation ID, caller auth context, audit trigger."""

import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from marketplace.core.context import account_id_ctx, correlation_id_ctx
from marketplace.security.auth_context import AuthContext
from marketplace.security.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

ACCOUNT_HEADER = "X-Account-ID"
ROLE_HEADER = "X-Account-Role"
CORRELATION_HEADER = "X-Correlation-ID"

PUBLIC_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Generate or preserve correlation ID; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        correlation_id_ctx.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class AuthContextMiddleware(BaseHTTPMiddleware):
    """
    Read the caller identity forwarded by the auth gateway. Return 401 if it is missing or
    malformed; otherwise attach an AuthContext to request.state and the logging context.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in PUBLIC_PATHS:
            request.state.auth = None
            return await call_next(request)
        try:
            auth = AuthContext.from_claims(
                request.headers.get(ACCOUNT_HEADER),
                request.headers.get(ROLE_HEADER),
            )
        except AuthenticationError as e:
            return JSONResponse(status_code=401, content={"detail": e.message})
        request.state.auth = auth
        account_id_ctx.set(auth.account_id)
        return await call_next(request)


class AuditTriggerMiddleware(BaseHTTPMiddleware):
    """After response: log structured audit event (correlation_id, account_id, path, method, status_code)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        auth = getattr(request.state, "auth", None)
        logger.info(
            "request_audit",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "role": auth.role.value if auth is not None else None,
            },
        )
        return response
