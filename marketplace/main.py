# marketplace/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from marketplace.api.dependencies import shutdown_clients
from marketplace.api.middleware import (
    AuditTriggerMiddleware,
    AuthContextMiddleware,
    CorrelationIdMiddleware,
)
from marketplace.api.routers import accounts, admin, event_submissions, events, health, seller_applications
from marketplace.application.exceptions import ApplicationError, NotFoundError, PersistenceError
from marketplace.config.logging import configure_logging
from marketplace.config.settings import get_settings
from marketplace.domain.exceptions import (
    DomainError,
    DomainValidationError,
    ReapplyTooSoonError,
    StateConflictError,
)
from marketplace.infrastructure.database.session import init_models
from marketplace.security.exceptions import AuthenticationError, AuthorizationError

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        await init_models()
    yield
    await shutdown_clients()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> AuthContext -> AuditTrigger.
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(AuthContextMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(DomainValidationError)
async def domain_validation_error_handler(request, exc: DomainValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(ReapplyTooSoonError)
async def reapply_too_soon_error_handler(request, exc: ReapplyTooSoonError):
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message, "days_until_reapply": exc.days_until_reapply},
    )


@app.exception_handler(StateConflictError)
async def state_conflict_error_handler(request, exc: StateConflictError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request, exc: PersistenceError):
    return JSONResponse(status_code=503, content={"detail": exc.message})


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content={"detail": exc.message})


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request, exc: AuthorizationError):
    return JSONResponse(status_code=403, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /accounts, /seller-applications, /event-submissions, /admin, /events
app.include_router(health.router)
app.include_router(accounts.router, prefix="/accounts")
app.include_router(seller_applications.router, prefix="/seller-applications")
app.include_router(event_submissions.router, prefix="/event-submissions")
app.include_router(admin.router, prefix="/admin")
app.include_router(events.router, prefix="/events")
