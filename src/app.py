"""SneakerHub FastAPI application.

Serves the auth and order endpoints. Commands are processed synchronously and
each request is wrapped in the domain context matching its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay (memory stores by default).
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from identity.domain import identity
from ordering.domain import ordering
from shared.api import register_error_handlers
from shared.logging import add_context, clear_context
from shared.settings import get_settings

identity.init()
ordering.init()

logger = structlog.get_logger(__name__)
settings = get_settings()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/auth": identity,
    "/api/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Sneaker store order tracking: accounts, order placement, status and cancellation",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)

    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match, e.g. health check or docs
    return await call_next(request)


register_error_handlers(app)

if settings.uses_default_secret:
    logger.warning("default_jwt_secret_in_use", hint="set JWT_SECRET before deploying")

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from identity.api.routes import router as auth_router  # noqa: E402
from ordering.api.routes import router as orders_router  # noqa: E402

app.include_router(auth_router)
app.include_router(orders_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/api/health")
async def health():
    return {"status": "OK", "message": "SneakerHub API is running"}
