"""Storefront cart FastAPI application.

Processes cart commands synchronously via HTTP. Each cart request runs
inside the shopping domain's context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay (e.g. "production" → PostgreSQL).
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from shopping.domain import shopping
from shopping.utils.logging import bind_request_context, clear_request_context

shopping.init()

_DOMAIN_PREFIXES = ("/cart",)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront Cart API",
    description="Per-shopper carts with stock limits and promotional pricing",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the shopping domain context for cart requests."""
    if not request.url.path.startswith(_DOMAIN_PREFIXES):
        # Health check, docs, etc.
        return await call_next(request)

    clear_request_context()
    bind_request_context(
        request_id=request.headers.get("x-request-id") or str(uuid.uuid4()),
        user_id=request.headers.get("x-user-id"),
    )
    with shopping.domain_context():
        return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from shopping.api import cart_router, install_error_handlers

app.include_router(cart_router)
install_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": shopping.name})
