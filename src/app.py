"""SwiftCart storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the storefront domain context; state is held in
memory for the lifetime of the process.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.domain import storefront

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share the same domain.
storefront.init()

from storefront.api import routers  # noqa: E402
from storefront.seed import seed_storefront  # noqa: E402
from storefront.utils.logging import bind_session, clear_context  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    with storefront.domain_context():
        seed_storefront()
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="SwiftCart Storefront API",
    description="Catalogue, cart, coupons, checkout and order tracking",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


_SESSION_SCOPED_PREFIXES = ("carts", "wishlists")


def _resolve_session(request: Request):
    """Return the shopper session a request acts on, or None."""
    parts = request.url.path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] in _SESSION_SCOPED_PREFIXES:
        return parts[1]
    return request.query_params.get("session_id")


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and tag logs with the shopper's session."""
    session_id = _resolve_session(request)
    if session_id:
        bind_session(session_id)
    try:
        with storefront.domain_context():
            return await call_next(request)
    finally:
        clear_context()


register_exception_handlers(app)

for router in routers:
    app.include_router(router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
