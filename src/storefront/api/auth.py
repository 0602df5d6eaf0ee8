"""Admin gate for the HTTP API.

The storefront has a single static admin credential. Admin routes depend on
``require_admin``, which compares the ``X-Admin-Key`` header against the key
configured in ``STOREFRONT_ADMIN_KEY``.
"""

import os
import secrets

from fastapi import Header, HTTPException

DEFAULT_ADMIN_KEY = "swiftcart-admin"


def admin_key() -> str:
    return os.getenv("STOREFRONT_ADMIN_KEY", DEFAULT_ADMIN_KEY)


def is_admin(key: str) -> bool:
    return bool(key) and secrets.compare_digest(key.encode(), admin_key().encode())


async def require_admin(x_admin_key: str = Header(default="")) -> None:
    if not is_admin(x_admin_key):
        raise HTTPException(status_code=401, detail="Invalid admin key")
