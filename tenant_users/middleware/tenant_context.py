"""Tenant context middleware.

Reads the tenant header (settings.tenant_header_name, "X-Tenant" by default)
and binds it in tenant_users.core.tenant_context for the rest of the request,
so repositories scope every query to that tenant. Requests without a valid
tenant are answered with 400 before any route runs. The previous context
value is restored when the request finishes.

Uses raw ASGI (no BaseHTTPMiddleware) so the route runs in the same context
the tenant was set in.
"""

import logging
from typing import Callable

from starlette.responses import JSONResponse

from tenant_users.core.config import get_settings
from tenant_users.core.exception_handlers import error_body
from tenant_users.core.tenant_context import reset_tenant_id, set_tenant_id
from tenant_users.core.tenant_validation import (
    TENANT_ID_MAX_LENGTH,
    is_valid_tenant_id_format,
)

logger = logging.getLogger(__name__)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace").strip()
    return None


def _is_exempt(path: str, exempt_prefixes: list[str]) -> bool:
    return any(path == p or path.startswith(p.rstrip("/") + "/") for p in exempt_prefixes)


def TenantContextMiddleware(app: Callable) -> Callable:
    """Bind the request's tenant in context before the route runs. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        settings = get_settings()
        if _is_exempt(scope.get("path", ""), settings.tenant_exempt_path_list):
            await app(scope, receive, send)
            return

        header_name = settings.tenant_header_name
        tenant_id = _get_header(scope, header_name)
        if not tenant_id:
            response = JSONResponse(
                status_code=400,
                content=error_body(
                    "TENANT_REQUIRED", f"Missing required header: {header_name}"
                ),
            )
            await response(scope, receive, send)
            return
        if not is_valid_tenant_id_format(tenant_id):
            logger.warning(
                "Rejected request with malformed tenant header (length=%d, max=%d)",
                len(tenant_id),
                TENANT_ID_MAX_LENGTH,
            )
            response = JSONResponse(
                status_code=400,
                content=error_body(
                    "TENANT_REQUIRED",
                    "Invalid tenant ID format (use alphanumeric, hyphen, underscore; "
                    f"max {TENANT_ID_MAX_LENGTH} characters)",
                ),
            )
            await response(scope, receive, send)
            return

        token = set_tenant_id(tenant_id)
        try:
            await app(scope, receive, send)
        finally:
            reset_tenant_id(token)

    return asgi_app
