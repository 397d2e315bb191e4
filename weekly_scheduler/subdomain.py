"""
Subdomain routing for public schedules.

`{username}.{ROOT_DOMAIN}` is served from `/public/{username}`.
"""

import logging
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import APP_SUBDOMAIN, RESERVED_SUBDOMAINS, ROOT_DOMAIN

logger = logging.getLogger(__name__)

SKIPPED_PREFIXES = ("/api/", "/_next/", "/favicon.ico")


def extract_subdomain(host: str, root_domain: str = ROOT_DOMAIN) -> Optional[str]:
    """Leftmost label of a host directly under the root domain, if any"""
    hostname = host.split(":", 1)[0].strip().lower().rstrip(".")
    suffix = f".{root_domain}"
    if not hostname.endswith(suffix):
        return None

    subdomain = hostname[: -len(suffix)]
    if not subdomain or "." in subdomain:
        return None
    return subdomain


def resolve_public_path(
    host: str,
    path: str,
    root_domain: str = ROOT_DOMAIN,
    reserved: frozenset = RESERVED_SUBDOMAINS,
) -> Optional[str]:
    """Path a request should be served from, or None to leave it untouched"""
    if path.startswith(SKIPPED_PREFIXES) or "." in path:
        return None

    subdomain = extract_subdomain(host, root_domain)
    if not subdomain or subdomain == APP_SUBDOMAIN or subdomain in reserved:
        return None

    return f"/public/{subdomain}"


class SubdomainRewriteMiddleware(BaseHTTPMiddleware):
    """Rewrites username subdomain requests to the public schedule route"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        host = request.headers.get("host", "")
        rewritten = resolve_public_path(host, request.url.path)

        if rewritten:
            logger.debug(f"Rewriting {host}{request.url.path} -> {rewritten}")
            request.scope["path"] = rewritten
            request.scope["raw_path"] = rewritten.encode()

        return await call_next(request)
