"""httpx wrapper.

Why a wrapper:
- Standardises timeouts and headers for the three outbound calls.
- Eases testing: tests intercept the transport (pytest-httpx) instead of
  patching call sites.
"""

from __future__ import annotations

import httpx

from porkbun_ddns.core.config import AppSettings


def build_client(settings: AppSettings) -> httpx.Client:
    """Create an `httpx.Client` with bounded timeouts.

    Redirects are not followed: a redirect could move credential-bearing
    POST bodies off https.
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
    )
