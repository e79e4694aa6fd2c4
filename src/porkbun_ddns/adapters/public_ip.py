"""Public IP lookup via a plain-text "what is my IP" service."""

from __future__ import annotations

import ipaddress
import logging

import httpx

from porkbun_ddns.core.config import AppSettings
from porkbun_ddns.core.errors import STEP_RESOLVE_IP, NetworkError

logger = logging.getLogger(__name__)


class CheckIPResolver:
    """Resolves the caller's public address (checkip.amazonaws.com by default).

    The body is stripped before use: the service terminates it with a newline,
    which would never compare equal to a published record.
    """

    def __init__(self, client: httpx.Client, settings: AppSettings) -> None:
        self._client = client
        self._settings = settings

    def resolve(self) -> str:
        url = self._settings.ip_service_url
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"could not retrieve current IP: {url} answered HTTP {exc.response.status_code}",
                step=STEP_RESOLVE_IP,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(
                f"could not retrieve current IP from {url}: {exc!r}",
                step=STEP_RESOLVE_IP,
            ) from exc

        ip = resp.text.strip()
        try:
            ipaddress.ip_address(ip)
        except ValueError as exc:
            raise NetworkError(
                f"could not retrieve current IP: {url} returned {ip[:64]!r}, not an IP address",
                step=STEP_RESOLVE_IP,
            ) from exc
        return ip
