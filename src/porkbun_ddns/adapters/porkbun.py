"""Porkbun JSON API v3 adapter.

Endpoints used:
- POST {base}/dns/retrieveByNameType/{domain}/{type}/{subdomain}
- POST {base}/dns/editByNameType/{domain}/{type}/{subdomain}

Credentials travel in the JSON body of every request and are never logged.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from porkbun_ddns.core.config import AppSettings
from porkbun_ddns.core.domain.models import (
    Configuration,
    Credentials,
    DomainEntry,
    EditRecordRequest,
    EditRecordResponse,
    RetrieveRecordResponse,
)
from porkbun_ddns.core.errors import (
    STEP_READ_RECORD,
    STEP_UPDATE_RECORD,
    NetworkError,
    ResponseShapeError,
)

logger = logging.getLogger(__name__)

_ResponseT = TypeVar("_ResponseT", bound=BaseModel)


def _record_path(action: str, target: DomainEntry) -> str:
    segments = (target.domain, target.record_type, target.subdomain)
    return f"/dns/{action}/" + "/".join(quote(seg, safe="") for seg in segments)


def _parse(resp: httpx.Response, model: type[_ResponseT], *, step: str) -> _ResponseT:
    try:
        payload: Any = resp.json()
    except ValueError as exc:
        raise ResponseShapeError(
            f"provider returned a non-JSON body (HTTP {resp.status_code})",
            step=step,
        ) from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ResponseShapeError(
            f"unexpected provider response: {exc.error_count()} schema error(s)",
            step=step,
        ) from exc


class PorkbunClient:
    """DNS provider backed by the Porkbun API."""

    def __init__(self, client: httpx.Client, settings: AppSettings) -> None:
        self._client = client
        self._settings = settings

    def _url(self, action: str, target: DomainEntry) -> str:
        return self._settings.api_base_url.rstrip("/") + _record_path(action, target)

    def _post(self, url: str, body: BaseModel, *, step: str) -> httpx.Response:
        logger.debug("POST %s", url)
        try:
            resp = self._client.post(url, json=body.model_dump())
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"request to {url} failed: {exc!r}", step=step) from exc
        logger.debug("POST %s -> HTTP %s", url, resp.status_code)
        return resp

    def retrieve_record_content(self, config: Configuration) -> str:
        url = self._url("retrieveByNameType", config.target)
        resp = self._post(url, Credentials.from_config(config), step=STEP_READ_RECORD)
        if not resp.is_success:
            raise NetworkError(
                f"could not read DNS record: {url} answered HTTP {resp.status_code}",
                step=STEP_READ_RECORD,
            )

        parsed = _parse(resp, RetrieveRecordResponse, step=STEP_READ_RECORD)
        if not parsed.records:
            raise ResponseShapeError(
                f"no {config.target.record_type} record found at {url} (status {parsed.status!r})",
                step=STEP_READ_RECORD,
            )
        return parsed.records[0].content

    def edit_record(self, config: Configuration, content: str) -> EditRecordResponse:
        """Send the edit; a rejection comes back as a non-SUCCESS status.

        Porkbun reports rejected edits with HTTP 400 and a JSON body, so a
        non-2xx status is only fatal when the body is not a verdict or claims
        SUCCESS. SUCCESS counts only on a 2xx response.
        """

        url = self._url("editByNameType", config.target)
        body = EditRecordRequest(
            **Credentials.from_config(config).model_dump(),
            content=content,
        )
        resp = self._post(url, body, step=STEP_UPDATE_RECORD)
        try:
            verdict = _parse(resp, EditRecordResponse, step=STEP_UPDATE_RECORD)
        except ResponseShapeError as exc:
            if not resp.is_success:
                raise NetworkError(
                    f"could not update DNS record: {url} answered HTTP {resp.status_code}",
                    step=STEP_UPDATE_RECORD,
                ) from exc
            raise

        if verdict.succeeded and not resp.is_success:
            raise NetworkError(
                f"could not update DNS record: {url} answered HTTP {resp.status_code}"
                f" with status {verdict.status!r}",
                step=STEP_UPDATE_RECORD,
            )
        return verdict
