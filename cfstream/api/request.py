"""Authenticated requests against the Cloudflare v4 API."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from cfstream.core.errors import ErrorDetail, UpstreamAPIError
from cfstream.core.settings import API_ENDPOINT_DEFAULT

logger = logging.getLogger(__name__)

PAYLOAD_METHODS = frozenset({"PATCH", "POST", "PUT", "DELETE"})


class CloudflareEnvelope(BaseModel):
    """Standard ``{success, errors, messages, result}`` response wrapper."""

    model_config = ConfigDict(extra="allow")

    success: bool = True
    errors: list[ErrorDetail] = []
    messages: list[Any] | None = None
    result: Any = None

    @field_validator("errors", mode="before")
    @classmethod
    def _normalize_errors(cls, value: Any) -> list[Any]:
        """Keep every platform error entry, whatever its shape."""
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]
        entries = []
        for entry in value:
            if not isinstance(entry, dict):
                entry = {"message": str(entry)}
            elif not isinstance(entry.get("message", ""), str):
                entry = {**entry, "message": str(entry["message"])}
            entries.append(entry)
        return entries


def _parse_envelope(body: dict[str, Any]) -> CloudflareEnvelope:
    """Validate a response body, falling back to its bare ``result``."""
    try:
        return CloudflareEnvelope.model_validate(body)
    except ValidationError:
        logger.debug("Unexpected envelope shape, keeping result only")
        return CloudflareEnvelope(result=body.get("result"))


def _parse_errors(response: httpx.Response) -> list[ErrorDetail]:
    """Extract the platform's error list from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return []
    if not isinstance(body, dict):
        return []
    return _parse_envelope(body).errors


def _strip_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


async def cloudflare_raw_request(
    url: str,
    *,
    method: str = "GET",
    data: dict[str, Any] | None = None,
    base_url: str = "",
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CloudflareEnvelope:
    """Send one request and return the decoded response envelope.

    Payload methods send ``data`` (or ``{}``) as a JSON body; other methods
    send it as the query string.
    """
    method = method.upper() if method else "GET"
    kwargs: dict[str, Any] = {}
    if method in PAYLOAD_METHODS:
        kwargs["json"] = data or {}
    elif data:
        kwargs["params"] = _strip_none(data)

    async with httpx.AsyncClient(
        base_url=base_url, headers=headers, transport=transport
    ) as client:
        logger.debug("%s %s%s", method, base_url, url)
        resp = await client.request(method, url, **kwargs)

    if not resp.is_success:
        errors = _parse_errors(resp)
        logger.warning(
            "Cloudflare API %s %s failed with %s", method, url, resp.status_code
        )
        raise UpstreamAPIError(resp.status_code, resp.reason_phrase, errors)

    if not resp.content:
        return CloudflareEnvelope()
    try:
        body = resp.json()
    except ValueError:
        return CloudflareEnvelope()
    if not isinstance(body, dict):
        return CloudflareEnvelope(result=body)
    return _parse_envelope(body)


async def cloudflare_envelope_request(
    resource: str,
    *,
    account_id: str,
    api_token: str,
    method: str = "GET",
    data: dict[str, Any] | None = None,
    endpoint: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CloudflareEnvelope:
    """Send a request scoped to ``account_id`` and return the full envelope."""
    return await cloudflare_raw_request(
        resource,
        method=method,
        data=data,
        base_url=f"{endpoint or API_ENDPOINT_DEFAULT}{account_id}/",
        headers={"Authorization": f"Bearer {api_token}"},
        transport=transport,
    )


async def cloudflare_request(
    resource: str,
    *,
    account_id: str,
    api_token: str,
    method: str = "GET",
    data: dict[str, Any] | None = None,
    endpoint: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Send a request scoped to ``account_id`` and return the envelope ``result``."""
    envelope = await cloudflare_envelope_request(
        resource,
        account_id=account_id,
        api_token=api_token,
        method=method,
        data=data,
        endpoint=endpoint,
        transport=transport,
    )
    return envelope.result
