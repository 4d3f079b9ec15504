"""Base client holding Cloudflare account credentials."""

from typing import Any

import httpx

from cfstream.api.request import (
    CloudflareEnvelope,
    cloudflare_envelope_request,
    cloudflare_request,
)
from cfstream.core.errors import ConfigurationError


class CloudflareClient:
    """Sends authenticated requests scoped to one Cloudflare account.

    Credentials are captured at construction and never exposed.
    """

    def __init__(
        self,
        account_id: str,
        api_token: str,
        *,
        endpoint: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not account_id:
            raise ConfigurationError("CloudflareClient: account_id is empty")
        if not api_token:
            raise ConfigurationError("CloudflareClient: api_token is empty")
        self._account_id = account_id
        self._api_token = api_token
        self._endpoint = endpoint
        self._transport = transport

    async def _request_envelope(
        self,
        resource: str,
        method: str = "GET",
        data: dict[str, Any] | None = None,
    ) -> CloudflareEnvelope:
        """Send a request and return the full response envelope."""
        return await cloudflare_envelope_request(
            resource,
            account_id=self._account_id,
            api_token=self._api_token,
            method=method,
            data=data,
            endpoint=self._endpoint,
            transport=self._transport,
        )

    async def _request(
        self,
        resource: str,
        method: str = "GET",
        data: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return its ``result``."""
        return await cloudflare_request(
            resource,
            account_id=self._account_id,
            api_token=self._api_token,
            method=method,
            data=data,
            endpoint=self._endpoint,
            transport=self._transport,
        )

    async def _get(self, resource: str, query: dict[str, Any] | None = None) -> Any:
        return await self._request(resource, "GET", query)

    async def _post(self, resource: str, body: dict[str, Any] | None = None) -> Any:
        return await self._request(resource, "POST", body)

    async def _put(self, resource: str, body: dict[str, Any] | None = None) -> Any:
        return await self._request(resource, "PUT", body)

    async def _patch(self, resource: str, body: dict[str, Any] | None = None) -> Any:
        return await self._request(resource, "PATCH", body)

    async def _delete(self, resource: str, body: dict[str, Any] | None = None) -> Any:
        return await self._request(resource, "DELETE", body)
