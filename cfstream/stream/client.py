"""Cloudflare Stream client: video CRUD and signed playback tokens."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx

from cfstream.api.client import CloudflareClient
from cfstream.core.errors import ConfigurationError
from cfstream.core.settings import SIGNED_URL_TTL_DEFAULT, CloudflareSettings
from cfstream.crypto.signature import stream_signed_url
from cfstream.stream.types import (
    StreamVideo,
    StreamVideoList,
    VideoDetails,
    VideoListParams,
)

logger = logging.getLogger(__name__)

# The list endpoint returns at most this many videos per call.
LIST_PAGE_LIMIT = 1000


class CloudflareStream(CloudflareClient):
    """Client for the Stream video API of one account."""

    def __init__(
        self,
        account_id: str,
        api_token: str,
        *,
        key_id: str = "",
        jwk_key: str = "",
        signed_url_ttl: int = SIGNED_URL_TTL_DEFAULT,
        endpoint: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(account_id, api_token, endpoint=endpoint, transport=transport)
        if bool(key_id) != bool(jwk_key):
            missing = "jwk_key" if key_id else "key_id"
            raise ConfigurationError(f"CloudflareStream: stream {missing} is empty")
        self._stream_key_id = key_id
        self._stream_jwk_key = jwk_key
        self._signed_url_ttl = signed_url_ttl

    @classmethod
    def from_settings(
        cls,
        settings: CloudflareSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> CloudflareStream:
        """Build a client from resolved settings."""
        return cls(
            settings.client_id,
            settings.client_secret,
            key_id=settings.stream_key_id,
            jwk_key=settings.stream_jwk_id,
            signed_url_ttl=settings.signed_url_ttl,
            endpoint=settings.endpoint,
            transport=transport,
        )

    async def get_video(self, stream_uid: str) -> StreamVideo:
        result = await self._get(f"stream/{stream_uid}")
        return StreamVideo.model_validate(result)

    async def update_video(
        self, stream_uid: str, details: VideoDetails
    ) -> StreamVideo:
        body = details.model_dump(by_alias=True, exclude_none=True)
        result = await self._post(f"stream/{stream_uid}", body)
        return StreamVideo.model_validate(result)

    async def rename_video(self, stream_uid: str, name: str) -> StreamVideo:
        """Set ``meta.name``, keeping the rest of ``meta``.

        The API replaces ``meta`` as a whole, so the current value is fetched
        first.
        """
        video = await self.get_video(stream_uid)
        return await self.update_video(
            stream_uid, VideoDetails(meta={**video.meta, "name": name})
        )

    async def delete_video(self, stream_uid: str) -> None:
        await self._delete(f"stream/{stream_uid}")

    async def list(self, params: VideoListParams | None = None) -> StreamVideoList:
        """List videos, newest first unless ``asc`` is set."""
        query: dict[str, Any] = {"include_counts": True}
        if params is not None:
            query.update(params.model_dump(exclude_none=True))
        envelope = await self._request_envelope("stream", "GET", query)
        if isinstance(envelope.result, dict):
            return StreamVideoList.model_validate(envelope.result)
        extra = envelope.model_extra or {}
        return StreamVideoList.model_validate(
            {
                "videos": envelope.result or [],
                "total": extra.get("total", 0),
                "range": extra.get("range", 0),
                "result_info": extra.get("result_info"),
            }
        )

    async def all(self) -> list[StreamVideo]:
        """Return every video, following creation dates past the page limit."""
        page = await self.list()
        videos = list(page.videos)

        if page.total > LIST_PAGE_LIMIT:
            while page.videos:
                end = page.videos[-1].created
                page = await self.list(VideoListParams(end=end))
                videos.extend(page.videos)
                logger.debug("Fetched %d of %d videos", len(videos), page.total)

        return videos

    async def temporary_signed_url(
        self,
        stream_uid: str,
        relative_expiration_seconds: int | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Create a signed token granting playback of ``stream_uid``.

        The token expires ``relative_expiration_seconds`` from now (one hour by
        default). ``options`` may set ``accessRules`` and override any claim.
        """
        if not self._stream_key_id:
            raise ConfigurationError(
                "CloudflareStream: stream key_id and jwk_key are empty"
            )

        window = relative_expiration_seconds or self._signed_url_ttl
        absolute_expiration = int(time.time()) + window

        return await stream_signed_url(
            key_id=self._stream_key_id,
            jwk_key=self._stream_jwk_key,
            video_uid=stream_uid,
            absolute_expiration=absolute_expiration,
            data=options,
        )
