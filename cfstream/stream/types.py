"""Pydantic models for Cloudflare Stream video resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _StreamModel(BaseModel):
    """Tolerates fields the platform adds over time."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Status(_StreamModel):
    state: str = ""
    pct_complete: str | None = Field(default=None, alias="pctComplete")
    error_reason_code: str = Field(default="", alias="errorReasonCode")
    error_reason_text: str = Field(default="", alias="errorReasonText")


class Meta(_StreamModel):
    """User-modifiable key/value store; ``name`` is the display name."""

    name: str | None = None
    filename: str | None = None
    filetype: str | None = None
    relative_path: str | None = Field(default=None, alias="relativePath")
    type: str | None = None


class Input(_StreamModel):
    width: int = -1
    height: int = -1


class Playback(_StreamModel):
    hls: str = ""
    dash: str = ""


class PublicDetails(_StreamModel):
    title: str | None = None
    share_link: str | None = None
    channel_link: str | None = None
    logo: str | None = None


class StreamVideo(_StreamModel):
    """Video details as returned by the Stream API."""

    uid: str
    creator: str | None = None
    thumbnail: str = ""
    thumbnail_timestamp_pct: float = Field(default=0, alias="thumbnailTimestampPct")
    ready_to_stream: bool = Field(default=False, alias="readyToStream")
    status: Status = Field(default_factory=Status)
    meta: dict[str, Any] = {}
    created: str = ""
    modified: str = ""
    size: int | None = None
    preview: str = ""
    allowed_origins: list[str] = Field(default_factory=list, alias="allowedOrigins")
    require_signed_urls: bool = Field(default=False, alias="requireSignedURLs")
    uploaded: str | None = None
    upload_expiry: str | None = Field(default=None, alias="uploadExpiry")
    max_size_bytes: Any = Field(default=None, alias="maxSizeBytes")
    max_duration_seconds: int | None = Field(default=None, alias="maxDurationSeconds")
    duration: float = -1
    input: Input = Field(default_factory=Input)
    playback: Playback = Field(default_factory=Playback)
    watermark: Any = None
    clipped_from: Any = Field(default=None, alias="clippedFrom")
    public_details: PublicDetails | None = Field(default=None, alias="publicDetails")

    @property
    def display_meta(self) -> Meta:
        """Typed view of ``meta``."""
        return Meta.model_validate(self.meta)


class ResultInfo(_StreamModel):
    count: int = 0
    page: int = 0
    per_page: int = 0
    total_count: int = 0


class StreamVideoList(_StreamModel):
    """One page of videos plus the platform's counts."""

    videos: list[StreamVideo] = Field(default_factory=list)
    total: int = 0
    range: int = 0
    result_info: ResultInfo | None = None


class VideoDetails(_StreamModel):
    """Editable video fields for ``update_video``; unset fields are not sent."""

    allowed_origins: list[str] | None = Field(default=None, alias="allowedOrigins")
    creator: str | None = Field(default=None, max_length=64)
    max_duration_seconds: int | None = Field(default=None, alias="maxDurationSeconds")
    meta: dict[str, Any] | None = None
    require_signed_urls: bool | None = Field(default=None, alias="requireSignedURLs")
    thumbnail_timestamp_pct: float | None = Field(
        default=None, ge=0, le=1, alias="thumbnailTimestampPct"
    )
    upload_expiry: str | None = Field(default=None, alias="uploadExpiry")


class VideoListParams(_StreamModel):
    """Filters for listing videos."""

    asc: bool | None = None
    creator: str | None = Field(default=None, max_length=64)
    end: str | None = None
    search: str | None = None
    start: str | None = None
    status: str | None = None
    type: str | None = None
