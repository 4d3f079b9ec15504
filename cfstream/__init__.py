"""Async Cloudflare Stream client with locally signed playback tokens."""

from cfstream.api.client import CloudflareClient
from cfstream.core.errors import (
    CloudflareError,
    ConfigurationError,
    KeyImportError,
    SigningError,
    UpstreamAPIError,
)
from cfstream.core.settings import CloudflareSettings
from cfstream.crypto.signature import (
    build_claims,
    sign_stream_token,
    sign_token,
    stream_signed_url,
)
from cfstream.crypto.types import AccessRule, SigningRequest
from cfstream.stream.client import CloudflareStream

__all__ = [
    "AccessRule",
    "CloudflareClient",
    "CloudflareError",
    "CloudflareSettings",
    "CloudflareStream",
    "ConfigurationError",
    "KeyImportError",
    "SigningError",
    "SigningRequest",
    "UpstreamAPIError",
    "build_claims",
    "sign_stream_token",
    "sign_token",
    "stream_signed_url",
]
