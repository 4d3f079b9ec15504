"""Signed Stream tokens: claim building and compact RS256 signing.

A token is ``<header>.<payload>.<signature>``, each segment base64url-encoded
without padding, so it can be dropped into a playback URL as-is.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

from jwt.algorithms import RSAAlgorithm
from jwt.utils import base64url_encode as _jwt_base64url_encode
from pydantic import ValidationError
from pydantic_core import to_jsonable_python

from cfstream.core.errors import ConfigurationError, SigningError
from cfstream.crypto.keys import import_signing_key
from cfstream.crypto.types import SigningRequest, TokenHeader

logger = logging.getLogger(__name__)

_RS256 = RSAAlgorithm(RSAAlgorithm.SHA256)
_DEFAULT_CLAIMS = ("sub", "kid", "exp")


def base64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded base64url text."""
    return _jwt_base64url_encode(data).decode("ascii")


def encode_segment(obj: Mapping[str, Any]) -> str:
    """Serialize a mapping to compact JSON and base64url-encode it."""
    try:
        text = json.dumps(
            obj,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=to_jsonable_python,
        )
    except (TypeError, ValueError) as exc:
        raise SigningError(f"Token segment is not JSON serializable: {exc}") from exc
    return base64url_encode(text.encode("utf-8"))


def build_header(key_id: str) -> dict[str, Any]:
    """Return the fixed token header for ``key_id``."""
    return TokenHeader(kid=key_id).model_dump()


def build_claims(
    key_id: str,
    subject_id: str,
    absolute_expiration: int,
    extra_claims: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the token payload.

    Defaults are ``sub``, ``kid`` and ``exp``; ``extra_claims`` is merged on top
    and wins on conflicts. Overriding ``exp`` replaces the expiry the platform
    enforces, so a missing or non-numeric value there effectively disables it.
    """
    claims: dict[str, Any] = {
        "sub": subject_id,
        "kid": key_id,
        "exp": absolute_expiration,
    }
    if extra_claims:
        overridden = [name for name in _DEFAULT_CLAIMS if name in extra_claims]
        if overridden:
            logger.debug("Default claims overridden by caller: %s", overridden)
        claims.update(extra_claims)
    return claims


def signing_input(header: Mapping[str, Any], claims: Mapping[str, Any]) -> str:
    """Return ``<header>.<payload>``, the exact text that gets signed."""
    return f"{encode_segment(header)}.{encode_segment(claims)}"


def sign_token(
    header: Mapping[str, Any],
    claims: Mapping[str, Any],
    key_material: str | bytes,
) -> str:
    """Sign ``header`` and ``claims`` with an RSA JWK, RSASSA-PKCS1-v1_5/SHA-256."""
    message = signing_input(header, claims)
    key = import_signing_key(key_material)
    try:
        signature = _RS256.sign(message.encode("ascii"), key)
    except (TypeError, ValueError) as exc:
        raise SigningError(f"RS256 signing failed: {exc}") from exc
    return f"{message}.{base64url_encode(signature)}"


def sign_stream_token(request: SigningRequest) -> str:
    """Build and sign the token described by ``request``."""
    claims = build_claims(
        request.key_id,
        request.subject_id,
        request.absolute_expiration,
        request.extra_claims,
    )
    token = sign_token(build_header(request.key_id), claims, request.key_material)
    logger.debug(
        "Signed stream token sub=%s kid=%s exp=%s",
        claims.get("sub"),
        request.key_id,
        claims.get("exp"),
    )
    return token


async def stream_signed_url(
    *,
    key_id: str,
    jwk_key: str,
    video_uid: str,
    absolute_expiration: int,
    data: Mapping[str, Any] | None = None,
) -> str:
    """Sign a Stream token without blocking the event loop.

    ``data`` may carry ``accessRules`` and any claim overrides, including
    ``sub``, ``kid`` and ``exp``.
    """
    try:
        request = SigningRequest(
            key_id=key_id,
            key_material=jwk_key,
            subject_id=video_uid,
            absolute_expiration=absolute_expiration,
            extra_claims=dict(data) if data else None,
        )
    except ValidationError as exc:
        fields = ", ".join(
            sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        )
        raise ConfigurationError(f"Invalid signing request: {fields}") from exc
    return await asyncio.to_thread(sign_stream_token, request)
