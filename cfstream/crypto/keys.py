"""Import of base64-encoded RSA JWK signing keys."""

import base64
import binascii
import json
from typing import Any

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from jwt.algorithms import RSAAlgorithm
from jwt.exceptions import InvalidKeyError

from cfstream.core.errors import KeyImportError
from cfstream.crypto.types import SIGNING_ALGORITHM


def decode_key_material(key_material: str | bytes) -> dict[str, Any]:
    """Decode base64 key material into a JWK dict.

    Accepts both the standard and URL-safe alphabets, with or without padding.
    """
    if isinstance(key_material, bytes):
        try:
            key_material = key_material.decode("ascii")
        except UnicodeDecodeError as exc:
            raise KeyImportError("Key material is not base64 text") from exc

    normalized = "".join(key_material.split()).translate(str.maketrans("-_", "+/"))
    if not normalized:
        raise KeyImportError("Key material is empty")
    normalized += "=" * (-len(normalized) % 4)

    try:
        raw = base64.b64decode(normalized, validate=True)
    except binascii.Error as exc:
        raise KeyImportError("Key material is not valid base64") from exc

    try:
        jwk = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise KeyImportError("Key material is not a JSON document") from exc

    if not isinstance(jwk, dict):
        raise KeyImportError("Key material must describe a JSON object")
    return jwk


def import_signing_key(key_material: str | bytes) -> RSAPrivateKey:
    """Load an RSA private key usable for RS256 from base64 JWK key material."""
    jwk = decode_key_material(key_material)

    alg = jwk.get("alg")
    if alg is not None and alg != SIGNING_ALGORITHM:
        raise KeyImportError(f"JWK algorithm {alg!r} is not {SIGNING_ALGORITHM}")

    try:
        key = RSAAlgorithm.from_jwk(jwk)
    except (InvalidKeyError, KeyError, TypeError, ValueError) as exc:
        raise KeyImportError(f"Invalid RSA JWK: {exc}") from exc

    if not isinstance(key, RSAPrivateKey):
        raise KeyImportError("JWK does not contain a private key")
    return key
