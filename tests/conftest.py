"""Shared test fixtures for cfstream."""

import base64
import json
from collections.abc import Callable

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from jwt.algorithms import RSAAlgorithm

KEY_ID = "8f926b2f01e9b5f1d0d4a5a3e5b0c7a1"


def _encode_jwk(jwk: dict) -> str:
    return base64.b64encode(json.dumps(jwk).encode()).decode()


@pytest.fixture(scope="session")
def rsa_private_key() -> RSAPrivateKey:
    """Generate one RSA-2048 signing key for the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_public_key(rsa_private_key: RSAPrivateKey) -> RSAPublicKey:
    return rsa_private_key.public_key()


@pytest.fixture(scope="session")
def private_jwk(rsa_private_key: RSAPrivateKey) -> dict:
    """Private JWK for the session key, with kid and alg set."""
    jwk = RSAAlgorithm.to_jwk(rsa_private_key, as_dict=True)
    jwk.update({"kid": KEY_ID, "alg": "RS256"})
    return jwk


@pytest.fixture(scope="session")
def key_material(private_jwk: dict) -> str:
    return _encode_jwk(private_jwk)


@pytest.fixture
def encode_jwk() -> Callable[[dict], str]:
    """Base64-encode a JWK dict the way the Stream dashboard hands it out."""
    return _encode_jwk
