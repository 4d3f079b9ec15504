"""Type definitions for Stream signed-token construction."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt

SIGNING_ALGORITHM = "RS256"


class AccessRule(BaseModel):
    """Platform-defined playback constraint (IP range, country, referrer...).

    Rules are opaque to the signer: extra fields are kept as given.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    action: str


class TokenHeader(BaseModel):
    """JOSE header of a Stream token."""

    alg: str = SIGNING_ALGORITHM
    kid: str


class SigningRequest(BaseModel):
    """Everything needed to produce one signed Stream token."""

    key_id: str = Field(min_length=1)
    key_material: str = Field(min_length=1, repr=False)
    subject_id: str = Field(min_length=1)
    absolute_expiration: StrictInt
    extra_claims: dict[str, Any] | None = None
