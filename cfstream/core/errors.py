"""Exception hierarchy for the Cloudflare client and stream token signing."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Single ``{code, message}`` entry from a Cloudflare error response."""

    model_config = ConfigDict(extra="allow")

    code: int | str | None = None
    message: str = ""

    def __str__(self) -> str:
        return ": ".join(str(p) for p in (self.code, self.message) if p not in (None, ""))


class CloudflareError(Exception):
    """Base class for every error raised by cfstream."""


class ConfigurationError(CloudflareError):
    """A required credential is missing or empty."""


class KeyImportError(CloudflareError):
    """Key material does not decode to a usable RSA private JWK."""


class SigningError(CloudflareError):
    """The token could not be serialized or signed."""


class UpstreamAPIError(CloudflareError):
    """Non-success response from the Cloudflare API."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        errors: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.errors = errors or []
        detail = "; ".join(filter(None, (str(e) for e in self.errors)))
        message = f"{status_code} {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
