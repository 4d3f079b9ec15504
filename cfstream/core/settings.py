"""Client settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

API_ENDPOINT_DEFAULT = "https://api.cloudflare.com/client/v4/accounts/"
SIGNED_URL_TTL_DEFAULT = 3600


class CloudflareSettings(BaseSettings):
    """Cloudflare account and Stream signing-key settings."""

    model_config = SettingsConfigDict(env_prefix="CLOUDFLARE_")

    client_id: str = ""
    client_secret: str = ""
    stream_key_id: str = ""
    stream_jwk_id: str = ""
    endpoint: str = API_ENDPOINT_DEFAULT
    signed_url_ttl: int = SIGNED_URL_TTL_DEFAULT
