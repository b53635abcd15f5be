"""Pydantic Settings for the Omise client and the donation app.

All environment variables use the OMISE_ prefix.
Example: OMISE_SECRET_KEY=skey_test_..., OMISE_PUBLIC_KEY=pkey_test_...

Settings are read once at process start and passed explicitly to
``OmiseClient``; nothing in the client reads the environment afterwards.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class OmiseSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Credentials
    secret_key: str = Field(..., min_length=1)  # Basic auth for the API host
    public_key: str | None = None  # Basic auth for the vault host (tokens)

    # Hosts and protocol
    api_url: str = "https://api.omise.co"
    vault_url: str = "https://vault.omise.co"
    api_version: str = "2019-05-29"  # Omise-Version header
    user_agent: str = "omise-python/0.1.0"

    # Transport
    timeout_seconds: float = Field(default=60.0, gt=0)

    # Service
    log_level: str = "INFO"
    donation_currency: str = "thb"

    model_config = {"env_prefix": "OMISE_"}
