"""Pydantic-based runtime settings for the interest proxy.

Loads from environment variables (with optional .env file).
Upstream credentials are optional here: their absence is reported per
request as a misconfiguration, not at startup.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """All configuration for the proxy runtime, validated at startup."""

    model_config = {"env_prefix": "", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # --- Upstream (Meta Graph API) ---
    fb_ad_account_id: str | None = Field(default=None, description="Ad account id, without the 'act_' prefix")
    fb_access_token: str | None = Field(default=None, description="Graph API access token")
    graph_base_url: str = Field(
        default="https://graph.facebook.com/v24.0",
        min_length=8,
        description="Versioned Graph API base URL",
    )
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="Upstream request timeout")

    # --- Auth (optional shared secret) ---
    action_secret: str | None = Field(
        default=None,
        description="If set, callers must send 'Authorization: Bearer <secret>'",
    )

    # --- Limits ---
    default_limit: int = Field(default=10, ge=1, description="Limit used when the caller sends none or an invalid one")
    max_limit: int = Field(default=100, ge=1, le=1000, description="Upper clamp for the caller's limit")

    # --- HTTP surface ---
    host: str = Field(default="0.0.0.0", description="Bind host for the HTTP server")
    port: int = Field(default=3000, description="Bind port for the HTTP server")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "https://chat.openai.com"],
        description="Origins allowed by the CORS middleware",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("port")
    @classmethod
    def _port_range(cls, v: int) -> int:
        if not (1 <= v <= 65535):
            raise ValueError(f"port must be 1-65535, got {v}")
        return v

    @model_validator(mode="after")
    def _default_within_max(self) -> RuntimeSettings:
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) must not exceed max_limit ({self.max_limit})"
            )
        return self

    @property
    def upstream_configured(self) -> bool:
        return bool(self.fb_ad_account_id and self.fb_access_token)


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
