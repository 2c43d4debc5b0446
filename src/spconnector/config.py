from __future__ import annotations

from enum import Enum
from urllib.parse import urlparse

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FORM_DIGEST_PLACEHOLDER = "SHAREPOINT_FORM_DIGEST"


class Strategy(str, Enum):
    """Supported token acquisition strategies."""

    ACS = "acs"
    CLIENT_SECRET = "client_secret"
    MANAGED_IDENTITY = "managed_identity"
    DEFAULT = "default"


class SiteConfiguration(BaseSettings):
    """Connection settings for a single SharePoint site.

    The model is frozen: it is built once at startup and shared read-only by
    every query and command. Values are read from ``SHAREPOINT_`` prefixed
    environment variables when not passed explicitly.

    Environment variables:
        - SHAREPOINT_AUTHENTICATION_URL
        - SHAREPOINT_TENANT_ID
        - SHAREPOINT_CLIENT_ID
        - SHAREPOINT_CLIENT_SECRET
        - SHAREPOINT_GRANT_TYPE
        - SHAREPOINT_RESOURCE
        - SHAREPOINT_SITE_ID
        - SHAREPOINT_SITE_NAME
        - SHAREPOINT_INSTANCE_URL
        - SHAREPOINT_SITE_URL
        - SHAREPOINT_SERVER_RELATIVE_URL (alias: SHAREPOINT_ROOT_RELATIVE_PATH)
        - SHAREPOINT_FORM_DIGEST (optional)
        - SHAREPOINT_AUTH_STRATEGY (optional, default "acs")
        - SHAREPOINT_TIMEOUT (optional, seconds)
    """

    model_config = SettingsConfigDict(
        env_prefix="SHAREPOINT_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Authentication
    authentication_url: str
    tenant_id: str
    client_id: str
    client_secret: SecretStr
    grant_type: str
    resource: str

    # Site
    site_id: str
    site_name: str
    instance_url: str
    site_url: str
    server_relative_url: str = Field(
        validation_alias=AliasChoices(
            "SHAREPOINT_SERVER_RELATIVE_URL",
            "SHAREPOINT_ROOT_RELATIVE_PATH",
        ),
    )

    form_digest: str = FORM_DIGEST_PLACEHOLDER
    auth_strategy: Strategy = Strategy.ACS
    timeout: float | None = None

    @field_validator("authentication_url", "instance_url", "site_url")
    @classmethod
    def _ensure_absolute_url(cls, v: str) -> str:
        """Reject relative URLs and normalise to a trailing slash."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"URL must be absolute: {v!r}")
        return v if v.endswith("/") else f"{v}/"

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @property
    def site_authority(self) -> str:
        """Return ``<scheme>://<host>`` of the site URL."""
        parsed = urlparse(self.site_url)
        return f"{parsed.scheme}://{parsed.netloc}"
