from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

import requests

from spconnector.auth import TokenProvider, get_token_provider

from .errors import UnauthorizedError

if TYPE_CHECKING:
    from spconnector.config import SiteConfiguration

logger = logging.getLogger(__name__)


class HeaderProfile(str, Enum):
    """Header sets required by the different kinds of REST calls."""

    DEFAULT = "default"
    DOWNLOAD_FILE = "download_file"
    DELETE_RESOURCE = "delete_resource"
    JSON_NO_METADATA = "json_no_metadata"


class SiteSession(requests.Session):
    """``requests.Session`` prefixing relative URLs with the site URL.

    Relative URLs are appended to ``base_url`` as-is, never resolved, so the
    path inside an OData literal is sent exactly as given.
    """

    def __init__(self, base_url: str, timeout: float | None = None):
        super().__init__()
        self.base_url = base_url
        self.timeout = timeout

    def request(self, method: str, url: str, *args: Any, **kwargs: Any) -> requests.Response:
        if not url.startswith(("http://", "https://")):
            url = f"{self.base_url}{url}"
        kwargs.setdefault("timeout", self.timeout)
        logger.debug("%s %s", method, url)
        return super().request(method, url, *args, **kwargs)


class RequestBuilder:
    """Builds authenticated sessions for the configured site."""

    def __init__(
        self,
        config: SiteConfiguration,
        token_provider: TokenProvider | None = None,
    ):
        """Initialize the request builder.

        Args:
            config: Site configuration.
            token_provider: Source of bearer tokens. Defaults to the provider
                selected by ``config.auth_strategy``.
        """
        self._config = config
        self._token_provider = token_provider or get_token_provider(config)

    def _profile_headers(self, profile: HeaderProfile) -> dict[str, str]:
        if profile is HeaderProfile.JSON_NO_METADATA:
            return {"Accept": "application/json;odata=nometadata"}
        if profile is HeaderProfile.DELETE_RESOURCE:
            return {
                "X-RequestDigest": self._config.form_digest,
                "IF-MATCH": "*",
                "X-HTTP-Method": "DELETE",
            }
        if profile is HeaderProfile.DOWNLOAD_FILE:
            return {
                "Accept": "application/octet-stream",
                "binaryStringRequestBody": "true",
            }
        return {}

    def build_client(self, profile: HeaderProfile | None = None) -> SiteSession:
        """Return a session carrying a fresh bearer token and the profile headers.

        Each call acquires a new token; nothing is cached between calls.

        Args:
            profile: Header profile for the call. ``None`` gives a bare
                authenticated session.

        Raises:
            UnauthorizedError: If no token could be obtained.
        """
        token = self._token_provider.acquire_token()
        if not token:
            raise UnauthorizedError("Token endpoint returned no access token")

        session = SiteSession(self._config.site_url, timeout=self._config.timeout)
        session.headers["Authorization"] = f"Bearer {token}"
        session.headers.update(self._profile_headers(profile or HeaderProfile.DEFAULT))
        return session
