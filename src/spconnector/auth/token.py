from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol
from urllib.parse import urljoin

import requests

from spconnector.sharepoint.errors import UnauthorizedError

if TYPE_CHECKING:
    from spconnector.config import SiteConfiguration

logger = logging.getLogger(__name__)

TOKEN_ENDPOINT = "tokens/oAuth/2"


class TokenProvider(Protocol):
    """Anything able to hand out a bearer token for the configured site."""

    def acquire_token(self) -> str:
        """Return a fresh access token."""
        raise NotImplementedError


class ClientCredentialsTokenProvider:
    """Exchanges app credentials for a bearer token (SharePoint ACS flow).

    Every call performs a new exchange; the token lifetime is not tracked.
    """

    def __init__(self, config: SiteConfiguration):
        """Initialize the token provider.

        Args:
            config: Site configuration holding the authentication endpoint
                and the client credentials.
        """
        self._config = config
        self._token_url = urljoin(config.authentication_url, TOKEN_ENDPOINT)

    def _form(self) -> dict[str, str]:
        cfg = self._config
        return {
            "resource": cfg.resource,
            "client_id": cfg.client_id,
            "client_secret": cfg.client_secret.get_secret_value(),
            "grant_type": cfg.grant_type,
        }

    def acquire_token(self) -> str:
        """POST the client credentials and return ``access_token``.

        Returns:
            The access token, or an empty string when the response carries none.

        Raises:
            UnauthorizedError: If the token endpoint answers with a non-success status.
        """
        response = requests.post(
            self._token_url, data=self._form(), timeout=self._config.timeout
        )
        if not response.ok:
            logger.error(
                "Token request to %s failed with status %s",
                self._token_url,
                response.status_code,
            )
            raise UnauthorizedError(
                f"Token acquisition failed with status {response.status_code}",
                status_code=response.status_code,
            )

        payload = response.json()
        if not isinstance(payload, dict):
            return ""
        return str(payload.get("access_token") or "")
