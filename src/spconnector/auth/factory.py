from __future__ import annotations

from azure.core.credentials import TokenCredential
from azure.core.exceptions import ClientAuthenticationError
from azure.identity import (
    ClientSecretCredential,
    DefaultAzureCredential,
    ManagedIdentityCredential,
)

from spconnector.config import SiteConfiguration, Strategy
from spconnector.sharepoint.errors import UnauthorizedError

from .token import ClientCredentialsTokenProvider, TokenProvider


class CredentialTokenProvider:
    """Token provider backed by an Azure ``TokenCredential``.

    Requests the ``<scheme>://<host>/.default`` scope of the site, which is
    what SharePoint REST accepts for Entra ID app tokens.
    """

    def __init__(self, credential: TokenCredential, site_authority: str):
        self._credential = credential
        self._scope = f"{site_authority}/.default"

    @property
    def scope(self) -> str:
        return self._scope

    def acquire_token(self) -> str:
        try:
            return self._credential.get_token(self._scope).token
        except ClientAuthenticationError as exc:
            raise UnauthorizedError(exc.message) from exc


def get_credential(config: SiteConfiguration) -> TokenCredential:
    """Construct an Azure credential for the configured strategy.

    Args:
        config: Site configuration. ``auth_strategy`` must not be ``ACS``.

    Returns:
        A concrete :class:`TokenCredential`.

    Raises:
        ValueError: If the strategy has no Azure credential counterpart.
    """
    match config.auth_strategy:
        case Strategy.CLIENT_SECRET:
            return ClientSecretCredential(
                tenant_id=config.tenant_id,
                client_id=config.client_id,
                client_secret=config.client_secret.get_secret_value(),
            )
        case Strategy.MANAGED_IDENTITY:
            return ManagedIdentityCredential(client_id=config.client_id)
        case Strategy.DEFAULT:
            return DefaultAzureCredential()
        case _:
            raise ValueError(
                f"No Azure credential for strategy: {config.auth_strategy!r}"
            )


def get_token_provider(config: SiteConfiguration) -> TokenProvider:
    """Select the token provider for ``config.auth_strategy``.

    ``acs`` posts the client credentials to the authentication URL; every
    other strategy goes through ``azure-identity``.
    """
    if config.auth_strategy is Strategy.ACS:
        return ClientCredentialsTokenProvider(config)
    return CredentialTokenProvider(get_credential(config), config.site_authority)
