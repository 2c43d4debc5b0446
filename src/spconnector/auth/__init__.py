"""Token acquisition for SharePoint REST calls.

Public API:
- get_token_provider() → TokenProvider
- ClientCredentialsTokenProvider (ACS client-credentials exchange)
- CredentialTokenProvider (azure-identity credential)
- TokenProvider (protocol)
"""

from .factory import CredentialTokenProvider, get_credential, get_token_provider
from .token import ClientCredentialsTokenProvider, TokenProvider

__all__ = [
    "ClientCredentialsTokenProvider",
    "CredentialTokenProvider",
    "TokenProvider",
    "get_credential",
    "get_token_provider",
]
