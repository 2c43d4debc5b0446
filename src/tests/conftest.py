from __future__ import annotations

import os
from typing import Callable, Iterator
from urllib.parse import urljoin

import pytest
import responses

from spconnector.config import SiteConfiguration

AUTH_URL = "https://accounts.accesscontrol.windows.net/tenant-id/"
SITE_URL = "https://contoso.sharepoint.com/sites/X/"
ROOT = "/sites/X/Docs/"
TOKEN = "test-access-token"


@pytest.fixture(autouse=True)
def clear_sharepoint_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove SHAREPOINT_* vars to prevent cross-test leakage."""
    for k in [k for k in os.environ if k.upper().startswith("SHAREPOINT_")]:
        monkeypatch.delenv(k, raising=False)
    yield


@pytest.fixture()
def config() -> SiteConfiguration:
    return SiteConfiguration(
        authentication_url=AUTH_URL,
        tenant_id="tenant-id",
        client_id="client-id@tenant-id",
        client_secret="client-secret",
        grant_type="client_credentials",
        resource="00000003-0000-0ff1-ce00-000000000000/contoso.sharepoint.com@tenant-id",
        site_id="8cdc34d0-70a9-47aa-b951-e2e7554b59f3",
        site_name="Docs",
        instance_url="https://contoso.sharepoint.com/",
        site_url=SITE_URL,
        server_relative_url=ROOT,
    )


@pytest.fixture()
def token_url() -> str:
    return urljoin(AUTH_URL, "tokens/oAuth/2")


@pytest.fixture()
def site_api() -> Callable[[str], str]:
    """Return a helper turning an ``_api/...`` path into an absolute site URL."""

    def _build(path: str) -> str:
        return f"{SITE_URL}{path}"

    return _build


@pytest.fixture()
def mocked(token_url: str) -> Iterator[responses.RequestsMock]:
    """Activate ``responses`` with the token endpoint already registered.

    ``calls[0]`` of every single-round-trip operation is the token exchange.
    """
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.POST, token_url, json={"access_token": TOKEN}, status=200)
        yield rsps
