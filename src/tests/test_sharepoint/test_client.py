from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock
from uuid import UUID

import pytest
import responses

from spconnector import SharePointDataClient, SiteConfiguration
from spconnector.sharepoint.interfaces import DataContext
from spconnector.sharepoint.models import NIL_ID, RecycleBinResource

FOLDER = "_api/web/GetFolderByServerRelativeUrl('/sites/X/Docs/Reports')"
RECYCLE_ID = UUID("5b5b1a8a-5f34-4c2b-9e0a-2f1c3c7d9e11")
RECYCLE_ENTRY = {
    "Id": str(RECYCLE_ID),
    "DirName": "sites/X/Docs",
    "LeafName": "Reports",
    "DeletedDate": "2024-03-02T08:00:00Z",
    "ItemState": 1,
}


@pytest.fixture()
def client(config: SiteConfiguration) -> SharePointDataClient:
    return SharePointDataClient(config)


def test_client__implements_data_context(client: SharePointDataClient) -> None:
    for name in (
        n for n in vars(DataContext) if not n.startswith("_") and callable(getattr(DataContext, n))
    ):
        assert callable(getattr(client, name)), name


def test_create_folder__scenario_under_root(
    client: SharePointDataClient,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    """Creating 'Reports' under /sites/X/Docs/ returns its server-relative URL."""
    mocked.add(
        responses.POST,
        site_api("_api/web/folders"),
        json={"ServerRelativeUrl": "/sites/X/Docs/Reports"},
    )

    folder = client.create_folder("Reports")

    assert folder.server_relative_url == "/sites/X/Docs/Reports"


def test_delete_to_recycle_bin__returns_entry_for_new_id(
    client: SharePointDataClient,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    mocked.add(responses.POST, site_api(f"{FOLDER}/recycle()"), json={"value": str(RECYCLE_ID)})
    mocked.add(responses.GET, site_api(f"_api/web/recyclebin('{RECYCLE_ID}')"), json=RECYCLE_ENTRY)

    resource = client.delete_resource_to_recycle_bin_by_id("Reports")

    assert isinstance(resource, RecycleBinResource)
    assert resource.id == RECYCLE_ID
    # token, recycle, token, lookup
    assert [c.request.method for c in mocked.calls] == ["POST", "POST", "POST", "GET"]


def test_delete_to_recycle_bin__nil_id_skips_lookup(
    client: SharePointDataClient,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    mocked.add(responses.POST, site_api(f"{FOLDER}/recycle()"), json={"value": str(NIL_ID)})

    assert client.delete_resource_to_recycle_bin_by_id("Reports") is None
    assert len(mocked.calls) == 2


def test_delete_to_recycle_bin__entry_gone_before_lookup(
    client: SharePointDataClient,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    """The two steps are not atomic: a purged entry comes back as None."""
    mocked.add(responses.POST, site_api(f"{FOLDER}/recycle()"), json={"value": str(RECYCLE_ID)})
    mocked.add(responses.GET, site_api(f"_api/web/recyclebin('{RECYCLE_ID}')"), status=404)

    assert client.delete_resource_to_recycle_bin_by_id("Reports") is None


def test_restore__absent_entry_returns_none(
    client: SharePointDataClient,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    mocked.add(responses.GET, site_api(f"_api/web/recyclebin('{RECYCLE_ID}')"), status=404)
    restore = mocked.add(
        responses.POST, site_api(f"_api/web/recyclebin('{RECYCLE_ID}')/restore()")
    )

    assert client.restore_recycle_bin_resource_by_id(RECYCLE_ID) is None
    assert restore.call_count == 0


def test_restore__present_entry_restores(
    client: SharePointDataClient,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    mocked.add(responses.GET, site_api(f"_api/web/recyclebin('{RECYCLE_ID}')"), json=RECYCLE_ENTRY)
    restore = mocked.add(
        responses.POST, site_api(f"_api/web/recyclebin('{RECYCLE_ID}')/restore()")
    )

    assert client.restore_recycle_bin_resource_by_id(RECYCLE_ID) is True
    assert restore.call_count == 1


def test_custom_token_provider(
    config: SiteConfiguration,
    mocked: responses.RequestsMock,
    site_api: Callable[[str], str],
) -> None:
    provider = MagicMock()
    provider.acquire_token.return_value = "injected"
    mocked.add(responses.GET, site_api(f"{FOLDER}/exists"), json={"value": True})

    client = SharePointDataClient(config, token_provider=provider)

    assert client.exists_folder("Reports") is True
    assert len(mocked.calls) == 1
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer injected"


def test_from_env(monkeypatch: pytest.MonkeyPatch, config: SiteConfiguration) -> None:
    for key, value in config.model_dump().items():
        if value is None:
            continue
        if key == "client_secret":
            value = value.get_secret_value()
        monkeypatch.setenv(f"SHAREPOINT_{key.upper()}", str(getattr(value, "value", value)))

    client = SharePointDataClient.from_env()

    assert client.config.site_url == config.site_url
    assert client.config.server_relative_url == "/sites/X/Docs/"
