from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from .errors import classify_response
from .models import RecycleBinResource
from .request import HeaderProfile, RequestBuilder
from .utils import file_endpoint, folder_endpoint, join_server_relative, recycle_bin_endpoint

if TYPE_CHECKING:
    from spconnector.config import SiteConfiguration

logger = logging.getLogger(__name__)


class SharePointQueries:
    """Read-only calls against the site.

    A 404 is returned as a value (``False`` / ``None``) by every query;
    any other failure raises through :func:`classify_response`.
    """

    def __init__(self, config: SiteConfiguration, builder: RequestBuilder):
        self._config = config
        self._builder = builder

    def _server_relative(self, path: str) -> str:
        return join_server_relative(self._config.server_relative_url, path)

    def _exists(self, endpoint: str) -> bool:
        with self._builder.build_client(HeaderProfile.JSON_NO_METADATA) as client:
            response = client.get(f"{endpoint}/exists")
        if response.status_code == 404:
            logger.debug("Existence check answered 404: %s", endpoint)
            return False
        if not response.ok:
            classify_response(response)
        payload = response.json()
        return isinstance(payload, dict) and bool(payload.get("value", False))

    def exists_folder(self, server_relative_url: str) -> bool:
        """Tests for the existence of a folder below the configured root.

        Args:
            server_relative_url: Path appended to the configured root.

        Returns:
            The ``value`` reported by the site, ``False`` on 404.
        """
        return self._exists(folder_endpoint(self._server_relative(server_relative_url)))

    def exists_file(self, server_relative_url: str, file_name: str) -> bool:
        """Tests for the existence of a file in a folder below the configured root.

        Args:
            server_relative_url: Folder path appended to the configured root.
            file_name: Name of the file within the folder.

        Returns:
            The ``value`` reported by the site, ``False`` on 404.
        """
        return self._exists(
            file_endpoint(self._server_relative(server_relative_url), file_name)
        )

    def download_file(self, server_relative_url: str, file_name: str) -> bytes | None:
        """Downloads the raw content of a file.

        Args:
            server_relative_url: Folder path appended to the configured root.
            file_name: Name of the file within the folder.

        Returns:
            The file bytes, or ``None`` if the file does not exist.
        """
        endpoint = file_endpoint(self._server_relative(server_relative_url), file_name)
        url = f"{self._config.site_url}{endpoint}/$value"
        with self._builder.build_client(HeaderProfile.DOWNLOAD_FILE) as client:
            response = client.get(url)
        if response.status_code == 404:
            logger.debug("File %s not found in %s", file_name, server_relative_url)
            return None
        if not response.ok:
            classify_response(response)
        return response.content

    def get_recycle_bin_resource_by_id(
        self, resource_id: UUID
    ) -> RecycleBinResource | None:
        """Looks up an item in the recycle bin.

        Args:
            resource_id: Recycle-bin item identifier.

        Returns:
            The recycle-bin item, or ``None`` if no item has that identifier.
        """
        with self._builder.build_client() as client:
            response = client.get(recycle_bin_endpoint(resource_id))
        if response.status_code == 404:
            logger.debug("Recycle bin item %s not found", resource_id)
            return None
        if not response.ok:
            classify_response(response)
        return RecycleBinResource.from_json(response.json())
