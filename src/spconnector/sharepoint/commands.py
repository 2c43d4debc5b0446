from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from .errors import classify_response
from .models import NIL_ID, File, Folder
from .request import HeaderProfile, RequestBuilder
from .utils import folder_endpoint, join_server_relative, recycle_bin_endpoint, url_literal

if TYPE_CHECKING:
    from spconnector.config import SiteConfiguration

logger = logging.getLogger(__name__)


def _recycle_id(payload: Any) -> UUID:
    """Extract the recycle-bin id from a ``recycle()`` response.

    ``nometadata``/``minimalmetadata`` put it under ``value``; verbose
    responses under ``d.Recycle``. Anything missing or empty is ``NIL_ID``.
    """
    if not isinstance(payload, dict):
        return NIL_ID
    value = payload.get("value")
    if value is None and isinstance(payload.get("d"), dict):
        value = payload["d"].get("Recycle")
    if not value:
        return NIL_ID
    try:
        return UUID(str(value))
    except ValueError:
        return NIL_ID


class SharePointCommands:
    """Calls that change content on the site.

    Every non-success response raises through :func:`classify_response`,
    including 404.
    """

    def __init__(self, config: SiteConfiguration, builder: RequestBuilder):
        self._config = config
        self._builder = builder

    def _server_relative(self, path: str = "", name: str | None = None) -> str:
        return join_server_relative(self._config.server_relative_url, path, name)

    def create_folder(self, folder_name: str, server_relative_url: str | None = None) -> Folder:
        """Creates a folder at the configured root or below ``server_relative_url``.

        Args:
            folder_name: Name of the new folder.
            server_relative_url: Optional parent path appended to the configured root.

        Returns:
            The created folder.
        """
        if server_relative_url is None:
            target = self._server_relative(folder_name)
        else:
            target = self._server_relative(server_relative_url, folder_name)

        with self._builder.build_client(HeaderProfile.JSON_NO_METADATA) as client:
            response = client.post("_api/web/folders", json={"ServerRelativeUrl": target})
        if not response.ok:
            classify_response(response)

        logger.info("Created folder at %s.", target)
        return Folder.from_json(response.json())

    def upload_file(self, server_relative_url: str, file_name: str, content: bytes) -> File:
        """Uploads bytes as a file, overwriting any file with the same name.

        Args:
            server_relative_url: Folder path appended to the configured root.
            file_name: Name of the file to create.
            content: Raw file content.

        Returns:
            The uploaded file.
        """
        endpoint = (
            f"{folder_endpoint(self._server_relative(server_relative_url))}"
            f"/Files/add(overwrite=true,url='{url_literal(file_name)}')"
        )
        with self._builder.build_client(HeaderProfile.JSON_NO_METADATA) as client:
            response = client.post(endpoint, data=content)
        if not response.ok:
            classify_response(response)

        logger.info("Uploaded: %s to %s", file_name, server_relative_url)
        return File.from_json(response.json())

    def _delete(self, target: str) -> bool:
        with self._builder.build_client(HeaderProfile.DELETE_RESOURCE) as client:
            response = client.post(folder_endpoint(target))
        if not response.ok:
            classify_response(response)
        logger.info("Deleted %s.", target)
        return True

    def delete_resource(self, server_relative_url: str) -> bool:
        """Permanently deletes a folder (or any resource) below the configured root."""
        return self._delete(self._server_relative(server_relative_url))

    def delete_file(self, server_relative_url: str, file_name: str) -> bool:
        """Permanently deletes a file in a folder below the configured root."""
        return self._delete(self._server_relative(server_relative_url, file_name))

    def delete_resource_to_recycle_bin_by_id(self, server_relative_url: str) -> UUID:
        """Moves a resource to the recycle bin.

        Args:
            server_relative_url: Path appended to the configured root.

        Returns:
            The recycle-bin id of the item, ``NIL_ID`` if nothing was moved.
        """
        target = self._server_relative(server_relative_url)
        with self._builder.build_client(HeaderProfile.DELETE_RESOURCE) as client:
            response = client.post(
                f"{folder_endpoint(target)}/recycle()",
                headers={"Accept": "application/json;odata=nometadata"},
            )
        if not response.ok:
            classify_response(response)

        resource_id = _recycle_id(response.json() if response.content else None)
        if resource_id == NIL_ID:
            logger.warning("Nothing was moved to the recycle bin for %s.", target)
        else:
            logger.info("Moved %s to the recycle bin as %s.", target, resource_id)
        return resource_id

    def restore_recycle_bin_resource_by_id(self, resource_id: UUID) -> bool:
        """Restores a recycle-bin item to its original location."""
        with self._builder.build_client() as client:
            response = client.post(f"{recycle_bin_endpoint(resource_id)}/restore()")
        if not response.ok:
            classify_response(response)
        logger.info("Restored recycle bin item %s.", resource_id)
        return True
