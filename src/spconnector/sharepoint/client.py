from __future__ import annotations

import logging
from uuid import UUID

from spconnector.auth import TokenProvider
from spconnector.config import SiteConfiguration

from .commands import SharePointCommands
from .models import NIL_ID, File, Folder, RecycleBinResource
from .queries import SharePointQueries
from .request import RequestBuilder

logger = logging.getLogger(__name__)


class SharePointDataClient:
    """Data client for one SharePoint site.

    Delegates reads to :class:`SharePointQueries` and writes to
    :class:`SharePointCommands`, and composes them for the recycle-bin
    workflows. Those workflows are two sequential round trips with no
    transaction between them: if the process stops after the recycle call
    the item is in the bin but its entry is never returned (at-most-once).
    """

    def __init__(
        self,
        config: SiteConfiguration,
        *,
        token_provider: TokenProvider | None = None,
    ) -> None:
        """Initialize the client for a site.

        Args:
            config: Site configuration.
            token_provider: Optional token source overriding the one selected
                by ``config.auth_strategy``.
        """
        self._config = config
        builder = RequestBuilder(config, token_provider)
        self._queries = SharePointQueries(config, builder)
        self._commands = SharePointCommands(config, builder)

    @classmethod
    def from_env(cls) -> SharePointDataClient:
        """Build a client from ``SHAREPOINT_*`` environment variables."""
        return cls(SiteConfiguration())

    @property
    def config(self) -> SiteConfiguration:
        return self._config

    # Queries

    def exists_folder(self, server_relative_url: str) -> bool:
        return self._queries.exists_folder(server_relative_url)

    def exists_file(self, server_relative_url: str, file_name: str) -> bool:
        return self._queries.exists_file(server_relative_url, file_name)

    def download_file(self, server_relative_url: str, file_name: str) -> bytes | None:
        return self._queries.download_file(server_relative_url, file_name)

    def get_recycle_bin_resource_by_id(
        self, resource_id: UUID
    ) -> RecycleBinResource | None:
        return self._queries.get_recycle_bin_resource_by_id(resource_id)

    # Commands

    def create_folder(
        self, folder_name: str, server_relative_url: str | None = None
    ) -> Folder:
        return self._commands.create_folder(folder_name, server_relative_url)

    def upload_file(
        self, server_relative_url: str, file_name: str, content: bytes
    ) -> File:
        return self._commands.upload_file(server_relative_url, file_name, content)

    def delete_resource(self, server_relative_url: str) -> bool:
        return self._commands.delete_resource(server_relative_url)

    def delete_file(self, server_relative_url: str, file_name: str) -> bool:
        return self._commands.delete_file(server_relative_url, file_name)

    # Recycle bin workflows

    def delete_resource_to_recycle_bin_by_id(
        self, server_relative_url: str
    ) -> RecycleBinResource | None:
        """Moves a resource to the recycle bin and returns its recycle-bin entry.

        Args:
            server_relative_url: Path appended to the configured root.

        Returns:
            The recycle-bin entry, or ``None`` when nothing was moved.
        """
        resource_id = self._commands.delete_resource_to_recycle_bin_by_id(
            server_relative_url
        )
        if resource_id == NIL_ID:
            return None
        return self._queries.get_recycle_bin_resource_by_id(resource_id)

    def restore_recycle_bin_resource_by_id(self, resource_id: UUID) -> bool | None:
        """Restores a recycle-bin item if it is still in the bin.

        Args:
            resource_id: Recycle-bin item identifier.

        Returns:
            The restore result, or ``None`` when the item is not in the bin.
        """
        resource = self._queries.get_recycle_bin_resource_by_id(resource_id)
        if resource is None:
            logger.info("Recycle bin item %s not found; nothing to restore.", resource_id)
            return None
        return self._commands.restore_recycle_bin_resource_by_id(resource_id)
