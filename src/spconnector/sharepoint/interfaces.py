from __future__ import annotations

from typing import Protocol
from uuid import UUID

from .models import File, Folder, RecycleBinResource


class DataContext(Protocol):
    """Protocol for file, folder and recycle-bin operations on a SharePoint site.

    Paths are relative to the root configured for the site. "Not found" is
    a value (``False`` / ``None``) for existence checks, downloads and
    recycle-bin lookups; every other failure is raised.
    """

    def exists_folder(self, server_relative_url: str) -> bool:
        """Return True if the folder exists."""
        raise NotImplementedError

    def exists_file(self, server_relative_url: str, file_name: str) -> bool:
        """Return True if the file exists in the folder."""
        raise NotImplementedError

    def download_file(self, server_relative_url: str, file_name: str) -> bytes | None:
        """Return the file content, or None if it does not exist."""
        raise NotImplementedError

    def get_recycle_bin_resource_by_id(
        self, resource_id: UUID
    ) -> RecycleBinResource | None:
        """Return a recycle-bin item, or None if it does not exist."""
        raise NotImplementedError

    def create_folder(
        self, folder_name: str, server_relative_url: str | None = None
    ) -> Folder:
        """Create a folder at the root or below a parent folder."""
        raise NotImplementedError

    def upload_file(
        self, server_relative_url: str, file_name: str, content: bytes
    ) -> File:
        """Upload bytes as a file, always overwriting."""
        raise NotImplementedError

    def delete_resource(self, server_relative_url: str) -> bool:
        """Permanently delete a resource."""
        raise NotImplementedError

    def delete_file(self, server_relative_url: str, file_name: str) -> bool:
        """Permanently delete a file."""
        raise NotImplementedError

    def delete_resource_to_recycle_bin_by_id(
        self, server_relative_url: str
    ) -> RecycleBinResource | None:
        """Move a resource to the recycle bin and return its recycle-bin entry."""
        raise NotImplementedError

    def restore_recycle_bin_resource_by_id(self, resource_id: UUID) -> bool | None:
        """Restore a recycle-bin item; None if there is nothing to restore."""
        raise NotImplementedError
