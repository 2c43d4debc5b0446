from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping
from uuid import UUID

NIL_ID = UUID(int=0)


def _parse_datetime(value: Any) -> datetime | None:
    """Parse the ISO-8601 timestamps SharePoint returns (``Z`` suffix included)."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_uuid(value: Any) -> UUID | None:
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _parse_int(value: Any) -> int | None:
    # Length comes back as a string ("1024") under odata=nometadata.
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Folder:
    """A SharePoint folder as returned after creation."""

    name: str | None
    server_relative_url: str | None
    item_count: int | None = None
    unique_id: UUID | None = None
    exists: bool | None = None
    time_created: datetime | None = None
    time_last_modified: datetime | None = None
    extra: Mapping[str, Any] | None = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> Folder:
        return cls(
            name=payload.get("Name"),
            server_relative_url=payload.get("ServerRelativeUrl"),
            item_count=_parse_int(payload.get("ItemCount")),
            unique_id=_parse_uuid(payload.get("UniqueId")),
            exists=payload.get("Exists"),
            time_created=_parse_datetime(payload.get("TimeCreated")),
            time_last_modified=_parse_datetime(payload.get("TimeLastModified")),
            extra=payload,
        )


@dataclass(frozen=True)
class File:
    """A SharePoint file as returned after upload."""

    name: str | None
    server_relative_url: str | None
    length: int | None = None
    etag: str | None = None
    unique_id: UUID | None = None
    time_created: datetime | None = None
    time_last_modified: datetime | None = None
    extra: Mapping[str, Any] | None = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> File:
        return cls(
            name=payload.get("Name"),
            server_relative_url=payload.get("ServerRelativeUrl"),
            length=_parse_int(payload.get("Length")),
            etag=payload.get("ETag"),
            unique_id=_parse_uuid(payload.get("UniqueId")),
            time_created=_parse_datetime(payload.get("TimeCreated")),
            time_last_modified=_parse_datetime(payload.get("TimeLastModified")),
            extra=payload,
        )


@dataclass(frozen=True)
class RecycleBinResource:
    """An item held in the site recycle bin.

    ``item_state`` is SharePoint's RecycleBinItemState (1 = first-stage bin,
    2 = second-stage bin); both are restorable.
    """

    id: UUID
    dir_name: str | None
    leaf_name: str | None
    deleted_date: datetime | None = None
    item_state: int | None = None
    item_type: int | None = None
    title: str | None = None
    size: int | None = None
    deleted_by_name: str | None = None
    extra: Mapping[str, Any] | None = None

    @property
    def server_relative_url(self) -> str | None:
        """Original location of the item before it was recycled."""
        if self.dir_name is None or self.leaf_name is None:
            return None
        return f"/{self.dir_name.strip('/')}/{self.leaf_name}"

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> RecycleBinResource:
        # Verbose responses wrap the entity in a "d" envelope.
        if "d" in payload and isinstance(payload["d"], Mapping):
            payload = payload["d"]
        return cls(
            id=_parse_uuid(payload.get("Id")) or NIL_ID,
            dir_name=payload.get("DirName"),
            leaf_name=payload.get("LeafName"),
            deleted_date=_parse_datetime(payload.get("DeletedDate")),
            item_state=_parse_int(payload.get("ItemState")),
            item_type=_parse_int(payload.get("ItemType")),
            title=payload.get("Title"),
            size=_parse_int(payload.get("Size")),
            deleted_by_name=payload.get("DeletedByName"),
            extra=payload,
        )
