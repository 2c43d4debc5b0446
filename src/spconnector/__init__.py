"""Client library for files, folders and the recycle bin of a SharePoint site."""

from .config import SiteConfiguration, Strategy
from .sharepoint import (
    NIL_ID,
    BadRequestError,
    DataContext,
    File,
    Folder,
    InternalServerError,
    NotFoundError,
    RecycleBinResource,
    SharePointDataClient,
    SharePointError,
    UnauthorizedError,
    UnknownError,
)

__all__ = [
    "BadRequestError",
    "DataContext",
    "File",
    "Folder",
    "InternalServerError",
    "NIL_ID",
    "NotFoundError",
    "RecycleBinResource",
    "SharePointDataClient",
    "SharePointError",
    "SiteConfiguration",
    "Strategy",
    "UnauthorizedError",
    "UnknownError",
]
