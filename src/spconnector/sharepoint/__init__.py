"""SharePoint REST data connector.

Public API:
- SharePointDataClient (facade)
- DataContext (protocol)
- Folder, File, RecycleBinResource, NIL_ID (models)
- SharePointError and its subclasses
"""

from .errors import (
    BadRequestError,
    InternalServerError,
    NotFoundError,
    SharePointError,
    UnauthorizedError,
    UnknownError,
    classify_response,
)
from .models import NIL_ID, File, Folder, RecycleBinResource
from .request import HeaderProfile, RequestBuilder
from .client import SharePointDataClient
from .interfaces import DataContext

__all__ = [
    "BadRequestError",
    "DataContext",
    "File",
    "Folder",
    "HeaderProfile",
    "InternalServerError",
    "NIL_ID",
    "NotFoundError",
    "RecycleBinResource",
    "RequestBuilder",
    "SharePointDataClient",
    "SharePointError",
    "UnauthorizedError",
    "UnknownError",
    "classify_response",
]
