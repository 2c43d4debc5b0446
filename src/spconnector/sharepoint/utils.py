from __future__ import annotations

from urllib.parse import quote

# Encoded so that URL normalisation in requests/urllib3 keeps them verbatim.
_DOT_SEGMENTS = {".": "%2E", "..": "%2E%2E"}


def join_server_relative(root: str, path: str = "", name: str | None = None) -> str:
    """Append a caller path (and optional leaf name) to the configured root.

    The root is used verbatim, so ``/sites/X/Docs/`` + ``Reports`` gives
    ``/sites/X/Docs/Reports``.
    """
    url = f"{root}{path}"
    if name is not None:
        url = f"{url}/{name}"
    return url


def odata_literal(value: str) -> str:
    # Single quotes are escaped by doubling inside OData string literals.
    return value.replace("'", "''")


def url_literal(value: str) -> str:
    """Escape ``value`` for use as an OData string literal inside a request path.

    Quotes are doubled, then everything outside ``/`` and ``'`` that is not
    URL-safe is percent-encoded, so ``#``, ``?`` and ``%`` in names reach the
    site instead of cutting the URL short. ``.`` and ``..`` segments are
    encoded too and are not resolved against the rest of the path.
    """
    encoded = quote(odata_literal(value), safe="/'")
    return "/".join(_DOT_SEGMENTS.get(segment, segment) for segment in encoded.split("/"))


def folder_endpoint(server_relative_url: str) -> str:
    return f"_api/web/GetFolderByServerRelativeUrl('{url_literal(server_relative_url)}')"


def file_endpoint(server_relative_url: str, file_name: str) -> str:
    return f"{folder_endpoint(server_relative_url)}/files('{url_literal(file_name)}')"


def recycle_bin_endpoint(resource_id: object) -> str:
    return f"_api/web/recyclebin('{resource_id}')"
