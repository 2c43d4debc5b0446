"""Exception taxonomy for SharePoint REST calls and the response classifier."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)

DEFAULT_NOT_FOUND_MESSAGE = "The resource does not exist."


class SharePointError(Exception):
    """Base exception for SharePoint operations.

    Catch this to handle every typed failure raised by the connector.
    Transport failures (``requests.RequestException``) are not wrapped.
    """

    status_code: int | None = None

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(*([message] if message else []))
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(SharePointError):
    """The addressed folder, file or recycle-bin item does not exist (404)."""

    status_code = 404


class BadRequestError(SharePointError):
    """The site rejected the request as malformed (400)."""

    status_code = 400


class UnauthorizedError(SharePointError):
    """Token acquisition failed or the token was rejected (401)."""

    status_code = 401


class InternalServerError(SharePointError):
    """The site reported an internal failure (500)."""

    status_code = 500


class UnknownError(SharePointError):
    """Any other non-success status."""


def _dig(payload: Any, *keys: str) -> str | None:
    """Follow ``keys`` through nested dicts, returning a non-empty string or None."""
    node = payload
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if isinstance(node, str) and node:
        return node
    return None


def classify_response(response: "requests.Response") -> NoReturn:
    """Raise the typed error matching a failed response.

    Only call this for non-success responses. An empty or non-JSON body
    re-raises the transport error from ``raise_for_status``, except for 404
    which always maps to :class:`NotFoundError`. For 401 and 500
    a typed error is raised only when a message can be extracted; otherwise
    the transport error is raised instead.

    Args:
        response: The failed HTTP response.

    Raises:
        NotFoundError: On 404.
        BadRequestError: On 400.
        UnauthorizedError: On 401 with an ``error_description``.
        InternalServerError: On 500 with an ``error.message.value``.
        UnknownError: On any other status.
        requests.HTTPError: When no typed error applies.
    """
    status = response.status_code
    logger.warning("SharePoint request failed with status %s: %s", status, response.url)

    body = response.text
    payload: Any = None
    if body:
        try:
            payload = json.loads(body)
        except ValueError:
            logger.debug("Non-JSON error body for status %s", status)

    if payload is None:
        if status == 404:
            raise NotFoundError(DEFAULT_NOT_FOUND_MESSAGE)
        response.raise_for_status()
        raise UnknownError(status_code=status)

    if status == 404:
        message = (
            _dig(payload, "error", "message", "value")
            or _dig(payload, "odata.error", "message", "value")
            or DEFAULT_NOT_FOUND_MESSAGE
        )
        raise NotFoundError(message)

    if status == 400:
        raise BadRequestError(_dig(payload, "error_description"))

    if status == 401:
        description = _dig(payload, "error_description")
        if description:
            raise UnauthorizedError(description)
        response.raise_for_status()

    elif status == 500:
        message = _dig(payload, "error", "message", "value")
        if message:
            raise InternalServerError(message)
        response.raise_for_status()

    raise UnknownError(status_code=status)
