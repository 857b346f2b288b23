"""
MAIS Person API exceptions.

Raised by the transport for non-success responses. A 404 on an endpoint
that allows it is not an error: the client returns None instead.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class MaisError(Exception):
    """Base error for unexpected MAIS Person API responses."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnauthorizedError(MaisError):
    """The API rejected the client certificate (401 Unauthorized)."""

    pass


class ServerError(MaisError):
    """The API failed internally (500 Internal Server Error)."""

    pass


class UnexpectedResponseError(MaisError):
    """Any other non-success status."""

    pass


def raise_for_response(response: httpx.Response) -> None:
    """
    Raise the MaisError subclass matching a non-success response.

    Raises:
        UnauthorizedError: On 401
        ServerError: On 500
        UnexpectedResponseError: On any other status
    """
    status = response.status_code
    body = response.text

    if status == 401:
        logger.error(f"MAIS authentication failed for {response.request.url}")
        raise UnauthorizedError(
            f"There was a problem with authentication: {body}",
            status_code=status,
            body=body
        )

    if status == 500:
        logger.error(f"MAIS server error for {response.request.url}")
        raise ServerError(
            f"Mais server error: {body}",
            status_code=status,
            body=body
        )

    logger.error(f"Unexpected MAIS response {status} for {response.request.url}")
    raise UnexpectedResponseError(
        f"Unexpected response: {status} {body}",
        status_code=status,
        body=body
    )
