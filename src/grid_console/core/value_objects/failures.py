"""Failure variants produced at the transport boundary.

Every error coming out of a request is converted once, by ``to_failure``, into
one of three cases so that classification downstream is a closed set of
checks instead of probing arbitrary exception types.
"""

from dataclasses import dataclass
from typing import Any, Union

import httpx


@dataclass(frozen=True)
class ConnectivityFailure:
    """The request never produced a response (DNS, refused connection, timeout)."""

    message: str
    error_type: str = "ConnectivityFailure"

    @property
    def description(self) -> str:
        """Non-empty description of the failure."""
        return self.message or self.error_type


@dataclass(frozen=True)
class HttpFailure:
    """The server answered with a non-2xx status."""

    status: int
    status_text: str
    body: str

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401


@dataclass(frozen=True)
class OtherFailure:
    """Anything that is neither a connectivity error nor an HTTP response."""

    raw: Any


Failure = Union[ConnectivityFailure, HttpFailure, OtherFailure]


def read_text(response: httpx.Response) -> str:
    """Return the response body text, or an empty string when it was never read."""
    try:
        return response.text
    except httpx.ResponseNotRead:
        return ""


def from_response(response: httpx.Response) -> HttpFailure:
    """Build an HttpFailure from a response whose body has been read."""
    return HttpFailure(
        status=response.status_code,
        status_text=response.reason_phrase,
        body=read_text(response),
    )


def to_failure(err: Any) -> Failure:
    """Classify a raised value or a non-ok response into a failure variant."""
    if isinstance(err, (ConnectivityFailure, HttpFailure, OtherFailure)):
        return err
    if isinstance(err, httpx.Response):
        return from_response(err)
    if isinstance(err, httpx.HTTPStatusError):
        return from_response(err.response)
    if isinstance(err, httpx.TransportError):
        return ConnectivityFailure(message=str(err), error_type=type(err).__name__)
    return OtherFailure(raw=err)
