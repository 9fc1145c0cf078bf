"""
Transport strategies for console REST calls.

Two variants share one contract: ``TokenAuthTransport`` sends the request
directly with a bearer token and the session cookies, ``ChallengeResponseTransport``
hands it to the authentication capability's client, which runs the digest
handshake itself.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

import httpx

from ..config.constants import HeaderNames
from ..core.protocols import AuthenticationCapability, TokenIdentityProvider

logger = logging.getLogger(__name__)

HeadersInput = Union[httpx.Headers, Mapping[str, str]]

CREDENTIALS_INCLUDE = "include"


def mask_token(token: Optional[str]) -> str:
    """Return a token safe for logging."""
    if not token or len(token) <= 20:
        return "***"
    return f"{token[:8]}...{token[-8:]}"


def _header_pairs(headers: HeadersInput) -> Iterator[Tuple[str, str]]:
    """Header pairs with the caller's letter case; ``httpx.Headers`` lowercases ``items()``."""
    if isinstance(headers, httpx.Headers):
        for name, value in headers.raw:
            yield name.decode(headers.encoding), value.decode(headers.encoding)
    else:
        yield from headers.items()


class HttpxClientHolder:
    """Lazily created ``httpx.AsyncClient`` shared by every request of an owner."""

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        auth: Optional[httpx.Auth] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._auth = auth
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                verify=self._verify_ssl,
                auth=self._auth,
            )
        return self._client

    async def _send(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        client = self._get_client()
        return await client.request(
            options["method"],
            url,
            headers=options.get("headers"),
            content=options.get("body"),
        )

    async def aclose(self) -> None:
        """Close the client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


class RequestTransport(ABC):
    """Strategy that turns a console call into one HTTP request."""

    @abstractmethod
    def build_headers(
        self,
        accept: Optional[str] = None,
        custom_headers: Optional[HeadersInput] = None
    ) -> Any:
        """Headers for the outgoing request."""

    @abstractmethod
    def build_options(self, method: str, headers: Any, body: Optional[str] = None) -> Dict[str, Any]:
        """Request options; ``body`` is present only when non-empty."""

    @abstractmethod
    async def send(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        """Send a request built by ``build_options``."""

    async def issue(
        self,
        url: str,
        method: str,
        accept: Optional[str] = None,
        custom_headers: Optional[HeadersInput] = None,
        body: Optional[str] = None
    ) -> httpx.Response:
        """Build headers and options, then send the request.

        Connectivity errors propagate as ``httpx.TransportError``; a non-2xx
        status is returned as a regular response.
        """
        headers = self.build_headers(accept, custom_headers)
        options = self.build_options(method, headers, body)
        logger.debug(f"{type(self).__name__} {method} {url}")
        return await self.send(url, options)


class TokenAuthTransport(HttpxClientHolder, RequestTransport):
    """Direct transport carrying the bearer token and the session cookies."""

    def __init__(
        self,
        token_provider: TokenIdentityProvider,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(timeout=timeout, verify_ssl=verify_ssl, client=client)
        self.token_provider = token_provider

    def create_authenticated_headers(self) -> httpx.Headers:
        """Fresh headers with the stored bearer token when the provider is initialized."""
        headers = httpx.Headers()
        if self.token_provider.is_initialized():
            token = self.token_provider.get_token()
            logger.debug(f"Attaching bearer token {mask_token(token)}")
            headers[HeaderNames.AUTHORIZATION] = f"Bearer {token}"
        return headers

    def build_headers(
        self,
        accept: Optional[str] = None,
        custom_headers: Optional[HeadersInput] = None
    ) -> httpx.Headers:
        if custom_headers is not None:
            headers = httpx.Headers(custom_headers)
        else:
            headers = self.create_authenticated_headers()
        # Caller headers win over the computed Accept
        if accept and HeaderNames.ACCEPT not in headers:
            headers[HeaderNames.ACCEPT] = accept
        return headers

    def build_options(self, method: str, headers: Any, body: Optional[str] = None) -> Dict[str, Any]:
        options = {
            "method": method,
            "headers": headers,
            "credentials": CREDENTIALS_INCLUDE,
        }
        if body:
            options["body"] = body
        return options

    async def send(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        # The client cookie jar carries the session cookies on every call
        return await self._send(url, options)


class ChallengeResponseTransport(RequestTransport):
    """Transport delegating to the authentication capability's client."""

    def __init__(self, authentication: AuthenticationCapability):
        self.authentication = authentication

    def build_headers(
        self,
        accept: Optional[str] = None,
        custom_headers: Optional[HeadersInput] = None
    ) -> Dict[str, str]:
        # Plain mapping: the delegated client takes key/value pairs
        headers: Dict[str, str] = {}
        if accept:
            headers[HeaderNames.ACCEPT] = accept
        if custom_headers:
            for name, value in _header_pairs(custom_headers):
                for existing in [key for key in headers if key.lower() == name.lower()]:
                    del headers[existing]
                headers[name] = value
        return headers

    def build_options(self, method: str, headers: Any, body: Optional[str] = None) -> Dict[str, Any]:
        options = {
            "method": method,
            "headers": headers,
        }
        if body:
            options["body"] = body
        return options

    async def send(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        client = self.authentication.get_authenticated_client()
        return await client.fetch(url, options)
