"""Shared plumbing for console services."""

import logging
from typing import Any, Optional

import httpx

from ..config.constants import MediaTypes
from ..core.value_objects import ActionResponse, ServiceResult
from ..rest.dispatcher import AuthenticationDispatcher
from ..rest.normalizer import ResponseNormalizer
from ..rest.transport import HeadersInput

logger = logging.getLogger(__name__)


class BaseConsoleService:
    """Base class for services calling the REST API through the dispatcher."""

    def __init__(
        self,
        endpoint: str,
        dispatcher: AuthenticationDispatcher,
        normalizer: Optional[ResponseNormalizer] = None
    ):
        """
        Args:
            endpoint: Base URL of the REST API, e.g. ``http://host:11222/rest/v2``
            dispatcher: Dispatcher issuing the requests
            normalizer: Outcome normalizer, a default one when omitted
        """
        self.endpoint = endpoint.rstrip("/")
        self.dispatcher = dispatcher
        self.normalizer = normalizer or ResponseNormalizer()

    def url(self, path: str) -> str:
        return f"{self.endpoint}/{path.lstrip('/')}"

    async def fetch(
        self,
        path: str,
        method: str,
        error_message: str,
        accept: Optional[str] = None,
        custom_headers: Optional[HeadersInput] = None,
        body: Optional[str] = None,
        not_found_message: Optional[str] = None
    ) -> ServiceResult[httpx.Response]:
        """Issue a request and keep only ok responses.

        Non-ok responses and request errors become a failed ActionResponse;
        a 404 uses ``not_found_message`` when one is given.
        """
        try:
            response = await self.dispatcher.issue_request(
                self.url(path), method, accept, custom_headers, body
            )
        except Exception as e:
            logger.warning(f"{method} {path} failed: {e}")
            return ServiceResult.left(self.normalizer.map_error(e, error_message))

        if response.status_code == 404 and not_found_message:
            return ServiceResult.left(ActionResponse.failed(not_found_message))
        if not response.is_success:
            return ServiceResult.left(self.normalizer.map_error(response, error_message))
        return ServiceResult.right(response)

    async def fetch_json(self, path: str, error_message: str) -> ServiceResult[Any]:
        """GET a JSON document."""
        result = await self.fetch(path, "GET", error_message, accept=MediaTypes.JSON)
        if result.is_left():
            return result
        try:
            return ServiceResult.right(result.value.json())
        except ValueError:
            logger.warning(f"Response of {path} is not valid JSON")
            return ServiceResult.left(ActionResponse.failed(error_message))
