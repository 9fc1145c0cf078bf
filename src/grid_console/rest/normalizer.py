"""Conversion of request outcomes into ActionResponse records.

This is the boundary past which raw exceptions do not travel: every public
method returns an ActionResponse, whatever happened to the request.
"""

import inspect
import logging
from typing import Any, Awaitable, Union

import httpx

from ..config.constants import LOGIN_FAILED_MESSAGE
from ..core.value_objects import (
    ActionResponse,
    ConnectivityFailure,
    Failure,
    HttpFailure,
    to_failure,
)

logger = logging.getLogger(__name__)


def _raw_text(raw: Any) -> str:
    """Text carried by an unclassified failure value."""
    text = getattr(raw, "text", None)
    if isinstance(text, str):
        return text
    return str(raw) if raw is not None else ""


def _text_attribute(raw: Any) -> str:
    """The ``text`` of a response-shaped value, empty for anything else."""
    text = getattr(raw, "text", None)
    return text if isinstance(text, str) else ""


class ResponseNormalizer:
    """Classifies responses and errors into ``ActionResponse``."""

    async def normalize_crud_result(
        self,
        success_message: str,
        response: Union[Awaitable[httpx.Response], httpx.Response]
    ) -> ActionResponse:
        """
        Handle the result of a create, update or delete call.

        Args:
            success_message: Message used when the server answers with an empty body
            response: Pending or completed response

        Returns:
            ActionResponse with the server body, the success message or the failure cause
        """
        try:
            if inspect.isawaitable(response):
                response = await response
            await response.aread()
            if response.is_success:
                text = response.text
                return ActionResponse.ok(text if text else success_message)
            failure = to_failure(response)
        except Exception as e:
            failure = to_failure(e)

        return self.describe_failure(failure)

    def describe_failure(self, failure: Failure) -> ActionResponse:
        """ActionResponse for a failure raised while performing a call."""
        if isinstance(failure, ConnectivityFailure):
            logger.warning(f"Request did not reach the server: {failure.description}")
            return ActionResponse.failed(failure.description)

        if isinstance(failure, HttpFailure):
            logger.warning(f"Request failed with status {failure.status}")
            message = failure.body or failure.status_text or f"HTTP {failure.status}"
            return ActionResponse.failed(message)

        logger.warning(f"Request failed: {failure.raw!r}")
        message = _raw_text(failure.raw) or type(failure.raw).__name__
        return ActionResponse.failed(message)

    def map_error(self, err: Any, fallback_message: str) -> ActionResponse:
        """
        Map an already caught error to an ActionResponse.

        Args:
            err: Exception, response or failure variant
            fallback_message: Message used when the error carries none

        Returns:
            Failed ActionResponse
        """
        failure = to_failure(err)

        if isinstance(failure, ConnectivityFailure):
            message = failure.message or fallback_message or failure.error_type
            return ActionResponse.failed(message)

        if isinstance(failure, HttpFailure):
            if failure.is_unauthorized:
                logger.info("Server rejected the credentials")
                return ActionResponse.failed(LOGIN_FAILED_MESSAGE)
            message = failure.body or fallback_message or failure.status_text or f"HTTP {failure.status}"
            return ActionResponse.failed(message)

        message = _text_attribute(failure.raw) or fallback_message or type(failure.raw).__name__
        return ActionResponse.failed(message)
