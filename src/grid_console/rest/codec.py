"""Mapping between logical content types and wire media types."""

import json
import logging
from typing import Optional

from ..config.constants import ContentType, MediaTypes

logger = logging.getLogger(__name__)


_JAVA_OBJECT_TYPES = frozenset({
    ContentType.STRING,
    ContentType.DOUBLE,
    ContentType.INTEGER,
    ContentType.LONG,
    ContentType.BOOLEAN,
})

_MEDIA_TYPES = {
    ContentType.OCTET_STREAM: MediaTypes.OCTET_STREAM,
    ContentType.OCTET_STREAM_HEX: MediaTypes.OCTET_STREAM_HEX,
    ContentType.JSON: MediaTypes.JSON,
    ContentType.XML: MediaTypes.XML,
}

# Exact matches checked in this order
_FROM_MEDIA_TYPES = (
    (MediaTypes.OCTET_STREAM, ContentType.OCTET_STREAM),
    (MediaTypes.OCTET_STREAM_HEX, ContentType.OCTET_STREAM_HEX),
    (MediaTypes.JSON, ContentType.JSON),
    (MediaTypes.XML, ContentType.XML),
)

_SCHEMA_PRIMITIVES = {
    "string": ContentType.STRING,
    "float": ContentType.FLOAT,
    "double": ContentType.DOUBLE,
    "int32": ContentType.INTEGER,
    "uint32": ContentType.INTEGER,
    "sint32": ContentType.INTEGER,
    "fixed32": ContentType.INTEGER,
    "sfixed32": ContentType.INTEGER,
    "int64": ContentType.LONG,
    "uint64": ContentType.LONG,
    "sint64": ContentType.LONG,
    "fixed64": ContentType.LONG,
    "sfixed64": ContentType.LONG,
    "bool": ContentType.BOOLEAN,
}


class ContentTypeCodec:
    """Stateless translation of content types to and from their wire form.

    Used to fill the ``Key-Content-Type`` and ``Content-Type`` headers of
    cache requests and to interpret the ones the server sends back.
    """

    @staticmethod
    def to_wire_representation(content_type: ContentType) -> str:
        """Media type string for a content type.

        Float and Bytes have no wire form; they are logged and mapped to an
        empty string.
        """
        if content_type in _JAVA_OBJECT_TYPES:
            return MediaTypes.JAVA_OBJECT_PREFIX + content_type.value
        media_type = _MEDIA_TYPES.get(content_type)
        if media_type is None:
            logger.warning(f"Content type not mapped {content_type}")
            return ""
        return media_type

    @staticmethod
    def from_wire_representation(
        header: Optional[str],
        fallback: Optional[ContentType] = None
    ) -> ContentType:
        """Content type for a media type header value.

        Args:
            header: Header value as received, possibly missing
            fallback: Content type returned when the header is missing

        Returns:
            The matching content type, String when nothing matches
        """
        if header is None:
            return fallback if fallback else ContentType.STRING

        if header.startswith(MediaTypes.JAVA_OBJECT_PREFIX):
            type_name = header[len(MediaTypes.JAVA_OBJECT_PREFIX):]
            try:
                return ContentType(type_name)
            except ValueError:
                logger.warning(f"Unknown java object type {type_name}, using String")
                return ContentType.STRING

        for media_type, content_type in _FROM_MEDIA_TYPES:
            if header == media_type:
                return content_type

        return ContentType.STRING

    @staticmethod
    def from_schema_primitive(primitive_name: str) -> ContentType:
        """Content type for a Protobuf scalar type name; unknown names map to String."""
        return _SCHEMA_PRIMITIVES.get(primitive_name, ContentType.STRING)

    @staticmethod
    def is_json_object(value: str) -> bool:
        """Whether ``value`` is a JSON object carrying a ``_type`` field.

        Protobuf entries are rendered by the server as such objects.
        """
        try:
            parsed = json.loads(value)
        except (TypeError, ValueError):
            return False
        return isinstance(parsed, dict) and bool(parsed.get("_type"))
