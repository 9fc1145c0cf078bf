"""REST access layer: dispatch, content types, Protobuf detection, outcome normalization."""

from .codec import ContentTypeCodec
from .dispatcher import AuthenticationDispatcher
from .normalizer import ResponseNormalizer
from .protobuf import ProtobufCacheDetector, lookup_path
from .transport import (
    ChallengeResponseTransport,
    HttpxClientHolder,
    RequestTransport,
    TokenAuthTransport,
)

__all__ = [
    "ContentTypeCodec",
    "AuthenticationDispatcher",
    "ResponseNormalizer",
    "ProtobufCacheDetector",
    "lookup_path",
    "ChallengeResponseTransport",
    "HttpxClientHolder",
    "RequestTransport",
    "TokenAuthTransport",
]
