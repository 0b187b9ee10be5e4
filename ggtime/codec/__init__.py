"""
Codec Module - Session payloads for message transport.

encode() turns a GameSession into a ggtime://session URL.
decode() turns any input back into a GameSession, or None.
"""

from .encoding import (
    DATA_PARAM,
    HOST,
    SCHEME,
    QuickInfo,
    decode,
    encode,
    extract_quick_info,
    is_valid_payload,
)
from .schemas import WIRE_VERSION, ParticipantPayload, SessionPayload

__all__ = [
    "DATA_PARAM",
    "HOST",
    "SCHEME",
    "WIRE_VERSION",
    "QuickInfo",
    "decode",
    "encode",
    "extract_quick_info",
    "is_valid_payload",
    "ParticipantPayload",
    "SessionPayload",
]
