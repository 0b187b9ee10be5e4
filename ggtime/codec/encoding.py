"""
Message Encoding - Session <-> payload URL.

Payload shape:
    ggtime://session?data=<base64 of the session JSON>

Every message is self-describing: the payload carries the whole session,
roster included, so any recipient can rebuild it with no backend.

Decoding is total over untrusted input. Anything that is not a well-formed
payload yields None; nothing here raises for bad input.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from urllib.parse import quote, unquote, urlsplit
import base64
import binascii
import logging

from pydantic import ValidationError

from ..session import GameSession
from .schemas import SessionPayload


logger = logging.getLogger(__name__)

SCHEME = "ggtime"
HOST = "session"
DATA_PARAM = "data"


@dataclass(frozen=True)
class QuickInfo:
    """Just enough of a session to label a message preview."""
    game_name: str
    start_time: datetime


# =============================================================================
# Encoding
# =============================================================================

def encode(session: GameSession) -> str | None:
    """
    Encode a session into a payload URL.

    Returns None if the session cannot be serialized.
    """
    try:
        json_bytes = SessionPayload.from_session(session).model_dump_json(
            by_alias=True,
            exclude_none=True,
        ).encode("utf-8")
    except (ValidationError, ValueError) as e:
        logger.error("Failed to encode session %s: %s", session.id, e)
        return None

    blob = base64.b64encode(json_bytes).decode("ascii")
    payload = f"{SCHEME}://{HOST}?{DATA_PARAM}={quote(blob, safe='')}"

    logger.debug("Encoded session %s (%d bytes)", session.game_name, len(payload))
    return payload


# =============================================================================
# Decoding
# =============================================================================

def decode(payload: Any) -> GameSession | None:
    """
    Decode a payload URL back into a session.

    Returns None when the payload is missing, has the wrong scheme or host,
    lacks the data parameter, carries malformed base64, or does not parse
    into a session.
    """
    if payload is None:
        logger.debug("No payload provided for decoding")
        return None

    if not isinstance(payload, str):
        logger.debug("Payload is not a string: %r", type(payload))
        return None

    # urlsplit lowercases the scheme; the prefix check keeps it case-exact
    if not payload.startswith(f"{SCHEME}://"):
        logger.debug("Invalid payload scheme: %.32s", payload)
        return None

    try:
        parts = urlsplit(payload)
    except ValueError:
        logger.debug("Unparseable payload URL")
        return None

    if parts.netloc != HOST:
        logger.debug("Invalid payload scheme or host: %s://%s", parts.scheme, parts.netloc)
        return None

    blob = _query_value(parts.query, DATA_PARAM)
    if blob is None:
        logger.debug("Payload has no %r query parameter", DATA_PARAM)
        return None

    try:
        json_bytes = base64.b64decode(blob, validate=True)
    except (binascii.Error, ValueError):
        logger.debug("Payload data is not valid base64")
        return None

    try:
        session = SessionPayload.model_validate_json(json_bytes).to_session()
    except (ValidationError, ValueError) as e:
        logger.debug("Payload data is not a valid session: %s", e)
        return None

    logger.debug("Decoded session %s", session.game_name)
    return session


def _query_value(query: str, name: str) -> str | None:
    """
    First value of a query parameter.

    Values are percent-decoded but "+" is kept literally, since it is part
    of the base64 alphabet rather than an encoded space.
    """
    for item in query.split("&"):
        key, sep, value = item.partition("=")
        if unquote(key) == name and sep:
            return unquote(value)
    return None


# =============================================================================
# Validation and previews
# =============================================================================

def is_valid_payload(payload: Any) -> bool:
    """Check whether a payload decodes to a session."""
    return decode(payload) is not None


def extract_quick_info(payload: Any) -> QuickInfo | None:
    """
    Game name and start time of a payload.

    Performs a full decode, so it accepts and rejects exactly what decode does.
    """
    session = decode(payload)
    if session is None:
        return None
    return QuickInfo(game_name=session.game_name, start_time=session.start_time)
