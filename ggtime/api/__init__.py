"""
API Module - HTTP interface over session payloads.

A client (chat bot, web companion, test harness):
1. Proposes a session and posts the returned payload to the conversation
2. Answers a session by sending its payload plus the viewer's action
3. Replaces the message with the returned payload

Nothing is stored server-side.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    RespondRequest,
    InspectRequest,
    # Responses
    MessageResponse,
    SessionView,
    ErrorResponse,
    HealthResponse,
    # Shared
    ParticipantInfo,
    DifferentTimeInfo,
    # Enums
    ResponseAction,
    ErrorCode,
)
from .service import PayloadService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "RespondRequest",
    "InspectRequest",
    # Responses
    "MessageResponse",
    "SessionView",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "ParticipantInfo",
    "DifferentTimeInfo",
    # Enums
    "ResponseAction",
    "ErrorCode",
    # Service
    "PayloadService",
    "create_app",
]
