"""
Pydantic Schemas for API - Request/response models for OpenAPI.

The API is stateless: requests carry the payload of the message being
acted on and responses carry the payload of the replacement message.

Error Codes:
- INVALID_PAYLOAD: Payload does not decode to a session
- NO_SESSION: Request carried a blank payload, so there is no session to act on
- VALIDATION_ERROR: Request is well-formed JSON but semantically invalid
- INTERNAL_ERROR: Session could not be encoded
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..host import can_share
from ..session import GameSession, ParticipantStatus


# =============================================================================
# Enums
# =============================================================================

class ResponseAction(str, Enum):
    """What the viewer tapped on the session bubble."""
    JOIN = "join"
    MAYBE = "maybe"
    LEAVE = "leave"
    JOIN_AT_TIME = "join_at_time"
    CANT_JOIN = "cant_join"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    NO_SESSION = "NO_SESSION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class ParticipantInfo(BaseModel):
    """Participant information for display."""
    participant_id: str
    name: str
    status: ParticipantStatus
    joined_at: datetime
    join_time: Optional[datetime] = Field(None, description="Proposed time for differentTime")


class DifferentTimeInfo(BaseModel):
    name: str
    join_time: datetime


class SessionView(BaseModel):
    """Everything the session bubble renders."""
    session_id: str
    game_name: str
    host_name: str
    start_time: datetime
    created_at: datetime
    formatted_date: str
    formatted_time: str

    participants: list[ParticipantInfo] = Field(default_factory=list)
    confirmed_count: int = 0
    maybe_count: int = 0
    different_time_count: int = 0
    cant_join_count: int = 0
    confirmed_names: list[str] = Field(default_factory=list)
    maybe_names: list[str] = Field(default_factory=list)
    cant_join_names: list[str] = Field(default_factory=list)
    different_time: list[DifferentTimeInfo] = Field(default_factory=list)

    @classmethod
    def from_session(cls, session: GameSession) -> "SessionView":
        return cls(
            session_id=session.id,
            game_name=session.game_name,
            host_name=session.host_name,
            start_time=session.start_time,
            created_at=session.created_at,
            formatted_date=session.formatted_date,
            formatted_time=session.formatted_time,
            participants=[
                ParticipantInfo(
                    participant_id=p.id,
                    name=p.name,
                    status=p.status,
                    joined_at=p.joined_at,
                    join_time=p.join_time,
                )
                for p in session.participants
            ],
            confirmed_count=session.confirmed_count,
            maybe_count=session.maybe_count,
            different_time_count=session.different_time_count,
            cant_join_count=session.cant_join_count,
            confirmed_names=session.confirmed_names,
            maybe_names=session.maybe_names,
            cant_join_names=session.cant_join_names,
            different_time=[
                DifferentTimeInfo(name=name, join_time=join_time)
                for name, join_time in session.different_time_participants
            ],
        )


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """
    Request to propose a new gaming session.

    POST /api/v1/sessions
    """
    game_name: str = Field(..., description="Free text or a popular game label")
    start_time: datetime
    host_name: str = Field(..., description="Display name of the creator")

    @field_validator("game_name")
    @classmethod
    def game_name_not_blank(cls, value: str) -> str:
        if not can_share(value):
            raise ValueError("game_name must not be blank")
        return value


class RespondRequest(BaseModel):
    """
    Request to apply the viewer's response to a session.

    POST /api/v1/sessions/respond
    """
    payload: str = Field(..., description="Payload of the message being answered")
    viewer_name: str
    viewer_identity: Optional[str] = Field(
        None, description="Host participant identifier, used with identity keying"
    )
    action: ResponseAction
    join_time: Optional[datetime] = Field(None, description="Required for join_at_time")


class InspectRequest(BaseModel):
    """
    Request to decode a payload for display.

    POST /api/v1/sessions/inspect
    """
    payload: str


# =============================================================================
# Response Models
# =============================================================================

class MessageResponse(BaseModel):
    """A message ready to insert into the conversation."""
    payload: str
    caption: str
    subcaption: str
    trailing_caption: str
    summary_text: str
    session: SessionView
    api_version: str = "v1"


class ErrorResponse(BaseModel):
    """Structured error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
