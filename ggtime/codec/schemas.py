"""
Wire Schemas - Pydantic models for the JSON carried inside a payload.

These models define the exact field set that travels in a message:
- camelCase field names (the format the messaging extension always used)
- ISO-8601 UTC timestamps with a "Z" suffix, whole seconds; every
  timestamp is normalised to UTC at validation time
- Optional fields tolerated when absent, unknown fields ignored

Version handling:
- Encoders write "version": WIRE_VERSION
- Payloads without a version (the original format) are accepted
- Payloads from a newer wire version are rejected
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from ..session import GameSession, Participant, ParticipantStatus


WIRE_VERSION = 1


def _to_utc(value: datetime) -> datetime:
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as e:
        # Offsets near datetime.min/max push the UTC value out of range
        raise ValueError("timestamp out of range in UTC") from e


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


Timestamp = Annotated[
    AwareDatetime,
    AfterValidator(_to_utc),
    PlainSerializer(_format_timestamp, return_type=str),
]


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ParticipantPayload(WireModel):
    """A participant as it appears in the payload."""
    id: str
    name: str
    status: ParticipantStatus
    joined_at: Timestamp
    join_time: Optional[Timestamp] = Field(
        None, description="Proposed start time, only for differentTime"
    )
    identity: Optional[str] = None

    @classmethod
    def from_participant(cls, participant: Participant) -> ParticipantPayload:
        return cls(
            id=participant.id,
            name=participant.name,
            status=participant.status,
            joined_at=participant.joined_at,
            join_time=participant.join_time,
            identity=participant.identity,
        )

    def to_participant(self) -> Participant:
        return Participant(
            id=self.id,
            name=self.name,
            status=self.status,
            joined_at=self.joined_at,
            join_time=self.join_time,
            identity=self.identity,
        )


class SessionPayload(WireModel):
    """The complete session as it appears in the payload."""
    version: Optional[int] = Field(None, ge=1, le=WIRE_VERSION)
    id: str
    game_name: str
    start_time: Timestamp
    host_name: str
    created_at: Timestamp
    participants: list[ParticipantPayload]

    @classmethod
    def from_session(cls, session: GameSession) -> SessionPayload:
        return cls(
            version=WIRE_VERSION,
            id=session.id,
            game_name=session.game_name,
            start_time=session.start_time,
            host_name=session.host_name,
            created_at=session.created_at,
            participants=[
                ParticipantPayload.from_participant(p) for p in session.participants
            ],
        )

    def to_session(self) -> GameSession:
        return GameSession(
            id=self.id,
            game_name=self.game_name,
            start_time=self.start_time,
            host_name=self.host_name,
            created_at=self.created_at,
            participants=tuple(p.to_participant() for p in self.participants),
        )
