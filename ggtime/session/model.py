"""
Game Session - Value record for a proposed gaming session and its roster.

Design principles:
- Immutable: every change returns a new GameSession
- Serializable: every field round-trips through the message payload
- Name-keyed: participants are looked up by display name unless the
  caller opts into identity keying

The session carries no persistence of its own. Its durable lifetime is the
payload attached to the message that was last sent.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
import uuid


class ParticipantStatus(str, Enum):
    """How a participant responded to the session."""
    CONFIRMED = "confirmed"  # Definitely joining
    MAYBE = "maybe"  # Might join
    DIFFERENT_TIME = "differentTime"  # Joining at a time they proposed
    CANT_JOIN = "cantJoin"  # Declined


class ParticipantKey(Enum):
    """Which field identifies a participant during add/update/remove."""
    NAME = "name"
    IDENTITY = "identity"


def utc_now() -> datetime:
    """Current time, UTC, truncated to whole seconds (the wire precision)."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def new_id() -> str:
    return str(uuid.uuid4()).upper()


def _as_aware(moment: datetime | None) -> datetime | None:
    # Naive datetimes are local time
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.astimezone()


@dataclass(frozen=True)
class Participant:
    """
    One respondent to a session.

    joined_at records when the participant reacted. join_time is only
    meaningful for DIFFERENT_TIME and holds the start time they proposed.
    """
    name: str
    status: ParticipantStatus
    id: str = field(default_factory=new_id)
    joined_at: datetime = field(default_factory=utc_now)
    join_time: datetime | None = None
    identity: str | None = None  # Caller-assigned, e.g. host participant id

    def __post_init__(self):
        object.__setattr__(self, "joined_at", _as_aware(self.joined_at))
        object.__setattr__(self, "join_time", _as_aware(self.join_time))

    def matches(
        self,
        name: str,
        identity: str | None = None,
        key: ParticipantKey = ParticipantKey.NAME,
    ) -> bool:
        """Check whether this participant is the one named by name/identity."""
        if key == ParticipantKey.IDENTITY and identity is not None:
            return self.identity == identity
        return self.name == name

    def with_status(
        self,
        status: ParticipantStatus,
        join_time: datetime | None = None,
        name: str | None = None,
    ) -> Participant:
        """Return participant with new status, keeping id and joined_at."""
        return Participant(
            name=name if name is not None else self.name,
            status=status,
            id=self.id,
            joined_at=self.joined_at,
            join_time=join_time if status == ParticipantStatus.DIFFERENT_TIME else None,
            identity=self.identity,
        )


@dataclass(frozen=True)
class GameSession:
    """
    A gaming session proposed in a conversation.

    Timestamps are always timezone-aware; naive values passed in are taken
    as local time. All "mutations" return a new GameSession; callers keep passing the latest
    value forward.
    """
    game_name: str
    start_time: datetime
    host_name: str
    id: str = field(default_factory=new_id)
    participants: tuple[Participant, ...] = ()
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        # Accept any iterable of participants but always store a tuple
        if not isinstance(self.participants, tuple):
            object.__setattr__(self, "participants", tuple(self.participants))
        object.__setattr__(self, "start_time", _as_aware(self.start_time))
        object.__setattr__(self, "created_at", _as_aware(self.created_at))

    @classmethod
    def create(cls, game_name: str, start_time: datetime, host_name: str) -> GameSession:
        """Create a brand new session with a fresh id and creation time."""
        return cls(game_name=game_name, start_time=start_time, host_name=host_name)

    # =========================================================================
    # Participant management
    # =========================================================================

    def add_or_update_participant(
        self,
        name: str,
        status: ParticipantStatus,
        join_time: datetime | None = None,
        *,
        identity: str | None = None,
        key: ParticipantKey = ParticipantKey.NAME,
    ) -> GameSession:
        """
        Add a participant, or update the status of an existing one.

        An existing participant keeps its id and joined_at. A new participant
        gets a fresh id and the current time as joined_at.
        """
        new_participants = list(self.participants)

        for idx, p in enumerate(new_participants):
            if p.matches(name, identity, key):
                new_participants[idx] = p.with_status(status, join_time, name=name)
                break
        else:
            new_participants.append(Participant(
                name=name,
                status=status,
                join_time=join_time if status == ParticipantStatus.DIFFERENT_TIME else None,
                identity=identity,
            ))

        return self._copy_with(participants=tuple(new_participants))

    def remove_participant(
        self,
        name: str,
        *,
        identity: str | None = None,
        key: ParticipantKey = ParticipantKey.NAME,
    ) -> GameSession:
        """Return session without the matching participant (no-op if absent)."""
        return self._copy_with(participants=tuple(
            p for p in self.participants
            if not p.matches(name, identity, key)
        ))

    def has_participant(self, name: str) -> bool:
        return any(p.name == name for p in self.participants)

    def participant_status(self, name: str) -> ParticipantStatus | None:
        """Status of the participant with this exact name, or None."""
        for p in self.participants:
            if p.name == name:
                return p.status
        return None

    # =========================================================================
    # Derived roster views
    # =========================================================================

    def _with_status(self, status: ParticipantStatus) -> list[Participant]:
        return [p for p in self.participants if p.status == status]

    @property
    def confirmed_count(self) -> int:
        return len(self._with_status(ParticipantStatus.CONFIRMED))

    @property
    def maybe_count(self) -> int:
        return len(self._with_status(ParticipantStatus.MAYBE))

    @property
    def different_time_count(self) -> int:
        return len(self._with_status(ParticipantStatus.DIFFERENT_TIME))

    @property
    def cant_join_count(self) -> int:
        return len(self._with_status(ParticipantStatus.CANT_JOIN))

    @property
    def total_responses(self) -> int:
        return len(self.participants)

    @property
    def confirmed_names(self) -> list[str]:
        return [p.name for p in self._with_status(ParticipantStatus.CONFIRMED)]

    @property
    def maybe_names(self) -> list[str]:
        return [p.name for p in self._with_status(ParticipantStatus.MAYBE)]

    @property
    def cant_join_names(self) -> list[str]:
        return [p.name for p in self._with_status(ParticipantStatus.CANT_JOIN)]

    @property
    def different_time_participants(self) -> list[tuple[str, datetime]]:
        """(name, proposed time) pairs, in roster order."""
        return [
            (p.name, p.join_time if p.join_time is not None else p.joined_at)
            for p in self._with_status(ParticipantStatus.DIFFERENT_TIME)
        ]

    # =========================================================================
    # Display formatting
    # =========================================================================

    @property
    def formatted_time(self) -> str:
        """Short local time of day, e.g. "7:30 PM"."""
        return format_time(self.start_time)

    @property
    def formatted_date(self) -> str:
        """"Today", "Tomorrow", or an abbreviated date like "Dec 25"."""
        return format_date(self.start_time)

    def _copy_with(self, **kwargs) -> GameSession:
        """Create a copy with some fields replaced."""
        return GameSession(
            game_name=kwargs.get("game_name", self.game_name),
            start_time=kwargs.get("start_time", self.start_time),
            host_name=kwargs.get("host_name", self.host_name),
            id=kwargs.get("id", self.id),
            participants=kwargs.get("participants", self.participants),
            created_at=kwargs.get("created_at", self.created_at),
        )


def _local(moment: datetime) -> datetime:
    # Naive datetimes are taken to already be local time
    return moment.astimezone() if moment.tzinfo is not None else moment


def format_time(moment: datetime) -> str:
    local = _local(moment)
    return local.strftime("%I:%M %p").lstrip("0")


def format_date(moment: datetime, now: datetime | None = None) -> str:
    """
    Calendar-day label relative to now.

    Evaluated against the current clock on every call, so the label for a
    fixed moment changes as days pass.
    """
    today = _local(now or datetime.now().astimezone()).date()
    day = _local(moment).date()

    if day == today:
        return "Today"
    if day == today + timedelta(days=1):
        return "Tomorrow"
    return f"{_local(moment):%b} {day.day}"
