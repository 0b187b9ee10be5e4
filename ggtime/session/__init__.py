"""
Session Module - The gaming session value model.

A session represents one proposed play-through:
- Created when the host submits a game and a start time
- Carries the roster of people who responded
- Travels inside the message payload; nothing is stored elsewhere

Sessions are VALUES:
- Every change produces a new GameSession
- Participants are keyed by display name (identity keying is opt-in)
"""

from .model import (
    GameSession,
    Participant,
    ParticipantKey,
    ParticipantStatus,
    format_date,
    format_time,
    utc_now,
)

__all__ = [
    "GameSession",
    "Participant",
    "ParticipantKey",
    "ParticipantStatus",
    "format_date",
    "format_time",
    "utc_now",
]
