"""
Message Layout - Text shown on a session's message bubble.

The bubble shows:
- caption: "Today at 7:30 PM"
- subcaption: "Alex is dropping in at 7:30 PM"
- trailing caption: a one-line roster summary
- summary text: what the conversation list shows for the message

Image rendering for the bubble belongs to the platform layer.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..session import GameSession


@dataclass(frozen=True)
class MessageLayout:
    """Captions for a message bubble."""
    caption: str
    subcaption: str
    trailing_caption: str


@dataclass(frozen=True)
class OutgoingMessage:
    """A message ready to be inserted into the conversation."""
    payload: str
    layout: MessageLayout
    summary_text: str
    session: GameSession


def build_layout(session: GameSession) -> MessageLayout:
    return MessageLayout(
        caption=f"{session.formatted_date} at {session.formatted_time}",
        subcaption=f"{session.host_name} is dropping in at {session.formatted_time}",
        trailing_caption=participants_summary(session),
    )


def participants_summary(session: GameSession) -> str:
    """
    One-line roster summary.

    Shows a single count, picked in order: confirmed, different time,
    maybe, can't join.
    """
    if session.confirmed_count > 0:
        return f"{session.confirmed_count} confirmed"
    if session.different_time_count > 0:
        return f"{session.different_time_count} different time"
    if session.maybe_count > 0:
        return f"{session.maybe_count} maybe"
    if session.cant_join_count > 0:
        return f"{session.cant_join_count} can't join"
    return "No one joined yet"


def invitation_summary(session: GameSession) -> str:
    """Summary text for a newly created session."""
    return f"{session.host_name} wants to play {session.game_name} at {session.formatted_time}"


def update_summary(session: GameSession) -> str:
    """Summary text for a session after someone responded."""
    if session.total_responses == 0:
        return f"{session.game_name} session at {session.formatted_time}"
    return f"{session.total_responses} people interested in {session.game_name}"


def friendly_name(identifier: str) -> str:
    """Fallback display name for a participant with no contact name."""
    return f"Player {identifier.upper()[:6]}"
