"""
Pytest fixtures for GG Time tests.
"""

import pytest
from datetime import datetime, timedelta, timezone

from ..session import GameSession, Participant, ParticipantStatus, utc_now


@pytest.fixture
def start_time() -> datetime:
    """A start time one hour from now, at wire precision."""
    return utc_now() + timedelta(hours=1)


@pytest.fixture
def empty_session(start_time: datetime) -> GameSession:
    """Session nobody has answered yet."""
    return GameSession.create(
        game_name="Valorant",
        start_time=start_time,
        host_name="Alex",
    )


@pytest.fixture
def full_roster_session(start_time: datetime) -> GameSession:
    """Session with one participant in every status."""
    reacted = datetime(2030, 1, 1, 17, 0, tzinfo=timezone.utc)
    return GameSession(
        game_name="League of Legends",
        start_time=start_time,
        host_name="Alex",
        participants=(
            Participant(name="Sam", status=ParticipantStatus.CONFIRMED, joined_at=reacted),
            Participant(name="Jordan", status=ParticipantStatus.MAYBE, joined_at=reacted),
            Participant(
                name="Riley",
                status=ParticipantStatus.DIFFERENT_TIME,
                joined_at=reacted,
                join_time=start_time + timedelta(hours=2),
            ),
            Participant(name="Casey", status=ParticipantStatus.CANT_JOIN, joined_at=reacted),
        ),
        created_at=datetime(2030, 1, 1, 16, 0, tzinfo=timezone.utc),
    )
