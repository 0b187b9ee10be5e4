"""
Tests for the session model.

Tests:
- Construction
- Add/update/remove participants
- Roster counts and name lists
- Identity keying
- Date and time labels
"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta

from ..session import (
    GameSession,
    Participant,
    ParticipantKey,
    ParticipantStatus,
    format_date,
    utc_now,
)


class TestSessionCreation:
    """Tests for creating sessions."""

    def test_create_session(self, start_time):
        """New session has the given details and no participants."""
        session = GameSession.create("Valorant", start_time, "TestPlayer")

        assert session.game_name == "Valorant"
        assert session.start_time == start_time
        assert session.host_name == "TestPlayer"
        assert session.participants == ()
        assert session.id

    def test_sessions_get_distinct_ids(self, start_time):
        first = GameSession.create("Valorant", start_time, "Alex")
        second = GameSession.create("Valorant", start_time, "Alex")
        assert first.id != second.id

    def test_participants_stored_as_tuple(self, start_time):
        """Any iterable of participants is accepted."""
        session = GameSession(
            game_name="Minecraft",
            start_time=start_time,
            host_name="Host",
            participants=[
                Participant(name="Player1", status=ParticipantStatus.CONFIRMED),
                Participant(name="Player2", status=ParticipantStatus.MAYBE),
            ],
        )
        assert isinstance(session.participants, tuple)
        assert session.confirmed_count == 1
        assert session.maybe_count == 1

    def test_session_is_immutable(self, empty_session):
        with pytest.raises(FrozenInstanceError):
            empty_session.game_name = "Fortnite"

    def test_past_start_time_allowed(self):
        """The model does not force future start times."""
        yesterday = utc_now() - timedelta(days=1)
        session = GameSession.create("Fortnite", yesterday, "Host")
        assert session.start_time == yesterday

    def test_naive_times_become_local_aware(self):
        naive = datetime(2030, 6, 1, 19, 30)
        session = GameSession.create("Rocket League", naive, "Host")
        participant = Participant("Sam", ParticipantStatus.DIFFERENT_TIME,
                                  joined_at=naive, join_time=naive)

        assert session.start_time.tzinfo is not None
        assert session.start_time == naive.astimezone()
        assert participant.joined_at.tzinfo is not None
        assert participant.join_time == naive.astimezone()


class TestParticipantManagement:
    """Tests for add/update/remove."""

    def test_add_new_participant(self, empty_session):
        """Adding returns a new session; the original is untouched."""
        updated = empty_session.add_or_update_participant("NewPlayer", ParticipantStatus.CONFIRMED)

        assert len(updated.participants) == 1
        assert updated.participants[0].name == "NewPlayer"
        assert updated.participants[0].status == ParticipantStatus.CONFIRMED
        assert empty_session.participants == ()
        assert updated.id == empty_session.id
        assert updated.created_at == empty_session.created_at

    def test_add_is_idempotent(self, empty_session):
        """Adding the same name twice keeps one participant and its id."""
        once = empty_session.add_or_update_participant("A", ParticipantStatus.CONFIRMED)
        twice = once.add_or_update_participant("A", ParticipantStatus.CONFIRMED)

        assert len(twice.participants) == 1
        assert twice.participants[0].status == ParticipantStatus.CONFIRMED
        assert twice.participants[0].id == once.participants[0].id

    def test_status_change_preserves_identity(self, empty_session):
        """Updating status keeps id and joined_at and shifts the counts."""
        as_maybe = empty_session.add_or_update_participant("A", ParticipantStatus.MAYBE)
        assert as_maybe.maybe_count == 1
        assert as_maybe.confirmed_count == 0

        confirmed = as_maybe.add_or_update_participant("A", ParticipantStatus.CONFIRMED)

        assert confirmed.maybe_count == 0
        assert confirmed.confirmed_count == 1
        assert confirmed.participants[0].id == as_maybe.participants[0].id
        assert confirmed.participants[0].joined_at == as_maybe.participants[0].joined_at

    def test_name_matching_is_case_sensitive(self, empty_session):
        session = (
            empty_session
            .add_or_update_participant("sam", ParticipantStatus.CONFIRMED)
            .add_or_update_participant("Sam", ParticipantStatus.MAYBE)
        )
        assert len(session.participants) == 2

    def test_add_with_different_time(self, empty_session, start_time):
        later = start_time + timedelta(hours=1)
        session = empty_session.add_or_update_participant(
            "LatePlayer", ParticipantStatus.DIFFERENT_TIME, later
        )

        assert session.different_time_count == 1
        assert session.different_time_participants == [("LatePlayer", later)]

    def test_join_time_ignored_for_other_statuses(self, empty_session, start_time):
        session = empty_session.add_or_update_participant(
            "Sam", ParticipantStatus.CONFIRMED, start_time
        )
        assert session.participants[0].join_time is None

    def test_leaving_different_time_clears_join_time(self, empty_session, start_time):
        session = (
            empty_session
            .add_or_update_participant("Sam", ParticipantStatus.DIFFERENT_TIME, start_time)
            .add_or_update_participant("Sam", ParticipantStatus.CONFIRMED)
        )
        assert session.participants[0].join_time is None
        assert session.different_time_participants == []

    def test_remove_participant(self, full_roster_session):
        updated = full_roster_session.remove_participant("Sam")

        assert len(updated.participants) == 3
        assert not updated.has_participant("Sam")
        assert full_roster_session.has_participant("Sam")

    def test_remove_nonmember_is_noop(self, full_roster_session):
        updated = full_roster_session.remove_participant("Ghost")

        assert len(updated.participants) == len(full_roster_session.participants)
        assert updated == full_roster_session

    def test_empty_name_accepted(self, empty_session):
        session = empty_session.add_or_update_participant("", ParticipantStatus.MAYBE)
        assert session.has_participant("")
        assert session.participant_status("") == ParticipantStatus.MAYBE

    def test_has_participant_and_status(self, full_roster_session):
        assert full_roster_session.has_participant("Jordan")
        assert not full_roster_session.has_participant("jordan")
        assert full_roster_session.participant_status("Casey") == ParticipantStatus.CANT_JOIN
        assert full_roster_session.participant_status("Ghost") is None


class TestIdentityKeying:
    """Tests for opt-in identity-based participant keys."""

    def test_name_keying_merges_same_name(self, empty_session):
        session = (
            empty_session
            .add_or_update_participant("Sam", ParticipantStatus.CONFIRMED, identity="id-1")
            .add_or_update_participant("Sam", ParticipantStatus.MAYBE, identity="id-2")
        )
        assert len(session.participants) == 1
        assert session.participants[0].status == ParticipantStatus.MAYBE

    def test_identity_keying_keeps_same_names_apart(self, empty_session):
        key = ParticipantKey.IDENTITY
        session = (
            empty_session
            .add_or_update_participant("Sam", ParticipantStatus.CONFIRMED, identity="id-1", key=key)
            .add_or_update_participant("Sam", ParticipantStatus.MAYBE, identity="id-2", key=key)
        )
        assert len(session.participants) == 2
        assert session.confirmed_names == ["Sam"]
        assert session.maybe_names == ["Sam"]

    def test_identity_keying_follows_renames(self, empty_session):
        key = ParticipantKey.IDENTITY
        first = empty_session.add_or_update_participant(
            "Sam", ParticipantStatus.MAYBE, identity="id-1", key=key
        )
        renamed = first.add_or_update_participant(
            "Samantha", ParticipantStatus.CONFIRMED, identity="id-1", key=key
        )

        assert len(renamed.participants) == 1
        assert renamed.participants[0].name == "Samantha"
        assert renamed.participants[0].id == first.participants[0].id

    def test_identity_keying_remove(self, empty_session):
        key = ParticipantKey.IDENTITY
        session = (
            empty_session
            .add_or_update_participant("Sam", ParticipantStatus.CONFIRMED, identity="id-1", key=key)
            .add_or_update_participant("Sam", ParticipantStatus.MAYBE, identity="id-2", key=key)
            .remove_participant("Sam", identity="id-1", key=key)
        )
        assert len(session.participants) == 1
        assert session.participants[0].identity == "id-2"

    def test_identity_keying_without_identity_uses_name(self, empty_session):
        key = ParticipantKey.IDENTITY
        session = (
            empty_session
            .add_or_update_participant("Sam", ParticipantStatus.CONFIRMED, key=key)
            .add_or_update_participant("Sam", ParticipantStatus.MAYBE, key=key)
        )
        assert len(session.participants) == 1


class TestRosterQueries:
    """Tests for counts and name lists."""

    def test_counts(self, full_roster_session):
        s = full_roster_session
        assert s.confirmed_count == 1
        assert s.maybe_count == 1
        assert s.different_time_count == 1
        assert s.cant_join_count == 1
        assert s.total_responses == 4

    def test_counts_sum_to_roster_size(self, full_roster_session):
        s = full_roster_session.add_or_update_participant("Drew", ParticipantStatus.CONFIRMED)
        total = s.confirmed_count + s.maybe_count + s.different_time_count + s.cant_join_count
        assert total == len(s.participants)

    def test_empty_counts(self, empty_session):
        assert empty_session.confirmed_count == 0
        assert empty_session.maybe_count == 0
        assert empty_session.different_time_count == 0
        assert empty_session.cant_join_count == 0

    def test_name_lists_follow_roster_order(self, empty_session):
        session = empty_session
        for name in ["Alice", "Bob", "Charlie"]:
            session = session.add_or_update_participant(name, ParticipantStatus.CONFIRMED)
        session = session.add_or_update_participant("Dana", ParticipantStatus.CANT_JOIN)
        session = session.add_or_update_participant("Eli", ParticipantStatus.MAYBE)

        assert session.confirmed_names == ["Alice", "Bob", "Charlie"]
        assert session.cant_join_names == ["Dana"]
        assert session.maybe_names == ["Eli"]

    def test_different_time_participants(self, start_time):
        time1 = start_time + timedelta(hours=1)
        time2 = start_time + timedelta(hours=2)
        session = GameSession(
            game_name="Test",
            start_time=start_time,
            host_name="Host",
            participants=(
                Participant(name="Alice", status=ParticipantStatus.DIFFERENT_TIME, join_time=time1),
                Participant(name="Bob", status=ParticipantStatus.CONFIRMED),
                Participant(name="Charlie", status=ParticipantStatus.DIFFERENT_TIME, join_time=time2),
            ),
        )
        assert session.different_time_participants == [("Alice", time1), ("Charlie", time2)]

    def test_different_time_without_join_time_uses_joined_at(self, start_time):
        participant = Participant(name="Alice", status=ParticipantStatus.DIFFERENT_TIME)
        session = GameSession("Test", start_time, "Host", participants=(participant,))
        assert session.different_time_participants == [("Alice", participant.joined_at)]


class TestFormatting:
    """Tests for date and time labels."""

    def test_formatted_time(self):
        local_afternoon = datetime.now().astimezone().replace(
            hour=14, minute=30, second=0, microsecond=0
        )
        session = GameSession.create("Test", local_afternoon, "Host")

        assert session.formatted_time
        assert "2" in session.formatted_time or "14" in session.formatted_time
        assert "30" in session.formatted_time

    def test_formatted_date_today(self):
        session = GameSession.create("Test", utc_now(), "Host")
        assert session.formatted_date == "Today"

    def test_formatted_date_tomorrow(self):
        session = GameSession.create("Test", utc_now() + timedelta(days=1), "Host")
        assert session.formatted_date == "Tomorrow"

    def test_formatted_date_future(self):
        session = GameSession.create("Test", utc_now() + timedelta(days=5), "Host")
        assert session.formatted_date not in ("Today", "Tomorrow")
        assert session.formatted_date

    def test_format_date_against_fixed_now(self):
        now = datetime(2030, 12, 1, 9, 0)
        assert format_date(datetime(2030, 12, 1, 23, 59), now=now) == "Today"
        assert format_date(datetime(2030, 12, 2, 0, 1), now=now) == "Tomorrow"
        assert format_date(datetime(2030, 12, 25, 18, 0), now=now) == "Dec 25"
        assert format_date(datetime(2030, 11, 30, 18, 0), now=now) == "Nov 30"
