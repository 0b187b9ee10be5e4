"""
Session Controller - The conversation-side flow around a session.

LIFECYCLE:
1. Host fills in the form -> create_session() -> message inserted
2. Recipient taps the message -> receive(payload) loads the session
3. Recipient responds (join, maybe, leave, join at a time, can't join)
   -> a new payload replaces the message
4. Extension deactivates -> controller is discarded

Concurrent responses from different devices are last-writer-wins: whichever
updated message reaches the conversation last is the session everyone sees.
There is no merge.
"""

from __future__ import annotations
from datetime import datetime
import logging

from ..codec import decode, encode
from ..session import GameSession, ParticipantKey, ParticipantStatus
from .layout import (
    OutgoingMessage,
    build_layout,
    friendly_name,
    invitation_summary,
    update_summary,
)


logger = logging.getLogger(__name__)


class SessionController:
    """
    Drives one extension instance.

    Holds the viewer's display name and the session currently on screen.
    All session changes go through GameSession's copy-on-write operations
    and leave as freshly encoded payloads.
    """

    def __init__(
        self,
        viewer_name: str,
        viewer_identity: str | None = None,
        key: ParticipantKey = ParticipantKey.NAME,
    ):
        # No contact name available: fall back to a name derived from the identity
        if not viewer_name and viewer_identity:
            viewer_name = friendly_name(viewer_identity)
        self.viewer_name = viewer_name
        self.viewer_identity = viewer_identity
        self.key = key
        self._session: GameSession | None = None

    @property
    def current_session(self) -> GameSession | None:
        return self._session

    def create_session(self, game_name: str, start_time: datetime) -> OutgoingMessage | None:
        """Create a session hosted by the viewer and build its message."""
        session = GameSession.create(
            game_name=game_name,
            start_time=start_time,
            host_name=self.viewer_name,
        )
        message = self._build_message(session, invitation_summary(session))
        if message is None:
            return None

        self._session = session
        logger.info("Session created and shared: %s", game_name)
        return message

    def receive(self, payload: str | None) -> GameSession | None:
        """Load the session carried by a selected message."""
        session = decode(payload)
        if session is None:
            logger.warning("Could not load session from message")
            return None

        self._session = session
        return session

    # =========================================================================
    # Responses
    # =========================================================================

    def join(self) -> OutgoingMessage | None:
        return self._respond(ParticipantStatus.CONFIRMED)

    def maybe(self) -> OutgoingMessage | None:
        return self._respond(ParticipantStatus.MAYBE)

    def cant_join(self) -> OutgoingMessage | None:
        return self._respond(ParticipantStatus.CANT_JOIN)

    def join_at_time(self, join_time: datetime) -> OutgoingMessage | None:
        """Respond with a proposed alternate start time."""
        return self._respond(ParticipantStatus.DIFFERENT_TIME, join_time)

    def leave(self) -> OutgoingMessage | None:
        """Remove the viewer from the roster."""
        if self._session is None:
            logger.warning("No active session")
            return None

        updated = self._session.remove_participant(
            self.viewer_name,
            identity=self.viewer_identity,
            key=self.key,
        )
        message = self._build_message(updated, update_summary(updated))
        if message is None:
            return None

        self._session = updated
        logger.info("%s left the session", self.viewer_name)
        return message

    def _respond(
        self,
        status: ParticipantStatus,
        join_time: datetime | None = None,
    ) -> OutgoingMessage | None:
        if self._session is None:
            logger.warning("No active session")
            return None

        updated = self._session.add_or_update_participant(
            self.viewer_name,
            status,
            join_time,
            identity=self.viewer_identity,
            key=self.key,
        )
        message = self._build_message(updated, update_summary(updated))
        if message is None:
            return None

        self._session = updated
        logger.info("%s responded %s", self.viewer_name, status.value)
        return message

    def _build_message(self, session: GameSession, summary_text: str) -> OutgoingMessage | None:
        payload = encode(session)
        if payload is None:
            logger.error("Failed to encode session %s", session.id)
            return None

        return OutgoingMessage(
            payload=payload,
            layout=build_layout(session),
            summary_text=summary_text,
            session=session,
        )
