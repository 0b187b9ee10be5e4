"""
API Service - Business logic layer between API and the host flow.

The service:
1. Translates API requests to SessionController calls
2. Decodes incoming payloads and encodes outgoing ones
3. Formats responses for the client

It keeps no sessions between requests: the payload is the session.
This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from ..codec import decode
from ..host import OutgoingMessage, SessionController
from ..session import ParticipantKey
from .schemas import (
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    InspectRequest,
    MessageResponse,
    RespondRequest,
    ResponseAction,
    SessionView,
)


logger = logging.getLogger(__name__)


@dataclass
class PayloadService:
    """
    Main API service.

    Usage:
        service = PayloadService()

        # Host proposes a session
        created = service.create_session(request)

        # A recipient answers it
        answered = service.respond(RespondRequest(payload=created.payload, ...))
    """
    participant_key: ParticipantKey = ParticipantKey.NAME

    def create_session(self, request: CreateSessionRequest) -> MessageResponse | ErrorResponse:
        """Create a session and return the message that shares it."""
        controller = SessionController(request.host_name, key=self.participant_key)
        message = controller.create_session(request.game_name, request.start_time)
        if message is None:
            return ErrorResponse(
                error="Session could not be encoded",
                error_code=ErrorCode.INTERNAL_ERROR,
            )
        return self._message_to_response(message)

    def respond(self, request: RespondRequest) -> MessageResponse | ErrorResponse:
        """
        Apply the viewer's response to the session in request.payload.

        Returns the replacement message, or an ErrorResponse if the payload
        is blank or invalid, or join_at_time lacks a join_time.
        """
        if request.action == ResponseAction.JOIN_AT_TIME and request.join_time is None:
            return ErrorResponse(
                error="join_time is required for join_at_time",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"field": "join_time"},
            )
        if not request.payload.strip():
            return self._no_session()

        controller = SessionController(
            request.viewer_name,
            viewer_identity=request.viewer_identity,
            key=self.participant_key,
        )
        if controller.receive(request.payload) is None:
            return self._invalid_payload()

        if request.action == ResponseAction.JOIN:
            message = controller.join()
        elif request.action == ResponseAction.MAYBE:
            message = controller.maybe()
        elif request.action == ResponseAction.CANT_JOIN:
            message = controller.cant_join()
        elif request.action == ResponseAction.JOIN_AT_TIME:
            message = controller.join_at_time(request.join_time)
        else:
            message = controller.leave()

        if message is None:
            return ErrorResponse(
                error="Session could not be encoded",
                error_code=ErrorCode.INTERNAL_ERROR,
            )
        return self._message_to_response(message)

    def inspect(self, request: InspectRequest) -> SessionView | ErrorResponse:
        """Decode a payload for display."""
        if not request.payload.strip():
            return self._no_session()

        session = decode(request.payload)
        if session is None:
            return self._invalid_payload()
        return SessionView.from_session(session)

    def _no_session(self) -> ErrorResponse:
        return ErrorResponse(
            error="No session payload provided",
            error_code=ErrorCode.NO_SESSION,
            details={"field": "payload"},
        )

    def _invalid_payload(self) -> ErrorResponse:
        logger.info("Rejected invalid session payload")
        return ErrorResponse(
            error="Payload is not a valid session",
            error_code=ErrorCode.INVALID_PAYLOAD,
        )

    def _message_to_response(self, message: OutgoingMessage) -> MessageResponse:
        return MessageResponse(
            payload=message.payload,
            caption=message.layout.caption,
            subcaption=message.layout.subcaption,
            trailing_caption=message.layout.trailing_caption,
            summary_text=message.summary_text,
            session=SessionView.from_session(message.session),
        )
