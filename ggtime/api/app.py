"""
FastAPI Application - REST API over session payloads.

Endpoints:
    GET    /health                      Health check
    POST   /api/v1/sessions             Propose a session, get its message
    POST   /api/v1/sessions/respond     Answer a session, get the new message
    POST   /api/v1/sessions/inspect     Decode a payload for display

There is no session store. Clients send the payload of the message they are
acting on and receive the payload of the replacement message. Concurrent
answers to the same payload are last-writer-wins in the conversation.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings
from ..log_config import setup_logging
from .schemas import (
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    HealthResponse,
    InspectRequest,
    MessageResponse,
    RespondRequest,
    SessionView,
)
from .service import PayloadService


def create_app(
    service: Optional[PayloadService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional PayloadService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or Settings.from_env()
    setup_logging(settings)
    api_service = service or PayloadService(participant_key=settings.participant_key)

    app = FastAPI(
        title="GG Time API",
        description="""
Propose gaming sessions and collect responses, carried entirely in message payloads.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_PAYLOAD` | Payload does not decode to a session |
| `VALIDATION_ERROR` | Request is missing a required value |
| `INTERNAL_ERROR` | Session could not be encoded |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        status_code = 500 if error.error_code == ErrorCode.INTERNAL_ERROR else 400
        return JSONResponse(
            status_code=status_code,
            content=error.model_dump(mode="json"),
        )

    # =========================================================================
    # Health
    # =========================================================================

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="ggtime", version=__version__)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=MessageResponse,
        responses={500: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Propose a new gaming session",
    )
    async def create_session(request: CreateSessionRequest) -> Union[MessageResponse, JSONResponse]:
        """Create a session and return the message payload that shares it."""
        response = api_service.create_session(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/respond",
        response_model=MessageResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Answer a session",
    )
    async def respond(request: RespondRequest) -> Union[MessageResponse, JSONResponse]:
        """
        Apply join / maybe / leave / join_at_time / cant_join.

        Returns the payload that should replace the answered message.
        """
        response = api_service.respond(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/inspect",
        response_model=SessionView,
        responses={400: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Decode a session payload",
    )
    async def inspect(request: InspectRequest) -> Union[SessionView, JSONResponse]:
        response = api_service.inspect(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    return app
