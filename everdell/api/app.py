"""
FastAPI Application - REST API for rendering hosts.

Endpoints:
    GET    /api/v1/health                   Liveness and version
    POST   /api/v1/sessions                 Create and initialize a session
    GET    /api/v1/sessions                 List active sessions
    GET    /api/v1/sessions/{id}            Get session status
    DELETE /api/v1/sessions/{id}            End session
    POST   /api/v1/sessions/{id}/tick       Report signals, run one tick
    GET    /api/v1/sessions/{id}/state      Read piles, hand and stash

Tick Flow:
    1. Host renders the hand visuals from the previous tick
    2. Host POSTs each visual's pointer state to /tick
    3. Response carries the new stash text, hand visuals and the
       PlayCardEvents delivered during the tick

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Union
import logging

from ..config import Settings, configure_logging

logger = logging.getLogger(__name__)


def create_app(service=None, settings: Settings | None = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Request
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.encoders import jsonable_encoder
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from ..session import SessionManager
    from .service import APIService
    from .schemas import (
        EndSessionResponse,
        ErrorCode,
        ErrorResponse,
        GameStateResponse,
        HealthResponse,
        SessionListResponse,
        SessionResponse,
        TickRequest,
        TickResponse,
    )

    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Everdell Engine API",
        description="""
Prototype card game engine. The host reports pointer signals per card
visual each tick and renders the display data it gets back.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `VALIDATION_ERROR` | Request body is malformed |
| `INVARIANT_VIOLATION` | Card ownership broken, session halted |
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

    api_service = service or APIService(
        session_manager=SessionManager(event_capacity=settings.event_capacity)
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Map an ErrorResponse to its HTTP status."""
        status_codes = {
            ErrorCode.SESSION_NOT_FOUND: 404,
            ErrorCode.INVARIANT_VIOLATION: 409,
            ErrorCode.VALIDATION_ERROR: 400,
        }
        return JSONResponse(
            status_code=status_codes.get(error.error_code, 500),
            content=error.model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed bodies come back as ErrorResponse, not the default 422."""
        return make_error_response(ErrorResponse(
            error="Invalid request",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": jsonable_encoder(exc.errors())},
        ))

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
    )
    async def health() -> HealthResponse:
        return api_service.health()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session() -> SessionResponse:
        """Create a session and run initialize() on its world."""
        return api_service.create_session()

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        return api_service.list_sessions()

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        """End a session and release its state."""
        return api_service.end_session(session_id)

    # =========================================================================
    # Tick / State Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/tick",
        response_model=TickResponse,
        responses={
            404: {"model": ErrorResponse},
            409: {"model": ErrorResponse, "description": "Session halted"},
        },
        tags=["Gameplay"],
        summary="Report interaction signals and advance one tick",
    )
    async def tick(session_id: str, request: TickRequest) -> Union[TickResponse, JSONResponse]:
        response = api_service.tick(session_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Gameplay"],
        summary="Read the current game state",
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_state(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    logger.info("API created (env=%s)", settings.env)
    return app
