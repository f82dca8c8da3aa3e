"""REST API for the squadapi player collection."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from squadapi.config import Settings, load_settings
from squadapi.ingest import load_players
from squadapi.persistence import PlayerNotFoundError, PlayerStore, SquadNumberConflictError
from squadapi.schemas import PlayerCreateRequest, PlayerResponse, PlayerUpdateRequest
from squadapi.service import PlayerService


logger = logging.getLogger(__name__)

INDEX_BANNER = "Sample REST API with Python and FastAPI"


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def create_app(store: PlayerStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around ``store``.

    When no store is given, the seed file named by the settings is loaded and a
    ``SeedDataError`` propagates, so a missing seed aborts startup.
    """

    if store is None:
        settings = settings or load_settings()
        store = PlayerStore(load_players(settings.seed_path))
    logger.info("Serving %s players", len(store))
    app = FastAPI(title="squadapi")
    app.state.player_store = store
    service = PlayerService(store)

    @app.exception_handler(PlayerNotFoundError)
    async def handle_not_found(request: Request, exc: PlayerNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(SquadNumberConflictError)
    async def handle_conflict(request: Request, exc: SquadNumberConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_input(request: Request, exc: RequestValidationError) -> JSONResponse:
        detail = _format_validation_errors(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
        return JSONResponse(status_code=400, content={"detail": detail})

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return INDEX_BANNER

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    # Handlers touching the store are plain functions: FastAPI runs them on its
    # worker threads and the store lock serializes them.

    @app.get("/players", response_model=list[PlayerResponse])
    def list_players():
        return service.read_all()

    @app.get("/players/squadnumber/{squad_number}", response_model=PlayerResponse)
    def get_player_by_squad_number(squad_number: int):
        return service.read_by_squad_number(squad_number)

    @app.get("/players/{player_id}", response_model=PlayerResponse)
    def get_player(player_id: int):
        return service.read_by_id(player_id)

    @app.post("/players", response_model=PlayerResponse, status_code=201)
    def create_player(payload: PlayerCreateRequest):
        return service.create(payload)

    @app.put("/players/{player_id}", response_model=PlayerResponse)
    def update_player(player_id: int, payload: PlayerUpdateRequest):
        return service.update(player_id, payload)

    @app.delete("/players/{player_id}", status_code=204)
    def delete_player(player_id: int) -> Response:
        service.delete(player_id)
        return Response(status_code=204)

    return app


__all__ = ["INDEX_BANNER", "create_app"]
