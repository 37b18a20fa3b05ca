"""
API REST con FastAPI - Tennis Tracker
=====================================

Expone las consultas de TennisRepository como JSON.

Endpoints:
    GET  /health      - Health check
    GET  /events      - Tipos de evento
    GET  /fixtures    - Partidos programados/terminados
    GET  /livescore   - Partidos en vivo con sets, juegos y puntos
    GET  /players     - Perfil de jugador
    GET  /standings   - Ranking ATP/WTA
    GET  /docs        - Documentación interactiva (Swagger)

Uso:
    # Desarrollo
    python -m tennis_tracker.api.api_server

    # Producción
    uvicorn tennis_tracker.api.api_server:app --host 0.0.0.0 --port 8000
"""

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Config
from ..exceptions import DecodingError, HTTPStatusError, InvalidResponseError, TransportError
from ..models.domain import EventType, Match, Player, PlayerRanking, RankingType
from ..services.api_tennis_client import APITennisClient
from ..services.tennis_repository import TennisRepository
from .models import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tennis Tracker API",
    description="Partidos de tenis en vivo e históricos normalizados desde api-tennis.com",
    version=__version__,
)


@lru_cache(maxsize=1)
def get_repository() -> TennisRepository:
    """Repositorio compartido; el cliente se construye desde Config"""
    return TennisRepository(APITennisClient(), default_timezone=Config.DEFAULT_TIMEZONE)


# ============================================================
# ERRORES
# ============================================================

@app.exception_handler(DecodingError)
async def decoding_error_handler(request: Request, exc: DecodingError):
    logger.error(f"❌ Respuesta de API-Tennis no decodificable en {request.url.path}: {exc}")
    body = ErrorResponse(error="decoding", detail=str(exc), field=exc.field)
    return JSONResponse(status_code=502, content=body.model_dump())


@app.exception_handler(TransportError)
async def transport_error_handler(request: Request, exc: TransportError):
    logger.error(f"❌ Error de transporte en {request.url.path}: {exc}")
    # El upstream respondió mal (502) vs no se pudo contactar (503)
    status_code = 502 if isinstance(exc, (HTTPStatusError, InvalidResponseError)) else 503
    body = ErrorResponse(error="transport", detail=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ============================================================
# ENDPOINTS
# ============================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
def health():
    is_valid, _, _ = Config.validate(strict=True)
    return HealthResponse(
        status="ok" if is_valid else "degraded",
        version=__version__,
        api_key_configured=bool(Config.API_TENNIS_API_KEY),
    )


@app.get("/events", response_model=List[EventType], tags=["Events"])
def list_events(repository: TennisRepository = Depends(get_repository)):
    return repository.get_events()


@app.get("/fixtures", response_model=List[Match], tags=["Matches"])
def list_fixtures(
    date_start: Optional[str] = Query(None, description="YYYY-MM-DD"),
    date_stop: Optional[str] = Query(None, description="YYYY-MM-DD"),
    event_type_key: Optional[str] = None,
    tournament_key: Optional[str] = None,
    tournament_season: Optional[str] = None,
    match_key: Optional[str] = None,
    player_key: Optional[str] = None,
    timezone: Optional[str] = None,
    repository: TennisRepository = Depends(get_repository),
):
    return repository.get_fixtures(
        date_start=date_start,
        date_stop=date_stop,
        event_type_key=event_type_key,
        tournament_key=tournament_key,
        tournament_season=tournament_season,
        match_key=match_key,
        player_key=player_key,
        timezone=timezone,
    )


@app.get("/livescore", response_model=List[Match], tags=["Matches"])
def list_livescore(
    event_type_key: Optional[str] = None,
    tournament_key: Optional[str] = None,
    match_key: Optional[str] = None,
    player_key: Optional[str] = None,
    timezone: Optional[str] = None,
    repository: TennisRepository = Depends(get_repository),
):
    return repository.get_livescore(
        event_type_key=event_type_key,
        tournament_key=tournament_key,
        match_key=match_key,
        player_key=player_key,
        timezone=timezone,
    )


@app.get("/players", response_model=List[Player], tags=["Players"])
def list_players(
    player_key: Optional[str] = None,
    repository: TennisRepository = Depends(get_repository),
):
    return repository.get_players(player_key=player_key)


@app.get("/standings", response_model=List[PlayerRanking], tags=["Players"])
def list_standings(
    event_type: RankingType = Query(RankingType.ATP, description="atp o wta"),
    repository: TennisRepository = Depends(get_repository),
):
    return repository.get_standings(event_type=event_type)


if __name__ == "__main__":
    import uvicorn

    Config.configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
