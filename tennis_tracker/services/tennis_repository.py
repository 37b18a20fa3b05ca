"""
Tennis Repository
=================

Fachada única para los llamadores: una operación por endpoint.

Cada operación:
1. Pide los bytes al transporte inyectado (APITennisClient u otro objeto
   con request(method, params) -> bytes)
2. Quita el envelope {success, error, result}
3. Decodifica y normaliza cada registro a entidades de dominio
   (los partidos pasan por MatchStateReconstructor)

Los filtros son parámetros opacos: no se validan aquí. Un filtro None no
se envía.

El repositorio no guarda estado entre llamadas, así que sus operaciones
pueden lanzarse en paralelo (ej: fixtures y livescore del mismo jugador).
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..exceptions import DecodingError
from ..models.domain import EventType, Match, Player, PlayerRanking, RankingType
from ..models.dto import EventTypeDTO, FixtureDTO, LiveMatchDTO, PlayerDTO, StandingDTO
from .api_constants import Methods, Parameters
from .dto_mapper import (
    map_event_type,
    map_fixture,
    map_live_match,
    map_player,
    map_standing,
)
from .envelope import unwrap_envelope

logger = logging.getLogger(__name__)


def _build_params(**filters: Optional[str]) -> Dict[str, str]:
    return {name: value for name, value in filters.items() if value is not None}


class TennisRepository:
    """Repositorio de datos de tenis sobre api-tennis.com"""

    def __init__(self, transport, default_timezone: Optional[str] = None):
        """
        Args:
            transport: Objeto con request(method, params) -> bytes
            default_timezone: Timezone enviada cuando el llamador no pasa una
        """
        self.transport = transport
        self.default_timezone = default_timezone or None
        logger.info("✅ TennisRepository initialized")

    # ============================================================
    # OPERACIONES PÚBLICAS
    # ============================================================

    def get_events(self) -> List[EventType]:
        """Tipos de evento (ATP Singles, WTA Doubles, ...)"""
        records = self._fetch(Methods.GET_EVENTS, {}, result_required=True)
        return self._decode_all(records, EventTypeDTO, map_event_type, Methods.GET_EVENTS)

    def get_fixtures(
        self,
        date_start: Optional[str] = None,
        date_stop: Optional[str] = None,
        event_type_key: Optional[str] = None,
        tournament_key: Optional[str] = None,
        tournament_season: Optional[str] = None,
        match_key: Optional[str] = None,
        player_key: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> List[Match]:
        """
        Partidos programados o terminados

        Args:
            date_start / date_stop: Rango de fechas (YYYY-MM-DD)
            event_type_key, tournament_key, tournament_season, match_key,
            player_key, timezone: Filtros opcionales de la API

        Returns:
            Lista de partidos con sets reconstruidos
        """
        params = _build_params(**{
            Parameters.DATE_START: date_start,
            Parameters.DATE_STOP: date_stop,
            Parameters.EVENT_TYPE_KEY: event_type_key,
            Parameters.TOURNAMENT_KEY: tournament_key,
            Parameters.TOURNAMENT_SEASON: tournament_season,
            Parameters.MATCH_KEY: match_key,
            Parameters.PLAYER_KEY: player_key,
            Parameters.TIMEZONE: timezone or self.default_timezone,
        })
        records = self._fetch(Methods.GET_FIXTURES, params)
        return self._decode_all(records, FixtureDTO, map_fixture, Methods.GET_FIXTURES)

    def get_livescore(
        self,
        event_type_key: Optional[str] = None,
        tournament_key: Optional[str] = None,
        match_key: Optional[str] = None,
        player_key: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> List[Match]:
        """Partidos en juego, con juegos y puntos del log punto por punto"""
        params = _build_params(**{
            Parameters.EVENT_TYPE_KEY: event_type_key,
            Parameters.TOURNAMENT_KEY: tournament_key,
            Parameters.MATCH_KEY: match_key,
            Parameters.PLAYER_KEY: player_key,
            Parameters.TIMEZONE: timezone or self.default_timezone,
        })
        records = self._fetch(Methods.GET_LIVESCORE, params)
        return self._decode_all(records, LiveMatchDTO, map_live_match, Methods.GET_LIVESCORE)

    def get_players(self, player_key: Optional[str] = None) -> List[Player]:
        params = _build_params(**{Parameters.PLAYER_KEY: player_key})
        records = self._fetch(Methods.GET_PLAYERS, params)
        return self._decode_all(records, PlayerDTO, map_player, Methods.GET_PLAYERS)

    def get_standings(self, event_type: Union[RankingType, str, None] = None) -> List[PlayerRanking]:
        """
        Ranking de una tabla (ATP/WTA)

        Las filas sin clave de jugador se descartan.
        """
        if isinstance(event_type, RankingType):
            event_type = event_type.display_name
        params = _build_params(**{Parameters.EVENT_TYPE: event_type})
        records = self._fetch(Methods.GET_STANDINGS, params)
        rankings = self._decode_all(records, StandingDTO, map_standing, Methods.GET_STANDINGS)

        valid = [ranking for ranking in rankings if ranking is not None]
        dropped = len(rankings) - len(valid)
        if dropped:
            logger.warning(f"⚠️  {dropped} filas de ranking sin player_key descartadas")
        return valid

    # ============================================================
    # HELPERS
    # ============================================================

    def _fetch(self, method: str, params: Dict[str, str], result_required: bool = False) -> List[Any]:
        logger.debug(f"📥 {method} {params}")
        body = self.transport.request(method, params)
        try:
            payload = json.loads(body)
        except (TypeError, ValueError) as e:
            raise DecodingError("body", f"invalid JSON: {e}") from e
        return unwrap_envelope(payload, method=method, result_required=result_required)

    def _decode_all(self, records: List[Any], dto_cls, mapper: Callable, method: str) -> List[Any]:
        entities = [mapper(dto_cls.decode(record)) for record in records]
        logger.info(f"✅ {method}: {len(entities)} registros")
        return entities
