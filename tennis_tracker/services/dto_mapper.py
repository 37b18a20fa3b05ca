"""
DTO Mapper
==========

Una función de mapeo por tipo de registro de la API -> entidad de dominio.

Todas son totales salvo map_standing y map_score, que devuelven None
cuando el registro no se puede construir (sin clave de jugador, o fila de
resumen incompleta). Para partidos se delega la jerarquía de sets en
MatchStateReconstructor.
"""

import logging
from typing import List, Optional, Sequence

from ..models.domain import (
    EventType,
    Match,
    Player,
    PlayerInfo,
    PlayerRanking,
    PlayerStat,
    Score,
    TournamentInfo,
)
from ..models.dto import (
    EventTypeDTO,
    FixtureDTO,
    LiveMatchDTO,
    MatchRecordDTO,
    PlayerDTO,
    PlayerStatDTO,
    ScoreDTO,
    StandingDTO,
)
from ..utils.decoding import parse_int
from .match_state_reconstructor import MatchStateReconstructor, map_point

logger = logging.getLogger(__name__)

_reconstructor = MatchStateReconstructor()

__all__ = [
    'map_event_type',
    'map_fixture',
    'map_live_match',
    'map_player',
    'map_player_stat',
    'map_standing',
    'map_score',
    'map_scores',
    'map_point',
]


def map_event_type(dto: EventTypeDTO) -> EventType:
    return EventType(key=dto.event_type_key, type=dto.event_type_type)


def map_score(dto: ScoreDTO) -> Optional[Score]:
    """Fila de resumen por set; None si falta cualquiera de los tres campos"""
    if dto.score_first is None or dto.score_second is None or dto.score_set is None:
        return None
    return Score(
        first_player_score=dto.score_first,
        second_player_score=dto.score_second,
        set_number=dto.score_set,
    )


def map_scores(dtos: Optional[Sequence[ScoreDTO]]) -> List[Score]:
    scores = []
    for dto in dtos or []:
        score = map_score(dto)
        if score is None:
            logger.debug(f"Fila de scores incompleta descartada: {dto}")
            continue
        scores.append(score)
    return scores


def _is_qualification(value: Optional[str]) -> bool:
    return (value or "false").lower() == "true"


def _map_match(
    dto: MatchRecordDTO,
    first_player_name: str,
    second_player_name: str,
    final_result: Optional[str],
    is_live: bool,
) -> Match:
    scores = map_scores(dto.scores)
    sets = _reconstructor.reconstruct(scores, dto.point_by_point)

    return Match(
        key=dto.event_key,
        date=dto.event_date,
        time=dto.event_time,
        first_player=PlayerInfo(
            key=dto.first_player_key,
            name=first_player_name,
            logo_url=dto.event_first_player_logo,
        ),
        second_player=PlayerInfo(
            key=dto.second_player_key,
            name=second_player_name,
            logo_url=dto.event_second_player_logo,
        ),
        final_result=final_result,
        game_result=dto.event_game_result,
        serve=dto.event_serve,
        winner=dto.event_winner,
        status=dto.event_status,
        event_type=dto.event_type_type,
        tournament=TournamentInfo(key=dto.tournament_key, name=dto.tournament_name),
        round=dto.tournament_round,
        season=dto.tournament_season,
        is_live=is_live,
        is_qualification=_is_qualification(dto.event_qualification),
        scores=scores,
        sets=sets,
    )


def map_fixture(dto: FixtureDTO) -> Match:
    """
    Partido de get_fixtures

    is_live replica a la API: event_live == "1" o cualquier valor no vacío.
    """
    return _map_match(
        dto,
        first_player_name=dto.event_first_player,
        second_player_name=dto.event_second_player,
        final_result=dto.event_final_result,
        is_live=dto.event_live == "1" or dto.event_live != "",
    )


def map_live_match(dto: LiveMatchDTO) -> Match:
    """Partido de get_livescore: siempre en vivo, nombres nunca None"""
    return _map_match(
        dto,
        first_player_name=dto.event_first_player or "",
        second_player_name=dto.event_second_player or "",
        final_result=None,
        is_live=True,
    )


def map_player_stat(dto: PlayerStatDTO) -> PlayerStat:
    return PlayerStat(**dto.model_dump())


def map_player(dto: PlayerDTO) -> Player:
    stats = [map_player_stat(stat) for stat in dto.stats] if dto.stats is not None else None
    return Player(
        key=dto.player_key,
        name=dto.player_name,
        full_name=dto.player_full_name,
        country=dto.player_country,
        country_code=dto.player_country_code,
        birthday=dto.player_bday,
        logo_url=dto.player_logo,
        stats=stats,
    )


def map_standing(dto: StandingDTO) -> Optional[PlayerRanking]:
    """Fila de ranking; None si no hay clave de jugador resoluble"""
    if not dto.player_key:
        return None

    player = Player(
        key=dto.player_key,
        name=dto.player_name,
        country=dto.player_country,
        country_code=dto.player_country_code,
        logo_url=dto.player_logo,
    )

    return PlayerRanking(
        player=player,
        rank=parse_int(dto.rank),
        points=parse_int(dto.points),
        tournaments_played=parse_int(dto.tournament_played),
    )
