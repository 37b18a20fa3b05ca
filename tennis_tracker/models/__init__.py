"""
Modelos
=======

- domain: entidades inmutables que consumen los llamadores
- dto: registros crudos de la API con decodificación tolerante
"""

from .domain import (
    EventType,
    Game,
    Match,
    Player,
    PlayerInfo,
    PlayerRanking,
    PlayerStat,
    RankingType,
    Score,
    TennisPoint,
    TennisSet,
    TournamentInfo,
)

__all__ = [
    'EventType',
    'Game',
    'Match',
    'Player',
    'PlayerInfo',
    'PlayerRanking',
    'PlayerStat',
    'RankingType',
    'Score',
    'TennisPoint',
    'TennisSet',
    'TournamentInfo',
]
