"""
Modelos de Dominio - Tennis Tracker
===================================

Vista jerárquica y consistente de un partido:
torneo -> partido -> sets -> juegos -> puntos

Todos los modelos son snapshots inmutables (frozen) construidos de nuevo
en cada respuesta decodificada. La identidad entre peticiones es solo la
igualdad de claves (key).
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ============================================================
# ENUMS
# ============================================================

class RankingType(str, Enum):
    """Tabla de ranking disponible en get_standings"""
    ATP = "atp"
    WTA = "wta"

    @property
    def display_name(self) -> str:
        return self.value.upper()


# ============================================================
# EVENTOS Y TORNEOS
# ============================================================

class EventType(DomainModel):
    """Categoría de competición (ej: "Atp Singles", "Wta Doubles")"""
    key: str
    type: str


class TournamentInfo(DomainModel):
    key: str
    name: str


# ============================================================
# JUGADORES
# ============================================================

class PlayerInfo(DomainModel):
    """Referencia ligera a un jugador dentro de un partido"""
    key: str
    name: str = Field(..., description="Nunca None; '' si la API no lo envía")
    logo_url: Optional[str] = None


class PlayerStat(DomainModel):
    """Estadísticas de una temporada (season, type) por superficie"""
    season: Optional[str] = None
    type: Optional[str] = None
    rank: Optional[str] = None
    titles: Optional[str] = None
    matches_won: Optional[str] = None
    matches_lost: Optional[str] = None
    hard_won: Optional[str] = None
    hard_lost: Optional[str] = None
    clay_won: Optional[str] = None
    clay_lost: Optional[str] = None
    grass_won: Optional[str] = None
    grass_lost: Optional[str] = None


class Player(DomainModel):
    """Perfil completo de un jugador (get_players)"""
    key: str
    name: str
    full_name: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    birthday: Optional[str] = None
    logo_url: Optional[str] = None
    stats: Optional[List[PlayerStat]] = None


class PlayerRanking(DomainModel):
    """Fila de un ranking (get_standings)"""
    player: Player
    rank: Optional[int] = None
    points: Optional[int] = None
    tournaments_played: Optional[int] = None


# ============================================================
# MARCADOR
# ============================================================

class Score(DomainModel):
    """Resumen de un set: juegos de cada jugador"""
    first_player_score: str
    second_player_score: str
    set_number: str


class TennisPoint(DomainModel):
    number: str = ""
    score: str = ""
    is_break_point: bool = False
    is_set_point: bool = False
    is_match_point: bool = False


class Game(DomainModel):
    """
    Juego dentro de un set

    first_player_points / second_player_points son el marcador del juego
    ("40", "AD", ...), no enteros.
    """
    number: str
    first_player_points: str = "0"
    second_player_points: str = "0"
    server: Optional[str] = None
    points: List[TennisPoint] = Field(default_factory=list)
    is_completed: bool = False


class TennisSet(DomainModel):
    """
    Set de un partido

    Dos sets son "el mismo set" si comparten número, sin importar los
    juegos: permite sustituir el snapshot de un set al volver a consultar.
    """
    number: str
    first_player_games: int = 0
    second_player_games: int = 0
    games: List[Game] = Field(default_factory=list)
    is_completed: bool = False

    def __eq__(self, other):
        if not isinstance(other, TennisSet):
            return NotImplemented
        return self.number == other.number

    def __hash__(self):
        return hash(self.number)


# ============================================================
# PARTIDO
# ============================================================

class Match(DomainModel):
    """Partido completo (get_fixtures / get_livescore)"""
    key: str
    date: str
    time: str
    first_player: PlayerInfo
    second_player: PlayerInfo
    final_result: Optional[str] = None
    game_result: Optional[str] = None
    serve: Optional[str] = None
    winner: Optional[str] = None
    status: str
    event_type: str
    tournament: TournamentInfo
    round: Optional[str] = None
    season: str
    is_live: bool
    is_qualification: bool = False
    scores: List[Score] = Field(default_factory=list)
    sets: List[TennisSet] = Field(default_factory=list)
