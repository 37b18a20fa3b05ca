"""
DTOs de API-Tennis
==================

Registros tal y como llegan de api-tennis.com (claves snake_case).

Reglas de decodificación:
- Todo campo escalar acepta string o entero (ver utils.decoding).
- Campo obligatorio ausente o con tipo inválido -> DecodingError con el
  nombre del campo; se aborta la respuesta completa.
- Campo opcional inválido -> None, nunca un error.
- Listas anidadas (scores, pointbypoint, points, stats) que no son arrays
  se tratan como ausentes; los elementos que no son objetos se descartan.

Ejemplo de fixture (recortado):
    {
        "event_key": 11976653,
        "event_first_player": "C. Alcaraz",
        "first_player_key": "2382",
        "scores": [{"score_first": "6", "score_second": "4", "score_set": "1"}],
        "pointbypoint": [{"set_number": "Set 1", "number_game": "1", ...}]
    }
"""

from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ..exceptions import DecodingError
from ..utils.decoding import STRING_INTEGER_OR_FLOAT, decode_flexible, resolve_first


class WireModel(BaseModel):
    """Base de todos los DTOs: decodificación tolerante campo a campo"""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    # Campos que contienen listas de registros anidados
    nested_fields: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def _decode_tolerant(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name in cls.nested_fields:
            if not isinstance(value, list):
                return None
            return [item for item in value if isinstance(item, dict)]

        if value is None:
            return None

        decoded = decode_flexible(value)
        if decoded is not None:
            return decoded

        # Obligatorio: se deja el valor original para que pydantic falle con el nombre del campo
        if cls.model_fields[info.field_name].is_required():
            return value
        return None

    @classmethod
    def decode(cls, raw: Any):
        """
        Decodifica un registro crudo

        Raises:
            DecodingError: Si falta un campo obligatorio o no es válido
        """
        if not isinstance(raw, dict):
            raise DecodingError(cls.__name__, "record is not a JSON object")
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or cls.__name__
            raise DecodingError(field, error["msg"]) from e


# ============================================================
# EVENTOS
# ============================================================

class EventTypeDTO(WireModel):
    event_type_key: str
    event_type_type: str


# ============================================================
# MARCADOR Y PUNTO POR PUNTO
# ============================================================

class ScoreDTO(WireModel):
    score_first: Optional[str] = None
    score_second: Optional[str] = None
    score_set: Optional[str] = None


class PointDTO(WireModel):
    number_point: Optional[str] = None
    score: Optional[str] = None
    break_point: Optional[str] = None
    set_point: Optional[str] = None
    match_point: Optional[str] = None


class PointByPointDTO(WireModel):
    """Snapshot de un juego; en vivo se repite en cada consulta con los puntos acumulados"""

    nested_fields: ClassVar[Tuple[str, ...]] = ("points",)

    set_number: Optional[str] = None
    number_game: Optional[str] = None
    player_served: Optional[str] = None
    serve_winner: Optional[str] = None
    serve_lost: Optional[str] = None
    score: Optional[str] = None
    points: Optional[List[PointDTO]] = None


# ============================================================
# PARTIDOS
# ============================================================

class MatchRecordDTO(WireModel):
    """Campos comunes de get_fixtures y get_livescore"""

    nested_fields: ClassVar[Tuple[str, ...]] = ("scores", "point_by_point")

    event_key: str
    event_date: str
    event_time: str
    first_player_key: str
    second_player_key: str
    event_game_result: Optional[str] = None
    event_serve: Optional[str] = None
    event_winner: Optional[str] = None
    event_status: str
    event_type_type: str
    tournament_name: str
    tournament_key: str
    tournament_round: Optional[str] = None
    tournament_season: str
    event_live: str
    event_qualification: Optional[str] = None
    event_first_player_logo: Optional[str] = None
    event_second_player_logo: Optional[str] = None
    scores: Optional[List[ScoreDTO]] = None
    point_by_point: Optional[List[PointByPointDTO]] = Field(None, alias="pointbypoint")


class FixtureDTO(MatchRecordDTO):
    event_first_player: str
    event_second_player: str
    event_final_result: Optional[str] = None


class LiveMatchDTO(MatchRecordDTO):
    event_first_player: Optional[str] = None
    event_second_player: Optional[str] = None


# ============================================================
# JUGADORES Y RANKINGS
# ============================================================

class PlayerStatDTO(WireModel):
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


class PlayerDTO(WireModel):
    nested_fields: ClassVar[Tuple[str, ...]] = ("stats",)

    player_key: str
    player_name: str
    player_full_name: Optional[str] = None
    player_country: Optional[str] = None
    player_country_code: Optional[str] = None
    player_bday: Optional[str] = None
    player_logo: Optional[str] = None
    stats: Optional[List[PlayerStatDTO]] = None


class StandingDTO(WireModel):
    """
    Fila de get_standings

    Según la tabla (ATP/WTA) la API usa nombres de campo distintos:
    player_name/player, player_country/country, rank/place. player_key
    puede llegar incluso como float (ej: 1905.0).
    """

    player_key: Optional[str] = None
    player_name: str = ""
    player_country: Optional[str] = None
    player_country_code: Optional[str] = None
    player_logo: Optional[str] = None
    rank: Optional[str] = None
    points: Optional[str] = None
    tournament_played: Optional[str] = None
    league: Optional[str] = None
    movement: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _resolve_alternate_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["player_key"] = decode_flexible(data.get("player_key"), STRING_INTEGER_OR_FLOAT)
        data["player_name"] = resolve_first(data, ("player_name", "player"), skip_empty=True) or ""
        data["player_country"] = resolve_first(data, ("player_country", "country"))
        data["rank"] = resolve_first(data, ("rank", "place"))
        return data
