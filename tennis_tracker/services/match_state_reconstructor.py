"""
Match State Reconstructor
=========================

Construye la jerarquía sets -> juegos -> puntos de un partido a partir de
dos fuentes parciales de la API:

- scores: resumen por set ({"score_first": "6", "score_second": "4", "score_set": "1"})
- pointbypoint: log por juego. En vivo, la API repite el registro de un
  juego en cada consulta con los puntos acumulados, así que el snapshot
  correcto de un juego es siempre el ÚLTIMO registro de su grupo.

Si no hay pointbypoint (partidos históricos, la API lo poda) se degrada a
un set por fila de scores, sin juegos y marcado como completado.

La reconstrucción es pura: no hace I/O, no guarda estado y nunca lanza
excepciones; los datos malformados se sustituyen por valores por defecto.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ..models.domain import Game, Score, TennisPoint, TennisSet
from ..models.dto import PointByPointDTO, PointDTO
from ..utils.decoding import parse_int

logger = logging.getLogger(__name__)


def parse_point_score(score: Optional[str]) -> Tuple[str, str]:
    """
    Separa el marcador de un juego "A-B" en sus dos mitades

    Las mitades no tienen por qué ser enteros ("40", "AD", ...).

    Returns:
        (primer_jugador, segundo_jugador); ("0", "0") si falta o está malformado
    """
    if score is None:
        return "0", "0"
    parts = score.split("-")
    if len(parts) != 2:
        return "0", "0"
    return parts[0].strip(), parts[1].strip()


def parse_game_score(score: Optional[str]) -> Tuple[int, int]:
    """Como parse_point_score pero exige enteros ("6-4" -> (6, 4)); (0, 0) si no"""
    first, second = parse_point_score(score)
    first_value, second_value = parse_int(first), parse_int(second)
    if first_value is None or second_value is None:
        return 0, 0
    return first_value, second_value


def _flag(value: Optional[str]) -> bool:
    # La API confunde "ausente" con el literal "null"
    return value is not None and value.lower() != "null"


def map_point(dto: PointDTO) -> TennisPoint:
    return TennisPoint(
        number=dto.number_point or "",
        score=dto.score or "",
        is_break_point=_flag(dto.break_point),
        is_set_point=_flag(dto.set_point),
        is_match_point=_flag(dto.match_point),
    )


def _game_sort_key(game_number: str) -> int:
    # Números de juego no numéricos se ordenan como 0
    value = parse_int(game_number)
    return value if value is not None else 0


class MatchStateReconstructor:
    """Reconstruye la lista ordenada de sets de un partido"""

    def reconstruct(
        self,
        scores: Sequence[Score],
        point_by_point: Optional[Sequence[PointByPointDTO]],
    ) -> List[TennisSet]:
        """
        Combina el resumen por set y el log punto por punto

        Args:
            scores: Filas de resumen ya normalizadas
            point_by_point: Log punto por punto (None o vacío si no hay)

        Returns:
            Sets ordenados por número de set (orden lexicográfico)
        """
        if not point_by_point:
            return self.sets_from_scores(scores)

        scores_by_set: Dict[str, Score] = {}
        for score in scores:
            scores_by_set.setdefault(score.set_number, score)

        records_by_set: Dict[str, List[PointByPointDTO]] = defaultdict(list)
        for record in point_by_point:
            if record.set_number is None:
                continue
            records_by_set[record.set_number].append(record)

        sets = []
        for set_number in sorted(records_by_set):
            set_score = scores_by_set.get(set_number)
            sets.append(self._build_set(set_number, records_by_set[set_number], set_score))

        logger.debug(
            f"Reconstruidos {len(sets)} sets desde {len(point_by_point)} registros punto por punto"
        )
        return sets

    def sets_from_scores(self, scores: Sequence[Score]) -> List[TennisSet]:
        """Un set completado y sin juegos por cada fila de resumen"""
        return [
            TennisSet(
                number=score.set_number,
                first_player_games=parse_int(score.first_player_score) or 0,
                second_player_games=parse_int(score.second_player_score) or 0,
                games=[],
                is_completed=True,
            )
            for score in scores
        ]

    def _build_set(
        self,
        set_number: str,
        records: List[PointByPointDTO],
        set_score: Optional[Score],
    ) -> TennisSet:
        records_by_game: Dict[str, List[PointByPointDTO]] = defaultdict(list)
        for record in records:
            if record.number_game is None:
                continue
            records_by_game[record.number_game].append(record)

        # sorted() es estable: empates (ej: varios no numéricos) mantienen el orden de llegada
        games = [
            self._build_game(game_number, game_records[-1])
            for game_number, game_records in sorted(
                records_by_game.items(), key=lambda item: _game_sort_key(item[0])
            )
        ]

        if set_score is not None:
            first_games = parse_int(set_score.first_player_score) or 0
            second_games = parse_int(set_score.second_player_score) or 0
        else:
            # Set en juego: sin fila de resumen todavía
            first_games, second_games = 0, 0

        return TennisSet(
            number=set_number,
            first_player_games=first_games,
            second_player_games=second_games,
            games=games,
            is_completed=set_score is not None,
        )

    def _build_game(self, game_number: str, latest: PointByPointDTO) -> Game:
        first_points, second_points = parse_point_score(latest.score)
        return Game(
            number=game_number,
            first_player_points=first_points,
            second_player_points=second_points,
            server=latest.player_served,
            points=[map_point(point) for point in latest.points or []],
            is_completed=latest.serve_winner is not None or latest.serve_lost is not None,
        )
