"""
Decodificación Tolerante
========================

La API envía el mismo campo unas veces como string y otras como número
(ej: "event_key": "12045" o "event_key": 12045). Aquí se normaliza todo a
un string canónico.

Cada representación aceptada es un "extractor" registrado por nombre; un
campo declara qué representaciones acepta y en qué orden se prueban:

    decode_flexible(12045)                             -> "12045"
    decode_flexible(1903.0, STRING_INTEGER_OR_FLOAT)   -> "1903"
    decode_flexible(None)                              -> None

Un campo nuevo con ambigüedad solo necesita elegir su tupla de
representaciones, no código nuevo.
"""

import math
import re
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from ..exceptions import DecodingError


def _from_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _from_integer(value: Any) -> Optional[str]:
    # bool es subclase de int en Python, pero no es un entero en JSON
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def _from_float(value: Any) -> Optional[str]:
    if isinstance(value, float) and math.isfinite(value):
        return str(int(value))
    return None


REPRESENTATIONS: Dict[str, Callable[[Any], Optional[str]]] = {
    "string": _from_string,
    "integer": _from_integer,
    "float": _from_float,
}

STRING_OR_INTEGER: Tuple[str, ...] = ("string", "integer")
STRING_INTEGER_OR_FLOAT: Tuple[str, ...] = ("string", "integer", "float")

_INTEGER_RE = re.compile(r"[+-]?\d+")


def decode_flexible(value: Any, accepts: Iterable[str] = STRING_OR_INTEGER) -> Optional[str]:
    """
    Prueba cada representación aceptada en orden y devuelve la primera que encaja

    Args:
        value: Valor JSON ya decodificado
        accepts: Nombres de representaciones de REPRESENTATIONS, por prioridad

    Returns:
        String canónico o None si ninguna representación encaja
    """
    for name in accepts:
        decoded = REPRESENTATIONS[name](value)
        if decoded is not None:
            return decoded
    return None


def require_flexible(
    record: Mapping[str, Any], field: str, accepts: Iterable[str] = STRING_OR_INTEGER
) -> str:
    """
    Igual que decode_flexible pero para campos obligatorios

    Raises:
        DecodingError: Si el campo falta o no encaja en ninguna representación
    """
    if field not in record or record[field] is None:
        raise DecodingError(field, "missing")
    decoded = decode_flexible(record[field], accepts)
    if decoded is None:
        raise DecodingError(field, f"unexpected type {type(record[field]).__name__}")
    return decoded


def resolve_first(
    record: Mapping[str, Any],
    candidates: Iterable[str],
    accepts: Iterable[str] = STRING_OR_INTEGER,
    skip_empty: bool = False,
) -> Optional[str]:
    """
    Cadena de campos alternativos evaluada por prioridad

    Ej: el nombre del jugador en standings llega como "player_name" o "player".

    Args:
        record: Registro crudo de la API
        candidates: Nombres de campo en orden de prioridad
        accepts: Representaciones aceptadas para cada candidato
        skip_empty: Si True, un string vacío cuenta como ausente

    Returns:
        Primer valor resuelto o None
    """
    accepts = tuple(accepts)
    for field in candidates:
        decoded = decode_flexible(record.get(field), accepts)
        if decoded is None:
            continue
        if skip_empty and not decoded:
            continue
        return decoded
    return None


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parsea un string numérico; None si no es un entero"""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not _INTEGER_RE.fullmatch(value):
        return None
    return int(value)
