"""
Módulo de Utilidades
====================

Decodificación tolerante de campos ambiguos de la API.
"""

from .decoding import (
    STRING_OR_INTEGER,
    STRING_INTEGER_OR_FLOAT,
    decode_flexible,
    require_flexible,
    resolve_first,
    parse_int,
)

__all__ = [
    'STRING_OR_INTEGER',
    'STRING_INTEGER_OR_FLOAT',
    'decode_flexible',
    'require_flexible',
    'resolve_first',
    'parse_int',
]
