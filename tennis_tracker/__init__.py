"""
Tennis Tracker
==============

Reconstrucción del estado de partidos de tenis a partir de api-tennis.com.

Uso:
    from tennis_tracker import TennisRepository, APITennisClient

    repository = TennisRepository(APITennisClient())
    partidos = repository.get_livescore(event_type_key="265")
"""

from .exceptions import (
    TennisDataError,
    TransportError,
    InvalidURLError,
    InvalidResponseError,
    HTTPStatusError,
    NetworkError,
    DecodingError,
)
from .services.api_tennis_client import APITennisClient
from .services.tennis_repository import TennisRepository

__version__ = "1.0.0"

__all__ = [
    'TennisDataError',
    'TransportError',
    'InvalidURLError',
    'InvalidResponseError',
    'HTTPStatusError',
    'NetworkError',
    'DecodingError',
    'APITennisClient',
    'TennisRepository',
]
