"""
Servicios
=========

- APITennisClient: transporte HTTP
- TennisRepository: fachada de consultas
- MatchStateReconstructor: jerarquía sets/juegos/puntos
"""

from .api_tennis_client import APITennisClient
from .match_state_reconstructor import MatchStateReconstructor
from .tennis_repository import TennisRepository

__all__ = ['APITennisClient', 'MatchStateReconstructor', 'TennisRepository']
