"""
Módulo de Configuración Centralizada
====================================

Uso:
    from tennis_tracker.config import Config

    api_key = Config.API_TENNIS_API_KEY
"""

from .settings import Config, ENV_TEMPLATE

__all__ = ['Config', 'ENV_TEMPLATE']
