"""
Constantes de api-tennis.com
============================

Documentación: https://api-tennis.com/documentation
"""

DATE_FORMAT = "%Y-%m-%d"


class Methods:
    """Valores del parámetro "method" (uno por endpoint)"""
    GET_EVENTS = "get_events"
    GET_FIXTURES = "get_fixtures"
    GET_LIVESCORE = "get_livescore"
    GET_STANDINGS = "get_standings"
    GET_PLAYERS = "get_players"


class Parameters:
    """Nombres de parámetros de query"""
    METHOD = "method"
    API_KEY = "APIkey"
    DATE_START = "date_start"
    DATE_STOP = "date_stop"
    EVENT_TYPE_KEY = "event_type_key"
    EVENT_TYPE = "event_type"
    TOURNAMENT_KEY = "tournament_key"
    TOURNAMENT_SEASON = "tournament_season"
    MATCH_KEY = "match_key"
    PLAYER_KEY = "player_key"
    TIMEZONE = "timezone"
