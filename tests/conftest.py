"""
Fixtures compartidas: payloads de api-tennis.com y un transporte falso
"""

import json

import pytest


class FakeTransport:
    """Transporte en memoria: devuelve un payload fijo y registra las llamadas"""

    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    def request(self, method, params=None):
        self.calls.append((method, dict(params or {})))
        if isinstance(self.payload, (bytes, str)):
            return self.payload
        return json.dumps(self.payload).encode("utf-8")


def envelope(result, success=1):
    return {"success": success, "result": result}


@pytest.fixture
def fixture_record():
    """Partido terminado de get_fixtures, sin punto por punto"""
    return {
        "event_key": 11976653,
        "event_date": "2024-07-14",
        "event_time": "15:00",
        "event_first_player": "C. Alcaraz",
        "first_player_key": 2382,
        "event_second_player": "N. Djokovic",
        "second_player_key": "1905",
        "event_final_result": "3 - 0",
        "event_game_result": "-",
        "event_serve": None,
        "event_winner": "First Player",
        "event_status": "Finished",
        "event_type_type": "Atp Singles",
        "tournament_name": "Wimbledon",
        "tournament_key": 2155,
        "tournament_round": "Wimbledon - Final",
        "tournament_season": "2024",
        "event_live": "0",
        "event_qualification": "False",
        "event_first_player_logo": "https://api.api-tennis.com/logo-tennis/2382_c-alcaraz.jpg",
        "event_second_player_logo": None,
        "scores": [
            {"score_first": "6", "score_second": "2", "score_set": "1"},
            {"score_first": "6", "score_second": "2", "score_set": "2"},
            {"score_first": "7", "score_second": "6", "score_set": "3"},
        ],
        "pointbypoint": [],
    }


@pytest.fixture
def live_record():
    """Partido en vivo: set 1 terminado, set 2 en juego con el juego 2 repetido"""
    return {
        "event_key": "12001",
        "event_date": "2024-07-15",
        "event_time": "12:30",
        "event_first_player": None,
        "first_player_key": "100",
        "second_player_key": 200,
        "event_game_result": "30 - 15",
        "event_serve": "First Player",
        "event_winner": None,
        "event_status": "Set 2",
        "event_type_type": "Wta Singles",
        "tournament_name": "Hamburg",
        "tournament_key": "3001",
        "tournament_round": None,
        "tournament_season": 2024,
        "event_live": "1",
        "scores": [
            {"score_first": "6", "score_second": "3", "score_set": "1"},
        ],
        "pointbypoint": [
            {
                "set_number": "1",
                "number_game": "1",
                "player_served": "First Player",
                "serve_winner": "First Player",
                "serve_lost": None,
                "score": "1 - 0",
                "points": [
                    {"number_point": "1", "score": "15 - 0", "break_point": None,
                     "set_point": None, "match_point": None},
                ],
            },
            {
                "set_number": "2",
                "number_game": "1",
                "player_served": "Second Player",
                "serve_winner": "Second Player",
                "serve_lost": None,
                "score": "0 - 1",
                "points": [],
            },
            {
                "set_number": "2",
                "number_game": "2",
                "player_served": "First Player",
                "serve_winner": None,
                "serve_lost": None,
                "score": "15 - 0",
                "points": [
                    {"number_point": "1", "score": "15 - 0"},
                ],
            },
            {
                "set_number": "2",
                "number_game": "2",
                "player_served": "First Player",
                "serve_winner": None,
                "serve_lost": None,
                "score": "30 - 15",
                "points": [
                    {"number_point": "1", "score": "15 - 0"},
                    {"number_point": "2", "score": "15 - 15", "break_point": "null"},
                    {"number_point": "3", "score": "30 - 15", "break_point": "Second Player"},
                ],
            },
        ],
    }


@pytest.fixture
def player_record():
    return {
        "player_key": 2382,
        "player_name": "C. Alcaraz",
        "player_full_name": "Carlos Alcaraz",
        "player_country": "Spain",
        "player_country_code": "ESP",
        "player_bday": "05.05.2003",
        "player_logo": "https://api.api-tennis.com/logo-tennis/2382_c-alcaraz.jpg",
        "stats": [
            {"season": "2024", "type": "singles", "rank": "3", "titles": "4",
             "matches_won": "54", "matches_lost": "13", "hard_won": "24",
             "hard_lost": "9", "clay_won": "17", "clay_lost": "3",
             "grass_won": "12", "grass_lost": "1"},
            {"season": "2023", "type": "doubles"},
        ],
    }


@pytest.fixture
def standings_records():
    return [
        {"place": "1", "player": "J. Sinner", "player_key": 1905.0, "league": "ATP",
         "movement": "same", "country": "Italy", "points": "11830"},
        {"rank": 2, "player_name": "", "player": "A. Zverev", "player_key": "1900",
         "player_country": "Germany", "points": 7915, "tournament_played": "23"},
        {"place": "3", "player": "Unknown", "player_key": None, "points": "7010"},
    ]
