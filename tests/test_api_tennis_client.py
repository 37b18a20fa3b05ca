"""
Tests del transporte HTTP (requests mockeado)
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from tennis_tracker.exceptions import (
    HTTPStatusError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
)
from tennis_tracker.services.api_tennis_client import APITennisClient


def make_response(status_code=200, content=b'{"success": 1, "result": []}'):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def client():
    return APITennisClient(
        api_key="test-key",
        base_url="https://api.api-tennis.com/tennis/",
        timeout=5,
        connect_timeout=2,
        max_retries=3,
    )


@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_request_sends_method_key_and_filters(mock_get, client):
    mock_get.return_value = make_response()

    body = client.request("get_fixtures", {"date_start": "2024-07-14"})

    assert body == b'{"success": 1, "result": []}'
    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.api-tennis.com/tennis/"
    assert kwargs["params"] == {"method": "get_fixtures", "APIkey": "test-key", "date_start": "2024-07-14"}
    assert kwargs["timeout"] == (2, 5)
    assert client.get_rate_limit_status() == {"requests_made": 1}


@patch("tennis_tracker.services.api_tennis_client.time.sleep")
@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_timeouts_are_retried_with_backoff(mock_get, mock_sleep, client):
    mock_get.side_effect = [requests.exceptions.Timeout(), requests.exceptions.Timeout(), make_response()]

    client.request("get_livescore")

    assert mock_get.call_count == 3
    assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2]


@patch("tennis_tracker.services.api_tennis_client.time.sleep")
@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_timeout_after_last_attempt_is_network_error(mock_get, mock_sleep, client):
    mock_get.side_effect = requests.exceptions.Timeout("read timed out")

    with pytest.raises(NetworkError) as exc_info:
        client.request("get_livescore")

    assert mock_get.call_count == 3
    assert isinstance(exc_info.value.cause, requests.exceptions.Timeout)


@patch("tennis_tracker.services.api_tennis_client.time.sleep")
@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_connection_error_is_not_retried(mock_get, mock_sleep, client):
    mock_get.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(NetworkError):
        client.request("get_events")

    assert mock_get.call_count == 1
    mock_sleep.assert_not_called()


@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_non_2xx_status_raises(mock_get, client):
    mock_get.return_value = make_response(status_code=503)

    with pytest.raises(HTTPStatusError) as exc_info:
        client.request("get_events")
    assert exc_info.value.status_code == 503


@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_empty_body_raises(mock_get, client):
    mock_get.return_value = make_response(content=b"")

    with pytest.raises(InvalidResponseError):
        client.request("get_events")


@patch("tennis_tracker.services.api_tennis_client.requests.get")
def test_invalid_url_raises(mock_get):
    mock_get.side_effect = requests.exceptions.MissingSchema("no scheme")
    client = APITennisClient(api_key="k", base_url="api.api-tennis.com")

    with pytest.raises(InvalidURLError) as exc_info:
        client.request("get_events")
    assert exc_info.value.url == "api.api-tennis.com"
