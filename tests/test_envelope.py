"""
Tests del envelope {success, error, result}
"""

import pytest

from tennis_tracker.exceptions import DecodingError
from tennis_tracker.services.envelope import unwrap_envelope


def test_result_list_is_passed_through():
    assert unwrap_envelope({"success": 1, "result": [{"a": 1}]}) == [{"a": 1}]


def test_error_flag_means_no_data():
    payload = {"error": "1", "result": [{"msg": "No event found", "cod": 201}]}
    assert unwrap_envelope(payload, method="get_fixtures") == []


def test_error_flag_as_integer_means_no_data():
    assert unwrap_envelope({"error": 1, "result": [{"a": 1}]}) == []


def test_success_other_than_one_means_no_data():
    assert unwrap_envelope({"success": 0, "result": [{"a": 1}]}) == []
    assert unwrap_envelope({"success": "1", "result": [{"a": 1}]}) == [{"a": 1}]


def test_missing_result_is_empty_unless_required():
    assert unwrap_envelope({"success": 1}) == []
    assert unwrap_envelope({"success": 1, "result": None}) == []

    with pytest.raises(DecodingError) as exc_info:
        unwrap_envelope({"success": 1}, result_required=True)
    assert exc_info.value.field == "result"


def test_error_envelope_wins_over_required_result():
    assert unwrap_envelope({"error": "1"}, result_required=True) == []


def test_non_list_result_is_a_decoding_error():
    with pytest.raises(DecodingError):
        unwrap_envelope({"success": 1, "result": {"a": 1}})


def test_non_object_payload_is_a_decoding_error():
    with pytest.raises(DecodingError) as exc_info:
        unwrap_envelope([1, 2, 3])
    assert exc_info.value.field == "envelope"
