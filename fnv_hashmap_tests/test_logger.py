import json
from unittest.mock import patch

from fnv_hashmap.logger.log_types import LogEvent
from fnv_hashmap.logger.logger import log_error_event, log_load_event, log_resize_event


def test_log_resize_event(mock_logger):
    log_resize_event(LogEvent.TABLE_GROWN, 10, 14, 16)

    payload = json.loads(mock_logger.debug.call_args[0][0])
    assert payload == {
        "event": "table_grown",
        "old_bucket_count": 10,
        "new_bucket_count": 14,
        "entries_count": 16
    }


def test_log_load_event_without_load_factor(mock_logger):
    log_load_event(LogEvent.KEYS_LOADED, "keys.txt", 3, 10)

    payload = json.loads(mock_logger.info.call_args[0][0])
    assert payload["event"] == "keys_loaded"
    assert "load_factor" not in payload


def test_log_load_event_with_load_factor(mock_logger):
    log_load_event(LogEvent.KEYS_LOADED, "keys.txt", 3, 10, 0.3)

    payload = json.loads(mock_logger.info.call_args[0][0])
    assert payload["load_factor"] == 0.3


def test_log_error_event(mock_logger):
    log_error_event(LogEvent.LOAD_FAILED, "boom")

    mock_logger.error.assert_called_once()
    payload = json.loads(mock_logger.error.call_args[0][0])
    assert payload == {"event": "load_failed", "error": "boom"}


def test_table_logs_each_resize(populated_table, mock_logger):
    events = [json.loads(c[0][0])["event"] for c in mock_logger.debug.call_args_list]
    assert events == ["table_grown"] * 6


@patch('fnv_hashmap.hash_map.log_resize_event')
def test_shrink_is_logged_as_shrink(mock_log, populated_table):
    for i in range(100):
        populated_table.delete(str(i))

    events = [c[0][0] for c in mock_log.call_args_list]
    assert events == [LogEvent.TABLE_SHRUNK] * 5
