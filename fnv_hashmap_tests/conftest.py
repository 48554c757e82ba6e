import pytest
import os
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from fnv_hashmap.hash_map import HashMap


@pytest.fixture
def table():
    return HashMap()


@pytest.fixture
def populated_table():
    table = HashMap()
    for i in range(100):
        table.set(str(i), i)
    return table


@pytest.fixture
def resize_calls():
    return []


@pytest.fixture
def tracked_table(resize_calls):
    return HashMap(on_resize=lambda old, new: resize_calls.append((old, new)))


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('fnv_hashmap.logger.logger.logger') as mock_logger:
        mock_logger.debug = MagicMock()
        mock_logger.info = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def keys_file(tmp_path):
    path = tmp_path / "keys.txt"
    path.write_text("".join(f"key-{i}\n" for i in range(50)) + "key-0\n", encoding="utf-8")
    return path
