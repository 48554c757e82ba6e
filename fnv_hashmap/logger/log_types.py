from enum import Enum


class LogEvent(str, Enum):
    TABLE_GROWN = "table_grown"
    TABLE_SHRUNK = "table_shrunk"
    TABLE_RESIZED = "table_resized"
    KEYS_LOADED = "keys_loaded"
    MEMORY_USAGE = "memory_usage"
    LOAD_FAILED = "load_failed"
