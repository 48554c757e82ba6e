import json
import logging

from fnv_hashmap.config import LOGGER_NAME
from fnv_hashmap.logger.log_types import LogEvent

# Configured through logging.config.dictConfig(LOGGING) by the entry point
logger = logging.getLogger(LOGGER_NAME)


def log_resize_event(event: LogEvent, old_bucket_count: int, new_bucket_count: int, entries_count: int):
    """Log a bucket reallocation"""
    logger.debug(json.dumps({
        "event": event,
        "old_bucket_count": old_bucket_count,
        "new_bucket_count": new_bucket_count,
        "entries_count": entries_count
    }))


def log_load_event(event: LogEvent, source: str, entries_count: int, buckets_count: int, load_factor: float = None):
    """Log a bulk load of keys (with optional load factor)"""
    log_data = {
        "event": event,
        "source": source,
        "entries_count": entries_count,
        "buckets_count": buckets_count
    }
    if load_factor is not None:
        log_data["load_factor"] = round(load_factor, 4)

    logger.info(json.dumps(log_data))


def log_memory_event(event: LogEvent, stage: str, rss_bytes: int):
    logger.info(json.dumps({
        "event": event,
        "stage": stage,
        "rss_mb": round(rss_bytes / 1e6, 2)
    }))


def log_error_event(event: LogEvent, error: str):
    """Log an error event"""
    logger.error(json.dumps({
        "event": event,
        "error": error
    }))
