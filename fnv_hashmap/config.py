import os

# Table tunables
MIN_BUCKET_COUNT = 10
MAX_LOAD_FACTOR = 1.5
MIN_LOAD_FACTOR = 0.25
RESIZE_FACTOR = 1.4

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

LOGGER_NAME = 'fnv_hashmap'

LOGZIO_API_KEY = os.getenv("LOGZIO_API_KEY")
LOG_LEVEL = os.getenv("FNV_HASHMAP_LOG_LEVEL", "INFO").upper()

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s - %(message)s',
        }
    },
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': 'DEBUG',
            'handlers': ['null'],  # Use null handler to suppress logs during tests
            'propagate': False
        }
    }
}

CONSOLE_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': LOG_LEVEL,
            'handlers': ['console'],
            'propagate': False
        }
    }
}

# Ships logs to logz.io when an API key is present
PRODUCTION_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'logzioFormat': {
            'format': '%(message)s',
        }
    },
    'handlers': {
        'logzio': {
            'class': 'logzio.handler.LogzioHandler',
            'level': 'INFO',
            'formatter': 'logzioFormat',
            'token': LOGZIO_API_KEY,
            'logzio_type': 'fnv-hashmap',
            'logs_drain_timeout': 5,
            'url': 'https://listener-eu.logz.io:8071',
            'retries_no': 4,
            'retry_timeout': 2,
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': LOG_LEVEL,
            'handlers': ['logzio'],
            'propagate': False
        }
    }
}


def get_logging_config() -> dict:
    if IS_TESTING:
        return TEST_LOGGING
    if LOGZIO_API_KEY:
        return PRODUCTION_LOGGING
    return CONSOLE_LOGGING


LOGGING = get_logging_config()
