"""JSON logging for the kanowins service.

Every record is emitted as one JSON line on stdout with ``severity``,
``timestamp`` and ``logger`` keys plus whatever ``extra={...}`` the caller
attached (win_id, trigger_id, ...). AWS SDK loggers are capped at WARNING so
a DEBUG level does not dump signed DynamoDB requests.
"""

import logging
import logging.config

_QUIET_LOGGERS = ("boto3", "botocore", "urllib3")


def build_logging_config(level: str = "INFO") -> dict:
    """Return a dictConfig mapping with the root logger at ``level``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
                "rename_fields": {
                    "levelname": "severity",
                    "asctime": "timestamp",
                    "name": "logger",
                },
                "static_fields": {"service": "kanowins"},
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in _QUIET_LOGGERS},
        "root": {"level": level.upper(), "handlers": ["stdout"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON configuration. Called once from the app lifespan."""
    logging.config.dictConfig(build_logging_config(level))
