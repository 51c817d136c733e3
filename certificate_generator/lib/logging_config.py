"""Diagnostic logging for the certificate generator.

Prompts, command echoes and the final report go to stdout. Everything the
generator logs (reused root keys, failed trust installs, name mismatches,
fatal errors) is written to stderr as one JSON object per line.
"""

import logging

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "certificate_generator"

LOG_FIELDS = frozenset(
    {
        "timestamp",
        "level",
        "message",
        "exc_info",
        "funcName",
        "lineno",
        # set via extra= when an openssl or sudo invocation fails
        "command",
        "returncode",
    }
)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter limited to LOG_FIELDS, with levelname renamed to level."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        for key in [key for key in log_record if key not in LOG_FIELDS]:
            log_record.pop(key)


def _has_json_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, CustomJsonFormatter) for h in logger.handlers)


def _setup_logger() -> logging.Logger:
    """Attach the stderr JSON handler to the generator logger once.

    Returns:
        The ``certificate_generator`` logger at INFO, not propagating to root
    """
    logger = logging.getLogger(LOGGER_NAME)

    if _has_json_handler(logger):
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        CustomJsonFormatter(
            fmt="%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
            timestamp=True,
        )
    )

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def set_verbose(verbose: bool) -> None:
    """Log successful command output at DEBUG when --verbose is given."""
    LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)


LOGGER = _setup_logger()
