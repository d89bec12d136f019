import logging
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

# Loggers that get their own copy of the JSON handler instead of propagating.
# yt-dlp reports progress and info lines through `debug` when run quietly.
MANAGED_LOGGER_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.INFO,
    "uvicorn.error": logging.INFO,
    "yt_dlp": logging.DEBUG,
}


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Routes the service's logs to stdout as JSON lines.

    The root logger is set to `level`. Uvicorn and yt-dlp loggers are set to
    the levels in `MANAGED_LOGGER_LEVELS` and write through the same handler
    without propagating. Calling this again replaces the JSON handler rather
    than stacking a second one; other handlers on the root logger are kept.

    Returns:
        logging.Logger: The root logger.
    """
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [
        handler
        for handler in root_logger.handlers
        if not isinstance(handler.formatter, jsonlogger.JsonFormatter)
    ]
    root_logger.addHandler(stream_handler)

    for logger_name, logger_level in MANAGED_LOGGER_LEVELS.items():
        managed = logging.getLogger(logger_name)
        managed.setLevel(logger_level)
        managed.handlers = [stream_handler]
        managed.propagate = False

    return root_logger
