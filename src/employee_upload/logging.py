import logging
import os
import sys

from pythonjsonlogger import jsonlogger

HTTP_LOGGERS = ["urllib3", "urllib3.connectionpool", "requests"]


def setup_logging():
    """
    Configures structured JSON logging for the client.

    Log records carry timestamp, level, logger name, message and the
    trace_id/span_id injected by ddtrace. The root level comes from LOG_LEVEL
    (INFO by default). The HTTP library loggers share the stdout handler but
    stay at WARNING so connection pool chatter does not drown the flow events.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    root_logger.handlers = [stream_handler]

    for logger_name in HTTP_LOGGERS:
        http_logger = logging.getLogger(logger_name)
        http_logger.setLevel(logging.WARNING)
        http_logger.handlers = [stream_handler]
        http_logger.propagate = False

    return root_logger
