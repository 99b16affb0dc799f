import logging
import sys
from pythonjsonlogger import jsonlogger

_HANDLER_NAME = "liveness-json"


def setup_logging(level: str = "INFO"):
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Re-running setup (tests, repeated run() calls) must not stack handlers
    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.set_name(_HANDLER_NAME)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    log_handler.setFormatter(formatter)
    root_logger.addHandler(log_handler)
