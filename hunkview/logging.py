import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    Propagation is disabled so records are not emitted twice when the host
    application configures the root logger.
    """

    logger = logging.getLogger("hunkview")
    for existing in list(logger.handlers):
        if getattr(existing, "_hunkview_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._hunkview_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
