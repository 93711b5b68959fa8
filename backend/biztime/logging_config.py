import logging
import sys

LOGGER_NAME = "biztime"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the ``biztime`` logger tree."""
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
