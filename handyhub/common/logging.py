import logging
import sys

from handyhub.config import settings

LOGGER_NAMESPACE = "handyhub"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel((level or settings.LOG_LEVEL).upper())

    # Safe to call more than once (app lifespan and tests).
    if not any(getattr(h, "_handyhub", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._handyhub = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
