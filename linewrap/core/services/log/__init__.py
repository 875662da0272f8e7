"""Logging service: a structlog logger named ``main``, configured on first use."""

from structlog.stdlib import BoundLogger


def get_log_service() -> BoundLogger:
    from linewrap.core.services.log.providers.structlog.setup import logger

    return logger
