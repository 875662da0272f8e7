"""structlog provider.

Log events go through stdlib logging so handlers stay configurable: the
``stream`` handler renders for humans on stderr, ``file`` writes JSON lines
rotated at midnight. Handler selection and level come from app_config.
"""

import logging
import logging.handlers
from pathlib import Path

import structlog

from linewrap.core.configs import app_config

LOGGER_NAME = 'main'

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.processors.add_log_level,
    structlog.processors.CallsiteParameterAdder(
        [
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.LINENO,
            structlog.processors.CallsiteParameter.FUNC_NAME,
        ]
    ),
    structlog.processors.TimeStamper(fmt='iso'),
]


def find_log_dir(start: Path | None = None) -> Path:
    """Return ``logs/`` beside the nearest pyproject.toml above ``start``."""
    path = (start or Path(__file__)).resolve()
    for parent in path.parents:
        if (parent / 'pyproject.toml').exists():
            return parent / 'logs'
    return Path.cwd() / 'logs'


def _formatter(renderer: structlog.typing.Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def build_handlers(names: list[str], log_dir: Path | None = None) -> list[logging.Handler]:
    """Create the stdlib handlers named in LOG_HANDLERS."""
    handlers: list[logging.Handler] = []
    if 'stream' in names:
        stream = logging.StreamHandler()
        stream.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))
        handlers.append(stream)
    if 'file' in names:
        log_dir = log_dir or find_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.TimedRotatingFileHandler(
            log_dir / 'linewrap.log', when='midnight', utc=True, delay=True, backupCount=7
        )
        rotating.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        handlers.append(rotating)
    return handlers


def configure_logging(level: str, handler_names: list[str]) -> structlog.stdlib.BoundLogger:
    """Attach handlers to the ``main`` logger and route structlog through it."""
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.handlers.clear()
    for handler in build_handlers(handler_names):
        stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(level)
    stdlib_logger.propagate = False

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(LOGGER_NAME)


logger = configure_logging(app_config.LOG_LEVEL, app_config.LOG_HANDLERS)
