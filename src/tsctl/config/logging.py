"""structlog configuration for tsctl.

The domain layer logs through stdlib ``logging`` (parse candidates rejected,
unknown timezones) and the service layer through structlog. Both are routed
to one stderr handler, rendered either for a console or as JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(*, verbose: bool = False, quiet: bool = False, level: str | None = None) -> int:
    """The ``tsctl`` logger level: -v, then -q, then *level*, then WARNING."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if level is not None:
        return _LEVELS[level.lower()]
    return logging.WARNING


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    level: str | None = None,
) -> None:
    """Install the stderr handler and set the ``tsctl`` logger level.

    Args:
        verbose: DEBUG output, including each rejected parse candidate.
        quiet: Only ERROR and above. Ignored when *verbose* is set.
        log_json: JSON lines instead of console output.
        level: Level name from the ``[logging]`` config section.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("tsctl").setLevel(
        resolve_level(verbose=verbose, quiet=quiet, level=level)
    )
