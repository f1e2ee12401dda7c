"""Logging helpers for typed errors."""

import logging
from typing import Any

from terrors.chain import cause, iter_chain, type_of
from terrors.config import TerrorsConfig
from terrors.render import verbose as render_verbose

# Reserved LogRecord attribute names that cannot be used in extra dict
_RESERVED_LOG_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "asctime",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


def _truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def error_fields(err: BaseException, max_message_length: int = 500) -> dict[str, Any]:
    """
    Structured log fields describing err.

    Returns:
        Dict with error_category (classification value), error_message,
        error_root_cause and error_chain_depth
    """
    return {
        "error_category": type_of(err).value,
        "error_message": _truncate(str(err), max_message_length),
        "error_root_cause": _truncate(str(cause(err)), max_message_length),
        "error_chain_depth": sum(1 for _ in iter_chain(err)),
    }


def log_error(
    logger: logging.Logger,
    err: BaseException,
    msg: str,
    level: int | None = None,
    verbose: bool | None = None,
    config: TerrorsConfig | None = None,
    **kwargs: Any,
) -> None:
    """
    Log an error with its classification and causal chain as context.

    Args:
        logger: Logger instance
        err: Error to log
        msg: Context message
        level: Log level (default: config log_level)
        verbose: Add error_trace with the full chain and stack traces
            (default: config log_verbose)
        config: Settings (default: TerrorsConfig())
        **kwargs: Additional context fields, taking precedence over the
            computed error_* fields

    Example:
        try:
            load(path)
        except Exception as e:
            log_error(logger, e, "Load failed", path=str(path))
    """
    config = config or TerrorsConfig()
    if level is None:
        level = config.level
    if verbose is None:
        verbose = config.log_verbose

    extra = error_fields(err, config.max_message_length)
    extra.update({k: v for k, v in kwargs.items() if k not in _RESERVED_LOG_KEYS})
    if verbose and "error_trace" not in extra:
        extra["error_trace"] = render_verbose(err)

    # Errors that were never raised have no traceback worth printing
    exc_info = err if err.__traceback__ is not None else None
    logger.log(level, msg, exc_info=exc_info, extra=extra)
