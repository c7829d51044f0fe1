"""Ready-made callbacks for ``inspect_error``."""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging
import typing

from inspect_error.config import Config

log = logging.getLogger("inspect_error")


def log_error(
    logger: logging.Logger | str | None = None,
    *,
    level: int | str | None = None,
    message: str | None = None,
    config: Config | None = None,
) -> Callable[[object], None]:
    """Build a callback that logs the error it receives.

    Args:
        logger: Logger or logger name; defaults to the ``inspect_error`` logger.
        level: Level name or number; defaults to ``config.log_level``.
        message: %-style template receiving the error; defaults to
            ``config.message``.
        config: Defaults source; resolved from the environment when omitted.

    Returns:
        A callable taking the error payload. It only logs and returns ``None``.

    Raises:
        ConfigurationError: If ``level``, ``message`` or the resolved
            configuration is invalid. Validation happens here, never when the
            callback runs.

    Example:
        result = load_settings().inspect_error(log_error("app.settings", level="WARNING"))
    """
    if config is None:
        resolved = Config(log_level=level, message=message)
    else:
        overrides = {
            key: value
            for key, value in (("log_level", level), ("message", message))
            if value is not None
        }
        resolved = dataclasses.replace(config, **overrides)

    if logger is None:
        target = log
    elif isinstance(logger, str):
        target = logging.getLogger(logger)
    else:
        target = logger

    log_level = typing.cast("int", resolved.log_level)
    template = typing.cast("str", resolved.message)
    with_traceback = bool(resolved.include_traceback)

    def _log(error: object) -> None:
        exc_info = error if with_traceback and isinstance(error, BaseException) else None
        target.log(log_level, template, error, exc_info=exc_info)

    return _log
