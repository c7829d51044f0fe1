"""Configuration: frozen defaults for the logging callbacks."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from inspect_error.errors import ConfigurationError

load_dotenv()

DEFAULT_LOG_LEVEL = "ERROR"
DEFAULT_MESSAGE = "Something went wrong: '%s'."

_LOG_LEVEL_ENV = "INSPECT_ERROR_LOG_LEVEL"
_MESSAGE_ENV = "INSPECT_ERROR_MESSAGE"
_TRACEBACK_ENV = "INSPECT_ERROR_TRACEBACK"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Immutable defaults for ``log_error``.

    Unset fields are resolved from ``INSPECT_ERROR_*`` environment variables
    (a ``.env`` file is honoured), then from built-in defaults.

    Example:
        config = Config(log_level="WARNING")
        on_error = log_error("app.db", config=config)
    """

    #: Level name or number; normalized to an ``int``.
    log_level: int | str | None = None
    #: %-style template with a single placeholder for the error.
    message: str | None = None
    #: Attach ``exc_info`` when the error is an exception.
    include_traceback: bool | None = None

    def __post_init__(self) -> None:
        """Resolve unset fields from the environment and validate."""
        level = self.log_level
        if level is None:
            level = os.environ.get(_LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        object.__setattr__(self, "log_level", resolve_level(level))

        message = self.message
        if message is None:
            message = os.environ.get(_MESSAGE_ENV, DEFAULT_MESSAGE)
        try:
            message % ("<error>",)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"Invalid message template: {message!r}",
                hint="Use a %-style template with exactly one placeholder, e.g. 'failed: %s'.",
            ) from exc
        object.__setattr__(self, "message", message)

        if self.include_traceback is None:
            raw = os.environ.get(_TRACEBACK_ENV, "").strip().lower()
            if raw in _TRUTHY:
                object.__setattr__(self, "include_traceback", True)
            elif raw in _FALSY:
                object.__setattr__(self, "include_traceback", False)
            else:
                raise ConfigurationError(
                    f"{_TRACEBACK_ENV} must be a boolean flag, got {raw!r}",
                    hint="Use 1/0, true/false, yes/no or on/off.",
                )

    def __str__(self) -> str:
        """Return a developer-friendly representation."""
        return (
            f"Config(log_level={logging.getLevelName(self.log_level)!r}, "
            f"message={self.message!r}, include_traceback={self.include_traceback})"
        )

    __repr__ = __str__


def resolve_level(level: int | str) -> int:
    """Normalize a logging level name or number to an ``int``.

    Raises:
        ConfigurationError: For unknown names and negative numbers.
    """
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            level = int(name)
        else:
            known = logging.getLevelNamesMapping()
            if name not in known:
                raise ConfigurationError(
                    f"Unknown log level: {level!r}",
                    hint=f"Use one of {', '.join(sorted(known))} or a non-negative number.",
                )
            return known[name]
    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise ConfigurationError(
            f"log level must be a non-negative int, got {level!r}",
            hint="Pass a level name such as 'WARNING' or a number such as 30.",
        )
    return level
