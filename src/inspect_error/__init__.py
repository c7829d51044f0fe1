"""inspect-error: observe the error of a result without consuming it.

Public API:
    - Success / Failure / Result: The two-variant outcome type
    - inspect_error(): Call a side-effecting callback on failures only
    - log_error(): Callback factory that logs the error
    - Config: Defaults for log_error()
"""

from __future__ import annotations

import logging

from inspect_error.callbacks import log_error
from inspect_error.config import Config
from inspect_error.errors import ConfigurationError, InspectErrorError
from inspect_error.result import Failure, Result, Success, inspect_error

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("inspect-error")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("inspect_error").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "InspectErrorError",
    "Result",
    "Success",
    "inspect_error",
    "log_error",
]
