"""Result type with inline error inspection.

``Success`` and ``Failure`` form a two-variant outcome. ``inspect_error``
lets a caller observe the error of a ``Failure`` (typically to log it)
without consuming or transforming the outcome:

    result = fetch_magic_number().inspect_error(
        lambda err: log.warning("Something went wrong: '%s'.", err)
    )

The callback runs only for failures. The outcome comes back as the very
same object in both cases.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import typing

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")
T = typing.TypeVar("T", bound="Success[typing.Any] | Failure[typing.Any]")


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful outcome holding ``value``."""

    value: TSuccess

    def inspect_error(self, inspect: Callable[[typing.Any], object]) -> typing.Self:
        """Return ``self`` untouched; ``inspect`` is never called for a success."""
        del inspect
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A failed outcome holding ``error``.

    The error payload is not restricted to exceptions: a string or an error
    code works just as well.
    """

    error: TFailure

    def inspect_error(self, inspect: Callable[[TFailure], object]) -> typing.Self:
        """Call ``inspect`` with the contained error, then return ``self``.

        Mainly intended for logging errors inline, instead of unpacking the
        failure and rebuilding it by hand. The callback's return value is
        ignored; an exception raised by the callback propagates to the caller.

        Example:
            def read_magic_number() -> Result[int, str]:
                result = Failure("couldn't connect to the database").inspect_error(
                    lambda err: print(f"Something went wrong: '{err}'.")
                )
                if isinstance(result, Failure):
                    return result
                return Success(result.value)
        """
        inspect(self.error)
        return self


Result = Success[TSuccess] | Failure[TFailure]


def inspect_error(
    result: T, inspect: Callable[[typing.Any], object]
) -> T:
    """Free-function form of ``Success.inspect_error``/``Failure.inspect_error``.

    Raises:
        TypeError: If ``result`` is neither a ``Success`` nor a ``Failure``.
    """
    if isinstance(result, Failure):
        inspect(result.error)
        return result
    if isinstance(result, Success):
        return result
    raise TypeError(
        f"inspect_error() expects a Success or Failure, got {type(result).__name__}"
    )
