from __future__ import annotations

import pytest

from inspect_error import ConfigurationError, InspectErrorError

pytestmark = pytest.mark.unit


def test_error_carries_message_and_hint() -> None:
    err = ConfigurationError("bad level", hint="use WARNING")

    assert str(err) == "bad level"
    assert err.hint == "use WARNING"


def test_hint_defaults_to_none() -> None:
    assert InspectErrorError("fail").hint is None


def test_subclass_hierarchy() -> None:
    """ConfigurationError is catchable as InspectErrorError and Exception."""
    err = ConfigurationError("nope")

    assert isinstance(err, InspectErrorError)
    assert isinstance(err, Exception)
