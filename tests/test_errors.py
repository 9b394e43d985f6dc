import pytest

from obadh.errors import InvalidInputError, ObadhError, SystemFailureError


def test_invalid_input_message():
    err = InvalidInputError("bad")
    assert str(err) == "Invalid input: bad"
    assert err.detail == "bad"


def test_invalid_input_is_obadh_error():
    err = InvalidInputError("oops")
    assert issubclass(InvalidInputError, ObadhError)
    assert isinstance(err, ObadhError)
    assert str(err) == "Invalid input: oops"
    assert err.detail == "oops"


def test_system_failure_wraps_os_error():
    original = OSError("disk gone")
    err = SystemFailureError(original)
    assert str(err) == "System error: disk gone"
    assert err.error is original
    assert err.__cause__ is original


def test_system_failure_caught_as_base():
    original = OSError("broken pipe")
    with pytest.raises(ObadhError) as info:
        raise SystemFailureError(original)
    assert isinstance(info.value, SystemFailureError)
    assert str(info.value) == "System error: broken pipe"
    assert info.value.error is original