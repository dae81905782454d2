"""Tests for KVResult."""

import pytest

from repldb import BackendError, ConfigurationError, KVResult


def test_success():
    r = KVResult.success("value")
    assert r.ok is True
    assert r.value == "value"
    assert r.error is None
    assert r.error_kind == ""
    assert r.unwrap() == "value"


def test_success_without_value():
    r = KVResult.success()
    assert r.ok is True
    assert r.value is None


def test_backend_failure():
    err = BackendError("get", "key 'k': down")
    r = KVResult.failure(err)
    assert r.ok is False
    assert r.error is err
    assert r.error_kind == "backend"
    with pytest.raises(BackendError):
        r.unwrap()


def test_configuration_failure():
    r = KVResult.failure(ConfigurationError("http://x", "bad scheme"))
    assert r.error_kind == "configuration"


def test_immutable():
    r = KVResult.success()
    try:
        r.ok = False  # type: ignore[misc]
        raise AssertionError("Should have raised")
    except AttributeError:
        pass
