# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Tests for one-off deferred resolution."""

import pytest

from typed_env import (
    Deferred,
    InvalidFormatError,
    NoValueError,
    ScalarKind,
    StaticEnvironment,
    ValueOverflowError,
    resolve,
)


class TestResolve:
    """Tests for resolve() and the Deferred wrapper."""

    def test_valid_value(self):
        """Test that a valid value is returned by get()."""
        env = StaticEnvironment({"TEST_TYPE": "42"})
        deferred = resolve("TEST_TYPE", ScalarKind.INT32, source=env)

        assert deferred.ok
        assert deferred.get() == 42
        assert deferred.value_or(7) == 42

    def test_string_and_bool(self):
        """Test text and bool resolution."""
        env = StaticEnvironment({"S": "test_value", "B": "true"})

        assert resolve("S", ScalarKind.TEXT, source=env).get() == "test_value"
        assert resolve("B", ScalarKind.BOOL, source=env).get() is True

    def test_invalid_value_raises_on_get(self):
        """Test that the captured parse error is raised on get()."""
        env = StaticEnvironment({"TEST_TYPE": "not_an_int"})
        deferred = resolve("TEST_TYPE", ScalarKind.INT32, source=env)

        assert not deferred.ok
        assert isinstance(deferred.error, InvalidFormatError)
        with pytest.raises(InvalidFormatError, match="expected int32"):
            deferred.get()

    def test_missing_raises_no_value(self):
        """Test that an absent variable raises NoValueError on get()."""
        deferred = resolve("MISSING_KEY", ScalarKind.INT32, source=StaticEnvironment())

        assert deferred.error is None
        with pytest.raises(NoValueError, match="no value for MISSING_KEY"):
            deferred.get()

    def test_missing_falls_back(self):
        """Test that value_or returns the fallback for an unset name."""
        deferred = resolve("MISSING", ScalarKind.INT32, source=StaticEnvironment())
        assert deferred.value_or(543) == 543

    def test_parse_failure_falls_back(self):
        """Test that value_or hides parse failures too."""
        env = StaticEnvironment({"TEST_TYPE": "true", "BIG": "99999999999"})

        assert resolve("TEST_TYPE", ScalarKind.INT32, source=env).value_or(932) == 932
        assert resolve("BIG", ScalarKind.INT32, source=env).value_or(1) == 1

    def test_overflow_captured(self):
        """Test that overflow is captured, not raised, by resolve()."""
        env = StaticEnvironment({"BIG": "9223372036854775808"})
        deferred = resolve("BIG", ScalarKind.INT64, source=env)

        with pytest.raises(ValueOverflowError):
            deferred.get()
        assert deferred.value_or(999) == 999

    def test_very_long_digit_string_captured(self):
        """Test that a digit string past int()'s length limit still yields a Deferred."""
        env = StaticEnvironment({"PORT": "9" * 5000})
        deferred = resolve("PORT", ScalarKind.INT64, source=env)

        assert deferred.value_or(543) == 543
        with pytest.raises(ValueOverflowError):
            deferred.get()

    def test_empty_value_is_absent(self):
        """Test that an empty variable is treated as unset."""
        deferred = resolve("EMPTY", ScalarKind.TEXT, source=StaticEnvironment({"EMPTY": ""}))

        assert deferred.value_or("fallback") == "fallback"
        with pytest.raises(NoValueError):
            deferred.get()

    def test_false_is_a_value(self):
        """Test that a resolved False is not mistaken for a missing value."""
        deferred = resolve("FLAG", ScalarKind.BOOL, source=StaticEnvironment({"FLAG": "false"}))

        assert deferred.ok
        assert deferred.value_or(True) is False

    def test_process_environment_default(self, monkeypatch):
        """Test that resolve reads os.environ by default."""
        monkeypatch.setenv("TYPED_ENV_TEST_RATIO", "0.75")
        assert resolve("TYPED_ENV_TEST_RATIO", ScalarKind.FLOAT64).get() == 0.75

        monkeypatch.delenv("TYPED_ENV_TEST_RATIO")
        assert resolve("TYPED_ENV_TEST_RATIO", ScalarKind.FLOAT64).value_or(1.0) == 1.0

    def test_store_resolve_bypasses_entries(self, store, static_env):
        """Test that EnvStore.resolve reads its source and stores nothing."""
        static_env.write_raw("LATE", "5")
        deferred = store.resolve("LATE", ScalarKind.INT32)

        assert isinstance(deferred, Deferred)
        assert deferred.get() == 5
        assert store.empty()
