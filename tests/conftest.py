# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Test fixtures for typed_env."""

import pytest

from typed_env import EnvStore, SilentLogger, StaticEnvironment


@pytest.fixture
def silent_logger():
    """Logger that records entries in memory."""
    return SilentLogger(level="DEBUG", name="typed_env.test")


@pytest.fixture
def static_env():
    """Empty in-memory environment."""
    return StaticEnvironment()


@pytest.fixture
def store(static_env, silent_logger):
    """Store backed by the in-memory environment."""
    return EnvStore(source=static_env, logger=silent_logger)
