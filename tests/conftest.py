"""Shared fixtures for oktetoconfig tests."""

from __future__ import annotations

import logging

import pytest

from oktetoconfig.config import set_default_resolver
from oktetoconfig.environment import StaticEnvironment


class RecordingEnvironment(StaticEnvironment):
    """StaticEnvironment that remembers every directory it was asked to create."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.created: list[str] = []

    def mkdir_all(self, path: str, mode: int = 0o700) -> None:
        self.created.append(path)
        super().mkdir_all(path, mode)


@pytest.fixture(autouse=True)
def _isolate_package_state():
    """Reset the shared resolver and the package logger after each test."""
    logger = logging.getLogger("oktetoconfig")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    set_default_resolver(None)
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def resolver_logs(caplog):
    """Capture records from the oktetoconfig logger exactly once, whatever its propagation."""
    logger = logging.getLogger("oktetoconfig")
    propagate = logger.propagate
    logger.propagate = False
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger="oktetoconfig")
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.propagate = propagate


@pytest.fixture
def make_env():
    """Build a RecordingEnvironment; POSIX unless told otherwise."""

    def factory(variables: dict[str, str] | None = None, platform: str = "posix") -> RecordingEnvironment:
        return RecordingEnvironment(variables, platform=platform)

    return factory
