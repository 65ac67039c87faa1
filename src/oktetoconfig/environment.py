"""Process environment and filesystem access used by the resolver.

The resolver never touches ``os.environ`` directly. It is handed an
``Environment`` so callers can swap in a ``StaticEnvironment`` built from a
plain mapping, optionally pretending to run on another platform.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from types import ModuleType
from typing import Mapping

WINDOWS = "windows"
POSIX = "posix"


def _current_platform() -> str:
    return WINDOWS if os.name == "nt" else POSIX


class Environment:
    """Environment variables and directory primitives of the running process."""

    def __init__(self, platform: str | None = None) -> None:
        platform = platform or _current_platform()
        if platform not in (WINDOWS, POSIX):
            raise ValueError(f"Unknown platform: {platform}")
        self.platform = platform

    @property
    def is_windows(self) -> bool:
        return self.platform == WINDOWS

    @property
    def path(self) -> ModuleType:
        """The ``os.path`` flavour matching ``platform``."""
        return ntpath if self.is_windows else posixpath

    @property
    def pathsep(self) -> str:
        """Separator used in path-list variables such as KUBECONFIG."""
        return ";" if self.is_windows else ":"

    def lookup(self, name: str) -> str | None:
        """Return the variable's value, or None when it is not set at all."""
        return os.environ.get(name)

    def get(self, name: str) -> str:
        """Return the variable's value, or an empty string when unset."""
        return self.lookup(name) or ""

    def path_exists(self, path: str) -> bool:
        return bool(path) and os.path.exists(path)

    def mkdir_all(self, path: str, mode: int = 0o700) -> None:
        """Create ``path`` and any missing parents; existing directories are left alone."""
        os.makedirs(path, mode=mode, exist_ok=True)


class StaticEnvironment(Environment):
    """Environment whose variables come from a fixed mapping."""

    def __init__(self, variables: Mapping[str, str] | None = None, platform: str | None = None) -> None:
        super().__init__(platform)
        self.variables = dict(variables or {})

    def lookup(self, name: str) -> str | None:
        return self.variables.get(name)


__all__ = [
    "WINDOWS",
    "POSIX",
    "Environment",
    "StaticEnvironment",
]
