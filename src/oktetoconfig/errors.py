"""Errors raised while resolving okteto configuration."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for configuration resolution failures."""


class OverridePathMissing(ConfigError):
    """An override variable points to a path that does not exist."""

    def __init__(self, variable: str, path: str, message: str | None = None) -> None:
        self.variable = variable
        self.path = path
        super().__init__(message or f"{variable} doesn't exist: {path}")


class NoHomeDirectoryFound(ConfigError):
    """None of the platform home variables yielded a directory."""

    def __init__(self, variables: tuple[str, ...]) -> None:
        self.variables = variables
        names = ", ".join(variables[:-1]) + f", or {variables[-1]}"
        super().__init__(
            f"couldn't determine your home directory: {names} are empty. "
            "Use $OKTETO_HOME to set your home directory"
        )


class DirectoryCreateFailed(ConfigError):
    """A directory could not be created."""

    def __init__(self, path: str, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"failed to create {path}: {error}")


__all__ = [
    "ConfigError",
    "OverridePathMissing",
    "NoHomeDirectoryFound",
    "DirectoryCreateFailed",
]
