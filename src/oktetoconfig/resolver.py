"""Resolve okteto's home, namespace and deployment folders, kubeconfig and timeout.

Every value follows the same precedence: an explicit ``OKTETO_*`` override,
then the platform convention, then a default. Directory results are created
on demand with owner-only permissions.
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta

from oktetoconfig.duration import InvalidDuration, format_duration, parse_duration
from oktetoconfig.environment import Environment
from oktetoconfig.errors import DirectoryCreateFailed, NoHomeDirectoryFound, OverridePathMissing

logger = logging.getLogger(__name__)

OKTETO_FOLDER_NAME = ".okteto"
DEFAULT_TIMEOUT = timedelta(seconds=30)
DIRECTORY_MODE = 0o700

OKTETO_FOLDER_ENV = "OKTETO_FOLDER"
OKTETO_HOME_ENV = "OKTETO_HOME"
OKTETO_TIMEOUT_ENV = "OKTETO_TIMEOUT"
KUBECONFIG_ENV = "KUBECONFIG"

WINDOWS_HOME_VARIABLES = ("HOME", "HOMEDRIVE", "HOMEPATH", "USERPROFILE")


class ConfigResolver:
    """Resolves okteto paths and tunables from an ``Environment``.

    Paths are recomputed on every call. The timeout is computed once per
    resolver and shared by every thread that asks for it.
    """

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or Environment()
        self._timeout: timedelta | None = None
        self._timeout_lock = threading.Lock()

    def user_home_dir(self) -> str:
        """Return the user's home directory.

        ``OKTETO_HOME`` wins when set and must exist. On POSIX the raw value
        of ``HOME`` is returned without any check, even if it is empty.
        """
        override = self.env.lookup(OKTETO_HOME_ENV)
        if override is not None:
            if not self.env.path_exists(override):
                raise OverridePathMissing(
                    OKTETO_HOME_ENV,
                    override,
                    f"{OKTETO_HOME_ENV} points to a non-existing directory: {override}",
                )
            return override

        if self.env.is_windows:
            return self._windows_home_dir()

        return self.env.get("HOME")

    def _windows_home_dir(self) -> str:
        home = self.env.get("HOME")
        if home:
            return home

        home = self.env.get("USERPROFILE")
        if home:
            return home

        drive = self.env.get("HOMEDRIVE")
        path = self.env.get("HOMEPATH")
        if not drive or not path:
            raise NoHomeDirectoryFound(WINDOWS_HOME_VARIABLES)
        return drive + path

    def okteto_home(self) -> str:
        """Return the okteto folder, ``OKTETO_FOLDER`` or ``<home>/.okteto``."""
        override = self.env.lookup(OKTETO_FOLDER_ENV)
        if override is not None:
            if not self.env.path_exists(override):
                raise OverridePathMissing(OKTETO_FOLDER_ENV, override)
            folder = override
        else:
            folder = self.env.path.join(self.user_home_dir(), OKTETO_FOLDER_NAME)

        return self._ensure_dir(folder)

    def namespace_home(self, namespace: str) -> str:
        """Return ``<okteto home>/<namespace>``, creating it if needed."""
        return self._ensure_dir(self.env.path.join(self.okteto_home(), namespace))

    def deployment_home(self, namespace: str, name: str) -> str:
        """Return ``<okteto home>/<namespace>/<name>``, creating it if needed."""
        return self._ensure_dir(self.env.path.join(self.okteto_home(), namespace, name))

    def kubeconfig_file(self) -> str:
        """Return the kubeconfig path, honouring the first entry of ``KUBECONFIG``."""
        home = self.user_home_dir()
        kubeconfig = self.env.path.join(home, ".kube", "config")
        value = self.env.get(KUBECONFIG_ENV)
        if value:
            kubeconfig = value.split(self.env.pathsep)[0]
        return kubeconfig

    def timeout(self) -> timedelta:
        """Return the per-action timeout, computing it on first use."""
        if self._timeout is None:
            with self._timeout_lock:
                if self._timeout is None:
                    self._timeout = self._compute_timeout()
        return self._timeout

    def _compute_timeout(self) -> timedelta:
        value = self.env.lookup(OKTETO_TIMEOUT_ENV)
        if value is None:
            return DEFAULT_TIMEOUT

        try:
            parsed = parse_duration(value)
        except InvalidDuration:
            logger.warning("'%s' is not a valid duration, ignoring", value)
            return DEFAULT_TIMEOUT

        logger.info("%s applied: '%s'", OKTETO_TIMEOUT_ENV, format_duration(parsed))
        return parsed

    def _ensure_dir(self, path: str) -> str:
        try:
            self.env.mkdir_all(path, DIRECTORY_MODE)
        except OSError as exc:
            raise DirectoryCreateFailed(path, exc) from exc
        return path


__all__ = [
    "ConfigResolver",
    "DEFAULT_TIMEOUT",
    "DIRECTORY_MODE",
    "OKTETO_FOLDER_NAME",
]
