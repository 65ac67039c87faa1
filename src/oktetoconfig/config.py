"""Process-wide accessors that exit when configuration cannot be resolved.

CLI commands call these instead of building their own ``ConfigResolver``.
A resolution failure is logged and turned into ``SystemExit(1)``.
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import Callable, TypeVar

from oktetoconfig.errors import ConfigError
from oktetoconfig.resolver import ConfigResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")

_default_resolver: ConfigResolver | None = None
_default_lock = threading.Lock()


def default_resolver() -> ConfigResolver:
    """Return the shared resolver, creating it over the real environment on first use."""
    global _default_resolver
    if _default_resolver is None:
        with _default_lock:
            if _default_resolver is None:
                _default_resolver = ConfigResolver()
    return _default_resolver


def set_default_resolver(resolver: ConfigResolver | None) -> None:
    """Replace the shared resolver; ``None`` rebuilds it lazily."""
    global _default_resolver
    with _default_lock:
        _default_resolver = resolver


def _resolve_or_exit(fn: Callable[[ConfigResolver], T]) -> T:
    try:
        return fn(default_resolver())
    except ConfigError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


def get_user_home_dir() -> str:
    return _resolve_or_exit(lambda r: r.user_home_dir())


def get_okteto_home() -> str:
    return _resolve_or_exit(lambda r: r.okteto_home())


def get_namespace_home(namespace: str) -> str:
    return _resolve_or_exit(lambda r: r.namespace_home(namespace))


def get_deployment_home(namespace: str, name: str) -> str:
    return _resolve_or_exit(lambda r: r.deployment_home(namespace, name))


def get_kubeconfig_file() -> str:
    return _resolve_or_exit(lambda r: r.kubeconfig_file())


def get_timeout() -> timedelta:
    return _resolve_or_exit(lambda r: r.timeout())


__all__ = [
    "default_resolver",
    "set_default_resolver",
    "get_user_home_dir",
    "get_okteto_home",
    "get_namespace_home",
    "get_deployment_home",
    "get_kubeconfig_file",
    "get_timeout",
]
