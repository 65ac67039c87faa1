"""oktetoconfig: where the okteto CLI keeps its files, and how long it waits.

This package provides:
- ConfigResolver, which resolves the user home, the okteto folder, namespace
  and deployment folders, the kubeconfig path and the per-action timeout
- Environment abstractions so resolution can run against a fixed mapping
- Fail-fast accessors for CLI commands

Example:
    from oktetoconfig import ConfigResolver

    resolver = ConfigResolver()
    print(resolver.deployment_home("dev", "api"))
    print(resolver.timeout())
"""

from oktetoconfig.config import (
    default_resolver,
    get_deployment_home,
    get_kubeconfig_file,
    get_namespace_home,
    get_okteto_home,
    get_timeout,
    get_user_home_dir,
    set_default_resolver,
)
from oktetoconfig.duration import (
    InvalidDuration,
    format_duration,
    parse_duration,
)
from oktetoconfig.environment import (
    Environment,
    StaticEnvironment,
)
from oktetoconfig.errors import (
    ConfigError,
    DirectoryCreateFailed,
    NoHomeDirectoryFound,
    OverridePathMissing,
)
from oktetoconfig.resolver import (
    DEFAULT_TIMEOUT,
    ConfigResolver,
)

__version__ = "0.1.0"

__all__ = [
    # Resolver
    "ConfigResolver",
    "DEFAULT_TIMEOUT",
    # Environment
    "Environment",
    "StaticEnvironment",
    # Errors
    "ConfigError",
    "OverridePathMissing",
    "NoHomeDirectoryFound",
    "DirectoryCreateFailed",
    # Durations
    "InvalidDuration",
    "parse_duration",
    "format_duration",
    # Fail-fast accessors
    "default_resolver",
    "set_default_resolver",
    "get_user_home_dir",
    "get_okteto_home",
    "get_namespace_home",
    "get_deployment_home",
    "get_kubeconfig_file",
    "get_timeout",
]
