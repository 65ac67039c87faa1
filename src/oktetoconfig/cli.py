"""CLI for inspecting the locations and timeout okteto resolves."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from oktetoconfig.config import default_resolver
from oktetoconfig.duration import format_duration
from oktetoconfig.errors import ConfigError
from oktetoconfig.logging_utils import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oktetoconfig",
        description="Show the paths and timeout okteto resolves from the environment.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to OKTETO_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("home", help="Print the user home directory")
    sub.add_parser("okteto-home", help="Print the okteto folder")

    namespace_parser = sub.add_parser("namespace", help="Print a namespace folder")
    namespace_parser.add_argument("namespace", help="Namespace name")

    deployment_parser = sub.add_parser("deployment", help="Print a deployment folder")
    deployment_parser.add_argument("namespace", help="Namespace name")
    deployment_parser.add_argument("name", help="Deployment name")

    sub.add_parser("kubeconfig", help="Print the kubeconfig file path")
    sub.add_parser("timeout", help="Print the per-action timeout")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    resolver = default_resolver()

    try:
        if args.command == "home":
            print(resolver.user_home_dir())
        elif args.command == "okteto-home":
            print(resolver.okteto_home())
        elif args.command == "namespace":
            print(resolver.namespace_home(args.namespace))
        elif args.command == "deployment":
            print(resolver.deployment_home(args.namespace, args.name))
        elif args.command == "kubeconfig":
            print(resolver.kubeconfig_file())
        elif args.command == "timeout":
            print(format_duration(resolver.timeout()))
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
