"""The describe command: show details of a resource."""

from __future__ import annotations

import argparse
from typing import Any, TextIO

import yaml

from bbsctl.system import CommandError


def normalize_yaml(value: str) -> str:
    """Strip YAML document markers and surrounding whitespace."""
    return value.replace("---", "").replace("...", "").strip()


def _dump(value: Any) -> str:
    return yaml.safe_dump(value, sort_keys=False, default_flow_style=False)


def describe_config(api, out: TextIO) -> None:
    """Print the BigBlueSwarm server configuration as YAML."""
    try:
        config = api.get_configuration()
        text = _dump(config)
    except (CommandError, yaml.YAMLError) as exc:
        raise CommandError(
            f"unable to describe bigblueswarm configuration: {exc}"
        ) from exc
    print(normalize_yaml(text), file=out)


def describe_tenant(api, hostname: str | None, out: TextIO) -> None:
    """Print a tenant as YAML."""
    if not hostname:
        raise CommandError("command failed: hostname not found in arguments")
    try:
        tenant = api.get_tenant(hostname)
        text = _dump(tenant)
    except (CommandError, yaml.YAMLError) as exc:
        raise CommandError(f"unable to describe tenant {hostname}: {exc}") from exc
    print(normalize_yaml(text), file=out)


def add_parser(subparsers) -> argparse.ArgumentParser:
    """Register the describe command and its subcommands."""
    parser = subparsers.add_parser(
        "describe",
        help="Show details of a specific resource or group of resources",
        description="Show details of a specific resource or group of resources",
    )
    parser.set_defaults(handler=lambda args, api, out: out.write(parser.format_help()))

    commands = parser.add_subparsers(metavar="<command>")
    config = commands.add_parser(
        "config",
        help="describe BigBlueSwarm configuration.",
        description="describe BigBlueSwarm configuration.",
    )
    config.set_defaults(handler=lambda args, api, out: describe_config(api, out))

    tenant = commands.add_parser(
        "tenant",
        help="Describe B3L tenant.",
        description="Describe a given BigBlueSwarm tenant.",
    )
    tenant.add_argument("hostname", nargs="?", help="tenant hostname")
    tenant.set_defaults(
        handler=lambda args, api, out: describe_tenant(api, args.hostname, out)
    )
    return parser