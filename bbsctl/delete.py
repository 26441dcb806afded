"""The delete command: remove a resource from the cluster."""

from __future__ import annotations

import argparse
from typing import TextIO

from bbsctl.system import CommandError


def delete_tenant(api, hostname: str | None, out: TextIO) -> None:
    """Delete the tenant with the given hostname."""
    if not hostname:
        raise CommandError("command failed: hostname not found in arguments")
    api.delete_tenant(hostname)
    print(f"Tenant {hostname} successfully deleted", file=out)


def add_parser(subparsers) -> argparse.ArgumentParser:
    """Register the delete command and its subcommands."""
    parser = subparsers.add_parser(
        "delete",
        help="Delete a specific resource",
        description="Delete a specific resource",
    )
    parser.set_defaults(handler=lambda args, api, out: out.write(parser.format_help()))

    commands = parser.add_subparsers(metavar="<command>")
    tenant = commands.add_parser(
        "tenant",
        help="delete a tenant based on hostname",
        description="delete a tenant based on hostname",
    )
    tenant.add_argument("hostname", nargs="?", help="tenant hostname")
    tenant.set_defaults(
        handler=lambda args, api, out: delete_tenant(api, args.hostname, out)
    )
    return parser