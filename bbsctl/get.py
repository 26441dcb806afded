"""The get command: list instances and tenants of the cluster."""

from __future__ import annotations

import argparse
from typing import TextIO

from bbsctl.render import Table, to_json
from bbsctl.system import CommandError


def _print_table(table: Table, out: TextIO, as_csv: bool) -> None:
    print(table.render_csv() if as_csv else table.render(), file=out)


def get_instances(api, out: TextIO, as_csv: bool = False, as_json: bool = False) -> None:
    """Print the BigBlueButton instances of the cluster."""
    try:
        instances = api.list_instances()
    except CommandError as exc:
        raise CommandError(
            f"an error occured when getting remote instances: {exc}"
        ) from exc

    instances = instances or []
    if as_json:
        print(to_json(instances), file=out)
        return

    table = Table(["Url", "Secret"])
    for instance in instances:
        table.append_row([instance.get("url", ""), instance.get("secret", "")])
    _print_table(table, out, as_csv)


def get_tenants(api, out: TextIO, as_csv: bool = False, as_json: bool = False) -> None:
    """Print the tenants of the cluster."""
    try:
        tenants = api.get_tenants()
    except CommandError as exc:
        raise CommandError(f"unable to fetch tenants: {exc}") from exc

    entries = (tenants or {}).get("tenants") or []
    if as_json:
        print(to_json(entries), file=out)
        return

    table = Table(["Hostname", "Instances"])
    for tenant in entries:
        table.append_row(
            [tenant.get("hostname", ""), int(tenant.get("instance_count", 0))]
        )
    _print_table(table, out, as_csv)


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--csv", action="store_true", help="csv output")
    parser.add_argument("-j", "--json", action="store_true", help="json output")


def add_parser(subparsers) -> argparse.ArgumentParser:
    """Register the get command and its subcommands."""
    parser = subparsers.add_parser(
        "get",
        help="Display a resource",
        description="Display a resource",
    )
    parser.set_defaults(handler=lambda args, api, out: out.write(parser.format_help()))

    commands = parser.add_subparsers(metavar="<command>")

    instances = commands.add_parser(
        "instances",
        help="Display all BigBlueButton instances available in your BigBlueSwarm cluster",
        description=(
            "Display all BigBlueButton instances available in your BigBlueSwarm cluster"
        ),
    )
    _add_output_flags(instances)
    instances.set_defaults(
        handler=lambda args, api, out: get_instances(api, out, args.csv, args.json)
    )

    tenants = commands.add_parser(
        "tenants",
        help="Display all BigBlueSwarm tenants available in your BigBlueSwarm cluster",
        description=(
            "Display all BigBlueSwarm tenants available in your BigBlueSwarm cluster"
        ),
    )
    _add_output_flags(tenants)
    tenants.set_defaults(
        handler=lambda args, api, out: get_tenants(api, out, args.csv, args.json)
    )
    return parser