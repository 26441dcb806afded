"""The cluster-info command: overall cluster status."""

from __future__ import annotations

import argparse
from typing import TextIO

from bbsctl.render import Color, Table, bold, paint
from bbsctl.system import CommandError


def colorized_api_status(status: str) -> str:
    """Colour an API status green when it is up, red otherwise."""
    return paint(status, Color.HI_GREEN if status == "Up" else Color.HI_RED)


def colorized_metric(value: float) -> str:
    """Format a percentage and colour it by load level."""
    value = float(value)
    text = f"{value:.2f} %"
    if value < 33.33:
        return paint(text, Color.HI_GREEN)
    if value < 66.66:
        return paint(text, Color.YELLOW)
    return paint(text, Color.HI_RED)


def _header() -> list[str]:
    return [
        bold("API"),
        bold("Host"),
        bold("CPU"),
        bold("Mem"),
        bold("Active meetings"),
        bold("Active participants"),
    ]


def cluster_info(api, out: TextIO) -> None:
    """Print the cluster summary and one line per instance."""
    try:
        status = api.cluster_status()
    except CommandError as exc:
        raise CommandError(
            f"an error occurred while getting cluster status: {exc}"
        ) from exc

    try:
        bbs_status = api.api_status()
    except CommandError as exc:
        raise CommandError(
            f"an error occurred while getting bigblueswarm status: {exc}"
        ) from exc

    try:
        tenants = api.get_tenants()
    except CommandError as exc:
        raise CommandError(
            f"an error occured while getting bigblueswarm tenants: {exc}"
        ) from exc

    instances = Table(_header())
    meetings = 0
    participants = 0
    for instance in status or []:
        instance_meetings = int(instance.get("meetings", 0))
        instance_participants = int(instance.get("participants", 0))
        instances.append_row(
            [
                colorized_api_status(instance.get("api_status", "")),
                instance.get("host", ""),
                colorized_metric(instance.get("cpu", 0.0)),
                colorized_metric(instance.get("mem", 0.0)),
                instance_meetings,
                instance_participants,
            ]
        )
        meetings += instance_meetings
        participants += instance_participants

    tenant_count = len((tenants or {}).get("tenants") or [])

    summary = Table()
    summary.append_row([bold("BigBlueSwarm API"), colorized_api_status(bbs_status)])
    summary.append_row([bold("Active tenants"), tenant_count])
    summary.append_row([bold("Active meetings"), meetings])
    summary.append_row([bold("Active participants"), participants])

    print(summary.render(), file=out)
    print("", file=out)
    print(instances.render(), file=out)


def add_parser(subparsers) -> argparse.ArgumentParser:
    """Register the cluster-info command."""
    parser = subparsers.add_parser(
        "cluster-info",
        help="Get overall cluster information",
        description=(
            "Get overall cluster information. It display all instances with %%CPU, "
            "%%MEM, Active meetings, Active paricipants and API status"
        ),
    )
    parser.set_defaults(handler=lambda args, api, out: cluster_info(api, out))
    return parser