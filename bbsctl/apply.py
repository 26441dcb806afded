"""The apply command: send a resource file to the cluster."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, TextIO

import yaml

from bbsctl.system import CommandError

RESOURCE_KINDS = ("InstanceList", "Tenant")


def to_resource(content: str | bytes) -> tuple[str, dict[str, Any]]:
    """Parse a resource document and return its kind and its content."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CommandError(str(exc)) from exc

    kind = data.get("kind") if isinstance(data, dict) else None
    if kind not in RESOURCE_KINDS:
        raise CommandError("unknown resource kind")
    return kind, data


def apply_file(api, path, out: TextIO) -> None:
    """Read the resource file at path and apply it through the admin API."""
    try:
        content = Path(path).read_bytes()
    except OSError as exc:
        raise CommandError(f"unable to apply file. File loading fail: {exc}") from exc

    try:
        kind, resource = to_resource(content)
    except CommandError as exc:
        raise CommandError(
            f"unable to apply file. File is not a valid resource: {exc}"
        ) from exc

    try:
        api.apply(kind, resource)
    except CommandError as exc:
        raise CommandError(f"unable to apply file. {exc}") from exc

    print(f"{kind} resource created", file=out)


def add_parser(subparsers) -> argparse.ArgumentParser:
    """Register the apply command."""
    parser = subparsers.add_parser(
        "apply",
        help="Apply a configuration to bigblueswarm server using a file",
        description="Apply a configuration to bigblueswarm server using a file",
    )
    parser.add_argument("-f", "--file", required=True, help="resource file path")
    parser.set_defaults(handler=lambda args, api, out: apply_file(api, args.file, out))
    return parser