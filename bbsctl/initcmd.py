"""The init command: create configuration and resource files."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any, TextIO

import yaml

from bbsctl.config import CONFIG_FILE_NAME, Config, default_config_folder
from bbsctl.system import CommandError

FS_RIGHTS = 0o755
INSTANCES_FILE_NAME = "instances.yml"
TENANT_FILE_NAME = "{}.tenant.yml"
_IGNORED_POOL = -1

_CONFIG_EXAMPLE = """examples:
  bbsctl init config --dest /path/to/files
  bbsctl init config
  bbsctl init config --bbs http://bbs.example.com
  bbsctl init config --bbs http://bbs.example.com --key placeholder
"""

_INSTANCES_EXAMPLE = """examples:
  bbsctl init instances --dest /path/to/file
  bbsctl init instances
"""

_TENANT_EXAMPLE = """examples:
  bbsctl init tenant --host bbs.example.com
  bbsctl init tenant --host bbs.example.com --secret secret
  bbsctl init tenant --host bbs.example.com --dest /path/to/file
  bbsctl init tenant --host bbs.example.com --meeting_pool 10
  bbsctl init tenant --host bbs.example.com --meeting_pool 10 --user_pool 100
"""


def resolve_destination(dest) -> Path:
    """Return the destination folder, using the default folder when dest is None."""
    if dest is None:
        try:
            return default_config_folder()
        except CommandError as exc:
            raise CommandError(f"unable to initialize configuration: {exc}") from exc
    return Path(dest)


def _dump(value: Any) -> str:
    return yaml.safe_dump(value, sort_keys=False, default_flow_style=False)


def _write(path: Path, content: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FS_RIGHTS)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(content)


def _make_folder(folder: Path) -> None:
    try:
        folder.mkdir(mode=FS_RIGHTS, parents=True, exist_ok=True)
    except OSError as exc:
        raise CommandError(f"unable to create destination folder: {exc}") from exc


def _write_resource(path: Path, content: str, what: str) -> None:
    try:
        _write(path, content)
    except OSError as exc:
        raise CommandError(f"failed to write {what}: {exc}") from exc


def init_config(dest, bbs: str, api_key: str, out: TextIO) -> Path:
    """Create the bbsctl configuration file and return its path."""
    folder = resolve_destination(dest)
    file_path = folder / CONFIG_FILE_NAME
    if os.path.exists(file_path):
        raise CommandError(f"configuration already exists, see {file_path}")

    _make_folder(folder)
    content = Config(bbs=bbs or "", api_key=api_key or "").to_yaml()
    _write_resource(file_path, content, "configuration file")
    print(
        f"configuration successfully initialized. Please check {file_path} file",
        file=out,
    )
    return file_path


def init_instances(dest, out: TextIO) -> Path:
    """Create an empty InstanceList resource file and return its path."""
    folder = resolve_destination(dest)
    file_path = folder / INSTANCES_FILE_NAME
    if os.path.exists(file_path):
        raise CommandError(
            "instances configuration file already exists. "
            f"Please consider editing {file_path} file"
        )

    _make_folder(folder)
    content = _dump({"kind": "InstanceList", "instances": {}})
    _write_resource(file_path, content, "instances file")
    print(f"instances file successfully initialized. Please check {file_path} file", file=out)
    return file_path


def init_tenant(
    dest,
    host: str,
    out: TextIO,
    secret: str | None = None,
    meeting_pool: int | None = None,
    user_pool: int | None = None,
) -> Path:
    """Create a Tenant resource file for host and return its path."""
    if not host:
        raise CommandError('required flag(s) "host" not set')

    folder = resolve_destination(dest)
    file_name = TENANT_FILE_NAME.format(host)
    file_path = folder / file_name
    if os.path.exists(file_path):
        raise CommandError(
            f"{file_name} tenant file already exists. "
            f"Please consider editing {file_path} file"
        )

    spec: dict[str, Any] = {"host": host}
    if secret:
        spec["secret"] = secret
    if meeting_pool is not None and meeting_pool != _IGNORED_POOL:
        spec["meeting_pool"] = int(meeting_pool)
    if user_pool is not None and user_pool != _IGNORED_POOL:
        spec["user_pool"] = int(user_pool)

    _make_folder(folder)
    content = _dump({"kind": "Tenant", "spec": spec, "instances": []})
    _write_resource(file_path, content, "tenant file")
    print(f"tenant file successfully initialized. Please check {file_path} file", file=out)
    return file_path


def add_parser(subparsers) -> argparse.ArgumentParser:
    """Register the init command and its subcommands."""
    parser = subparsers.add_parser(
        "init",
        help="Initialize a resource",
        description="Initialize a resource",
    )
    parser.set_defaults(handler=lambda args, api, out: out.write(parser.format_help()))

    commands = parser.add_subparsers(metavar="<command>")
    dest_help = "destination folder (default is $HOME/.bigblueswarm)"

    config = commands.add_parser(
        "config",
        help="Initialize bbsctl configuration",
        description="Create bbsctl if not exists and initialize a basic configuration",
        epilog=_CONFIG_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    config.add_argument("-b", "--bbs", default="", help="BigBlueSwarm url")
    config.add_argument("-k", "--key", default="", help="BigBlueSwarm admin api key")
    config.add_argument("-d", "--dest", default=None, help=dest_help)
    config.set_defaults(
        handler=lambda args, api, out: init_config(args.dest, args.bbs, args.key, out)
    )

    instances = commands.add_parser(
        "instances",
        help="Initialize bigblueswarm instances file",
        description="Create instances list file if it does not exists",
        epilog=_INSTANCES_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    instances.add_argument("-d", "--dest", default=None, help=dest_help)
    instances.set_defaults(handler=lambda args, api, out: init_instances(args.dest, out))

    tenant = commands.add_parser(
        "tenant",
        help="Initialize a new bigblueswarm tenant configuration file",
        description="Initialize a new bigblueswarm tenant configuration file if not exits",
        epilog=_TENANT_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    tenant.add_argument("-d", "--dest", default=None, help=dest_help)
    tenant.add_argument("--host", required=True, help="Tenant hostname")
    tenant.add_argument("--secret", default="", help="Tenant secret")
    tenant.add_argument(
        "--meeting_pool",
        type=int,
        default=_IGNORED_POOL,
        help="Tenant meeting pool. -1 is ignored.",
    )
    tenant.add_argument(
        "--user_pool",
        type=int,
        default=_IGNORED_POOL,
        help="Tenant user pool. -1 is ignored.",
    )
    tenant.set_defaults(
        handler=lambda args, api, out: init_tenant(
            args.dest, args.host, out, args.secret, args.meeting_pool, args.user_pool
        )
    )
    return parser