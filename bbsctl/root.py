"""The bbsctl command line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from bbsctl import apply, clusterinfo, delete, describe, get, initcmd
from bbsctl.admin import AdminClient
from bbsctl.config import default_config_path, load_config
from bbsctl.system import CommandError, ExitCode


def is_init_command(argv: Sequence[str]) -> bool:
    """Return True when the arguments run an init command."""
    return "init" in "".join(argv)


def _config_help() -> str:
    try:
        return f"config file (default is {default_config_path()})"
    except CommandError:
        return "config file (default is $HOME/.bigblueswarm/.bbsctl.yml)"


def _config_option() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument("--config", default=None)
    return parser


def build_parser(argv: Sequence[str]) -> argparse.ArgumentParser:
    """Build the bbsctl argument parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="bbsctl",
        usage="bbsctl <command> [flags]",
        description="Manage your BigBlueSwarm cluster from the command line",
    )
    if not is_init_command(argv):
        parser.add_argument("--config", default=None, help=_config_help())
    parser.set_defaults(handler=lambda args, api, out: out.write(parser.format_help()))

    commands = parser.add_subparsers(metavar="<command>")
    for module in (get, clusterinfo, describe, initcmd, delete, apply):
        module.add_parser(commands)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run bbsctl and return the process exit code."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    init = is_init_command(arguments)
    parser = build_parser(arguments)

    config_path = None
    if not init:
        known, arguments = _config_option().parse_known_args(arguments)
        config_path = known.config

    args = parser.parse_args(arguments)
    out = sys.stdout

    api = None
    if not init:
        try:
            config = load_config(config_path or default_config_path())
        except CommandError as exc:
            print(exc, file=out)
            return int(ExitCode.NO_SUCH_FILE_OR_DIRECTORY)
        api = AdminClient(config.bbs, config.api_key)

    try:
        args.handler(args, api, out)
    except CommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return int(ExitCode.OPERATION_NOT_PERMITTED)
    return 0


if __name__ == "__main__":
    sys.exit(main())