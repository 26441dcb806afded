"""The bbsctl configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from bbsctl.system import CommandError

CONFIG_FOLDER_NAME = ".bigblueswarm"
CONFIG_FILE_NAME = ".bbsctl.yml"


@dataclass
class Config:
    """Connection settings for a BigBlueSwarm server."""

    bbs: str = ""
    api_key: str = ""

    def to_yaml(self) -> str:
        """Serialise the configuration as it is stored on disk."""
        return yaml.safe_dump(
            {"bbs": self.bbs, "apiKey": self.api_key},
            sort_keys=False,
            default_flow_style=False,
        )


def _home() -> Path:
    variable = "USERPROFILE" if os.name == "nt" else "HOME"
    home = os.environ.get(variable, "")
    if not home:
        raise CommandError(f"${variable} is not defined")
    return Path(home)


def default_config_folder() -> Path:
    """Return the folder that holds bbsctl files by default."""
    return _home() / CONFIG_FOLDER_NAME


def default_config_path() -> Path:
    """Return the default configuration file path."""
    return default_config_folder() / CONFIG_FILE_NAME


def load_config(path) -> Config:
    """Read a configuration file and return its settings."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CommandError(f"unable to read configuration file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CommandError(f"unable to parse configuration file {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CommandError(f"unable to parse configuration file {path}: not a mapping")

    return Config(
        bbs=str(data.get("bbs") or ""),
        api_key=str(data.get("apiKey") or ""),
    )