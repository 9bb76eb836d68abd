"""Locating the bot token, creating a config file from a template if needed."""

__all__ = [
    "CONFIG_TEMPLATE",
    "PLACEHOLDER_TOKEN",
    "ensure_config",
    "read_config",
    "resolve_token",
]

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
import yaml

log = logging.getLogger(__name__)

PLACEHOLDER_TOKEN = "<your-bot-token-here>"

CONFIG_TEMPLATE = f"""\
token: {PLACEHOLDER_TOKEN}
command_prefix: "sm!"
description: Changes channel slowmode when mentioned.
"""


def ensure_config(path: Path) -> bool:
    """Create the config file from the template if it doesn't exist.

    Returns whether the file had to be created.
    """
    if path.exists():
        return False

    log.warning("%s does not exist, creating it from the template", path)
    path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    return True


def read_config(path: Path) -> Dict[str, Any]:
    with path.open(encoding="utf-8") as fp:
        data = yaml.safe_load(fp)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain a mapping of settings")
    return data


def resolve_token(flag_token: Optional[str], data: Dict[str, Any], *, path: Path) -> str:
    """Pick the bot token, preferring the one given on the command line."""
    token = flag_token or data.get("token")

    if not token or token == PLACEHOLDER_TOKEN:
        raise click.ClickException(
            f"client token is not specified, check the {path} file or specify it with -t"
        )
    return str(token)
