"""Command-line entry point."""

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional

import click
from lifesaver.bot import BotConfig

from .bot import Slowbot
from .config import ensure_config, read_config, resolve_token

log = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


async def run_bot(config_path: Path, token: str) -> None:
    config = BotConfig.load(str(config_path))
    config.token = token

    bot = Slowbot(config)
    async with bot:
        log.info("Connecting")
        started = time.monotonic()
        await bot.login(token)
        log.info("Logging in took %.2fs", time.monotonic() - started)
        log.info("Press Ctrl+C to exit")
        await bot.connect()


@click.command()
@click.option("--token", "-t", help="Specify bot token.")
@click.option(
    "--config",
    "-c",
    "config_path",
    default="config.yml",
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the config file. Created from a template if missing.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.version_option(package_name="slowbot")
def main(token: Optional[str], config_path: Path, debug: bool) -> None:
    """Changes channel slowmode when mentioned."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)

    ensure_config(config_path)
    token = resolve_token(token, read_config(config_path), path=config_path)

    try:
        asyncio.run(run_bot(config_path, token))
    except KeyboardInterrupt:
        log.info("Interrupted, exiting")
