#!/usr/bin/env python3
"""
Key Light Controller - terminal controller for a single Elgato Key Light
"""

import asyncio
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from keylight_tui import __version__
from keylight_tui.config import AppConfig
from keylight_tui.core.control import ControlLoop
from keylight_tui.core.errors import KeyLightError
from keylight_tui.core.models import DeviceAddress
from keylight_tui.core.service import KeyLightService

logger = logging.getLogger(__name__)


def setup_logging(config: AppConfig) -> Optional[Path]:
    """
    Configure file logging; the terminal belongs to the UI.

    Returns:
        Path of the log file, or None if it could not be opened
    """
    level = getattr(logging, config.logging.log_level)
    log_path = config.log_file

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.logging.log_max_bytes,
            backupCount=config.logging.log_backup_count,
        )
    except OSError as e:
        click.echo(f"Warning: cannot write log file {log_path}: {e}", err=True)
        root_logger.addHandler(logging.NullHandler())
        return None

    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    )
    root_logger.addHandler(file_handler)
    logger.info(f"Logging configured: level={config.logging.log_level}, file={log_path}")
    return log_path


def report_error(error: KeyLightError, log_path: Optional[Path]) -> None:
    """Print a fatal error to stderr without a traceback."""
    click.echo(f"ERROR: {error.get_full_message()}", err=True)
    if log_path is not None:
        click.echo(f"For details, check the log file: {log_path}", err=True)


@click.command()
@click.version_option(version=__version__, prog_name="keylight-tui")
@click.option(
    '--ip',
    '-i',
    required=True,
    metavar='IP ADDRESS',
    help='IP address (or host name) of the Elgato Key Light'
)
def main(ip: str) -> None:
    """
    Control an Elgato Key Light from the terminal.

    \b
    Keys:
      Left/Right   dimmer/brighter (hold Shift for fine steps)
      Up/Down      colder/warmer (hold Shift for fine steps)
      Space/Enter  toggle off/on
      q/Esc        quit
    """
    try:
        config = AppConfig.from_env()
    except KeyLightError as e:
        report_error(e, None)
        sys.exit(1)

    log_path = setup_logging(config)

    address = DeviceAddress(ip, config.network.port)
    service = KeyLightService(
        fetch_timeout_seconds=config.network.fetch_timeout_s,
        push_timeout_seconds=config.network.push_timeout_s,
    )

    try:
        light = asyncio.run(service.fetch_light_state(address))
    except KeyLightError as e:
        logger.error(f"Startup fetch failed: {e.technical_message}")
        report_error(e, log_path)
        sys.exit(1)

    logger.info(f"Connected to {address}: {light}")

    # Imported late so --help and --version do not load textual
    from keylight_tui.ui.main_window import KeyLightApp

    app = KeyLightApp(ControlLoop(address, light, service))
    app.run()

    if app.fatal_error is not None:
        report_error(app.fatal_error, log_path)
        sys.exit(1)
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
