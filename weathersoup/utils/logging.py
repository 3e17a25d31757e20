"""Logging configuration for WeatherSoup."""

import logging

import logfire
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = 'INFO', logfire_token: str | None = None, console: Console | None = None) -> None:
    """Configure the root logger and logfire.

    Stdlib log records go to the console through rich. Logfire spans are only
    exported when a token is given.

    Args:
        level: Logging level name (e.g., 'DEBUG', 'INFO'). Defaults to 'INFO'.
        logfire_token: Logfire write token. Defaults to None (no export).
        console: Rich console to log to. Defaults to None (stderr).

    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace handlers from a previous call instead of stacking them
    for handler in [h for h in root_logger.handlers if isinstance(h, RichHandler)]:
        root_logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter('%(name)s - %(message)s'))
    root_logger.addHandler(handler)

    logfire.configure(
        token=logfire_token,
        service_name='weathersoup',
        send_to_logfire='if-token-present',
        console=False,
    )
