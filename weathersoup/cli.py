"""
cli.py
======
Command-line entry point: run the HTTP server or look up weather directly.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from weathersoup.config import Settings, load_settings
from weathersoup.exceptions import ConfigError, WeatherSoupError
from weathersoup.models import WeatherRecord
from weathersoup.service import WeatherService
from weathersoup.utils import setup_logging

custom_theme = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
    }
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--log-level', type=str, help='Logging level (default: LOG_LEVEL or INFO)')

    parser = argparse.ArgumentParser(prog='weathersoup', description='Scrape current weather for a city')
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', parents=[common], help='Run the HTTP API')
    serve.add_argument('--host', type=str, help='Interface to bind (default: HOST or 0.0.0.0)')
    serve.add_argument('--port', type=int, help='Port to listen on (default: PORT or 5000)')

    fetch = subparsers.add_parser('fetch', parents=[common], help='Fetch and print the weather for one city')
    fetch.add_argument('city', type=str, help='City name')
    fetch.add_argument('--json', action='store_true', help='Print the record as JSON')

    parse = subparsers.add_parser('parse', parents=[common], help='Extract weather from a saved HTML page')
    parse.add_argument('file', type=Path, help='HTML file to parse')
    parse.add_argument('--json', action='store_true', help='Print the record as JSON')

    return parser


def print_record(console: Console, record: WeatherRecord, as_json: bool = False) -> None:
    """Print a weather record as a table or as JSON."""
    data = record.to_json_dict()
    if as_json:
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    table = Table(title='Current weather', show_header=False)
    table.add_column('Field', style='cyan')
    table.add_column('Value')
    for key, value in data.items():
        table.add_row(key, 'N/A' if value is None else str(value))
    console.print(table)


def serve(settings: Settings, host: str | None = None, port: int | None = None) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    from weathersoup.api import create_app

    uvicorn.run(create_app(settings), host=host or settings.host, port=port or settings.port, log_config=None)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    console = Console(theme=custom_theme)

    try:
        settings = load_settings()
    except ConfigError as e:
        console.print(f'[danger]Error: {e}[/danger]')
        return 1

    setup_logging(args.log_level or settings.log_level, settings.logfire_token)

    if args.command == 'serve':
        console.print(f'[info]Server running on port {args.port or settings.port}[/info]')
        serve(settings, args.host, args.port)
        return 0

    service = WeatherService(settings)
    try:
        if args.command == 'fetch':
            record = service.get_weather(args.city)
        else:
            record = service.parse(args.file.read_text(encoding='utf-8'))
    except WeatherSoupError as e:
        console.print(f'[danger]✗ {getattr(e, "message", e)}[/danger]')
        return 1
    except OSError as e:
        console.print(f'[danger]✗ Could not read input: {escape(str(e))}[/danger]')
        return 1
    finally:
        service.close()

    print_record(console, record, as_json=args.json)
    return 0


if __name__ == '__main__':
    sys.exit(main())
