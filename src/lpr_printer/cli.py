import argparse
import json
import sys
from typing import Dict, List, Optional

import toml

from lpr_printer.config.manager import ConfigManager
from lpr_printer.config.uri import parse_uri
from lpr_printer.jobs.errors import PrinterUriError, UnknownEndpointError
from lpr_printer.jobs.models import PrintJobConfiguration
from lpr_printer.logging import get_logger, setup_logging
from lpr_printer.printers.options import build_lp_options

logger = get_logger(__name__)


def _parse_param_args(values: Optional[List[str]]) -> Dict[str, str]:
    """Turn repeated --param key=value flags into a dict."""
    params = {}
    for item in values or []:
        key, sep, value = item.partition('=')
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {item!r}")
        params[key] = value
    return params


def _print_config(config: PrintJobConfiguration, as_json: bool = False):
    if as_json:
        print(json.dumps(config.to_dict(), indent=2))
        return
    port = 'not set' if config.port < 0 else config.port
    print(f"  Host:            {config.host or 'not set'}")
    print(f"  Port:            {port}")
    print(f"  Printer:         {config.printer_name or '(default)'}")
    if config.printer_prefix:
        print(f"  Printer prefix:  {config.printer_prefix}")
    print(f"  Doc flavor:      {config.doc_flavor.name} ({config.doc_flavor.mime_type})")
    print(f"  Media size:      {config.media_size.value}")
    print(f"  Sides:           {config.sides.value}")
    print(f"  Orientation:     {config.orientation.value}")
    print(f"  Copies:          {config.copies}")
    print(f"  Media tray:      {config.media_tray or 'not set'}")
    print(f"  Send to printer: {config.send_to_printer}")
    print(f"  lp options:      {' '.join(build_lp_options(config))}")


def resolve_command(args) -> int:
    """Resolve a single URI given on the command line."""
    try:
        params = _parse_param_args(args.param)
        config = parse_uri(args.uri, params)
    except (PrinterUriError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if not args.json:
        print(f"\n=== {args.uri} ===")
    _print_config(config, args.json)
    return 0


def endpoints_command(args, config_manager: ConfigManager) -> int:
    """Resolve every endpoint from the config file; non-zero if any fails."""
    if not config_manager.exists():
        print("No configuration file found.", file=sys.stderr)
        return 1

    if args.name:
        try:
            results = [(args.name, config_manager.resolve_endpoint(args.name), None)]
        except UnknownEndpointError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except PrinterUriError as e:
            results = [(args.name, None, e)]
    else:
        results = config_manager.resolve_all()

    if not results:
        print(f"No endpoints configured in {config_manager.config_file}")
        return 0

    failed = 0
    for name, config, error in results:
        if error is not None:
            failed += 1
            print(f"✗ {name}: {error}")
            continue
        if args.json:
            print(json.dumps({name: config.to_dict()}, indent=2))
        else:
            print(f"\n✓ {name}: {config.uri}")
            _print_config(config)

    return 1 if failed else 0


def show_command(args, config_manager: ConfigManager) -> int:
    """Print the loaded configuration file."""
    if not config_manager.exists():
        print("No configuration file found.", file=sys.stderr)
        return 1

    print("\n=== Current Configuration ===")
    print(f"Configuration file: {config_manager.config_file}")
    print("\n[Logging]")
    print(f"  Level: {config_manager.get('logging.level', 'INFO')}")
    print(f"  File:  {config_manager.get('logging.file') or 'Not set'}")
    print("\n[Defaults]")
    defaults = config_manager.default_parameters()
    if not defaults:
        print("  (none)")
    for key, value in defaults.items():
        print(f"  {key} = {value}")
    print("\n[Endpoints]")
    endpoints = config_manager.endpoints()
    if not endpoints:
        print("  (none)")
    for name, uri in endpoints.items():
        print(f"  {name} = {uri}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lpr-printer-config',
        description='Resolve lpr:// printer endpoint URIs into print job settings',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--log-level', type=str, default=None, help='Logging level (overrides config)')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    resolve_parser = subparsers.add_parser('resolve', help='Resolve a single lpr:// URI')
    resolve_parser.add_argument('uri', type=str, help='Endpoint URI, e.g. lpr://host:515/queue?sides=duplex')
    resolve_parser.add_argument('--param', action='append', metavar='KEY=VALUE',
                                help='Extra parameter, overrides the URI query (repeatable)')
    resolve_parser.add_argument('--json', action='store_true', help='Print as JSON')

    endpoints_parser = subparsers.add_parser('endpoints', help='Resolve endpoints from the config file')
    endpoints_parser.add_argument('name', nargs='?', help='Only resolve this endpoint')
    endpoints_parser.add_argument('--config', type=str, default=None, help='Path to config file')
    endpoints_parser.add_argument('--json', action='store_true', help='Print as JSON')

    show_parser = subparsers.add_parser('show', help='Show current configuration')
    show_parser.add_argument('--config', type=str, default=None, help='Path to config file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config_manager = ConfigManager(getattr(args, 'config', None))
    except (ValueError, toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
        if args.command in ('endpoints', 'show'):
            print(f"Error: cannot load configuration: {e}", file=sys.stderr)
            return 1
        # resolve does not need the file; keep going with default logging
        setup_logging(args.log_level or 'WARNING')
        logger.warning(f"Ignoring unreadable configuration file: {e}")
    else:
        setup_logging(
            args.log_level or config_manager.get('logging.level', 'WARNING'),
            config_manager.get('logging.file') or None,
        )

    if args.command == 'resolve':
        return resolve_command(args)
    elif args.command == 'endpoints':
        return endpoints_command(args, config_manager)
    elif args.command == 'show':
        return show_command(args, config_manager)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
