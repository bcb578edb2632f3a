from pathlib import Path
from typing import Dict, List, Optional, Tuple
import json
import logging
import os
from urllib.parse import urlsplit

import toml

from lpr_printer.config.uri import parse_parameters, parse_uri
from lpr_printer.jobs.errors import MalformedUriError, PrinterUriError, UnknownEndpointError
from lpr_printer.jobs.models import PrintJobConfiguration

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'LPR_PRINTER_CONFIG'


def default_config_path() -> Optional[Path]:
    """First existing config file: $LPR_PRINTER_CONFIG, home directory, current directory."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path and Path(env_path).exists():
        return Path(env_path)
    home_cfg = Path.home() / '.lpr_printer' / 'config.toml'
    if home_cfg.exists():
        return home_cfg
    if Path('config.toml').exists():
        return Path('config.toml')
    return None


class ConfigManager:
    """Loads endpoint definitions, default parameters and logging settings."""

    def __init__(self, config_file: str = None):
        """
        Initialize ConfigManager.

        Args:
            config_file: Path to config file. If None, uses default locations.
        """
        if config_file is None:
            found = default_config_path()
            config_file = str(found) if found else None

        self.config_file = Path(config_file) if config_file else None
        self.config = {}
        if self.config_file:
            self.load_config()

    def exists(self):
        """Check if config file exists."""
        return bool(self.config_file and self.config_file.exists())

    def load_config(self):
        """Load configuration from file."""
        if not self.config_file or not self.config_file.exists():
            return

        if self.config_file.suffix == '.toml':
            self.config = toml.load(self.config_file)
        elif self.config_file.suffix == '.json':
            with open(self.config_file, 'r') as f:
                self.config = json.load(f)
        else:
            raise ValueError(f"Unsupported config file type: {self.config_file.suffix}")
        logger.debug(f"Loaded configuration from {self.config_file}")

    def save_config(self):
        """Save configuration to file."""
        if not self.config_file:
            raise ValueError("No config file specified")

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        if self.config_file.suffix == '.toml':
            with open(self.config_file, 'w') as f:
                toml.dump(self.config, f)
        elif self.config_file.suffix == '.json':
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=4)

    def get(self, key: str, default=None):
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value):
        """
        Set configuration value using dot notation and save.

        Args:
            key: Configuration key (e.g., 'endpoints.office')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self.save_config()

    def endpoints(self) -> Dict[str, str]:
        """Configured endpoint name → URI."""
        return dict(self.get('endpoints', {}) or {})

    def default_parameters(self) -> Dict[str, str]:
        """Parameters applied to every endpoint; values are stringified like query values."""
        defaults = self.get('defaults', {}) or {}
        return {k: _as_param(v) for k, v in defaults.items()}

    def resolve_endpoint(self, name: str) -> PrintJobConfiguration:
        """
        Resolve a named endpoint. Default parameters sit under the URI's own query.

        Raises:
            UnknownEndpointError: no endpoint with that name
            PrinterUriError: the endpoint URI is rejected
        """
        endpoints = self.endpoints()
        if name not in endpoints:
            raise UnknownEndpointError(name)
        uri = endpoints[name]
        if not isinstance(uri, str):
            raise MalformedUriError(repr(uri), f"endpoint '{name}' must be a URI string")
        return resolve_with_defaults(uri, self.default_parameters())

    def resolve_all(self) -> List[Tuple[str, Optional[PrintJobConfiguration], Optional[PrinterUriError]]]:
        """Resolve every endpoint, collecting failures instead of stopping at the first one."""
        results = []
        for name in self.endpoints():
            try:
                results.append((name, self.resolve_endpoint(name), None))
            except PrinterUriError as e:
                logger.error(f"Endpoint '{name}' rejected: {e}")
                results.append((name, None, e))
        return results


def resolve_with_defaults(uri: str, defaults: Dict[str, str]) -> PrintJobConfiguration:
    """parse_uri with `defaults` filling only parameters the URI query leaves out."""
    if not defaults:
        return parse_uri(uri)
    try:
        query = parse_parameters(urlsplit(uri).query)
    except ValueError as e:
        raise MalformedUriError(uri, str(e)) from e
    extra = {k: v for k, v in defaults.items() if k not in query}
    return parse_uri(uri, extra)


def _as_param(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
