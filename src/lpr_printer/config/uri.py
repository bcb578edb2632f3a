"""
lpr:// endpoint URI parsing.

    lpr://host[:port]/printerPath?mediaSize=iso-a4&sides=duplex&copies=2

The scheme is checked case-insensitively. The path becomes the printer name
with every leading '/' and '\\' removed. Query parameters are percent-decoded;
for a repeated key the last value wins.
"""
import logging
from typing import Dict, Mapping, Optional
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit

from lpr_printer.jobs.errors import InvalidProtocolError, MalformedUriError
from lpr_printer.jobs.models import NO_PORT, PrintJobConfiguration

logger = logging.getLogger(__name__)

PROTOCOL = 'lpr'


def parse_parameters(query: str) -> Dict[str, str]:
    """Decode a query string into a dict; duplicate keys keep the last value."""
    return dict(parse_qsl(query, keep_blank_values=True))


def printer_name_from_path(path: str) -> str:
    return unquote(path).lstrip('/\\')


def host_from_netloc(parts: SplitResult) -> str:
    """Host as written in the URI; only bracketed IPv6 literals go through .hostname."""
    host = parts.netloc.rpartition('@')[2]
    if host.startswith('['):
        return parts.hostname or ''
    return host.partition(':')[0]


def parse_uri(uri: str, parameters: Optional[Mapping[str, str]] = None) -> PrintJobConfiguration:
    """
    Parse an lpr:// URI into a PrintJobConfiguration.

    Args:
        uri: endpoint URI
        parameters: extra parameters, applied over the URI query string

    Raises:
        InvalidProtocolError: scheme is not lpr
        MalformedUriError: host/port cannot be extracted
        MalformedCopiesError: copies is not a positive integer
    """
    try:
        parts = urlsplit(uri)
    except ValueError as e:
        raise MalformedUriError(uri, str(e)) from e

    if parts.scheme.lower() != PROTOCOL:
        raise InvalidProtocolError(parts.scheme, uri)

    try:
        port = parts.port
    except ValueError as e:
        raise MalformedUriError(uri, str(e)) from e

    params = parse_parameters(parts.query)
    if parameters:
        params.update(parameters)

    config = PrintJobConfiguration.from_parameters(
        uri=uri,
        scheme=parts.scheme,
        host=host_from_netloc(parts),
        port=NO_PORT if port is None else port,
        printer_name=printer_name_from_path(parts.path),
        params=params,
    )
    logger.debug(f"Resolved {uri} → {config}")
    return config
