"""
Print job configuration: the resolved settings for one lpr:// endpoint.
Built once from the endpoint URI parameters, read-only afterwards.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from lpr_printer.jobs.errors import MalformedCopiesError
from lpr_printer.printers.attributes import (
    OrientationRequested,
    Sides,
    resolve_orientation,
    resolve_sides,
)
from lpr_printer.printers.flavors import (
    DEFAULT_FLAVOR,
    DEFAULT_MIME_TYPE,
    DocFlavor,
    resolve_doc_flavor,
)
from lpr_printer.printers.media import MediaSizeName, resolve_media_size

logger = logging.getLogger(__name__)

NO_PORT = -1

# IPP copies is a signed 32-bit integer
MAX_COPIES = 2 ** 31 - 1

# Query parameters understood by the resolver; anything else is ignored.
KNOWN_PARAMETERS = (
    'flavor', 'mimeType', 'printerPrefix', 'copies', 'mediaSize',
    'sides', 'orientation', 'sendToPrinter', 'mediaTray',
)

_INTEGER = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class PrintJobConfiguration:
    # Endpoint
    uri: str
    scheme: str
    host: str
    port: int = NO_PORT
    printer_name: str = ''
    printer_prefix: Optional[str] = None

    # Job
    copies: int = 1
    flavor_hint: str = DEFAULT_FLAVOR
    mime_type_hint: str = DEFAULT_MIME_TYPE
    doc_flavor: DocFlavor = DocFlavor.BYTE_ARRAY_AUTOSENSE
    media_size_hint: Optional[str] = None
    media_size: MediaSizeName = MediaSizeName.NA_LETTER
    sides_hint: Optional[str] = None
    sides: Sides = Sides.ONE_SIDED
    orientation_hint: Optional[str] = None
    orientation: OrientationRequested = OrientationRequested.PORTRAIT
    send_to_printer: bool = True
    media_tray: Optional[str] = None

    @classmethod
    def from_parameters(cls, uri: str, scheme: str, host: str, port: int,
                        printer_name: str, params: Mapping[str, str]) -> 'PrintJobConfiguration':
        """Resolve decoded URI parameters into a configuration."""
        unknown = sorted(set(params) - set(KNOWN_PARAMETERS))
        if unknown:
            logger.debug(f"Ignoring unrecognised parameters for {uri}: {unknown}")

        flavor = params.get('flavor')
        mime_type = params.get('mimeType')
        media_size = params.get('mediaSize')
        sides = params.get('sides')
        orientation = params.get('orientation')

        copies = 1
        if 'copies' in params:
            copies = _parse_copies(params['copies'], uri)

        send_to_printer = True
        if 'sendToPrinter' in params:
            send_to_printer = _parse_bool(params['sendToPrinter'])

        return cls(
            uri=uri,
            scheme=scheme,
            host=host,
            port=port,
            printer_name=printer_name,
            printer_prefix=params.get('printerPrefix'),
            copies=copies,
            flavor_hint=flavor if flavor is not None else DEFAULT_FLAVOR,
            mime_type_hint=mime_type if mime_type is not None else DEFAULT_MIME_TYPE,
            doc_flavor=resolve_doc_flavor(flavor, mime_type),
            media_size_hint=media_size,
            media_size=resolve_media_size(media_size),
            sides_hint=sides,
            sides=resolve_sides(sides),
            orientation_hint=orientation,
            orientation=resolve_orientation(orientation),
            send_to_printer=send_to_printer,
            media_tray=params.get('mediaTray'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'uri': self.uri,
            'scheme': self.scheme,
            'host': self.host,
            'port': self.port,
            'printerName': self.printer_name,
            'printerPrefix': self.printer_prefix,
            'copies': self.copies,
            'flavor': self.flavor_hint,
            'mimeType': self.mime_type_hint,
            'docFlavor': {
                'name': self.doc_flavor.name,
                'representation': self.doc_flavor.representation.value,
                'mimeType': self.doc_flavor.mime_type,
            },
            'mediaSize': self.media_size_hint,
            'mediaSizeName': self.media_size.value,
            'sides': self.sides_hint,
            'resolvedSides': self.sides.value,
            'orientation': self.orientation_hint,
            'resolvedOrientation': self.orientation.value,
            'sendToPrinter': self.send_to_printer,
            'mediaTray': self.media_tray,
        }

    def __str__(self):
        port = '' if self.port == NO_PORT else f":{self.port}"
        return (
            f"PrintJobConfiguration(target={self.host}{port}/{self.printer_name} "
            f"flavor={self.doc_flavor.name} media={self.media_size.value} "
            f"sides={self.sides.value} orientation={self.orientation.value} "
            f"copies={self.copies} send={self.send_to_printer})"
        )


def _parse_copies(value: str, uri: str) -> int:
    if value is None or not _INTEGER.fullmatch(value):
        raise MalformedCopiesError(value, uri)
    copies = int(value)
    if copies < 1 or copies > MAX_COPIES:
        raise MalformedCopiesError(value, uri)
    return copies


def _parse_bool(value: str) -> bool:
    """Only a case-insensitive 'true' counts as true."""
    return value is not None and value.lower() == 'true'
