"""
Document flavors: the (representation class, MIME type) pairs a print
service accepts, and the resolver that maps loose URI hints onto them.

Hints:
  flavor    representation tag, e.g. DocFlavor.BYTE_ARRAY, DocFlavor.URL
  mimeType  category tag, e.g. AUTOSENSE, PDF, TEXT_PLAIN_UTF_8

Resolution never fails: an unknown category gives BYTE_ARRAY_AUTOSENSE,
an unknown representation inside a known category gives that category's default.
"""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_FLAVOR = 'DocFlavor.BYTE_ARRAY'
DEFAULT_MIME_TYPE = 'AUTOSENSE'


class RepresentationClass(str, Enum):
    BYTE_ARRAY = 'bytes'
    INPUT_STREAM = 'input-stream'
    URL = 'url'
    CHAR_ARRAY = 'chars'
    READER = 'reader'
    STRING = 'string'
    SERVICE_FORMATTED = 'service-formatted'


_OCTET = 'application/octet-stream'
_GIF = 'image/gif'
_JPEG = 'image/jpeg'
_PDF = 'application/pdf'
_PCL = 'application/vnd.hp-PCL'
_POSTSCRIPT = 'application/postscript'
# Host encoding: the charset is whatever the dispatching machine uses.
_HTML_HOST = 'text/html'
_PLAIN_HOST = 'text/plain'
# Character-based representations are decoded text, always utf-16 on the wire.
_HTML_CHARS = 'text/html; charset=utf-16'
_PLAIN_CHARS = 'text/plain; charset=utf-16'


def _charset(base: str, charset: str) -> str:
    return f"{base}; charset={charset}"


class DocFlavor(Enum):
    """Closed set of document flavors, value = (representation, MIME type)."""

    BYTE_ARRAY_AUTOSENSE = (RepresentationClass.BYTE_ARRAY, _OCTET)
    BYTE_ARRAY_GIF = (RepresentationClass.BYTE_ARRAY, _GIF)
    BYTE_ARRAY_JPEG = (RepresentationClass.BYTE_ARRAY, _JPEG)
    BYTE_ARRAY_PDF = (RepresentationClass.BYTE_ARRAY, _PDF)
    BYTE_ARRAY_PCL = (RepresentationClass.BYTE_ARRAY, _PCL)
    BYTE_ARRAY_POSTSCRIPT = (RepresentationClass.BYTE_ARRAY, _POSTSCRIPT)
    BYTE_ARRAY_TEXT_HTML_HOST = (RepresentationClass.BYTE_ARRAY, _HTML_HOST)
    BYTE_ARRAY_TEXT_HTML_US_ASCII = (RepresentationClass.BYTE_ARRAY, _charset('text/html', 'us-ascii'))
    BYTE_ARRAY_TEXT_HTML_UTF_16 = (RepresentationClass.BYTE_ARRAY, _charset('text/html', 'utf-16'))
    BYTE_ARRAY_TEXT_HTML_UTF_16LE = (RepresentationClass.BYTE_ARRAY, _charset('text/html', 'utf-16le'))
    BYTE_ARRAY_TEXT_HTML_UTF_16BE = (RepresentationClass.BYTE_ARRAY, _charset('text/html', 'utf-16be'))
    BYTE_ARRAY_TEXT_HTML_UTF_8 = (RepresentationClass.BYTE_ARRAY, _charset('text/html', 'utf-8'))
    BYTE_ARRAY_TEXT_PLAIN_HOST = (RepresentationClass.BYTE_ARRAY, _PLAIN_HOST)
    BYTE_ARRAY_TEXT_PLAIN_US_ASCII = (RepresentationClass.BYTE_ARRAY, _charset('text/plain', 'us-ascii'))
    BYTE_ARRAY_TEXT_PLAIN_UTF_16 = (RepresentationClass.BYTE_ARRAY, _charset('text/plain', 'utf-16'))
    BYTE_ARRAY_TEXT_PLAIN_UTF_16LE = (RepresentationClass.BYTE_ARRAY, _charset('text/plain', 'utf-16le'))
    BYTE_ARRAY_TEXT_PLAIN_UTF_16BE = (RepresentationClass.BYTE_ARRAY, _charset('text/plain', 'utf-16be'))
    BYTE_ARRAY_TEXT_PLAIN_UTF_8 = (RepresentationClass.BYTE_ARRAY, _charset('text/plain', 'utf-8'))

    INPUT_STREAM_AUTOSENSE = (RepresentationClass.INPUT_STREAM, _OCTET)
    INPUT_STREAM_GIF = (RepresentationClass.INPUT_STREAM, _GIF)
    INPUT_STREAM_JPEG = (RepresentationClass.INPUT_STREAM, _JPEG)
    INPUT_STREAM_PDF = (RepresentationClass.INPUT_STREAM, _PDF)
    INPUT_STREAM_PCL = (RepresentationClass.INPUT_STREAM, _PCL)
    INPUT_STREAM_POSTSCRIPT = (RepresentationClass.INPUT_STREAM, _POSTSCRIPT)
    INPUT_STREAM_TEXT_HTML_HOST = (RepresentationClass.INPUT_STREAM, _HTML_HOST)
    INPUT_STREAM_TEXT_HTML_US_ASCII = (RepresentationClass.INPUT_STREAM, _charset('text/html', 'us-ascii'))
    INPUT_STREAM_TEXT_HTML_UTF_16 = (RepresentationClass.INPUT_STREAM, _charset('text/html', 'utf-16'))
    INPUT_STREAM_TEXT_HTML_UTF_16LE = (RepresentationClass.INPUT_STREAM, _charset('text/html', 'utf-16le'))
    INPUT_STREAM_TEXT_HTML_UTF_16BE = (RepresentationClass.INPUT_STREAM, _charset('text/html', 'utf-16be'))
    INPUT_STREAM_TEXT_HTML_UTF_8 = (RepresentationClass.INPUT_STREAM, _charset('text/html', 'utf-8'))
    INPUT_STREAM_TEXT_PLAIN_HOST = (RepresentationClass.INPUT_STREAM, _PLAIN_HOST)
    INPUT_STREAM_TEXT_PLAIN_US_ASCII = (RepresentationClass.INPUT_STREAM, _charset('text/plain', 'us-ascii'))
    INPUT_STREAM_TEXT_PLAIN_UTF_16 = (RepresentationClass.INPUT_STREAM, _charset('text/plain', 'utf-16'))
    INPUT_STREAM_TEXT_PLAIN_UTF_16LE = (RepresentationClass.INPUT_STREAM, _charset('text/plain', 'utf-16le'))
    INPUT_STREAM_TEXT_PLAIN_UTF_16BE = (RepresentationClass.INPUT_STREAM, _charset('text/plain', 'utf-16be'))
    INPUT_STREAM_TEXT_PLAIN_UTF_8 = (RepresentationClass.INPUT_STREAM, _charset('text/plain', 'utf-8'))

    URL_AUTOSENSE = (RepresentationClass.URL, _OCTET)
    URL_GIF = (RepresentationClass.URL, _GIF)
    URL_JPEG = (RepresentationClass.URL, _JPEG)
    URL_PDF = (RepresentationClass.URL, _PDF)
    URL_PCL = (RepresentationClass.URL, _PCL)
    URL_POSTSCRIPT = (RepresentationClass.URL, _POSTSCRIPT)
    URL_TEXT_HTML_HOST = (RepresentationClass.URL, _HTML_HOST)
    URL_TEXT_HTML_US_ASCII = (RepresentationClass.URL, _charset('text/html', 'us-ascii'))
    URL_TEXT_HTML_UTF_16 = (RepresentationClass.URL, _charset('text/html', 'utf-16'))
    URL_TEXT_HTML_UTF_16LE = (RepresentationClass.URL, _charset('text/html', 'utf-16le'))
    URL_TEXT_HTML_UTF_16BE = (RepresentationClass.URL, _charset('text/html', 'utf-16be'))
    URL_TEXT_HTML_UTF_8 = (RepresentationClass.URL, _charset('text/html', 'utf-8'))
    URL_TEXT_PLAIN_HOST = (RepresentationClass.URL, _PLAIN_HOST)
    URL_TEXT_PLAIN_US_ASCII = (RepresentationClass.URL, _charset('text/plain', 'us-ascii'))
    URL_TEXT_PLAIN_UTF_16 = (RepresentationClass.URL, _charset('text/plain', 'utf-16'))
    URL_TEXT_PLAIN_UTF_16LE = (RepresentationClass.URL, _charset('text/plain', 'utf-16le'))
    URL_TEXT_PLAIN_UTF_16BE = (RepresentationClass.URL, _charset('text/plain', 'utf-16be'))
    URL_TEXT_PLAIN_UTF_8 = (RepresentationClass.URL, _charset('text/plain', 'utf-8'))

    CHAR_ARRAY_TEXT_HTML = (RepresentationClass.CHAR_ARRAY, _HTML_CHARS)
    CHAR_ARRAY_TEXT_PLAIN = (RepresentationClass.CHAR_ARRAY, _PLAIN_CHARS)
    READER_TEXT_HTML = (RepresentationClass.READER, _HTML_CHARS)
    READER_TEXT_PLAIN = (RepresentationClass.READER, _PLAIN_CHARS)
    STRING_TEXT_HTML = (RepresentationClass.STRING, _HTML_CHARS)
    STRING_TEXT_PLAIN = (RepresentationClass.STRING, _PLAIN_CHARS)

    SERVICE_FORMATTED_PAGEABLE = (RepresentationClass.SERVICE_FORMATTED, 'application/x-pageable')
    SERVICE_FORMATTED_PRINTABLE = (RepresentationClass.SERVICE_FORMATTED, 'application/x-printable')
    SERVICE_FORMATTED_RENDERABLE_IMAGE = (RepresentationClass.SERVICE_FORMATTED, 'application/x-renderable-image')

    @property
    def representation(self) -> RepresentationClass:
        return self.value[0]

    @property
    def mime_type(self) -> str:
        return self.value[1]

    def __str__(self):
        return f"{self.representation.value}:{self.mime_type}"


# ---------------------------------------------------------------------------
# Resolution tables: mimeType tag → {flavor tag → DocFlavor}
# Every table carries a None entry: the default for an unrecognised flavor.
# ---------------------------------------------------------------------------

_BYTE_ARRAY = 'docflavor.byte_array'
_INPUT_STREAM = 'docflavor.input_stream'
_URL = 'docflavor.url'
_CHAR_ARRAY = 'docflavor.char_array'
_READER = 'docflavor.reader'
_STRING = 'docflavor.string'

FlavorTable = Dict[Optional[str], DocFlavor]


def _binary_table(category: str) -> FlavorTable:
    """Byte array / input stream / URL variants, defaulting to byte array."""
    table = {
        _BYTE_ARRAY: DocFlavor[f'BYTE_ARRAY_{category}'],
        _INPUT_STREAM: DocFlavor[f'INPUT_STREAM_{category}'],
        _URL: DocFlavor[f'URL_{category}'],
    }
    table[None] = table[_BYTE_ARRAY]
    return table


def _character_table(category: str) -> FlavorTable:
    """Char array / reader / string variants, defaulting to char array."""
    table = {
        _CHAR_ARRAY: DocFlavor[f'CHAR_ARRAY_{category}'],
        _READER: DocFlavor[f'READER_{category}'],
        _STRING: DocFlavor[f'STRING_{category}'],
    }
    table[None] = table[_CHAR_ARRAY]
    return table


def _service_table(category: str) -> FlavorTable:
    """Service-formatted categories only have one flavor."""
    return {None: DocFlavor[f'SERVICE_FORMATTED_{category}']}


_BINARY_CATEGORIES = (
    'AUTOSENSE', 'GIF', 'JPEG', 'PDF', 'PCL', 'POSTSCRIPT',
    'TEXT_HTML_HOST', 'TEXT_HTML_US_ASCII', 'TEXT_HTML_UTF_16',
    'TEXT_HTML_UTF_16LE', 'TEXT_HTML_UTF_16BE', 'TEXT_HTML_UTF_8',
    'TEXT_PLAIN_HOST', 'TEXT_PLAIN_US_ASCII', 'TEXT_PLAIN_UTF_16',
    'TEXT_PLAIN_UTF_16LE', 'TEXT_PLAIN_UTF_16BE', 'TEXT_PLAIN_UTF_8',
)
_CHARACTER_CATEGORIES = ('TEXT_HTML', 'TEXT_PLAIN')
_SERVICE_CATEGORIES = ('PAGEABLE', 'PRINTABLE', 'RENDERABLE_IMAGE')

FLAVOR_TABLES: Dict[str, FlavorTable] = {}
FLAVOR_TABLES.update({c.lower(): _binary_table(c) for c in _BINARY_CATEGORIES})
FLAVOR_TABLES.update({c.lower(): _character_table(c) for c in _CHARACTER_CATEGORIES})
FLAVOR_TABLES.update({c.lower(): _service_table(c) for c in _SERVICE_CATEGORIES})

DEFAULT_DOC_FLAVOR = DocFlavor.BYTE_ARRAY_AUTOSENSE


def resolve_doc_flavor(flavor: Optional[str] = None, mime_type: Optional[str] = None) -> DocFlavor:
    """
    Map a flavor hint and a mimeType hint onto a DocFlavor member.

    Args:
        flavor: representation tag, defaults to DocFlavor.BYTE_ARRAY
        mime_type: category tag, defaults to AUTOSENSE

    Returns:
        Always a DocFlavor; unknown input falls back instead of raising.
    """
    if mime_type is None:
        mime_type = DEFAULT_MIME_TYPE
    explicit = flavor is not None
    if flavor is None:
        flavor = DEFAULT_FLAVOR

    table = FLAVOR_TABLES.get(mime_type.lower())
    if table is None:
        logger.warning(f"Unknown mimeType '{mime_type}' — falling back to {DEFAULT_DOC_FLAVOR.name}")
        return DEFAULT_DOC_FLAVOR

    key = flavor.lower()
    if key in table:
        return table[key]
    if explicit and len(table) > 1:
        logger.warning(f"Unknown flavor '{flavor}' for mimeType '{mime_type}' — using {table[None].name}")
    return table[None]
