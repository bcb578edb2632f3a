"""
Standard media (paper) sizes and the mediaSize hint resolver.

The hint's prefix selects a sub-table:
  iso…  ISO A/B/C series (prefix matched case-insensitively)
  jis…  JIS B series     (prefix matched case-sensitively)
  na…   North American   (prefix matched case-sensitively)
  other  remaining named sizes

'JIS-B5' and 'NA-LEGAL' therefore land in the other table and resolve to
na-letter. Lookups inside a table ignore case.
"""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class MediaSizeName(str, Enum):
    ISO_A0 = 'iso-a0'
    ISO_A1 = 'iso-a1'
    ISO_A2 = 'iso-a2'
    ISO_A3 = 'iso-a3'
    ISO_A4 = 'iso-a4'
    ISO_A5 = 'iso-a5'
    ISO_A6 = 'iso-a6'
    ISO_A7 = 'iso-a7'
    ISO_A8 = 'iso-a8'
    ISO_A9 = 'iso-a9'
    ISO_A10 = 'iso-a10'
    ISO_B0 = 'iso-b0'
    ISO_B1 = 'iso-b1'
    ISO_B2 = 'iso-b2'
    ISO_B3 = 'iso-b3'
    ISO_B4 = 'iso-b4'
    ISO_B5 = 'iso-b5'
    ISO_B6 = 'iso-b6'
    ISO_B7 = 'iso-b7'
    ISO_B8 = 'iso-b8'
    ISO_B9 = 'iso-b9'
    ISO_B10 = 'iso-b10'
    ISO_C0 = 'iso-c0'
    ISO_C1 = 'iso-c1'
    ISO_C2 = 'iso-c2'
    ISO_C3 = 'iso-c3'
    ISO_C4 = 'iso-c4'
    ISO_C5 = 'iso-c5'
    ISO_C6 = 'iso-c6'
    ISO_DESIGNATED_LONG = 'iso-designated-long'

    JIS_B0 = 'jis-b0'
    JIS_B1 = 'jis-b1'
    JIS_B2 = 'jis-b2'
    JIS_B3 = 'jis-b3'
    JIS_B4 = 'jis-b4'
    JIS_B5 = 'jis-b5'
    JIS_B6 = 'jis-b6'
    JIS_B7 = 'jis-b7'
    JIS_B8 = 'jis-b8'
    JIS_B9 = 'jis-b9'
    JIS_B10 = 'jis-b10'

    NA_LETTER = 'na-letter'
    NA_LEGAL = 'na-legal'
    NA_5X7 = 'na-5x7'
    NA_8X10 = 'na-8x10'
    NA_NUMBER_9_ENVELOPE = 'na-number-9-envelope'
    NA_NUMBER_10_ENVELOPE = 'na-number-10-envelope'
    NA_NUMBER_11_ENVELOPE = 'na-number-11-envelope'
    NA_NUMBER_12_ENVELOPE = 'na-number-12-envelope'
    NA_NUMBER_14_ENVELOPE = 'na-number-14-envelope'
    NA_6X9_ENVELOPE = 'na-6x9-envelope'
    NA_7X9_ENVELOPE = 'na-7x9-envelope'
    NA_9X11_ENVELOPE = 'na-9x11-envelope'
    NA_9X12_ENVELOPE = 'na-9x12-envelope'
    NA_10X13_ENVELOPE = 'na-10x13-envelope'
    NA_10X14_ENVELOPE = 'na-10x14-envelope'
    NA_10X15_ENVELOPE = 'na-10x15-envelope'

    EXECUTIVE = 'executive'
    LEDGER = 'ledger'
    TABLOID = 'tabloid'
    INVOICE = 'invoice'
    FOLIO = 'folio'
    QUARTO = 'quarto'
    JAPANESE_POSTCARD = 'japanese-postcard'
    JAPANESE_DOUBLE_POSTCARD = 'oufuko-postcard'
    A = 'a'
    B = 'b'
    C = 'c'
    D = 'd'
    E = 'e'
    ITALY_ENVELOPE = 'italian-envelope'
    MONARCH_ENVELOPE = 'monarch-envelope'
    PERSONAL_ENVELOPE = 'personal-envelope'

    def __str__(self):
        return self.value


DEFAULT_MEDIA_SIZE = MediaSizeName.NA_LETTER


def _table(prefix: str) -> Dict[str, MediaSizeName]:
    return {m.value: m for m in MediaSizeName if m.value.startswith(prefix)}


ISO_SIZES = _table('iso-')
JIS_SIZES = _table('jis-')
NA_SIZES = _table('na-')
OTHER_SIZES = {
    m.value: m for m in MediaSizeName
    if m.value not in ISO_SIZES and m.value not in JIS_SIZES and m.value not in NA_SIZES
}

ISO_FALLBACK = MediaSizeName.ISO_A4
JIS_FALLBACK = MediaSizeName.JIS_B4
NA_FALLBACK = MediaSizeName.NA_LETTER
OTHER_FALLBACK = MediaSizeName.NA_LETTER


def _lookup(size: str, table: Dict[str, MediaSizeName], fallback: MediaSizeName, series: str) -> MediaSizeName:
    answer = table.get(size.lower())
    if answer is None:
        logger.warning(f"Unknown {series} media size '{size}' — falling back to {fallback.value}")
        return fallback
    return answer


def resolve_media_size(size: Optional[str] = None) -> MediaSizeName:
    """Map a mediaSize hint onto a MediaSizeName; absent hints give na-letter."""
    if size is None:
        return DEFAULT_MEDIA_SIZE
    if size.lower().startswith('iso'):
        return _lookup(size, ISO_SIZES, ISO_FALLBACK, 'ISO')
    if size.startswith('jis'):
        return _lookup(size, JIS_SIZES, JIS_FALLBACK, 'JIS')
    if size.startswith('na'):
        return _lookup(size, NA_SIZES, NA_FALLBACK, 'NA')
    return _lookup(size, OTHER_SIZES, OTHER_FALLBACK, 'named')
