"""
Print-service attributes derived from a resolved configuration.

The dispatcher tags each document with these; nothing here talks to a printer.
"""

from typing import Any, Dict, List

from lpr_printer.jobs.models import PrintJobConfiguration
from lpr_printer.printers.attributes import OrientationRequested


def print_attributes(config: PrintJobConfiguration) -> Dict[str, Any]:
    """IPP-style attribute keywords for a job sent with this configuration."""
    attributes = {
        'copies': config.copies,
        'sides': config.sides.ipp_keyword,
        'orientation-requested': config.orientation.ipp_value,
        'media': config.media_size.value,
        'document-format': config.doc_flavor.mime_type,
    }
    if config.media_tray:
        attributes['media-source'] = config.media_tray
    return attributes


def build_lp_options(config: PrintJobConfiguration) -> List[str]:
    """
    Convert a configuration to an `lp` argument list.
    Defaults (one copy, portrait) are left out.
    """
    opts = []

    if config.copies > 1:
        opts += ['-n', str(config.copies)]

    opts += ['-o', f'sides={config.sides.ipp_keyword}']
    opts += ['-o', f'media={config.media_size.value}']

    if config.orientation is not OrientationRequested.PORTRAIT:
        opts += ['-o', f'orientation-requested={config.orientation.ipp_value}']

    if config.media_tray:
        opts += ['-o', f'InputSlot={config.media_tray}']

    return opts
