import unittest

from lpr_printer.config.uri import parse_uri
from lpr_printer.printers.attributes import (
    OrientationRequested,
    Sides,
    resolve_orientation,
    resolve_sides,
)
from lpr_printer.printers.flavors import (
    FLAVOR_TABLES,
    DocFlavor,
    RepresentationClass,
    resolve_doc_flavor,
)
from lpr_printer.printers.media import MediaSizeName, resolve_media_size
from lpr_printer.printers.options import build_lp_options, print_attributes


class TestDocFlavor(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(resolve_doc_flavor(), DocFlavor.BYTE_ARRAY_AUTOSENSE)
        self.assertEqual(resolve_doc_flavor(None, 'PDF'), DocFlavor.BYTE_ARRAY_PDF)
        self.assertEqual(resolve_doc_flavor('DocFlavor.URL', None), DocFlavor.URL_AUTOSENSE)

    def test_binary_categories(self):
        self.assertEqual(resolve_doc_flavor('DocFlavor.BYTE_ARRAY', 'GIF'), DocFlavor.BYTE_ARRAY_GIF)
        self.assertEqual(resolve_doc_flavor('DocFlavor.INPUT_STREAM', 'jpeg'), DocFlavor.INPUT_STREAM_JPEG)
        self.assertEqual(resolve_doc_flavor('docflavor.url', 'Postscript'), DocFlavor.URL_POSTSCRIPT)
        self.assertEqual(resolve_doc_flavor('DocFlavor.URL', 'PCL'), DocFlavor.URL_PCL)

    def test_charset_categories(self):
        self.assertEqual(
            resolve_doc_flavor('DocFlavor.INPUT_STREAM', 'TEXT_PLAIN_UTF_8'),
            DocFlavor.INPUT_STREAM_TEXT_PLAIN_UTF_8,
        )
        self.assertEqual(
            resolve_doc_flavor('DocFlavor.URL', 'text_html_utf_16le'),
            DocFlavor.URL_TEXT_HTML_UTF_16LE,
        )
        self.assertEqual(resolve_doc_flavor(None, 'TEXT_HTML_HOST'), DocFlavor.BYTE_ARRAY_TEXT_HTML_HOST)

    def test_unknown_flavor_in_binary_category_is_byte_array(self):
        self.assertEqual(resolve_doc_flavor('DocFlavor.READER', 'PDF'), DocFlavor.BYTE_ARRAY_PDF)
        self.assertEqual(resolve_doc_flavor('nonsense', 'TEXT_PLAIN_US_ASCII'),
                         DocFlavor.BYTE_ARRAY_TEXT_PLAIN_US_ASCII)

    def test_character_categories(self):
        self.assertEqual(resolve_doc_flavor('DocFlavor.READER', 'TEXT_PLAIN'), DocFlavor.READER_TEXT_PLAIN)
        self.assertEqual(resolve_doc_flavor('DocFlavor.STRING', 'TEXT_HTML'), DocFlavor.STRING_TEXT_HTML)
        self.assertEqual(resolve_doc_flavor('DocFlavor.CHAR_ARRAY', 'TEXT_HTML'), DocFlavor.CHAR_ARRAY_TEXT_HTML)
        # No byte-array variant here, char array is the category default
        self.assertEqual(resolve_doc_flavor(None, 'TEXT_PLAIN'), DocFlavor.CHAR_ARRAY_TEXT_PLAIN)

    def test_service_formatted_categories(self):
        self.assertEqual(resolve_doc_flavor(None, 'PAGEABLE'), DocFlavor.SERVICE_FORMATTED_PAGEABLE)
        self.assertEqual(resolve_doc_flavor('DocFlavor.URL', 'printable'), DocFlavor.SERVICE_FORMATTED_PRINTABLE)
        self.assertEqual(resolve_doc_flavor(None, 'RENDERABLE_IMAGE'),
                         DocFlavor.SERVICE_FORMATTED_RENDERABLE_IMAGE)

    def test_unknown_mime_type(self):
        self.assertEqual(resolve_doc_flavor('DocFlavor.URL', 'WORD'), DocFlavor.BYTE_ARRAY_AUTOSENSE)
        self.assertEqual(resolve_doc_flavor('DocFlavor.URL', ''), DocFlavor.BYTE_ARRAY_AUTOSENSE)

    def test_every_table_has_default(self):
        self.assertEqual(len(FLAVOR_TABLES), 23)
        for category, table in FLAVOR_TABLES.items():
            self.assertIn(None, table, category)

    def test_flavor_parts(self):
        flavor = DocFlavor.URL_TEXT_PLAIN_UTF_8
        self.assertEqual(flavor.representation, RepresentationClass.URL)
        self.assertEqual(flavor.mime_type, 'text/plain; charset=utf-8')
        self.assertEqual(DocFlavor.BYTE_ARRAY_PDF.mime_type, 'application/pdf')


class TestMediaSize(unittest.TestCase):

    def test_default(self):
        self.assertEqual(resolve_media_size(), MediaSizeName.NA_LETTER)

    def test_iso(self):
        self.assertEqual(resolve_media_size('iso-a0'), MediaSizeName.ISO_A0)
        self.assertEqual(resolve_media_size('ISO-A10'), MediaSizeName.ISO_A10)
        self.assertEqual(resolve_media_size('iso-b5'), MediaSizeName.ISO_B5)
        self.assertEqual(resolve_media_size('iso-c6'), MediaSizeName.ISO_C6)
        self.assertEqual(resolve_media_size('iso-designated-long'), MediaSizeName.ISO_DESIGNATED_LONG)

    def test_iso_fallback(self):
        self.assertEqual(resolve_media_size('iso-z9'), MediaSizeName.ISO_A4)
        self.assertEqual(resolve_media_size('ISO'), MediaSizeName.ISO_A4)

    def test_jis(self):
        self.assertEqual(resolve_media_size('jis-b0'), MediaSizeName.JIS_B0)
        self.assertEqual(resolve_media_size('jis-B10'), MediaSizeName.JIS_B10)
        self.assertEqual(resolve_media_size('jis-x'), MediaSizeName.JIS_B4)

    def test_jis_prefix_is_case_sensitive(self):
        self.assertEqual(resolve_media_size('JIS-B5'), MediaSizeName.NA_LETTER)
        self.assertEqual(resolve_media_size('Jis-b5'), MediaSizeName.NA_LETTER)

    def test_na(self):
        self.assertEqual(resolve_media_size('na-letter'), MediaSizeName.NA_LETTER)
        self.assertEqual(resolve_media_size('na-legal'), MediaSizeName.NA_LEGAL)
        self.assertEqual(resolve_media_size('na-number-10-envelope'), MediaSizeName.NA_NUMBER_10_ENVELOPE)
        self.assertEqual(resolve_media_size('na-bogus'), MediaSizeName.NA_LETTER)

    def test_na_prefix_is_case_sensitive(self):
        self.assertEqual(resolve_media_size('NA-LEGAL'), MediaSizeName.NA_LETTER)

    def test_other(self):
        self.assertEqual(resolve_media_size('executive'), MediaSizeName.EXECUTIVE)
        self.assertEqual(resolve_media_size('Ledger'), MediaSizeName.LEDGER)
        self.assertEqual(resolve_media_size('folio'), MediaSizeName.FOLIO)
        self.assertEqual(resolve_media_size('quarto'), MediaSizeName.QUARTO)
        self.assertEqual(resolve_media_size('invoice'), MediaSizeName.INVOICE)
        self.assertEqual(resolve_media_size('oufuko-postcard'), MediaSizeName.JAPANESE_DOUBLE_POSTCARD)
        self.assertEqual(resolve_media_size('c'), MediaSizeName.C)

    def test_other_fallback(self):
        self.assertEqual(resolve_media_size('bogus'), MediaSizeName.NA_LETTER)
        self.assertEqual(resolve_media_size(''), MediaSizeName.NA_LETTER)


class TestSidesAndOrientation(unittest.TestCase):

    def test_sides(self):
        self.assertEqual(resolve_sides(), Sides.ONE_SIDED)
        self.assertEqual(resolve_sides('one-sided'), Sides.ONE_SIDED)
        self.assertEqual(resolve_sides('DUPLEX'), Sides.DUPLEX)
        self.assertEqual(resolve_sides('Tumble'), Sides.TUMBLE)
        self.assertEqual(resolve_sides('two-sided-short-edge'), Sides.TWO_SIDED_SHORT_EDGE)
        self.assertEqual(resolve_sides('TWO-SIDED-LONG-EDGE'), Sides.TWO_SIDED_LONG_EDGE)
        self.assertEqual(resolve_sides('double'), Sides.ONE_SIDED)

    def test_orientation(self):
        self.assertEqual(resolve_orientation(), OrientationRequested.PORTRAIT)
        self.assertEqual(resolve_orientation('LANDSCAPE'), OrientationRequested.LANDSCAPE)
        self.assertEqual(resolve_orientation('reverse-portrait'), OrientationRequested.REVERSE_PORTRAIT)
        self.assertEqual(resolve_orientation('Reverse-Landscape'), OrientationRequested.REVERSE_LANDSCAPE)
        self.assertEqual(resolve_orientation('sideways'), OrientationRequested.PORTRAIT)

    def test_ipp_values(self):
        self.assertEqual(Sides.DUPLEX.ipp_keyword, 'two-sided-long-edge')
        self.assertEqual(Sides.TUMBLE.ipp_keyword, 'two-sided-short-edge')
        self.assertEqual(Sides.ONE_SIDED.ipp_keyword, 'one-sided')
        self.assertEqual(OrientationRequested.PORTRAIT.ipp_value, 3)
        self.assertEqual(OrientationRequested.REVERSE_PORTRAIT.ipp_value, 6)


class TestPrintOptions(unittest.TestCase):

    def test_default_attributes(self):
        attributes = print_attributes(parse_uri('lpr://printhost/office'))
        self.assertEqual(attributes, {
            'copies': 1,
            'sides': 'one-sided',
            'orientation-requested': 3,
            'media': 'na-letter',
            'document-format': 'application/octet-stream',
        })

    def test_attributes_with_tray(self):
        config = parse_uri('lpr://printhost/office?mediaTray=bottom&mimeType=PDF&sides=duplex')
        attributes = print_attributes(config)
        self.assertEqual(attributes['media-source'], 'bottom')
        self.assertEqual(attributes['document-format'], 'application/pdf')
        self.assertEqual(attributes['sides'], 'two-sided-long-edge')

    def test_lp_options_defaults(self):
        opts = build_lp_options(parse_uri('lpr://printhost/office'))
        self.assertEqual(opts, ['-o', 'sides=one-sided', '-o', 'media=na-letter'])

    def test_lp_options_full(self):
        config = parse_uri(
            'lpr://printhost/office?copies=2&sides=tumble&mediaSize=iso-a4'
            '&orientation=landscape&mediaTray=tray1'
        )
        self.assertEqual(build_lp_options(config), [
            '-n', '2',
            '-o', 'sides=two-sided-short-edge',
            '-o', 'media=iso-a4',
            '-o', 'orientation-requested=4',
            '-o', 'InputSlot=tray1',
        ])


if __name__ == '__main__':
    unittest.main()
