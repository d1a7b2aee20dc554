#!/usr/bin/env python

import logging
import re

from .encoder import encode

log = logging.getLogger(__name__)


class Label:
    '''
    Used to build a ZPL2 label holding Code128 barcodes.

    all dimensions are given in millimeters and automatically converted to
    printer dot units.
    '''

    def __init__(self, height, width=110.0, dpmm=12.0):
        """
        Creates one (or more) ZPL2 labels.

        *height* and *width* are given in millimeters
        *dpmm* refers to dots per millimeter (e.g. 12 for 300dpi)
        """
        self.height = height
        self.width = width
        self.dpmm = dpmm

        self.code = "^XA"

    def origin(self, x, y, justification=None):
        """
        new block located at x and y (in millimeters)
        justification is 0 for left, 1 for right, and 2 for auto
        """
        self.code += "^FO%i,%i" % (x*self.dpmm, y*self.dpmm)
        if justification is not None:
            assert justification in '012', "invalid justification"
            self.code += ',' + justification

    def endorigin(self):
        self.code += '^FS'

    def barcode_field_default(self, module_width, bar_width_ratio, height):
        """
        sets module width (in dots), wide to narrow bar ratio and default
        barcode height (in millimeters) from here onward
        """
        assert 1 <= module_width <= 10, "invalid module width"
        assert 2.0 <= bar_width_ratio <= 3.0, "invalid bar width ratio"
        self.code += '^BY%i,%.1f,%i' % (module_width, bar_width_ratio, height*self.dpmm)

    def write_text(self, text, char_height=None, char_width=None, font='0', orientation='N'):
        if char_height and char_width:
            assert re.match(r'^[A-Z0-9]$', font), "invalid font"
            assert orientation in ['N', 'R', 'I', 'B'], "invalid orientation"
            self.code += "^A%c%c,%i,%i" % (font, orientation, char_height*self.dpmm,
                                           char_width*self.dpmm)
        self.code += "^FD%s" % text

    def code128(self, data, height=10, orientation='N', print_interpretation_line='Y',
                print_interpretation_line_above='N', check_digit='N'):
        """
        writes *data* (bytes or str) as a Code128 barcode, *height* in millimeters

        The field is written in mode N, the subsets are picked by the
        invocation codes in the encoded payload.
        """
        assert orientation in ['N', 'R', 'I', 'B'], "invalid orientation"
        assert print_interpretation_line in ['Y', 'N'], "invalid interpretation line flag"
        assert print_interpretation_line_above in ['Y', 'N'], "invalid interpretation line flag"
        assert check_digit in ['Y', 'N'], "invalid check digit flag"

        payload = encode(data)
        log.debug("code128 payload for %r: %r", data, payload)

        self.code += "^BC%c,%i,%c,%c,%c,N" % (orientation, height*self.dpmm,
                                               print_interpretation_line,
                                               print_interpretation_line_above,
                                               check_digit)
        self.code += "^FD%s" % payload

    def dumpZPL(self):
        return self.code+"^XZ"


def __main__():
    logging.basicConfig(level=logging.DEBUG)

    l = Label(40, 80)
    l.barcode_field_default(2, 3.0, 10)

    l.origin(5, 5)
    l.write_text("Shipment", char_height=4, char_width=3)
    l.endorigin()

    l.origin(5, 12)
    l.code128("ABC1234567ABC")
    l.endorigin()

    l.origin(5, 27)
    l.code128("0123456789", height=8, print_interpretation_line='N')
    l.endorigin()

    print(l.dumpZPL())


if __name__ == "__main__":
    __main__()
