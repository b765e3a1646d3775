""" Extraction of the world coordinate system of the current frame, as a
    list of FITS header cards.
"""

import os
import re
import tempfile

from . import decode


_cards = re.compile(r'^(WCSAXES|C(RPIX|RVAL|TYPE|DELT|UNIT)[1-9] |(PC|CD|PV)[1-9]_[1-9]  |RADESYS|LATPOLE|LONPOLE) =')


def is_card(line):
    """ Return True if *line* is a FITS header card defining part of the
        WCS transformation.
    """

    return _cards.match(line) is not None



def cards(session, useheader=True):
    """ Return the FITS header cards defining the WCS transformation of the
        current frame. If *useheader* is True they are taken from the FITS
        header of the frame, otherwise from the result of the 'wcs save'
        command, which goes through a temporary file.
    """

    if useheader:
        header = session.get('fits header', target=decode.TEXT)
    else:
        descriptor, path = tempfile.mkstemp(prefix='saods9-', suffix='.wcs')
        os.close(descriptor)

        try:
            session.set('wcs save', path)
            with open(path, 'r') as saved:
                header = saved.read()
        finally:
            os.remove(path)

    return [line for line in header.split('\n') if is_card(line)]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
