""" Parsing of the version string reported by SAOImage/DS9, for example
    'ds9 8.7b1' or 'ds9 8.4.1'. The version is the last word; whatever
    precedes it, possibly several words, is the product name.
"""

import re

from . import errors


_pattern = re.compile(r'''
    ^\s*
    (?P<product>.*?\S)\s+
    (?P<major>\d+)\.(?P<minor>\d+)
    (?:\.(?P<patch>\d+))?
    (?:-(?P<dashed>[0-9A-Za-z.]+)|(?P<suffix>[A-Za-z][0-9A-Za-z.]*))?
    \s*$
    ''', re.VERBOSE)


class Version:
    """ A structured version number: *major*, *minor* and *patch* numbers,
        plus an optional *prerelease* tag such as 'b1' or 'rc2'. The
        *product* is the name that preceded the version, if any.
    """

    __slots__ = ('major', 'minor', 'patch', 'prerelease', 'product')

    def __init__(self, major, minor, patch=0, prerelease='', product=''):

        self.major = int(major)
        self.minor = int(minor)
        self.patch = int(patch)
        self.prerelease = str(prerelease)
        self.product = str(product)


    def __eq__(self, other):
        if isinstance(other, Version):
            return self.release == other.release and self.prerelease == other.prerelease
        return NotImplemented


    def __hash__(self):
        return hash((self.release, self.prerelease))


    def __repr__(self):
        return "Version(%d, %d, %d, %r)" % (self.major, self.minor, self.patch, self.prerelease)


    def __str__(self):
        text = "%d.%d.%d" % self.release
        if self.prerelease:
            text += '-' + self.prerelease
        return text


    @property
    def release(self):
        """ The (major, minor, patch) tuple, suitable for comparisons.
        """

        return (self.major, self.minor, self.patch)


# end of class Version



def parse(text):
    """ Parse *text* of the form ``<product> <major>.<minor>[.<patch>][suffix]``
        and return a :class:`Version`. The suffix may be introduced by a dash
        ('8.4.1-rc2') or follow directly ('8.7b1').
    """

    if isinstance(text, bytes):
        text = text.decode('utf-8', errors='replace')

    matched = _pattern.match(text)

    if matched is None:
        raise errors.DecodeError('not a version string: ' + repr(text))

    patch = matched.group('patch')
    if patch is None:
        patch = 0

    prerelease = matched.group('dashed')
    if prerelease is None:
        prerelease = matched.group('suffix')
    if prerelease is None:
        prerelease = ''

    return Version(matched.group('major'), matched.group('minor'), patch,
                   prerelease, matched.group('product'))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
