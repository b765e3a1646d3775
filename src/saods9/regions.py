""" Retrieval of the regions defined in a SAOImage/DS9 frame. The regions
    are requested in the 'ds9' format and parsed into a list of
    (shape, coordinates, properties) tuples.

    The parsing of properties is permissive: integer and floating point
    values are converted, properties with a boolean meaning become True or
    False, quoted or braced values are unquoted, and since a region can
    carry several tags the 'tag' property is always a list. The 'global'
    properties are merged into those of every region.
"""

import logging
import re

from . import errors


logger = logging.getLogger(__name__)


_property = re.compile(r'''\b([_A-Za-z]\w*)\b(?:=([0-9 ]*[0-9]+|\b[\w.]+\b(?:\s+[0-9]+\b)?|\{[^}]*\}|"[^"]*"|'[^']*'))?''')

_region = re.compile(r'^\s*([-+]?)(circle|ellipse|box|polygon|point|line|vector|segment|text|ruler|compass|projection|annulus|panda|epanda|bpanda|composite)\(([^)]+)\)\s*(#.*)?$')

booleans = ('delete', 'highlite', 'edit', 'move', 'rotate', 'include',
            'select', 'fixed', 'source', 'dash', 'fill')


def _number(text):
    """ Return *text* as an int or a float if possible, otherwise unchanged.
    """

    try:
        return int(text)
    except ValueError:
        pass

    try:
        return float(text)
    except ValueError:
        return text



def _value(key, text):

    value = _number(text)

    if key in booleans:
        value = (value == 1)

    return value



def _unquote(text):

    if len(text) < 2:
        return None

    first = text[0]
    last = text[-1]

    if first == last and (first == '"' or first == "'"):
        return text[1:-1]
    if first == '{' and last == '}':
        return text[1:-1]

    return None



def properties(text, props=None):
    """ Parse the properties in *text*, the comment following a region or
        a 'global' line, and add them to the *props* dictionary, which is
        returned.
    """

    if props is None:
        props = dict()

    for match in _property.finditer(text):
        key = match.group(1)
        value = match.group(2)

        if value is None:
            if key == 'background':
                props['source'] = False
            else:
                props[key] = True
            continue

        if key == 'dashlist':
            props[key] = tuple(_number(word) for word in value.split())
            continue

        if key == 'line':
            props[key] = tuple(_value(key, word) for word in value.split())
            continue

        unquoted = _unquote(value)

        if unquoted is None:
            props[key] = _value(key, value)
        elif key == 'tag':
            try:
                props[key].append(unquoted)
            except KeyError:
                props[key] = [unquoted]
        else:
            props[key] = unquoted

    return props



def parse(text):
    """ Parse the textual description of regions in the 'ds9' format, and
        return a list of (shape, coordinates, properties) tuples. The
        *shape* is a string such as 'circle', the *coordinates* a list of
        floats, and *properties* a dictionary.
    """

    lines = text.split('\n')
    defaults = dict()

    for line in lines:
        if line.startswith('global '):
            properties(line[7:], defaults)

    regions = list()

    for line in lines:
        match = _region.match(line)
        if match is None:
            continue

        sign, shape, coordinates, comment = match.groups()

        try:
            coordinates = [float(word) for word in coordinates.split(',')]
        except ValueError:
            raise errors.DecodeError('invalid region coordinates: ' + repr(line))

        props = dict(defaults)
        if 'tag' in props:
            props['tag'] = list(props['tag'])

        props['include'] = (sign != '-')

        if comment is not None:
            properties(comment[1:], props)

        regions.append((shape, coordinates, props))

    return regions



def get(session, name='', coords='image', selected=False):
    """ Return the regions of the current frame, as parsed by :func:`parse`.
        If *name* is not empty only the regions of that group are returned;
        if *selected* is True only the selected regions are returned. The
        *coords* is the coordinate system of the returned coordinates, for
        example 'image', 'physical', 'fk5' or 'galactic'.
    """

    args = ['regions']

    if selected:
        args.append('selected')

    args.extend(('-format', 'ds9'))

    if name:
        args.extend(('-group', name))

    args.extend(('-system', coords))

    text = session.get(*args)
    regions = parse(text)

    logger.debug('%d regions retrieved', len(regions))
    return regions


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
