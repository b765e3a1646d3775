""" Drawing in SAOImage/DS9: display an image with a given zoom, colormap
    and scale limits, and draw points or boxes as regions.

    Multiple points or boxes are sent as one command per item; packing
    several regions in one command does not really speed things up, and
    XPA limits the total length of a command.
"""

import numpy

from .command import token


shapes = ('circle', 'ellipse', 'box', 'polygon', 'point', 'line', 'vector',
          'text', 'ruler', 'compass', 'projection', 'annulus', 'panda',
          'epanda', 'bpanda')


def limits(array, cmin=None, cmax=None):
    """ Return the clipping limits (lo, hi) of the values in *array*, as
        floats. A missing *cmin* or *cmax* is replaced by the minimum, or
        maximum, finite value in *array*. If *array* has no finite values
        the result has lo > hi.
    """

    if cmin is None or cmax is None:
        array = numpy.asarray(array)
        finite = array[numpy.isfinite(array)]

        if finite.size == 0:
            lo = numpy.inf
            hi = -numpy.inf
        else:
            lo = finite.min()
            hi = finite.max()

        if cmin is None:
            cmin = lo
        if cmax is None:
            cmax = hi

    return (float(cmin), float(cmax))



def options(**kwargs):
    """ Return the textual region properties for the keyword arguments:
        ``key=value`` pairs, with booleans as 1 or 0. Properties set to
        None are omitted.
    """

    properties = list()

    for key, value in kwargs.items():
        if value is None:
            continue

        if isinstance(value, bool):
            value = '1' if value else '0'
        else:
            value = token(value)

        properties.append(key + '=' + value)

    return ' '.join(properties)



def region(shape, **kwargs):
    """ Return the (prefix, suffix) pair enclosing the coordinates of a
        region command for *shape*, with the properties in *kwargs*.
    """

    if shape not in shapes:
        raise ValueError('unknown region shape: ' + repr(shape))

    prefix = 'regions command {' + shape
    properties = options(**kwargs)

    if properties:
        suffix = '# ' + properties + '}'
    else:
        suffix = '}'

    return prefix, suffix



def _items(things, width):
    """ Return *things* as a sequence of items of *width* numbers each,
        accepting a single item as well as a sequence of them.
    """

    array = numpy.asarray(things, dtype=float)

    if array.ndim == 1:
        array = array.reshape(1, -1)

    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError("expecting items of %d coordinates, got shape %s" % (width, array.shape))

    return array.tolist()



def points(session, points, **kwargs):
    """ Draw each (x, y) pair in *points* as a point region. A single pair
        is also accepted.
    """

    prefix, suffix = region('point', **kwargs)

    for x, y in _items(points, 2):
        session.set(prefix, x, y, suffix)



def boxes(session, boxes, **kwargs):
    """ Draw each (xmin, xmax, ymin, ymax) box in *boxes* as a closed
        polygon. A single box is also accepted.
    """

    prefix, suffix = region('polygon', **kwargs)

    for x0, x1, y0, y1 in _items(boxes, 4):
        session.set(prefix, x0, y0, x1, y0, x1, y1, x0, y1, x0, y0, suffix)



def image(session, array, cmin=None, cmax=None, cmap=None, zoom=None, **kwargs):
    """ Display the 2-dimensional *array*. The optional *zoom* factor is
        applied first; if either of *cmin* or *cmax* is given the scale
        limits are set with :func:`limits`, and *cmap* selects a colormap
        by name. Remaining keyword arguments, such as *frame*, are handed
        to :func:`saods9.session.Session.set_array`.
    """

    if zoom is not None:
        session.set('zoom to', zoom)

    session.set_array(array, **kwargs)

    if cmin is not None or cmax is not None:
        lo, hi = limits(array, cmin, cmax)
        session.set('scale limits', lo, hi)

    if cmap is not None:
        session.set('cmap', cmap)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
