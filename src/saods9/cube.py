""" Navigation through the planes of a data cube displayed in the current
    frame, and the interval of the cube animation.
"""

from . import decode


def get(session):
    """ Return the index of the displayed cube plane, starting at 1.
    """

    return session.get('cube', target=decode.Scalar(int))



def set(session, z):
    """ Display plane *z* of the cube, the first plane being 1.
    """

    return session.set('cube', int(z))



def interval(session, dt=None):
    """ Return the time in seconds between two planes when the cube is
        animated. If *dt* is given the interval is set instead, and the
        result of the set request is returned.
    """

    if dt is None:
        return session.get('cube interval', target=decode.Scalar(float))

    return session.set('cube interval', float(dt))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
