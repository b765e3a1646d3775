""" Implementation of the module-level convenience functions. These all
    act on a single default :class:`saods9.session.Session`, created on
    first use, which is the intended entry point for interactive work:

        >>> import saods9
        >>> saods9.connect()
        >>> saods9.set('zoom to', 2)
        >>> saods9.get('zoom')
        '2'
"""

import threading

from .session import Session


_default = None
_default_lock = threading.Lock()


def session(new=None):
    """ Return the default :class:`Session`, creating it if necessary. If
        *new* is provided it replaces the default session, for example to
        use a different transport.
    """

    global _default

    with _default_lock:
        if new is not None:
            _default = new
        elif _default is None:
            _default = Session()

        return _default



def connect(target=None):
    """ Set the access point of the default session; see
        :func:`Session.connect`.
    """

    return session().connect(target)



def disconnect():
    """ Forget the access point of the default session.
    """

    session().disconnect()



def accesspoint():
    """ Return the access point of the default session, or None if it is not
        connected.
    """

    return session().accesspoint



def get(*args, **kwargs):
    return session().get(*args, **kwargs)



def set(*args, **kwargs):
    return session().set(*args, **kwargs)



def get_array(**kwargs):
    return session().get_array(**kwargs)



def set_array(array, **kwargs):
    return session().set_array(array, **kwargs)



def version():
    return session().version()



def quit():
    session().quit()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
