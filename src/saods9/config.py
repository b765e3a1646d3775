""" Configuration for XPA and SAOImage/DS9 is held entirely in environment
    variables, so that settings are shared with the XPA command-line tools
    and with any DS9 process launched from here. The defaults match those
    compiled into the XPA library.
"""

import ctypes.util
import os


defaults = dict()
defaults['XPA_MAXHOSTS'] = 100
defaults['XPA_SHORT_TIMEOUT'] = 15
defaults['XPA_LONG_TIMEOUT'] = 180
defaults['XPA_CONNECT_TIMEOUT'] = 10
defaults['XPA_TMPDIR'] = '/tmp/.xpa'
defaults['XPA_VERBOSITY'] = True
defaults['XPA_IOCALLSXPA'] = False
defaults['XPA_METHOD'] = 'inet'


def get(key):
    """ Return the current value of the XPA parameter *key*. The value is
        taken from the environment if set there, otherwise the default is
        returned. The returned value has the same type as the default:
        integer, boolean, or string.
    """

    key = str(key)

    try:
        default = defaults[key]
    except KeyError:
        raise KeyError('unknown XPA parameter: ' + repr(key))

    try:
        value = os.environ[key]
    except KeyError:
        return default

    if isinstance(default, bool):
        value = value.strip().lower()
        if value in ('', '0', 'false', 'no', 'off'):
            return False
        return True

    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            raise ValueError("invalid value for %s: %s" % (key, repr(value)))

    return value



def set(key, value):
    """ Set the XPA parameter *key* to *value* in the environment, and
        return the previous value. The type of *value* must agree with the
        type of the default value for *key*; booleans are stored as 1 or 0.
    """

    old = get(key)
    default = defaults[key]

    if isinstance(default, bool):
        if isinstance(value, bool):
            value = '1' if value else '0'
        else:
            raise TypeError("%s requires a boolean value" % (key))

    elif isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("%s requires an integer value" % (key))
        value = str(value)

    elif isinstance(value, str):
        pass
    else:
        raise TypeError("%s requires a string value" % (key))

    os.environ[key] = value
    return old



def maxhosts(nmax):
    """ Translate a requested maximum number of replies into a concrete
        number; -1 means as many as XPA allows.
    """

    nmax = int(nmax)

    if nmax == -1:
        return get('XPA_MAXHOSTS')
    if nmax < 1:
        raise ValueError('the maximum number of replies must be -1 or positive')

    return nmax



def library(default=None):
    """ Return the location of the XPA shared library. This defaults to
        whatever :func:`ctypes.util.find_library` locates, but can be
        overridden by calling this method with an explicit path, or by
        setting the ``SAODS9_XPA_LIBRARY`` environment variable prior to
        the first invocation of this method.
    """

    if default is not None:
        default = str(default)
        default = os.path.expandvars(default)
        default = os.path.expanduser(default)

        if os.path.exists(default):
            pass
        else:
            raise ValueError('no such XPA library: ' + default)

        os.environ['SAODS9_XPA_LIBRARY'] = default
        library.found = default


    found = library.found

    if found is not None:
        return found

    found = os.environ.get('SAODS9_XPA_LIBRARY', '')

    if found:
        library.found = found
        return found

    found = ctypes.util.find_library('xpa')

    if found is None:
        raise RuntimeError('cannot locate the XPA library, set SAODS9_XPA_LIBRARY')

    library.found = found
    return found

library.found = None



def executable():
    """ Return the name or path of the SAOImage/DS9 executable, which can be
        set with the ``SAODS9_EXECUTABLE`` environment variable.
    """

    return os.environ.get('SAODS9_EXECUTABLE', 'ds9')



def user():
    """ Return the name of the current user, as used by XPA to identify the
        owner of an access point.
    """

    for variable in ('USER', 'LOGNAME', 'USERNAME'):
        try:
            return os.environ[variable]
        except KeyError:
            continue

    return ''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
