""" Exception classes raised by :mod:`saods9`. Every exception raised on
    purpose by this package derives from :class:`Error`; each one also
    derives from the closest builtin exception, so that callers catching
    builtins (:class:`ValueError`, :class:`TypeError`, etc.) continue to
    work as expected.
"""

import builtins


class Error(Exception):
    """ Base class for all :mod:`saods9` errors.
    """


class ConnectionError(Error, builtins.ConnectionError):
    """ The underlying transport could not be reached or opened. This is
        never retried; the next call will attempt a fresh connection.
    """


class NoReply(Error, RuntimeError):
    """ No access point answered a request.
    """


class MultipleMatches(Error, RuntimeError):
    """ More than one access point answered when exactly one was expected.
        The candidates are retained as the *matches* attribute.
    """

    def __init__(self, text, matches=()):
        Error.__init__(self, text)
        self.matches = list(matches)


class ServerError(Error, RuntimeError):
    """ The remote application replied with an explicit error message. The
        *message* is preserved verbatim; *server* identifies who sent it.
    """

    def __init__(self, message, server=None):
        Error.__init__(self, message)
        self.message = message
        self.server = server


class DecodeError(Error, ValueError):
    """ A reply does not match the grammar of the requested target type.
    """


class DimensionMismatch(DecodeError):
    """ The number of tokens, or the number of bytes, in a reply does not
        match the requested dimensions.
    """


class UnsupportedType(Error, TypeError):
    """ An element type has no FITS bitpix mapping, or an array has a rank
        that cannot be transmitted.
    """


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
