""" Construction of textual XPA commands. Every request to SAOImage/DS9 is
    a single string of whitespace-separated tokens; :func:`join_arguments`
    builds that string from a sequence of Python values.
"""

import numbers

import numpy

from . import errors


class Symbol:
    """ A bare identifier, emitted on the command line as its *name* with no
        further processing. This is mostly useful for keywords that are
        also valid Python strings, to make the intent explicit, for
        example ``Symbol('new')``.
    """

    __slots__ = ('name',)

    def __init__(self, name):

        name = str(name)

        if name == '' or any(character.isspace() for character in name):
            raise ValueError('a symbol must be a non-empty word: ' + repr(name))

        self.name = name


    def __repr__(self):
        return 'Symbol(%r)' % (self.name)


    def __str__(self):
        return self.name


    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self.name == other.name
        return NotImplemented


    def __hash__(self):
        return hash(self.name)


# end of class Symbol



def boolean(value):
    """ The textual form of a boolean understood by SAOImage/DS9.
    """

    if value:
        return 'yes'
    else:
        return 'no'



def token(argument):
    """ Return the canonical textual form of a single command *argument*.
        The accepted arguments are a closed set: text, which is passed
        through unchanged; a :class:`Symbol`, which is emitted as its bare
        name; a boolean, emitted as yes or no; an integer; or a real
        number, which is formatted in a locale-independent decimal form.
    """

    if isinstance(argument, str):
        return argument

    if isinstance(argument, Symbol):
        return argument.name

    if isinstance(argument, numpy.ndarray):
        raise errors.UnsupportedType('arrays cannot be part of a command, send them as data')

    if isinstance(argument, bool):
        return boolean(argument)

    if isinstance(argument, numpy.bool_):
        return boolean(argument)

    if isinstance(argument, numbers.Integral):
        return str(int(argument))

    if isinstance(argument, (float, numpy.floating)):
        # str() of a Python float, or of a numpy floating point scalar,
        # is the shortest representation that round-trips, and always
        # uses a dot as the decimal separator.
        return str(argument)

    if isinstance(argument, numbers.Real):
        # Fractions and other rationals.
        return repr(float(argument))

    raise errors.UnsupportedType("cannot convert %s to a command token" % (type(argument).__name__))



def join_arguments(arguments):
    """ Convert each element of *arguments* with :func:`token`, and join
        the results with a single space. Empty tokens are dropped so that
        the command never has leading, trailing, or doubled separators.
    """

    tokens = list()

    for argument in arguments:
        converted = token(argument)
        if converted == '':
            continue
        tokens.append(converted)

    return ' '.join(tokens)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
