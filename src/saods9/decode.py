""" Interpretation of replies. The caller describes the value it expects
    with a target descriptor; :func:`decode` selects the matching decoding
    algorithm and returns the typed value.

    The available descriptors are:

    ========================  ===============================================
    :data:`RAW`               the :class:`saods9.xpa.Reply` itself
    :data:`TEXT`              the textual payload, verbatim
    :data:`CHOMPED`           the textual payload without its trailing
                              newline; this is the default
    :class:`Words`            a list or tuple of strings split out of the
                              textual payload
    :class:`Scalar`           a single number or boolean parsed from text
    :class:`TupleOf`          a tuple of numbers, optionally of fixed arity
    :class:`VectorOf`         a list of numbers of any length
    :class:`ArrayOf`          a numpy array reinterpreted from binary data
    :data:`VERSION`           a :class:`saods9.version.Version`
    ========================  ===============================================
"""

import numbers

import numpy

from . import errors
from . import pixels
from . import version
from .xpa.reply import Reply


_booleans = dict()
_booleans['true'] = True
_booleans['yes'] = True
_booleans['false'] = False
_booleans['no'] = False


class Target:
    """ Base class for all target descriptors.
    """

    def __repr__(self):
        return self.__class__.__name__ + '()'


class Raw(Target):
    """ Return the unprocessed reply.
    """


class Text(Target):
    """ Return the textual payload. If *chomp* is True a single trailing
        newline character is removed; nothing else is ever stripped.
    """

    def __init__(self, chomp=False):
        self.chomp = bool(chomp)

    def __repr__(self):
        return 'Text(chomp=%r)' % (self.chomp)


class Words(Target):
    """ Split the textual payload into words, returned as a list, or as a
        tuple if *container* is :class:`tuple`. The *delim* is either None
        to split on runs of whitespace, a string to split on, or a callable
        predicate returning True for every separator character. Empty words
        are dropped unless *keepempty* is True.
    """

    def __init__(self, container=list, delim=None, keepempty=False):

        if container is not list and container is not tuple:
            raise ValueError('the container must be list or tuple')

        self.container = container
        self.delim = delim
        self.keepempty = bool(keepempty)

    def __repr__(self):
        return 'Words(%s, delim=%r, keepempty=%r)' % (self.container.__name__, self.delim, self.keepempty)


class Scalar(Target):
    """ Parse the textual payload as a single value of *type*, which is
        :class:`bool`, :class:`int`, :class:`float`, or a numpy integer or
        floating point scalar type.
    """

    def __init__(self, type):
        self.type = _check_type(type)

    def __repr__(self):
        return 'Scalar(%s)' % (self.type.__name__)


class TupleOf(Target):
    """ Parse the whitespace-separated tokens of the textual payload as a
        tuple of values of *type*. If *count* is not None exactly that many
        tokens are required.
    """

    def __init__(self, type, count=None):
        self.type = _check_type(type)

        if count is not None:
            count = int(count)
            if count < 0:
                raise ValueError('the tuple arity cannot be negative')

        self.count = count

    def __repr__(self):
        return 'TupleOf(%s, count=%r)' % (self.type.__name__, self.count)


class VectorOf(Target):
    """ Parse the whitespace-separated tokens of the textual payload as a
        list of values of *type*, of any length.
    """

    def __init__(self, type):
        self.type = _check_type(type)

    def __repr__(self):
        return 'VectorOf(%s)' % (self.type.__name__)


class ArrayOf(Target):
    """ Reinterpret the binary payload as a numpy array with elements of
        *dtype*, which must be a FITS pixel type. The *dims* are listed
        with the fastest varying axis first, as SAOImage/DS9 does; if *ndim*
        is given, it must agree with the number of *dims*. Without *dims*
        the result is a one-dimensional array of whatever length the
        payload holds. See :mod:`saods9.pixels` for the meaning of *endian*
        and *order*.
    """

    def __init__(self, dtype, dims=None, ndim=None, endian='native', order='C'):

        dtype = numpy.dtype(dtype)

        if not pixels.is_pixel_type(dtype):
            raise errors.UnsupportedType('unsupported array element type: ' + str(dtype))

        if dims is not None:
            if isinstance(dims, numbers.Integral):
                dims = (dims,)
            dims = tuple(int(dim) for dim in dims)

            if ndim is not None and len(dims) != ndim:
                raise errors.DimensionMismatch("expected %d dimensions, got %d" % (ndim, len(dims)))

        self.dtype = dtype
        self.dims = dims
        self.ndim = ndim
        self.endian = pixels.byte_order(endian)
        self.order = order

    def __repr__(self):
        return 'ArrayOf(%s, dims=%r, endian=%r, order=%r)' % (self.dtype, self.dims, self.endian, self.order)


class VersionTarget(Target):
    """ Parse the textual payload as a version string.
    """


RAW = Raw()
TEXT = Text()
CHOMPED = Text(chomp=True)
VERSION = VersionTarget()


def _check_type(element):

    if element is bool or element is int or element is float:
        return element

    if isinstance(element, type) and issubclass(element, (numpy.integer, numpy.floating)):
        return element

    raise errors.UnsupportedType('cannot parse values of type %r' % (element,))



def chomp(text):
    """ Remove a single trailing newline from *text*.
    """

    if text.endswith('\n'):
        return text[:-1]
    return text



def parse_boolean(token):
    """ Parse the boolean *token*: 'true' and 'yes' are True, 'false' and
        'no' are False. Matching is case-sensitive.
    """

    try:
        return _booleans[token.strip()]
    except KeyError:
        raise errors.DecodeError('invalid boolean textual value: ' + repr(token))



def parse_scalar(type, token):
    """ Parse the textual *token* as a value of *type*.
    """

    if type is bool:
        return parse_boolean(token)

    token = token.strip()

    try:
        if type is int:
            return int(token)
        if type is float:
            return float(token)

        if issubclass(type, numpy.integer):
            return type(int(token))
        else:
            return type(float(token))

    except (ValueError, OverflowError):
        raise errors.DecodeError("cannot parse %s as %s" % (repr(token), type.__name__))



def split(text, delim=None, keepempty=False):
    """ Split *text* into words; see :class:`Words`.
    """

    if delim is None and not keepempty:
        return text.split()

    if delim is None:
        delim = str.isspace

    if callable(delim):
        words = list()
        word = list()
        for character in text:
            if delim(character):
                words.append(''.join(word))
                word = list()
            else:
                word.append(character)
        words.append(''.join(word))

    else:
        words = text.split(delim)

    if keepempty:
        return words

    return [word for word in words if word != '']



def _payload(reply):
    """ Return the bytes held by *reply*, which can be a :class:`Reply`,
        bytes, or text.
    """

    if isinstance(reply, Reply):
        if reply.error:
            raise errors.ServerError(reply.message, reply.server)
        return reply.data

    if isinstance(reply, str):
        return reply.encode('utf-8')

    return bytes(reply)



def _text(reply):

    if isinstance(reply, str):
        return reply

    return _payload(reply).decode('utf-8', errors='replace')



def decode(reply, target=None):
    """ Decode *reply*, a :class:`saods9.xpa.Reply`, bytes, or text,
        according to the *target* descriptor. The default target is
        :data:`CHOMPED`.
    """

    if target is None:
        target = CHOMPED

    if isinstance(target, Raw):
        if isinstance(reply, Reply):
            return reply
        return Reply(_payload(reply))

    if isinstance(target, Text):
        text = _text(reply)
        if target.chomp:
            text = chomp(text)
        return text

    if isinstance(target, Words):
        text = chomp(_text(reply))
        words = split(text, target.delim, target.keepempty)
        return target.container(words)

    if isinstance(target, Scalar):
        text = chomp(_text(reply))
        return parse_scalar(target.type, text)

    if isinstance(target, TupleOf):
        tokens = _text(reply).split()
        if target.count is not None and len(tokens) != target.count:
            raise errors.DimensionMismatch("expected %d values, received %d: %s" % (target.count, len(tokens), repr(tokens)))

        return tuple(parse_scalar(target.type, token) for token in tokens)

    if isinstance(target, VectorOf):
        tokens = _text(reply).split()
        return [parse_scalar(target.type, token) for token in tokens]

    if isinstance(target, ArrayOf):
        payload = _payload(reply)
        dims = target.dims

        if dims is None:
            itemsize = target.dtype.itemsize
            if len(payload) % itemsize != 0:
                raise errors.DimensionMismatch("%d bytes is not a whole number of %s elements" % (len(payload), target.dtype))
            dims = (len(payload) // itemsize,)

        return pixels.decode(payload, target.dtype, dims, target.endian, target.order)

    if isinstance(target, VersionTarget):
        return version.parse(chomp(_text(reply)))

    raise TypeError('unknown decoding target: ' + repr(target))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
