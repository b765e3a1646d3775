""" Marshaling of pixel arrays for the SAOImage/DS9 'array' command. An
    array travels as raw binary data, described by a descriptor string
    such as ``[xdim=512,ydim=256,bitpix=-32,endian=little]``; the element
    type is identified by its FITS bits-per-pixel (BITPIX) code.

    The first axis on the wire, x, varies fastest. With the default 'C'
    order a numpy array is indexed ``[y, x]`` (or ``[z, y, x]``); with
    'F' order it is indexed ``[x, y]`` (or ``[x, y, z]``).
"""

import sys

import numpy

from . import errors


# FITS pixel types, and the corresponding BITPIX codes.

PIXEL_TYPES = (numpy.uint8, numpy.int16, numpy.int32, numpy.int64, numpy.float32, numpy.float64)

_bitpix = dict()
_types = dict()

for _type in PIXEL_TYPES:
    _dtype = numpy.dtype(_type)
    if _dtype.kind == 'f':
        _code = -8 * _dtype.itemsize
    else:
        _code = 8 * _dtype.itemsize

    _bitpix[_dtype] = _code
    _types[_code] = _dtype

del _type, _dtype, _code


# Element types without a BITPIX code are widened before transmission.
# Anything numeric not listed here, and not already a pixel type, becomes
# a 64-bit float.

_widened = dict()
_widened[numpy.dtype(numpy.int8)] = numpy.dtype(numpy.int16)
_widened[numpy.dtype(numpy.uint16)] = numpy.dtype(numpy.float32)

_orders = ('C', 'F')


def _native(dtype):
    """ Return *dtype* with its byte order normalized to the native one,
        so that it can be used as a dictionary key.
    """

    dtype = numpy.dtype(dtype)
    return dtype.newbyteorder('=')



def bitpix_of(thing):
    """ Return the FITS BITPIX code for *thing*, which can be an array, a
        numpy dtype, or a scalar type. Zero is returned if the type is not
        a supported pixel type.
    """

    dtype = getattr(thing, 'dtype', None)
    if not isinstance(dtype, numpy.dtype):
        dtype = thing

    try:
        dtype = _native(dtype)
    except TypeError:
        return 0

    return _bitpix.get(dtype, 0)



def dtype_of(bitpix):
    """ Return the numpy dtype corresponding to the FITS BITPIX code
        *bitpix*. Any code other than 8, 16, 32, 64, -32 or -64 raises
        :class:`saods9.errors.UnsupportedType`.
    """

    try:
        code = int(bitpix)
    except (TypeError, ValueError):
        raise errors.UnsupportedType('invalid BITPIX value: ' + repr(bitpix))

    try:
        return _types[code]
    except KeyError:
        raise errors.UnsupportedType('unsupported BITPIX value: ' + str(code))



def is_pixel_type(dtype):
    """ Return True if *dtype* has a BITPIX code.
    """

    return bitpix_of(dtype) != 0



def byte_order(endian='native', native=None):
    """ Return the byte order, 'big' or 'little', to use for transmitting
        array elements. The *endian* argument is one of 'big', 'little',
        or 'native'; the latter resolves to the byte order of the host,
        which is detected at call time. The host byte order can be
        overridden with *native*, mostly for testing.
    """

    endian = str(endian)

    if endian == 'native':
        if native is None:
            native = sys.byteorder
        endian = native

    if endian == 'big' or endian == 'little':
        return endian

    raise ValueError('invalid byte order: ' + repr(endian))



def numpy_order(endian):
    """ Return the numpy byte order character for *endian*.
    """

    if byte_order(endian) == 'big':
        return '>'
    else:
        return '<'



def to_pixels(array):
    """ Return *array* as a numpy array of a supported pixel type. Types
        without a BITPIX code are widened: 8-bit signed integers become
        16-bit signed integers, 16-bit unsigned integers become 32-bit
        floats, and any other numeric type becomes a 64-bit float.
        Non-numeric arrays raise :class:`saods9.errors.UnsupportedType`.
    """

    array = numpy.asarray(array)
    dtype = array.dtype

    if dtype.kind not in 'biuf':
        raise errors.UnsupportedType('unsupported pixel type: ' + str(dtype))

    if is_pixel_type(dtype):
        pass
    else:
        try:
            target = _widened[_native(dtype)]
        except KeyError:
            target = numpy.dtype(numpy.float64)

        array = array.astype(target)

    return array



def _check_rank(array):

    if array.ndim < 2 or array.ndim > 3:
        raise errors.UnsupportedType('only 2- or 3-dimensional arrays are supported, not %d' % (array.ndim))



def _check_order(order):

    if order in _orders:
        return order

    raise ValueError('invalid array order: ' + repr(order))



def dimensions(array, order='C'):
    """ Return the (xdim, ydim[, zdim]) dimensions of *array* as seen by
        SAOImage/DS9.
    """

    order = _check_order(order)

    if order == 'C':
        return tuple(reversed(array.shape))
    else:
        return tuple(array.shape)



def shape(dims, order='C'):
    """ The inverse of :func:`dimensions`: return the numpy shape for an
        array with the (xdim, ydim[, zdim]) dimensions *dims*.
    """

    order = _check_order(order)
    dims = tuple(int(dim) for dim in dims)

    if order == 'C':
        return tuple(reversed(dims))
    else:
        return dims



def describe(array, endian='native', order='C'):
    """ Return the descriptor string for *array*, which must be a 2- or
        3-dimensional numpy array of a supported pixel type; see
        :func:`to_pixels` to convert arbitrary numeric arrays first.
    """

    array = numpy.asarray(array)

    _check_rank(array)

    bitpix = bitpix_of(array)
    if bitpix == 0:
        raise errors.UnsupportedType('unsupported pixel type: ' + str(array.dtype))

    endian = byte_order(endian)
    dims = dimensions(array, order)

    fields = list()
    fields.append('xdim=%d' % (dims[0]))
    fields.append('ydim=%d' % (dims[1]))

    if len(dims) == 3:
        fields.append('zdim=%d' % (dims[2]))

    fields.append('bitpix=%d' % (bitpix))
    fields.append('endian=' + endian)

    return '[' + ','.join(fields) + ']'



def encode(array, endian='native', order='C'):
    """ Prepare *array* for transmission. The return value is a tuple of
        the descriptor string and the raw bytes of the pixels, in the
        requested byte order, with x varying fastest.
    """

    array = to_pixels(array)
    _check_rank(array)

    endian = byte_order(endian)
    descriptor = describe(array, endian, order)

    dtype = array.dtype.newbyteorder(numpy_order(endian))
    array = array.astype(dtype, copy=False)
    payload = array.tobytes(order=order)

    return descriptor, payload



def decode(payload, dtype, dims, endian='native', order='C'):
    """ Rebuild a pixel array from the raw bytes *payload*, knowing the
        element *dtype* and the (xdim, ydim[, zdim]) dimensions *dims*. The
        returned array is writable and in native byte order.
    """

    dtype = numpy.dtype(dtype)

    if not is_pixel_type(dtype):
        raise errors.UnsupportedType('unsupported pixel type: ' + str(dtype))

    dims = tuple(int(dim) for dim in dims)
    count = 1
    for dim in dims:
        if dim < 0:
            raise errors.DimensionMismatch('invalid dimensions: ' + repr(dims))
        count *= dim

    expected = count * dtype.itemsize

    if len(payload) != expected:
        raise errors.DimensionMismatch("expected %d bytes for %s elements of %s, received %d" % (expected, 'x'.join(str(dim) for dim in dims), dtype, len(payload)))

    wire = dtype.newbyteorder(numpy_order(endian))
    flat = numpy.frombuffer(payload, dtype=wire)

    array = numpy.reshape(flat, shape(dims, order), order=order)
    return array.astype(_native(dtype))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
