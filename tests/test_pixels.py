import numpy
import pytest
import sys

import saods9
from saods9 import pixels


def test_bitpix():

    assert pixels.bitpix_of(numpy.uint8) == 8
    assert pixels.bitpix_of(numpy.int16) == 16
    assert pixels.bitpix_of(numpy.int32) == 32
    assert pixels.bitpix_of(numpy.int64) == 64
    assert pixels.bitpix_of(numpy.float32) == -32
    assert pixels.bitpix_of(numpy.float64) == -64
    assert pixels.bitpix_of(numpy.zeros(3, dtype='>f4')) == -32

    assert pixels.bitpix_of(numpy.int8) == 0
    assert pixels.bitpix_of(numpy.uint16) == 0
    assert pixels.bitpix_of(numpy.complex64) == 0

    for code in (8, 16, 32, 64, -32, -64):
        assert pixels.bitpix_of(pixels.dtype_of(code)) == code

    for code in (0, 12, -16, 'sixteen'):
        with pytest.raises(saods9.errors.UnsupportedType):
            pixels.dtype_of(code)


def test_byte_order():

    assert pixels.byte_order('big') == 'big'
    assert pixels.byte_order('little') == 'little'
    assert pixels.byte_order('native') == sys.byteorder
    assert pixels.byte_order('native', native='big') == 'big'

    with pytest.raises(ValueError):
        pixels.byte_order('middle')


def test_describe():

    array = numpy.zeros((3, 4), dtype=numpy.uint8)
    expected = '[xdim=4,ydim=3,bitpix=8,endian=' + sys.byteorder + ']'
    assert pixels.describe(array) == expected

    array = numpy.zeros((2, 3, 4), dtype=numpy.float32)
    expected = '[xdim=4,ydim=3,zdim=2,bitpix=-32,endian=big]'
    assert pixels.describe(array, 'big') == expected

    expected = '[xdim=2,ydim=3,zdim=4,bitpix=-32,endian=little]'
    assert pixels.describe(array, 'little', 'F') == expected


def test_widening():

    assert pixels.to_pixels(numpy.zeros((2, 2), dtype=numpy.int8)).dtype == numpy.int16
    assert pixels.to_pixels(numpy.zeros((2, 2), dtype=numpy.uint16)).dtype == numpy.float32
    assert pixels.to_pixels(numpy.zeros((2, 2), dtype=numpy.uint32)).dtype == numpy.float64
    assert pixels.to_pixels(numpy.zeros((2, 2), dtype=numpy.float16)).dtype == numpy.float64
    assert pixels.to_pixels(numpy.zeros((2, 2), dtype=bool)).dtype == numpy.float64
    assert pixels.to_pixels(numpy.zeros((2, 2), dtype=numpy.int32)).dtype == numpy.int32

    with pytest.raises(saods9.errors.UnsupportedType):
        pixels.to_pixels(numpy.zeros((2, 2), dtype=numpy.complex128))

    with pytest.raises(saods9.errors.UnsupportedType):
        pixels.to_pixels(numpy.array([['a', 'b']]))


def test_rank():

    with pytest.raises(saods9.errors.UnsupportedType):
        pixels.encode(numpy.zeros(4))

    with pytest.raises(saods9.errors.UnsupportedType):
        pixels.encode(numpy.zeros((2, 2, 2, 2)))

    with pytest.raises(ValueError):
        pixels.encode(numpy.zeros((2, 2)), order='K')


def test_encode():

    array = numpy.array([[1, 2, 3], [4, 5, 6]], dtype=numpy.int16)

    descriptor, payload = pixels.encode(array, 'big')
    assert descriptor == '[xdim=3,ydim=2,bitpix=16,endian=big]'
    assert payload == numpy.array([1, 2, 3, 4, 5, 6], dtype='>i2').tobytes()

    # In 'F' order the first index is x, so the transpose yields the same
    # bytes on the wire.

    descriptor, payload = pixels.encode(array.T, 'big', 'F')
    assert descriptor == '[xdim=3,ydim=2,bitpix=16,endian=big]'
    assert payload == numpy.array([1, 2, 3, 4, 5, 6], dtype='>i2').tobytes()

    descriptor, payload = pixels.encode(array.astype(numpy.int8), 'little')
    assert descriptor == '[xdim=3,ydim=2,bitpix=16,endian=little]'
    assert len(payload) == 12


def test_decode():

    array = numpy.array([[1.5, 2.5], [3.5, 4.5], [5.5, 6.5]], dtype=numpy.float64)
    descriptor, payload = pixels.encode(array, 'big')

    decoded = pixels.decode(payload, numpy.float64, (2, 3), 'big')
    assert decoded.shape == (3, 2)
    assert numpy.array_equal(decoded, array)
    assert decoded.dtype.isnative

    with pytest.raises(saods9.errors.DimensionMismatch):
        pixels.decode(payload + b'\0', numpy.float64, (2, 3), 'big')

    with pytest.raises(saods9.errors.DimensionMismatch):
        pixels.decode(payload, numpy.float64, (2, 2), 'big')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
