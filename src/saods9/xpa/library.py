""" Transport implementation binding the XPA C library (libxpa) with
    :mod:`ctypes`. Only four entry points are needed: XPAOpen, XPAClose,
    XPAGet and XPASet.
"""

import ctypes
import ctypes.util
import logging
import threading

from .. import config
from .. import errors
from .base import Transport
from .reply import Reply


logger = logging.getLogger(__name__)

c_void_p = ctypes.c_void_p
c_char_p = ctypes.c_char_p
c_size_t = ctypes.c_size_t
c_int = ctypes.c_int
POINTER = ctypes.POINTER


def _bind(path):
    """ Load the XPA library found at *path* and declare the signatures of
        the functions used here.
    """

    library = ctypes.CDLL(path)

    library.XPAOpen.restype = c_void_p
    library.XPAOpen.argtypes = (c_char_p,)

    library.XPAClose.restype = None
    library.XPAClose.argtypes = (c_void_p,)

    library.XPAGet.restype = c_int
    library.XPAGet.argtypes = (c_void_p, c_char_p, c_char_p, c_char_p,
                               POINTER(c_void_p), POINTER(c_size_t),
                               POINTER(c_void_p), POINTER(c_void_p), c_int)

    library.XPASet.restype = c_int
    library.XPASet.argtypes = (c_void_p, c_char_p, c_char_p, c_char_p,
                               c_char_p, c_size_t,
                               POINTER(c_void_p), POINTER(c_void_p), c_int)

    return library



def _libc():

    path = ctypes.util.find_library('c')
    libc = ctypes.CDLL(path)
    libc.free.restype = None
    libc.free.argtypes = (c_void_p,)
    return libc



class LibraryTransport(Transport):
    """ Issue XPA requests through the XPA C library. A persistent XPA
        handle is opened lazily before the first request, and re-opened
        after :func:`close`. The optional *path* locates the shared
        library; see :func:`saods9.config.library` for the default.

        The handle is not shared safely between threads: concurrent calls
        on the same :class:`LibraryTransport` are serialized by a lock.
    """

    def __init__(self, path=None):

        self.path = path
        self.library = None
        self.libc = None
        self.handle = None
        self.handle_lock = threading.Lock()


    @property
    def is_open(self):
        return self.handle is not None


    def _load(self):

        if self.library is not None:
            return self.library

        try:
            path = config.library(self.path)
        except (RuntimeError, ValueError) as e:
            raise errors.ConnectionError(str(e)) from e

        try:
            library = _bind(path)
        except (OSError, AttributeError) as e:
            raise errors.ConnectionError("cannot load the XPA library %s: %s" % (path, e)) from e

        self.libc = _libc()
        self.library = library
        return library


    def open(self):

        if self.handle is not None:
            return

        library = self._load()
        handle = library.XPAOpen(None)

        if not handle:
            raise errors.ConnectionError('failed to allocate a persistent XPA connection')

        logger.debug('opened persistent XPA connection')
        self.handle = handle


    def close(self):

        handle = self.handle
        self.handle = None

        if handle:
            self.library.XPAClose(handle)
            logger.debug('closed persistent XPA connection')


    def _fetch(self, pointer, length=None):
        """ Copy the contents of a buffer allocated by the XPA library, and
            release it.
        """

        if not pointer:
            if length is None:
                return ''
            return b''

        try:
            if length is None:
                fetched = ctypes.string_at(pointer).decode('utf-8', errors='replace')
            else:
                fetched = ctypes.string_at(pointer, length)
        finally:
            self.libc.free(pointer)

        return fetched


    def request(self, address, command, nmax=1, mode=''):

        nmax = config.maxhosts(nmax)

        bufs = (c_void_p * nmax)()
        lens = (c_size_t * nmax)()
        names = (c_void_p * nmax)()
        messages = (c_void_p * nmax)()

        address = address.encode()
        command = command.encode()
        mode = mode.encode()

        with self.handle_lock:
            self.open()
            count = self.library.XPAGet(self.handle, address, command, mode,
                                        bufs, lens, names, messages, nmax)

            if count < 0:
                raise errors.ConnectionError('unexpected result from XPAGet: ' + str(count))

            replies = list()
            for index in range(count):
                data = self._fetch(bufs[index], lens[index])
                name = self._fetch(names[index])
                message = self._fetch(messages[index])
                replies.append(Reply.from_xpa(data, name, message))

        return replies


    def send(self, address, command, payload=None, nmax=1, mode=''):

        nmax = config.maxhosts(nmax)

        names = (c_void_p * nmax)()
        messages = (c_void_p * nmax)()

        if payload is None:
            length = 0
        else:
            payload = bytes(payload)
            length = len(payload)

        address = address.encode()
        command = command.encode()
        mode = mode.encode()

        with self.handle_lock:
            self.open()
            count = self.library.XPASet(self.handle, address, command, mode,
                                        payload, length, names, messages, nmax)

            if count < 0:
                raise errors.ConnectionError('unexpected result from XPASet: ' + str(count))

            replies = list()
            for index in range(count):
                name = self._fetch(names[index])
                message = self._fetch(messages[index])
                replies.append(Reply.from_xpa(b'', name, message))

        return replies


# end of class LibraryTransport


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
