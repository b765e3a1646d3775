""" The :class:`Session` ties together a transport, an access point, and
    the request/decoding machinery. Every operation goes through an explicit
    session; :mod:`saods9.begin` holds a default one for interactive use.
"""

import logging
import numbers

import numpy

from . import config
from . import decode
from . import pixels
from . import request
from .command import join_arguments
from .xpa.access import AccessPoint, is_template
from .xpa.library import LibraryTransport


logger = logging.getLogger(__name__)


def is_ds9(apt):
    """ The default filter for :func:`Session.find`: a DS9 access point
        owned by the current user.
    """

    return apt.klass == 'DS9' and apt.user == config.user()



class Session:
    """ A :class:`Session` talks to one SAOImage/DS9 server at a time. The
        *transport* defaults to a :class:`saods9.xpa.LibraryTransport`; the
        *accesspoint*, if provided, is handed to :func:`connect`. The
        *policy* determines what happens when several servers answer a
        get request, and *select* when several servers match while
        connecting; see :mod:`saods9.request` for the available policies.

        A session performs no request pipelining: concurrent calls on the
        same session must be serialized by the caller.
    """

    def __init__(self, transport=None, accesspoint=None, policy=request.ERROR, select=request.WARN):

        if transport is None:
            transport = LibraryTransport()

        self.transport = transport
        self.policy = request.check_policy(policy)
        self.select = request.check_policy(select)
        self._accesspoint = None

        if accesspoint is not None:
            self.connect(accesspoint)


    def __enter__(self):
        return self


    def __exit__(self, *exc):
        self.close()


    def __repr__(self):
        return "Session(%r)" % (self._accesspoint)


    def close(self):
        """ Forget the access point and close the transport.
        """

        self._accesspoint = None
        self.transport.close()


    @property
    def accesspoint(self):
        """ The access point currently in use, or None. No liveness check
            is performed; see :func:`current`.
        """

        return self._accesspoint


    def current(self):
        """ Return the access point currently in use, after checking that its
            server can still be reached. If it cannot, a new connection is
            established with :func:`connect`.
        """

        apt = self._accesspoint

        if apt is not None and self.transport.is_alive(apt):
            return apt

        if apt is not None:
            logger.info('access point %s is closed, reconnecting', apt)

        return self.connect()


    def find(self, predicate=None, template='*:*', select=None):
        """ Return the access point, among those known to the XPA name
            server and matching *template*, for which *predicate* returns
            True. The default *predicate* selects DS9 servers owned by the
            current user. If more than one access point matches, *select*
            is the policy that applies; it defaults to the *select* policy
            of this session.
        """

        if predicate is None:
            predicate = is_ds9

        if select is None:
            select = self.select

        candidates = list()
        for apt in self.transport.lookup(template):
            if predicate(apt):
                candidates.append(apt)

        return request.select(candidates, select, 'access point')


    def connect(self, target=None):
        """ Set the access point used by this session, and return it. The
            *target* can be a :class:`saods9.xpa.AccessPoint`, the address of
            an access point (``host:port`` or a socket file), a ``class:name``
            template, or None to use :func:`find` with its defaults.
        """

        if target is None:
            apt = self.find()
        elif isinstance(target, AccessPoint):
            apt = target
        elif is_template(target):
            apt = self.find(lambda apt: True, template=str(target))
        else:
            apt = AccessPoint.from_address(target)

        self._accesspoint = apt
        return apt


    def disconnect(self):
        """ Forget the access point used by this session.
        """

        self._accesspoint = None


    def get(self, *args, target=None, nmax=1, mode='', policy=None):
        """ Send a get request made of *args*, converted by
            :func:`saods9.command.join_arguments`, and return the reply
            decoded according to the *target* descriptor (see
            :mod:`saods9.decode`). As a shortcut, the target can also be
            passed as the first positional argument. Without a target the
            reply is returned as text with its trailing newline removed.
        """

        if args and isinstance(args[0], decode.Target):
            if target is not None:
                raise ValueError('the decoding target is specified twice')
            target = args[0]
            args = args[1:]

        if policy is None:
            policy = self.policy

        command = join_arguments(args)
        if command == '':
            return None

        apt = self.current()
        reply = request.get(self.transport, apt, command, nmax, mode, policy)

        return decode.decode(reply, target)


    def set(self, *args, data=None, throw=True, quiet=False, require=False, nmax=1, mode='', **options):
        """ Send a set request made of *args*, with optional binary *data*.
            See :func:`saods9.request.set` for the meaning of the keyword
            arguments and the return value.

            If the sole argument is a numpy array, it is sent as the contents
            of a frame with :func:`set_array`, which accepts additional
            keyword *options*.
        """

        if len(args) == 1 and isinstance(args[0], numpy.ndarray):
            if data is not None:
                raise ValueError('cannot send an array with additional data')
            return self.set_array(args[0], throw=throw, quiet=quiet, require=require, nmax=nmax, mode=mode, **options)

        if options:
            raise TypeError('unexpected keyword arguments: ' + ', '.join(sorted(options)))

        command = join_arguments(args)
        if command == '' and data is None:
            return []

        apt = self.current()
        return request.set(self.transport, apt, command, data, nmax, mode, throw, quiet, require)


    def get_array(self, endian='native', order='C'):
        """ Return the contents of the current frame as a numpy array, or
            None if the frame is empty. This takes three requests: the
            BITPIX value, the dimensions, and finally the pixels in the
            requested byte order. See :mod:`saods9.pixels` for the meaning
            of *order*.
        """

        bitpix = self.get('fits', 'bitpix')

        if bitpix.strip() == '':
            return None

        # An empty frame reports no BITPIX, or zero.

        bitpix = decode.parse_scalar(int, bitpix)
        if bitpix == 0:
            return None

        dtype = pixels.dtype_of(bitpix)
        dims = self.get('fits', 'size', target=decode.TupleOf(int))

        endian = pixels.byte_order(endian)
        target = decode.ArrayOf(dtype, dims, endian=endian, order=order)

        return self.get('array', endian, target=target)


    def set_array(self, array, endian='native', order='C', mask=False, frame=None, **options):
        """ Set the contents of a frame to *array*, a 2- or 3-dimensional
            numeric array, widened as necessary by
            :func:`saods9.pixels.to_pixels`. If *mask* is True the array is
            loaded as a mask. The *frame* is None for the current frame,
            'new' for a new frame, or a frame number. Remaining keyword
            *options* are handed to :func:`set`.
        """

        args = ['array']

        if frame is not None:
            if mask:
                raise ValueError("'mask' must be False if 'frame' is specified")

            if frame == 'new':
                args.append('new')
            elif isinstance(frame, numbers.Integral) and not isinstance(frame, bool):
                self.set('frame', frame)
            else:
                raise ValueError("'frame' must be None, 'new', or an integer")

        if mask:
            args.append('mask')

        descriptor, payload = pixels.encode(array, endian, order)
        args.append(descriptor)

        return self.set(*args, data=payload, **options)


    def version(self):
        """ Return the version of the SAOImage/DS9 server as a
            :class:`saods9.version.Version`.
        """

        return self.get('version', target=decode.VERSION)


    def quit(self):
        """ Ask the SAOImage/DS9 server to quit, and forget its access point.
        """

        apt = self._accesspoint

        if apt is not None and self.transport.is_alive(apt):
            self.set('quit')

        self._accesspoint = None


# end of class Session


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
