""" Description of XPA access points: the addressable endpoints of a
    running server, as registered with the XPA name server.
"""

import enum
import logging
import os
import re
import socket

from .. import config


logger = logging.getLogger(__name__)


class Access(enum.IntFlag):
    """ Operations permitted on an access point.
    """

    NONE = 0
    GET = 1
    SET = 2
    INFO = 4


_letters = dict(g=Access.GET, s=Access.SET, i=Access.INFO)

_port = re.compile(r'^[^:/\s]*:\d+$')
_hex = re.compile(r'^[0-9A-Fa-f]{8}$')


def is_template(identifier):
    """ Return True if *identifier* is a ``class:name`` template, which may
        contain wildcards, rather than a ``host:port`` address or the path
        to a local socket file.
    """

    identifier = str(identifier)

    if identifier == '':
        return False
    if '/' in identifier:
        return False
    if _port.match(identifier):
        return False

    return True



def inet_host(host):
    """ The XPA name server lists inet hosts as eight hexadecimal digits,
        for example '7f000001'; return those in dotted-quad form, and any
        other *host* unchanged.
    """

    if _hex.match(host):
        return socket.inet_ntoa(int(host, 16).to_bytes(4, 'big'))

    return host



def is_address(identifier):
    """ Return True if *identifier* designates a single access point
        directly, as opposed to a template.
    """

    identifier = str(identifier)

    if identifier == '':
        return False

    return not is_template(identifier)



def parse_access(letters):
    """ Convert the access letters of a name server listing, for example
        'gs', into an :class:`Access` flag set.
    """

    access = Access.NONE

    for letter in letters:
        try:
            access |= _letters[letter]
        except KeyError:
            raise ValueError('unexpected access string: ' + repr(letters))

    return access



class AccessPoint:
    """ An immutable description of one XPA access point. The *klass* and
        *name* are the two halves of the ``class:name`` identifier, the
        *address* is either ``host:port`` for the inet method or the path
        to a socket file for the local method, the *user* is the owner of
        the server, and *access* is an :class:`Access` flag set.

        The liveness of an access point is not stored; :func:`is_open`
        checks it again every time it is called.
    """

    __slots__ = ('klass', 'name', 'address', 'user', 'access')

    def __init__(self, klass='', name='', address='', user='', access=Access.NONE):

        object.__setattr__(self, 'klass', str(klass))
        object.__setattr__(self, 'name', str(name))
        object.__setattr__(self, 'address', str(address))
        object.__setattr__(self, 'user', str(user))
        object.__setattr__(self, 'access', Access(access))


    def __setattr__(self, name, value):
        raise AttributeError('AccessPoint instances are immutable')


    def __delattr__(self, name):
        raise AttributeError('AccessPoint instances are immutable')


    def __eq__(self, other):
        if not isinstance(other, AccessPoint):
            return NotImplemented

        return self._fields() == other._fields()


    def __hash__(self):
        return hash(self._fields())


    def __repr__(self):
        return "AccessPoint(klass=%r, name=%r, address=%r, user=%r, access=%r)" % self._fields()


    def __str__(self):
        if self.klass or self.name:
            return "%s:%s (%s)" % (self.klass, self.name, self.address)
        return self.address


    def _fields(self):
        return (self.klass, self.name, self.address, self.user, self.access)


    @classmethod
    def from_address(cls, address):
        """ Build an :class:`AccessPoint` knowing only its *address*. Nothing
            else is known about the server, so all operations are assumed
            to be permitted.
        """

        address = str(address)
        access = Access.GET | Access.SET | Access.INFO
        return cls(address=address, access=access)


    @classmethod
    def from_listing(cls, line):
        """ Parse one line of the XPA name server listing, which has five
            whitespace-separated fields: class, name, access, address, user.
        """

        fields = line.split()

        if len(fields) != 5:
            raise ValueError("expecting 5 fields per access point: %s" % (repr(line)))

        klass, name, letters, address, user = fields
        access = parse_access(letters)

        return cls(klass, name, address, user, access)


    @property
    def identifier(self):
        """ The ``class:name`` identifier of this access point.
        """

        return self.klass + ':' + self.name


    def permits(self, access):
        """ Return True if every operation in *access* is permitted.
        """

        access = Access(access)
        return self.access & access == access


    def is_open(self, timeout=None):
        """ Check whether the server behind this access point can still be
            reached. An inet address must accept a TCP connection; a local
            socket file must exist.
        """

        address = self.address

        if address == '':
            return False

        if '/' in address:
            return os.path.exists(address)

        if ':' not in address:
            return False

        host, port = address.rsplit(':', 1)
        host = inet_host(host)

        if timeout is None:
            timeout = config.get('XPA_CONNECT_TIMEOUT')

        try:
            port = int(port)
        except ValueError:
            return False

        try:
            connection = socket.create_connection((host, port), timeout)
        except OSError:
            return False

        connection.close()
        return True


# end of class AccessPoint



def parse_listing(text):
    """ Parse the complete listing returned by the XPA name server, one
        access point per line. Malformed lines are skipped.
    """

    found = list()

    for line in text.splitlines():
        if line.strip() == '':
            continue

        try:
            access_point = AccessPoint.from_listing(line)
        except ValueError as e:
            logger.warning('ignoring name server entry: %s', e)
            continue

        found.append(access_point)

    return found


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
