""" The XPA layer: access points, replies, and the transports that move
    requests to and from XPA servers. Nothing above this layer knows how
    the bytes are actually exchanged.
"""

from . import access
from . import reply
from . import base

from .access import Access, AccessPoint
from .reply import Reply
from .base import Transport
from .library import LibraryTransport


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
