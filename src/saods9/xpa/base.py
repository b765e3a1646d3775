"""Transport interface.

This is the (small) contract that transport implementations should follow.
The rest of :mod:`saods9` only ever talks to a :class:`Transport`, so that
the XPA library binding can be replaced, for example by a scripted
transport in the unit tests.
"""

from __future__ import annotations

import fnmatch
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from .access import AccessPoint, parse_listing
from .reply import Reply


logger = logging.getLogger(__name__)


# The XPA name server answers get requests on this access point with the
# list of every registered access point.

name_server = 'xpans'


class Transport(ABC):
    """Minimal contract for an XPA transport."""

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection."""

    @abstractmethod
    def request(self, address: str, command: str, nmax: int = 1, mode: str = '') -> List[Reply]:
        """Send a get request; return one :class:`Reply` per answering server."""

    @abstractmethod
    def send(self, address: str, command: str, payload: Optional[bytes] = None,
             nmax: int = 1, mode: str = '') -> List[Reply]:
        """Send a set request with optional binary payload."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False

    def is_alive(self, apt: AccessPoint) -> bool:
        """Whether the server behind *apt* can still be reached."""
        return apt.is_open()

    def lookup(self, template: str = '*:*') -> List[AccessPoint]:
        """List the access points known to the XPA name server, optionally
        restricted to those matching *template*.
        """

        replies = self.request(name_server, '', nmax=1)

        found = list()
        for reply in replies:
            if reply.error:
                logger.warning('name server error: %s', reply.message)
                continue
            found.extend(parse_listing(reply.text))

        if template in ('', '*:*', '*'):
            return found

        return [apt for apt in found if matches(template, apt)]

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def matches(template: str, apt: AccessPoint) -> bool:
    """Return True if *apt* matches the ``class:name`` *template*. Matching
    is case-insensitive and accepts shell-style wildcards, the way the XPA
    name server matches templates.
    """

    if ':' in template:
        klass, name = template.split(':', 1)
    else:
        klass, name = '*', template

    klass_ok = fnmatch.fnmatchcase(apt.klass.lower(), klass.lower())
    name_ok = fnmatch.fnmatchcase(apt.name.lower(), name.lower())

    return klass_ok and name_ok
