""" Classes and methods implemented here implement the get/set request
    aspects of the client API: a textual command is sent to an access
    point through a :class:`saods9.xpa.Transport`, and the replies are
    checked before being handed back to the caller.
"""

import logging

from . import errors
from .xpa.access import AccessPoint


logger = logging.getLogger(__name__)


# Policies for handling more than one answer when a single one is expected.
# ERROR raises MultipleMatches, WARN logs a warning and keeps the first
# answer, FIRST silently keeps the first answer.

ERROR = 'error'
WARN = 'warn'
FIRST = 'first'

policies = (ERROR, WARN, FIRST)


def check_policy(policy):
    """ Return *policy* if it is a valid multiple-match policy, otherwise
        raise :class:`ValueError`.
    """

    if policy in policies:
        return policy

    raise ValueError("invalid policy %s, must be one of %s" % (repr(policy), ', '.join(policies)))



def select(candidates, policy=ERROR, what='access point'):
    """ Return the single element of *candidates*. If there are none,
        :class:`saods9.errors.NoReply` is raised; if there are several, the
        *policy* decides whether to raise
        :class:`saods9.errors.MultipleMatches` or to return the first one.
    """

    policy = check_policy(policy)
    candidates = list(candidates)

    if len(candidates) == 0:
        raise errors.NoReply('no matching ' + what + ' found')

    if len(candidates) > 1:
        if policy == ERROR:
            raise errors.MultipleMatches("%d matching %ss found" % (len(candidates), what), candidates)

        if policy == WARN:
            logger.warning("more than one matching %s found, the first one (%s) was selected", what, candidates[0])

    return candidates[0]



def address(apt):
    """ Return the XPA address for *apt*, which can be an
        :class:`saods9.xpa.AccessPoint` or a string: a template, a
        ``host:port`` address or the path to a socket file.
    """

    if isinstance(apt, AccessPoint):
        found = apt.address
    else:
        found = str(apt)

    if found == '':
        raise errors.ConnectionError('no access point address, call connect() first')

    return found



def get(transport, apt, command, nmax=1, mode='', policy=ERROR):
    """ Send the textual *command* as a get request to *apt*, and return the
        :class:`saods9.xpa.Reply`. At most *nmax* answers are collected;
        zero answers raise :class:`saods9.errors.NoReply`, more than one
        is handled according to *policy*, and an error message from the
        server raises :class:`saods9.errors.ServerError`.

        An empty *command* is a no-op and returns None.
    """

    if command == '':
        return None

    policy = check_policy(policy)
    target = address(apt)

    logger.debug('get %s: %s', target, command)
    replies = transport.request(target, command, nmax=nmax, mode=mode)

    if len(replies) == 0:
        raise errors.NoReply("no reply from %s to 'get %s'" % (target, command))

    reply = select(replies, policy, 'server')

    if reply.error:
        raise errors.ServerError(reply.message, reply.server)

    return reply



def set(transport, apt, command, data=None, nmax=1, mode='', throw=True, quiet=False, require=False):
    """ Send the textual *command*, and the optional binary *data*, as a
        set request to *apt*. The return value is a list of (server, message)
        tuples, one per answering server; the message is empty if the
        server did not report an error.

        If *throw* is True the first error message, if any, is raised as
        a :class:`saods9.errors.ServerError`. Unless *quiet* is True every
        error message is logged as a warning, as is the absence of any
        answer; the absence of any answer only raises
        :class:`saods9.errors.NoReply` if *require* is True.

        An empty *command* with no *data* is a no-op.
    """

    if command == '' and data is None:
        return []

    target = address(apt)

    if data is None:
        logger.debug('set %s: %s', target, command)
    else:
        logger.debug('set %s: %s (%d bytes)', target, command, len(data))

    replies = transport.send(target, command, data, nmax=nmax, mode=mode)

    if len(replies) == 0:
        if require:
            raise errors.NoReply("no reply from %s to 'set %s'" % (target, command))
        if not quiet:
            logger.warning("no replies for command '%s'", command)
        return []

    results = list()
    first = None

    for reply in replies:
        if reply.error:
            if not quiet:
                logger.warning('%s: %s', reply.server, reply.message)
            if first is None:
                first = reply
            results.append((reply.server, reply.message))
        else:
            results.append((reply.server, ''))

    if throw and first is not None:
        raise errors.ServerError(first.message, first.server)

    return results


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
