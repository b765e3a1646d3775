""" Launching, and quitting, a SAOImage/DS9 process.
"""

import logging
import os
import subprocess
import time

from . import begin
from . import config
from . import errors
from . import request


logger = logging.getLogger(__name__)

# Handles of the SAOImage/DS9 processes started here. They are kept until
# the process exits, so that they are not collected while it still runs.

children = list()


def start(name=None, method=None, exe=None, timeout=30, quiet=False, session=None):
    """ Launch SAOImage/DS9 and connect *session*, which defaults to the
        default session of :mod:`saods9.begin`, to it. The *name* is the
        title, and XPA name, of the new server; it defaults to the process
        ID of the caller. The *method* is the XPA connection method, taken
        from the XPA_METHOD environment variable if not specified, or
        'local' if that is not set either. The *exe* defaults to
        :func:`saods9.config.executable`.

        The XPA name server is polled for up to *timeout* seconds until the
        new server appears. The new access point is returned, or None if
        the server did not appear in time.
    """

    if name is None:
        name = str(os.getpid())

    if method is None:
        method = os.environ.get('XPA_METHOD', 'local')

    if exe is None:
        exe = config.executable()

    if session is None:
        session = begin.session()

    # The child picks the XPA method from its command line, not from the
    # environment.

    environment = dict(os.environ)
    environment.pop('XPA_METHOD', None)

    reap()

    command = (exe, '-xpa', str(method), '-title', str(name))
    process = subprocess.Popen(command, env=environment, start_new_session=True,
                               stdin=subprocess.DEVNULL)
    children.append(process)

    logger.debug('started %s, process ID %d', exe, process.pid)

    if not quiet:
        logger.info('opening SAOImage/DS9 with name %s', repr(name))

    def predicate(apt):
        return apt.klass == 'DS9' and apt.name == name

    expiration = time.time() + timeout

    while time.time() <= expiration:
        time.sleep(0.4)

        try:
            apt = session.find(predicate, select=request.FIRST)
        except errors.NoReply:
            continue

        session.connect(apt)

        if not quiet:
            logger.info('connected to SAOImage/DS9 at %s', apt.address)

        return apt

    logger.warning('timeout establishing an XPA connection to %s', repr(name))
    return None



def reap():
    """ Forget the processes started by :func:`start` that have exited.
    """

    children[:] = [process for process in children if process.poll() is None]



def quit(session=None):
    """ Ask the SAOImage/DS9 server of *session*, which defaults to the
        default session of :mod:`saods9.begin`, to quit.
    """

    if session is None:
        session = begin.session()

    session.quit()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
