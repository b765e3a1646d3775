import pytest
import saods9


class FakeTransport(saods9.xpa.Transport):
    """ A scripted transport: replies are queued ahead of time per command,
        and every request is recorded in the *sent* list as a tuple of
        (kind, address, command, payload).
    """

    def __init__(self):
        self.replies = dict()
        self.sent = list()
        self.opened = False
        self.alive = True


    def open(self):
        self.opened = True


    def close(self):
        self.opened = False


    @property
    def is_open(self):
        return self.opened


    def is_alive(self, apt):
        return self.alive


    def script(self, command, *replies):
        """ Queue *replies* for the next request with the given *command*.
            Each reply is a :class:`saods9.xpa.Reply`, bytes, or text.
        """

        converted = list()
        for reply in replies:
            if isinstance(reply, str):
                reply = reply.encode()
            if isinstance(reply, bytes):
                reply = saods9.xpa.Reply(reply, 'DS9:ds9 127.0.0.1:12345')
            converted.append(reply)

        self.replies.setdefault(command, list()).append(converted)


    def _answer(self, command, default):

        try:
            queue = self.replies[command]
        except KeyError:
            return default

        if queue:
            return queue.pop(0)

        return default


    def request(self, address, command, nmax=1, mode=''):
        self.sent.append(('get', address, command, None))
        return self._answer(command, list())


    def send(self, address, command, payload=None, nmax=1, mode=''):
        self.sent.append(('set', address, command, payload))
        default = [saods9.xpa.Reply(b'', 'DS9:ds9 127.0.0.1:12345')]
        return self._answer(command, default)


    def commands(self, kind=None):
        """ Return the commands sent so far, optionally restricted to get
            or set requests.
        """

        return [sent[2] for sent in self.sent if kind is None or sent[0] == kind]


# end of class FakeTransport


@pytest.fixture
def transport():

    return FakeTransport()


@pytest.fixture
def apt():

    return saods9.xpa.AccessPoint('DS9', 'ds9', '127.0.0.1:12345', 'someone', saods9.xpa.Access.GET | saods9.xpa.Access.SET)


@pytest.fixture
def session(transport, apt):

    return saods9.Session(transport, apt)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
