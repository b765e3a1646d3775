""" A class representation of one answer to an XPA request.
"""

error_prefix = 'XPA$ERROR '
message_prefix = 'XPA$MESSAGE '


class Reply:
    """ The :class:`Reply` is the answer of one access point to one request.
        The fields are the raw *data* returned by the server (bytes, empty
        for a set request), the *server* that answered, and the textual
        *message*, if any, with the XPA prefix removed. The *error* flag is
        True if the server reported a failure.

        A :class:`Reply` is not retained beyond the call that produced it.
    """

    def __init__(self, data=b'', server='', message='', error=False):

        if data is None:
            data = b''

        self.data = bytes(data)
        self.server = server
        self.message = message
        self.error = bool(error)


    def __repr__(self):
        return "Reply(server=%r, error=%r, message=%r, %d bytes)" % (self.server, self.error, self.message, len(self.data))


    @classmethod
    def from_xpa(cls, data, server, message):
        """ Build a :class:`Reply` from the three strings returned by the XPA
            library for each answer. The *message* is classified according
            to its prefix: error messages start with ``XPA$ERROR``, while
            ``XPA$MESSAGE`` is informational.
        """

        error = False

        if message is None:
            message = ''

        if message.startswith(error_prefix):
            error = True
            message = message[len(error_prefix):]
        elif message.startswith(message_prefix):
            message = message[len(message_prefix):]

        if message.endswith('\n'):
            message = message[:-1]

        # The server name is preceded by the class, for example
        # 'DS9:ds9 7f000001:40583'; keep it as sent.

        if server is None:
            server = ''

        return cls(data, server, message, error)


    @property
    def text(self):
        """ The data of this reply interpreted as text.
        """

        return self.data.decode('utf-8', errors='replace')


# end of class Reply


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
