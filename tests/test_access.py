import pytest
import socket
import saods9

from saods9.xpa import Access, AccessPoint
from saods9.xpa.access import inet_host, is_address, is_template, parse_access, parse_listing
from saods9.xpa.base import matches


def test_classification():

    assert is_template('DS9:*')
    assert is_template('ds9')
    assert is_template('*:*')

    assert is_template('localhost:12345') == False
    assert is_template('/tmp/.xpa/DS9_ds9.1234') == False
    assert is_template('') == False

    assert is_address('127.0.0.1:12345')
    assert is_address('DS9:ds9') == False


def test_access():

    assert parse_access('gs') == Access.GET | Access.SET
    assert parse_access('gsi') == Access.GET | Access.SET | Access.INFO
    assert parse_access('') == Access.NONE

    with pytest.raises(ValueError):
        parse_access('gx')


def test_listing():

    apt = AccessPoint.from_listing('DS9 ds9 gs 127.0.0.1:40001 someone')

    assert apt.klass == 'DS9'
    assert apt.name == 'ds9'
    assert apt.address == '127.0.0.1:40001'
    assert apt.user == 'someone'
    assert apt.identifier == 'DS9:ds9'
    assert apt.permits(Access.GET)
    assert apt.permits(Access.GET | Access.SET)
    assert apt.permits(Access.INFO) == False

    with pytest.raises(ValueError):
        AccessPoint.from_listing('DS9 ds9 gs 127.0.0.1:40001')

    text = 'DS9 ds9 gs 127.0.0.1:40001 someone\nbroken line\n\nDS9 two s 127.0.0.1:40002 someone\n'
    found = parse_listing(text)

    assert [apt.name for apt in found] == ['ds9', 'two']


def test_immutable():

    apt = AccessPoint.from_address('127.0.0.1:40001')

    with pytest.raises(AttributeError):
        apt.address = 'elsewhere:1'

    assert apt == AccessPoint.from_address('127.0.0.1:40001')
    assert hash(apt) == hash(AccessPoint.from_address('127.0.0.1:40001'))
    assert apt != AccessPoint.from_address('127.0.0.1:40002')
    assert apt.permits(Access.GET | Access.SET | Access.INFO)


def test_is_open(tmp_path):

    socket_file = tmp_path / 'DS9_ds9'
    apt = AccessPoint.from_address(str(socket_file))

    assert apt.is_open() == False

    socket_file.write_text('')
    assert apt.is_open()

    assert AccessPoint().is_open() == False


def test_is_open_inet():

    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(('127.0.0.1', 0))
    listener.listen(1)
    port = listener.getsockname()[1]

    try:
        apt = AccessPoint.from_listing('DS9 ds9 gs 7f000001:%d someone' % (port))
        assert apt.is_open(timeout=2)

        apt = AccessPoint.from_address('127.0.0.1:%d' % (port))
        assert apt.is_open(timeout=2)
    finally:
        listener.close()

    assert AccessPoint(address='ds9host').is_open() == False
    assert AccessPoint(address='ds9host:port').is_open() == False


def test_inet_host():

    assert inet_host('7f000001') == '127.0.0.1'
    assert inet_host('C0A80105') == '192.168.1.5'
    assert inet_host('localhost') == 'localhost'
    assert inet_host('10.0.0.1') == '10.0.0.1'


def test_matches():

    apt = AccessPoint('DS9', 'ds9', '127.0.0.1:40001', 'someone', Access.GET)

    assert matches('DS9:ds9', apt)
    assert matches('ds9:DS9', apt)
    assert matches('DS9:*', apt)
    assert matches('*:ds?', apt)
    assert matches('ds9', apt)
    assert matches('XPA:*', apt) == False


def test_lookup(transport):

    text = 'DS9 ds9 gs 127.0.0.1:40001 someone\nXPA xpans gs 127.0.0.1:14285 someone\n'

    transport.script('', text)
    assert len(transport.lookup()) == 2

    transport.script('', text)
    found = transport.lookup('DS9:*')
    assert [apt.name for apt in found] == ['ds9']

    error = saods9.xpa.Reply(b'', 'xpans', 'no access points', error=True)
    transport.script('', error)
    assert transport.lookup() == []


def test_reply():

    reply = saods9.xpa.Reply.from_xpa(b'data', 'DS9:ds9 127.0.0.1:40001', 'XPA$ERROR unknown command\n')
    assert reply.error
    assert reply.message == 'unknown command'
    assert reply.text == 'data'

    reply = saods9.xpa.Reply.from_xpa(b'', 'DS9:ds9 127.0.0.1:40001', 'XPA$MESSAGE done')
    assert reply.error == False
    assert reply.message == 'done'

    reply = saods9.xpa.Reply.from_xpa(None, None, None)
    assert reply.data == b''
    assert reply.server == ''
    assert reply.message == ''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
