import pytest
import saods9

from saods9 import launch


class FakePopen:

    started = list()

    def __init__(self, command, env=None, **kwargs):
        FakePopen.started.append((tuple(command), env))
        self.pid = 4242
        self.returncode = None

    def poll(self):
        return self.returncode


@pytest.fixture
def popen(monkeypatch):

    FakePopen.started = list()
    monkeypatch.setattr(launch.subprocess, 'Popen', FakePopen)
    monkeypatch.setattr(launch.time, 'sleep', lambda seconds: None)
    monkeypatch.setattr(launch, 'children', list())
    return FakePopen


def test_start(session, transport, popen, monkeypatch):

    monkeypatch.setenv('XPA_METHOD', 'inet')

    transport.script('', 'DS9 other gs 127.0.0.1:40001 someone\nDS9 unittest gs 127.0.0.1:40002 someone\n')
    apt = launch.start('unittest', method='local', exe='ds9', timeout=5, session=session)

    assert apt.address == '127.0.0.1:40002'
    assert session.accesspoint is apt

    command, environment = popen.started[0]
    assert command == ('ds9', '-xpa', 'local', '-title', 'unittest')
    assert 'XPA_METHOD' not in environment


def test_timeout(session, transport, popen):

    assert launch.start('unittest', exe='ds9', timeout=0, session=session) is None
    assert len(popen.started) == 1


def test_children(session, transport, popen):

    launch.start('first', exe='ds9', timeout=0, session=session)
    assert len(launch.children) == 1

    first = launch.children[0]
    assert first.pid == 4242

    # Exited processes are forgotten when the next one is started.

    first.returncode = 0
    launch.start('second', exe='ds9', timeout=0, session=session)

    assert len(launch.children) == 1
    assert launch.children[0] is not first

    launch.reap()
    assert len(launch.children) == 1


def test_quit(session, transport):

    launch.quit(session)

    assert transport.commands() == ['quit']
    assert session.accesspoint is None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
