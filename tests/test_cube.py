import pytest
import saods9

from saods9 import cube


def test_plane(session, transport):

    transport.script('cube', '3\n')
    assert cube.get(session) == 3

    cube.set(session, 5)
    assert transport.commands() == ['cube', 'cube 5']

    transport.script('cube', 'none\n')
    with pytest.raises(saods9.errors.DecodeError):
        cube.get(session)


def test_interval(session, transport):

    transport.script('cube interval', '0.5\n')
    assert cube.interval(session) == 0.5

    cube.interval(session, 2)
    assert transport.commands() == ['cube interval', 'cube interval 2.0']


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
