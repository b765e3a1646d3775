import pytest
import saods9

from saods9 import config


def test_defaults(monkeypatch):

    monkeypatch.delenv('XPA_MAXHOSTS', raising=False)
    monkeypatch.delenv('XPA_VERBOSITY', raising=False)
    monkeypatch.delenv('XPA_TMPDIR', raising=False)

    assert config.get('XPA_MAXHOSTS') == 100
    assert config.get('XPA_VERBOSITY') == True
    assert config.get('XPA_TMPDIR') == '/tmp/.xpa'

    with pytest.raises(KeyError):
        config.get('XPA_NONSENSE')


def test_environment(monkeypatch):

    monkeypatch.setenv('XPA_MAXHOSTS', '12')
    assert config.get('XPA_MAXHOSTS') == 12

    monkeypatch.setenv('XPA_MAXHOSTS', 'many')
    with pytest.raises(ValueError):
        config.get('XPA_MAXHOSTS')

    for value in ('', '0', 'false', 'No', 'off'):
        monkeypatch.setenv('XPA_VERBOSITY', value)
        assert config.get('XPA_VERBOSITY') == False

    monkeypatch.setenv('XPA_VERBOSITY', 'yes')
    assert config.get('XPA_VERBOSITY') == True


def test_set(monkeypatch):

    monkeypatch.setenv('XPA_LONG_TIMEOUT', '180')
    monkeypatch.setenv('XPA_IOCALLSXPA', '0')
    monkeypatch.setenv('XPA_METHOD', 'inet')

    assert config.set('XPA_LONG_TIMEOUT', 60) == 180
    assert config.get('XPA_LONG_TIMEOUT') == 60

    assert config.set('XPA_IOCALLSXPA', True) == False
    assert config.get('XPA_IOCALLSXPA') == True

    assert config.set('XPA_METHOD', 'local') == 'inet'
    assert config.get('XPA_METHOD') == 'local'

    with pytest.raises(TypeError):
        config.set('XPA_LONG_TIMEOUT', '60')

    with pytest.raises(TypeError):
        config.set('XPA_IOCALLSXPA', 1)

    with pytest.raises(TypeError):
        config.set('XPA_METHOD', 1)


def test_maxhosts(monkeypatch):

    monkeypatch.setenv('XPA_MAXHOSTS', '7')

    assert config.maxhosts(1) == 1
    assert config.maxhosts(3) == 3
    assert config.maxhosts(-1) == 7

    with pytest.raises(ValueError):
        config.maxhosts(0)


def test_library(monkeypatch, tmp_path):

    fake = tmp_path / 'libxpa.so'
    fake.write_bytes(b'')

    monkeypatch.setattr(config.library, 'found', None)
    monkeypatch.setenv('SAODS9_XPA_LIBRARY', str(fake))
    assert config.library() == str(fake)

    with pytest.raises(ValueError):
        config.library(str(tmp_path / 'missing.so'))


def test_user(monkeypatch):

    monkeypatch.setenv('USER', 'observer')
    assert config.user() == 'observer'

    monkeypatch.delenv('USER')
    monkeypatch.setenv('LOGNAME', 'astronomer')
    assert config.user() == 'astronomer'


def test_executable(monkeypatch):

    monkeypatch.delenv('SAODS9_EXECUTABLE', raising=False)
    assert config.executable() == 'ds9'

    monkeypatch.setenv('SAODS9_EXECUTABLE', '/opt/ds9/bin/ds9')
    assert config.executable() == '/opt/ds9/bin/ds9'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
