""" Interaction with the user of SAOImage/DS9: message dialogs, and the
    interactive selection of a position with the mouse or the keyboard.
"""

from . import decode
from . import errors


events = ('button', 'key', 'any')


def message(session, text, cancel=False):
    """ Display *text* in a dialog and wait for the user to dismiss it. If
        *cancel* is True the dialog also has a 'Cancel' button. Return True
        if the user pressed 'OK', False otherwise.
    """

    if cancel:
        buttons = 'okcancel'
    else:
        buttons = 'ok'

    reply = session.get('analysis message', buttons, '{' + text + '}')

    try:
        return int(reply) == 1
    except ValueError:
        return False



def cursor(session, text='', cancel=False, coords='image', event='button'):
    """ Wait for the user to select a position in the current frame, and
        return a tuple made of the key pressed followed by the coordinates.
        For a 'button' event the key is always '<1>'. If *coords* is 'data'
        the value of the selected pixel is returned instead of its
        coordinates.

        If *text* is not empty it is first displayed with :func:`message`;
        None is returned if the user cancels that dialog. Otherwise the
        SAOImage/DS9 window is raised.
    """

    if event not in events:
        raise ValueError("unknown event type %s, must be one of %s" % (repr(event), ', '.join(events)))

    if text == '':
        session.set('raise')
    elif not message(session, text, cancel):
        return None

    if coords == 'data':
        args = ('iexam', event, coords)
    else:
        args = ('iexam', event, 'coordinate', coords)

    words = session.get(*args, target=decode.Words())

    if event == 'button':
        key = '<1>'
    else:
        if len(words) == 0:
            raise errors.DecodeError('empty reply to ' + repr(' '.join(args)))
        key = words[0]
        words = words[1:]

    values = tuple(decode.parse_scalar(float, word) for word in words)
    return (key,) + values


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
