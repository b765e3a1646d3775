""" Python client for SAOImage/DS9. Commands are sent to a running DS9
    through the XPA messaging system, and the replies are decoded into
    text, numbers, or numpy arrays; images can be sent the other way.
"""

# Utility components.

from . import errors
from . import config
from . import xpa

# Submodules used by multiple other components.

from . import command
from . import version
from . import pixels
from . import decode
from . import request
from . import session

# Primary public-facing interfaces.

from . import begin
connect = begin.connect
disconnect = begin.disconnect
accesspoint = begin.accesspoint
get = begin.get
set = begin.set
get_array = begin.get_array
set_array = begin.set_array
quit = begin.quit

from .command import Symbol
from .session import Session
from .decode import RAW, TEXT, CHOMPED, VERSION, Words, Scalar, TupleOf, VectorOf, ArrayOf

# Domain helpers.

from . import draw
from . import regions
from . import interact
from . import wcs
from . import launch
from . import cube

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
