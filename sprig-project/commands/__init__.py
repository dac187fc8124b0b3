# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import init
from . import add
from . import commit
from . import rm
from . import log
from . import find
from . import status
from . import config
from . import branch
from . import checkout
from . import reset
from . import merge
