from .geometry import *
from .misc import *

# pylama:ignore=W0611
