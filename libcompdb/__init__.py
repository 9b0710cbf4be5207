from .console import *
from .variable import *
from .errors import *
from .options import Options
