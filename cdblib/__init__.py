from .cdbutil import *
from .process import *
from .filepattern import *
