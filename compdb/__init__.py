from .run import *
