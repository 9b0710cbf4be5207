from .toolchains import *
