from .itoolchain import *


class _GenericToolchain(IToolchain):
    def __init__(self):
        self.toolchain_name = "GenericToolchain"

    def substitute(self, argument):
        return argument

    def describe(self):
        return []
