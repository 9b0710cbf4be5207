class IToolchain(object):
    """Interfaces for host toolchain queries used while rewriting compile arguments"""

    def substitute(self, argument):
        """ replace toolchain placeholder tokens of one compiler argument """
        raise NotImplementedError()

    def describe(self):
        """ return (name, value) pairs of what this toolchain resolved """
        raise NotImplementedError()
