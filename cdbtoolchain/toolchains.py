# import list of toolchain
from .itoolchain import *
from ._generic_toolchain import _GenericToolchain
from ._xcode_toolchain import _XcodeToolchain


def create(platform, execution_root) -> IToolchain:
    if platform == 'darwin':
        return _XcodeToolchain(execution_root)
    return _GenericToolchain()
