import cdblib

from .itoolchain import *

SDKROOT_PLACEHOLDER = '__BAZEL_XCODE_SDKROOT__'
DEVELOPER_DIR_PLACEHOLDER = '__BAZEL_XCODE_DEVELOPER_DIR__'


class _XcodeToolchain(IToolchain):
    def __init__(self, execution_root: str, sdk: str = 'macosx'):
        self.toolchain_name = "XcodeToolchain"
        self.execution_root = execution_root
        self.sdk = sdk
        self._sdk_path = None
        self._developer_dir = None

    def get_sdk_path(self):
        if self._sdk_path is None:
            self._sdk_path = cdblib.run_command(
                ['xcrun', '--sdk', self.sdk, '--show-sdk-path'], cwd=self.execution_root).strip()
        return self._sdk_path

    def get_developer_dir(self):
        if self._developer_dir is None:
            self._developer_dir = cdblib.run_command(['xcode-select', '-p'], cwd=self.execution_root).strip()
        return self._developer_dir

    def substitute(self, argument):
        if SDKROOT_PLACEHOLDER in argument:
            argument = argument.replace(SDKROOT_PLACEHOLDER, self.get_sdk_path())
        if DEVELOPER_DIR_PLACEHOLDER in argument:
            argument = argument.replace(DEVELOPER_DIR_PLACEHOLDER, self.get_developer_dir())
        return argument

    def describe(self):
        return [('sdk_path', self.get_sdk_path()), ('developer_dir', self.get_developer_dir())]
