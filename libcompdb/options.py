#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys

import libcompdb.variable as variable

DEFAULT_MNEMONICS = ('CppCompile', 'ObjcCompile')
DEFAULT_SCOPE = '//...'
COMPILE_COMMANDS_NAME = 'compile_commands.json'


class Options(object):
    """
    Settings of one generation run.
    Built once from the command line and the environment, then handed to every runner.
    """
    def __init__(self,
                 workspace=None,
                 bazel=None,
                 output_format=None,
                 mnemonics=DEFAULT_MNEMONICS,
                 scope=DEFAULT_SCOPE,
                 query_file=None,
                 exclude_patterns=(),
                 platform=None):
        self.workspace = workspace if workspace is not None else variable.workspace_directory_override()
        self.bazel = bazel or variable.bazel_executable()
        self.output_format = output_format or variable.default_output_format()
        if self.output_format not in variable.OUTPUT_FORMATS:
            raise ValueError("unknown output format '%s'" % self.output_format)
        self.mnemonics = list(mnemonics)
        self.scope = scope
        self.query_file = query_file
        self.exclude_patterns = list(exclude_patterns)
        self.platform = platform or sys.platform

    def __repr__(self):
        return 'Options(%s)' % ', '.join('%s=%r' % (k, v) for k, v in sorted(vars(self).items()))
