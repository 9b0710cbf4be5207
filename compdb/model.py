# -*- coding: utf-8 -*-
import shlex
from collections import OrderedDict


class BuildInfo(object):
    def __init__(self, workspace, execution_root, output_base, bin_dir):
        self.workspace = workspace
        self.execution_root = execution_root
        self.output_base = output_base
        self.bin_dir = bin_dir

    def items(self):
        return [('workspace', self.workspace),
                ('execution_root', self.execution_root),
                ('output_base', self.output_base),
                ('bazel-bin', self.bin_dir)]

    def quote_include_arguments(self):
        return ['-iquote', self.bin_dir,
                '-iquote', self.execution_root,
                '-iquote', self.output_base]


class Target(object):
    def __init__(self, target_id, label):
        self.id = target_id
        self.label = label


class Action(object):
    def __init__(self, target_id, mnemonic, arguments):
        self.target_id = target_id
        self.mnemonic = mnemonic
        self.arguments = arguments


class CcTarget(object):
    def __init__(self, label, args):
        self.label = label
        self.args = args
        self.srcs = []


class CompileCommand(object):
    def __init__(self, directory, file, arguments):
        self.directory = directory
        self.file = file
        self.arguments = arguments

    def to_json(self, output_format='arguments'):
        entry = OrderedDict()
        entry['directory'] = self.directory
        entry['file'] = self.file
        if output_format == 'command':
            entry['command'] = shlex.join(self.arguments)
        else:
            entry['arguments'] = list(self.arguments)
        return entry


class CompilationContext(object):
    """State of one run, handed from runner to runner"""
    def __init__(self, build_info, toolchain):
        self.build_info = build_info
        self.toolchain = toolchain
        self.target_labels = {}
        self.cc_targets = {}
        self.scanned_sources = set()
        self.compile_commands = []
        self.output_path = None

    def sorted_labels(self):
        return sorted(self.cc_targets)
