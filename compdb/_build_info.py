#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import cdblib
import cdbtoolchain
from compdb.model import BuildInfo, CompilationContext
from compdb.runner import *


def get_bazel_info(options, key, workspace):
    return cdblib.run_command([options.bazel, 'info', key], cwd=workspace).strip()


def resolve(options):
    """ workspace comes from the environment when bazel run exported it, everything else from bazel info """
    workspace = options.workspace
    if not workspace:
        workspace = get_bazel_info(options, 'workspace', None)
    return BuildInfo(workspace=workspace,
                     execution_root=get_bazel_info(options, 'execution_root', workspace),
                     output_base=get_bazel_info(options, 'output_base', workspace),
                     bin_dir=get_bazel_info(options, 'bazel-bin', workspace))


class _BuildInfoResolver(Runner):
    def start(self, options, previous_result=None):
        libcompdb.step_message("Resolving Bazel workspace")
        build_info = resolve(options)
        for key, value in build_info.items():
            libcompdb.info_message("%-15s %s" % (key, value))

        host_toolchain = cdbtoolchain.create(options.platform, build_info.execution_root)
        for key, value in host_toolchain.describe():
            libcompdb.info_message("%-15s %s" % (key, value))

        return True, CompilationContext(build_info, host_toolchain)
