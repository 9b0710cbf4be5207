#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os

import cdblib
from libcompdb.options import COMPILE_COMMANDS_NAME
from compdb.model import CompileCommand
from compdb.runner import *


def assemble(context):
    build_info = context.build_info
    compile_commands = []
    for label in context.sorted_labels():
        target = context.cc_targets[label]
        for src in target.srcs:
            arguments = target.args + build_info.quote_include_arguments() + [src]
            compile_commands.append(CompileCommand(build_info.workspace, src, arguments))
    return compile_commands


class _ClangCompilationDatabaseExport(Runner):
    def start(self, options, context=None):
        libcompdb.step_message("Writing compilation database")
        context.compile_commands = assemble(context)
        compile_db = [command.to_json(options.output_format) for command in context.compile_commands]

        compile_commands_json_path = os.path.join(context.build_info.workspace, COMPILE_COMMANDS_NAME)
        cdblib.create_json_from_data(compile_db, compile_commands_json_path)
        context.output_path = compile_commands_json_path

        libcompdb.step_message("%s written [%d entries, %s]" % (
            COMPILE_COMMANDS_NAME, len(compile_db), compile_commands_json_path))
        return True, context
