#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import cdblib
from compdb.model import CcTarget

LANGUAGE_PREFIXES = {
    'CppCompile': ['clang', '-xc++'],
    'ObjcCompile': ['clang', '-xobjective-c++'],
}

OUTPUT_RELATIVE_PREFIXES = ('external/', 'bazel-out')


def language_prefix(mnemonic, arguments):
    if mnemonic in LANGUAGE_PREFIXES:
        return list(LANGUAGE_PREFIXES[mnemonic])
    # unknown action kinds keep their own compiler
    return arguments[:1]


def rewrite_argument(argument, output_base):
    if argument.startswith('-Ibazel-out'):
        return '-I' + cdblib.join_under(output_base, argument[len('-I'):])
    if argument.startswith(OUTPUT_RELATIVE_PREFIXES):
        return cdblib.join_under(output_base, argument)
    return argument


def transform_argument_list(mnemonic, arguments, output_base, host_toolchain):
    """
    Rewrites the argument list of one compile action so it can be replayed from the workspace:
    the compiler is replaced by clang with an explicit language, every `-c <file>` pair is dropped,
    paths relative to the execution root are rooted at the output base,
    and toolchain placeholders are substituted.
    """
    args = [host_toolchain.substitute(rewrite_argument(argument, output_base))
            for argument in language_prefix(mnemonic, arguments)]
    skip_next = False
    for argument in arguments[1:]:
        if skip_next:
            skip_next = False
            continue
        if argument == '-c':
            skip_next = True
            continue
        argument = rewrite_argument(argument, output_base)
        args.append(host_toolchain.substitute(argument))
    return args


def transform_arguments(label, action, build_info, host_toolchain):
    return CcTarget(label, transform_argument_list(action.mnemonic, action.arguments,
                                                   build_info.output_base, host_toolchain))
