#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse

import libcompdb
import compdb


def create_parser(prog, usage):
    parser = argparse.ArgumentParser(prog=prog, usage=usage)
    parser.add_argument('--format', dest='output_format', choices=libcompdb.OUTPUT_FORMATS, default=None,
                        help="schema of each entry: an 'arguments' list or a flattened 'command' string "
                             "(default: $BZCOMPDB_FORMAT or arguments)")
    parser.add_argument('--mnemonic', dest='mnemonics', action='append', default=None,
                        help="compile action mnemonic to query, repeatable (default: CppCompile, ObjcCompile)")
    parser.add_argument('--scope', default=libcompdb.options.DEFAULT_SCOPE,
                        help="target pattern the action graph is queried in (default: %(default)s)")
    parser.add_argument('--query-file', dest='query_file', default=None,
                        help="starlark cquery format file used instead of the bundled one")
    parser.add_argument('--exclude', dest='exclude_patterns', action='append', default=[],
                        help="glob of source paths to leave out, repeatable (e.g. 'external/**')")
    parser.add_argument('--bazel', default=None,
                        help="bazel executable (default: $BZCOMPDB_BAZEL or bazel)")
    return parser


def parse_options(argv, prog='bzcompdb generate'):
    parser = create_parser(prog, "%s [options]" % prog)
    args = parser.parse_args(argv)
    try:
        return libcompdb.Options(bazel=args.bazel,
                                 output_format=args.output_format,
                                 mnemonics=args.mnemonics or libcompdb.options.DEFAULT_MNEMONICS,
                                 scope=args.scope,
                                 query_file=args.query_file,
                                 exclude_patterns=args.exclude_patterns)
    except ValueError as e:
        parser.error(str(e))


def generate_processing(argv):
    options = parse_options(argv)
    libcompdb.debug_message(repr(options))
    succeed, _ = compdb.run(options)
    return succeed


def info_processing(argv):
    options = parse_options(argv, 'bzcompdb info')
    succeed, _ = compdb.run_info(options)
    return succeed
