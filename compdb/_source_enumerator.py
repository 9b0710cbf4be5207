#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import shutil
import tempfile

import cdblib
from compdb.runner import *

EMBEDDED_QUERY_FILE = os.path.join(os.path.dirname(os.path.realpath(__file__)), 'src_paths.cquery.bzl')
QUERY_FILE_NAME = 'src_cquery.bzl'


def source_query_command(options, label, query_file_path):
    return [options.bazel, 'cquery', 'kind("source file", deps(%s))' % label,
            '--output', 'starlark', '--starlark:file', query_file_path]


def collect_new_sources(output, scanned_sources, exclude_patterns=()):
    """
    Returns the source paths of one cquery output that no earlier target claimed,
    and records them in `scanned_sources`.
    """
    srcs = []
    for line in cdblib.non_empty_lines(output):
        src = line.strip()
        if src in scanned_sources:
            continue
        if exclude_patterns and cdblib.matches_any(src, exclude_patterns):
            libcompdb.debug_message("excluded %s" % src)
            continue
        scanned_sources.add(src)
        srcs.append(src)
    return srcs


class _SourceEnumerator(Runner):
    def start(self, options, context=None):
        libcompdb.step_message("Enumerating source files")
        query_source = options.query_file or EMBEDDED_QUERY_FILE
        if not os.path.isfile(query_source):
            raise libcompdb.CompdbError("cquery format file not found: %s" % query_source)

        # the copy lives only as long as the queries
        with tempfile.TemporaryDirectory(prefix='cquery') as tmp_dir:
            query_file_path = os.path.join(tmp_dir, QUERY_FILE_NAME)
            shutil.copyfile(query_source, query_file_path)

            for label in context.sorted_labels():
                output = cdblib.run_command(source_query_command(options, label, query_file_path),
                                            cwd=context.build_info.workspace)
                libcompdb.info_message(label)
                context.cc_targets[label].srcs = collect_new_sources(output, context.scanned_sources,
                                                                     options.exclude_patterns)

        return True, context
