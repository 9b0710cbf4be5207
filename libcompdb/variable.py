#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os

OUTPUT_FORMATS = ('arguments', 'command')


def workspace_directory_override():
    """ `bazel run` exports the workspace of the invoking shell here """
    workspace = os.getenv('BUILD_WORKSPACE_DIRECTORY')
    if not workspace:
        return None
    return workspace.replace('"', '')


def bazel_executable():
    return os.getenv('BZCOMPDB_BAZEL') or 'bazel'


def default_output_format():
    output_format = (os.getenv('BZCOMPDB_FORMAT') or 'arguments').strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError("BZCOMPDB_FORMAT must be one of %s, not '%s'" % (', '.join(OUTPUT_FORMATS), output_format))
    return output_format


def is_debug_mode():
    return os.getenv('BZCOMPDB_DEBUG') is not None
