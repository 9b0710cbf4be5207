#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import subprocess

import libcompdb


def run_command(command, cwd=None):
    """
    Runs `command` (argument list) to completion and returns its standard output.
    A missing executable or a non-zero exit raises CommandFailedError with the captured standard error.
    Output that does not decode as UTF-8 raises MalformedOutputError.
    """
    libcompdb.debug_message("run %s (cwd=%s)" % (' '.join(command), cwd))
    try:
        completed = subprocess.run(command, cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                                   encoding='utf-8')
    except OSError as e:
        raise libcompdb.CommandFailedError(command, None, str(e))
    except UnicodeDecodeError as e:
        raise libcompdb.MalformedOutputError("'%s' printed output that is not UTF-8: %s" % (' '.join(command), e))

    if completed.returncode != 0:
        raise libcompdb.CommandFailedError(command, completed.returncode, completed.stderr)
    return completed.stdout
