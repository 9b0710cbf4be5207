#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import time
import signal
import traceback

import libcompdb
import cdbcommands


def initialize():
    # print an abort message instead of a traceback on Ctrl-C, returns the handler it replaced
    return signal.signal(signal.SIGINT, receive_signal)


options = {
    'generate': {
        "function": cdbcommands.generate_processing,
        'help': 'Queries bazel and writes compile_commands.json to the workspace root'},
    'info': {
        "function": cdbcommands.info_processing,
        'help': 'Only prints the resolved workspace, execution root, output base and bazel-bin'},
}

DEFAULT_COMMAND = 'generate'


def display_general_usage():
    libcompdb.kindness_message("If you want to run your command, please run like this:")
    libcompdb.command_message("    bzcompdb [command] [command option]")
    print()
    libcompdb.kindness_message("These are bzcompdb commands:")
    for option in options.keys():
        libcompdb.command_message('    %-10s\t%s' % (option, options[option]['help']))
    print()


def receive_signal(signum, frame):
    libcompdb.kindness_message("Interrupt signal received.")
    libcompdb.kindness_message("Aborted.")
    sys.exit(1)


def get_trace_back():
    lines = traceback.format_exc().strip().split('\n')
    rl = [lines[-1]]
    lines = lines[1:-1]
    lines.reverse()
    for i in range(0, len(lines), 2):
        if i + 1 >= len(lines):
            rl.append('* \t%s' % (lines[i].strip()))
        else:
            rl.append('* \t%s at %s' % (lines[i].strip(), lines[i + 1].strip()))
    return '\n'.join(rl)


def main_driver(argv):
    libcompdb.kindness_message("Compilation database for Bazel workspaces")

    if argv and argv[0] in ('-h', '--help', 'help'):
        display_general_usage()
        return True
    if argv and argv[0] in options.keys():
        return options[argv[0]]['function'](argv[1:])
    return options[DEFAULT_COMMAND]['function'](argv)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    libcompdb.set_return_value(0)
    start_time = time.time()
    previous_handler = initialize()
    try:
        if not main_driver(argv):
            libcompdb.set_return_value(1)
    except libcompdb.CompdbError as e:
        libcompdb.error_message(str(e))
    except SystemExit as e:
        if e.code:
            libcompdb.set_return_value(e.code if isinstance(e.code, int) else 1)
    except Exception:
        print(get_trace_back())
        libcompdb.error_message("Unexpected error has occurred.")
    finally:
        elapsed = time.time() - start_time
        libcompdb.kindness_message("Finished(%s)" % time.strftime("%H:%M:%S", time.gmtime(elapsed)))
        if previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)
    return libcompdb.get_return_value()


if __name__ == "__main__":
    sys.exit(main())
