#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import colorama
from colorama import Fore

return_value = 0
colorama.init()


def kindness_message(message):
    print("%s> %s%s" % (Fore.GREEN, message, Fore.RESET))


def warning_message(message):
    print("%s   -- %s%s" % (Fore.YELLOW, message, Fore.RESET))


def error_message(message):
    print("%s   !! %s !!%s" % (Fore.RED, message, Fore.RESET))
    set_return_value(1)


def command_message(message):
    print("%s%s%s" % (Fore.YELLOW, message, Fore.RESET))


def info_message(message):
    print("  > %s%s%s" % (Fore.CYAN, message, Fore.RESET))


def step_message(message):
    print("-- %s[%s]%s" % (Fore.YELLOW, message, Fore.RESET))


def debug_message(message):
    import libcompdb
    if not libcompdb.is_debug_mode():
        return
    print("[DEBUG] %s%s%s" % (Fore.MAGENTA, message, Fore.RESET))


def set_return_value(set_value):
    global return_value
    return_value = set_value


def get_return_value():
    return return_value
