#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import os
import posixpath
from collections import OrderedDict

import libcompdb


def get_json_content_from_text(text, origin):
    """ parse a JSON document printed by an external command, blank output is an empty document """
    if not text.strip():
        return OrderedDict()
    try:
        return json.loads(text, object_pairs_hook=OrderedDict)
    except ValueError as e:
        raise libcompdb.MalformedOutputError("failed to parse %s output: %s" % (origin, e))


def create_json_from_data(json_data, file_path, text_encoding='utf-8'):
    # the same data always serializes to the same bytes
    content = json.dumps(json_data, indent=2, ensure_ascii=False) + '\n'
    if os.path.exists(file_path):
        os.remove(file_path)
    with open(file_path, 'w', encoding=text_encoding, newline='\n') as json_file:
        json_file.write(content)


def non_empty_lines(text):
    return [line for line in text.splitlines() if line.strip()]


def join_under(root, relative_path):
    """ bazel paths are always '/' separated, whatever the host """
    return posixpath.join(root, relative_path)

