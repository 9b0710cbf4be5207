#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import cdblib
from compdb.model import Action, Target
from compdb._argument_transformer import transform_arguments
from compdb.runner import *

# Only the members of analysis.proto's ActionGraphContainer that are needed here are read.
# Identifiers come as JSON numbers from `--output=jsonproto`, they are compared as strings.


def _identifier(value, origin):
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise libcompdb.MalformedOutputError("%s: identifier must be a number or a string, not %r" % (origin, value))
    return str(value)


def _members(container, key, origin):
    members = container.get(key, [])
    if not isinstance(members, list) or not all(isinstance(member, dict) for member in members):
        raise libcompdb.MalformedOutputError("%s: '%s' must be a list of objects" % (origin, key))
    return members


def parse_action_graph(text, origin='bazel aquery'):
    """
    Parse `bazel aquery --output=jsonproto` output into (targets, actions).
    """
    container = cdblib.get_json_content_from_text(text, origin)
    if not isinstance(container, dict):
        raise libcompdb.MalformedOutputError("%s: top level value must be an object" % origin)

    targets = []
    for member in _members(container, 'targets', origin):
        if 'id' not in member or not isinstance(member.get('label'), str):
            raise libcompdb.MalformedOutputError("%s: target without id or label: %r" % (origin, dict(member)))
        targets.append(Target(_identifier(member['id'], origin), member['label']))

    actions = []
    for member in _members(container, 'actions', origin):
        arguments = member.get('arguments', [])
        if 'targetId' not in member or not isinstance(arguments, list) \
                or not all(isinstance(argument, str) for argument in arguments):
            raise libcompdb.MalformedOutputError("%s: malformed action: %r" % (origin, dict(member)))
        actions.append(Action(_identifier(member['targetId'], origin), member.get('mnemonic', ''), arguments))

    return targets, actions


def query_mnemonic(options, context, mnemonic):
    command = [options.bazel, 'aquery', 'mnemonic("%s", %s)' % (mnemonic, options.scope), '--output=jsonproto']
    output = cdblib.run_command(command, cwd=context.build_info.workspace)
    targets, actions = parse_action_graph(output, 'bazel aquery for %s' % mnemonic)

    for target in targets:
        context.target_labels[target.id] = target.label

    matched = 0
    for action in actions:
        if action.mnemonic != mnemonic:
            continue
        label = context.target_labels.get(action.target_id)
        if label is None:
            raise libcompdb.MissingLabelError(action.target_id)
        context.cc_targets[label] = transform_arguments(label, action, context.build_info, context.toolchain)
        matched += 1
    return matched


class _ActionGraphFetcher(Runner):
    def start(self, options, context=None):
        libcompdb.step_message("Querying action graph")
        for mnemonic in options.mnemonics:
            matched = query_mnemonic(options, context, mnemonic)
            libcompdb.info_message("%s: %d action(s)" % (mnemonic, matched))

        if not context.cc_targets:
            libcompdb.warning_message("no compile actions found in %s" % options.scope)
        return True, context
