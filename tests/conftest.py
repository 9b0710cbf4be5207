import json
import os
import re

import pytest

import cdblib
import libcompdb

EXECUTION_ROOT = '/cache/bazel/_bazel_user/1234/execroot/__main__'
OUTPUT_BASE = '/cache/bazel/_bazel_user/1234'
BIN_DIR = EXECUTION_ROOT + '/bazel-out/k8-fastbuild/bin'


def compile_action(target_id, source, mnemonic='CppCompile', extra=()):
    return {
        'targetId': target_id,
        'mnemonic': mnemonic,
        'arguments': ['external/local_config_cc/cc_wrapper.sh', '-Wall', '-iquote', '.',
                      '-iquote', 'bazel-out/k8-fastbuild/bin', '-Ibazel-out/k8-fastbuild/bin/a/_virtual_includes/x',
                      '-isystem', 'external/zlib'] + list(extra) + ['-c', source, '-o', source + '.o'],
    }


class FakeBazel(object):
    """Answers bazel info / aquery / cquery and the xcode locators from canned data"""

    def __init__(self, workspace):
        self.workspace = workspace
        self.info = {
            'workspace': workspace,
            'execution_root': EXECUTION_ROOT,
            'output_base': OUTPUT_BASE,
            'bazel-bin': BIN_DIR,
        }
        self.aquery = {}
        self.sources = {}
        self.failing_labels = set()
        self.calls = []
        self.query_files = []
        self.query_contents = []

    def __call__(self, command, cwd=None):
        self.calls.append((list(command), cwd))
        tool = command[0]
        if tool == 'xcrun':
            return '/Applications/Xcode.app/Contents/Developer/Platforms/MacOSX.platform/Developer/SDKs/MacOSX.sdk\n'
        if tool == 'xcode-select':
            return '/Applications/Xcode.app/Contents/Developer\n'

        subcommand = command[1]
        if subcommand == 'info':
            return self.info[command[2]] + '\n'
        if subcommand == 'aquery':
            mnemonic = re.match(r'mnemonic\("([^"]+)", ', command[2]).group(1)
            container = self.aquery.get(mnemonic)
            if isinstance(container, str):
                return container
            return json.dumps(container or {})
        if subcommand == 'cquery':
            label = re.match(r'kind\("source file", deps\((.+)\)\)$', command[2]).group(1)
            query_file = command[command.index('--starlark:file') + 1]
            assert os.path.isfile(query_file)
            self.query_files.append(query_file)
            with open(query_file, encoding='utf-8') as f:
                self.query_contents.append(f.read())
            if label in self.failing_labels:
                raise libcompdb.CommandFailedError(command, 1, "ERROR: no such target '%s'" % label)
            return '\n'.join(self.sources.get(label, [])) + '\n'
        raise AssertionError('unexpected command %r' % (command,))

    def commands(self, subcommand):
        return [command for command, _ in self.calls if len(command) > 1 and command[1] == subcommand]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ('BUILD_WORKSPACE_DIRECTORY', 'BZCOMPDB_BAZEL', 'BZCOMPDB_FORMAT', 'BZCOMPDB_DEBUG'):
        monkeypatch.delenv(name, raising=False)
    libcompdb.set_return_value(0)


@pytest.fixture
def fake_bazel(tmp_path, monkeypatch):
    bazel = FakeBazel(str(tmp_path))
    monkeypatch.setattr(cdblib, 'run_command', bazel)
    return bazel


@pytest.fixture
def two_targets(fake_bazel):
    fake_bazel.aquery['CppCompile'] = {
        'targets': [{'id': 1, 'label': '//b:y'}, {'id': 2, 'label': '//a:x'}],
        'actions': [compile_action(1, 'b/b.cc'), compile_action(2, 'a/a.cc')],
    }
    fake_bazel.sources = {
        '//a:x': ['a/a.cc', 'common/common.h', ''],
        '//b:y': ['common/common.h', 'b/b.cc'],
    }
    return fake_bazel
