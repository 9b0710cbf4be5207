import pytest
import cdbtoolchain
from compdb import _argument_transformer as transformer
from compdb.model import Action, BuildInfo

OUTPUT_BASE = '/cache/output_base'
GENERIC = cdbtoolchain.create('linux', '/execroot')


@pytest.mark.parametrize("argument,expected", [
    ("-Ibazel-out/k8-fastbuild/bin", "-I/cache/output_base/bazel-out/k8-fastbuild/bin"),
    ("external/zlib", "/cache/output_base/external/zlib"),
    ("bazel-out/k8-fastbuild/bin/a", "/cache/output_base/bazel-out/k8-fastbuild/bin/a"),
    ("-Iexternal/zlib", "-Iexternal/zlib"),
    ("externals/zlib", "externals/zlib"),
    ("-DNDEBUG", "-DNDEBUG"),
    (".", "."),
])
def test_rewrite_argument(argument, expected):
    assert transformer.rewrite_argument(argument, OUTPUT_BASE) == expected


@pytest.mark.parametrize("mnemonic,expected", [
    ("CppCompile", ["clang", "-xc++"]),
    ("ObjcCompile", ["clang", "-xobjective-c++"]),
    ("CudaCompile", ["external/cuda/bin/nvcc"]),
])
def test_language_prefix(mnemonic, expected):
    assert transformer.language_prefix(mnemonic, ["external/cuda/bin/nvcc", "-c", "a.cu"]) == expected


def test_transform_drops_compiler_and_c_pairs():
    arguments = ['/usr/bin/gcc', '-c', 'a/a.cc', '-Wall', '-c', 'a/other.cc', '-o', 'bazel-out/a.o']
    args = transformer.transform_argument_list('CppCompile', arguments, OUTPUT_BASE, GENERIC)
    assert args == ['clang', '-xc++', '-Wall', '-o', '/cache/output_base/bazel-out/a.o']
    assert '-c' not in args
    assert 'a/a.cc' not in args


def test_transform_trailing_c_without_file():
    args = transformer.transform_argument_list('CppCompile', ['gcc', '-Wall', '-c'], OUTPUT_BASE, GENERIC)
    assert args == ['clang', '-xc++', '-Wall']


def test_transform_on_linux_keeps_placeholders():
    arguments = ['clang', '-isysroot', '__BAZEL_XCODE_SDKROOT__']
    args = transformer.transform_argument_list('ObjcCompile', arguments, OUTPUT_BASE, GENERIC)
    assert args == ['clang', '-xobjective-c++', '-isysroot', '__BAZEL_XCODE_SDKROOT__']


def test_transform_on_darwin_substitutes_placeholders(fake_bazel):
    darwin = cdbtoolchain.create('darwin', '/execroot')
    arguments = ['wrapped_clang', '-isysroot', '__BAZEL_XCODE_SDKROOT__',
                 '-F__BAZEL_XCODE_DEVELOPER_DIR__/Platforms', '-c', 'a.mm']
    args = transformer.transform_argument_list('ObjcCompile', arguments, OUTPUT_BASE, darwin)
    assert args == ['clang', '-xobjective-c++', '-isysroot',
                    '/Applications/Xcode.app/Contents/Developer/Platforms/MacOSX.platform/Developer/SDKs/MacOSX.sdk',
                    '-F/Applications/Xcode.app/Contents/Developer/Platforms']


def test_transform_arguments_builds_cc_target():
    build_info = BuildInfo('/ws', '/execroot', OUTPUT_BASE, '/bin')
    action = Action('7', 'CppCompile', ['gcc', '-isystem', 'external/gtest/include', '-c', 't.cc'])
    target = transformer.transform_arguments('//t:t', action, build_info, GENERIC)
    assert target.label == '//t:t'
    assert target.args == ['clang', '-xc++', '-isystem', '/cache/output_base/external/gtest/include']
    assert target.srcs == []


def test_unknown_mnemonic_keeps_rooted_compiler():
    args = transformer.transform_argument_list('CudaCompile', ['external/cuda/bin/nvcc', '-c', 'k.cu'],
                                               OUTPUT_BASE, GENERIC)
    assert args == ['/cache/output_base/external/cuda/bin/nvcc']


def test_unknown_mnemonic_substitutes_compiler_placeholders(fake_bazel):
    darwin = cdbtoolchain.create('darwin', '/execroot')
    args = transformer.transform_argument_list('CustomCompile', ['__BAZEL_XCODE_DEVELOPER_DIR__/clang', '-c', 'a.cc'],
                                               OUTPUT_BASE, darwin)
    assert args == ['/Applications/Xcode.app/Contents/Developer/clang']
