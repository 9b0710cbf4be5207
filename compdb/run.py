# -*- coding: utf-8 -*-

from compdb._action_graph import _ActionGraphFetcher
from compdb._build_info import _BuildInfoResolver
from compdb._clang_compilation_database import _ClangCompilationDatabaseExport
from compdb._source_enumerator import _SourceEnumerator
from compdb.runner import *


# ----------------------------------- Runner Configurations
def run(options):
    build_info_resolver = _BuildInfoResolver()
    action_graph_fetcher = _ActionGraphFetcher()
    source_enumerator = _SourceEnumerator()
    compile_commands_json_export = _ClangCompilationDatabaseExport()
    build_info_resolver.next(action_graph_fetcher).next(source_enumerator).next(compile_commands_json_export)
    return build_info_resolver.run(options)


def run_info(options):
    build_info_resolver = _BuildInfoResolver()
    return build_info_resolver.run(options)
