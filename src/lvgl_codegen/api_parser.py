# api_parser.py
import logging
from pathlib import Path

from clang.cindex import CursorKind, Diagnostic, Index, LinkageKind, TranslationUnitLoadError

from .lv_model import LvArg, LvFunc, LvType
from .type_utils import LIB_PREFIX

logger = logging.getLogger(__name__)

# The input is a single, already preprocessed C file (lvgl_full.c)
DEFAULT_CLANG_ARGS = ["-x", "c", "-std=c99"]


class CodeGenError(Exception):
    """Fatal problem while loading the API. Aborts the whole generation run."""


def lv_type_from_clang(clang_type):
    return LvType(clang_type.spelling)

def lv_arg_from_cursor(cursor, func_name):
    """Converts a PARM_DECL cursor. Unnamed parameters can't be wrapped."""
    if not cursor.spelling:
        raise CodeGenError(f"Parameter without a name in declaration of {func_name}")
    if cursor.type is None or not cursor.type.spelling:
        raise CodeGenError(f"Parameter '{cursor.spelling}' of {func_name} has no type")
    return LvArg(cursor.spelling, lv_type_from_clang(cursor.type))

def lv_func_from_cursor(cursor):
    """Converts a FUNCTION_DECL cursor into an LvFunc, keeping argument order."""
    name = cursor.spelling
    if not name:
        raise CodeGenError("Function declaration without a name")

    result_type = cursor.result_type
    if result_type is None or not result_type.spelling:
        raise CodeGenError(f"Can not determine the result type of {name}")
    ret = None if result_type.spelling == "void" else lv_type_from_clang(result_type)

    args = [lv_arg_from_cursor(arg, name) for arg in cursor.get_arguments()]
    return LvFunc(name, args, ret)

def _is_candidate(cursor, prefix):
    if cursor.kind != CursorKind.FUNCTION_DECL:
        return False
    if not cursor.spelling:
        return False
    if cursor.linkage == LinkageKind.INTERNAL:  # static / static inline helpers
        return False
    # Checked before conversion: system headers have unnamed parameters
    # that are not our concern.
    return cursor.spelling.startswith(prefix)

def iter_function_decls(tu_cursor, prefix=LIB_PREFIX):
    """Yields an LvFunc for every exported top-level function with the library prefix."""
    for cursor in tu_cursor.get_children():
        if _is_candidate(cursor, prefix):
            yield lv_func_from_cursor(cursor)

def parse_translation_unit(tu_path, clang_args=None, index=None):
    """Parses the preprocessed source with libclang and returns the translation unit."""
    args = list(DEFAULT_CLANG_ARGS)
    if clang_args:
        args.extend(clang_args)
    if index is None:
        index = Index.create()

    if not Path(tu_path).is_file():
        raise CodeGenError(f"Translation unit not found: {tu_path}")

    logger.info(f"Parsing translation unit: {tu_path}")
    try:
        tu = index.parse(str(tu_path), args=args)
    except TranslationUnitLoadError as e:
        raise CodeGenError(f"Failed to parse translation unit {tu_path}: {e}") from e

    for diag in tu.diagnostics:
        if diag.severity >= Diagnostic.Error:
            logger.warning(f"clang: {diag.spelling} ({diag.location.file}:{diag.location.line})")
    return tu

def load_function_definitions(tu_path, prefix=LIB_PREFIX, clang_args=None, index=None):
    """Loads every candidate function of the API, in declaration order."""
    tu = parse_translation_unit(tu_path, clang_args=clang_args, index=index)
    functions = list(iter_function_decls(tu.cursor, prefix))
    logger.info(f"Loaded {len(functions)} '{prefix}' functions.")
    return functions
