from types import SimpleNamespace

import pytest
from clang.cindex import CursorKind, LinkageKind, TranslationUnitLoadError

from lvgl_codegen import api_parser
from lvgl_codegen.api_parser import CodeGenError, iter_function_decls, load_function_definitions, lv_func_from_cursor
from lvgl_codegen.lv_model import LvArg, LvFunc, LvType


def _param(name, typ):
    return SimpleNamespace(spelling=name, type=SimpleNamespace(spelling=typ))


def _decl(name, params=(), ret="void", kind=CursorKind.FUNCTION_DECL, linkage=LinkageKind.EXTERNAL):
    return SimpleNamespace(
        kind=kind,
        spelling=name,
        linkage=linkage,
        result_type=SimpleNamespace(spelling=ret),
        get_arguments=lambda: [_param(n, t) for n, t in params],
    )


def _tu_cursor(*children):
    return SimpleNamespace(get_children=lambda: list(children))


def test_function_conversion():
    func = lv_func_from_cursor(_decl("lv_arc_create", [("par", "lv_obj_t *"), ("copy", "const lv_obj_t *")], ret="lv_obj_t *"))
    assert func == LvFunc(
        "lv_arc_create",
        [LvArg("par", LvType("lv_obj_t *")), LvArg("copy", LvType("const lv_obj_t *"))],
        LvType("lv_obj_t *"),
    )


def test_void_result_has_no_return_type():
    assert lv_func_from_cursor(_decl("lv_init")).ret is None


def test_unnamed_parameter_is_fatal():
    with pytest.raises(CodeGenError):
        lv_func_from_cursor(_decl("lv_obj_del", [("", "lv_obj_t *")]))


def test_declarations_are_filtered():
    tu = _tu_cursor(
        _decl("lv_label_set_text", [("label", "lv_obj_t *"), ("text", "const char *")]),
        _decl("lv_obj_get_style_x", [("obj", "lv_obj_t *")], linkage=LinkageKind.INTERNAL),
        _decl("", kind=CursorKind.FUNCTION_DECL),
        _decl("lv_font_t", kind=CursorKind.TYPEDEF_DECL),
        # system header declarations are never converted
        _decl("printf", [("", "const char *")], ret="int"),
        _decl("lv_init"),
    )
    assert [f.name for f in iter_function_decls(tu)] == ["lv_label_set_text", "lv_init"]


LVGL_SOURCE = """
typedef unsigned short uint16_t;
typedef struct _lv_obj_t lv_obj_t;

lv_obj_t * lv_arc_create(lv_obj_t * par, const lv_obj_t * copy);
void lv_arc_set_bg_end_angle(lv_obj_t * arc, uint16_t end);
void lv_label_set_text(lv_obj_t * label, const char * text);
static inline void lv_arc_helper(lv_obj_t * arc) { (void)arc; }
int puts(const char * s);
"""


def test_load_function_definitions(tmp_path):
    source = tmp_path / "lvgl_full.c"
    source.write_text(LVGL_SOURCE)

    functions = load_function_definitions(source)

    assert [f.name for f in functions] == ["lv_arc_create", "lv_arc_set_bg_end_angle", "lv_label_set_text"]
    arc_create, arc_set, label_set_text = functions
    assert arc_create.ret == LvType("lv_obj_t *")
    assert [a.typ.typ for a in arc_create.args] == ["lv_obj_t *", "const lv_obj_t *"]
    assert arc_set.args == (LvArg("arc", LvType("lv_obj_t *")), LvArg("end", LvType("uint16_t")))
    assert label_set_text.args[1].typ.is_str()


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(CodeGenError):
        load_function_definitions(tmp_path / "missing.c")


class _FailingIndex:
    def parse(self, path, args=None):
        raise TranslationUnitLoadError("Error parsing translation unit.")


def test_parse_failure_is_fatal(tmp_path):
    source = tmp_path / "lvgl_full.c"
    source.write_text(LVGL_SOURCE)

    with pytest.raises(CodeGenError, match="Error parsing translation unit"):
        load_function_definitions(source, index=_FailingIndex())


def test_parse_failure_exits_the_cli(tmp_path, monkeypatch):
    from lvgl_codegen.generator import main

    source = tmp_path / "lvgl_full.c"
    source.write_text(LVGL_SOURCE)
    monkeypatch.setattr(api_parser, "Index", SimpleNamespace(create=_FailingIndex))

    assert main(["-i", str(source)]) == 1
