import pytest

from lvgl_codegen.lv_model import LvArg, LvFunc, LvType, LvWidget


def _func(name, *args, ret=None):
    """_func('lv_arc_set_angle', ('arc', 'lv_obj_t *'), ('end', 'uint16_t'))"""
    return LvFunc(name, [LvArg(arg_name, LvType(typ)) for arg_name, typ in args], LvType(ret) if ret else None)


@pytest.fixture
def make_func():
    return _func


@pytest.fixture
def arc_widget():
    return LvWidget("arc")


@pytest.fixture
def arc_create():
    # lv_obj_t * lv_arc_create(lv_obj_t * par, const lv_obj_t * copy);
    return _func("lv_arc_create", ("par", "lv_obj_t *"), ("copy", "const lv_obj_t *"), ret="lv_obj_t *")


@pytest.fixture
def api_functions():
    """A small slice of the LVGL 7 API."""
    return [
        _func("lv_obj_create", ("parent", "lv_obj_t *"), ("copy", "const lv_obj_t *"), ret="lv_obj_t *"),
        _func("lv_obj_set_hidden", ("obj", "lv_obj_t *"), ("en", "bool")),
        _func("lv_arc_create", ("par", "lv_obj_t *"), ("copy", "const lv_obj_t *"), ret="lv_obj_t *"),
        _func("lv_arc_set_bg_end_angle", ("arc", "lv_obj_t *"), ("end", "uint16_t")),
        _func("lv_arc_get_angle_start", ("arc", "lv_obj_t *"), ret="uint16_t"),
        _func("lv_label_create", ("par", "lv_obj_t *"), ("copy", "const lv_obj_t *"), ret="lv_obj_t *"),
        _func("lv_label_set_text", ("label", "lv_obj_t *"), ("text", "const char *")),
        _func("lv_btn_create", ("par", "lv_obj_t *"), ("copy", "const lv_obj_t *"), ret="lv_obj_t *"),
        _func("lv_btn_set_checkable", ("btn", "lv_obj_t *"), ("tgl", "bool")),
        _func("lv_btnmatrix_create", ("par", "lv_obj_t *"), ("copy", "const lv_obj_t *"), ret="lv_obj_t *"),
        _func("lv_btnmatrix_set_one_check", ("btnm", "lv_obj_t *"), ("one_chk", "bool")),
        _func("lv_style_init", ("style", "lv_style_t *")),
        _func("lv_init"),
    ]
