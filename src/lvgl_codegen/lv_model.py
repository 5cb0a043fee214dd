# lv_model.py
# Intermediate representation of the parsed LVGL API. Built once per run from
# the clang AST and only read afterwards (LvWidget.methods grows while the
# widgets are being extracted).
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .type_utils import OBJ_HANDLE_TYPE, is_const_type, is_str_type, rust_ident


@dataclass(frozen=True)
class LvType:
    """A C type exactly as spelled by clang, e.g. 'const char *'."""
    typ: str

    def is_const(self):
        return is_const_type(self.typ)

    def is_str(self):
        return is_str_type(self.typ)


@dataclass(frozen=True)
class LvArg:
    name: str
    typ: LvType

    def get_name_ident(self):
        return rust_ident(self.name)

    def get_type(self):
        return self.typ


@dataclass(frozen=True)
class LvFunc:
    name: str
    args: Tuple[LvArg, ...] = ()
    ret: Optional[LvType] = None  # None for void functions

    def __post_init__(self):
        # Accept any sequence but keep the stored arguments immutable
        object.__setattr__(self, "args", tuple(self.args))

    def is_method(self):
        # Heuristic: any first-arg spelling mentioning lv_obj_t counts,
        # including 'const lv_obj_t *' and 'lv_obj_t **'.
        if self.args:
            return OBJ_HANDLE_TYPE in self.args[0].typ.typ
        return False


@dataclass
class LvWidget:
    name: str  # e.g. 'arc', as captured from lv_arc_create
    methods: List[LvFunc] = field(default_factory=list)
