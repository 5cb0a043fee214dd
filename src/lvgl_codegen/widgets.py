# widgets.py
import logging
import re

from .lv_model import LvWidget
from .type_utils import LIB_PREFIX

logger = logging.getLogger(__name__)

# lv_<widget>_create(lv_obj_t * par, const lv_obj_t * copy)
CREATE_FUNC_ARG_COUNT = 2


def create_func_regex(prefix=LIB_PREFIX):
    return re.compile(rf"^{re.escape(prefix)}([^_]+)_create$")

def get_widget_names(functions, prefix=LIB_PREFIX):
    """
    Widget names are taken from the two argument create functions,
    e.g. 'lv_btn_create(par, copy)' -> 'btn'. Create functions with any other
    arity don't follow the constructor convention and are ignored.
    """
    create_func = create_func_regex(prefix)
    names = []
    for func in functions:
        match = create_func.match(func.name)
        if not match:
            continue
        if len(func.args) != CREATE_FUNC_ARG_COUNT:
            logger.debug(f"Ignoring {func.name}: expected {CREATE_FUNC_ARG_COUNT} args, got {len(func.args)}")
            continue
        names.append(match.group(1))
    return names

def widget_func_prefix(widget_name, prefix=LIB_PREFIX, require_separator=False):
    """
    Name prefix owning functions of a widget. Without the separator 'lv_btn'
    also matches 'lv_btnmatrix_set_map', so such functions end up in both
    widgets.
    """
    if require_separator:
        return f"{prefix}{widget_name}_"
    return f"{prefix}{widget_name}"

def extract_widgets(functions, prefix=LIB_PREFIX, require_separator=False):
    """
    Groups the methods of every widget. A function can be assigned to several
    widgets; functions that match no widget are dropped. The order of the
    returned widgets is not meaningful.
    """
    widgets = {}
    for widget_name in get_widget_names(functions, prefix):
        widgets.setdefault(widget_name, LvWidget(widget_name))

    for func in functions:
        if not func.is_method():
            continue
        for widget_name, widget in widgets.items():
            if func.name.startswith(widget_func_prefix(widget_name, prefix, require_separator)):
                # Kept as is, the generated impl block then has a duplicate fn
                if any(m.name == func.name for m in widget.methods):
                    logger.debug(f"{func.name} is declared more than once, added to '{widget_name}' again")
                widget.methods.append(func)

    logger.info(f"Extracted {len(widgets)} widgets.")
    return list(widgets.values())
