# code_gen/rust_renderer.py
# Renders Rust wrapper code for the extracted widgets. Every render_* function
# returns None when the declaration can't be wrapped yet; callers drop those.
import logging

from ..type_utils import BASE_OBJECT_NAME, LIB_PREFIX, map_c_type, rust_ident, to_pascal_case

logger = logging.getLogger(__name__)

NATIVE_CRATE = "lvgl_sys"
RESULT_TYPE = "crate::LvResult"
INDENT = "    "

GENERATED_BANNER = "// Generated by lvgl-codegen - DO NOT EDIT\n"


def _indent(code, level=1):
    """Indents every non-empty line of code."""
    pad = INDENT * level
    return "".join(pad + line if line.strip() else line for line in code.splitlines(True))

# --- Arguments ---

def render_type(lv_type):
    return map_c_type(lv_type.typ)

def render_arg_decl(arg):
    """'end: u16', or None for unsupported types."""
    rust_type = render_type(arg.get_type())
    if rust_type is None:
        return None
    return f"{arg.get_name_ident()}: {rust_type}"

def render_arg_processing(arg):
    """Statement converting the argument before the native call ('' when not needed)."""
    ident = arg.get_name_ident()
    if arg.get_type().is_str():
        # Owned copy must outlive the native call, so it shadows the &str
        return f"let {ident} = cstr_core::CString::new({ident})?;\n"
    return ""

def render_arg_usage(arg):
    """Expression passing the argument to the native function."""
    ident = arg.get_name_ident()
    if arg.get_type().is_str():
        return f"{ident}.as_ptr()"
    return ident

# --- Functions ---

def func_local_name(func, widget, prefix=LIB_PREFIX):
    """'lv_arc_set_bg_end_angle' in widget 'arc' -> 'set_bg_end_angle'"""
    templ = f"{prefix}{widget.name}_"
    if func.name.startswith(templ):
        return func.name[len(templ):]
    return func.name

def render_constructor(func):
    """
    Generic constructor for any parent implementing NativeObject. The native
    'copy' argument is always passed as null.
    """
    rust_code = f"pub fn new<C>(parent: &mut C) -> {RESULT_TYPE}<Self>\n"
    rust_code += "where\n"
    rust_code += f"{INDENT}C: crate::NativeObject,\n"
    rust_code += "{\n"
    rust_code += f"{INDENT}unsafe {{\n"
    rust_code += f"{INDENT * 2}let ptr = {NATIVE_CRATE}::{func.name}(parent.raw()?.as_mut(), core::ptr::null_mut());\n"
    rust_code += f"{INDENT * 2}let raw = core::ptr::NonNull::new(ptr)?;\n"
    rust_code += f"{INDENT * 2}let core = <crate::Obj as crate::Widget>::from_raw(raw);\n"
    rust_code += f"{INDENT * 2}Ok(Self {{ core }})\n"
    rust_code += f"{INDENT}}}\n"
    rust_code += "}\n"
    return rust_code

def render_method(func, widget, prefix=LIB_PREFIX):
    if not func.args:
        logger.debug(f"Skipping {func.name}: no receiver argument")
        return None
    # TODO: wrap methods returning values (getters need a return type mapping)
    if func.ret is not None:
        logger.debug(f"Skipping {func.name}: returns {func.ret.typ}")
        return None

    receiver, params = func.args[0], func.args[1:]
    args_decl = ["&self" if receiver.get_type().is_const() else "&mut self"]
    for arg in params:
        decl = render_arg_decl(arg)
        if decl is None:
            logger.debug(f"Skipping {func.name}: unsupported type '{arg.get_type().typ}' of '{arg.name}'")
            return None
        args_decl.append(decl)

    args_call = ["self.core.raw()?.as_mut()"] + [render_arg_usage(arg) for arg in params]
    method_name = rust_ident(func_local_name(func, widget, prefix))

    rust_code = f"pub fn {method_name}({', '.join(args_decl)}) -> {RESULT_TYPE}<()> {{\n"
    for arg in params:
        rust_code += _indent(render_arg_processing(arg))
    rust_code += f"{INDENT}unsafe {{\n"
    rust_code += f"{INDENT * 2}{NATIVE_CRATE}::{func.name}({', '.join(args_call)});\n"
    rust_code += f"{INDENT}}}\n"
    rust_code += f"{INDENT}Ok(())\n"
    rust_code += "}\n"
    return rust_code

def render_function(func, widget, prefix=LIB_PREFIX):
    """Constructor for '<prefix><widget>_create', a regular method otherwise."""
    if func_local_name(func, widget, prefix) == "create":
        return render_constructor(func)
    return render_method(func, widget, prefix)

# --- Widgets ---

def render_widget(widget, prefix=LIB_PREFIX):
    """
    Object definition plus impl block with every method that could be wrapped.
    Returns None for the base object, which is written by hand.
    """
    if widget.name == BASE_OBJECT_NAME:
        return None

    widget_name = to_pascal_case(widget.name)
    methods = [render_function(m, widget, prefix) for m in widget.methods]
    methods = [m for m in methods if m is not None]
    logger.debug(f"{widget_name}: wrapped {len(methods)} of {len(widget.methods)} functions")

    rust_code = f"define_object!({widget_name});\n\n"
    rust_code += f"impl {widget_name} {{\n"
    rust_code += "\n".join(_indent(m) for m in methods)
    rust_code += "}\n"
    return rust_code

def render_widgets_module(widgets, prefix=LIB_PREFIX):
    """Whole generated module, widgets sorted by name for a stable output file."""
    rendered = []
    for widget in sorted(widgets, key=lambda w: w.name):
        code = render_widget(widget, prefix)
        if code is None:
            logger.debug(f"Skipping widget '{widget.name}'")
            continue
        rendered.append(code)
    logger.info(f"Rendered {len(rendered)} widgets.")
    return GENERATED_BANNER + "\n" + "\n".join(rendered)
