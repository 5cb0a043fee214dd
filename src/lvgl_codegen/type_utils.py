# type_utils.py
import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# --- Configuration ---

LIB_PREFIX = "lv_"            # Every wrapped function starts with this
OBJ_HANDLE_TYPE = "lv_obj_t"  # First-arg type marking a function as a method
BASE_OBJECT_NAME = "obj"      # lv_obj_t is hand-written on the Rust side, never generated

RUST_STR_TYPE = "&str"

# Mapping from C type spellings (as clang displays them) to Rust primitives.
# Lookup is by exact spelling, nothing is normalized.
TYPE_MAPPINGS = MappingProxyType({
    "uint16_t": "u16",
    "int32_t": "i32",
    "uint8_t": "u8",
    "bool": "bool",
    "_Bool": "bool",
    "const char *": RUST_STR_TYPE,
})

# Strict and reserved keywords (2018 edition)
RUST_KEYWORDS = frozenset({
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "Self", "static", "struct",
    "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    "async", "await", "dyn",
    "abstract", "become", "box", "do", "final", "macro", "override", "priv",
    "typeof", "unsized", "virtual", "yield", "try",
})
# These can not be written as raw identifiers (r#self is rejected by rustc)
RUST_NON_RAW_KEYWORDS = frozenset({"self", "Self", "super", "crate"})


def is_const_type(c_type):
    """'const lv_obj_t *' -> True. Only the leading qualifier counts."""
    return c_type.startswith("const ")

def is_str_type(c_type):
    """Anything spelled '... char *' is passed as a Rust string slice."""
    return c_type.endswith("char *")

def map_c_type(c_type):
    """
    Returns the Rust type for a C type spelling, or None when the type is not
    supported (the caller skips the declaration).
    """
    # The suffix test wins over the table, so plain 'char *' maps as well
    if is_str_type(c_type):
        return RUST_STR_TYPE
    rust_type = TYPE_MAPPINGS.get(c_type)
    if rust_type is None:
        logger.debug(f"No Rust mapping for C type '{c_type}'")
    return rust_type

def rust_ident(name):
    """Makes a C identifier usable as a Rust identifier."""
    if name in RUST_NON_RAW_KEYWORDS:
        return f"{name}_"
    if name in RUST_KEYWORDS:
        return f"r#{name}"
    return name

def to_pascal_case(name):
    """'arc' -> 'Arc', 'drop_down' -> 'DropDown'"""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)
