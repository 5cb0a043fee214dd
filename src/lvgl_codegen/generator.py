# generator.py
import argparse
import logging
import sys
from pathlib import Path

from .api_parser import CodeGenError, load_function_definitions
from .code_gen.rust_renderer import render_widgets_module
from .type_utils import LIB_PREFIX
from .widgets import extract_widgets

logger = logging.getLogger(__name__)


class CodeGen:
    """Loads the LVGL API once and keeps the functions and widgets found in it."""

    def __init__(self, tu_path, prefix=LIB_PREFIX, clang_args=None, require_separator=False):
        self.prefix = prefix
        self.functions = load_function_definitions(tu_path, prefix=prefix, clang_args=clang_args)
        self.widgets = extract_widgets(self.functions, prefix=prefix, require_separator=require_separator)

    @classmethod
    def from_functions(cls, functions, prefix=LIB_PREFIX, require_separator=False):
        """Builds the model from already loaded functions, without parsing."""
        codegen = cls.__new__(cls)
        codegen.prefix = prefix
        codegen.functions = list(functions)
        codegen.widgets = extract_widgets(codegen.functions, prefix=prefix, require_separator=require_separator)
        return codegen

    def get_widgets(self):
        return self.widgets

    def get_widget(self, name):
        for widget in self.widgets:
            if widget.name == name:
                return widget
        return None

    def get_function_names(self):
        return [f.name for f in self.functions]

    def generate(self):
        """Rust source of all generated widgets."""
        return render_widgets_module(self.widgets, prefix=self.prefix)


def main(argv=None):
    parser = argparse.ArgumentParser(description="LVGL Rust widget wrapper generator")
    parser.add_argument("-i", "--input", required=True, help="Preprocessed C file containing the whole LVGL API (lvgl_full.c).")
    parser.add_argument("-o", "--output", default=None, help="File to write the generated Rust code to. Defaults to stdout.")
    parser.add_argument("-I", dest="include_dirs", action="append", default=[], help="Include directory passed to clang.")
    parser.add_argument("-D", dest="defines", action="append", default=[], help="Preprocessor define passed to clang.")
    parser.add_argument("--prefix", default=LIB_PREFIX, help=f"Library function prefix (default: {LIB_PREFIX}).")
    parser.add_argument("--strict-widget-prefix", action="store_true",
                        help="Only assign functions named <prefix><widget>_... to a widget (avoids btn/btnmatrix over-matching).")
    parser.add_argument("--list-functions", action="store_true", help="Print the loaded function names and exit.")
    parser.add_argument("--list-widgets", action="store_true", help="Print the extracted widget names and exit.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='%(levelname)s: [%(filename)s:%(lineno)d] %(message)s')

    clang_args = [f"-I{d}" for d in args.include_dirs] + [f"-D{d}" for d in args.defines]
    try:
        codegen = CodeGen(args.input, prefix=args.prefix, clang_args=clang_args,
                          require_separator=args.strict_widget_prefix)
    except CodeGenError as e:
        logger.critical(f"{e}. Exiting.")
        return 1

    if args.list_functions:
        print("\n".join(codegen.get_function_names()))
        return 0
    if args.list_widgets:
        for widget in sorted(codegen.get_widgets(), key=lambda w: w.name):
            print(f"{widget.name} ({len(widget.methods)} functions)")
        return 0

    rust_code = codegen.generate()
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rust_code)
        logger.info(f"Wrote {output_path}")
    else:
        sys.stdout.write(rust_code)

    logger.info("Generation complete.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
