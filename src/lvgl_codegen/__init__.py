from .api_parser import CodeGenError, load_function_definitions
from .generator import CodeGen
from .lv_model import LvArg, LvFunc, LvType, LvWidget
from .widgets import extract_widgets, get_widget_names

__version__ = "0.2.1"
