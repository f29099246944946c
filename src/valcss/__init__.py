"""valcss -- compile utility class names found in markup into CSS."""

__version__ = "0.1.0"

from valcss.compiler import CompileContext, CompileResult, Compiler, compile_class, escape_class  # noqa: E402
from valcss.cssmath import normalize_calc_expression, normalize_css_math  # noqa: E402
from valcss.extraction import BuildResult, extract_classes, generate_css  # noqa: E402
from valcss.model import Diagnostic, ParsedClass, Severity  # noqa: E402
from valcss.parser import parse_class_string  # noqa: E402
from valcss.plugins import PluginAPI, PluginUtility, UtilityRegistry  # noqa: E402

__all__ = [
    "__version__",
    # compiler
    "CompileContext",
    "CompileResult",
    "Compiler",
    "compile_class",
    "escape_class",
    # math
    "normalize_calc_expression",
    "normalize_css_math",
    # extraction
    "BuildResult",
    "extract_classes",
    "generate_css",
    # model
    "Diagnostic",
    "ParsedClass",
    "Severity",
    "parse_class_string",
    # plugins
    "PluginAPI",
    "PluginUtility",
    "UtilityRegistry",
]
