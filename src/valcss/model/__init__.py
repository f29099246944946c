"""valcss model layer -- public type re-exports."""

from valcss.model.diagnostic import Diagnostic, Severity, warning
from valcss.model.parsed import ParsedClass

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    "warning",
    # parsed class
    "ParsedClass",
]
