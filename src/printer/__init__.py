"""Render stylesheet ASTs as pretty-printed or minified CSS text."""

from .core import CSSPrinter, PrintError, print_document, to_css, to_minified_css
from .options import MINIFIED, PRETTY, PrintOptions, PrintResult

__all__ = [
    "CSSPrinter",
    "MINIFIED",
    "PRETTY",
    "PrintError",
    "PrintOptions",
    "PrintResult",
    "print_document",
    "to_css",
    "to_minified_css",
]
