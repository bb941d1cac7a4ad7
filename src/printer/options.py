"""
Formatting profiles for the stylesheet printer.

A profile is the (indent unit, line break, rule set layout) triple. `PRETTY`
produces indented multi-line output; `MINIFIED` drops every insignificant
newline while keeping the single spaces the grammar needs between words.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PrintOptions:
    indent_unit: str = "  "
    line_break: str = "\n"
    compact_rule_sets: bool = False

    @classmethod
    def for_profile(cls, name: str) -> "PrintOptions":
        """Return the named profile (`"pretty"` or `"minified"`)."""
        try:
            return _PROFILES[name]
        except KeyError:
            raise ValueError(
                f"Unknown print profile {name!r}; expected one of {sorted(_PROFILES)}"
            ) from None


@dataclass(frozen=True)
class PrintResult:
    css: str
    diagnostics: List[str] = field(default_factory=list)


PRETTY = PrintOptions()
MINIFIED = PrintOptions(indent_unit=" ", line_break="", compact_rule_sets=True)

_PROFILES = {"pretty": PRETTY, "minified": MINIFIED}


__all__ = ["MINIFIED", "PRETTY", "PrintOptions", "PrintResult"]
