"""
SAC-style selector model.

A small value hierarchy describing how a selector matches: any node, an
element by local name, or a base selector narrowed by a condition. The types
only expose their kind and parts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SelectorType(str, Enum):
    ANY_NODE = "SAC_ANY_NODE_SELECTOR"
    ELEMENT_NODE = "SAC_ELEMENT_NODE_SELECTOR"
    CONDITIONAL = "SAC_CONDITIONAL_SELECTOR"


@dataclass(frozen=True)
class NodeSelector:
    @property
    def selector_type(self) -> SelectorType:
        return SelectorType.ANY_NODE


@dataclass(frozen=True)
class ElementSelector(NodeSelector):
    local_name: str

    @property
    def name(self) -> str:
        return self.local_name

    @property
    def selector_type(self) -> SelectorType:
        return SelectorType.ELEMENT_NODE


@dataclass(frozen=True)
class ConditionalSelector(NodeSelector):
    """`simple_selector` narrowed by `condition` (an id, class, attribute...)."""

    simple_selector: NodeSelector
    condition: Any

    @property
    def selector(self) -> NodeSelector:
        return self.simple_selector

    @property
    def selector_type(self) -> SelectorType:
        return SelectorType.CONDITIONAL


__all__ = ["ConditionalSelector", "ElementSelector", "NodeSelector", "SelectorType"]
