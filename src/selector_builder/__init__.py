"""selector_builder: build CSS compound and complex selector strings."""
from __future__ import annotations

from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.errors import (
    CombinedSelectorError,
    DuplicateError,
    InvalidCombinatorError,
    OrderError,
    SelectorError,
)
from selector_builder.model import Combinator, FragmentKind, Selector
from selector_builder.render import stringify

__version__ = "0.1.0"

__all__ = [
    "Combinator",
    "CombinedSelectorError",
    "DuplicateError",
    "FragmentKind",
    "InvalidCombinatorError",
    "OrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "stringify",
]
