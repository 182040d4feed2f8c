"""Stateless facade for building CSS selectors.

Usage:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # => '#main.container.editable'

Each entry point starts from an empty Selector, so independent chains never
share state.
"""

from __future__ import annotations

from selector_builder.model import Combinator, Selector
from selector_builder.render import stringify as render_selector

__all__ = ["SelectorBuilder", "css_selector_builder"]

_EMPTY = Selector()


class SelectorBuilder:
    """Entry points that start new selector chains."""

    def element(self, name: str) -> Selector:
        return _EMPTY.element(name)

    def id(self, name: str) -> Selector:
        return _EMPTY.id(name)

    def class_(self, name: str) -> Selector:
        return _EMPTY.class_(name)

    def attr(self, expr: str) -> Selector:
        return _EMPTY.attr(expr)

    def pseudo_class(self, expr: str) -> Selector:
        return _EMPTY.pseudo_class(expr)

    def pseudo_element(self, expr: str) -> Selector:
        return _EMPTY.pseudo_element(expr)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        return Selector.combined(left, combinator, right)

    def stringify(self, selector: Selector) -> str:
        return render_selector(selector)


css_selector_builder = SelectorBuilder()
