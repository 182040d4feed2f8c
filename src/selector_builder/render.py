"""Render Selector values to CSS text."""

from __future__ import annotations

from selector_builder.model import Selector

__all__ = ["stringify"]


def _render_compound(selector: Selector) -> str:
    parts: list[str] = []
    if selector.element_name is not None:
        parts.append(selector.element_name)
    if selector.id_name is not None:
        parts.append(f"#{selector.id_name}")
    parts.extend(f".{name}" for name in selector.classes)
    parts.extend(f"[{expr}]" for expr in selector.attributes)
    parts.extend(f":{expr}" for expr in selector.pseudo_classes)
    if selector.pseudo_element_name is not None:
        parts.append(f"::{selector.pseudo_element_name}")
    return "".join(parts)


def stringify(selector: Selector) -> str:
    """Return the exact CSS text for ``selector``.

    A combinator node renders as ``left + " " + symbol + " " + right`` at
    every depth, so a nested descendant join yields three spaces.
    """
    if selector.composite is None:
        return _render_compound(selector)
    left, combinator, right = selector.composite
    return f"{stringify(left)} {combinator.value} {stringify(right)}"
