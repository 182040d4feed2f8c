"""Fragment ordering and uniqueness checks for compound selectors.

A fragment of kind C may be appended only while no fragment of a greater
rank is present. Element, id and pseudo-element hold a single slot each.
"""

from __future__ import annotations

import dataclasses

from selector_builder.errors import (
    CombinedSelectorError,
    DuplicateError,
    OrderError,
)
from selector_builder.model import FragmentKind, Selector

__all__ = ["append", "check_append", "present_kinds"]

_FIELDS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "element_name",
    FragmentKind.ID: "id_name",
    FragmentKind.CLASS: "classes",
    FragmentKind.ATTRIBUTE: "attributes",
    FragmentKind.PSEUDO_CLASS: "pseudo_classes",
    FragmentKind.PSEUDO_ELEMENT: "pseudo_element_name",
}


def _is_present(selector: Selector, kind: FragmentKind) -> bool:
    value = getattr(selector, _FIELDS[kind])
    if kind.singleton:
        return value is not None
    return len(value) > 0


def present_kinds(selector: Selector) -> list[FragmentKind]:
    """Return the kinds held by ``selector``, in rank order."""
    return [kind for kind in FragmentKind if _is_present(selector, kind)]


def check_append(selector: Selector, kind: FragmentKind) -> None:
    """Raise if a ``kind`` fragment may not be appended to ``selector``.

    The order check runs before the duplicate check, so a fragment that is
    both misplaced and repeated raises OrderError.
    """
    if selector.is_composite:
        raise CombinedSelectorError(kind)
    if any(held.rank > kind.rank for held in present_kinds(selector)):
        raise OrderError(kind)
    if kind.singleton and _is_present(selector, kind):
        raise DuplicateError(kind)


def append(selector: Selector, kind: FragmentKind, value: str) -> Selector:
    """Validate and return a new Selector with ``value`` added as ``kind``."""
    check_append(selector, kind)
    field = _FIELDS[kind]
    if kind.singleton:
        return dataclasses.replace(selector, **{field: value})
    held = getattr(selector, field)
    return dataclasses.replace(selector, **{field: held + (value,)})
