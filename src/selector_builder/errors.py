"""Error hierarchy for the selector builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model import FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.message = message
        self.kind = kind
        super().__init__(message)


class OrderError(SelectorError):
    """A fragment was appended after a later-ranked fragment."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(ORDER_MESSAGE, kind=kind)


class DuplicateError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(DUPLICATE_MESSAGE, kind=kind)


class InvalidCombinatorError(SelectorError):
    """``combine`` received a symbol that is not a CSS combinator."""

    def __init__(self, combinator: object, accepted: tuple[str, ...]):
        self.combinator = combinator
        self.accepted = accepted
        choices = ", ".join(repr(symbol) for symbol in accepted)
        super().__init__(
            f"Invalid combinator {combinator!r}; expected one of {choices}"
        )


class CombinedSelectorError(SelectorError):
    """A simple fragment was appended to a combinator node."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(
            "Fragments cannot be appended to a combined selector", kind=kind
        )
