"""Selector model: fragment kinds, combinators, and the Selector value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from selector_builder.errors import InvalidCombinatorError


class FragmentKind(Enum):
    """Category of a compound-selector fragment, declared in CSS order.

    Rank follows declaration order:
        0 = element, 1 = id, 2 = class, 3 = attribute,
        4 = pseudo-class, 5 = pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return list(FragmentKind).index(self)

    @property
    def singleton(self) -> bool:
        """True for kinds that may occur at most once per compound selector."""
        return self in _SINGLETON_KINDS


_SINGLETON_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Combinator(Enum):
    """Structural relationship between two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def parse(cls, symbol: Combinator | str) -> Combinator:
        """Return the combinator for ``symbol`` or raise InvalidCombinatorError."""
        if isinstance(symbol, Combinator):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidCombinatorError(
                symbol, tuple(member.value for member in cls)
            ) from None


@dataclass(frozen=True)
class Selector:
    """An immutable compound selector, or a combinator node of two selectors.

    Every fluent method validates the new fragment against the fragments
    already held and returns a new Selector; the receiver is never changed.
    When ``composite`` is set the simple fields stay empty. Class names are
    appended with ``class_`` since ``class`` is a Python keyword.
    """

    element_name: str | None = None
    id_name: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_name: str | None = None
    composite: tuple[Selector, Combinator, Selector] | None = None

    @property
    def is_composite(self) -> bool:
        return self.composite is not None

    @property
    def highest_kind(self) -> FragmentKind | None:
        """The furthest fragment position reached so far, if any."""
        from selector_builder.accumulator import present_kinds

        kinds = present_kinds(self)
        return kinds[-1] if kinds else None

    # --- fluent appends -----------------------------------------------------

    def element(self, name: str) -> Selector:
        return self._append(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> Selector:
        return self._append(FragmentKind.ID, name)

    def class_(self, name: str) -> Selector:
        return self._append(FragmentKind.CLASS, name)

    def attr(self, expr: str) -> Selector:
        return self._append(FragmentKind.ATTRIBUTE, expr)

    def pseudo_class(self, expr: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_CLASS, expr)

    def pseudo_element(self, expr: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_ELEMENT, expr)

    def _append(self, kind: FragmentKind, value: str) -> Selector:
        from selector_builder.accumulator import append

        return append(self, kind, value)

    # --- combination and rendering --------------------------------------------

    @classmethod
    def combined(
        cls, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        """Build a combinator node joining ``left`` and ``right``."""
        symbol = Combinator.parse(combinator)
        for child in (left, right):
            if not isinstance(child, Selector):
                raise TypeError(
                    f"combine() expects Selector operands, got {type(child).__name__}"
                )
        return cls(composite=(left, symbol, right))

    def stringify(self) -> str:
        from selector_builder.render import stringify

        return stringify(self)

    def __str__(self) -> str:
        return self.stringify()
