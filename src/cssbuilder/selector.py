# CSS selector builder for cssbuilder
# Assembles selector strings from chained calls; does not parse or match selectors

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import DUPLICATE_FRAGMENT, FRAGMENT_OUT_OF_ORDER, generate_error_message
from .fragments import RANKS, SINGLETON_KINDS, Fragment, FragmentKind, render_fragment

logger = logging.getLogger(__name__)

# Descendant, adjacent sibling, general sibling, child
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class SelectorError(ValueError):
    """Raised when a selector would become invalid."""

    code: str
    kind: str | None

    def __init__(self, code: str, kind: str | None = None) -> None:
        self.code = code
        self.kind = kind
        super().__init__(generate_error_message(code, kind))


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: str) -> None:
        super().__init__(DUPLICATE_FRAGMENT, kind)


class OutOfOrderError(SelectorError):
    """Raised when a fragment ranks lower than the fragment before it."""

    previous_kind: str

    def __init__(self, kind: str, previous_kind: str) -> None:
        self.previous_kind = previous_kind
        super().__init__(FRAGMENT_OUT_OF_ORDER, kind)


def _check_duplicates(fragments: Iterable[Fragment], kind: str) -> None:
    if kind in SINGLETON_KINDS and any(fragment.kind == kind for fragment in fragments):
        logger.debug("Rejected second %s fragment", kind)
        raise DuplicateFragmentError(kind)


def _rank(fragment: Fragment) -> int:
    # Combinators rank below every kind, so nothing may directly precede one
    return RANKS.get(fragment.kind, -1)


def _check_order(fragments: tuple[Fragment, ...]) -> None:
    for previous, current in zip(fragments, fragments[1:]):
        if _rank(previous) > _rank(current):
            logger.debug("Rejected %s fragment after %s fragment", current.kind, previous.kind)
            raise OutOfOrderError(current.kind, previous.kind)


class Selector:
    """An immutable, ordered sequence of selector fragments.

    Every appending method returns a new Selector and leaves this one
    untouched, so a Selector can safely be the prefix of several chains::

        base = builder.element("a")
        base.class_("external").stringify()  # 'a.external'
        base.pseudo_class("hover").stringify()  # 'a:hover'
    """

    __slots__ = ("fragments",)

    fragments: tuple[Fragment, ...]

    def __init__(self, fragments: Iterable[Fragment] = ()) -> None:
        # Same rules as appending the fragments one by one
        fragments = tuple(fragments)
        for index, fragment in enumerate(fragments):
            _check_duplicates(fragments[:index], fragment.kind)
        _check_order(fragments)
        object.__setattr__(self, "fragments", fragments)

    @classmethod
    def _from_fragments(cls, fragments: tuple[Fragment, ...]) -> Selector:
        # Callers are responsible for validation
        selector = cls.__new__(cls)
        object.__setattr__(selector, "fragments", fragments)
        return selector

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    def __str__(self) -> str:
        return self.stringify()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self.fragments == other.fragments

    def __hash__(self) -> int:
        return hash(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def _append(self, kind: str, text: str) -> Selector:
        # Duplicates are checked against the incoming kind before the sequence
        # grows, so they win over ordering problems.
        _check_duplicates(self.fragments, kind)

        fragments = (*self.fragments, Fragment(kind, text))
        _check_order(fragments)
        return Selector._from_fragments(fragments)

    def element(self, text: str) -> Selector:
        return self._append(FragmentKind.ELEMENT, text)

    def id(self, text: str) -> Selector:
        return self._append(FragmentKind.ID, text)

    def class_(self, text: str) -> Selector:
        return self._append(FragmentKind.CLASS, text)

    def attr(self, text: str) -> Selector:
        return self._append(FragmentKind.ATTRIBUTE, text)

    def pseudo_class(self, text: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_CLASS, text)

    def pseudo_element(self, text: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_ELEMENT, text)

    def combine(self, combinator: str, other: Selector) -> Selector:
        """Join this selector and ``other`` with ``combinator`` between them."""
        return combine(self, combinator, other)

    def stringify(self) -> str:
        return "".join(render_fragment(fragment) for fragment in self.fragments)


class SelectorBuilder:
    """Facade that starts every chain from an empty selector.

    Example:
        >>> builder.id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
        >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
    """

    __slots__ = ()

    def element(self, text: str) -> Selector:
        return _EMPTY.element(text)

    def id(self, text: str) -> Selector:
        return _EMPTY.id(text)

    def class_(self, text: str) -> Selector:
        return _EMPTY.class_(text)

    def attr(self, text: str) -> Selector:
        return _EMPTY.attr(text)

    def pseudo_class(self, text: str) -> Selector:
        return _EMPTY.pseudo_class(text)

    def pseudo_element(self, text: str) -> Selector:
        return _EMPTY.pseudo_element(text)

    def combine(self, selector1: Selector, combinator: str, selector2: Selector) -> Selector:
        return combine(selector1, combinator, selector2)

    def stringify(self, selector: Selector | None = None) -> str:
        return stringify(selector if selector is not None else _EMPTY)


_EMPTY: Selector = Selector()


def combine(selector1: Selector, combinator: str, selector2: Selector) -> Selector:
    """
    Combine two selectors with a combinator token between them.

    The combinator is normally one of ``COMBINATORS`` but is used verbatim
    whatever it is. The fragments after the combinator form a new compound
    selector, so the merged result is not validated again. Appending to the
    result still checks the whole sequence, so it fails once the left side
    is non-empty.

    Args:
        selector1: The selector on the left of the combinator
        combinator: The combinator token
        selector2: The selector on the right of the combinator

    Returns:
        A new Selector; neither input is modified
    """
    fragments = (
        *selector1.fragments,
        Fragment(FragmentKind.COMBINATOR, combinator),
        *selector2.fragments,
    )
    return Selector._from_fragments(fragments)


def stringify(selector: Selector) -> str:
    """Render a selector to its canonical string; the empty selector gives ''."""
    return selector.stringify()


# Global builder instance
builder: SelectorBuilder = SelectorBuilder()
