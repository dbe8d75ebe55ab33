# Selector fragments: the typed tokens a built selector is made of

from __future__ import annotations


class FragmentKind:
    ELEMENT: str = "element"  # div, a, etc.
    ID: str = "id"  # #main
    CLASS: str = "class"  # .container
    ATTRIBUTE: str = "attribute"  # [href$=".png"]
    PSEUDO_CLASS: str = "pseudo-class"  # :focus
    PSEUDO_ELEMENT: str = "pseudo-element"  # ::before
    COMBINATOR: str = "combinator"  # >, +, ~, or " " (descendant)


# Position of each simple selector kind inside a compound selector
RANKS: dict[str, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

# Kinds that may occur at most once per selector
SINGLETON_KINDS: frozenset[str] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT},
)

_ALL_KINDS: frozenset[str] = frozenset(RANKS) | {FragmentKind.COMBINATOR}

# (prefix, suffix) wrapped around the fragment text when rendering
_DECORATIONS: dict[str, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
    FragmentKind.COMBINATOR: (" ", " "),
}


class Fragment:
    """One typed token of a selector: a kind plus its literal text."""

    __slots__ = ("kind", "text")

    kind: str
    text: str

    def __init__(self, kind: str, text: str) -> None:
        if kind not in _ALL_KINDS:
            raise ValueError(f"Unknown fragment kind: {kind!r}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "text", text)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Fragment({self.kind!r}, {self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fragment):
            return NotImplemented
        return self.kind == other.kind and self.text == other.text

    def __hash__(self) -> int:
        return hash((self.kind, self.text))

    @property
    def is_combinator(self) -> bool:
        return self.kind == FragmentKind.COMBINATOR

    @property
    def rank(self) -> int | None:
        """Ordering position inside a compound selector; None for combinators."""
        return RANKS.get(self.kind)


def render_fragment(fragment: Fragment) -> str:
    prefix, suffix = _DECORATIONS[fragment.kind]
    return f"{prefix}{fragment.text}{suffix}"
