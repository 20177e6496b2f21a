from __future__ import annotations

import enum
from types import MappingProxyType


class ComponentKind(enum.IntEnum):
    # Values are the canonical position inside a compound selector
    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_KINDS


class Combinator(enum.Enum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


_LABELS = MappingProxyType(
    {
        ComponentKind.ELEMENT: "element",
        ComponentKind.ID: "id",
        ComponentKind.CLASS: "class",
        ComponentKind.ATTRIBUTE: "attribute",
        ComponentKind.PSEUDO_CLASS: "pseudo-class",
        ComponentKind.PSEUDO_ELEMENT: "pseudo-element",
    }
)

# (prefix, suffix) wrapped around the raw value
_PUNCTUATION = MappingProxyType(
    {
        ComponentKind.ELEMENT: ("", ""),
        ComponentKind.ID: ("#", ""),
        ComponentKind.CLASS: (".", ""),
        ComponentKind.ATTRIBUTE: ("[", "]"),
        ComponentKind.PSEUDO_CLASS: (":", ""),
        ComponentKind.PSEUDO_ELEMENT: ("::", ""),
    }
)

SINGLETON_KINDS: frozenset[ComponentKind] = frozenset(
    (ComponentKind.ELEMENT, ComponentKind.ID, ComponentKind.PSEUDO_ELEMENT)
)

COMBINATORS: frozenset[str] = frozenset(c.value for c in Combinator)

CANONICAL_ORDER: str = ", ".join(kind.label for kind in ComponentKind)


def format_component(kind: ComponentKind, value: str) -> str:
    """Wrap a raw value in the punctuation for its component kind."""
    prefix, suffix = _PUNCTUATION[kind]
    return f"{prefix}{value}{suffix}"
