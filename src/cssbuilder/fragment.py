# Immutable selector fragments for cssbuilder
# Each append returns a new fragment and validates component order on the way

from __future__ import annotations

import logging
from typing import Any

from .errors import DuplicateSingletonComponentError, OutOfOrderComponentError, UnsupportedOperationError
from .kinds import Combinator, ComponentKind, format_component

logger = logging.getLogger(__name__)


class SelectorFragment:
    """A partially or fully built selector such as ``div#main.container``.

    Fragments never change after construction. ``element``, ``id``,
    ``class_``, ``attr``, ``pseudo_class`` and ``pseudo_element`` each return
    a new fragment, so one fragment can be the start of several chains.
    """

    __slots__ = ("combined", "parts", "text")

    text: str
    parts: tuple[tuple[ComponentKind, str], ...]
    combined: bool

    def __init__(
        self,
        text: str = "",
        parts: tuple[tuple[ComponentKind, str], ...] = (),
        combined: bool = False,
    ) -> None:
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "parts", tuple(parts))
        object.__setattr__(self, "combined", bool(combined))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def used_kinds(self) -> tuple[ComponentKind, ...]:
        return tuple(kind for kind, _ in self.parts)

    def element(self, value: str) -> SelectorFragment:
        return append_component(self, ComponentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorFragment:
        return append_component(self, ComponentKind.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return append_component(self, ComponentKind.CLASS, value)

    def attr(self, value: str) -> SelectorFragment:
        return append_component(self, ComponentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return append_component(self, ComponentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return append_component(self, ComponentKind.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(
        left: SelectorFragment,
        combinator: Combinator | str,
        right: SelectorFragment,
    ) -> SelectorFragment:
        return combine(left, combinator, right)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __bool__(self) -> bool:
        return bool(self.parts) or self.combined

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorFragment):
            return NotImplemented
        return self.text == other.text and self.parts == other.parts and self.combined == other.combined

    def __hash__(self) -> int:
        return hash((self.text, self.parts, self.combined))

    def __repr__(self) -> str:
        if self.combined:
            return f"SelectorFragment({self.text!r}, combined=True)"
        return f"SelectorFragment({self.text!r})"


def append_component(fragment: SelectorFragment, kind: ComponentKind, value: str) -> SelectorFragment:
    """Return a new fragment with one component appended.

    Raises:
        UnsupportedOperationError: fragment came from ``combine``
        DuplicateSingletonComponentError: element, id or pseudo-element is
            already present
        OutOfOrderComponentError: a component of a kind not yet present
            would follow one that must come later
    """
    if fragment.combined:
        logger.debug("Rejected %s after combine in %r", kind.label, fragment.text)
        raise UnsupportedOperationError(kind)

    used = fragment.used_kinds

    if kind.is_singleton and kind in used:
        logger.debug("Rejected duplicate %s in %r", kind.label, fragment.text)
        raise DuplicateSingletonComponentError(kind)

    # A repeated kind keeps its first position; a new kind may not precede any present one
    later = [] if kind in used else [present for present in used if present > kind]
    if later:
        after = max(later)
        logger.debug("Rejected %s after %s in %r", kind.label, after.label, fragment.text)
        raise OutOfOrderComponentError(kind, after)

    return SelectorFragment(
        fragment.text + format_component(kind, value),
        fragment.parts + ((kind, value),),
    )


def combine(left: SelectorFragment, combinator: Combinator | str, right: SelectorFragment) -> SelectorFragment:
    """Join two finished fragments with a combinator token.

    The token is not validated. The result carries no component kinds and
    rejects further appends.
    """
    token = combinator.value if isinstance(combinator, Combinator) else combinator
    text = f"{left.stringify()} {token} {right.stringify()}"
    logger.debug("Combined %r", text)
    return SelectorFragment(text, combined=True)
