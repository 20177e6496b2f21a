"""Entry points for building CSS selectors.

Every factory starts a new chain from the empty fragment::

    >>> from cssbuilder import builder
    >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'

Fragments expose the same methods, so a chain continues on whatever the
previous call returned. Nothing here holds state between calls.
"""

from __future__ import annotations

from .fragment import SelectorFragment, combine

__all__ = [
    "EMPTY",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
    "stringify",
]

# Initial fragment: empty text, no component kinds
EMPTY: SelectorFragment = SelectorFragment()

# Builder and fragment share one interface
css_selector_builder: SelectorFragment = EMPTY


def element(value: str) -> SelectorFragment:
    return EMPTY.element(value)


def id(value: str) -> SelectorFragment:  # noqa: A001
    return EMPTY.id(value)


def class_(value: str) -> SelectorFragment:
    return EMPTY.class_(value)


def attr(value: str) -> SelectorFragment:
    return EMPTY.attr(value)


def pseudo_class(value: str) -> SelectorFragment:
    return EMPTY.pseudo_class(value)


def pseudo_element(value: str) -> SelectorFragment:
    return EMPTY.pseudo_element(value)


def stringify(fragment: SelectorFragment) -> str:
    """Return the accumulated selector text ("" for the empty fragment)."""
    return fragment.stringify()
