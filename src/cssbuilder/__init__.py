from __future__ import annotations

from .builder import EMPTY, attr, class_, combine, css_selector_builder, element, id, pseudo_class, pseudo_element, stringify
from .errors import (
    DuplicateSingletonComponentError,
    OutOfOrderComponentError,
    SelectorBuildError,
    UnsupportedOperationError,
)
from .fragment import SelectorFragment, append_component
from .kinds import COMBINATORS, Combinator, ComponentKind

__all__ = [
    "COMBINATORS",
    "EMPTY",
    "Combinator",
    "ComponentKind",
    "DuplicateSingletonComponentError",
    "OutOfOrderComponentError",
    "SelectorBuildError",
    "SelectorFragment",
    "UnsupportedOperationError",
    "append_component",
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
