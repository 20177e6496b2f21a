"""Error types and message definitions for selector building.

Every error is raised synchronously by the append call that would break a
selector rule. No fragment is returned in that case, so a caller never holds
a half-built selector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .kinds import CANONICAL_ORDER

if TYPE_CHECKING:
    from .kinds import ComponentKind


def generate_error_message(
    code: str,
    kind: ComponentKind | None = None,
    after: ComponentKind | None = None,
) -> str:
    """Generate a human-readable error message from an error code.

    Args:
        code: The error code string (kebab-case format)
        kind: The component kind being appended, if any
        after: The already-present component kind the append conflicts with

    Returns:
        Human-readable error message string
    """
    kind_label = kind.label if kind is not None else "component"
    after_label = after.label if after is not None else "component"

    messages = {
        "duplicate-singleton-component": (
            "Element, id and pseudo-element should not occur more than one time inside the selector"
            f" (duplicate {kind_label})"
        ),
        "out-of-order-component": (
            f"Selector parts should be arranged in the following order: {CANONICAL_ORDER}"
            f" ({kind_label} cannot follow {after_label})"
        ),
        "append-after-combine": (
            f"Cannot append {kind_label} to a combined selector; build each side before combining"
        ),
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class SelectorBuildError(ValueError):
    """Base class for errors raised while building a selector."""

    code: str = "selector-build-error"

    def __init__(
        self,
        kind: ComponentKind | None = None,
        after: ComponentKind | None = None,
    ) -> None:
        self.kind = kind
        self.after = after
        super().__init__(generate_error_message(self.code, kind=kind, after=after))


class DuplicateSingletonComponentError(SelectorBuildError):
    """Raised when element, id or pseudo-element is appended a second time."""

    code = "duplicate-singleton-component"


class OutOfOrderComponentError(SelectorBuildError):
    """Raised when a component would follow one that must come after it."""

    code = "out-of-order-component"


class UnsupportedOperationError(SelectorBuildError):
    """Raised when a component is appended to a combined selector."""

    code = "append-after-combine"
