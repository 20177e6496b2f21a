#!/usr/bin/env python3
"""Command-line interface for cssbuilder."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .builder import EMPTY, combine
from .errors import SelectorBuildError
from .fragment import SelectorFragment, append_component
from .kinds import COMBINATORS, ComponentKind

logger = logging.getLogger("cssbuilder")

_COMBINATOR_NAMES = {
    "descendant": " ",
    "child": ">",
    "adjacent-sibling": "+",
    "general-sibling": "~",
}


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


class _AppendStep(argparse.Action):
    """Record each component or combinator in command-line order."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        steps = list(getattr(namespace, "steps", None) or [])
        steps.append((self.const, values))
        namespace.steps = steps


def _combinator_token(value: str) -> str:
    if value in COMBINATORS:
        return value
    if value in _COMBINATOR_NAMES:
        return _COMBINATOR_NAMES[value]
    names = ", ".join(sorted(_COMBINATOR_NAMES))
    raise argparse.ArgumentTypeError(f"invalid combinator {value!r} (choose from {names}, or ' ', '>', '+', '~')")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from components given in order.",
        epilog=(
            "Examples:\n"
            "  cssbuilder -i main -c container -c editable\n"
            "  cssbuilder -e a -a 'href$=\".png\"' -p focus\n"
            "  cssbuilder -e table -i data -j general-sibling -e tr -p 'nth-of-type(even)'\n"
            "\n"
            "If you don't have the 'cssbuilder' command available, use:\n"
            "  python -m cssbuilder ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.set_defaults(steps=[])

    components = [
        ("-e", "--element", ComponentKind.ELEMENT, "Element (type) selector, e.g. div"),
        ("-i", "--id", ComponentKind.ID, "Id selector without the leading #"),
        ("-c", "--class", ComponentKind.CLASS, "Class selector without the leading ."),
        ("-a", "--attr", ComponentKind.ATTRIBUTE, "Attribute selector body without the brackets"),
        ("-p", "--pseudo-class", ComponentKind.PSEUDO_CLASS, "Pseudo-class without the leading :"),
        ("-P", "--pseudo-element", ComponentKind.PSEUDO_ELEMENT, "Pseudo-element without the leading ::"),
    ]
    for short, long, kind, help_text in components:
        parser.add_argument(
            short,
            long,
            action=_AppendStep,
            const=kind,
            metavar="VALUE",
            help=help_text,
        )

    parser.add_argument(
        "-j",
        "--combinator",
        action=_AppendStep,
        const=None,
        type=_combinator_token,
        metavar="TOKEN",
        help="Finish the current compound selector and start the next one "
        "(descendant, child, adjacent-sibling, general-sibling)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log build steps to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cssbuilder {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.steps:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    problem = _misplaced_combinator(args.steps)
    if problem:
        parser.error(problem)

    return args


def _misplaced_combinator(steps: list[tuple[ComponentKind | None, str]]) -> str | None:
    # Each combinator needs a compound selector on both sides
    previous: ComponentKind | None = None
    for index, (kind, _) in enumerate(steps):
        if kind is None:
            if index == 0:
                return "a combinator needs a component before it"
            if previous is None:
                return "two combinators in a row; add a component between them"
        previous = kind
    if steps and steps[-1][0] is None:
        return "a combinator needs a component after it"
    return None


def build(steps: list[tuple[ComponentKind | None, str]]) -> SelectorFragment:
    """Fold recorded steps into one fragment.

    A step with kind ``None`` is a combinator: everything built so far becomes
    the left operand and a fresh compound selector starts on the right.
    """
    left: SelectorFragment | None = None
    pending: str | None = None
    current = EMPTY

    for kind, value in steps:
        if kind is None:
            left = current if left is None else combine(left, pending or " ", current)
            pending = value
            current = EMPTY
            continue
        current = append_component(current, kind, value)
        logger.debug("Appended %s %r", kind.label, value)

    if left is None:
        return current
    return combine(left, pending or " ", current)


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        selector = build(args.steps)
    except SelectorBuildError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(selector.stringify())
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
