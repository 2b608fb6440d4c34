"""Assemble a selector from a flat list of ``kind=value`` and combinator tokens.

Example tokens::

    ["element=div", "id=main", "+", "element=table", "pseudo-class=hover"]

produce ``div#main + table:hover``. The word ``descendant`` stands for the
single-space combinator, which is awkward to pass on a command line.
"""

from __future__ import annotations

from typing import Iterable

from selector_builder.config import BuilderConfig
from selector_builder.errors import PartSyntaxError
from selector_builder.model import FragmentKind
from selector_builder.selector import Selector

__all__ = ["build_from_parts", "KIND_NAMES"]

KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

_DESCENDANT = "descendant"


def build_from_parts(
    tokens: Iterable[str], config: BuilderConfig | None = None
) -> Selector:
    """Build a Selector from part tokens, validating as each one is appended."""
    config = config or BuilderConfig()
    selector = Selector()
    pending: str | None = None

    for token in tokens:
        combinator = " " if token == _DESCENDANT else token
        if combinator in config.combinators:
            if not selector.parts or pending is not None:
                raise PartSyntaxError(
                    f"Combinator {token!r} must follow a selector", token=token
                )
            pending = combinator
            continue

        name, sep, value = token.partition("=")
        kind = KIND_NAMES.get(name)
        if not sep or kind is None or not value:
            raise PartSyntaxError(f"Invalid selector part: {token!r}", token=token)

        if pending is not None:
            selector = selector.combine(pending, Selector())
            pending = None
        selector = selector.append(kind, value)

    if not selector.parts:
        raise PartSyntaxError("No selector parts given")
    if pending is not None:
        raise PartSyntaxError(f"Dangling combinator {pending!r}", token=pending)
    return selector
