"""Selector builder error types."""

from __future__ import annotations

from selector_builder.model import FragmentKind


class SelectorError(Exception):
    """Base error for all selector_builder errors."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when a second element, id or pseudo-element is appended."""

    def __init__(self, kind: FragmentKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )


class SelectorOrderError(SelectorError):
    """Raised when a fragment is appended after a higher-ranked one."""

    def __init__(
        self,
        kind: FragmentKind,
        previous: FragmentKind,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.previous = previous
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element"
        )


class PartSyntaxError(SelectorError):
    """Raised when a selector part token cannot be understood."""

    def __init__(self, message: str, token: str = "") -> None:
        self.token = token
        super().__init__(message)
