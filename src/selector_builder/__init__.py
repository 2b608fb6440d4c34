"""selector_builder: compose CSS selector strings from ordered parts."""

from __future__ import annotations

__version__ = "0.1.0"

from selector_builder.builder import CssSelectorBuilder, css_selector_builder  # noqa: E402
from selector_builder.config import BuilderConfig  # noqa: E402
from selector_builder.errors import (  # noqa: E402
    DuplicateSelectorPartError,
    PartSyntaxError,
    SelectorError,
    SelectorOrderError,
)
from selector_builder.model import Fragment, FragmentKind  # noqa: E402
from selector_builder.objects import Rectangle, from_json, get_json  # noqa: E402
from selector_builder.parts import build_from_parts  # noqa: E402
from selector_builder.selector import Selector  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "CssSelectorBuilder",
    "css_selector_builder",
    "Selector",
    "build_from_parts",
    # model
    "Fragment",
    "FragmentKind",
    # errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "PartSyntaxError",
    # objects
    "Rectangle",
    "get_json",
    "from_json",
    # config
    "BuilderConfig",
]
