"""CSS templates as ordered fragments with named substitution points.

A template is a tuple of literal text and :class:`Slot` markers. Rendering
looks each slot up in the rule parameters and escapes the value, so the
output contract of a template can be inspected without rendering it.
"""

from __future__ import annotations

import html as _html
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple

_STYLE_TAG_RE = re.compile(r"</?style\b[^>]*>", re.IGNORECASE)


class Slot(NamedTuple):
    """Substitution point filled from rule parameters.

    Attributes:
        key: Parameter name to look up.
        prefix: Literal prepended to the value (``"."`` or ``"#"`` for selectors).
    """

    key: str
    prefix: str = ""


Fragment = str | Slot


class MissingSlotError(KeyError):
    """Raised when a template slot has no matching parameter."""


@dataclass(frozen=True)
class CssTemplate:
    """Ordered CSS fragments."""

    fragments: tuple[Fragment, ...]

    @property
    def slots(self) -> frozenset[str]:
        """Parameter keys this template needs."""
        return frozenset(f.key for f in self.fragments if isinstance(f, Slot))

    def render(self, params: Mapping[str, Any]) -> str:
        parts: list[str] = []
        for fragment in self.fragments:
            if isinstance(fragment, Slot):
                if fragment.key not in params:
                    msg = f"Template slot {fragment.key!r} has no parameter value"
                    raise MissingSlotError(msg)
                parts.append(_html.escape(f"{fragment.prefix}{params[fragment.key]}", quote=False))
            else:
                parts.append(fragment)
        return "".join(parts)

    def __add__(self, other: CssTemplate) -> CssTemplate:
        return CssTemplate(self.fragments + other.fragments)


def css(*fragments: Fragment) -> CssTemplate:
    """Shorthand constructor: ``css("a ", Slot("x", "."), " {}")``."""
    return CssTemplate(tuple(fragments))


def strip_style_tags(styles: str) -> str:
    """Remove any ``<style>`` / ``</style>`` wrapper before injection."""
    return _STYLE_TAG_RE.sub("", styles)
