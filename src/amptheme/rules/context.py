"""Per-document state handed to rule executors.

A fresh context is built for every document; nothing here outlives the
pass that created it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from amptheme.domain.theme_config import get_theme_config

if TYPE_CHECKING:
    from lxml.html import HtmlElement

    from amptheme.config.models import RuntimeConfig
    from amptheme.infrastructure.hooks import HookRegistry
    from amptheme.infrastructure.host import ThemeHost
    from amptheme.rules.registry import FeatureRegistry


@dataclass
class SequenceCounter:
    """Monotonic counter scoped to one rendering pass."""

    value: int = 0

    def next(self) -> int:
        self.value += 1
        return self.value

    def reset(self) -> None:
        self.value = 0


@dataclass
class _RuleContext:
    config: RuntimeConfig
    registry: FeatureRegistry

    @property
    def template(self) -> str:
        return self.config.template

    def theme_config(self) -> dict[str, Any]:
        """Defaults for the current template, including plugin-provided themes."""
        return get_theme_config(self.template, self.registry.theme_configs)


@dataclass
class BufferingContext(_RuleContext):
    """Context for pre-parse rules: they only register hooks."""

    hooks: HookRegistry = field(kw_only=True)
    host: ThemeHost = field(kw_only=True)
    nav_item_counter: SequenceCounter = field(default_factory=SequenceCounter, kw_only=True)


@dataclass
class DocumentContext(_RuleContext):
    """Context for post-parse rules: the parsed tree and its body."""

    root: HtmlElement = field(kw_only=True)
    body: HtmlElement = field(kw_only=True)
