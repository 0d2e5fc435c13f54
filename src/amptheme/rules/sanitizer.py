"""Core theme sanitizer — runs the resolved rules for each phase.

Two entry points per document:

* :meth:`CoreThemeSanitizer.add_buffering_hooks` — before the document is
  rendered; pre-parse rules register their hooks.
* :meth:`CoreThemeSanitizer.sanitize` — after parsing; post-parse rules
  mutate the tree. Aborts without changes when there is no ``<body>``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from amptheme.domain.types import Phase
from amptheme.infrastructure.dom import find_body
from amptheme.rules.context import BufferingContext, DocumentContext
from amptheme.rules.registry import DEFAULT_REGISTRY, FeatureRegistry
from amptheme.rules.resolver import resolve

if TYPE_CHECKING:
    from lxml.html import HtmlElement

    from amptheme.config.models import RuntimeConfig
    from amptheme.infrastructure.hooks import HookRegistry
    from amptheme.infrastructure.host import ThemeHost

logger = logging.getLogger(__name__)


class CoreThemeSanitizer:
    """Fixes up core theme markup to work without scripts.

    Usage::

        CoreThemeSanitizer.add_buffering_hooks(config, hooks, host)
        ...  # host renders and parses the document
        CoreThemeSanitizer(root, config).sanitize()
    """

    def __init__(
        self,
        root: HtmlElement,
        config: RuntimeConfig,
        *,
        registry: FeatureRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._root = root
        self._config = config
        self._registry = registry

    @classmethod
    def add_buffering_hooks(
        cls,
        config: RuntimeConfig,
        hooks: HookRegistry,
        host: ThemeHost,
        *,
        registry: FeatureRegistry = DEFAULT_REGISTRY,
    ) -> list[str]:
        """Run pre-parse rules against *hooks*. Returns the rule names run."""
        ctx = BufferingContext(config, registry, hooks=hooks, host=host)
        rules = resolve(
            config.theme_candidates, config.explicit_rules, Phase.PRE_PARSE, registry=registry
        )
        for rule in rules:
            logger.debug("Registering pre-parse rule %s", rule.name)
            rule.spec.executor(ctx, rule.params)
        return [rule.name for rule in rules]

    def sanitize(self) -> list[str]:
        """Run post-parse rules against the tree. Returns the rule names run."""
        body = find_body(self._root)
        if body is None:
            logger.debug("No body element; skipping post-parse rules")
            return []

        ctx = DocumentContext(self._config, self._registry, root=self._root, body=body)
        rules = resolve(
            self._config.theme_candidates,
            self._config.explicit_rules,
            Phase.POST_PARSE,
            registry=self._registry,
        )
        for rule in rules:
            logger.debug("Applying post-parse rule %s", rule.name)
            rule.spec.executor(ctx, rule.params)
        return [rule.name for rule in rules]
