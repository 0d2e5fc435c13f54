"""RewriteService — runs one document through both rule phases.

Plays the host pipeline around :class:`CoreThemeSanitizer` for static HTML:
hooks are registered before parsing, the rendering events are replayed
against the parsed tree, then the post-parse rules run.

INVARIANT: One HookRegistry and one BufferingContext per document.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lxml import etree, html

from amptheme.infrastructure.dom import (
    class_tokens,
    find_body,
    find_head,
    fragment_to_html,
    parse_document,
    replace_with_markup,
    serialize_document,
    source_doctype,
)
from amptheme.infrastructure.hooks import (
    BODY_CLASS,
    DOCUMENT_START,
    ENQUEUE_STYLES,
    NAV_MENU_ITEM_HTML,
    HookRegistry,
)
from amptheme.infrastructure.host import MenuItem
from amptheme.rules.executors import HAS_CHILDREN_CLASS
from amptheme.rules.registry import DEFAULT_REGISTRY, FeatureRegistry
from amptheme.rules.sanitizer import CoreThemeSanitizer
from amptheme.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from amptheme.config.models import RuntimeConfig
    from amptheme.infrastructure.host import StaticThemeHost

logger = logging.getLogger(__name__)

NO_BODY_WARNING = "Document has no body element; post-parse rules skipped"


class RewriteService:
    """Rewrite theme documents for one theme configuration.

    Parameters:
        config: Theme selection and explicit rules.
        host: Static host; collects injected styles per document.
        registry: Rule and theme tables (built-ins plus plugins).
    """

    def __init__(
        self,
        config: RuntimeConfig,
        host: StaticThemeHost,
        *,
        registry: FeatureRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._config = config
        self._host = host
        self._registry = registry

    def rewrite(self, markup: str) -> ServiceResult:
        """Rewrite a full HTML document."""
        op = "rewrite"
        warnings: list[str] = []

        self._host.styles.clear()
        hooks = HookRegistry()
        pre_rules = CoreThemeSanitizer.add_buffering_hooks(
            self._config, hooks, self._host, registry=self._registry
        )
        hooks.do_action(DOCUMENT_START)
        hooks.do_action(ENQUEUE_STYLES)

        try:
            root = parse_document(markup)
        except (etree.ParserError, etree.XMLSyntaxError) as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="EMPTY_DOCUMENT", message=str(exc)),
            )

        post_rules: list[str] = []
        body = find_body(root)
        if body is None:
            warnings.append(NO_BODY_WARNING)
        else:
            self._apply_body_class(body, hooks)
            items = self._render_nav_menu_items(root, hooks)
            logger.debug("Filtered %d nav menu items", items)
            self._append_styles(root)
            post_rules = CoreThemeSanitizer(root, self._config, registry=self._registry).sanitize()

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "html": serialize_document(root, source_doctype(markup)),
                "theme": str(self._config.theme),
                "template": str(self._config.template),
                "rules_applied": [*pre_rules, *post_rules],
                "styles": list(self._host.styles),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Rendering events
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_body_class(body: html.HtmlElement, hooks: HookRegistry) -> None:
        classes = class_tokens(body)
        filtered = hooks.apply_filters(BODY_CLASS, list(classes))
        if filtered != classes:
            body.set("class", " ".join(filtered))

    @staticmethod
    def _render_nav_menu_items(root: html.HtmlElement, hooks: HookRegistry) -> int:
        """Filter the leading link of every parent menu item. Returns items changed."""
        if not hooks.has(NAV_MENU_ITEM_HTML):
            return 0
        changed = 0
        for li in list(root.iter("li")):
            classes = class_tokens(li)
            if HAS_CHILDREN_CLASS not in classes:
                continue
            link = next((child for child in li if child.tag == "a"), None)
            if link is None:
                continue
            item_html = fragment_to_html(link)
            output = hooks.apply_filters(NAV_MENU_ITEM_HTML, item_html, MenuItem(tuple(classes)))
            if output != item_html:
                replace_with_markup(link, output)
                changed += 1
        return changed

    def _append_styles(self, root: html.HtmlElement) -> None:
        """Emit each injected stylesheet as ``<style id="<handle>-inline-css">``."""
        if not self._host.styles:
            return
        head = find_head(root)
        for handle, chunks in self._host.styles.items():
            style_el = html.Element("style", id=f"{handle}-inline-css")
            style_el.text = "\n".join(chunks)
            head.append(style_el)
