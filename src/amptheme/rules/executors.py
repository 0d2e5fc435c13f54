"""Rule executors — one function per named rewrite rule.

Post-parse executors take a :class:`DocumentContext` and mutate the tree
in place. Pre-parse executors take a :class:`BufferingContext` and only
register hooks that the host fires later while rendering.

Executors are not idempotent: each runs once per document. A node that
cannot be found is a silent no-op so customized themes still render.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any

from lxml import html

from amptheme.domain.bindings import (
    StateBinding,
    apply_aria_expanded,
    apply_bound_attributes,
    apply_bound_text,
    create_state_element,
)
from amptheme.domain.css import MASTHEAD_STYLES, nav_menu_styles
from amptheme.domain.templates import CssTemplate, strip_style_tags
from amptheme.domain.theme_config import merge_rule_params
from amptheme.domain.types import Theme
from amptheme.infrastructure.dom import (
    append_markup,
    fragment_to_html,
    get_element_by_id,
    query_first,
    replace_class_token,
)
from amptheme.infrastructure.hooks import (
    BODY_CLASS,
    DOCUMENT_START,
    ENQUEUE_STYLES,
    NAV_MENU_ITEM_HTML,
)

if TYPE_CHECKING:
    from amptheme.infrastructure.host import MenuItem
    from amptheme.rules.context import BufferingContext, DocumentContext, SequenceCounter

logger = logging.getLogger(__name__)

ENQUEUE_PRIORITY = 11
NAV_MENU_STATE = "navMenuToggledOn"
NAV_MENU_ITEM_STATE_PREFIX = "navMenuItemExpanded"
HAS_CHILDREN_CLASS = "menu-item-has-children"
CURRENT_ANCESTOR_CLASS = "current-menu-ancestor"


# ---------------------------------------------------------------------------
# Post-parse
# ---------------------------------------------------------------------------


def force_svg_support(ctx: DocumentContext, params: dict[str, Any]) -> None:
    """Swap the root ``no-svg`` class token for ``svg``."""
    root = ctx.root
    current = root.get("class")
    if current is None:
        return
    updated = replace_class_token(current, "no-svg", "svg")
    if updated != current:
        root.set("class", updated)


def force_fixed_background_support(ctx: DocumentContext, params: dict[str, Any]) -> None:
    """Append ``background-fixed`` to the root class.

    Plain append: running twice adds the token twice.
    """
    root = ctx.root
    root.set("class", f"{root.get('class', '')} background-fixed")


def add_nav_menu_toggle(ctx: DocumentContext, params: dict[str, Any]) -> None:
    """Drive the nav container and its menu button from a ``navMenuToggledOn`` state."""
    args = merge_rule_params(ctx.theme_config(), params)

    nav_el = get_element_by_id(ctx.root, args["nav_container_id"])
    if nav_el is None or nav_el.getparent() is None:
        logger.debug("Nav container #%s not found", args["nav_container_id"])
        return

    button_el = query_first(ctx.root, args["menu_button_query"])
    if button_el is None:
        logger.debug("Menu button not found for query %r", args["menu_button_query"])
        return

    binding = StateBinding(NAV_MENU_STATE, initial=False)

    apply_bound_attributes(
        nav_el,
        binding,
        [binding.class_attribute(nav_el.get("class", ""), args["nav_container_toggle_class"])],
    )
    nav_el.addprevious(create_state_element(binding))

    button_el.set("on", binding.toggle_action())
    apply_aria_expanded(button_el, binding)
    apply_bound_attributes(
        button_el,
        binding,
        [binding.class_attribute(button_el.get("class", ""), args["menu_button_toggle_class"])],
    )


# ---------------------------------------------------------------------------
# Pre-parse
# ---------------------------------------------------------------------------


def add_has_header_video_body_class(ctx: BufferingContext, params: dict[str, Any]) -> None:
    """Add ``has-header-video`` to the body classes when the host has a header video."""
    args = merge_rule_params({"class_name": "has-header-video"}, params)
    host = ctx.host

    def filter_body_class(body_classes: list[str]) -> list[str]:
        if host.has_header_video():
            return [*body_classes, args["class_name"]]
        return body_classes

    ctx.hooks.add_filter(BODY_CLASS, filter_body_class)


def add_twentyseventeen_masthead_styles(ctx: BufferingContext, params: dict[str, Any]) -> None:
    """Position header media inside amp-img/amp-video wrappers."""
    _enqueue_styles(ctx, MASTHEAD_STYLES, params)


def add_nav_menu_styles(ctx: BufferingContext, params: dict[str, Any]) -> None:
    """No-js nav menu styles so the bound toggles show and hide menus."""
    args = merge_rule_params(ctx.theme_config(), params)
    _enqueue_styles(ctx, nav_menu_styles(ctx.template), args)


def add_nav_sub_menu_buttons(ctx: BufferingContext, params: dict[str, Any]) -> None:
    """Append a bound dropdown button to each nav item that has a sub-menu."""
    defaults = ctx.theme_config()
    if ctx.template == Theme.TWENTYSEVENTEEN:
        icon = ctx.host.get_theme_icon("angle-down")
        if icon:
            defaults["icon"] = icon
    args = merge_rule_params(defaults, params)

    counter = ctx.nav_item_counter
    ctx.hooks.add_action(DOCUMENT_START, counter.reset)
    ctx.hooks.add_filter(
        NAV_MENU_ITEM_HTML,
        functools.partial(filter_nav_menu_item, args=args, counter=counter),
    )


def filter_nav_menu_item(
    item_output: str,
    item: MenuItem,
    *,
    args: dict[str, Any],
    counter: SequenceCounter,
) -> str:
    """Append the expanded-state declaration and dropdown button to *item_output*."""
    if HAS_CHILDREN_CLASS not in item.classes:
        return item_output

    expanded = CURRENT_ANCESTOR_CLASS in item.classes
    binding = StateBinding(f"{NAV_MENU_ITEM_STATE_PREFIX}{counter.next()}", initial=expanded)

    dropdown_class = args["dropdown_class"]
    toggle_class = args["sub_menu_toggle_class"]

    button = html.Element("button")
    button.set("class", f"{dropdown_class} {toggle_class}" if expanded else dropdown_class)
    apply_bound_attributes(button, binding, [binding.class_attribute(dropdown_class, toggle_class)])
    apply_aria_expanded(button, binding)
    button.set("on", binding.toggle_action())

    if args.get("icon"):
        append_markup(button, args["icon"])
    if "expand_text" in args and "collapse_text" in args:
        label = html.Element("span")
        label.set("class", "screen-reader-text")
        apply_bound_text(
            label,
            binding,
            when_true=args["collapse_text"],
            when_false=args["expand_text"],
        )
        button.append(label)

    return item_output + fragment_to_html(create_state_element(binding)) + fragment_to_html(button)


def _enqueue_styles(ctx: BufferingContext, template: CssTemplate, args: dict[str, Any]) -> None:
    """Render *template* when styles are enqueued and hand it to the host."""
    host = ctx.host
    handle = ctx.config.stylesheet_handle

    def inject() -> None:
        host.inject_styles(handle, strip_style_tags(template.render(args)))

    ctx.hooks.add_action(ENQUEUE_STYLES, inject, priority=ENQUEUE_PRIORITY)
