"""Tests for pre-parse rule executors (hook registration)."""

from __future__ import annotations

from amptheme.config.models import RuntimeConfig
from amptheme.infrastructure.hooks import (
    BODY_CLASS,
    DOCUMENT_START,
    ENQUEUE_STYLES,
    NAV_MENU_ITEM_HTML,
    HookRegistry,
)
from amptheme.infrastructure.host import MenuItem, StaticThemeHost
from amptheme.rules.executors import (
    ENQUEUE_PRIORITY,
    add_has_header_video_body_class,
    add_nav_menu_styles,
    add_nav_sub_menu_buttons,
    add_twentyseventeen_masthead_styles,
)
from tests.conftest import buffering_context, parse_fragments

LINK = '<a href="/about">About</a>'
PARENT_ITEM = MenuItem(("menu-item", "menu-item-has-children"))
ANCESTOR_ITEM = MenuItem(("menu-item", "menu-item-has-children", "current-menu-ancestor"))
ICON = '<svg class="icon icon-angle-down"></svg>'


class TestHeaderVideoBodyClass:
    def test_adds_class_with_video(self, hooks: HookRegistry) -> None:
        host = StaticThemeHost(header_video=True)
        add_has_header_video_body_class(buffering_context(hooks, host), {})
        assert hooks.apply_filters(BODY_CLASS, ["home"]) == ["home", "has-header-video"]

    def test_no_video(self, hooks: HookRegistry, host: StaticThemeHost) -> None:
        add_has_header_video_body_class(buffering_context(hooks, host), {})
        assert hooks.apply_filters(BODY_CLASS, ["home"]) == ["home"]

    def test_predicate_checked_when_filter_runs(
        self, hooks: HookRegistry, host: StaticThemeHost
    ) -> None:
        add_has_header_video_body_class(buffering_context(hooks, host), {})
        host.header_video = True
        assert hooks.apply_filters(BODY_CLASS, []) == ["has-header-video"]

    def test_custom_class_name(self, hooks: HookRegistry) -> None:
        host = StaticThemeHost(header_video=True)
        add_has_header_video_body_class(buffering_context(hooks, host), {"class_name": "video"})
        assert hooks.apply_filters(BODY_CLASS, []) == ["video"]


class TestStyleRules:
    def test_masthead_styles_enqueued_late(
        self, hooks: HookRegistry, host: StaticThemeHost
    ) -> None:
        add_twentyseventeen_masthead_styles(buffering_context(hooks, host), {})
        assert host.styles == {}
        seen: list[int] = []
        hooks.add_action(ENQUEUE_STYLES, lambda: seen.append(len(host.styles)))
        hooks.add_action(
            ENQUEUE_STYLES, lambda: seen.append(len(host.styles)), priority=ENQUEUE_PRIORITY + 1
        )
        hooks.do_action(ENQUEUE_STYLES)

        chunks = host.styles["twentyseventeen-style"]
        assert len(chunks) == 1
        assert "amp-video > video" in chunks[0]
        assert "<style" not in chunks[0]
        assert seen == [0, 1]

    def test_nav_menu_styles_use_parent_handle(
        self, hooks: HookRegistry, host: StaticThemeHost
    ) -> None:
        config = RuntimeConfig(theme="my-child", parent_theme="twentyfifteen")
        add_nav_menu_styles(buffering_context(hooks, host, config), {})
        hooks.do_action(ENQUEUE_STYLES)
        assert list(host.styles) == ["twentyfifteen-style"]
        css = host.styles["twentyfifteen-style"][0]
        assert ".no-js .secondary-toggle {" in css
        assert "59.6875em" in css

    def test_nav_menu_styles_params(self, hooks: HookRegistry, host: StaticThemeHost) -> None:
        add_nav_menu_styles(buffering_context(hooks, host), {"menu_button_class": "burger"})
        hooks.do_action(ENQUEUE_STYLES)
        assert ".no-js .burger {" in host.styles["twentyseventeen-style"][0]


class TestNavSubMenuButtons:
    def _register(
        self,
        hooks: HookRegistry,
        host: StaticThemeHost,
        config: RuntimeConfig | None = None,
        params: dict | None = None,
    ) -> None:
        add_nav_sub_menu_buttons(buffering_context(hooks, host, config), params or {})

    def test_expanded_ancestor(self, hooks: HookRegistry) -> None:
        host = StaticThemeHost(icons={"angle-down": ICON})
        self._register(hooks, host)
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, ANCESTOR_ITEM)

        assert output.startswith(LINK)
        link, state, button = parse_fragments(output)
        assert link.tag == "a"
        assert state.tag == "amp-state"
        assert state.get("id") == "navMenuItemExpanded1"
        assert state[0].text == "true"

        assert button.get("class") == "dropdown-toggle toggled-on"
        assert button.get("aria-expanded") == "true"
        assert button.get("on") == (
            "tap:AMP.setState({ navMenuItemExpanded1: ! navMenuItemExpanded1 })"
        )
        assert button.get("data-amp-bind-class") == (
            '"dropdown-toggle" + ( navMenuItemExpanded1 ? " toggled-on" : \'\' )'
        )
        assert button.find("svg") is not None
        label = button.find("span")
        assert label.get("class") == "screen-reader-text"
        assert label.text == "collapse child menu"
        assert label.get("data-amp-bind-text") == (
            'navMenuItemExpanded1 ? "collapse child menu" : "expand child menu"'
        )

    def test_collapsed_item(self, hooks: HookRegistry, host: StaticThemeHost) -> None:
        self._register(hooks, host)
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM)
        _, state, button = parse_fragments(output)
        assert state[0].text == "false"
        assert button.get("class") == "dropdown-toggle"
        assert button.get("aria-expanded") == "false"
        assert button.find("span").text == "expand child menu"

    def test_bracket_syntax_in_output(self, hooks: HookRegistry, host: StaticThemeHost) -> None:
        self._register(hooks, host)
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM)
        assert "[class]=" in output
        assert "[aria-expanded]=" in output
        assert "[text]=" in output

    def test_item_without_children_unchanged(
        self, hooks: HookRegistry, host: StaticThemeHost
    ) -> None:
        self._register(hooks, host)
        item = MenuItem(("menu-item",))
        assert hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, item) == LINK
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM)
        assert parse_fragments(output)[1].get("id") == "navMenuItemExpanded1"

    def test_counter_increments_and_resets(
        self, hooks: HookRegistry, host: StaticThemeHost
    ) -> None:
        self._register(hooks, host)
        ids = [
            parse_fragments(hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM))[1].get("id")
            for _ in range(5)
        ]
        assert ids == [f"navMenuItemExpanded{n}" for n in range(1, 6)]

        hooks.do_action(DOCUMENT_START)
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM)
        assert parse_fragments(output)[1].get("id") == "navMenuItemExpanded1"

    def test_twentyfifteen_toggle_class_without_icon(self, hooks: HookRegistry) -> None:
        host = StaticThemeHost(icons={"angle-down": ICON})
        self._register(hooks, host, RuntimeConfig(theme="twentyfifteen"))
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, ANCESTOR_ITEM)
        _, _, button = parse_fragments(output)
        assert button.get("class") == "dropdown-toggle toggle-on"
        assert button.find("svg") is None

    def test_missing_icon_renders_no_markup(
        self, hooks: HookRegistry, host: StaticThemeHost
    ) -> None:
        self._register(hooks, host)
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM)
        _, _, button = parse_fragments(output)
        assert [child.tag for child in button] == ["span"]

    def test_labels_from_params(self, hooks: HookRegistry, host: StaticThemeHost) -> None:
        self._register(hooks, host, params={"expand_text": "open", "collapse_text": "close"})
        output = hooks.apply_filters(NAV_MENU_ITEM_HTML, LINK, PARENT_ITEM)
        label = parse_fragments(output)[2].find("span")
        assert label.text == "open"
        assert label.get("data-amp-bind-text") == 'navMenuItemExpanded1 ? "close" : "open"'
