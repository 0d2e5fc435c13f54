"""Tests for the injected stylesheets."""

from __future__ import annotations

from amptheme.domain.css import (
    MASTHEAD_STYLES,
    NAV_MENU_BASE_STYLES,
    nav_menu_styles,
)
from amptheme.domain.theme_config import get_theme_config


class TestMastheadStyles:
    def test_has_no_slots(self) -> None:
        assert MASTHEAD_STYLES.slots == frozenset()

    def test_includes_object_fit_fallback(self) -> None:
        rendered = MASTHEAD_STYLES.render({})
        assert ".has-header-video .custom-header-media amp-video > video" in rendered
        assert "@supports ( object-fit: cover )" in rendered
        assert "<style>" not in rendered


class TestNavMenuStyles:
    def test_twentyseventeen_extras(self) -> None:
        rendered = nav_menu_styles("twentyseventeen").render(get_theme_config("twentyseventeen"))
        assert ".no-js .menu-toggle {" in rendered
        assert ".main-navigation ul .toggled-on + .sub-menu" in rendered
        assert ".no-js #site-navigation > div > ul {" in rendered
        assert ".no-js #site-navigation.toggled-on > div > ul {" in rendered
        assert "@media screen and (min-width: 48em)" in rendered
        assert ".no-js .dropdown-toggle {" in rendered
        assert "#sidebar" not in rendered

    def test_twentyfifteen_extras(self) -> None:
        rendered = nav_menu_styles("twentyfifteen").render(get_theme_config("twentyfifteen"))
        assert ".no-js .secondary-toggle {" in rendered
        assert ".widget_nav_menu ul .toggle-on + .sub-menu" in rendered
        assert "position: sticky;" in rendered
        assert "59.6875em" in rendered
        assert "48em" not in rendered

    def test_other_templates_get_base_rules_only(self) -> None:
        assert nav_menu_styles("custom") == NAV_MENU_BASE_STYLES

    def test_slots_covered_by_theme_config(self) -> None:
        for theme in ("twentyseventeen", "twentyfifteen"):
            assert nav_menu_styles(theme).slots <= set(get_theme_config(theme))
