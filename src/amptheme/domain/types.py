"""Theme identifiers, rule names and rule phases.

Rule names double as configuration keys (``[features.<rule>]`` in
``amptheme.toml``), so their values must stay stable.
"""

from __future__ import annotations

from enum import StrEnum


class Theme(StrEnum):
    """Core themes with built-in rewrite support."""

    TWENTYSEVENTEEN = "twentyseventeen"
    TWENTYFIFTEEN = "twentyfifteen"


DEFAULT_THEME = Theme.TWENTYSEVENTEEN


class Phase(StrEnum):
    """When a rule runs relative to DOM construction."""

    PRE_PARSE = "pre-parse"
    POST_PARSE = "post-parse"


class RuleName(StrEnum):
    """Built-in rewrite rules."""

    FORCE_SVG_SUPPORT = "force_svg_support"
    FORCE_FIXED_BACKGROUND_SUPPORT = "force_fixed_background_support"
    ADD_TWENTYSEVENTEEN_MASTHEAD_STYLES = "add_twentyseventeen_masthead_styles"
    ADD_HAS_HEADER_VIDEO_BODY_CLASS = "add_has_header_video_body_class"
    ADD_NAV_MENU_STYLES = "add_nav_menu_styles"
    ADD_NAV_MENU_TOGGLE = "add_nav_menu_toggle"
    ADD_NAV_SUB_MENU_BUTTONS = "add_nav_sub_menu_buttons"
