"""Per-theme rule parameters — selectors, query paths and label text.

Every executor that touches navigation markup reads its defaults from
here; explicit rule parameters are merged on top by the caller.
Unknown themes fall back to the Twenty Seventeen config.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from amptheme.domain.types import DEFAULT_THEME, Theme

BASE_CONFIG: Mapping[str, Any] = MappingProxyType(
    {
        "dropdown_class": "dropdown-toggle",
    }
)

THEME_CONFIGS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        Theme.TWENTYFIFTEEN: MappingProxyType(
            {
                "nav_container_id": "secondary",
                "nav_container_toggle_class": "toggled-on",
                "menu_button_class": "secondary-toggle",
                "menu_button_query": (
                    '//header[ @id = "masthead" ]'
                    '//button[ contains( @class, "secondary-toggle" ) ]'
                ),
                "menu_button_toggle_class": "toggled-on",
                "sub_menu_toggle_class": "toggle-on",
                "expand_text": "expand child menu",
                "collapse_text": "collapse child menu",
            }
        ),
        Theme.TWENTYSEVENTEEN: MappingProxyType(
            {
                "nav_container_id": "site-navigation",
                "nav_container_toggle_class": "toggled-on",
                "menu_button_class": "menu-toggle",
                "menu_button_query": (
                    '//nav[@id = "site-navigation"]//button[ contains( @class, "menu-toggle" ) ]'
                ),
                "menu_button_toggle_class": "toggled-on",
                "sub_menu_toggle_class": "toggled-on",
                "expand_text": "expand child menu",
                "collapse_text": "collapse child menu",
            }
        ),
    }
)


def get_theme_config(
    theme: str,
    extra_configs: Mapping[str, Mapping[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return the base config overlaid with *theme*'s keys.

    *extra_configs* holds plugin-contributed themes; they are consulted
    after the built-ins and layered over the default theme, so a partial
    plugin config still carries every key. Returns a fresh dict the caller
    may mutate.

    Examples:
        >>> get_theme_config("twentyfifteen")["nav_container_id"]
        'secondary'
        >>> get_theme_config("unknown")["nav_container_id"]
        'site-navigation'
    """
    theme_config = THEME_CONFIGS.get(theme)
    if theme_config is not None:
        return {**BASE_CONFIG, **theme_config}
    fallback = {**BASE_CONFIG, **THEME_CONFIGS[DEFAULT_THEME]}
    if extra_configs is not None and theme in extra_configs:
        fallback.update(extra_configs[theme])
    return fallback


def merge_rule_params(defaults: Mapping[str, Any], *overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Merge parameter mappings left to right; later values win."""
    merged = dict(defaults)
    for override in overrides:
        merged.update(override)
    return merged
