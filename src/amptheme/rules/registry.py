"""Feature registry — rule dispatch table and per-theme rule lists.

Each rule name maps to exactly one executor with a declared phase. Theme
tables list rule names in the order they run, with default parameters.
The registry is built once at startup and never mutated afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from amptheme.domain.types import Phase, RuleName, Theme
from amptheme.rules import executors

if TYPE_CHECKING:
    from amptheme.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

Executor = Callable[[Any, dict[str, Any]], None]


@dataclass(frozen=True)
class RuleSpec:
    """A named executor and the phase it belongs to."""

    name: str
    phase: Phase
    executor: Executor


def _spec(name: RuleName, phase: Phase, executor: Executor) -> tuple[str, RuleSpec]:
    return name.value, RuleSpec(name.value, phase, executor)


RULES: Mapping[str, RuleSpec] = MappingProxyType(
    dict(
        [
            _spec(RuleName.FORCE_SVG_SUPPORT, Phase.POST_PARSE, executors.force_svg_support),
            _spec(
                RuleName.FORCE_FIXED_BACKGROUND_SUPPORT,
                Phase.POST_PARSE,
                executors.force_fixed_background_support,
            ),
            _spec(
                RuleName.ADD_TWENTYSEVENTEEN_MASTHEAD_STYLES,
                Phase.PRE_PARSE,
                executors.add_twentyseventeen_masthead_styles,
            ),
            _spec(
                RuleName.ADD_HAS_HEADER_VIDEO_BODY_CLASS,
                Phase.PRE_PARSE,
                executors.add_has_header_video_body_class,
            ),
            _spec(RuleName.ADD_NAV_MENU_STYLES, Phase.PRE_PARSE, executors.add_nav_menu_styles),
            _spec(RuleName.ADD_NAV_MENU_TOGGLE, Phase.POST_PARSE, executors.add_nav_menu_toggle),
            _spec(
                RuleName.ADD_NAV_SUB_MENU_BUTTONS,
                Phase.PRE_PARSE,
                executors.add_nav_sub_menu_buttons,
            ),
        ]
    )
)

ThemeFeatures = Mapping[str, Mapping[str, Any]]

BUILTIN_THEME_FEATURES: Mapping[str, ThemeFeatures] = MappingProxyType(
    {
        Theme.TWENTYSEVENTEEN: MappingProxyType(
            {
                RuleName.FORCE_SVG_SUPPORT: {},
                RuleName.FORCE_FIXED_BACKGROUND_SUPPORT: {},
                RuleName.ADD_TWENTYSEVENTEEN_MASTHEAD_STYLES: {},
                RuleName.ADD_HAS_HEADER_VIDEO_BODY_CLASS: {},
                RuleName.ADD_NAV_MENU_STYLES: {},
                RuleName.ADD_NAV_MENU_TOGGLE: {},
                RuleName.ADD_NAV_SUB_MENU_BUTTONS: {},
            }
        ),
        Theme.TWENTYFIFTEEN: MappingProxyType(
            {
                RuleName.ADD_NAV_MENU_STYLES: {},
                RuleName.ADD_NAV_MENU_TOGGLE: {},
                RuleName.ADD_NAV_SUB_MENU_BUTTONS: {},
            }
        ),
    }
)


@dataclass(frozen=True)
class FeatureRegistry:
    """Read-only view over rules, theme rule tables and extra theme configs."""

    theme_features: Mapping[str, ThemeFeatures] = field(
        default_factory=lambda: BUILTIN_THEME_FEATURES
    )
    theme_configs: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    rules: Mapping[str, RuleSpec] = field(default_factory=lambda: RULES)

    def features_for(self, theme: str) -> ThemeFeatures | None:
        return self.theme_features.get(theme)

    def rule(self, name: str) -> RuleSpec | None:
        return self.rules.get(name)

    @property
    def themes(self) -> list[str]:
        return list(self.theme_features)


DEFAULT_REGISTRY = FeatureRegistry()


def build_feature_registry(plugin_manager: PluginManager | None = None) -> FeatureRegistry:
    """Build the registry from built-ins plus plugin contributions.

    Built-in theme names are reserved; plugin entries for them are skipped.
    """
    if plugin_manager is None:
        return DEFAULT_REGISTRY

    theme_features: dict[str, ThemeFeatures] = dict(BUILTIN_THEME_FEATURES)
    for theme, rules in plugin_manager.collect_theme_features().items():
        if theme in BUILTIN_THEME_FEATURES:
            logger.warning("Plugin rule table for built-in theme %r ignored", theme)
            continue
        theme_features[theme] = MappingProxyType(
            {name: MappingProxyType(dict(params)) for name, params in rules.items()}
        )

    theme_configs: dict[str, Mapping[str, Any]] = {}
    for theme, config in plugin_manager.collect_theme_configs().items():
        if theme in BUILTIN_THEME_FEATURES:
            logger.warning("Plugin config for built-in theme %r ignored", theme)
            continue
        theme_configs[theme] = MappingProxyType(dict(config))

    return FeatureRegistry(
        theme_features=MappingProxyType(theme_features),
        theme_configs=MappingProxyType(theme_configs),
    )
