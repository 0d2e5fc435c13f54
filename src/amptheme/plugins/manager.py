"""Plugin discovery, loading and collection of theme contributions.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``amptheme.plugins`` group, plus direct registration.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

import pluggy

from amptheme.plugins.hookspecs import AmpthemeHookSpec

PROJECT_NAME = "amptheme"
ENTRY_POINT_GROUP = "amptheme.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and contribution collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AmpthemeHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return all registered plugin names."""
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load %s entry points", ENTRY_POINT_GROUP, exc_info=True)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Contributions
    # ------------------------------------------------------------------

    def collect_theme_features(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Merge every plugin's ``register_theme_features`` result.

        The first plugin to claim a theme keeps it.
        """
        collected: dict[str, dict[str, dict[str, Any]]] = {}
        for plugin_name, contribution in self._collect("register_theme_features"):
            for theme, rules in contribution.items():
                if not isinstance(rules, dict):
                    logger.warning(
                        "Plugin %s returned non-dict rules for theme %r", plugin_name, theme
                    )
                    continue
                if theme in collected:
                    logger.warning(
                        "Plugin %s: theme %r already registered by another plugin",
                        plugin_name,
                        theme,
                    )
                    continue
                collected[theme] = {
                    str(rule): dict(params or {}) for rule, params in rules.items()
                }
        return collected

    def collect_theme_configs(self) -> dict[str, dict[str, Any]]:
        """Merge every plugin's ``register_theme_configs`` result."""
        collected: dict[str, dict[str, Any]] = {}
        for plugin_name, contribution in self._collect("register_theme_configs"):
            for theme, config in contribution.items():
                if not isinstance(config, dict):
                    logger.warning(
                        "Plugin %s returned non-dict config for theme %r", plugin_name, theme
                    )
                    continue
                collected.setdefault(theme, dict(config))
        return collected

    def _collect(self, hook_name: str) -> list[tuple[str, dict[str, Any]]]:
        """Call *hook_name* on each plugin, skipping failures and bad payloads."""
        results: list[tuple[str, dict[str, Any]]] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, hook_name, None)
            if hook is None:
                continue
            try:
                contribution = hook()
            except Exception:
                logger.warning(
                    "Failed to collect %s from plugin %s",
                    hook_name,
                    plugin_name,
                    exc_info=True,
                )
                continue
            if contribution is None:
                continue
            if not isinstance(contribution, dict):
                logger.warning("Plugin %s returned non-dict %s", plugin_name, hook_name)
                continue
            results.append((plugin_name, contribution))
        return results

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
