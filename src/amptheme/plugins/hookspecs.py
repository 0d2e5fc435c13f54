"""Pluggy hook specifications for theme support contributed by plugins.

Both hooks run once, while the feature registry is built at startup.
"""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("amptheme")
hookimpl = pluggy.HookimplMarker("amptheme")


class AmpthemeHookSpec:
    """Hook specifications for the amptheme plugin system."""

    @hookspec
    def register_theme_features(self) -> dict[str, dict[str, dict[str, Any]]] | None:
        """Return theme -> {rule name -> default parameters}."""

    @hookspec
    def register_theme_configs(self) -> dict[str, dict[str, Any]] | None:
        """Return theme -> rule parameter defaults (selectors, labels)."""
