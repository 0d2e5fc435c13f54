"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, amptheme.toml only contains
overrides. A twentyseventeen site needs no config file at all.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from amptheme.domain.types import DEFAULT_THEME

# --- Per-document runtime config ---


class RuntimeConfig(BaseModel):
    """Theme selection plus explicitly requested rules for one document.

    Attributes:
        theme: Active (possibly child) theme identifier.
        parent_theme: Parent theme when *theme* is a child theme.
        explicit_rules: Rule name -> parameters, in caller order. These
            are applied even when the theme has no built-in rule table.
    """

    model_config = {"frozen": True}

    theme: str = DEFAULT_THEME
    parent_theme: str | None = None
    explicit_rules: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @property
    def theme_candidates(self) -> tuple[str, ...]:
        """Themes checked against the feature registry, child first."""
        if self.parent_theme and self.parent_theme != self.theme:
            return (self.theme, self.parent_theme)
        return (self.theme,)

    @property
    def template(self) -> str:
        """Theme whose markup conventions apply (the parent, if any)."""
        return self.parent_theme or self.theme

    @property
    def stylesheet_handle(self) -> str:
        """Handle inline styles are attached to."""
        return f"{self.template}-style"


# --- amptheme.toml sections ---


class ThemeSection(BaseModel):
    """[theme] section."""

    model_config = {"frozen": True}

    name: str = DEFAULT_THEME
    parent: str | None = None


class HostSection(BaseModel):
    """[host] section — answers for the static rendering host."""

    model_config = {"frozen": True}

    header_video: bool = False
    icons: dict[str, str] = Field(default_factory=dict)

