"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``AMPTHEME_*`` prefix
  3. TOML file    — ``amptheme.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from amptheme.config.discovery import find_config
from amptheme.config.models import HostSection, RuntimeConfig, ThemeSection


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``amptheme.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class AmpSettings(BaseSettings):
    """Unified settings for the amptheme CLI.

    Attributes:
        config_path: Config file in effect, or None when running on defaults.
        theme: ``[theme]`` section (active theme and optional parent).
        features: ``[features.<rule>]`` tables — explicit rule parameters.
        host: ``[host]`` section for the static rendering host.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "AMPTHEME_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    theme: ThemeSection = Field(default_factory=ThemeSection)
    features: dict[str, dict[str, Any]] = Field(default_factory=dict)
    host: HostSection = Field(default_factory=HostSection)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> AmpSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise walks up from *start*
        (default: cwd) looking for ``amptheme.toml``.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def runtime_config(
        self,
        *,
        theme: str | None = None,
        parent_theme: str | None = None,
        extra_rules: dict[str, dict[str, Any]] | None = None,
    ) -> RuntimeConfig:
        """Build the per-document config, applying command-line overrides.

        *extra_rules* are merged over the ``[features]`` tables; a rule
        named in both keeps its config position and takes the merged
        parameters.
        """
        rules = {name: dict(params) for name, params in self.features.items()}
        for name, params in (extra_rules or {}).items():
            rules[name] = {**rules.get(name, {}), **params}
        return RuntimeConfig(
            theme=theme or self.theme.name,
            parent_theme=parent_theme or self.theme.parent,
            explicit_rules=rules,
        )
