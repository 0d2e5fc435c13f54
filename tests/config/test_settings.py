"""Tests for AmpSettings — CLI flags, env vars and TOML merged."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from amptheme.config.discovery import CONFIG_FILENAME
from amptheme.config.settings import AmpSettings

TOML = """
[theme]
name = "my-child"
parent = "twentyfifteen"

[features.add_nav_menu_toggle]
nav_container_id = "menu"

[features.force_svg_support]

[host]
header_video = true
icons = { angle-down = "<svg></svg>" }
"""


@pytest.mark.usefixtures("_isolated_cwd")
class TestAmpSettings:
    def test_defaults_without_file(self) -> None:
        settings = AmpSettings.from_cli()
        assert settings.config_path is None
        assert settings.theme.name == "twentyseventeen"
        assert settings.features == {}
        assert settings.json_output is False

    def test_discovers_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML, encoding="utf-8")
        settings = AmpSettings.from_cli()
        assert settings.config_path is not None
        assert settings.theme.parent == "twentyfifteen"
        assert settings.host.header_video is True
        assert settings.host.icons == {"angle-down": "<svg></svg>"}
        assert list(settings.features) == ["add_nav_menu_toggle", "force_svg_support"]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = tmp_path / "site.toml"
        path.write_text(TOML, encoding="utf-8")
        settings = AmpSettings.from_cli(config_path=str(path))
        assert settings.config_path == path
        assert settings.theme.name == "my-child"

    def test_cli_flags(self) -> None:
        settings = AmpSettings.from_cli(json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML, encoding="utf-8")
        monkeypatch.setenv("AMPTHEME_QUIET", "true")
        settings = AmpSettings.from_cli()
        assert settings.quiet is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[theme\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AmpSettings.from_cli()


@pytest.mark.usefixtures("_isolated_cwd")
class TestRuntimeConfig:
    def test_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML, encoding="utf-8")
        config = AmpSettings.from_cli().runtime_config()
        assert config.theme_candidates == ("my-child", "twentyfifteen")
        assert config.explicit_rules == {
            "add_nav_menu_toggle": {"nav_container_id": "menu"},
            "force_svg_support": {},
        }

    def test_overrides(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML, encoding="utf-8")
        config = AmpSettings.from_cli().runtime_config(
            theme="other",
            extra_rules={
                "add_has_header_video_body_class": {},
                "add_nav_menu_toggle": {"menu_button_query": "//button"},
            },
        )
        assert config.theme == "other"
        assert config.parent_theme == "twentyfifteen"
        assert list(config.explicit_rules) == [
            "add_nav_menu_toggle",
            "force_svg_support",
            "add_has_header_video_body_class",
        ]
        assert config.explicit_rules["add_nav_menu_toggle"] == {
            "nav_container_id": "menu",
            "menu_button_query": "//button",
        }
