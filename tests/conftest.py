"""Shared pytest fixtures and test helpers for amptheme tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from lxml import html

from amptheme.config.models import RuntimeConfig
from amptheme.infrastructure.dom import convert_bind_attributes, find_body, parse_document
from amptheme.infrastructure.hooks import HookRegistry
from amptheme.infrastructure.host import StaticThemeHost
from amptheme.rules.context import BufferingContext, DocumentContext
from amptheme.rules.registry import DEFAULT_REGISTRY

TWENTYSEVENTEEN_HTML = """<!DOCTYPE html>
<html class="no-js no-svg" lang="en">
<head><title>Site</title></head>
<body class="home blog">
<header id="masthead" class="site-header">
<div class="navigation-top">
<nav id="site-navigation" class="main-navigation" aria-label="Top Menu">
<button class="menu-toggle" aria-controls="top-menu">Menu</button>
<div class="menu-top-container">
<ul id="top-menu" class="menu">
<li class="menu-item menu-item-has-children current-menu-ancestor"><a href="/about">About</a>
<ul class="sub-menu"><li class="menu-item current-menu-item"><a href="/team">Team</a></li></ul>
</li>
<li class="menu-item"><a href="/blog">Blog</a></li>
<li class="menu-item menu-item-has-children"><a href="/work">Work</a>
<ul class="sub-menu"><li class="menu-item"><a href="/work/x">X</a></li></ul>
</li>
</ul>
</div>
</nav>
</div>
</header>
<main id="main">Content</main>
</body>
</html>
"""

TWENTYFIFTEEN_HTML = """<!DOCTYPE html>
<html class="no-js" lang="en">
<head><title>Site</title></head>
<body class="home">
<div id="sidebar" class="sidebar">
<header id="masthead" class="site-header">
<button class="secondary-toggle">Menu and widgets</button>
</header>
<div id="secondary" class="secondary">
<nav id="site-navigation" class="main-navigation">
<ul class="nav-menu">
<li class="menu-item menu-item-has-children"><a href="/about">About</a>
<ul class="sub-menu"><li class="menu-item"><a href="/team">Team</a></li></ul>
</li>
</ul>
</nav>
</div>
</div>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    amp = logging.getLogger("amptheme")
    amp_level = amp.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    amp.setLevel(amp_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no amptheme.toml in reach."""
    monkeypatch.delenv("AMPTHEME_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def host() -> StaticThemeHost:
    return StaticThemeHost()


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def document_context(markup: str, config: RuntimeConfig | None = None) -> DocumentContext:
    """Parse *markup* and wrap it in a DocumentContext."""
    root = parse_document(markup)
    body = find_body(root)
    assert body is not None
    return DocumentContext(config or RuntimeConfig(), DEFAULT_REGISTRY, root=root, body=body)


def buffering_context(
    hooks: HookRegistry,
    host: StaticThemeHost,
    config: RuntimeConfig | None = None,
) -> BufferingContext:
    return BufferingContext(config or RuntimeConfig(), DEFAULT_REGISTRY, hooks=hooks, host=host)


def parse_fragments(markup: str) -> list[html.HtmlElement]:
    """Parse filter output into elements, with bound attributes as placeholders."""
    return [
        fragment
        for fragment in html.fragments_fromstring(convert_bind_attributes(markup))
        if not isinstance(fragment, str)
    ]
