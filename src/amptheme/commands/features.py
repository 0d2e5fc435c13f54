"""Command: list the rules a theme configuration resolves to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from amptheme.commands._base import AmpCommand
from amptheme.domain.types import Phase

if TYPE_CHECKING:
    from amptheme.commands._context import AppContext


@click.command(
    cls=AmpCommand,
    examples="""\
  amptheme features
  amptheme features --theme twentyfifteen
  amptheme features --phase post-parse
  amptheme features --themes
  amptheme --json features --theme my-child --parent-theme twentyseventeen""",
)
@click.option("--theme", default=None, help="Theme to resolve (overrides [theme] name).")
@click.option("--parent-theme", default=None, help="Parent theme of a child theme.")
@click.option(
    "--phase",
    type=click.Choice([p.value for p in Phase]),
    default=None,
    help="Only show rules for this phase.",
)
@click.option("--themes", "list_themes", is_flag=True, help="List themes with rule tables.")
@click.pass_obj
def features(
    app: AppContext,
    theme: str | None,
    parent_theme: str | None,
    phase: str | None,
    list_themes: bool,
) -> None:
    """Show the resolved rewrite rules in run order."""
    from amptheme.services.features import FeatureService

    svc = FeatureService(registry=app.registry)
    if list_themes:
        app.emit(svc.list_themes())
        return
    config = app.settings.runtime_config(theme=theme, parent_theme=parent_theme)
    app.emit(svc.list_rules(config, Phase(phase) if phase else None))
