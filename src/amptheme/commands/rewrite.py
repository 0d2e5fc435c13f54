"""Command: rewrite an HTML document for script-free AMP rendering."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from amptheme.commands._base import AmpCommand

if TYPE_CHECKING:
    from amptheme.commands._context import AppContext


def parse_feature_options(values: tuple[str, ...]) -> dict[str, dict[str, Any]]:
    """Parse ``NAME`` / ``NAME=JSON-object`` feature options, keeping their order."""
    rules: dict[str, dict[str, Any]] = {}
    for value in values:
        name, sep, raw = value.partition("=")
        name = name.strip()
        if not name:
            raise click.BadParameter(f"missing rule name in {value!r}", param_hint="--feature")
        params: dict[str, Any] = {}
        if sep:
            try:
                params = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise click.BadParameter(
                    f"invalid JSON for {name}: {exc}", param_hint="--feature"
                ) from exc
            if not isinstance(params, dict):
                raise click.BadParameter(
                    f"parameters for {name} must be a JSON object", param_hint="--feature"
                )
        rules[name] = {**rules.get(name, {}), **params}
    return rules


@click.command(
    cls=AmpCommand,
    examples="""\
  amptheme rewrite page.html
  amptheme rewrite page.html -o page.amp.html
  amptheme rewrite page.html --theme twentyfifteen
  amptheme rewrite page.html --theme my-child --parent-theme twentyseventeen
  amptheme rewrite page.html --theme custom --feature force_svg_support
  amptheme rewrite page.html --feature 'add_nav_menu_toggle={"nav_container_id":"menu"}'
  amptheme --json rewrite page.html --header-video""",
)
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the rewritten document here instead of stdout.",
)
@click.option("--theme", default=None, help="Active theme (overrides [theme] name).")
@click.option("--parent-theme", default=None, help="Parent theme of a child theme.")
@click.option(
    "--feature",
    "features",
    multiple=True,
    help="Request a rule explicitly: NAME or NAME=JSON params. Repeatable.",
)
@click.option(
    "--header-video/--no-header-video",
    default=None,
    help="Whether the page has a header video (overrides [host] header_video).",
)
@click.pass_obj
def rewrite(
    app: AppContext,
    source: Path,
    output: Path | None,
    theme: str | None,
    parent_theme: str | None,
    features: tuple[str, ...],
    header_video: bool | None,
) -> None:
    """Rewrite SOURCE, replacing theme scripts with AMP state bindings."""
    from amptheme.infrastructure.host import StaticThemeHost
    from amptheme.services.rewrite import RewriteService

    settings = app.settings
    config = settings.runtime_config(
        theme=theme,
        parent_theme=parent_theme,
        extra_rules=parse_feature_options(features),
    )
    host = StaticThemeHost(
        header_video=settings.host.header_video if header_video is None else header_video,
        icons=dict(settings.host.icons),
    )
    result = RewriteService(config, host, registry=app.registry).rewrite(
        source.read_text(encoding="utf-8")
    )

    if output is not None and result.ok:
        output.write_text(result.data["html"], encoding="utf-8")
        summary = {k: v for k, v in result.data.items() if k != "html"}
        result = result.model_copy(
            update={"op": "rewrite_file", "data": {**summary, "output": str(output)}}
        )
    app.emit(result)
