"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from amptheme.output.formatters import format_result

if TYPE_CHECKING:
    from amptheme.config.settings import AmpSettings
    from amptheme.rules.registry import FeatureRegistry
    from amptheme.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The feature registry is built on first use so ``--help`` and
    ``--version`` never trigger plugin discovery.
    """

    def __init__(self, settings: AmpSettings) -> None:
        self.settings = settings
        self._registry: FeatureRegistry | None = None

        from amptheme.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> FeatureRegistry:
        """Built-in rules plus entry-point plugin contributions."""
        if self._registry is None:
            from amptheme.plugins.manager import PluginManager
            from amptheme.rules.registry import build_feature_registry

            pm = PluginManager()
            pm.discover_and_load()
            self._registry = build_feature_registry(pm)
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        if result.ok:
            click.echo(format_result(result, json_output=json_output, quiet=self.settings.quiet))
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(format_result(result, json_output=json_output), err=True)
            raise SystemExit(1)
