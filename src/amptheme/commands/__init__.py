"""Subcommand modules for amptheme.

Provides register_commands() which uses deferred imports to keep
``amptheme --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from amptheme.commands.features import features
    from amptheme.commands.rewrite import rewrite

    cli.add_command(rewrite)
    cli.add_command(features)
