"""Subcommand modules for pkgsort.

Provides register_commands() which uses deferred imports to keep
``pkgsort --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pkgsort.commands.classify import classify
    from pkgsort.commands.thresholds import thresholds

    cli.add_command(classify)
    cli.add_command(thresholds)
