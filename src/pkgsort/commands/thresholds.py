"""Command: show the fixed sorting thresholds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgsort.commands._base import PkgsortCommand

if TYPE_CHECKING:
    from pkgsort.commands._context import AppContext


@click.command(cls=PkgsortCommand)
@click.pass_obj
def thresholds(app: AppContext) -> None:
    """Show the bulky and heavy limits used for classification."""
    from pkgsort.services.sort import SortService

    app.emit(SortService().thresholds())
