"""Command: classify a single package."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgsort.commands._base import PkgsortCommand

if TYPE_CHECKING:
    from pkgsort.commands._context import AppContext


@click.command(
    cls=PkgsortCommand,
    examples="""\
  pkgsort classify 10 10 10 5
  pkgsort classify 200 10 10 25
  pkgsort --json classify 100 100 100 5
  pkgsort -q classify 149.99 10 10 19.99
  pkgsort -v classify -- 10 10 10 -1""",
)
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.argument("length", type=float)
@click.argument("mass", type=float)
@click.pass_obj
def classify(app: AppContext, width: float, height: float, length: float, mass: float) -> None:
    """Classify a package as STANDARD, SPECIAL, or REJECTED.

    Dimensions are in centimeters, MASS in kilograms.
    """
    from pkgsort.services.sort import SortService

    app.emit(SortService().classify(width, height, length, mass))
