"""Command: bulk-check a stream of candidate CUSIPs, one per line."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from cusiptool.commands._base import CusipCommand

if TYPE_CHECKING:
    from cusiptool.commands._context import AppContext


@click.command(
    cls=CusipCommand,
    examples="""\
  cusiptool check cusips.txt
  gzcat cusips-us.txt.gz | cusiptool check
  cusiptool check --fix cusips.txt > fixed.txt
  cusiptool --json check --no-report cusips.txt""",
)
@click.argument("input_file", type=click.File("r", encoding="ascii", errors="replace"), default="-")
@click.option(
    "--fix/--no-fix",
    default=None,
    help="Repair incorrect check digits and print every good or fixed CUSIP.",
)
@click.option(
    "--report/--no-report",
    default=None,
    help="Print a diagnostic line for each rejected input.",
)
@click.pass_obj
def check(app: AppContext, input_file: TextIO, fix: bool | None, report: bool | None) -> None:
    """Validate CUSIPs read from INPUT_FILE (default: stdin).

    Prints a summary to stderr and exits non-zero if any input is bad
    (with --fix: if any bad input could not be fixed).
    """
    from cusiptool.services.check import CheckService

    config = app.settings.check
    if report is not None:
        config = config.model_copy(update={"report_invalid": report})

    result = CheckService(config).run(
        input_file,
        fix=fix,
        emit=click.echo,
        report=lambda line: click.echo(line, err=True),
    )
    app.report(result)
