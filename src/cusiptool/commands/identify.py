"""Commands: parse, repair, and check-digit for individual values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cusiptool.commands._base import CusipCommand

if TYPE_CHECKING:
    from cusiptool.commands._context import AppContext


@click.command(
    "parse",
    cls=CusipCommand,
    examples="""\
  cusiptool parse 037833100
  cusiptool parse 037833100 17275R102 38259P508
  cusiptool --json parse 037833108""",
)
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_obj
def parse_cmd(app: AppContext, identifiers: tuple[str, ...]) -> None:
    """Validate one or more CUSIPs and explain any failure."""
    from cusiptool.services.identify import IdentifierService

    app.emit(IdentifierService().parse_many(list(identifiers)))


@click.command(
    "repair",
    cls=CusipCommand,
    examples="""\
  cusiptool repair 03783310
  cusiptool repair 037833108
  cusiptool -q repair 03783310""",
)
@click.argument("value")
@click.pass_obj
def repair_cmd(app: AppContext, value: str) -> None:
    """Build a valid CUSIP from an 8-character payload.

    A 9-character value has its check digit replaced if it is wrong.
    """
    from cusiptool.services.identify import IdentifierService

    app.emit(IdentifierService().repair(value))


@click.command(
    "check-digit",
    cls=CusipCommand,
    examples="""\
  cusiptool check-digit 03783310
  cusiptool --json check-digit 17275R10""",
)
@click.argument("payload")
@click.pass_obj
def check_digit(app: AppContext, payload: str) -> None:
    """Compute the check digit for an 8-character PAYLOAD."""
    from cusiptool.services.identify import IdentifierService

    app.emit(IdentifierService().check_digit(payload))
