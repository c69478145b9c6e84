from logging import getLogger
from typing import Optional

import click
from rich.console import Console

from ..._conf import Settings
from ...result import ValidationResult
from ..exc import PolicyViolationError
from ..render import ChecklistRenderer

__all__ = ["check"]


logger = getLogger(__name__)


def read_password(password: Optional[str], from_stdin: bool) -> str:
    if password is not None:
        return password

    if from_stdin:
        with click.open_file("-") as stdin:
            return stdin.readline().rstrip("\r\n")

    return click.prompt("Password", hide_input=True, default="", show_default=False)


@click.command()
@click.argument("password", required=False)
@click.option(
    "--stdin",
    "from_stdin",
    is_flag=True,
    help="Read the password from the first line of standard input.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Do not print the checklist, only set the exit status.",
)
@click.pass_obj
def check(
    settings: Settings, password: Optional[str], from_stdin: bool, quiet: bool
) -> None:
    """
    Check a password against the configured policy.

    Exits with status 1 when the password fails at least one rule.
    """
    if password is not None and from_stdin:
        raise click.UsageError("PASSWORD and --stdin are mutually exclusive.")

    checker = settings.policy.build_checker()
    logger.debug("checking password against %d rule(s)", len(checker))

    outcomes = checker.evaluate(read_password(password, from_stdin))
    result = ValidationResult.from_outcomes(outcomes)

    if not quiet:
        renderer = ChecklistRenderer()
        renderer.add_outcomes(outcomes)
        Console(highlight=False).print(renderer.compose_renderable())

    if not result:
        raise PolicyViolationError(
            "Password does not meet the policy requirements (%d rule(s) failed)."
            % len(result.violations)
        )
