"""natcmp CLI -- compare two strings in natural order from the terminal.

This module is NEVER imported from natcmp/__init__.py.
It is only loaded via the ``natcmp`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install natcmp[cli]"
    ) from None

from natcmp.cli.formatting import (
    format_error,
    format_result,
    format_warning,
    get_console,
    get_error_console,
)
from natcmp.engine.counter import CallCounter, CountingComparator, default_counter
from natcmp.exceptions import DiagnosticSinkError
from natcmp.models.config import CompareOptions

logger = logging.getLogger(__name__)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("strings", nargs=-1)
@click.option(
    "--fold-case",
    "-i",
    is_flag=True,
    envvar="NATCMP_FOLD_CASE",
    help="Ignore ASCII letter case.",
)
@click.option(
    "--skip-whitespace",
    "-w",
    is_flag=True,
    envvar="NATCMP_SKIP_WHITESPACE",
    help="Treat runs of whitespace as ignorable separators.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    strings: tuple[str, ...],
    fold_case: bool,
    skip_whitespace: bool,
) -> None:
    """Compare two strings in natural order and print the result.

    Prints ``Result: <n>`` (negative, zero or positive) followed by the
    number of comparator calls made by this process.
    """
    ctx.ensure_object(dict)
    counter: CallCounter = ctx.obj.get("counter") or default_counter()

    if len(strings) != 2:
        format_warning("need 2 arguments", get_error_console())
    # Missing arguments compare as empty strings; extras are ignored.
    padded = list(strings[:2]) + [""] * (2 - min(len(strings), 2))

    options = CompareOptions(fold_case=fold_case, skip_whitespace=skip_whitespace)
    logger.debug("Comparing %r and %r with %s", padded[0], padded[1], options)

    console = get_console()
    comparator = CountingComparator(counter, options)
    format_result(comparator(padded[0], padded[1]), console)

    try:
        counter.report(console.file)
    except DiagnosticSinkError as e:
        format_error(str(e), get_error_console())
        raise SystemExit(1) from None


def main() -> None:
    """Console-script entry point."""
    cli(obj={})
