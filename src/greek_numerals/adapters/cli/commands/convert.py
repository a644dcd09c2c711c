"""Numeral conversion CLI command.

Contents:
    * :func:`cli_convert` - Render integers as Greek alphabetic numerals.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import lib_log_rich.runtime
import orjson
import rich_click as click

from greek_numerals.adapters.config.settings import NumeralSettings
from greek_numerals.domain.enums import Case, OutputFormat
from greek_numerals.domain.errors import ConfigurationError, InvalidInputError, ValueOutOfRangeError
from greek_numerals.domain.numerals import to_greek

from ..constants import NUMBER_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _load_settings(cli_ctx: CLIContext) -> NumeralSettings:
    """Read ``[greek_numerals]`` defaults or exit with CONFIG_ERROR."""
    try:
        return cli_ctx.services.load_numeral_settings(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid numeral configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _convert_all(numbers: Sequence[int], case: Case) -> list[str]:
    """Encode every number before anything is printed.

    Raises:
        SystemExit: INVALID_ARGUMENT for negative input, VALUE_OUT_OF_RANGE
            for input above the largest numeral.
    """
    try:
        return [to_greek(number, case) for number in numbers]
    except InvalidInputError as exc:
        logger.error("Rejected negative number", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
    except ValueOutOfRangeError as exc:
        logger.error("Rejected number above the largest numeral", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.VALUE_OUT_OF_RANGE) from exc


def _render(numbers: Sequence[int], numerals: Sequence[str], output_format: OutputFormat) -> str:
    """Format results as plain lines or a JSON array.

    JSON numbers are decimal strings: values reach ``10**40 - 1``, beyond what
    64-bit integers and JavaScript doubles hold.

    Example:
        >>> _render([1, 241], ["αʹ", "σμαʹ"], OutputFormat.HUMAN)
        'αʹ\\nσμαʹ'
        >>> _render([1], ["αʹ"], OutputFormat.JSON)
        '[{"number":"1","numeral":"αʹ"}]'
    """
    if output_format is OutputFormat.JSON:
        payload = [{"number": str(number), "numeral": numeral} for number, numeral in zip(numbers, numerals)]
        return orjson.dumps(payload).decode("utf-8")
    return "\n".join(numerals)


@click.command("convert", context_settings=NUMBER_CONTEXT_SETTINGS)
@click.argument("numbers", nargs=-1, required=True, type=click.INT)
@click.option(
    "--case",
    "case",
    type=click.Choice([c.value for c in Case], case_sensitive=False),
    default=None,
    help="Letter case of the numerals [default: greek_numerals.case from config]",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="One numeral per line, or a JSON array [default: greek_numerals.format from config]",
)
@click.pass_context
def cli_convert(ctx: click.Context, numbers: tuple[int, ...], case: str | None, output_format: str | None) -> None:
    r"""Convert integers into Greek alphabetic numerals.

    Accepts 0 up to 9,999,999,999,999,999,999,999,999,999,999,999,999,999.

    \b
    Examples:
      greek-numerals convert 241            ->  σμαʹ
      greek-numerals convert --case upper 241  ->  ΣΜΑʹ
      greek-numerals convert 97554          ->  αΜθʹ, ͵ζφνδ
    """
    cli_ctx = get_cli_context(ctx)
    settings = _load_settings(cli_ctx)
    effective_case = Case(case.lower()) if case else settings.case
    fmt = OutputFormat(output_format.lower()) if output_format else settings.output_format

    extra = {"command": "convert", "case": effective_case.value, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-convert", extra=extra):
        logger.info("Converting numbers", extra={"count": len(numbers)})
        numerals = _convert_all(numbers, effective_case)
        click.echo(_render(numbers, numerals, fmt))


__all__ = ["cli_convert"]
