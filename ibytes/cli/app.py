from __future__ import annotations

import sys
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from result import Err

from ibytes.config.defaults import config_json, default_config
from ibytes.models.conversion import UnsupportedUnitError, UsageError
from ibytes.models.enums import Rounding, Unit
from ibytes.services.domains import get_domain
from ibytes.services.formatting import convert
from ibytes.services.inputs import USAGE, read_piped_line, split_tokens
from ibytes.services.units import parse_unit_code, resolve_unit

console = Console()
err_console = Console(stderr=True)

UNIT_CODES = " ".join(unit.code for unit in Unit if unit.code is not None)

# Negative magnitudes such as ``-5`` reach ``tokens`` instead of failing as unknown options.
app = typer.Typer(add_completion=False, context_settings={"ignore_unknown_options": True})


def _plain(target: Console, text: str) -> None:
    target.print(text, markup=False, highlight=False, soft_wrap=True)


def _debug(enabled: bool, message: str) -> None:
    if enabled:
        err_console.print(f"[dim]{escape(message)}[/]", soft_wrap=True)


@app.command()
def run(
    tokens: Annotated[
        list[str] | None,
        typer.Argument(help=f"NUMBER, optionally with a unit code ({UNIT_CODES}) before or after it."),
    ] = None,
    domain: Annotated[str, typer.Option("--domain", "-D", help="Numeric domain: unbounded, bounded.")] = "unbounded",
    rounding: Annotated[str, typer.Option("--rounding", "-r", help="Rounding mode: half-up, half-even.")] = "half-up",
    places_above: Annotated[
        int | None, typer.Option("--places-above", help="Fractional digits when NUMBER exceeds the divisor.")
    ] = None,
    places_below: Annotated[
        int | None, typer.Option("--places-below", help="Fractional digits when NUMBER is at most the divisor.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Print diagnostics to stderr.")] = False,
    show_config: Annotated[bool, typer.Option("--show-config", help="Print effective config JSON.")] = False,
) -> None:
    config = default_config()

    overrides: dict[str, object] = {}
    if domain != config.domain:
        overrides["domain"] = domain
    if rounding != config.rounding.value:
        try:
            overrides["rounding"] = Rounding(rounding)
        except ValueError:
            err_console.print(f"[red]Unknown rounding mode: {escape(rounding)}. Use: half-up, half-even.[/]")
            raise typer.Exit(1) from None
    if places_above is not None:
        overrides["places_above"] = max(0, places_above)
    if places_below is not None:
        overrides["places_below"] = max(0, places_below)
    if overrides:
        config = replace(config, **overrides)

    numeric_domain = get_domain(config.domain)
    if numeric_domain is None:
        err_console.print(f"[red]Unknown domain: {escape(config.domain)}. Use: unbounded, bounded.[/]")
        raise typer.Exit(1)

    if show_config:
        _plain(console, config_json(config))
        raise typer.Exit(0)

    piped = read_piped_line(sys.stdin)
    try:
        invocation = split_tokens(list(tokens or []), number_piped=piped is not None)
    except UsageError as exc:
        _plain(err_console, f"{USAGE}\n{exc}")
        raise typer.Exit(2) from None

    text = piped if piped is not None else invocation.number
    _debug(verbose, f"source: {'stdin' if piped is not None else 'arguments'}, domain: {numeric_domain.name}")

    parsed = numeric_domain.parse(text or "")
    if isinstance(parsed, Err):
        _plain(err_console, f"error: {parsed.unwrap_err().message}")
        raise typer.Exit(1)
    magnitude = parsed.unwrap()

    unit = resolve_unit(invocation.selector, magnitude, numeric_domain.ceiling)
    explicit = parse_unit_code(invocation.selector) is not None
    _debug(verbose, f"unit: {unit.label} ({'explicit' if explicit else 'auto'})")

    try:
        conversion = convert(
            magnitude,
            unit,
            numeric_domain,
            rounding=config.rounding,
            places_above=config.places_above,
            places_below=config.places_below,
        )
    except UnsupportedUnitError as exc:
        _plain(err_console, f"error: {exc} ({exc.domain} domain)")
        raise typer.Exit(2) from None

    _plain(console, str(conversion))


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
