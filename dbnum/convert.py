import math
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from ._cli_output import info, warn
from .chinese import MAX_NUMERAL
from .styles import NumeralStyle, render, render_all


# User can access help message with shortcut -h
app = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]})


@app.callback(invoke_without_command=True)
def convert(
    value: float = typer.Argument(..., help="Number to render. Options go before it; put negative values after `--`, e.g. `convert -s dbnum1 -- -5.25`."),
    style: Optional[NumeralStyle] = typer.Option(None, "-s", "--style", case_sensitive=False, help="Only print this style: dbnum1|dbnum2|dbnum3|dbnum4"),
    formal: bool = typer.Option(False, "-f", "--formal", help="Use formal digit glyphs (零壹贰) for dbnum3"),
    one_ten: bool = typer.Option(False, "-o", "--one-ten", help="Keep the leading 一 before 十 (12 -> 一十二)"),
):
    """CLI: render a number in the spreadsheet [DBNum1]-[DBNum4] forms.

    Contract:
    - Input: any float. Values beyond the numeral range print as plain digits.
    - Output without --style: a table with one row per style.
    - Output with --style: the rendered string only, on one line.
    """
    if not math.isfinite(value) or abs(value) > MAX_NUMERAL:
        warn(f"{value} is outside the numeral range; word styles fall back to plain digits")

    if style is None:
        results = render_all(value, formal=formal, leading_one_for_ten=one_ten)
        print(_results_table(value, results))
        return

    if formal and style is not NumeralStyle.DBNUM3:
        info("--formal only changes dbnum3; dbnum2 is always formal")

    print(render(value, style, formal=formal, leading_one_for_ten=one_ten))


def _results_table(value: float, results: dict[NumeralStyle, str]) -> Table:
    """Build a two-column Rich table: style label -> rendered text."""
    table = Table(title=f"{value:g}")
    table.add_column("Style", style="cyan", no_wrap=True)
    table.add_column("Output", no_wrap=True)
    for style, text in results.items():
        table.add_row(escape(style.label), text)
    return table


# Entry point for running the script directly
if __name__ == '__main__':
    app()
