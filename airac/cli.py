"""
AIRAC CLI - prints the cycle containing a date and the cycles after it
"""
import logging
from typing import Optional

import typer

from airac.cycle import AIRACCycle
from airac.utils.date import datetime_to_str

app = typer.Typer(help="ICAO AIRAC cycle calculator", add_completion=False)


def format_cycle(cycle: AIRACCycle) -> str:
    """One output line: identifier, effective date, ineffective date."""
    return f"{cycle.display()}  {datetime_to_str(cycle.starts())}  {datetime_to_str(cycle.ends())}"


@app.command()
def show(
    target_date: Optional[str] = typer.Argument(
        None,
        help="Target date (YYYY-MM-DD or YYYYMMDD), default: today (UTC)",
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of cycles to print"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Print the AIRAC cycle containing a date.

    With --count, the following cycles are printed as well.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if target_date:
        try:
            cycle = AIRACCycle.containing(target_date)
        except ValueError as e:
            typer.echo(f"Invalid date: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        cycle = AIRACCycle.current()

    for _ in range(count):
        typer.echo(format_cycle(cycle))
        cycle = cycle.next()


if __name__ == "__main__":
    app()
