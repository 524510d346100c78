# file: solar_resource/cli.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from solar_resource.config import DEFAULT_ENDPOINT, load_settings
from solar_resource.errors import SolarResourceError
from solar_resource.ingest import fetch_solar_table
from solar_resource.validate import print_validation_report, validate_monthly_table

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """NREL solar resource: monthly DNI / GHI / latitude-tilt averages."""


@app.command()
def fetch(
    lat: float = typer.Option(..., help="Latitude, decimal degrees"),
    lon: float = typer.Option(..., help="Longitude, decimal degrees"),
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: Optional[float] = None,
    output: Optional[Path] = typer.Option(None, help="Write the table to this CSV file"),
):
    """Fetch the monthly solar resource table for one location."""
    try:
        settings = load_settings(lat=lat, lon=lon, endpoint=endpoint, timeout=timeout)
    except EnvironmentError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=1)

    try:
        df = fetch_solar_table(
            settings.endpoint,
            settings.queries(),
            base_url=settings.base_url,
            timeout=settings.timeout,
        )
    except SolarResourceError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=1)

    table = Table(title=f"Solar Resource ({settings.lat}, {settings.lon})")
    table.add_column("Month", style="cyan")
    for col in df.columns[1:]:
        table.add_column(col, style="green", justify="right")

    for row in df.itertuples(index=False):
        table.add_row(row[0], *(f"{v:.2f}" for v in row[1:]))

    console.print(table)
    print_validation_report(validate_monthly_table(df))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        console.print(f"Saved table to {output}", markup=False)


if __name__ == "__main__":
    app()
