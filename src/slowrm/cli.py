"""CLI interface using Typer and Rich."""

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from slowrm.config import AppConfig, load_app_config
from slowrm.errors import SlowRmError
from slowrm.rate_limiter import SlowRm
from slowrm.size import U64_MAX, Size, Unit, format_quantity
from slowrm.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Throttled removal planning tool")
console = Console()


def human_size(byte_count: int) -> str:
    # The floor case can push rate * rounds past the 64-bit range
    if byte_count > U64_MAX:
        return f">{Size.from_bytes(U64_MAX)}"
    return str(Size.from_bytes(byte_count))


def load_config_or_exit() -> AppConfig:
    """Load application configuration.

    Raises:
        typer.Exit: If configuration is invalid.
    """
    try:
        return load_app_config()
    except ValidationError as e:
        console.print(f"[red]Configuration error:[/red]\n{e}")
        raise typer.Exit(1)


@app.command()
def plan(
    rate: Optional[str] = typer.Option(None, "--rate", help="Bytes per second to remove (e.g. '5GB', '512KB')"),
    chunks_per_second: Optional[int] = typer.Option(None, "--chunks-per-second", help="Removal rounds per second"),
    log_file: Optional[str] = typer.Option(None, "--log-file"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Show how a removal rate is split into per-round chunks.

    Nothing is removed; values not given on the command line come from
    SLOWRM_RATE and SLOWRM_CHUNK_REMOVAL_PER_SECOND.

    Example:
        slowrm plan --rate 5GB --chunks-per-second 100
    """
    app_config = load_config_or_exit()
    configure_logging(log_file or app_config.log_file, verbose or app_config.verbose)
    logger = get_logger(__name__)

    try:
        rate_size = Size.parse(rate) if rate is not None else app_config.rate_size
        slow_rm = SlowRm.from_size(
            rate_size,
            chunks_per_second
            if chunks_per_second is not None
            else app_config.chunk_removal_per_second,
        )
        removal_plan = slow_rm.plan()

        console.print(f"[cyan]Configured rate:[/cyan] {slow_rm.rate_size}/s\n")

        table = Table(title="Removal Plan")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", justify="right", style="green")
        table.add_column("Bytes", justify="right", style="magenta")

        table.add_row("Rounds per second", str(removal_plan.rounds_per_second), "")
        table.add_row(
            "Chunk size",
            human_size(removal_plan.chunk_size),
            str(removal_plan.chunk_size),
        )
        table.add_row(
            "Effective rate",
            f"{human_size(removal_plan.bytes_per_second)}/s",
            str(removal_plan.bytes_per_second),
        )
        table.add_row(
            "Dropped per second",
            human_size(removal_plan.dropped_bytes_per_second),
            str(removal_plan.dropped_bytes_per_second),
        )
        console.print(table)

        if removal_plan.overshoots:
            console.print(
                "[yellow]Rate is lower than the number of rounds: "
                "each round removes the whole rate.[/yellow]"
            )

        logger.info(
            "plan_computed",
            rate=removal_plan.rate,
            rounds_per_second=removal_plan.rounds_per_second,
            chunk_size=removal_plan.chunk_size,
            dropped_bytes_per_second=removal_plan.dropped_bytes_per_second,
        )

    except SlowRmError as e:
        console.print(f"[red]Invalid removal rate: {str(e)}[/red]")
        logger.error("invalid_rate_config", error=str(e))
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Validation error: {str(e)}[/red]")
        logger.error("validation_error", error=str(e))
        raise typer.Exit(1)


@app.command()
def convert(
    value: str,
    unit: Optional[str] = typer.Option(None, "--unit", help="Only show this unit (B, KB, MB, GB, TB)"),
) -> None:
    """Show a size in human-readable form and in each unit.

    Example:
        slowrm convert 1.5GB
        slowrm convert 4096 --unit KB
    """
    try:
        size = Size.parse(value)
        units = [Unit.from_abbreviation(unit)] if unit else list(Unit)
    except ValueError as e:
        console.print(f"[red]Validation error: {str(e)}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{size}[/bold]\n")

    table = Table(title="Conversions")
    table.add_column("Unit", style="cyan")
    table.add_column("Value", justify="right", style="green")

    for u in units:
        table.add_row(u.abbreviation, format_quantity(size.as_unit(u)))

    console.print(table)


if __name__ == "__main__":
    app()
