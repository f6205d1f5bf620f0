"""Typer CLI for case layout editing."""

from pathlib import Path
from typing import Annotated

import typer

from editbook.application import (
    AutoResolveCommand,
    PlaceAddressesCommand,
    ResizeCellCommand,
    ResizeInput,
    SlotsInput,
)
from editbook.application.config import (
    CaseFileConfiguration,
    ConfigError,
    load_config,
    write_config,
)
from editbook.cli.commands import display_load_error, validate_command
from editbook.domain.services import compute_case_stats
from editbook.infrastructure import (
    CaseDiagramFormatter,
    CaseStatsFormatter,
    PlacementJsonExporter,
    PlacementReportFormatter,
    ResizeReportFormatter,
    ViolationReportFormatter,
)

EMPTY_SLOT_NAMES = frozenset({"none", "empty", "-"})


def _load(config_file: Path) -> CaseFileConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _write(config: CaseFileConfiguration, path: Path) -> None:
    try:
        write_config(config, path)
    except ConfigError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {path}")


app = typer.Typer(
    name="editbook",
    help="Lay out carrier cases: place addresses, check and resize cells.",
)

app.command(name="validate")(validate_command)


@app.command()
def place(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON case file")],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Place the case file's address list into its wings."""
    if output_format not in ("text", "json"):
        typer.echo(f"Error: Unknown format '{output_format}' (use text or json)", err=True)
        raise typer.Exit(code=1)

    config = _load(config_file)
    result = PlaceAddressesCommand().execute(config)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(PlacementJsonExporter().export(result))
    else:
        typer.echo(PlacementReportFormatter().format(result))


@app.command()
def resize(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON case file")],
    cell_id: Annotated[str, typer.Argument(help="Id of the cell to resize")],
    width: Annotated[int, typer.Argument(help="New width in inches")],
    apply: Annotated[
        bool,
        typer.Option("--apply", help="Commit the resize and write the case file"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to write the updated case file"),
    ] = None,
) -> None:
    """Resize a cell, taking or giving width to its right neighbors.

    Without --apply only the proposed adjustments are shown.
    """
    config = _load(config_file)
    result = ResizeCellCommand().execute(
        config, ResizeInput(cell_id=cell_id, new_width=width), apply=apply
    )
    report = ResizeReportFormatter().format(cell_id, result)

    if not result.is_valid:
        typer.echo(report, err=True)
        raise typer.Exit(code=1)

    typer.echo(report)
    if result.applied and result.config is not None:
        _write(result.config, output or config_file)


@app.command()
def fix(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON case file")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to write the fixed case file"),
    ] = None,
) -> None:
    """Snap undersized cells and shrink cells that overrun their wing.

    Shelf overflow has no single-cell fix and is reported, not repaired.
    """
    config = _load(config_file)
    result = AutoResolveCommand().execute(config)

    if result.errors:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(ViolationReportFormatter().format_auto_resolve(result))
    if result.adjustments and result.config is not None:
        _write(result.config, output or config_file)
    if result.remaining:
        raise typer.Exit(code=1)


@app.command()
def stats(
    slot: Annotated[
        list[str] | None,
        typer.Option(
            "--slot",
            "-s",
            help="Equipment type per slot, left to right (124-D, 143-D, 144-D or none)",
        ),
    ] = None,
) -> None:
    """Show cell capacity for a slot selection."""
    slots = [None if s.lower() in EMPTY_SLOT_NAMES else s for s in slot or []]
    slots_input = SlotsInput(slots=slots)
    errors = slots_input.validate()
    if errors:
        for error in errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(CaseStatsFormatter().format(compute_case_stats(slots_input.to_equipment())))


@app.command()
def diagram(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON case file")],
    with_placement: Annotated[
        bool,
        typer.Option("--place/--no-place", help="Overlay placed addresses"),
    ] = True,
) -> None:
    """Show an ASCII diagram of the case."""
    config = _load(config_file)
    result = PlaceAddressesCommand().execute(config)

    if not result.is_valid or result.case is None:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    placement = result.placement if with_placement else None
    typer.echo(CaseDiagramFormatter().format(result.case, placement))


if __name__ == "__main__":
    app()
