"""Command line interface for converting binaries to Hilbert images."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from hilbmap.config import Configuration
from hilbmap.errors import InputError, MappingInvariantViolation, OutputError
from hilbmap.logging import get_logger
from hilbmap.pipeline import convert

logger = get_logger(__name__)

EXIT_USAGE = 2
EXIT_SOFTWARE = 70

app = typer.Typer(help="Render a binary file as a Hilbert curve ordered RGB image.")


@app.command()
def main(
    input_path: Path = typer.Argument(..., help="File or directory to visualise."),
    output_path: Path = typer.Argument(..., help="Destination image (.ppm)."),
    workers: Optional[int] = typer.Option(
        None, min=1, help="Worker threads. Defaults to HILBMAP_WORKERS or the CPU count."
    ),
    chunk_size: Optional[int] = typer.Option(
        None, min=1, help="Source bytes per work item. Defaults to one canvas row."
    ),
    progress: Optional[bool] = typer.Option(
        None, "--progress/--no-progress", help="Show a progress bar."
    ),
) -> None:
    """Convert INPUT_PATH into a square PPM image at OUTPUT_PATH."""

    try:
        if workers is None:
            workers = Configuration.worker_count()
        if chunk_size is None:
            chunk_size = Configuration.chunk_size()
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc
    if progress is None:
        progress = Configuration.show_progress()

    try:
        if progress:
            with typer.progressbar(length=1, label="Mapping") as bar:

                def report(done: int, total: int) -> None:
                    bar.length = max(total, 1)
                    bar.update(done - bar.pos)

                rendering = convert(
                    input_path, output_path, workers=workers, chunk_size=chunk_size, progress=report
                )
        else:
            rendering = convert(input_path, output_path, workers=workers, chunk_size=chunk_size)
    except (InputError, OutputError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except MappingInvariantViolation as exc:
        logger.error(
            "Mapping invariant violated (index=%d, order=%d, side=%d)",
            exc.index,
            exc.order,
            exc.side,
        )
        typer.echo(f"internal error: {exc}", err=True)
        raise typer.Exit(code=EXIT_SOFTWARE) from exc

    side = rendering.layout.side
    typer.echo(f"Wrote {rendering.output} ({side}x{side})")
