"""CLI application entry point for boroughmap.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from boroughmap import __version__
from boroughmap.cli.output import (
    console,
    print_build_summary,
    print_classification,
    print_error,
    print_header,
    print_region_built,
    print_region_failed,
    print_region_stats,
    print_step,
    print_store_summary,
)
from boroughmap.config import (
    AssemblyConfig,
    BoroughmapSettings,
    ClassifierConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)
from boroughmap.core import RegionStoreBuilder, classify, tag_records
from boroughmap.domain import Coordinate, RegionStore
from boroughmap.exceptions import BoroughmapError, RegionStoreLoadError
from boroughmap.io import (
    RegionStoreReader,
    RegionStoreWriter,
    boroughs_geojson,
    read_point_records,
    read_raw_directory,
    write_json,
)
from boroughmap.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="boroughmap",
    help="Assemble NYC borough boundaries and classify points into boroughs.",
    add_completion=False,
    no_args_is_help=True,
)

StorePath = Annotated[
    Path,
    typer.Option("--store", "-s", help="Path to region store JSON"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Boroughmap[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Assemble borough boundaries and classify points into boroughs."""
    settings = get_default_settings().model_copy(
        update={"logging": LoggingConfig(log_file=log_file, log_level=log_level)}
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"quiet": quiet, "settings": settings}


def _is_quiet(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("quiet"))


def _settings(ctx: typer.Context) -> BoroughmapSettings:
    if ctx.obj and "settings" in ctx.obj:
        return ctx.obj["settings"]
    return get_default_settings()


def _load_store(store_path: Path) -> RegionStore:
    """Load a region store or exit with an error message."""
    try:
        return RegionStoreReader(store_path).load()
    except RegionStoreLoadError as e:
        print_error(f"Could not load region store: {e.reason}")
        raise typer.Exit(code=1)


@app.command()
def build(
    ctx: typer.Context,
    raw_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory of <borough>.json Overpass relation responses",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output region store path"),
    ] = Path("boroughs.json"),
    stride: Annotated[
        int,
        typer.Option(
            "--stride",
            help="Keep every Nth boundary point in the simplified ring",
            min=1,
        ),
    ] = 10,
) -> None:
    """Build a region store from raw boundary relations.

    Example:
        boroughmap build raw/ -o boroughs.json
    """
    quiet = _is_quiet(ctx)

    if not raw_dir.is_dir():
        print_error(
            f"Raw boundary directory not found: {raw_dir}",
            details="Expected files such as manhattan.json and brooklyn.json.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Reading raw boundaries")

    try:
        sources = read_raw_directory(raw_dir)
    except (OSError, ValueError) as e:
        print_error(f"Could not read raw boundaries: {e}")
        raise typer.Exit(code=1)

    if not sources:
        print_error(f"No borough files found in {raw_dir}")
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"  {len(sources)} boroughs found")
        print_step("Assembling boundaries")

    settings = _settings(ctx).model_copy(
        update={"assembly": AssemblyConfig(simplify_stride=stride)}
    )
    report = RegionStoreBuilder(settings).build(sources)

    if not quiet:
        for boundary in report.store.boundaries:
            print_region_built(
                boundary.region.display_name,
                len(boundary.full),
                len(boundary.simplified),
            )
        for region, error in report.errors.items():
            print_region_failed(region.display_name, str(error))

    if report.store.is_empty():
        print_error("No borough boundary could be built")
        raise typer.Exit(code=1)

    try:
        RegionStoreWriter(report.store, output).save()
    except BoroughmapError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_build_summary(str(output), report.stats)


@app.command(name="classify")
def classify_point(
    ctx: typer.Context,
    lat: Annotated[
        float,
        typer.Option("--lat", help="Latitude in degrees", show_default=False),
    ],
    lon: Annotated[
        float,
        typer.Option("--lon", help="Longitude in degrees", show_default=False),
    ],
    store: StorePath = Path("boroughs.json"),
    full: Annotated[
        bool,
        typer.Option("--full", help="Test full-resolution rings instead of simplified"),
    ] = False,
) -> None:
    """Classify a single point.

    Example:
        boroughmap classify --lat 40.7580 --lon -73.9855
    """
    regions = _load_store(store)

    try:
        result = classify(
            Coordinate(lat=lat, lon=lon),
            regions,
            use_simplified=not full,
            config=_settings(ctx).classifier,
        )
    except BoroughmapError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_classification(result)


@app.command(name="classify-file")
def classify_file(
    ctx: typer.Context,
    points_file: Annotated[
        Path,
        typer.Argument(help="JSON list of records with lat and lng keys", show_default=False),
    ],
    store: StorePath = Path("boroughs.json"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write tagged records to this path"),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: sequential)",
            min=1,
        ),
    ] = None,
    medium_threshold: Annotated[
        float,
        typer.Option("--medium-threshold", help="MEDIUM confidence cutoff in degrees"),
    ] = 0.001,
    low_threshold: Annotated[
        float,
        typer.Option("--low-threshold", help="LOW confidence cutoff in degrees"),
    ] = 0.005,
) -> None:
    """Classify every record in a JSON points file."""
    quiet = _is_quiet(ctx)
    regions = _load_store(store)

    try:
        records = read_point_records(points_file)
    except (OSError, ValueError) as e:
        print_error(f"Could not read points: {e}")
        raise typer.Exit(code=1)

    try:
        settings = _settings(ctx).model_copy(
            update={
                "classifier": ClassifierConfig(
                    medium_threshold=medium_threshold,
                    low_threshold=low_threshold,
                ),
                "processing": ProcessingConfig(max_workers=workers),
            }
        )
    except ValueError as e:
        print_error("Invalid thresholds", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step(f"Classifying {len(records):,} points")

    tagged, batch = tag_records(
        records,
        regions,
        config=settings.classifier,
        max_workers=settings.processing.max_workers,
    )

    if batch.error is not None:
        print_error(str(batch.error))

    if not quiet:
        print_region_stats(batch.region_stats(), total=len(batch))

    if output is not None:
        write_json(tagged, output, indent=2)
        if not quiet:
            console.print(f"  Saved to {output}")


@app.command(name="export-geojson")
def export_geojson(
    store: StorePath = Path("boroughs.json"),
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="GeoJSON output path"),
    ] = Path("boroughs.geojson"),
    simplified: Annotated[
        bool,
        typer.Option("--simplified", help="Export simplified rings"),
    ] = False,
) -> None:
    """Export borough polygons as a GeoJSON FeatureCollection."""
    regions = _load_store(store)
    write_json(boroughs_geojson(regions, simplified=simplified), output)
    console.print(f"  {len(regions)} boroughs written to {output}")


@app.command()
def regions(store: StorePath = Path("boroughs.json")) -> None:
    """List the boroughs in a region store."""
    print_store_summary(_load_store(store))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
