"""focalcrop CLI.

Command-line interface for locating focal points and cutting smart crops.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from PIL import Image

from focalcrop import __version__
from focalcrop.config import ConfigError, settings
from focalcrop.core import SmartCropper
from focalcrop.raster import PillowRaster, RasterError
from focalcrop.utils.logging import (
    configure_logging,
    get_logger,
    set_correlation_context,
)

app = typer.Typer(
    name="focalcrop",
    help="focalcrop: crop images around their most interesting region",
    add_completion=False,
)

_JPEG_SUFFIXES = frozenset({".jpg", ".jpeg"})

# Bad input or configuration; reported without a traceback
_EXPECTED_ERRORS = (ValueError, RasterError, ConfigError)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"focalcrop {__version__}")


@app.command()
def focal(
    image_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the image file",
        ),
    ],
    slices: Annotated[
        int | None,
        typer.Option("--slices", "-n", help="Strips per axis (default: SLICE_COUNT)"),
    ] = None,
    weight: Annotated[
        float | None,
        typer.Option(
            "--weight",
            "-w",
            help="0 = entropy only, 1 = color only (default: COLOR_WEIGHT)",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Print the focal point of an image."""
    _configure_logging(verbose)
    logger = get_logger(__name__)
    set_correlation_context(image_id=str(image_path))

    slice_count = settings.SLICE_COUNT if slices is None else slices
    color_weight = settings.COLOR_WEIGHT if weight is None else weight
    logger.info("Locating focal point", slices=slice_count, weight=color_weight)

    try:
        with PillowRaster(image_path) as image:
            focal_point = SmartCropper(image).get_focal_point(
                slice_count=slice_count, weight=color_weight
            )
    except _EXPECTED_ERRORS as e:
        logger.error("Focal point search failed", error=str(e))
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None
    except Exception as e:
        logger.exception("Focal point search failed")
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None

    if json_output:
        output_data = {
            "x": focal_point.x,
            "y": focal_point.y,
            "x_weight": focal_point.x_weight,
            "y_weight": focal_point.y_weight,
        }
        typer.echo(json.dumps(output_data, indent=2))
    else:
        typer.echo(f"Focal point: x={focal_point.x:.4f} y={focal_point.y:.4f}")
        typer.echo(f"Bias: x={focal_point.x_weight:+d} y={focal_point.y_weight:+d}")


@app.command()
def crop(  # noqa: PLR0913
    image_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the image file",
        ),
    ],
    width: Annotated[int, typer.Option("--width", "-W", help="Crop width in pixels")],
    height: Annotated[
        int, typer.Option("--height", "-H", help="Crop height in pixels")
    ],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the crop to this file")
    ] = None,
    save: Annotated[
        bool,
        typer.Option("--save", help="Write the crop into OUTPUT_DIR"),
    ] = False,
    cover: Annotated[
        bool,
        typer.Option("--cover", help="Resize the image to cover the target first"),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Compute the smart crop of an image, and optionally write it."""
    _configure_logging(verbose)
    logger = get_logger(__name__)
    set_correlation_context(image_id=str(image_path), target=f"{width}x{height}")

    logger.info("Computing crop", cover=cover)

    try:
        destination = output
        if destination is None and save:
            destination = settings.require_output_dir() / (
                f"{image_path.stem}-{width}x{height}{image_path.suffix}"
            )

        with PillowRaster(image_path) as image:
            if cover:
                image.resize_to_cover(width, height)
            region = SmartCropper(image).get_crop_region(width, height)

            if destination is not None:
                destination.parent.mkdir(parents=True, exist_ok=True)
                _save(image.crop(region), destination)
                logger.info("Crop saved", path=str(destination))
    except _EXPECTED_ERRORS as e:
        logger.error("Crop failed", error=str(e))
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None
    except Exception as e:
        logger.exception("Crop failed")
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None

    if json_output:
        output_data: dict[str, object] = {
            "x": region.x,
            "y": region.y,
            "width": region.width,
            "height": region.height,
        }
        if destination is not None:
            output_data["output"] = str(destination)
        typer.echo(json.dumps(output_data, indent=2))
    else:
        typer.echo(f"Crop: x={region.x} y={region.y} {region.width}x{region.height}")
        if destination is not None:
            typer.echo(f"Saved: {destination}")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """focalcrop: crop images around their most interesting region."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


def _echo_error(error: Exception, *, json_output: bool) -> None:
    if json_output:
        typer.echo(json.dumps({"error": str(error)}))
    else:
        typer.echo(f"Error: {error}", err=True)


def _save(image: Image.Image, destination: Path) -> None:
    if destination.suffix.lower() in _JPEG_SUFFIXES:
        image.save(destination, quality=settings.JPEG_QUALITY)
    else:
        image.save(destination)


if __name__ == "__main__":  # pragma: no cover
    app()
