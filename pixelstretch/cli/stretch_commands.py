"""
Stretch CLI Commands for PixelStretch

Command line interface applying the directional stretch effect to image files.

Author: B.G.
"""

import logging
import sys

import click
import taichi as ti

import pixelstretch as ps
from pixelstretch import constants as cte
from pixelstretch import pool


def _init_taichi(arch):
    ti.init(arch=ti.gpu if arch == "gpu" else ti.cpu)
    # Fields from a previous runtime are invalid after ti.init
    pool.reset()


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Output image (default: stretched_<input name> next to the input)",
)
@click.option(
    "--intensity",
    "-i",
    type=click.IntRange(cte.MIN_INTENSITY, cte.MAX_INTENSITY),
    default=cte.DEFAULT_INTENSITY,
    show_default=True,
    help="Stretch rate, 13 is gradual and 1 is the strongest",
)
@click.option(
    "--start",
    "-s",
    type=int,
    default=None,
    help="Row (up/down) or column (left/right) where the stretch begins (default: middle of the shortest side)",
)
@click.option(
    "--direction",
    "-d",
    type=click.Choice([d.value for d in ps.Direction], case_sensitive=False),
    default=cte.DEFAULT_DIRECTION,
    show_default=True,
    help="Stretch direction",
)
@click.option("--random", "use_random", is_flag=True, help="Pick random intensity, start and direction")
@click.option("--seed", type=int, default=None, help="Seed for --random")
@click.option(
    "--max-size",
    type=int,
    default=None,
    help=f"Down-scale the image to fit within MAX_SIZE pixels before stretching (e.g. {cte.MAX_DISPLAY_SIZE})",
)
@click.option("--show", is_flag=True, help="Show a before/after preview with matplotlib")
@click.option(
    "--arch",
    type=click.Choice(["cpu", "gpu"]),
    default="cpu",
    show_default=True,
    help="Taichi backend",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def stretch(
    input_image,
    output,
    intensity,
    start,
    direction,
    use_random,
    seed,
    max_size,
    show,
    arch,
    verbose,
):
    """
    Apply the directional stretch effect to an image.

    Rows (or columns) past the starting pixel are replaced by gradients
    between neighbouring source rows, creating a melting effect. The output
    has the same size as the input.

    INPUT_IMAGE: Path to any image Pillow can read

    Examples:

        # Gentle downward stretch from the middle
        pxs-stretch photo.png

        # Strong upward stretch from row 120
        pxs-stretch photo.png -i 2 -s 120 -d up -o melted.png

        # Random parameters, reproducible
        pxs-stretch photo.jpg --random --seed 7 --show
    """
    try:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("pixelstretch").setLevel(logging.DEBUG)
            click.echo(f"Loading image from '{input_image}'...")

        _init_taichi(arch)

        image = ps.io.load_image(input_image)
        if max_size is not None:
            image = ps.io.fit_to_display(image, max_size)
            if verbose:
                click.echo(f"Working size: {image.width}x{image.height}")

        if use_random:
            params = ps.misc.random_params(image.width, image.height, seed=seed)
        else:
            if start is None:
                start = ps.io.default_starting_pixel(image.width, image.height)
            params = ps.StretchParams(intensity=intensity, starting_pixel=start, direction=direction)
        params = params.normalized(image.width, image.height)

        if verbose:
            click.echo(
                f"Stretching {image.width}x{image.height} image: intensity={params.intensity}, "
                f"start={params.starting_pixel}, direction={params.direction.value}"
            )

        result = ps.stretch_image(image, params)

        if output is None:
            output = ps.io.default_output_path(input_image)
        ps.io.save_image(result, output)

        click.echo(
            f"Stretched '{input_image}' -> '{output}' "
            f"(intensity={params.intensity}, start={params.starting_pixel}, "
            f"direction={params.direction.value})"
        )

        if show:
            ps.misc.show_before_after(image, result, title=f"{params.direction.value}, intensity {params.intensity}")

    except ImportError as e:
        click.echo(f"Error: Missing dependency - {e}", err=True)
        sys.exit(1)

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    stretch()
