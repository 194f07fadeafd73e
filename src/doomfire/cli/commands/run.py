from typing import Annotated

import typer

from doomfire.cli.commands.fire_loop import build_field, build_fire_loop
from doomfire.utilities.env import Configuration
from doomfire.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    width: Annotated[
        int | None, typer.Option("--width", min=1, help="Field width in cells")
    ] = None,
    height: Annotated[
        int | None, typer.Option("--height", min=1, help="Field height in cells")
    ] = None,
    fps: Annotated[
        int | None,
        typer.Option("--fps", min=0, help="Frame cap, 0 renders as fast as possible"),
    ] = None,
    scale: Annotated[
        int | None, typer.Option("--scale", min=1, help="Window pixels per cell")
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", min=0, help="Random seed")] = None,
    max_frames: Annotated[
        int | None,
        typer.Option("--max-frames", min=1, help="Stop after this many frames"),
    ] = None,
    lit: Annotated[
        bool | None,
        typer.Option(
            "--lit/--unlit",
            help="Ignite the fire before the first frame [default: DOOMFIRE_START_LIT]",
        ),
    ] = None,
) -> None:
    """Open a window and burn. The toggle key ignites or extinguishes the fire."""

    try:
        field = build_field(width=width, height=height, seed=seed)
        start_lit = lit if lit is not None else Configuration.start_lit()
        loop = build_fire_loop(field, max_fps=fps, scale=scale)
    except ValueError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)

    if start_lit:
        field.ignite()
    loop.start(max_frames=max_frames)
