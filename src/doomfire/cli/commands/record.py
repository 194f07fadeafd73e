from pathlib import Path
from typing import Annotated

import typer

from doomfire.cli.commands.fire_loop import build_field
from doomfire.display.recorder import FireRecorder
from doomfire.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FRAMES = 120
DEFAULT_RECORD_FPS = 30


def record_command(
    output: Annotated[Path, typer.Argument(help="Destination GIF")],
    width: Annotated[int | None, typer.Option("--width", min=1)] = None,
    height: Annotated[int | None, typer.Option("--height", min=1)] = None,
    frames: Annotated[int, typer.Option("--frames", min=1)] = DEFAULT_FRAMES,
    fps: Annotated[int, typer.Option("--fps", min=1)] = DEFAULT_RECORD_FPS,
    seed: Annotated[int | None, typer.Option("--seed", min=0)] = None,
    extinguish_at: Annotated[
        int | None,
        typer.Option(
            "--extinguish-at",
            min=0,
            help="Frame at which the fire is extinguished",
        ),
    ] = None,
) -> None:
    """Record a burning fire to an animated GIF without opening a window."""

    try:
        field = build_field(width=width, height=height, seed=seed)
    except ValueError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)

    field.ignite()
    path = FireRecorder(field, fps=fps).record(
        frames, output, extinguish_at=extinguish_at
    )
    typer.echo(f"Wrote {frames} frames to {path}")
