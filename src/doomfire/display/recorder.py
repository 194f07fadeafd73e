"""Record a :class:`~doomfire.field.FireField` to an animated GIF."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from doomfire.field import FireField
from doomfire.utilities.logging import get_logger

logger = get_logger(__name__)


class FireRecorder:
    """Render a field frame by frame without opening a window.

    Each recorded frame is the field rendered *before* it is stepped, matching
    the order the windowed loop uses.
    """

    def __init__(self, field: FireField, *, fps: int = 30) -> None:
        if fps <= 0:
            raise ValueError("fps must be a positive integer")
        self._field = field
        self._fps = fps

    @property
    def fps(self) -> int:
        return self._fps

    def capture(self) -> Image.Image:
        """Render the current field state into a new RGB image."""

        buffer = bytearray(self._field.frame_size)
        self._field.render(buffer)
        size = (self._field.width, self._field.height)
        return Image.frombytes("RGBA", size, bytes(buffer)).convert("RGB")

    def record(
        self,
        frames: int,
        output_path: str | Path,
        *,
        extinguish_at: int | None = None,
    ) -> Path:
        """Capture ``frames`` frames into a GIF at ``output_path``.

        When ``extinguish_at`` is given the fire is extinguished just before
        that frame is captured, so the recording shows it dying out.
        """

        if frames <= 0:
            raise ValueError("frames must be a positive integer")

        path = Path(output_path)
        images: list[Image.Image] = []
        for index in range(frames):
            if extinguish_at is not None and index == extinguish_at:
                self._field.extinguish()
            images.append(self.capture())
            self._field.step()

        path.parent.mkdir(parents=True, exist_ok=True)
        # GIF durations are stored in 10 ms increments.
        duration_ms = max(int(round((1000 / self._fps) / 10.0) * 10), 10)

        first, *rest = images
        first.save(
            path,
            save_all=True,
            append_images=rest,
            format="GIF",
            duration=duration_ms,
            loop=0,
        )
        logger.info("Recorded %s frames to %s", frames, path)
        return path
