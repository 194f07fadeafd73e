import numpy as np
import pytest

from doomfire.palette import MAX_INTENSITY, PALETTE, color_of


class TestPalette:
    """Pin the fire color ramp so rendered frames keep the classic look."""

    def test_palette_has_thirty_seven_colors(self) -> None:
        """Ensure the ramp covers every intensity from cold to white hot."""

        assert len(PALETTE) == 37
        assert MAX_INTENSITY == 36
        assert PALETTE.shape == (37, 4)
        assert PALETTE.dtype == np.uint8

    def test_endpoints_are_near_black_and_white(self) -> None:
        """Confirm the coldest color is near-black and the hottest pure white."""

        assert color_of(0) == (0x07, 0x07, 0x07, 0xFF)
        assert color_of(36) == (0xFF, 0xFF, 0xFF, 0xFF)

    def test_colors_are_opaque_and_green_never_drops(self) -> None:
        """Check every color is opaque and the ramp only brightens toward yellow and white."""

        assert np.all(PALETTE[:, 3] == 0xFF)
        assert np.all(np.diff(PALETTE[:, 1].astype(int)) >= 0)

    @pytest.mark.parametrize("intensity", [-1, 37, 255])
    def test_out_of_range_intensity_fails(self, intensity: int) -> None:
        """Verify invalid intensities raise instead of silently clamping."""

        with pytest.raises(IndexError):
            color_of(intensity)

    def test_palette_is_read_only(self) -> None:
        """Ensure callers cannot recolor the shared ramp."""

        with pytest.raises(ValueError):
            PALETTE[0] = (1, 2, 3, 4)
