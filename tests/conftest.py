import numpy as np
import pygame
import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def isolated_log_dir(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("DOOMFIRE_LOG_DIR", str(tmp_path / "logs"))
    yield


@pytest.fixture(autouse=True)
def init_pygame(dummy_sdl_video_driver: None) -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(20240601)


@pytest.fixture()
def scripted_drifts(monkeypatch: pytest.MonkeyPatch):
    """Replace a field's random drift source with a fixed sequence of values."""

    def install(field, values: list[int]) -> None:
        def draw(count: int) -> list[int]:
            assert len(values) <= count, "Scripted more drifts than a step draws"
            return list(values) + [0] * (count - len(values))

        monkeypatch.setattr(field, "_draw_drifts", draw)

    return install
