from doomfire.utilities.env.parsing import (_env_flag, _env_int,
                                            _env_optional_int, _env_str)

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 200
DEFAULT_MAX_FPS = 60
DEFAULT_SCALE = 1
DEFAULT_TOGGLE_KEY = "space"
DEFAULT_WINDOW_TITLE = "Doomfire"


class HostConfiguration:
    @classmethod
    def width(cls) -> int:
        return _env_int("DOOMFIRE_WIDTH", default=DEFAULT_WIDTH, minimum=1)

    @classmethod
    def height(cls) -> int:
        return _env_int("DOOMFIRE_HEIGHT", default=DEFAULT_HEIGHT, minimum=1)

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("DOOMFIRE_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=0)

    @classmethod
    def scale(cls) -> int:
        return _env_int("DOOMFIRE_SCALE", default=DEFAULT_SCALE, minimum=1)

    @classmethod
    def seed(cls) -> int | None:
        return _env_optional_int("DOOMFIRE_SEED", minimum=0)

    @classmethod
    def start_lit(cls) -> bool:
        return _env_flag("DOOMFIRE_START_LIT", default=True)

    @classmethod
    def toggle_key(cls) -> str:
        return _env_str("DOOMFIRE_TOGGLE_KEY", default=DEFAULT_TOGGLE_KEY)

    @classmethod
    def window_title(cls) -> str:
        return _env_str("DOOMFIRE_WINDOW_TITLE", default=DEFAULT_WINDOW_TITLE)
