import os

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}
FALSE_FLAG_VALUES = {"false", "0", "no", "off"}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true/false strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_FLAG_VALUES:
        return True
    if normalized in FALSE_FLAG_VALUES:
        return False
    raise ValueError(f"{env_var} must be a boolean flag")


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return _parse_int(env_var, value, minimum=minimum)


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return None
    return _parse_int(env_var, value, minimum=minimum)


def _env_optional_float(
    env_var: str,
    *,
    default: float | None,
    minimum: float | None = None,
) -> float | None:
    """Return the float value of ``env_var``; the literal ``none`` disables it."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    if value.strip().lower() == "none":
        return None
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float or 'none'") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_str(env_var: str, *, default: str) -> str:
    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _parse_int(env_var: str, value: str, *, minimum: int | None) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed
