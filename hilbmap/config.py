import os

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}

WORKERS_ENV_VAR = "HILBMAP_WORKERS"
CHUNK_SIZE_ENV_VAR = "HILBMAP_CHUNK_SIZE"
PROGRESS_ENV_VAR = "HILBMAP_PROGRESS"


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    parsed = _env_optional_int(env_var, minimum=minimum)
    return default if parsed is None else parsed


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    """Return the integer value of ``env_var`` or ``None`` when unset."""

    value = os.environ.get(env_var)
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


class Configuration:
    @classmethod
    def worker_count(cls) -> int:
        return _env_int(WORKERS_ENV_VAR, default=os.cpu_count() or 1, minimum=1)

    @classmethod
    def chunk_size(cls) -> int | None:
        return _env_optional_int(CHUNK_SIZE_ENV_VAR, minimum=1)

    @classmethod
    def show_progress(cls) -> bool:
        return _env_flag(PROGRESS_ENV_VAR, default=True)
