"""Project-level configuration and path helpers."""

from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_MAX_SIZE = 10000
DEFAULT_API_HOST = "localhost"
DEFAULT_API_PORT = 8000


MaxSizeLike = Union[str, int]


def resolve_max_size(env_value: MaxSizeLike | None = None) -> int:
    """Resolve TIMELINE_MAX_SIZE to a positive capacity."""
    if env_value is None or env_value == "":
        return DEFAULT_MAX_SIZE

    try:
        max_size = int(env_value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeline capacity: {env_value!r}")

    if max_size < 1:
        raise ValueError(f"Timeline capacity must be >= 1, got {max_size}")
    return max_size
