from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_int_list(key: str) -> list[int] | None:
    """Parse a comma-separated list of integers, or None when unset."""
    raw = env_get(key)
    if raw is None:
        return None
    return [int(part) for part in raw.split(",") if part.strip()]


def env_bool(key: str) -> bool | None:
    """Parse a true/false style variable, or None when unset."""
    raw = env_get(key)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")
