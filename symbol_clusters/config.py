# symbol_clusters/config.py
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Defaults (a local .env file may override the first three)
# ---------------------------------------------------------------------------
FALLBACK_EXTENSIONS = ["kt"]
FALLBACK_EXCLUDED_FOLDERS = ["build"]
FALLBACK_TOP_N = 25

N_MAX = 999  # Row labels are rendered three digits wide
DEFAULT_WINDOW_WIDTH = 3


def parse_list(value):
    """Splits a comma separated option, dropping blank entries."""
    return [item.strip() for item in value.split(",") if item.strip()]


def clamp_top_n(n: int) -> int:
    return max(1, min(n, N_MAX))


def _env_list(name, fallback):
    value = os.getenv(name)
    if value is None:
        return list(fallback)
    return parse_list(value)


def _env_int(name, fallback):
    value = os.getenv(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        print(f"⚠️ Ignoring {name}={value!r}: not an integer. Using {fallback}.", file=sys.stderr)
        return fallback


DEFAULT_EXTENSIONS = _env_list("SYMBOL_CLUSTERS_EXT", FALLBACK_EXTENSIONS)
DEFAULT_EXCLUDED_FOLDERS = _env_list("SYMBOL_CLUSTERS_IGNORE", FALLBACK_EXCLUDED_FOLDERS)
DEFAULT_TOP_N = _env_int("SYMBOL_CLUSTERS_TOP", FALLBACK_TOP_N)
