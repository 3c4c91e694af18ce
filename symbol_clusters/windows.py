# symbol_clusters/windows.py
from typing import Iterator

WINDOW_WIDTH = 3


def extract_windows(line: str, width: int = WINDOW_WIDTH) -> Iterator[str]:
    """Yields one window per character offset of ``line``.

    Windows near the end of the line are truncated instead of dropped, so
    the last two offsets give windows of length 2 and 1 (for width 3).
    """
    for i in range(len(line)):
        yield line[i:i + width]
