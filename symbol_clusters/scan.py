# symbol_clusters/scan.py
"""Finds eligible source files and feeds their lines into an aggregator."""
import os
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Iterable, Iterator, List

from tqdm import tqdm

from symbol_clusters.aggregate import FrequencyAggregator
from symbol_clusters.windows import WINDOW_WIDTH

# Files queued per worker thread in threaded mode
PENDING_PER_JOB = 2


class ScanError(Exception):
    """A path could not be walked or read. Aborts the whole scan."""

    def __init__(self, path, reason):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


# ---------------------------------------------------------------------------
# File selection
# ---------------------------------------------------------------------------
def file_extension(path) -> str:
    """Text after the last dot of the file name, or "" when there is none."""
    name = Path(path).name
    return name.rpartition(".")[2] if "." in name else ""


def is_excluded(path, excluded_folders: Iterable[str]) -> bool:
    path_str = str(path)
    return any(token in path_str for token in excluded_folders)


def _raise_walk_error(error: OSError):
    raise ScanError(error.filename or "?", error.strerror or str(error)) from error


def iter_source_files(root, extensions: Iterable[str], excluded_folders: Iterable[str]) -> Iterator[Path]:
    """Top-down walk of ``root`` yielding files with an allowed extension.

    Directories and files are visited in sorted order so repeated runs list
    files identically.
    """
    extensions = set(extensions)
    excluded_folders = list(excluded_folders)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if file_extension(path) not in extensions:
                continue
            if is_excluded(path, excluded_folders):
                continue
            if path.is_file():
                yield path


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------
def read_lines(path) -> Iterator[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                yield line.strip()
    except OSError as e:
        raise ScanError(path, e.strerror or str(e)) from e


def analyze_file(path, aggregator: FrequencyAggregator) -> FrequencyAggregator:
    aggregator.add_lines(file_extension(path), read_lines(path))
    return aggregator


def _analyze_file_alone(path, window_width):
    return analyze_file(path, FrequencyAggregator(window_width))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def analyze_files(files: List[Path], aggregator: FrequencyAggregator, jobs: int = 1, progress: bool = True):
    """Analyses ``files`` into ``aggregator``.

    With ``jobs > 1`` every file is counted into its own aggregator on a
    worker thread and merged as soon as it finishes, so no table is shared
    between threads. At most ``jobs * PENDING_PER_JOB`` files are in flight;
    the first failure cancels everything still queued.
    """
    bar = tqdm(total=len(files), desc="🔎 Scanning files", unit="file", ncols=80, disable=not progress)
    with bar:
        if jobs <= 1:
            for path in files:
                analyze_file(path, aggregator)
                bar.update(1)
            return aggregator

        with ThreadPoolExecutor(max_workers=jobs) as pool:
            pending = set()

            def merge_done(done):
                for future in done:
                    aggregator.merge(future.result())
                    bar.update(1)

            try:
                for path in files:
                    pending.add(pool.submit(_analyze_file_alone, path, aggregator.window_width))
                    if len(pending) >= jobs * PENDING_PER_JOB:
                        done, pending = wait(pending, return_when=FIRST_COMPLETED)
                        merge_done(done)
                while pending:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    merge_done(done)
            except BaseException:
                pool.shutdown(wait=False, cancel_futures=True)
                raise
    return aggregator


def analyze_path(path, extensions: Iterable[str], excluded_folders: Iterable[str],
                 window_width: int = WINDOW_WIDTH, jobs: int = 1, progress: bool = True):
    """Scans a directory tree or a single file.

    Returns ``(aggregator, file_count)``. A single file whose extension is
    not allowed gives an empty aggregator. Raises ``ScanError`` when the
    path does not exist or any eligible file cannot be read.
    """
    path = Path(path)
    extensions = list(extensions)
    aggregator = FrequencyAggregator(window_width)

    if path.is_dir():
        files = list(iter_source_files(path, extensions, excluded_folders))
    elif path.is_file():
        files = [path] if file_extension(path) in extensions else []
    else:
        raise ScanError(path, "No such file or directory")

    analyze_files(files, aggregator, jobs=jobs, progress=progress)
    return aggregator, len(files)
