# symbol_clusters/aggregate.py
from collections import Counter
from typing import Dict, Iterable, Iterator, Tuple

from symbol_clusters.classify import classify
from symbol_clusters.windows import WINDOW_WIDTH, extract_windows

# Display name of the table that sums every extension. It lives outside
# the extension mapping, so a real ".Combined" file cannot clash with it.
COMBINED_SCOPE = "Combined"


class FrequencyAggregator:
    """Owns one counter table per file extension plus a combined table.

    Every window is counted in its extension's table and in the combined
    table. Counting is plain addition, so the order in which files or lines
    arrive never changes the final tables.
    """

    def __init__(self, window_width: int = WINDOW_WIDTH):
        if not 1 <= window_width <= WINDOW_WIDTH:
            raise ValueError(f"window_width must be between 1 and {WINDOW_WIDTH}, got {window_width}")
        self.window_width = window_width
        self.extension_tables: Dict[str, Counter] = {}
        self.combined: Counter = Counter()

    def __len__(self) -> int:
        return len(self.extension_tables)

    def table(self, extension: str) -> Counter:
        if extension not in self.extension_tables:
            self.extension_tables[extension] = Counter()
        return self.extension_tables[extension]

    def add_window(self, extension: str, window: str):
        clusters = classify(window)
        if not clusters:
            return
        table = self.table(extension)
        for cluster in clusters:
            table[cluster] += 1
            self.combined[cluster] += 1

    def add_line(self, extension: str, line: str):
        for window in extract_windows(line.strip(), self.window_width):
            self.add_window(extension, window)

    def add_lines(self, extension: str, lines: Iterable[str]):
        for line in lines:
            self.add_line(extension, line)

    def merge(self, other: "FrequencyAggregator"):
        """Adds all counts of ``other`` into this aggregator."""
        for extension, table in other.extension_tables.items():
            self.table(extension).update(table)
        self.combined.update(other.combined)

    def scopes(self) -> Iterator[Tuple[str, Counter]]:
        """Extension tables in first-seen order, then the combined table."""
        yield from self.extension_tables.items()
        if self.extension_tables:
            yield COMBINED_SCOPE, self.combined
