# symbol_clusters/render.py
"""Top-N ranking and the bordered text table printed per scope.

Example for ``render_table("kt", table, 2)``::

    Extension 'kt'
    +------+---------+----------+----------+
    |Top  2|  Single |  Tuple   |  Triple  |
    +------+---------+----------+----------+
    |    1 |  (  42  |  ()  17  |  ()}  3  |
    |    2 |  )  41  |  ->   9  |          |
    +------+---------+----------+----------+
"""
from typing import List, Mapping, Tuple

PADDING = "  "
CLUSTER_LENGTHS = (1, 2, 3)
HEADERS = ("Single", "Tuple", "Triple")

# Count width used when a column has no entries at all
MIN_COUNT_WIDTH = 1

RankedRow = Tuple[str, int]


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------
def rank(table: Mapping[str, int], length: int, n: int) -> List[RankedRow]:
    """Top ``n`` clusters of exactly ``length`` characters.

    Highest count first; equal counts are ordered by the cluster string so
    the result never depends on the table's iteration order.
    """
    rows = [(cluster, count) for cluster, count in table.items() if len(cluster) == length]
    rows.sort(key=lambda row: (-row[1], row[0]))
    return rows[:n]


# ---------------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------------
def make_number_column(n: int) -> List[str]:
    return [f" {rank_no:>4} " for rank_no in range(1, n + 1)]


def make_cluster_column(rows: List[RankedRow], length: int, n: int) -> List[str]:
    # Rows are sorted, so the first count is the widest
    count_width = len(str(rows[0][1])) if rows else MIN_COUNT_WIDTH
    cell_width = length + count_width + 3 * len(PADDING)
    cells = [
        f"{PADDING}{cluster}{PADDING}{count:>{count_width}}{PADDING}"
        for cluster, count in rows
    ]
    cells.extend(" " * cell_width for _ in range(n - len(rows)))
    return cells


def make_horizontal_line(columns: List[List[str]], sep: str = "+") -> str:
    return sep + sep.join("-" * len(column[0]) for column in columns) + sep


def make_header_line(columns: List[List[str]], headers: List[str]) -> str:
    cells = [header.ljust(len(column[0])) for header, column in zip(headers, columns)]
    return "|" + "|".join(cells) + "|"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------
def render_table(scope: str, table: Mapping[str, int], n: int) -> str:
    """Renders the top ``n`` singles, pairs and triples of one scope.

    ``n`` must be at least 1. Columns with fewer than ``n`` entries are
    padded with blank cells so every column has exactly ``n`` rows.
    """
    columns = [make_number_column(n)]
    for length in CLUSTER_LENGTHS:
        columns.append(make_cluster_column(rank(table, length, n), length, n))

    headers = [f"Top{n:>3}"] + [PADDING + header for header in HEADERS]
    horizontal_line = make_horizontal_line(columns)

    lines = [
        f"Extension '{scope}'",
        horizontal_line,
        make_header_line(columns, headers),
        horizontal_line,
    ]
    for row in range(n):
        lines.append("|" + "|".join(column[row] for column in columns) + "|")
    lines.append(horizontal_line)
    return "\n".join(lines) + "\n"
