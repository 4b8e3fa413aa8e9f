"""Reading Abricate summary tables and turning them into graph bars."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TextIO

from abrprint.canvas import Rect
from abrprint.config import BAR_COLORS, GRAPH_THICKNESS, Color

HEADER_BUFFER_SIZE = 4096
NO_HIT = "."

_LEADING_FLOAT = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class DataError(Exception):
    """Raised when an input table cannot be read or graphed."""


@dataclass
class GraphData:
    """Position of the graph frame, the files along it and the value range."""

    frame: Rect
    files: list[str]
    file_positions: list[int] = field(default_factory=list)
    vert_divisions: int = 10
    range_min: float = 0.0
    range_max: float = 0.0

    def __post_init__(self) -> None:
        if not self.file_positions:
            self.file_positions = [0] * len(self.files)


@dataclass
class GraphBar:
    """One bar of the graph: its database label, value, rectangle and colour."""

    label: str
    value: float
    rect: Rect
    color: Color


def make_labels(filename: str, stream: TextIO) -> list[str]:
    """Read the header line from `stream` and return the column labels.

    The character that ends the header line (normally a carriage return) is
    not part of the last label. The stream is left at the start of the data.
    """
    line = stream.readline()
    if not line:
        raise DataError(f"{filename} appears to be empty")
    line = line[:-1] if line.endswith("\n") else line
    if len(line) >= HEADER_BUFFER_SIZE:
        raise DataError(f"{filename} has a header that is too long")
    if not line.startswith("#"):
        raise DataError(f"{filename} does not contain a header to process")
    if len(line) == 1:
        return []
    return line[1:-1].split("\t")


def _trim_path(entry: str) -> str:
    cut = entry.rfind("/", 0, len(entry) - 1)
    return entry[cut + 1 :]


def make_table(filename: str, labels: list[str], stream: TextIO) -> list[list[str]]:
    """Read the rest of `stream` into one list of entries per label.

    Whitespace-separated entries are dealt to the columns in turn. Paths in
    the FILE column are cut down to their file names.
    """
    if not labels:
        raise DataError(f"{filename} has no column labels to fill")
    table: list[list[str]] = [[] for _ in labels]
    for i, entry in enumerate(stream.read().split()):
        table[i % len(labels)].append(entry)

    file_index = labels.index("FILE") if "FILE" in labels else 0
    table[file_index] = [_trim_path(entry) for entry in table[file_index]]
    return table


def parse_hit(entry: str) -> float | None:
    """Return the first numeric value of an entry, or None when it holds no hit.

    Entries with several hits separate them with ';'; only the first counts.
    """
    if entry == NO_HIT:
        return None
    first = entry.split(";", 1)[0]
    match = _LEADING_FLOAT.match(first)
    if match is None:
        raise DataError(f"Entry {entry!r} does not hold a numeric value")
    return float(match.group())


def _data_columns(table: list[list[str]]) -> list[list[str]]:
    return table[2:]


def get_data_range(table: list[list[str]], graph_data: GraphData) -> None:
    """Set the value range of `graph_data` from the data columns of `table`.

    The range is padded by 25% of its width, or by 5 when all values are
    equal. The top is capped at 100; the bottom becomes 100 when padding
    would take it to zero or below.
    """
    values = [
        value
        for column in _data_columns(table)
        for value in map(parse_hit, column)
        if value is not None
    ]
    low = min(values, default=0.0)
    high = max(values, default=0.0)

    margin = 5.0 if high == low else (high - low) * 0.25
    graph_data.range_max = high + margin if high + margin < 100.0 else 100.0
    graph_data.range_min = low - margin if low - margin > 0.0 else 100.0


def _truncate_div(a: int, b: int) -> int:
    return int(a / b)


def generate_bars(
    graph_data: GraphData, labels: list[str], table: list[list[str]]
) -> list[GraphBar]:
    """Build a bar for every non-zero value of every database column."""
    raw = [
        [hit if (hit := parse_hit(entry)) is not None else 0.0 for entry in table[x]]
        for x in range(2, len(labels))
    ]
    if not raw:
        return []
    if not graph_data.files:
        raise DataError("No files to place bars for")

    frame = graph_data.frame
    entry_width = frame.w // len(graph_data.files) + 1
    bar_width = entry_width - GRAPH_THICKNESS * 4
    padding = _truncate_div(entry_width - bar_width, 2)

    many = len(raw) > 3
    bar_width = _truncate_div(bar_width, len(raw) + (1 if many else 0))
    bar_pad = bar_width
    if many:
        bar_width *= 2

    value_range = graph_data.range_max - graph_data.range_min
    bars = []
    for x, column in enumerate(raw):
        for y, value in enumerate(column):
            if value == 0:
                continue
            xpos = graph_data.file_positions[y] - 15 + padding + bar_pad * x
            height = (
                int(frame.h * ((value - graph_data.range_min) / value_range))
                if value_range
                else 0
            )
            ypos = frame.y + (frame.h - height) + 1
            bars.append(
                GraphBar(
                    label=labels[x + 2],
                    value=value,
                    rect=Rect(xpos, ypos, bar_width, height),
                    color=BAR_COLORS[x % len(BAR_COLORS)],
                )
            )
    return bars


def focus_short_bars(bars: list[GraphBar]) -> list[GraphBar]:
    """Return the bars ordered tallest first, so short bars are drawn on top."""
    return sorted(bars, key=lambda bar: bar.rect.h, reverse=True)