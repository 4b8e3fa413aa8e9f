"""Drawing the graph frame, colour key and bars onto a canvas."""

from __future__ import annotations

from typing import Iterable

from abrprint.canvas import Canvas, Font, Rect
from abrprint.config import BAR_COLORS, GRAPH_COLOR1, GRAPH_COLOR2, GRAPH_THICKNESS
from abrprint.data import DataError, GraphBar, GraphData

LABEL_SIZE = 14
FILE_LABEL_ANGLE = 40
KEY_TILE = 10
KEY_OFFSET = 70


def format_value(value: float) -> str:
    """Format a value with six decimals and drop the last four characters.

    This leaves two decimals, truncated rather than rounded at the sixth.
    """
    text = f"{value:f}"
    return text[: len(text) - 4] if len(text) >= 4 else text


def print_graph_frame(canvas: Canvas, graph_data: GraphData, font: Font) -> None:
    """Draw the graph frame, its file labels, divisions and value markers.

    The horizontal position of each file's label is stored in
    `graph_data.file_positions`.
    """
    frame = graph_data.frame
    if not graph_data.files:
        raise DataError("No files to lay out along the graph")
    if graph_data.vert_divisions <= 0:
        raise DataError("The graph needs at least one vertical division")

    col_width = frame.w // len(graph_data.files)
    positions = []
    for x, name in enumerate(graph_data.files):
        label_x = frame.x + x * col_width + 20
        canvas.print_text(
            name,
            label_x,
            frame.y + frame.h + 5 + GRAPH_THICKNESS,
            LABEL_SIZE,
            FILE_LABEL_ANGLE,
            GRAPH_COLOR1,
            font,
        )
        positions.append(label_x)

        divider_x = frame.x + (x + 1) * col_width + GRAPH_THICKNESS
        canvas.draw_line((divider_x, frame.y), (divider_x, frame.y + frame.h), GRAPH_COLOR2)
    graph_data.file_positions = positions

    canvas.draw_line((frame.x, frame.y), (frame.x + frame.w, frame.y), GRAPH_COLOR2)

    divisions = graph_data.vert_divisions
    row_height = frame.h // divisions
    step = (graph_data.range_max - graph_data.range_min) / divisions
    for x in range(divisions + 1):
        y = frame.y + x * row_height
        canvas.draw_line((frame.x, y), (frame.x + frame.w, y), GRAPH_COLOR2)

        label = format_value(step * (divisions - x) + graph_data.range_min)
        canvas.print_text(
            label,
            frame.x - 20 - 5 * len(label) - GRAPH_THICKNESS,
            y - 5,
            LABEL_SIZE,
            0,
            GRAPH_COLOR1,
            font,
        )

    bottom = frame.y + frame.h + GRAPH_THICKNESS
    for i in range(GRAPH_THICKNESS):
        canvas.draw_polygon(
            [
                (frame.x + i, frame.y),
                (frame.x + i, bottom - i),
                (frame.x + frame.w, bottom - i),
            ],
            GRAPH_COLOR1,
        )


def print_keys(canvas: Canvas, labels: list[str], graph_data: GraphData, font: Font) -> None:
    """Draw a colour tile and name for every database column above the frame."""
    frame = graph_data.frame
    xpos = frame.x
    ypos = frame.y - KEY_OFFSET

    for index, label in enumerate(labels[2:]):
        tile = Rect(xpos, ypos + (LABEL_SIZE - KEY_TILE) // 2, KEY_TILE, KEY_TILE)
        canvas.fill_rect(tile, BAR_COLORS[index % len(BAR_COLORS)])
        xpos += KEY_TILE + 5

        text_rect = canvas.print_text(label, xpos, ypos, LABEL_SIZE, 0, GRAPH_COLOR1, font)
        xpos += KEY_TILE + 5
        xpos += text_rect.w + 25

        if xpos >= frame.w * 0.9:
            xpos = frame.x
            ypos += int(LABEL_SIZE * 1.5)


def print_bars(
    canvas: Canvas,
    bars: Iterable[GraphBar],
    font: Font | None = None,
    print_values: bool = False,
) -> None:
    """Fill each bar in order, writing its value on it when asked."""
    if print_values and font is None:
        raise DataError("A font is needed to print bar values")
    for bar in bars:
        canvas.fill_rect(bar.rect, bar.color)
        if print_values:
            canvas.print_text(
                format_value(bar.value),
                bar.rect.x + 5,
                bar.rect.y + 5,
                LABEL_SIZE,
                0,
                GRAPH_COLOR1,
                font,
            )