"""Turn a FrameDescription into draw instructions on a Canvas."""

from __future__ import annotations

from file_viewer.core import color
from file_viewer.core.constants import (
    STATUS_PATTERN_X,
    STATUS_PROMPT_X,
    X_FACTOR,
    Y_FACTOR,
)
from file_viewer.render.canvas import Canvas
from file_viewer.render.projector import FrameDescription


def paint(frame: FrameDescription, x_factor: int = X_FACTOR, y_factor: int = Y_FACTOR) -> Canvas:
    """
    Paint a frame onto a screen-sized canvas.

    The screen is split into a line-number column, the content area
    beside it and a status row below both. Each area is its own canvas
    so text scrolled off the left of the content area cannot spill into
    the margin.
    """
    view = frame.view
    canvas_width = view.width * x_factor
    canvas_height = view.height * y_factor
    margin_width = frame.margin * x_factor
    content_height = canvas_height - y_factor

    line_numbers = Canvas(margin_width, content_height, x_factor, y_factor)
    content = Canvas(canvas_width - margin_width, content_height, x_factor, y_factor)
    status = Canvas(canvas_width, y_factor, x_factor, y_factor)

    for row_number, row in enumerate(frame.rows):
        y = row_number * y_factor
        number_color = color.LINE_NUMBER_MATCH if row.matches else color.LINE_NUMBER
        line_numbers.draw_text(0, y, str(row.number), number_color)

        content.draw_text(-frame.left_edge * x_factor, y, row.display_text)

        # Over-draw each match in the highlight color
        for span in row.highlights:
            x = span.start * x_factor - frame.left_edge * x_factor
            content.draw_text(x, y, row.display_text[span.start:span.end], color.HIGHLIGHT)

    status.draw_text(0, 0, frame.status.position, color.STATUS)
    if frame.status.capturing:
        status.draw_text(STATUS_PROMPT_X, 0, "/", color.PATTERN)
    status.draw_text(STATUS_PATTERN_X, 0, frame.status.pattern, color.PATTERN)

    screen = Canvas(canvas_width, canvas_height, x_factor, y_factor)
    screen.paste(line_numbers, 0, 0)
    screen.paste(content, frame.margin, 0)
    screen.paste(status, 0, view.height - 1)
    return screen
