"""Text wrapping for fixed-width columns."""

from typing import Callable

from tablepdf.fonts import FontStyle
from tablepdf.fonts.metrics import FontMetrics


def usable_text_width(column_width: float, cell_x_margin: float) -> float:
    """
    Width available to text inside a column.

    Both cell margins are removed, plus one more so text never touches the
    column's right border.
    """
    return column_width - (2 * cell_x_margin) - cell_x_margin


def split_text_to_lines(text: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    """
    Split text into lines no wider than max_width where possible.

    Explicit newlines always start a new line. Within a line, characters are
    accumulated until the measured width exceeds max_width; the line is then
    broken at the last space of the buffer when the next character is not a
    space, otherwise the whole buffer is emitted, overshooting by at most the
    one character the extra cell margin of usable_text_width() leaves room
    for. A buffer without a space between words keeps its overflowing
    character for the next line, so long words are split character-wise
    rather than spilling over the border.

    Args:
        text: Raw text. Carriage returns are ignored.
        max_width: Maximum line width in points.
        measure: Function returning the rendered width of a string in points.

    Returns:
        Lines in order. Empty text yields a single empty line.
    """
    lines: list[str] = []
    for unit in text.replace("\r", "").split("\n"):
        lines.extend(_wrap_unit(unit, max_width, measure))
    return lines


def _wrap_unit(unit: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    lines: list[str] = []
    buffer = ""

    for position, char in enumerate(unit):
        buffer += char
        if measure(buffer) <= max_width:
            continue

        next_char = unit[position + 1] if position + 1 < len(unit) else None
        line = buffer.strip()
        if " " in line:
            if next_char == " ":
                # The overflowing character ends a word: keep the word whole
                lines.append(line)
                buffer = ""
            else:
                # Word break: the remainder keeps its leading space until stripped
                space_at = buffer.rfind(" ")
                lines.append(buffer[:space_at].strip())
                buffer = buffer[space_at:]
            continue

        if len(line) > 1 and measure(line) > max_width:
            lines.append(buffer[:-1].strip())
            buffer = char
        else:
            lines.append(line)
            buffer = ""

    if buffer.strip() or not lines:
        lines.append(buffer.strip())
    return lines


def wrap_text(
    metrics: FontMetrics, style: FontStyle, font_size: float, max_width: float, text: str
) -> list[str]:
    """
    Wrap text for a column using real font metrics.

    Args:
        metrics: Font metrics provider.
        style: Resolved font style of the column.
        font_size: Font size in points.
        max_width: Usable text width in points.
        text: Raw column text.

    Returns:
        Wrapped lines.
    """

    def measure(value: str) -> float:
        return font_size * metrics.string_width(style, value) / 1000

    return split_text_to_lines(text, max_width, measure)
