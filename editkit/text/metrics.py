"""
Text measurement in character cells.
"""

from PySide6.QtCore import QSize

from editkit.constants import DEFAULT_TAB_WIDTH


def get_text_size(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> QSize:
    """
    Measure a block of text.

    width: length of the longest line. A tab advances tab_width columns,
    a carriage return takes no space, everything else is one column.
    height: number of lines, counting a trailing unterminated line.
    """
    max_length = 0
    line_count = 1
    line_length = 0

    for char in text:
        if char == "\n":
            max_length = max(max_length, line_length)
            line_count += 1
            line_length = 0
        elif char == "\r":
            continue
        elif char == "\t":
            line_length += tab_width
        else:
            line_length += 1

    max_length = max(max_length, line_length)
    return QSize(max_length, line_count)
