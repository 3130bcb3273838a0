"""
Line helpers over a QTextDocument.

Lines are 0-based block numbers. Asking for a line the document doesn't have
raises IndexError.
"""

from PySide6.QtGui import QTextDocument


def get_line_text(document: QTextDocument, line: int) -> str:
    """Return the text of a line, without its terminator."""
    block = document.findBlockByNumber(line)
    if not block.isValid():
        raise IndexError(f"Line {line} out of range (document has {document.blockCount()} lines)")
    return block.text()


def is_blank_text(text: str) -> bool:
    """True if every character is a space or a control character (<= U+0020).

    Non-breaking and other Unicode spaces count as content.
    """
    return all(char <= " " for char in text)


def is_empty_line(document: QTextDocument, line: int) -> bool:
    """True if the line is empty or blank."""
    return is_blank_text(get_line_text(document, line))


def get_offset_of(document: QTextDocument, line: int, pattern: str) -> int:
    """
    Find pattern within a single line.

    Returns the offset relative to the start of the line, or -1 if the line
    is empty or doesn't contain pattern.
    """
    text = get_line_text(document, line)
    if not text:
        return -1
    return text.find(pattern)
