"""Text analysis helpers for the editor"""

from editkit.text.document import get_line_text, get_offset_of, is_blank_text, is_empty_line
from editkit.text.fuzzy import fuzzy_score, rank_candidates, resolve_locale
from editkit.text.metrics import get_text_size

__all__ = [
    "fuzzy_score",
    "get_line_text",
    "get_offset_of",
    "get_text_size",
    "is_blank_text",
    "is_empty_line",
    "rank_candidates",
    "resolve_locale",
]
