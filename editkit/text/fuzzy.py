"""
Fuzzy scoring for completion and quick-open candidates.
"""

from collections.abc import Iterable

from PySide6.QtCore import QLocale

from editkit.constants import (
    MATCH_SCORE,
    SEPARATOR_BONUS,
    SEQUENCE_START_BONUS,
    START_OF_TERM_BONUS,
)


def resolve_locale(locale: QLocale | str | None) -> QLocale:
    """Turn a locale argument into a QLocale.

    None means the process default (the system locale unless
    QLocale.setDefault() was called), a string is a locale name like "tr_TR".
    """
    if locale is None:
        return QLocale()
    if isinstance(locale, QLocale):
        return locale
    return QLocale(locale)


def fuzzy_score(term: str, query: str, locale: QLocale | str | None = None) -> int:
    """
    Score how well query fuzzy-matches term.

    Higher is better, 0 means no match. Every query character must be found
    in term, in order, or the whole score is 0. Points:
    - 1 for every matched character
    - 4 when the match is the first character of term
    - 2 when the match follows a non-letter (word start after a divider)
    - a run bonus for contiguous matches, 4 for the second character of a
      run and doubling for each one after that

    Both strings are lower-cased with the given locale before comparing.
    """
    if term is None or query is None:
        raise ValueError("Strings must not be None")

    qlocale = resolve_locale(locale)
    term_lower = qlocale.toLower(term)
    query_lower = qlocale.toLower(query)

    score = 0
    # Next position in term to scan for the current query character
    term_index = 0
    previous_match_index: int | None = None
    sequence_score = 0

    for query_char in query_lower:
        match_index = term_lower.find(query_char, term_index)
        if match_index == -1:
            return 0

        score += MATCH_SCORE
        if match_index == 0:
            score += START_OF_TERM_BONUS
        elif not term_lower[match_index - 1].isalpha():
            # Previous character was a divider
            score += SEPARATOR_BONUS

        if previous_match_index is not None and previous_match_index + 1 == match_index:
            if sequence_score == 0:
                sequence_score = SEQUENCE_START_BONUS
            else:
                sequence_score *= 2
            score += sequence_score
        else:
            sequence_score = 0

        previous_match_index = match_index
        # Each term character can satisfy at most one query character
        term_index = match_index + 1

    return score


def rank_candidates(
    query: str,
    candidates: Iterable[str],
    locale: QLocale | str | None = None,
    limit: int | None = None,
) -> list[tuple[int, str]]:
    """
    Score candidates against query and return the matches, best first.

    Candidates scoring 0 are dropped. Equal scores keep their input order.
    A negative limit raises ValueError.
    """
    if query is None:
        raise ValueError("Strings must not be None")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be 0 or more, got {limit}")

    qlocale = resolve_locale(locale)

    scored: list[tuple[int, str]] = []
    for candidate in candidates:
        score = fuzzy_score(candidate, query, qlocale)
        if score > 0:
            scored.append((score, candidate))

    # sort() is stable, so ties stay in input order
    scored.sort(key=lambda x: x[0], reverse=True)

    if limit is not None:
        return scored[:limit]
    return scored
