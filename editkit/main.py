#!/usr/bin/env python3
"""
editkit - text helpers for editor components
"""

import argparse
import io
import os
import sys
from pathlib import Path
from typing import TextIO

from PySide6.QtGui import QTextDocument
from PySide6.QtWidgets import QApplication

from editkit.config.settings import Settings
from editkit.text.document import get_offset_of, is_empty_line
from editkit.text.fuzzy import fuzzy_score, rank_candidates
from editkit.text.metrics import get_text_size


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="editkit",
        description="editkit - text helpers for editor components",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: ~/.config/editkit/settings.json)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Fuzzy score of QUERY against TERM")
    score.add_argument("term")
    score.add_argument("query")
    score.add_argument("--locale", help="Locale for case folding, e.g. tr_TR")

    rank = sub.add_parser("rank", help="Rank candidate lines against QUERY")
    rank.add_argument("query")
    rank.add_argument("file", nargs="?", help="Candidates, one per line (default: stdin)")
    rank.add_argument("--locale", help="Locale for case folding, e.g. tr_TR")
    rank.add_argument("--limit", type=_non_negative_int, help="Maximum number of results")

    size = sub.add_parser("size", help="Print WIDTHxHEIGHT of text in character cells")
    size.add_argument("file", nargs="?", help="Text file (default: stdin)")

    blank = sub.add_parser("blank", help="Check whether a line is blank")
    blank.add_argument("file")
    blank.add_argument("line", type=int, help="0-based line number")

    offset = sub.add_parser("offset", help="Offset of PATTERN within a line, or -1")
    offset.add_argument("file")
    offset.add_argument("line", type=int, help="0-based line number")
    offset.add_argument("pattern")

    pick = sub.add_parser("pick", help="Pick a candidate interactively")
    pick.add_argument("file", nargs="?", help="Candidates, one per line (default: stdin)")

    return parser.parse_args(argv)


def _read_text(file: str | None, stdin: TextIO) -> str:
    """Read text as-is, keeping lone carriage returns"""
    if file is None:
        return stdin.read()
    with open(file, encoding="utf-8", newline="") as f:
        return f.read()


def _read_candidates(file: str | None, stdin: TextIO) -> list[str]:
    return [line for line in _read_text(file, stdin).splitlines() if line]


def _ensure_app(headless: bool = True) -> QApplication:
    """Get the running QApplication, creating one if needed"""
    existing = QApplication.instance()
    if isinstance(existing, QApplication):
        return existing
    if headless:
        # Documents need a GUI application but nothing is shown
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QApplication(sys.argv[:1])


def _load_document(file: str) -> QTextDocument:
    _ensure_app()
    return QTextDocument(Path(file).read_text(encoding="utf-8"))


def _run_pick(candidates: list[str], settings: Settings) -> str | None:
    """Show the picker and block until something is chosen or it is cancelled"""
    from editkit.ui.fuzzy_picker import FuzzyPickerWidget

    app = _ensure_app(headless=False)
    app.setApplicationName("editkit")

    picker = FuzzyPickerWidget(
        candidates,
        locale=settings.get_locale(),
        max_results=settings.get_max_results(),
    )
    picker.setWindowTitle("editkit")
    chosen: list[str] = []

    def on_selected(item: str) -> None:
        chosen.append(item)
        app.quit()

    picker.item_selected.connect(on_selected)
    picker.cancelled.connect(app.quit)
    picker.show()
    app.exec()

    return chosen[0] if chosen else None


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """Execute a parsed command, returning the exit code"""
    settings = Settings(args.config)

    if args.command == "score":
        locale = args.locale or settings.get_locale()
        print(fuzzy_score(args.term, args.query, locale), file=stdout)

    elif args.command == "rank":
        locale = args.locale or settings.get_locale()
        limit = args.limit if args.limit is not None else settings.get_max_results()
        candidates = _read_candidates(args.file, stdin)
        for score, candidate in rank_candidates(args.query, candidates, locale, limit):
            print(f"{score}\t{candidate}", file=stdout)

    elif args.command == "size":
        text_size = get_text_size(_read_text(args.file, stdin), settings.get_tab_width())
        print(f"{text_size.width()}x{text_size.height()}", file=stdout)

    elif args.command == "blank":
        document = _load_document(args.file)
        print("true" if is_empty_line(document, args.line) else "false", file=stdout)

    elif args.command == "offset":
        document = _load_document(args.file)
        print(get_offset_of(document, args.line, args.pattern), file=stdout)

    elif args.command == "pick":
        chosen = _run_pick(_read_candidates(args.file, stdin), settings)
        if chosen is None:
            return 1
        print(chosen, file=stdout)

    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if isinstance(sys.stdin, io.TextIOWrapper):
        # Decode like files: utf-8, no newline translation
        sys.stdin.reconfigure(encoding="utf-8", newline="")
    try:
        return run(args, sys.stdin, sys.stdout)
    except (IndexError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
