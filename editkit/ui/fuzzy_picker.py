"""
Fuzzy picker - filter a list of strings as you type
"""

from PySide6.QtCore import QEvent, QLocale, QObject, Qt, Signal
from PySide6.QtGui import QKeyEvent, QShowEvent
from PySide6.QtWidgets import (
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from editkit.constants import DEFAULT_MAX_RESULTS
from editkit.text.fuzzy import rank_candidates, resolve_locale


class FuzzyPickerWidget(QWidget):
    """
    Search box over a ranked list of candidates.

    Candidates are re-ranked with fuzzy_score on every keystroke, best
    match first. An empty query lists everything in its original order.
    """

    item_selected = Signal(str)  # Emitted when an item is chosen
    cancelled = Signal()  # Emitted when cancelled (Escape)

    def __init__(
        self,
        items: list[str] | None = None,
        locale: QLocale | str | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.locale = resolve_locale(locale)
        self.max_results = max_results
        self._all_items: list[str] = []

        self._setup_ui()
        self.set_items(items or [])

    def _setup_ui(self) -> None:
        """Setup the UI"""
        line_height = self.fontMetrics().height()
        item_height = int(line_height * 1.8)
        margin = max(8, line_height // 2)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(margin, margin, margin, margin)
        layout.setSpacing(4)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Type to filter...")
        self.search_input.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.search_input)

        # Height based on showing ~12 items
        self.results_list = QListWidget()
        self.results_list.setMaximumHeight(item_height * 12)
        self.results_list.itemActivated.connect(self._on_item_activated)
        layout.addWidget(self.results_list)

        # Keyboard navigation while typing
        self.search_input.installEventFilter(self)

    def set_items(self, items: list[str]) -> None:
        """Replace the candidate list and refresh the results"""
        self._all_items = list(items)
        self._update_results(self.search_input.text())

    def visible_items(self) -> list[str]:
        """Texts currently listed, top to bottom"""
        return [self.results_list.item(row).text() for row in range(self.results_list.count())]

    def current_item(self) -> str | None:
        current = self.results_list.currentItem()
        return current.text() if current else None

    def _on_text_changed(self, text: str) -> None:
        self._update_results(text)

    def _update_results(self, query: str) -> None:
        """Update the results list based on query"""
        self.results_list.clear()

        if query:
            ranked = rank_candidates(query, self._all_items, self.locale, self.max_results)
            shown = [candidate for _score, candidate in ranked]
        else:
            shown = self._all_items[: self.max_results]

        for candidate in shown:
            self.results_list.addItem(QListWidgetItem(candidate))

        # Select first item
        if self.results_list.count() > 0:
            self.results_list.setCurrentRow(0)

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        """Handle item selection"""
        self.item_selected.emit(item.text())
        self.hide()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        """Handle keyboard events for navigation"""
        if (
            obj == self.search_input
            and isinstance(event, QKeyEvent)
            and event.type() == QEvent.Type.KeyPress
        ):
            key = event.key()

            if key == Qt.Key.Key_Escape:
                self.cancelled.emit()
                self.hide()
                return True

            elif key == Qt.Key.Key_Return or key == Qt.Key.Key_Enter:
                current = self.results_list.currentItem()
                if current:
                    self._on_item_activated(current)
                return True

            elif key == Qt.Key.Key_Down:
                current_row = self.results_list.currentRow()
                if current_row < self.results_list.count() - 1:
                    self.results_list.setCurrentRow(current_row + 1)
                return True

            elif key == Qt.Key.Key_Up:
                current_row = self.results_list.currentRow()
                if current_row > 0:
                    self.results_list.setCurrentRow(current_row - 1)
                return True

        return super().eventFilter(obj, event)

    def showEvent(self, event: QShowEvent) -> None:  # noqa: N802
        """Focus the search input when shown"""
        super().showEvent(event)
        self.search_input.setFocus()
