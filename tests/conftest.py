"""Shared fixtures: Qt runs offscreen so tests work without a display."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by every test that needs one."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
